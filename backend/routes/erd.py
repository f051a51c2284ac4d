from fastapi import APIRouter, Depends, HTTPException

from backend.database import get_source_factory
from backend.models.schemas import (
    ErdRequest, ErdResponse, SchemaResponse, SchemasRequest, SchemasResponse
)
from services.erd_generator import ErdGenerator

router = APIRouter()

def _raise_on_failure(result):
    if not result.get("success"):
        raise HTTPException(status_code=500, detail=result.get("error", "Unknown error"))
    return result

@router.post("/erd", response_model=ErdResponse, response_model_exclude_none=True)
def generate_erd(request: ErdRequest, source_factory=Depends(get_source_factory)):
    generator = ErdGenerator(source_factory(request.database))
    result = generator.generate_erd(request.collections, output_format=request.format)
    return _raise_on_failure(result)

@router.get("/schema/{collection}", response_model=SchemaResponse)
def extract_schema(collection: str, database: str = None, source_factory=Depends(get_source_factory)):
    generator = ErdGenerator(source_factory(database))
    return _raise_on_failure(generator.extract_schema(collection))

@router.post("/schemas", response_model=SchemasResponse)
def extract_schemas(request: SchemasRequest, source_factory=Depends(get_source_factory)):
    generator = ErdGenerator(source_factory(request.database))
    return _raise_on_failure(generator.extract_schemas(request.collections))
