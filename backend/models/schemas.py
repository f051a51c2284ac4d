from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any, Literal

class ErdRequest(BaseModel):
    database: Optional[str] = None
    collections: Optional[List[str]] = None
    format: Literal["mermaid", "json"] = "mermaid"

class SchemasRequest(BaseModel):
    database: Optional[str] = None
    collections: Optional[List[str]] = None

class ErdStats(BaseModel):
    collections: int
    relationships: int

class ErdResponse(BaseModel):
    success: bool
    format: str
    diagram: Optional[str] = None
    schemas: Optional[Dict[str, Any]] = None
    relationships: Optional[List[Dict[str, Any]]] = None
    erd: Optional[Dict[str, Any]] = None
    stats: ErdStats

class SchemaResponse(BaseModel):
    success: bool
    collection: str
    collection_schema: Dict[str, Any] = Field(alias="schema")
    stats: Dict[str, int]

class SchemasResponse(BaseModel):
    success: bool
    schemas: Dict[str, Any]
    stats: Dict[str, int]
