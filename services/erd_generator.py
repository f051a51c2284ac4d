"""
ERD generation and schema extraction for MongoDB databases.

Every public method returns a result dict and never raises: failures come
back as ``{"success": False, "error": ...}``.
"""

from typing import Dict, Any, Iterable, Optional

from config.settings import settings
from schema.erd import FORMAT_JSON, FORMAT_MERMAID, OUTPUT_FORMATS, build_erd_graph, render
from schema.schema_discovery import DocumentSource, SchemaDiscoverer
from utils.logger import get_logger

logger = get_logger(__name__)

class ErdGenerator:
    """Service turning sampled collections into diagrams and schemas."""
    
    def __init__(self, source: DocumentSource,
                 erd_sample_limit: int = None,
                 schema_sample_limit: int = None,
                 max_depth: int = None,
                 max_workers: int = None):
        self.source = source
        self.erd_sample_limit = erd_sample_limit if erd_sample_limit is not None else settings.ERD_SAMPLE_LIMIT
        self.schema_sample_limit = schema_sample_limit if schema_sample_limit is not None else settings.SCHEMA_SAMPLE_LIMIT
        self.discoverer = SchemaDiscoverer(
            source,
            max_depth=max_depth if max_depth is not None else settings.MAX_DOCUMENT_DEPTH,
            max_workers=max_workers if max_workers is not None else settings.SAMPLE_WORKERS
        )
    
    def generate_erd(self, collections: Optional[Iterable[str]] = None,
                     output_format: str = FORMAT_MERMAID) -> Dict[str, Any]:
        """
        Generate an entity-relationship diagram.
        
        Args:
            collections: Collections to include; all collections when empty
            output_format: "mermaid" for diagram text, "json" for structured data
            
        Returns:
            Dict with the diagram or schemas, relationships and stats
        """
        try:
            if output_format not in OUTPUT_FORMATS:
                raise ValueError(f"Unsupported format '{output_format}'")
            
            schemas, relationships = self.discoverer.discover(collections, limit=self.erd_sample_limit)
            graph = build_erd_graph(schemas, relationships)
            stats = {
                "collections": len(schemas),
                "relationships": len(relationships)
            }
            
            if output_format == FORMAT_MERMAID:
                return {
                    "success": True,
                    "format": FORMAT_MERMAID,
                    "diagram": render(graph, FORMAT_MERMAID),
                    "stats": stats
                }
            
            structured = render(graph, FORMAT_JSON)
            return {
                "success": True,
                "format": FORMAT_JSON,
                "schemas": {name: schema.to_dict() for name, schema in schemas.items()},
                "relationships": [rel.to_dict() for rel in relationships],
                "erd": {"nodes": structured["nodes"], "links": structured["links"]},
                "stats": structured["stats"]
            }
            
        except Exception as e:
            logger.error(f"Error generating ERD: {e}")
            return {
                "success": False,
                "error": f"Failed to generate ERD: {e}"
            }
    
    def extract_schema(self, collection_name: str) -> Dict[str, Any]:
        """Extract the schema of one collection from a larger sample."""
        try:
            schema = self.discoverer.analyze_collection(collection_name, self.schema_sample_limit)
            return {
                "success": True,
                "collection": collection_name,
                "schema": schema.to_dict(),
                "stats": {"fields": len(schema.fields)}
            }
        except Exception as e:
            logger.error(f"Error extracting schema of {collection_name}: {e}")
            return {
                "success": False,
                "error": f"Failed to extract schema: {e}"
            }
    
    def extract_schemas(self, collections: Optional[Iterable[str]] = None) -> Dict[str, Any]:
        """Extract the schemas of several collections, or of all of them."""
        try:
            names = self.discoverer.resolve_collections(collections)
            schemas = self.discoverer.analyze_collections(names, self.schema_sample_limit)
            return {
                "success": True,
                "schemas": {name: schema.to_dict() for name, schema in schemas.items()},
                "stats": {"collections": len(schemas)}
            }
        except Exception as e:
            logger.error(f"Error extracting schemas: {e}")
            return {
                "success": False,
                "error": f"Failed to extract schema: {e}"
            }
