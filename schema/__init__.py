"""
Schema inference, relationship detection and ERD rendering for document
collections.
"""

from schema.types import (
    ERDGraph, ERDLink, ERDNode, FieldDescriptor, Relationship, RelationType, Schema, TypeTag
)
from schema.type_classifier import classify_value
from schema.document_analyzer import analyze_document
from schema.schema_merger import merge_field_maps
from schema.pluralizer import pluralize, singularize
from schema.relationship_detector import detect_relationships
from schema.erd import build_erd_graph, render, render_mermaid, render_structured
from schema.schema_discovery import DocumentSource, SchemaDiscoverer, SchemaDiscoveryError

__all__ = [
    "ERDGraph", "ERDLink", "ERDNode", "FieldDescriptor", "Relationship", "RelationType",
    "Schema", "TypeTag", "classify_value", "analyze_document", "merge_field_maps",
    "pluralize", "singularize", "detect_relationships", "build_erd_graph", "render",
    "render_mermaid", "render_structured", "DocumentSource", "SchemaDiscoverer",
    "SchemaDiscoveryError",
]
