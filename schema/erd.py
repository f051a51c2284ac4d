"""
ERD assembly and rendering.

Schemas and relationships are turned into a node/link graph, which is then
serialized either as plain data or as Mermaid ``erDiagram`` text. Output
depends only on the order of the inputs.
"""

from typing import Dict, List, Any

from schema.types import ERDGraph, ERDLink, ERDNode, Relationship, Schema

FORMAT_MERMAID = "mermaid"
FORMAT_JSON = "json"
OUTPUT_FORMATS = (FORMAT_MERMAID, FORMAT_JSON)

ERD_TYPE_MAP = {
    "string": "string",
    "objectId": "string",
    "number": "number",
    "int": "int",
    "double": "float",
    "boolean": "boolean",
    "date": "datetime",
    "array": "array",
    "object": "object",
    "null": "any",
}
DEFAULT_ERD_TYPE = "string"

RELATION_SYMBOLS = {
    "1:1": "||--||",
    "1:N": "||--o{",
    "N:1": "}o--||",
    "N:M": "}o--o{",
}
DEFAULT_RELATION_SYMBOL = "||--o{"

def build_erd_graph(schemas: Dict[str, Schema], relationships: List[Relationship]) -> ERDGraph:
    """Convert schemas and relationships into the node/link graph."""
    nodes = [
        ERDNode(
            id=collection_name,
            name=collection_name,
            fields=[
                {"name": f.path, "type": f.type.value, "required": f.required}
                for f in schema.fields
            ]
        )
        for collection_name, schema in schemas.items()
    ]
    links = [
        ERDLink(
            source=rel.source_collection,
            target=rel.target_collection,
            source_field=rel.source_field,
            target_field=rel.target_field,
            type=rel.relation_type.value
        )
        for rel in relationships
    ]
    return ERDGraph(nodes=nodes, links=links)

def map_field_type(type_name: str) -> str:
    return ERD_TYPE_MAP.get(type_name, DEFAULT_ERD_TYPE)

def map_relation_symbol(relation_type: str) -> str:
    return RELATION_SYMBOLS.get(relation_type, DEFAULT_RELATION_SYMBOL)

def render_mermaid(graph: ERDGraph) -> str:
    """Serialize the graph as Mermaid erDiagram text."""
    lines = ["erDiagram"]

    for node in graph.nodes:
        lines.append(f"  {node.name} {{")
        for field in node.fields:
            required_mark = "!" if field.get("required") else ""
            lines.append(f"    {map_field_type(field['type'])}{required_mark} {field['name']}")
        lines.append("  }")

    for link in graph.links:
        symbol = map_relation_symbol(link.type)
        lines.append(f'  {link.source} {symbol} {link.target} : "{link.source_field}"')

    return "\n".join(lines) + "\n"

def render_structured(graph: ERDGraph) -> Dict[str, Any]:
    """Return the graph as plain data together with its summary counts."""
    data = graph.to_dict()
    data["stats"] = {
        "collections": len(graph.nodes),
        "relationships": len(graph.links)
    }
    return data

def render(graph: ERDGraph, output_format: str = FORMAT_MERMAID):
    """Dispatch to the renderer for ``output_format``."""
    if output_format == FORMAT_MERMAID:
        return render_mermaid(graph)
    if output_format == FORMAT_JSON:
        return render_structured(graph)
    raise ValueError(f"Unsupported ERD format: {output_format!r} (expected one of {', '.join(OUTPUT_FORMATS)})")
