"""
Folding per-document field maps into one collection schema.
"""

from typing import Dict, Iterable

from schema.types import FieldDescriptor, Schema

def merge_field_maps(field_maps: Iterable[Dict[str, FieldDescriptor]]) -> Schema:
    """
    Merge field maps in sampled order into a single schema.

    The descriptor seen last for a path wins; a path keeps the position where
    it was first seen. Type disagreements between documents are not
    reported, the last document containing the path decides.
    """
    merged: Dict[str, FieldDescriptor] = {}
    for field_map in field_maps:
        merged.update(field_map)
    return Schema(fields=list(merged.values()))
