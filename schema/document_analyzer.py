"""
Single-document structural analysis.
"""

from collections.abc import Mapping
from typing import Dict, Any

from schema.types import ARRAY_ITEM_SUFFIX, PRIMARY_KEY, FieldDescriptor, TypeTag
from schema.type_classifier import classify_value
from utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_MAX_DEPTH = 32

FieldMap = Dict[str, FieldDescriptor]

def analyze_document(document: Mapping, prefix: str = "",
                     max_depth: int = DEFAULT_MAX_DEPTH) -> FieldMap:
    """
    Walk one document and map every dotted path in it to a field descriptor.

    Nested objects contribute ``parent.child`` paths; for arrays only the
    first element is inspected and, when it is an object, its keys are
    reported under ``parent[]``. Any ``_id`` key, at any depth, is recorded as a
    required object id whatever its value looks like.

    Args:
        document: The document to analyze
        prefix: Path of the document inside its parent, empty at the top level
        max_depth: Nesting level past which objects are not descended into

    Returns:
        Dict of path -> FieldDescriptor, in document key order
    """
    fields: FieldMap = {}
    _walk(document, prefix, fields, depth=0, max_depth=max_depth)
    return fields

def _walk(document: Mapping, prefix: str, fields: FieldMap, depth: int, max_depth: int) -> None:
    for key, value in document.items():
        path = f"{prefix}.{key}" if prefix else str(key)

        if key == PRIMARY_KEY:
            fields[path] = FieldDescriptor(path=path, type=TypeTag.OBJECT_ID, required=True)
            continue

        type_tag = classify_value(value)

        if type_tag is TypeTag.ARRAY:
            item_type = classify_value(value[0]) if len(value) > 0 else None
            fields[path] = FieldDescriptor(path=path, type=type_tag, item_type=item_type)
            if item_type is TypeTag.OBJECT:
                _descend(value[0], path + ARRAY_ITEM_SUFFIX, fields, depth, max_depth)
        elif type_tag is TypeTag.OBJECT:
            fields[path] = FieldDescriptor(path=path, type=type_tag)
            _descend(value, path, fields, depth, max_depth)
        else:
            fields[path] = FieldDescriptor(path=path, type=type_tag)

def _descend(value: Mapping, path: str, fields: FieldMap, depth: int, max_depth: int) -> None:
    if depth + 1 > max_depth:
        logger.debug(f"Not descending into {path}: depth limit {max_depth} reached")
        return
    _walk(value, path, fields, depth + 1, max_depth)
