"""
Best-effort reference detection between collections.

References are guessed purely from naming conventions: an object id field
called ``userId`` / ``user_id`` (or an array of object ids called
``userIds`` / ``user_ids``) is taken to point at a ``users`` collection when
one is known. Nothing checks that the referenced documents actually exist, so
both false positives and misses are expected.
"""

from typing import Dict, Iterable, List, Optional, Tuple

from schema.pluralizer import pluralize
from schema.types import PRIMARY_KEY, FieldDescriptor, RelationType, Relationship, Schema, TypeTag
from utils.logger import get_logger

logger = get_logger(__name__)

# Longest first so that "_ids" wins over "Ids" and "_id" over "Id".
REFERENCE_SUFFIXES: Tuple[str, ...] = ("_ids", "Ids", "_id", "Id")

def infer_collection_name(field_name: str) -> Optional[str]:
    """Guess the collection a reference field points at, e.g. userId -> users."""
    if field_name == PRIMARY_KEY:
        return None
    for suffix in REFERENCE_SUFFIXES:
        if field_name.endswith(suffix) and len(field_name) > len(suffix):
            return pluralize(field_name[:-len(suffix)])
    return None

def reference_relation_type(descriptor: FieldDescriptor) -> Optional[RelationType]:
    """Cardinality implied by the shape of an id-holding field, or None."""
    if descriptor.type is TypeTag.OBJECT_ID:
        # The collection holding the reference is the "many" side.
        return RelationType.MANY_TO_ONE
    if descriptor.type is TypeTag.ARRAY and descriptor.item_type is TypeTag.OBJECT_ID:
        return RelationType.MANY_TO_MANY
    return None

def detect_relationships(schemas: Dict[str, Schema],
                         known_collections: Optional[Iterable[str]] = None) -> List[Relationship]:
    """
    Scan every field of every schema for references to known collections.

    Args:
        schemas: Merged schema per collection, in the order they were analyzed
        known_collections: Collections a reference may point at; defaults to
            the analyzed collections

    Returns:
        Relationships in schema order, then field order
    """
    known = set(schemas) if known_collections is None else set(known_collections)
    relationships = []

    for collection_name, schema in schemas.items():
        for descriptor in schema.fields:
            if descriptor.path == PRIMARY_KEY:
                continue

            relation_type = reference_relation_type(descriptor)
            if relation_type is None:
                continue

            target = infer_collection_name(descriptor.leaf_name)
            if target is None or target not in known:
                continue

            relationships.append(Relationship(
                source_collection=collection_name,
                source_field=descriptor.path,
                target_collection=target,
                relation_type=relation_type
            ))

    logger.debug(f"Detected {len(relationships)} relationships across {len(schemas)} collections")
    return relationships
