"""
Value objects produced by schema inference.

Every object here is created by a single inference call and never shared
between calls.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Any, Optional

PRIMARY_KEY = "_id"
ARRAY_ITEM_SUFFIX = "[]"

class TypeTag(str, Enum):
    """Structural type of a field value."""
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    OBJECT_ID = "objectId"
    NULL = "null"
    ARRAY = "array"
    OBJECT = "object"

class RelationType(str, Enum):
    """Cardinality of an inferred reference."""
    ONE_TO_ONE = "1:1"
    ONE_TO_MANY = "1:N"
    MANY_TO_ONE = "N:1"
    MANY_TO_MANY = "N:M"

@dataclass(frozen=True)
class FieldDescriptor:
    """One structural position inside a collection's documents."""
    path: str
    type: TypeTag
    required: bool = False
    item_type: Optional[TypeTag] = None

    @property
    def leaf_name(self) -> str:
        """Last segment of the dotted path, without any array marker."""
        return self.path.rsplit(".", 1)[-1].replace(ARRAY_ITEM_SUFFIX, "")

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "name": self.path,
            "type": self.type.value,
            "required": self.required
        }
        if self.item_type is not None:
            data["items"] = {"type": self.item_type.value}
        return data

@dataclass(frozen=True)
class Schema:
    """Merged fields of one collection, in first-observed order."""
    fields: List[FieldDescriptor] = field(default_factory=list)

    def get(self, path: str) -> Optional[FieldDescriptor]:
        for descriptor in self.fields:
            if descriptor.path == path:
                return descriptor
        return None

    @property
    def paths(self) -> List[str]:
        return [descriptor.path for descriptor in self.fields]

    def to_dict(self) -> Dict[str, Any]:
        return {"fields": [descriptor.to_dict() for descriptor in self.fields]}

@dataclass(frozen=True)
class Relationship:
    """Directed reference guessed from field naming conventions."""
    source_collection: str
    source_field: str
    target_collection: str
    relation_type: RelationType
    target_field: str = PRIMARY_KEY

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sourceCollection": self.source_collection,
            "targetCollection": self.target_collection,
            "sourceField": self.source_field,
            "targetField": self.target_field,
            "relationType": self.relation_type.value
        }

@dataclass(frozen=True)
class ERDNode:
    id: str
    name: str
    fields: List[Dict[str, Any]]

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "fields": [dict(f) for f in self.fields]}

@dataclass(frozen=True)
class ERDLink:
    source: str
    target: str
    source_field: str
    target_field: str
    type: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "target": self.target,
            "sourceField": self.source_field,
            "targetField": self.target_field,
            "type": self.type
        }

@dataclass(frozen=True)
class ERDGraph:
    """Renderer-facing node/link form of schemas and relationships."""
    nodes: List[ERDNode]
    links: List[ERDLink]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "links": [link.to_dict() for link in self.links]
        }
