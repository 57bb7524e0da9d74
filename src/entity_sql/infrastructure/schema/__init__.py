"""Entity schema model: declarative markers and table/column descriptors."""

from .core import NULL, EntityColumn, EntityTable, TypedValue, ValueKind
from .entity import column, entity, is_entity, transient
from .registry import (
    EntityMeta,
    FieldMeta,
    describe_empty,
    describe_populated,
    get_entity_meta,
    list_entities,
    register_entity,
)

__all__ = [
    "ValueKind",
    "TypedValue",
    "NULL",
    "EntityColumn",
    "EntityTable",
    "column",
    "transient",
    "entity",
    "is_entity",
    "EntityMeta",
    "FieldMeta",
    "register_entity",
    "get_entity_meta",
    "list_entities",
    "describe_empty",
    "describe_populated",
]
