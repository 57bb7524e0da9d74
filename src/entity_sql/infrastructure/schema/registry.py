"""Entity registry and schema derivation.

Entity metadata (table name, persistent fields and their markers) is resolved
once when a class is registered through ``@entity`` and reused by every
``describe_*`` call; descriptors themselves are derived fresh each time.
"""

from __future__ import annotations

import dataclasses
import types
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union, get_args, get_origin, get_type_hints

from entity_sql.exceptions import SchemaDerivationError
from entity_sql.utils.logging import get_logger

from .core import NULL, EntityColumn, EntityTable, TypedValue, ValueKind
from .entity import TABLE_NAME_ATTR, is_entity, marker_for

logger = get_logger(__name__)

_ANNOTATION_KINDS: Dict[Any, ValueKind] = {
    bool: ValueKind.BOOLEAN,
    int: ValueKind.INTEGER,
    str: ValueKind.TEXT,
    float: ValueKind.FLOAT,
}


@dataclass(frozen=True)
class FieldMeta:
    """Resolved markers for one persistent field."""

    field_name: str
    column_name: str
    kind: ValueKind
    primary_key: bool
    generated: bool
    nullable: bool
    insertable: bool
    length: Optional[int]


@dataclass(frozen=True)
class EntityMeta:
    """Resolved metadata for one entity class."""

    entity_name: str
    table_name: str
    fields: Tuple[FieldMeta, ...]

    @property
    def primary_key_fields(self) -> List[FieldMeta]:
        return [f for f in self.fields if f.primary_key]


_ENTITY_REGISTRY: Dict[type, EntityMeta] = {}


def _infer_kind(annotation: Any) -> Optional[ValueKind]:
    """Map a field annotation to a value kind, unwrapping Optional."""
    origin = get_origin(annotation)
    if origin is Union or origin is getattr(types, "UnionType", None):
        args = [a for a in get_args(annotation) if a is not type(None)]
        if len(args) != 1:
            return None
        annotation = args[0]
    return _ANNOTATION_KINDS.get(annotation)


def _resolve(cls: type) -> EntityMeta:
    entity_name = cls.__name__
    try:
        hints = get_type_hints(cls)
    except NameError as exc:
        raise SchemaDerivationError(
            f"Cannot resolve field annotations of entity '{entity_name}': {exc}",
            entity=entity_name,
        ) from exc

    fields: List[FieldMeta] = []
    seen: Dict[str, str] = {}
    for field in dataclasses.fields(cls):
        marker = marker_for(field)
        if marker.transient:
            continue

        kind = marker.kind or _infer_kind(hints.get(field.name))
        if kind is None or kind is ValueKind.NULL:
            raise SchemaDerivationError(
                f"Field '{entity_name}.{field.name}' has no mappable value kind; "
                "declare one with column(kind=...)",
                entity=entity_name,
            )

        column_name = marker.name or field.name
        if column_name in seen:
            raise SchemaDerivationError(
                f"Column '{column_name}' of entity '{entity_name}' is declared by "
                f"both '{seen[column_name]}' and '{field.name}'",
                entity=entity_name,
            )
        seen[column_name] = field.name

        fields.append(
            FieldMeta(
                field_name=field.name,
                column_name=column_name,
                kind=kind,
                primary_key=marker.primary_key,
                generated=marker.generated,
                nullable=marker.nullable and not marker.primary_key,
                insertable=marker.insertable,
                length=marker.length,
            )
        )

    if not fields:
        raise SchemaDerivationError(
            f"Entity '{entity_name}' declares no persistent columns",
            entity=entity_name,
        )

    return EntityMeta(
        entity_name=entity_name,
        table_name=getattr(cls, TABLE_NAME_ATTR),
        fields=tuple(fields),
    )


def register_entity(cls: type) -> EntityMeta:
    """Resolve and register an entity class."""
    meta = _resolve(cls)
    _ENTITY_REGISTRY[cls] = meta
    logger.debug(
        "schema.entity_registered",
        entity=meta.entity_name,
        table=meta.table_name,
        columns=[f.column_name for f in meta.fields],
    )
    return meta


def get_entity_meta(cls: type) -> EntityMeta:
    """Retrieve the resolved metadata of an entity class."""
    if not is_entity(cls) or cls not in _ENTITY_REGISTRY:
        name = getattr(cls, "__name__", repr(cls))
        raise SchemaDerivationError(
            f"'{name}' is not a registered entity; decorate it with @entity",
            entity=name,
        )
    return _ENTITY_REGISTRY[cls]


def list_entities() -> List[str]:
    """List all registered table names."""
    return sorted({meta.table_name for meta in _ENTITY_REGISTRY.values()})


def describe_empty(entity_cls: type) -> EntityTable:
    """Describe the table of an entity class without values."""
    meta = get_entity_meta(entity_cls)
    columns = tuple(
        EntityColumn(
            name=f.column_name,
            kind=f.kind,
            value=NULL,
            is_primary_key=f.primary_key,
            is_insertable=f.insertable and not (f.primary_key and f.generated),
            is_nullable=f.nullable,
            is_generated=f.generated,
            length=f.length,
            field_name=f.field_name,
        )
        for f in meta.fields
    )
    return EntityTable(name=meta.table_name, columns=columns)


def describe_populated(obj: Any) -> EntityTable:
    """Describe the table of an entity instance with its live values."""
    if isinstance(obj, type):
        raise SchemaDerivationError(
            f"describe_populated expects an entity instance, got class '{obj.__name__}'",
            entity=obj.__name__,
        )
    meta = get_entity_meta(type(obj))
    columns = []
    for f in meta.fields:
        raw = getattr(obj, f.field_name, None)
        columns.append(
            EntityColumn(
                name=f.column_name,
                kind=f.kind,
                value=TypedValue.of(f.kind, raw),
                is_primary_key=f.primary_key,
                is_insertable=f.insertable
                and not (f.primary_key and f.generated and raw is None),
                is_nullable=f.nullable,
                is_generated=f.generated,
                length=f.length,
                field_name=f.field_name,
            )
        )
    return EntityTable(name=meta.table_name, columns=tuple(columns))


__all__ = [
    "FieldMeta",
    "EntityMeta",
    "register_entity",
    "get_entity_meta",
    "list_entities",
    "describe_empty",
    "describe_populated",
]
