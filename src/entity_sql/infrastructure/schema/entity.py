"""Declarative markers for persistent entities.

Entities are dataclasses decorated with :func:`entity`. Every field is a
persistent column unless declared with :func:`transient`; :func:`column`
attaches overrides and primary-key markers through dataclass field metadata.

Example:
    >>> @entity(name="users")
    ... class Person:
    ...     id: Optional[int] = column(primary_key=True, generated=True, kind=ValueKind.LONG)
    ...     name: Optional[str] = column(name="nick_name", length=20)
    ...     age: Optional[int] = column(name="old")
    ...     email: Optional[str] = column(nullable=False)
    ...     index: Optional[int] = transient()
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Optional, TypeVar

from .core import ValueKind

METADATA_KEY = "entity_sql"
TABLE_NAME_ATTR = "__entity_table__"

T = TypeVar("T", bound=type)


@dataclass(frozen=True)
class ColumnMarker:
    """Column markers attached to a dataclass field."""

    name: Optional[str] = None
    primary_key: bool = False
    generated: bool = False
    nullable: bool = True
    length: Optional[int] = None
    kind: Optional[ValueKind] = None
    insertable: bool = True
    transient: bool = False


def column(
    name: Optional[str] = None,
    *,
    primary_key: bool = False,
    generated: bool = False,
    nullable: bool = True,
    length: Optional[int] = None,
    kind: Optional[ValueKind] = None,
    insertable: bool = True,
    default: Any = None,
) -> Any:
    """Declare a persistent field.

    Args:
        name: Column name override (defaults to the field name)
        primary_key: Whether the column is part of the primary key
        generated: Whether the database generates the value (identity column)
        nullable: Whether the column accepts NULL
        length: Length substituted into parametric type names
        kind: Explicit value kind (defaults to inference from the annotation)
        insertable: False for columns the database fills on insert
        default: Field default value

    Returns:
        A dataclass field carrying the markers
    """
    marker = ColumnMarker(
        name=name,
        primary_key=primary_key,
        generated=generated,
        nullable=nullable,
        length=length,
        kind=kind,
        insertable=insertable,
    )
    return dataclasses.field(default=default, metadata={METADATA_KEY: marker})


def transient(default: Any = None) -> Any:
    """Declare a field that is never persisted."""
    return dataclasses.field(
        default=default, metadata={METADATA_KEY: ColumnMarker(transient=True)}
    )


def marker_for(field: dataclasses.Field) -> ColumnMarker:
    """Return the markers of a dataclass field, or the defaults."""
    return field.metadata.get(METADATA_KEY, ColumnMarker())


def entity(
    cls: Optional[T] = None, *, name: Optional[str] = None
) -> Any:
    """Class decorator registering a persistent entity.

    Usable bare (``@entity``) or with a table name override
    (``@entity(name="users")``). Classes that are not dataclasses yet are
    turned into one.
    """

    def wrap(target: T) -> T:
        if not dataclasses.is_dataclass(target):
            target = dataclass(target)
        setattr(target, TABLE_NAME_ATTR, name or target.__name__)

        # Imported here: the registry imports this module's markers
        from .registry import register_entity

        register_entity(target)
        return target

    if cls is None:
        return wrap
    return wrap(cls)


def is_entity(cls: Any) -> bool:
    return isinstance(cls, type) and TABLE_NAME_ATTR in vars(cls)


__all__ = [
    "ColumnMarker",
    "column",
    "transient",
    "entity",
    "is_entity",
    "marker_for",
]
