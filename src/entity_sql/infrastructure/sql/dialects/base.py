"""
Base SQL dialect and per-dialect data type registry.

A dialect owns every piece of syntax that varies between databases:
identifier and value quoting, null phrasing, DDL phrases and the mapping from
value kinds to SQL type names. Builders never format values themselves.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterable, List, Mapping, Optional, Sequence

from entity_sql.config import get_settings
from entity_sql.exceptions import UnsupportedTypeError, ValueRenderError
from entity_sql.infrastructure.schema.core import TypedValue, ValueKind

from ..core.identifier import join_sql, quote_identifier, quote_literal


@dataclass(frozen=True)
class DataTypeEntry:
    """Rendering rule for one value kind.

    ``name_pattern`` may contain a ``{length}`` placeholder, e.g. ``varchar({length})``.
    """

    kind: ValueKind
    name_pattern: str
    quote_required: bool

    @property
    def is_parametric(self) -> bool:
        return "{length}" in self.name_pattern

    def full_name(self, length: Optional[int] = None) -> str:
        if self.is_parametric:
            return self.name_pattern.format(length=length)
        return self.name_pattern


class DataTypeRegistry:
    """Read-only mapping from value kind to data type entry."""

    def __init__(self, entries: Iterable[DataTypeEntry]):
        self._entries: Mapping[ValueKind, DataTypeEntry] = MappingProxyType(
            {entry.kind: entry for entry in entries}
        )

    def get(self, kind: ValueKind) -> Optional[DataTypeEntry]:
        return self._entries.get(kind)

    def __contains__(self, kind: object) -> bool:
        return kind in self._entries

    def kinds(self) -> List[ValueKind]:
        return list(self._entries)


class Dialect(ABC):
    """Base class for SQL dialects.

    Subclasses provide their data type entries and override phrases where
    their database differs from the ANSI-flavoured defaults below.
    """

    name: str = ""
    identifier_quote: str = '"'
    value_quote: str = "'"

    def __init__(self) -> None:
        self.data_types = DataTypeRegistry(self.data_type_entries())

    @abstractmethod
    def data_type_entries(self) -> Sequence[DataTypeEntry]:
        """Data type entries registered for this dialect."""
        raise NotImplementedError

    # -------------------------------------------------------------------------
    # Identifiers
    # -------------------------------------------------------------------------

    def quote_identifier(self, name: str) -> str:
        return quote_identifier(name, self.identifier_quote)

    def quote_identifiers(self, names: Iterable[str]) -> str:
        return join_sql(self.quote_identifier(n) for n in names)

    # -------------------------------------------------------------------------
    # Values
    # -------------------------------------------------------------------------

    def data_type(self, kind: ValueKind) -> DataTypeEntry:
        """Look up the data type entry of a kind.

        Raises:
            UnsupportedTypeError: If the kind is not registered
        """
        entry = self.data_types.get(kind)
        if entry is None:
            raise UnsupportedTypeError(kind, self.name)
        return entry

    def quote_value(self, value: TypedValue) -> str:
        """Render a typed value as a SQL literal.

        NULL renders as the null phrase whatever the column's declared kind;
        quote-required kinds are wrapped in the value delimiter.
        """
        if value.is_null:
            return self.null_phrase(True)
        entry = self.data_type(value.kind)
        if entry.quote_required:
            return self.quote_text(value.raw)
        return self.render_unquoted(value)

    def quote_text(self, raw: object) -> str:
        """Wrap text in the value delimiter, doubling embedded delimiters."""
        return quote_literal(raw, self.value_quote)

    def quote_values(self, values: Iterable[TypedValue]) -> str:
        return join_sql(self.quote_value(v) for v in values)

    def render_unquoted(self, value: TypedValue) -> str:
        """Literal text of a kind that needs no delimiter.

        The raw value must convert to its kind without loss. Text, fractional
        numbers for integer kinds and non-finite floats raise
        ``ValueRenderError`` instead of reaching the statement.
        """
        raw = value.raw
        if value.kind is ValueKind.BOOLEAN:
            if not isinstance(raw, bool) and raw not in (0, 1):
                raise ValueRenderError(value.kind, raw, "expected a boolean")
            return "TRUE" if raw else "FALSE"
        if isinstance(raw, bool):
            raise ValueRenderError(value.kind, raw, "booleans are not numbers")
        if value.kind is ValueKind.FLOAT:
            number = self._convert(value, float)
            if not math.isfinite(number):
                raise ValueRenderError(value.kind, raw, "no SQL literal for non-finite floats")
            return repr(number)
        number = self._convert(value, int)
        if number != raw:
            raise ValueRenderError(value.kind, raw, "value is not a whole number")
        return str(number)

    @staticmethod
    def _convert(value: TypedValue, to: type) -> Any:
        try:
            return to(value.raw)
        except (TypeError, ValueError, OverflowError) as exc:
            raise ValueRenderError(value.kind, value.raw, str(exc)) from exc

    def data_type_full_name(self, kind: ValueKind, length: Optional[int] = None) -> str:
        """SQL type name of a kind, with ``length`` substituted when parametric.

        Parametric types without an explicit length use the configured
        default text length.
        """
        entry = self.data_type(kind)
        if entry.is_parametric and length is None:
            length = get_settings().default_text_length
        return entry.full_name(length)

    # -------------------------------------------------------------------------
    # Phrases
    # -------------------------------------------------------------------------

    def null_phrase(self, is_null: bool) -> str:
        return "NULL" if is_null else "NOT NULL"

    def create_table_phrase(self) -> str:
        return "CREATE TABLE"

    def drop_table_phrase(self) -> str:
        return "DROP TABLE IF EXISTS"

    def primary_key_phrase(self, column_names: Sequence[str]) -> str:
        return f"PRIMARY KEY ({self.quote_identifiers(column_names)})"

    def auto_increment_phrase(self) -> str:
        return "AUTO_INCREMENT"

    def requires_explicit_not_null_on_identity(self) -> bool:
        return True

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
