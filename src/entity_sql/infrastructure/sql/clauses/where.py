"""
WHERE clause composition.

A where clause is an ordered sequence of groups. Each group maps column
names to raw values and renders as a parenthesized conjunction; groups are
combined by disjunction:

    [{"email": "a@b.com", "nick_name": "Ann"}, {"id": 1}]
    -> ("email" = 'a@b.com' AND "nick_name" = 'Ann') OR ("id" = 1)
"""

from typing import Any, Mapping, Optional, Sequence

from entity_sql.infrastructure.schema.core import EntityTable, TypedValue

from ..dialects.base import Dialect

WhereGroup = Mapping[str, Any]


class WhereClauseComposer:
    """Render where groups against a table with a dialect."""

    def __init__(self, dialect: Dialect):
        self.dialect = dialect

    def validate(self, table: EntityTable, groups: Sequence[WhereGroup]) -> None:
        """Check every referenced column exists before anything is rendered.

        Raises:
            ColumnNotFoundError: On the first unknown column name
        """
        for group in groups:
            for column_name in group:
                table.get_column(column_name)

    def compose(
        self, table: EntityTable, groups: Optional[Sequence[WhereGroup]]
    ) -> str:
        """
        Compose the predicate text, without the WHERE keyword.

        Args:
            table: Table the referenced columns must belong to
            groups: Where groups; empty groups are skipped

        Returns:
            The predicate, or an empty string when there is nothing to filter on
        """
        if not groups:
            return ""
        self.validate(table, groups)

        rendered = []
        for group in groups:
            if not group:
                continue
            predicates = [
                self._predicate(table, column_name, raw)
                for column_name, raw in group.items()
            ]
            rendered.append(f"({' AND '.join(predicates)})")
        return " OR ".join(rendered)

    def _predicate(self, table: EntityTable, column_name: str, raw: Any) -> str:
        column = table.get_column(column_name)
        value = TypedValue.of(column.kind, raw)
        return f"{self.dialect.quote_identifier(column.name)} = {self.dialect.quote_value(value)}"
