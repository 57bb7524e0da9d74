"""
Unit tests for the DML QueryBuilder.
"""

import pytest

from entity_sql.exceptions import (
    ColumnInvalidError,
    ColumnNotFoundError,
    SchemaDerivationError,
    UnsupportedTypeError,
    ValueRenderError,
)
from entity_sql.infrastructure.sql.operations import QueryBuilder
from tests.fixtures.entities import (
    AuditEntry,
    Book,
    Counter,
    Enrollment,
    FeatureFlag,
    Person,
)


@pytest.fixture
def builder(h2):
    return QueryBuilder(h2)


@pytest.mark.unit
class TestInsertQuery:
    """Tests for build_insert_query."""

    def test_all_columns_set(self, builder):
        """Every insertable column, in declaration order."""
        person = Person(id=1, name="Ann", age=20, email="a@b.com", index=1)
        assert builder.build_insert_query(person) == (
            'INSERT INTO "users" ("id", "nick_name", "old", "email") '
            "VALUES (1, 'Ann', 20, 'a@b.com');"
        )

    def test_without_generated_id(self, builder):
        """A missing generated key is left out."""
        person = Person(name="Ann", age=20, email="a@b.com", index=1)
        assert builder.build_insert_query(person) == (
            'INSERT INTO "users" ("nick_name", "old", "email") '
            "VALUES ('Ann', 20, 'a@b.com');"
        )

    def test_with_nulls(self, builder):
        """Null values render as NULL, never as ''."""
        sql = builder.build_insert_query(Person(email="a@b.com"))
        assert sql == (
            'INSERT INTO "users" ("nick_name", "old", "email") '
            "VALUES (NULL, NULL, 'a@b.com');"
        )
        assert "''" not in sql

    def test_manual_key_is_always_inserted(self, builder):
        """Non-generated keys stay in the column list even when null."""
        assert builder.build_insert_query(Book(title="Dune")) == (
            "INSERT INTO \"Book\" (\"isbn\", \"title\", \"pages\") VALUES (NULL, 'Dune', NULL);"
        )

    def test_no_insertable_columns(self, builder):
        with pytest.raises(SchemaDerivationError):
            builder.build_insert_query(Counter())

    def test_unsupported_kind(self, builder):
        """Kinds the dialect does not register fail before any SQL is returned."""
        with pytest.raises(UnsupportedTypeError):
            builder.build_insert_query(FeatureFlag(id=1, enabled=True, ratio=0.5))

    def test_rendering_is_deterministic(self, builder):
        """The same instance renders to identical text."""
        person = Person(id=1, name="Ann", age=20, email="a@b.com")
        assert builder.build_insert_query(person) == builder.build_insert_query(person)

    def test_postgresql_kinds(self, postgresql):
        sql = QueryBuilder(postgresql).build_insert_query(
            FeatureFlag(id=1, enabled=True, ratio=0.5)
        )
        assert sql == 'INSERT INTO "flags" ("id", "enabled", "ratio") VALUES (1, TRUE, 0.5);'

    @pytest.mark.parametrize("ratio", [float("nan"), float("inf")])
    def test_non_finite_float(self, postgresql, ratio):
        """No statement is returned for values without a SQL literal."""
        with pytest.raises(ValueRenderError):
            QueryBuilder(postgresql).build_insert_query(
                FeatureFlag(id=1, enabled=True, ratio=ratio)
            )

    def test_mysql_backslash_in_text(self, mysql):
        sql = QueryBuilder(mysql).build_insert_query(
            Book(isbn="x", title="\\' OR 1=1 -- ")
        )
        assert sql == (
            "INSERT INTO `Book` (`isbn`, `title`, `pages`) "
            "VALUES ('x', '\\\\'' OR 1=1 -- ', NULL);"
        )


@pytest.mark.unit
class TestSelectQuery:
    """Tests for build_select_query."""

    def test_without_clauses(self, builder):
        assert builder.build_select_query(Person) == 'SELECT * FROM "users";'

    def test_with_where_groups(self, builder):
        sql = builder.build_select_query(
            Person,
            where=[{"email": "test@test.com", "nick_name": "Ann"}, {"id": 1}],
        )
        assert sql == (
            'SELECT * FROM "users" '
            "WHERE (\"email\" = 'test@test.com' AND \"nick_name\" = 'Ann') "
            'OR ("id" = 1);'
        )

    def test_column_filter_and_where(self, builder):
        """Filtered columns render in filter order."""
        sql = builder.build_select_query(Person, ["email", "nick_name"], [{"id": 1}])
        assert sql == 'SELECT "email", "nick_name" FROM "users" WHERE ("id" = 1);'

    def test_empty_where_groups(self, builder):
        """No WHERE keyword when nothing is filtered."""
        assert builder.build_select_query(Person, ["id"], []) == 'SELECT "id" FROM "users";'

    def test_unknown_where_column(self, builder):
        with pytest.raises(ColumnNotFoundError):
            builder.build_select_query(Person, where=[{"hobby": "sleeping"}])

    def test_unknown_selected_column(self, builder):
        with pytest.raises(ColumnNotFoundError) as exc_info:
            builder.build_select_query(Person, ["id", "hobby"], [{"id": 1}])
        assert exc_info.value.column == "hobby"

    def test_mysql_quoting(self, mysql):
        sql = QueryBuilder(mysql).build_select_query(Person, ["email"], [{"id": 1}])
        assert sql == "SELECT `email` FROM `users` WHERE (`id` = 1);"

    def test_single_column_name(self, builder):
        """A plain string selects one column rather than its characters."""
        assert builder.build_select_query(Person, "email") == 'SELECT "email" FROM "users";'

    def test_fractional_where_value(self, builder):
        """A fractional value for an integer column fails instead of matching another row."""
        with pytest.raises(ValueRenderError):
            builder.build_select_query(Person, where=[{"id": 1.9}])


@pytest.mark.unit
class TestUpdateQuery:
    """Tests for build_update_query."""

    def test_update_by_primary_key(self, builder):
        """All non-key columns are assigned, in declaration order."""
        person = Person(id=1, name="Ann", age=30, email="test@test.com", index=1)
        assert builder.build_update_query(person) == (
            "UPDATE \"users\" SET \"nick_name\" = 'Ann', \"old\" = 30, "
            "\"email\" = 'test@test.com' WHERE (\"id\" = 1);"
        )

    def test_null_columns_are_assigned_null(self, builder):
        sql = builder.build_update_query(Person(id=2, email="a@b.com"))
        assert '"nick_name" = NULL, "old" = NULL' in sql

    def test_missing_primary_key_value(self, builder):
        with pytest.raises(ColumnInvalidError) as exc_info:
            builder.build_update_query(Person(name="Ann", age=30, email="a@b.com"))
        assert exc_info.value.column == "id"
        assert exc_info.value.table == "users"

    def test_composite_primary_key(self, builder):
        with pytest.raises(SchemaDerivationError):
            builder.build_update_query(Enrollment(student_id=1, course_id=2, grade="A"))

    def test_no_primary_key(self, builder):
        with pytest.raises(SchemaDerivationError):
            builder.build_update_query(AuditEntry(message="hi"))

    def test_fractional_primary_key(self, builder):
        with pytest.raises(ValueRenderError):
            builder.build_update_query(Person(id=1.5, email="a@b.com"))


@pytest.mark.unit
class TestDeleteQuery:
    """Tests for build_delete_query."""

    def test_delete_by_primary_key(self, builder):
        person = Person(id=1, name="Ann", age=20, email="test@test.com", index=1)
        assert builder.build_delete_query(person) == 'DELETE FROM "users" WHERE ("id" = 1);'

    def test_text_primary_key(self, builder):
        assert builder.build_delete_query(Book(isbn="978-0441013593")) == (
            "DELETE FROM \"Book\" WHERE (\"isbn\" = '978-0441013593');"
        )

    def test_missing_primary_key_value(self, builder):
        with pytest.raises(ColumnInvalidError):
            builder.build_delete_query(Person(email="test@test.com"))

    def test_no_primary_key(self, builder):
        with pytest.raises(SchemaDerivationError):
            builder.build_delete_query(AuditEntry(message="hi"))

    def test_boolean_primary_key(self, builder):
        with pytest.raises(ValueRenderError):
            builder.build_delete_query(Person(id=True, email="a@b.com"))


@pytest.mark.unit
def test_configured_terminator(h2, monkeypatch):
    """The statement separator comes from settings."""
    monkeypatch.setenv("ENTITY_SQL_STATEMENT_TERMINATOR", "")
    assert QueryBuilder(h2).build_select_query(Person) == 'SELECT * FROM "users"'
