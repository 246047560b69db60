import pytest

from pgtable_core import Column, Constraint, DataType, InvalidReferenceError, Table, derive_constraints
from pgtable_core.constraints import (
    check_constraint_sql,
    foreign_key_constraint_sql,
    primary_key_constraint_sql,
    unique_constraint_sql,
)
from pgtable_core.naming import NamingConvention


class TestRendering:
    def test_unique(self):
        assert unique_constraint_sql("app", "users", "email") == 'CONSTRAINT "app.users_email_key" UNIQUE (email)'

    def test_unique_composite_keeps_order(self):
        assert unique_constraint_sql("", "members", "team_id", "user_id") == (
            'CONSTRAINT "public.members_team_id_user_id_key" UNIQUE (team_id, user_id)'
        )

    def test_primary_key(self):
        assert primary_key_constraint_sql("", "members", "team_id", "user_id") == (
            'CONSTRAINT "public.members_pkey" PRIMARY KEY (team_id, user_id)'
        )

    def test_foreign_key_without_reference_schema(self):
        assert foreign_key_constraint_sql("", "items", ["owner_id"], "", "users", ["id"]) == (
            'CONSTRAINT "public.items_owner_id_fkey" FOREIGN KEY (owner_id) REFERENCES users (id)'
        )

    def test_foreign_key_with_reference_schema(self):
        assert foreign_key_constraint_sql("app", "items", ["a", "b"], "auth", "pairs", ["x", "y"]) == (
            'CONSTRAINT "app.items_a_b_fkey" FOREIGN KEY (a, b) REFERENCES auth.pairs (x, y)'
        )

    def test_check_expression_verbatim(self):
        assert check_constraint_sql("", "t", "price >= 0 AND 'a' <> 'b'", "price") == (
            "CONSTRAINT \"public.t_price_check\" CHECK (price >= 0 AND 'a' <> 'b')"
        )


class TestDerivation:
    def test_fragments_sorted_by_text(self, full_table):
        fragments = derive_constraints(full_table)
        assert fragments == sorted(fragments)
        assert [f.split('"')[1] for f in fragments] == [
            "public.table_name_name_key",
            "public.table_name_pkey",
            "public.table_name_rel_id_fkey",
            "public.table_name_slug_key",
            "public.table_name_start_at_end_at_check",
        ]

    def test_unique_and_primary_key_suppress_each_other(self):
        table = Table(name="t", columns=[Column("id", DataType.INTEGER, unique=True, primary_key=True)])
        assert derive_constraints(table) == []

    def test_suppression_keeps_reference_and_check(self):
        table = Table(
            name="t",
            columns=[
                Column(
                    "id",
                    DataType.INTEGER,
                    unique=True,
                    primary_key=True,
                    reference_table="other",
                    reference_column="id",
                    check="id > 0",
                )
            ],
        )
        fragments = derive_constraints(table)
        assert fragments == [
            'CONSTRAINT "public.t_id_check" CHECK (id > 0)',
            'CONSTRAINT "public.t_id_fkey" FOREIGN KEY (id) REFERENCES other (id)',
        ]
        assert not any("UNIQUE" in f or "PRIMARY KEY" in f for f in fragments)

    def test_constraint_unique_and_primary_key_suppress_each_other(self):
        table = Table(
            name="t",
            columns=[Column("a", DataType.INTEGER), Column("b", DataType.INTEGER)],
            constraints=[Constraint(columns=["a", "b"], unique=True, primary_key=True)],
        )
        assert derive_constraints(table) == []

    def test_all_four_kinds_from_one_column(self):
        table = Table(
            name="t",
            columns=[
                Column("code", DataType.TEXT, unique=True, reference_table="codes", reference_column="code", check="code <> ''")
            ],
        )
        assert len(derive_constraints(table)) == 3

    def test_composite_constraints(self):
        table = Table(
            name="memberships",
            schema="app",
            columns=[Column("team_id", DataType.INTEGER), Column("user_id", DataType.INTEGER)],
            constraints=[
                Constraint(columns=["team_id", "user_id"], primary_key=True),
                Constraint(
                    columns=["team_id"],
                    reference_schema="app",
                    reference_table="teams",
                    reference_columns=["id"],
                ),
                Constraint(columns=["user_id", "team_id"], unique=True),
            ],
        )
        assert derive_constraints(table) == [
            'CONSTRAINT "app.memberships_pkey" PRIMARY KEY (team_id, user_id)',
            'CONSTRAINT "app.memberships_team_id_fkey" FOREIGN KEY (team_id) REFERENCES app.teams (id)',
            'CONSTRAINT "app.memberships_user_id_team_id_key" UNIQUE (user_id, team_id)',
        ]

    def test_empty_reference_is_not_a_reference(self):
        table = Table(name="t", columns=[Column("rel_id", DataType.INTEGER, reference_table="", reference_column="")])
        assert derive_constraints(table) == []

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"reference_table": "other"},
            {"reference_column": "id"},
            {"reference_schema": "s", "reference_column": "id"},
        ],
    )
    def test_partial_column_reference_fails(self, kwargs):
        table = Table(name="t", columns=[Column("rel_id", DataType.INTEGER, **kwargs)])
        with pytest.raises(InvalidReferenceError) as excinfo:
            derive_constraints(table)
        error = excinfo.value
        assert error.schema == kwargs.get("reference_schema", "")
        assert error.table == kwargs.get("reference_table", "")
        assert error.columns == (kwargs.get("reference_column", ""),)

    def test_partial_constraint_reference_fails(self):
        table = Table(
            name="t",
            columns=[Column("a", DataType.INTEGER)],
            constraints=[Constraint(columns=["a"], reference_schema="s", reference_columns=["x", "y"])],
        )
        with pytest.raises(InvalidReferenceError, match="schema: 's', table: ''") as excinfo:
            derive_constraints(table)
        assert excinfo.value.columns == ("x", "y")

    def test_failure_after_valid_fragments(self):
        table = Table(
            name="t",
            columns=[
                Column("id", DataType.SERIAL, primary_key=True),
                Column("rel_id", DataType.INTEGER, reference_table="other"),
            ],
        )
        with pytest.raises(InvalidReferenceError):
            derive_constraints(table)

    def test_custom_naming(self):
        class ShortNaming(NamingConvention):
            def unique(self, schema, table, *columns):
                return "uq_" + "_".join(columns)

            def primary_key(self, schema, table, *columns):
                return "pk_" + table

            def foreign_key(self, schema, table, *columns):
                return "fk_" + "_".join(columns)

            def check(self, schema, table, *columns):
                return "ck_" + "_".join(columns)

        table = Table(
            name="t",
            columns=[Column("id", DataType.SERIAL, primary_key=True), Column("slug", DataType.TEXT, unique=True)],
        )
        assert derive_constraints(table, ShortNaming()) == [
            'CONSTRAINT "pk_t" PRIMARY KEY (id)',
            'CONSTRAINT "uq_slug" UNIQUE (slug)',
        ]
        assert 'CONSTRAINT "pk_t"' in table.create_query(ShortNaming())
