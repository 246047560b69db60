import pytest

from pgtable_core import Column, DataType, FUNCTION_NOW, Table, check


@pytest.fixture
def user_table():
    """Temporary table without constraints."""
    return Table(
        name="user",
        schema="schema",
        collate="UTF-8",
        temporary=True,
        columns=[
            Column("username", DataType.TEXT, not_null=True),
            Column("password", DataType.TEXT),
            Column("created_at", DataType.TIMESTAMP_TZ),
        ],
    )


@pytest.fixture
def full_table():
    """Table exercising every implicit constraint kind plus an explicit check."""
    return Table(
        name="table_name",
        if_not_exists=True,
        columns=[
            Column("id", DataType.SERIAL, primary_key=True),
            Column("rel_id", DataType.INTEGER, reference_column="id", reference_table="related_table"),
            Column("name", DataType.TEXT, unique=True),
            Column("enabled", DataType.BOOL),
            Column("price", DataType.DECIMAL),
            Column("start_at", DataType.TIMESTAMP_TZ, not_null=True),
            Column("end_at", DataType.TIMESTAMP_TZ, not_null=True),
            Column("created_at", DataType.TIMESTAMP_TZ, not_null=True, default=FUNCTION_NOW),
            Column("created_by", DataType.INTEGER, not_null=True),
            Column("updated_at", DataType.TIMESTAMP_TZ),
            Column("updated_by", DataType.INTEGER),
            Column("slug", DataType.TEXT, not_null=True, unique=True),
        ],
        constraints=[
            check("", "table_name", "(start_at IS NULL AND end_at IS NULL) OR start_at < end_at", "start_at", "end_at"),
        ],
    )


USER_TABLE_SQL = """CREATE TEMPORARY TABLE schema.user (
\tusername TEXT NOT NULL,
\tpassword TEXT,
\tcreated_at TIMESTAMPTZ
);"""

FULL_TABLE_SQL = """CREATE TABLE IF NOT EXISTS table_name (
\tid SERIAL,
\trel_id INTEGER,
\tname TEXT,
\tenabled BOOL,
\tprice DECIMAL,
\tstart_at TIMESTAMPTZ NOT NULL,
\tend_at TIMESTAMPTZ NOT NULL,
\tcreated_at TIMESTAMPTZ DEFAULT NOW() NOT NULL,
\tcreated_by INTEGER NOT NULL,
\tupdated_at TIMESTAMPTZ,
\tupdated_by INTEGER,
\tslug TEXT NOT NULL,

\tCONSTRAINT "public.table_name_name_key" UNIQUE (name),
\tCONSTRAINT "public.table_name_pkey" PRIMARY KEY (id),
\tCONSTRAINT "public.table_name_rel_id_fkey" FOREIGN KEY (rel_id) REFERENCES related_table (id),
\tCONSTRAINT "public.table_name_slug_key" UNIQUE (slug),
\tCONSTRAINT "public.table_name_start_at_end_at_check" CHECK ((start_at IS NULL AND end_at IS NULL) OR start_at < end_at)
);"""


@pytest.fixture
def user_table_sql():
    return USER_TABLE_SQL


@pytest.fixture
def full_table_sql():
    return FULL_TABLE_SQL
