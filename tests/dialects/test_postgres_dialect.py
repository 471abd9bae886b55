from colspec.dialects import PostgresSchemaBuilder


def test_postgres_physical_types():
    assert PostgresSchemaBuilder.primary_key().to_sql() == "serial NOT NULL PRIMARY KEY"
    assert PostgresSchemaBuilder.big_primary_key().to_sql() == "bigserial NOT NULL PRIMARY KEY"
    assert PostgresSchemaBuilder.double().to_sql() == "double precision"
    assert PostgresSchemaBuilder.binary().to_sql() == "bytea"


def test_postgres_length_replaces_default_precision():
    assert PostgresSchemaBuilder.decimal(12, 3).to_sql() == "numeric(12,3)"
    assert PostgresSchemaBuilder.date_time(6).to_sql() == "timestamp(6)"
    assert PostgresSchemaBuilder.date_time().to_sql() == "timestamp(0)"


def test_postgres_modifiers_follow_physical_type():
    column = PostgresSchemaBuilder.boolean().not_null().default(True)
    assert column.to_sql() == "boolean NOT NULL DEFAULT TRUE"
    assert column.render() == "boolean NOT NULL DEFAULT TRUE"
    checked = PostgresSchemaBuilder.integer().check("qty >= 0")
    assert checked.column_definition("qty") == '"qty" integer CHECK (qty >= 0)'


def test_postgres_multi_word_types_ignore_length():
    assert PostgresSchemaBuilder.float(10).to_sql() == "double precision"
    assert PostgresSchemaBuilder.double(10, 2).not_null().to_sql() == "double precision NOT NULL"


def test_postgres_primary_key_not_null_is_not_repeated():
    assert PostgresSchemaBuilder.primary_key().not_null().to_sql() == "serial NOT NULL PRIMARY KEY"
