import itertools

import pytest

from colspec.errors import InvalidColumnArgumentError
from colspec.schema import ALL_TYPES, NOT_SET, ColumnSchemaBuilder, ColumnType, format_default

Builder = ColumnSchemaBuilder

LENGTH_FACTORIES = [
    ("primary_key", ColumnType.PK),
    ("big_primary_key", ColumnType.BIGPK),
    ("string", ColumnType.STRING),
    ("text", ColumnType.TEXT),
    ("small_integer", ColumnType.SMALLINT),
    ("integer", ColumnType.INTEGER),
    ("big_integer", ColumnType.BIGINT),
    ("date_time", ColumnType.DATETIME),
    ("timestamp", ColumnType.TIMESTAMP),
    ("time", ColumnType.TIME),
    ("date", ColumnType.DATE),
    ("binary", ColumnType.BINARY),
    ("boolean", ColumnType.BOOLEAN),
]

NUMERIC_FACTORIES = [
    ("float", ColumnType.FLOAT),
    ("double", ColumnType.DOUBLE),
    ("decimal", ColumnType.DECIMAL),
    ("money", ColumnType.MONEY),
]


@pytest.mark.parametrize("factory, keyword", LENGTH_FACTORIES)
def test_length_factories_render_keyword_and_length(factory, keyword):
    assert str(getattr(Builder, factory)()) == keyword
    assert str(getattr(Builder, factory)(20)) == f"{keyword}(20)"
    assert getattr(Builder, factory)().type == keyword


@pytest.mark.parametrize("factory, keyword", NUMERIC_FACTORIES)
def test_numeric_factories_combine_precision_and_scale(factory, keyword):
    create = getattr(Builder, factory)
    assert str(create()) == keyword
    assert str(create(10)) == f"{keyword}(10)"
    assert str(create(10, 2)) == f"{keyword}(10,2)"
    assert create(10, 2).length == "10,2"
    assert create().length is None


def test_scale_without_precision_is_rejected():
    with pytest.raises(InvalidColumnArgumentError):
        Builder.decimal(scale=2)
    with pytest.raises(ValueError):
        Builder.money(None, 4)


def test_unknown_column_type_is_rejected():
    with pytest.raises(InvalidColumnArgumentError):
        Builder("varchar")


def test_all_types_cover_factory_keywords():
    keywords = {keyword for _, keyword in LENGTH_FACTORIES + NUMERIC_FACTORIES}
    assert keywords == ALL_TYPES


def test_end_to_end_examples():
    assert str(Builder.primary_key()) == "pk"
    assert str(Builder.string(64).not_null()) == "string(64) NOT NULL"
    assert str(Builder.integer().not_null().default(10)) == "integer NOT NULL DEFAULT 10"
    assert str(Builder.decimal(10, 2).check("value >= 0")) == "decimal(10,2) CHECK (value >= 0)"


def test_mutators_return_same_instance():
    column = Builder.string(64)
    assert column.not_null() is column
    assert column.default("x") is column
    assert column.check("length(x) > 0") is column


def test_not_null_is_idempotent():
    assert Builder.string().not_null().not_null().render() == "string NOT NULL"


def test_default_formatting_by_value_kind():
    assert str(Builder.integer().default(5)) == "integer DEFAULT 5"
    assert str(Builder.double().default(1.5)) == "double DEFAULT 1.5"
    assert str(Builder.boolean().default(True)) == "boolean DEFAULT TRUE"
    assert str(Builder.boolean().default(False)) == "boolean DEFAULT FALSE"
    assert str(Builder.string().default("abc")) == "string DEFAULT 'abc'"
    # formatting follows the value, not the declared column type
    assert str(Builder.string().default(7)) == "string DEFAULT 7"
    assert str(Builder.integer().default("7")) == "integer DEFAULT '7'"


def test_zero_and_empty_defaults_are_rendered():
    assert str(Builder.integer().default(0)) == "integer DEFAULT 0"
    assert str(Builder.string().default("")) == "string DEFAULT ''"


def test_no_default_omits_segment():
    column = Builder.integer().not_null()
    assert "DEFAULT" not in column.render()
    assert column.has_default is False
    assert column.default_value is NOT_SET


def test_default_none_clears_default():
    column = Builder.integer().default(3).default(None)
    assert column.render() == "integer"
    assert column.has_default is False


def test_string_default_quotes_are_escaped():
    assert format_default("O'Brien") == "'O''Brien'"
    assert str(Builder.string().default("it's")) == "string DEFAULT 'it''s'"


def test_modifier_order_does_not_affect_render():
    mutations = [
        lambda c: c.not_null(),
        lambda c: c.default(42),
        lambda c: c.check("value > 0"),
    ]
    rendered = set()
    for order in itertools.permutations(mutations):
        column = Builder.integer(11)
        for mutate in order:
            mutate(column)
        rendered.add(column.render())
    assert rendered == {"integer(11) NOT NULL DEFAULT 42 CHECK (value > 0)"}


def test_render_is_idempotent():
    column = Builder.string(10).not_null().default("a")
    assert column.render() == column.render() == str(column)


def test_equality_and_repr():
    assert Builder.string(64).not_null() == Builder.string(64).not_null()
    assert Builder.string(64) != Builder.string(32)
    assert repr(Builder.integer()) == "<ColumnSchemaBuilder 'integer'>"


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_float_defaults_are_rejected(value):
    column = Builder.float()
    with pytest.raises(InvalidColumnArgumentError):
        column.default(value)
    assert column.render() == "float"


def test_type_is_read_only():
    column = Builder.string(64)
    with pytest.raises(AttributeError):
        column.type = ColumnType.TEXT  # type: ignore[misc]
    assert column.type == ColumnType.STRING
