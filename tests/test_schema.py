import pytest

from argkit import errors, schema

# --- Register --------------------------------------------------------------- #


def test_register_types():
    registry = schema.Registry()
    registry.register("count", "usize")
    registry.register("name", "string")
    registry.register("debug", "bool")
    registry.register("verbose")

    assert registry.typeOf("count") == schema.ValueType.USIZE
    assert registry.typeOf("name") == schema.ValueType.STRING
    assert registry.typeOf("debug") == schema.ValueType.BOOL
    assert registry.typeOf("verbose") == schema.ValueType.NONE
    assert len(registry) == 4


def test_register_returns_name():
    registry = schema.Registry()
    name = registry.register("count", "usize")
    assert name == schema.OptionName("count")
    assert registry.typeOf(name) == schema.ValueType.USIZE
    assert name in registry
    assert "count" in registry


def test_register_last_wins():
    registry = schema.Registry()
    registry.register("value", "usize")
    registry.register("value", "string")
    assert registry.typeOf("value") == schema.ValueType.STRING

    registry.register("value")
    assert registry.typeOf("value") == schema.ValueType.NONE
    assert len(registry) == 1


def test_register_invalid_name():
    registry = schema.Registry()
    for name in ["", "-v", "--value", "a=b", "="]:
        with pytest.raises(errors.InvalidNameError):
            registry.register(name, "string")
    assert len(registry) == 0


def test_register_unrecognized_type():
    registry = schema.Registry()
    with pytest.raises(errors.UnrecognizedTypeError) as e:
        registry.register("value", "float")
    assert e.value.type == "float"
    assert "value" not in registry


def test_type_of_unknown():
    registry = schema.Registry()
    registry.register("value", "string")
    with pytest.raises(errors.UnknownOptionError) as e:
        registry.typeOf("other")
    assert e.value.name == "other"


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        schema.Registry().typeOf("other")


def test_copy_is_independent():
    registry = schema.Registry()
    registry.register("value", "string")
    other = registry.copy()
    other.register("value", "usize")
    other.register("count", "usize")

    assert registry.typeOf("value") == schema.ValueType.STRING
    assert "count" not in registry
    assert len(other) == 2


# --- Option Names ----------------------------------------------------------- #


def test_option_name_equality():
    assert schema.OptionName("foo") == schema.OptionName("foo")
    assert schema.OptionName("foo") != schema.OptionName("bar")
    assert str(schema.OptionName("foo")) == "foo"
    assert len({schema.OptionName("foo"), schema.OptionName("foo")}) == 1


# --- Parse Schema ----------------------------------------------------------- #


def test_parse_schema():
    registry = schema.parseSchema("count:usize, name:string,verbose")
    assert registry.typeOf("count") == schema.ValueType.USIZE
    assert registry.typeOf("name") == schema.ValueType.STRING
    assert registry.typeOf("verbose") == schema.ValueType.NONE
    assert sorted(str(n) for n in registry) == ["count", "name", "verbose"]


def test_parse_schema_empty():
    assert len(schema.parseSchema("")) == 0
    assert len(schema.parseSchema(" , ,")) == 0


def test_parse_schema_into_registry():
    registry = schema.Registry()
    registry.register("value", "usize")
    res = schema.parseSchema("value:string", registry)
    assert res is registry
    assert registry.typeOf("value") == schema.ValueType.STRING


def test_parse_schema_errors():
    with pytest.raises(errors.UnrecognizedTypeError):
        schema.parseSchema("value:float")
    with pytest.raises(errors.UnrecognizedTypeError):
        schema.parseSchema("value:")
    with pytest.raises(errors.InvalidNameError):
        schema.parseSchema("--value:usize")
