import pytest

from enum_x import Enum, InvalidArgument, Value


def test_values(test_enum):
    assert isinstance(test_enum.values, list)
    assert len(test_enum.values) == 3
    assert all(isinstance(v, Value) for v in test_enum.values)
    assert test_enum.values == ["one", "two", "three"]
    assert list(test_enum) == test_enum.values
    assert len(test_enum) == 3


def test_name_is_string():
    assert Enum(42, ["a"]).name == "42"


def test_lookup(test_enum):
    assert isinstance(test_enum["one"], Value)
    assert test_enum["one"].value == "one"
    assert test_enum.lookup("one") is test_enum["one"]


def test_lookup_missing_returns_none(test_enum):
    assert test_enum["four"] is None
    assert test_enum[None] is None


def test_lookup_by_bytes(test_enum):
    assert test_enum[b"one"] is test_enum["one"]
    assert test_enum["one"] == b"one"


def test_undecodable_bytes_miss(test_enum):
    assert test_enum.lookup(b"\xff") is None
    assert b"\xff" not in test_enum
    assert (test_enum["one"] == b"\xff") is False


def test_lookup_by_integer():
    sizes = Enum("sizes", [50, 100])
    assert isinstance(sizes[50], Value)
    assert str(sizes[50]) == "50"
    assert sizes["50"] is sizes[50]


def test_lookup_by_value_from_other_enum(test_enum):
    other = Enum("other", ["one"])
    assert test_enum[other["one"]] is test_enum["one"]


def test_distinct_values_resolve_distinctly(test_enum):
    assert test_enum["one"] is not None
    assert test_enum["two"] is not None
    assert test_enum["one"] != test_enum["two"]


def test_contains(test_enum):
    assert "one" in test_enum
    assert "four" not in test_enum
    assert None not in test_enum


def test_duplicate_keys_keep_one_value():
    enum = Enum("dupes", ["a", "b", "a"])
    assert enum.values == ["a", "b"]


def test_existing_values_are_copied_not_shared(test_enum):
    enum = Enum("copy", test_enum.values)
    assert enum["one"] is not test_enum["one"]
    assert enum["one"].enum is enum
    assert enum["three"].format("number") == "3"


def test_dup(test_enum):
    duplicate = test_enum.dup()
    assert duplicate is not test_enum
    assert duplicate.name == "test_enum"
    assert duplicate.values == test_enum.values
    assert duplicate.values[2].format("number") == "3"
    assert all(v.enum is duplicate for v in duplicate.values)


def test_without(test_enum):
    duplicate = test_enum.without("one")
    assert duplicate.name == "test_enum"
    assert len(duplicate.values) == 2
    assert "one" not in duplicate.values
    assert "two" in duplicate.values
    assert duplicate.values[1].format("number") == "3"
    assert len(test_enum) == 3


def test_only(test_enum):
    duplicate = test_enum.only("two", "three")
    assert duplicate.name == "test_enum"
    assert len(duplicate.values) == 2
    assert "one" not in duplicate.values
    assert duplicate.values[1].format("number") == "3"


def test_only_then_without(test_enum):
    subset = test_enum.only("one", "three").without("three")
    assert subset.values == ["one"]


def test_extend_in_place(test_enum):
    result = test_enum.extend("four", "five")
    assert result is test_enum
    assert len(test_enum.values) == 5
    assert "four" in test_enum.values
    assert "five" in test_enum.values


def test_i18n_scope(test_enum):
    assert test_enum.i18n_scope == ["enums", "test_enum"]


def test_value_with_format():
    enum = Enum(
        "my_enum",
        [{"value": "one", "number": "1"}, {"value": "two", "number": "2"}],
    )
    assert enum.value_with_format("number", "1") is enum["one"]
    assert enum.value_with_format("number", "2") is enum["two"]
    assert enum.value_with_format("number", 2) is enum["two"]
    assert enum.value_with_format("unknown", "one") is enum["one"]
    assert enum.value_with_format("number", "3") is None


def test_finder(test_enum):
    by_number = test_enum.finder("number")
    assert by_number.__name__ == "value_with_number"
    assert by_number("3") is test_enum["three"]
    assert by_number("one") is test_enum["one"]


def test_finder_arity(test_enum):
    by_number = test_enum.finder("number")
    with pytest.raises(InvalidArgument, match="accepts one argument, 2 given"):
        by_number("1", "2")
    with pytest.raises(InvalidArgument, match="0 given"):
        by_number()


def test_definitions_round_trip(test_enum):
    assert test_enum.definitions() == ["one", "two", {"value": "three", "number": "3"}]
    assert Enum("copy", test_enum.definitions()).values == test_enum.values


def test_find_on_host_class(test_enum):
    class Host:
        statuses = test_enum
        names = ["not", "an", "enum"]

    class Exploding:
        @property
        def statuses(self):
            raise RuntimeError("boom")

    assert Enum.find(Host, "statuses") is test_enum
    assert Enum.find(Host, "names") is None
    assert Enum.find(Host, "missing") is None
    assert Enum.find(None, "statuses") is None
    assert Enum.find(Exploding(), "statuses") is None
