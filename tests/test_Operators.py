import pytest

from FormulaCore.Operators import OPERATORS, BY_KIND, OperatorKind, lookup


def test_registry_keywords():
    assert set(OPERATORS) == {"add", "subtract", "multiply", "divide"}


@pytest.mark.parametrize("keyword", ["add", "subtract", "multiply", "divide"])
def test_registry_entries_are_binary(keyword):
    entry = lookup(keyword)
    assert entry.keyword == keyword
    assert entry.kind.value == keyword
    assert entry.arity == 2


def test_registry_apply():
    assert OPERATORS["add"].apply(2, 3) == 5
    assert OPERATORS["subtract"].apply(2, 3) == -1
    assert OPERATORS["multiply"].apply(2, 3) == 6
    assert OPERATORS["divide"].apply(3, 2) == 1.5


def test_every_kind_has_an_entry():
    assert set(BY_KIND) == set(OperatorKind)


def test_lookup_unknown_and_case_sensitive():
    assert lookup("unknown") is None
    assert lookup("ADD") is None


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        OPERATORS["power"] = OPERATORS["add"]
