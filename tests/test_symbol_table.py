import pytest

from dklang.symbol_table import Symbol, SymbolTable


@pytest.fixture
def table():
    t = SymbolTable()
    t.add("a", 1)
    t.add("b", 2)
    t.add("c", 3)
    return t


def test_add_and_get(table):
    assert table.get("b") == Symbol("b", 2)
    assert len(table) == 3


def test_get_missing_raises(table):
    with pytest.raises(KeyError):
        table.get("zz")


def test_contains(table):
    assert "a" in table
    assert "zz" not in table


def test_get_by_index(table):
    assert table.get_by_index(0).name == "a"
    assert table.get_by_index(2).value == 3


@pytest.mark.parametrize("index", [3, -1])
def test_get_by_index_out_of_range(table, index):
    with pytest.raises(IndexError):
        table.get_by_index(index)


def test_duplicates_allowed_first_wins():
    t = SymbolTable()
    t.add("x", 10)
    t.add("x", 20)
    assert len(t) == 2
    assert t.get("x").value == 10


def test_remove_moves_last_into_place(table):
    table.remove("a")
    assert [s.name for s in table] == ["c", "b"]
    assert "a" not in table


def test_remove_last(table):
    table.remove("c")
    assert [s.name for s in table] == ["a", "b"]


def test_remove_missing_is_ignored(table):
    table.remove("zz")
    assert [s.name for s in table] == ["a", "b", "c"]


def test_format(table):
    assert table.format() == (
        "\tSymbol: a, value: 1\n\tSymbol: b, value: 2\n\tSymbol: c, value: 3\n"
    )


def test_print(table, capsys):
    table.print()
    assert capsys.readouterr().out == table.format()


def test_empty_table():
    t = SymbolTable()
    assert len(t) == 0
    assert t.format() == ""
    assert list(t) == []