from fano.model import Symbol, SymbolTable, build_frequency_table, build_symbol_table


def test_frequency_table_counts_bytes():
    frequency, total = build_frequency_table(b"AAAABBBCCD")
    assert frequency == {65: 4, 66: 3, 67: 2, 68: 1}
    assert total == 10


def test_frequency_table_empty():
    assert build_frequency_table(b"") == ({}, 0)


def test_symbol_table_sorted_by_probability():
    table = build_symbol_table(*build_frequency_table(b"DCCBBBAAAA"))
    assert table.values() == [65, 66, 67, 68]
    assert [round(s.probability, 6) for s in table] == [0.4, 0.3, 0.2, 0.1]
    assert table.total == 10


def test_symbol_table_ties_ordered_by_value():
    table = build_symbol_table({ord("z"): 2, ord("a"): 2, ord("m"): 5})
    assert table.values() == [ord("m"), ord("a"), ord("z")]


def test_symbol_table_empty():
    table = build_symbol_table({}, 0)
    assert len(table) == 0
    assert list(table) == []


def test_symbol_table_is_indexable():
    table = SymbolTable([Symbol(1, 3, 0.75), Symbol(2, 1, 0.25)], total=4)
    assert table[1] == Symbol(2, 1, 0.25)
    assert len(table) == 2
