import pytest

from fano.errors import MalformedTableError
from fano.stats import average_length, entropy, summarize
from fano.codec import encode
from fano.tree import build_code_tree, display_tree


def test_build_code_tree_leaves():
    root = build_code_tree({65: "0", 66: "10", 67: "11"})
    assert root.left.symbol == 65
    assert root.right.left.symbol == 66
    assert root.right.right.symbol == 67
    assert not root.is_leaf()


def test_symbol_zero_is_a_leaf():
    root = build_code_tree({0: "0", 1: "1"})
    assert root.left.is_leaf()


@pytest.mark.parametrize("codes", [
    {65: "0", 66: "0"},
    {65: "0", 66: "01"},
    {65: "01", 66: "0"},
    {65: ""},
    {65: "0a"},
])
def test_build_code_tree_rejects_bad_codes(codes):
    with pytest.raises(MalformedTableError):
        build_code_tree(codes)


def test_display_tree(capsys):
    display_tree(build_code_tree({32: "0", 10: "10", 97: "11"}))
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Node:",
        " 0-Leaf: ' ' (пробел)",
        " 1-Node:",
        " 1- 0-Leaf: '\\n' (новая строка)",
        " 1- 1-Leaf: 'a'",
    ]


def test_stats_reference_example():
    result = encode(b"AAAABBBCCD")
    assert average_length(result.table, result.codes) == pytest.approx(1.9)
    assert entropy(result.table) == pytest.approx(1.8464, abs=1e-4)
    stats = summarize(result, 10)
    assert stats["encoded_bits"] == 19
    assert stats["symbols"] == 4
    assert stats["efficiency"] == pytest.approx(1.8464 / 1.9, abs=1e-3)
