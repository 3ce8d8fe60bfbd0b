import pytest

from regrammar import UnknownNodeError, format_tree, terminal, sequence, alternation, repetition, with_key


def to_pair(d):
    return (d["k"], d["v"])


def test_format_tree():
    node = repetition(
        alternation([
            sequence([with_key("k", terminal("[a-z]+")), terminal("="), with_key("v", terminal("[0-9]+", int))],
                     to_pair),
            terminal(";"),
        ]),
        dict,
    )
    assert format_tree(node) == "\n".join([
        "REPEAT -> dict",
        "  OR",
        "    SEQ -> to_pair",
        "      [k] EXPR '[a-z]+'",
        "      EXPR '='",
        "      [v] EXPR '[0-9]+' -> int",
        "    EXPR ';'",
    ])


def test_format_tree_lambda_and_leaf():
    assert format_tree(terminal("x", lambda s: s)) == "EXPR 'x' -> <lambda>"
    assert format_tree(with_key("a", terminal("x"))) == "[a] EXPR 'x'"


def test_format_tree_unknown():
    with pytest.raises(UnknownNodeError):
        format_tree(sequence([terminal("a"), 42]))
