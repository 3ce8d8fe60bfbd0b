import dataclasses

import pytest

from regrammar import (
    Kind, Terminal, Sequence, Alternation, Repetition,
    identity, terminal, sequence, alternation, repetition, with_key, join_patterns,
)


def test_builders_default_to_identity_and_no_key():
    for node in (terminal("a"), sequence([]), alternation([]), repetition(terminal("a"))):
        assert node.reshape is identity
        assert node.key is None


def test_kind_tags():
    assert terminal("a").kind is Kind.EXPR
    assert sequence([]).kind is Kind.SEQ
    assert alternation([]).kind is Kind.OR
    assert repetition(terminal("a")).kind is Kind.REPEAT


def test_children_are_stored_as_tuples():
    kids = [terminal("a"), terminal("b")]
    seq = sequence(kids)
    kids.append(terminal("c"))
    assert seq.children == (Terminal("a"), Terminal("b"))
    assert alternation(iter(kids)).branches == tuple(kids)


def test_with_key_copies():
    base = terminal(r"\d+", int)
    keyed = with_key("n", base)
    assert keyed is not base
    assert base.key is None
    assert keyed.key == "n"
    assert keyed.expr == base.expr and keyed.reshape is int
    assert isinstance(keyed, Terminal)


def test_with_key_keeps_node_type():
    rep = repetition(terminal("a"))
    assert isinstance(with_key("xs", rep), Repetition)
    seq = sequence([terminal("a")])
    assert with_key("s", seq).children == seq.children
    other = with_key("t", with_key("s", seq))
    assert other.key == "t"


def test_nodes_are_frozen():
    node = terminal("a")
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.expr = "b"


def test_join_patterns():
    node = join_patterns("[a-z]+", "=", r"\d+")
    assert node == Terminal(r"[a-z]+=\d+")
    assert join_patterns().expr == ""
    # no escaping is performed
    assert join_patterns("a.", "b").expr == "a.b"


def test_identity():
    obj = object()
    assert identity(obj) is obj


def test_value_equality():
    assert sequence([terminal("a")]) == Sequence((Terminal("a"),))
    assert alternation([terminal("a")]) != alternation([terminal("b")])
    assert Alternation((Terminal("a"),)) == alternation([terminal("a")])
