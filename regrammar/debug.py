# regrammar/debug.py
"""Readable outline of a grammar tree, for troubleshooting.

    >>> print(format_tree(sequence([with_key("n", terminal("[0-9]+")), terminal("x")])))
    SEQ
      [n] EXPR '[0-9]+'
      EXPR 'x'
"""

from __future__ import annotations
from typing import List

from .ast import Terminal, Sequence, Alternation, Repetition, Node, identity
from .errors import UnknownNodeError


def _label(node: Node) -> str:
    parts = []
    if node.key:
        parts.append(f"[{node.key}]")
    parts.append(node.kind.name)
    if isinstance(node, Terminal):
        parts.append(repr(node.expr))
    if node.reshape is not identity:
        name = getattr(node.reshape, "__name__", None) or repr(node.reshape)
        parts.append(f"-> {name}")
    return " ".join(parts)


def _walk(node: Node, depth: int, out: List[str]) -> None:
    if isinstance(node, Terminal):
        kids = ()
    elif isinstance(node, Sequence):
        kids = node.children
    elif isinstance(node, Alternation):
        kids = node.branches
    elif isinstance(node, Repetition):
        kids = (node.pattern,)
    else:
        raise UnknownNodeError(f"unknown node: {node!r}", node)
    out.append("  " * depth + _label(node))
    for k in kids:
        _walk(k, depth + 1, out)


def format_tree(node: Node) -> str:
    out: List[str] = []
    _walk(node, 0, out)
    return "\n".join(out)
