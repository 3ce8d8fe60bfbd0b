# regrammar/serialize.py
from __future__ import annotations
from .ast import Terminal, Sequence, Alternation, Repetition, Node
from .errors import UnknownNodeError

# Serializer:
# - flat(): regex source with no named groups; keys are ignored.
# - grouped(): only for a Sequence, named group per keyed direct child.
# - No trailing anchor is emitted, so patterns always match a prefix.


def flat(node: Node) -> str:
    if isinstance(node, Terminal):
        return node.expr

    if isinstance(node, Alternation):
        return "(" + "|".join(flat(b) for b in node.branches) + ")"

    if isinstance(node, Repetition):
        return f"({flat(node.pattern)}){{0,}}"

    if isinstance(node, Sequence):
        return "".join(flat(c) for c in node.children)

    raise UnknownNodeError(f"unknown node: {node!r}", node)


def grouped(seq: Sequence) -> str:
    if not isinstance(seq, Sequence):
        raise UnknownNodeError(f"grouped rendering needs a Sequence, got {seq!r}", seq)
    out = []
    for child in seq.children:
        src = flat(child)
        if child.key:
            out.append(f"(?P<{child.key}>{src})")
        else:
            out.append(src)
    return "".join(out)
