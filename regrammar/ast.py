# regrammar/ast.py
from __future__ import annotations
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Callable, ClassVar, Iterable, Optional, Tuple, TypeVar, Union

# ---- Grammar node definitions ----

Reshape = Callable[[Any], Any]


def identity(value: Any) -> Any:
    return value


class Kind(Enum):
    SEQ = 1
    REPEAT = 2
    EXPR = 3
    OR = 4


@dataclass(frozen=True)
class Terminal:
    expr: str  # raw regex fragment, not escaped
    reshape: Reshape = identity
    key: Optional[str] = None
    kind: ClassVar[Kind] = Kind.EXPR


@dataclass(frozen=True)
class Sequence:
    children: Tuple["Node", ...]
    reshape: Reshape = identity
    key: Optional[str] = None
    kind: ClassVar[Kind] = Kind.SEQ


@dataclass(frozen=True)
class Alternation:
    branches: Tuple["Branch", ...]
    reshape: Reshape = identity
    key: Optional[str] = None
    kind: ClassVar[Kind] = Kind.OR


@dataclass(frozen=True)
class Repetition:
    pattern: "Node"
    reshape: Reshape = identity
    key: Optional[str] = None
    kind: ClassVar[Kind] = Kind.REPEAT


Node = Union[Terminal, Sequence, Alternation, Repetition]
# alternation branches are restricted to these two
Branch = Union[Sequence, Terminal]

N = TypeVar("N", Terminal, Sequence, Alternation, Repetition)


# ---- Builders ----

def terminal(expr: str, reshape: Reshape = identity) -> Terminal:
    return Terminal(expr, reshape)


def sequence(children: Iterable[Node], reshape: Reshape = identity) -> Sequence:
    return Sequence(tuple(children), reshape)


def alternation(branches: Iterable[Branch], reshape: Reshape = identity) -> Alternation:
    return Alternation(tuple(branches), reshape)


def repetition(pattern: Node, reshape: Reshape = identity) -> Repetition:
    return Repetition(pattern, reshape)


def with_key(key: str, node: N) -> N:
    """Return a copy of `node` named `key`; the original is left untouched.

    The key only takes effect when the node is a direct child of a Sequence.
    """
    return replace(node, key=key)


def join_patterns(*fragments: str) -> Terminal:
    return Terminal("".join(fragments))
