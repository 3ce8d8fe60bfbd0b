# regrammar/__init__.py
"""Declarative regex grammars.

This package provides:
- Grammar nodes (terminal, sequence, alternation, repetition) and builders
- A serializer rendering node trees into regex source
- A compiler turning node trees into prefix-matching parser functions

Parsers return ``NO_MATCH`` when the input does not match.
"""

from .ast import (
    Kind, Terminal, Sequence, Alternation, Repetition, Node, Branch,
    identity, terminal, sequence, alternation, repetition, with_key, join_patterns,
)
from .errors import (
    GrammarError, UnknownNodeError, UnsupportedBranchError, EmptyMatchError, PatternError,
)
from .serialize import flat, grouped
from .compiler import NO_MATCH, compile
from .runtime import Program
from .debug import format_tree
