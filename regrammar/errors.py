# regrammar/errors.py
"""Exceptions for grammars that cannot be serialized or compiled.

A failed match is never an exception; parsers return ``NO_MATCH`` instead.
Everything here signals a defect in the grammar tree itself.
"""

from __future__ import annotations
from typing import Any, Optional


class GrammarError(Exception):
    """Base class for malformed grammar trees."""

    def __init__(self, message: str, node: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.node = node


class UnknownNodeError(GrammarError, TypeError):
    """A value outside the four node kinds reached a traversal."""


class UnsupportedBranchError(GrammarError, TypeError):
    """An alternation branch that is neither a sequence nor a terminal."""


class EmptyMatchError(GrammarError, ValueError):
    """A repetition child consumed no input and would never advance."""


class PatternError(GrammarError, ValueError):
    """The regex engine rejected a serialized pattern."""

    def __init__(self, message: str, source: str, node: Optional[Any] = None) -> None:
        super().__init__(message, node)
        self.source = source
