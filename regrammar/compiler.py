# regrammar/compiler.py
"""Turn a grammar tree into a parser function.

``compile(node)`` walks the tree once and returns ``parse(text)``. Every
pattern is anchored at the position it is tried from (``Pattern.match``), so
a parser recognizes a prefix of its input and ignores whatever follows.

Per kind:
- Terminal    : pattern test; on success ``reshape`` gets the *whole* input.
- Sequence    : grouped pattern; keyed children are re-parsed from their
                captured substrings, then ``reshape`` gets the dict.
- Alternation : first branch whose pattern matches and whose parser
                succeeds wins.
- Repetition  : greedy left-to-right collection of child matches, each one
                parsed by the child, then ``reshape`` gets the list.

Failure is always the ``NO_MATCH`` singleton, never an exception.
"""

from __future__ import annotations
import logging
from typing import Any, Callable, Dict, List, Tuple

import regex

from .ast import Terminal, Sequence, Alternation, Repetition, Node
from .errors import (
    GrammarError, UnknownNodeError, UnsupportedBranchError, EmptyMatchError, PatternError,
)
from .serialize import flat, grouped

logger = logging.getLogger(__name__)

Parser = Callable[[str], Any]


class _NoMatch:
    """Type of ``NO_MATCH``; there is only ever one instance."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_MATCH"

    def __reduce__(self):
        return (_NoMatch, ())


NO_MATCH = _NoMatch()


# --------- Helpers ---------

_FLAG_MAP = {
    'i': regex.IGNORECASE,
    'm': regex.MULTILINE,
    's': regex.DOTALL,
    'x': regex.VERBOSE,
    'a': regex.ASCII,
    'A': regex.ASCII,
}


def parse_flags(flags: str) -> int:
    f = 0
    for ch in flags:
        f |= _FLAG_MAP.get(ch, 0)
    return f


def compile_pattern(source: str, flags: int = 0, node: Any = None) -> "regex.Pattern":
    try:
        return regex.compile(source, flags)
    except regex.error as e:
        raise PatternError(f"invalid pattern {source!r}: {e}", source, node) from e


# --------- Compiler ---------

def compile(node: Node, flags: str = "") -> Parser:
    """Compile ``node`` into ``parse(text) -> result | NO_MATCH``.

    ``flags`` is a string of regex flag letters (``"i"``, ``"ms"``, ...)
    applied to every pattern under ``node``.
    """
    return _compile(node, parse_flags(flags))


def _compile(node: Node, flags: int) -> Parser:
    if isinstance(node, Terminal):
        return _compile_terminal(node, flags)
    if isinstance(node, Sequence):
        return _compile_sequence(node, flags)
    if isinstance(node, Alternation):
        return _compile_alternation(node, flags)
    if isinstance(node, Repetition):
        return _compile_repetition(node, flags)
    raise UnknownNodeError(f"unknown node: {node!r}", node)


def _compile_terminal(node: Terminal, flags: int) -> Parser:
    source = flat(node)
    logger.debug("compile %s %r", node.kind.name, source)
    pattern = compile_pattern(source, flags, node)
    reshape = node.reshape

    def parse(text: str) -> Any:
        if pattern.match(text) is None:
            return NO_MATCH
        # the whole input, not just the matched prefix
        return reshape(text)

    return parse


def _compile_sequence(node: Sequence, flags: int) -> Parser:
    source = grouped(node)
    logger.debug("compile %s %r", node.kind.name, source)
    pattern = compile_pattern(source, flags, node)
    reshape = node.reshape

    keyed: List[Tuple[str, Parser]] = []
    seen = set()
    for child in node.children:
        if not child.key:
            continue
        if child.key in seen:
            raise GrammarError(f"duplicate key {child.key!r} in sequence", node)
        seen.add(child.key)
        keyed.append((child.key, _compile(child, flags)))

    def parse(text: str) -> Any:
        m = pattern.match(text)
        if m is None:
            return NO_MATCH
        if not pattern.groupindex:
            return reshape(m.group(0))
        result: Dict[str, Any] = m.groupdict()
        for key, child_parse in keyed:
            captured = result.get(key)
            value = NO_MATCH if captured is None else child_parse(captured)
            if value is NO_MATCH:
                return NO_MATCH
            result[key] = value
        return reshape(result)

    return parse


def _compile_alternation(node: Alternation, flags: int) -> Parser:
    reshape = node.reshape
    options: List[Tuple[Any, Parser]] = []
    for branch in node.branches:
        if isinstance(branch, (Alternation, Repetition)):
            raise UnsupportedBranchError(
                f"alternation branch must be a Sequence or Terminal, got {branch.kind.name}", branch)
        source = flat(branch)
        logger.debug("compile %s branch %r", node.kind.name, source)
        options.append((compile_pattern(source, flags, branch), _compile(branch, flags)))

    def parse(text: str) -> Any:
        for pattern, branch_parse in options:
            if pattern.match(text) is None:
                continue
            result = branch_parse(text)
            if result is not NO_MATCH:
                return reshape(result)
        return NO_MATCH

    return parse


def _compile_repetition(node: Repetition, flags: int) -> Parser:
    source = flat(node.pattern)
    logger.debug("compile %s %r", node.kind.name, source)
    pattern = compile_pattern(source, flags, node)
    if pattern.match("") is not None:
        raise EmptyMatchError(f"repeated pattern {source!r} matches the empty string", node)
    child_parse = _compile(node.pattern, flags)
    reshape = node.reshape

    def parse(text: str) -> Any:
        items: List[str] = []
        pos = 0
        while pos < len(text):
            # the rest of the input is matched as its own string, so `^`, `\b`
            # and lookbehinds see the cursor as the start
            m = pattern.match(text[pos:])
            if m is None:
                break
            if m.end() == 0:
                raise EmptyMatchError(
                    f"repeated pattern {source!r} matched nothing at offset {pos}", node)
            items.append(m.group(0))
            pos += m.end()

        results = []
        for item in items:
            value = child_parse(item)
            if value is NO_MATCH:
                return NO_MATCH
            results.append(value)
        return reshape(results)

    return parse
