# regrammar/runtime.py
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any

from .ast import Node
from .compiler import Parser, compile, compile_pattern, parse_flags
from .serialize import flat

logger = logging.getLogger(__name__)


@dataclass
class Program:
    """Compiled grammar: the root node together with its parser."""
    node: Node
    flags: str = ""
    parser: Parser = field(init=False, repr=False, compare=False)
    pattern: str = field(init=False)

    def __post_init__(self) -> None:
        self.parser = compile(self.node, self.flags)
        self.pattern = flat(self.node)
        self._prefix = compile_pattern(self.pattern, parse_flags(self.flags), self.node)
        logger.debug("program ready: %s %r", self.node.kind.name, self.pattern)

    @classmethod
    def from_node(cls, node: Node, flags: str = "") -> "Program":
        return cls(node, flags)

    def parse(self, text: str) -> Any:
        return self.parser(text)

    def matches(self, text: str) -> bool:
        """True when the grammar's flat pattern matches a prefix of `text`."""
        return self._prefix.match(text) is not None

    def __call__(self, text: str) -> Any:
        return self.parser(text)
