"""Keyword matchers used to pick seed files.

Two interchangeable strategies are provided:

- :class:`RegexMatcher` scans the text line by line.
- :class:`TreeSitterMatcher` parses the file with a Tree-sitter
  JavaScript / TypeScript grammar and only looks at identifier and
  string nodes, so comments and partial tokens never match.

Both return ascending, distinct, 1-based line numbers and are
case-sensitive.
"""

from __future__ import annotations

import importlib
import logging
import os
import re
import threading
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Set, Tuple

logger = logging.getLogger(__name__)

# JS identifiers may contain "$", which ``\b`` does not treat as a word char.
_IDENT_CHAR = r"[A-Za-z0-9_$]"
_LINE_BREAK = re.compile(r"\r?\n")


def split_lines(content: str) -> List[str]:
    """Split on "\\n" (and "\\r\\n") only, so line numbers agree with editors and
    Tree-sitter rows.  A trailing newline does not produce an empty last line.
    """
    lines = _LINE_BREAK.split(content)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


class Matcher(ABC):
    """Finds the lines of a file where a keyword occurs."""

    @abstractmethod
    def match(
        self,
        content: str,
        keyword: str,
        literal: bool = False,
        path: Optional[str] = None,
    ) -> List[int]:
        """Return the 1-based line numbers where ``keyword`` occurs.

        In identifier mode the keyword must be a whole identifier; in
        literal mode it must be the entire content of a quoted string.
        ``path`` is only a hint for strategies that care about the
        file type.
        """
        ...


class RegexMatcher(Matcher):
    """Line-oriented matcher built on two regular expressions."""

    def __init__(self) -> None:
        self._cache: Dict[Tuple[str, bool], re.Pattern] = {}

    def _pattern(self, keyword: str, literal: bool) -> re.Pattern:
        key = (keyword, literal)
        pattern = self._cache.get(key)
        if pattern is None:
            escaped = re.escape(keyword)
            if literal:
                pattern = re.compile(r"(['\"`])" + escaped + r"\1")
            else:
                pattern = re.compile(rf"(?<!{_IDENT_CHAR}){escaped}(?!{_IDENT_CHAR})")
            self._cache[key] = pattern
        return pattern

    def match(
        self,
        content: str,
        keyword: str,
        literal: bool = False,
        path: Optional[str] = None,
    ) -> List[int]:
        if not keyword:
            return []
        pattern = self._pattern(keyword, literal)
        return [
            lineno
            for lineno, line in enumerate(split_lines(content), 1)
            if pattern.search(line)
        ]


_IDENTIFIER_NODES: Set[str] = {
    "identifier",
    "property_identifier",
    "shorthand_property_identifier",
    "shorthand_property_identifier_pattern",
    "type_identifier",
    "statement_identifier",
}

_STRING_NODES: Set[str] = {"string", "template_string"}


class TreeSitterMatcher(Matcher):
    """Syntax-aware matcher over Tree-sitter JS / TS / TSX grammars."""

    # extension -> (grammar module, function returning the Language capsule)
    _GRAMMAR_MODULES: Dict[str, Tuple[str, str]] = {
        ".js": ("tree_sitter_javascript", "language"),
        ".jsx": ("tree_sitter_javascript", "language"),
        ".mjs": ("tree_sitter_javascript", "language"),
        ".cjs": ("tree_sitter_javascript", "language"),
        ".ts": ("tree_sitter_typescript", "language_typescript"),
        ".tsx": ("tree_sitter_typescript", "language_tsx"),
    }
    _DEFAULT_GRAMMAR: Tuple[str, str] = ("tree_sitter_typescript", "language_tsx")

    def __init__(self) -> None:
        self._parsers: Dict[Tuple[str, str], Any] = {}
        # tree-sitter parsers are not safe to share between threads
        self._lock = threading.Lock()

    def _parser_for(self, path: Optional[str]) -> Any:
        ext = os.path.splitext(path)[1].lower() if path else ""
        grammar = self._GRAMMAR_MODULES.get(ext, self._DEFAULT_GRAMMAR)
        parser = self._parsers.get(grammar)
        if parser is None:
            from tree_sitter import Language, Parser as TSParser

            mod_name, func_name = grammar
            mod = importlib.import_module(mod_name)
            parser = TSParser(Language(getattr(mod, func_name)()))
            self._parsers[grammar] = parser
            logger.debug("Loaded tree-sitter grammar %s.%s", mod_name, func_name)
        return parser

    def match(
        self,
        content: str,
        keyword: str,
        literal: bool = False,
        path: Optional[str] = None,
    ) -> List[int]:
        if not keyword:
            return []
        with self._lock:
            tree = self._parser_for(path).parse(content.encode("utf-8"))

        wanted = _STRING_NODES if literal else _IDENTIFIER_NODES
        lines: Set[int] = set()
        stack = [tree.root_node]
        while stack:
            node = stack.pop()
            if node.type in wanted and _node_matches(node, keyword, literal):
                lines.add(node.start_point[0] + 1)
                continue
            stack.extend(node.children)
        return sorted(lines)


def _node_matches(node: Any, keyword: str, literal: bool) -> bool:
    text = node.text.decode("utf-8", errors="replace")
    if literal:
        return len(text) >= 2 and text[1:-1] == keyword
    return text == keyword


def get_matcher(syntax: bool = False) -> Matcher:
    """Return the syntax-aware matcher when ``syntax`` is set, else the regex one."""
    return TreeSitterMatcher() if syntax else RegexMatcher()
