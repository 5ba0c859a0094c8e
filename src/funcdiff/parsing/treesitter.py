"""Tree-sitter parsing for declaration extraction."""

from __future__ import annotations

import importlib
from dataclasses import dataclass, field
from typing import Any

import tree_sitter
from tree_sitter import Query as _TSQuery
from tree_sitter import QueryCursor as _TSQueryCursor

from funcdiff.parsing.packs import LanguagePack

Match = tuple[int, dict[str, list[Any]]]


@dataclass
class ParseResult:
    """Result of parsing a file."""

    tree: Any  # Tree-sitter Tree (not serializable)
    pack: LanguagePack
    root_node: Any  # Tree-sitter Node

    @property
    def has_error(self) -> bool:
        return bool(self.root_node.has_error)


@dataclass
class TreeSitterParser:
    """
    Tree-sitter parser shared by all language packs.

    Grammars and compiled queries are loaded on first use and cached.

    Usage::

        parser = TreeSitterParser()
        result = parser.parse(GO_PACK, content)
        for pattern_idx, captures in parser.matches(result):
            ...
    """

    _parser: Any = field(default=None, repr=False)
    _languages: dict[str, Any] = field(default_factory=dict, repr=False)
    _queries: dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        self._parser = tree_sitter.Parser()

    def _get_language(self, pack: LanguagePack) -> Any:
        """Get or load the pack's Tree-sitter language."""
        if pack.name in self._languages:
            return self._languages[pack.name]
        try:
            mod = importlib.import_module(pack.grammar_module)
            lang_fn = getattr(mod, pack.language_func or "language")
            lang = tree_sitter.Language(lang_fn())
        except (ImportError, AttributeError) as err:
            hint = f"{pack.grammar_package}>={pack.min_version}"
            raise ValueError(f"Language not available: {pack.name} (install {hint})") from err
        self._languages[pack.name] = lang
        return lang

    def _get_query(self, pack: LanguagePack) -> Any:
        if pack.name not in self._queries:
            self._queries[pack.name] = _TSQuery(self._get_language(pack), pack.declaration_query)
        return self._queries[pack.name]

    def parse(self, pack: LanguagePack, content: bytes) -> ParseResult:
        self._parser.language = self._get_language(pack)
        tree = self._parser.parse(content)
        return ParseResult(tree=tree, pack=pack, root_node=tree.root_node)

    def matches(self, result: ParseResult) -> list[Match]:
        """Declaration query matches in source order of their ``@node`` capture."""
        cursor = _TSQueryCursor(self._get_query(result.pack))
        found: list[Match] = cursor.matches(result.root_node)
        return sorted(found, key=lambda m: m[1]["node"][0].start_byte)


def node_text(node: Any) -> str:
    if node is None:
        return ""
    text = node.text
    return text.decode("utf-8") if isinstance(text, bytes) else str(text)


def squash(text: str) -> str:
    """Collapse every whitespace run to one space."""
    return " ".join(text.split())


def line_span(node: Any) -> tuple[int, int]:
    """1-based inclusive (start_line, end_line) of node."""
    return node.start_point[0] + 1, node.end_point[0] + 1
