"""Extractor dispatch: file extension -> language pack -> declaration rules."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from fnmatch import fnmatch
from typing import Protocol

import structlog

from funcdiff.diff.models import DeclarationRecord
from funcdiff.parsing import go, typescript
from funcdiff.parsing.errors import ExtractionError, UnsupportedLanguageError
from funcdiff.parsing.packs import PACKS, LanguagePack
from funcdiff.parsing.treesitter import Match, ParseResult, TreeSitterParser

log = structlog.get_logger(__name__)

DeclarationHandler = Callable[[ParseResult, list[Match], str], list[DeclarationRecord]]

# Language family -> declaration rules
_HANDLERS: dict[str, DeclarationHandler] = {
    "go": go.extract_declarations,
    "typescript": typescript.extract_declarations,
}


class Extractor(Protocol):
    """Turns one source file into its function and method declarations."""

    @property
    def language(self) -> str: ...

    def extract(self, path: str, content: bytes) -> list[DeclarationRecord]: ...


@dataclass
class TreeSitterExtractor:
    """Extractor backed by a language pack and a shared tree-sitter parser."""

    pack: LanguagePack
    parser: TreeSitterParser
    handler: DeclarationHandler

    @property
    def language(self) -> str:
        return self.pack.name

    def extract(self, path: str, content: bytes) -> list[DeclarationRecord]:
        """Parse content and return its declarations in source order.

        Raises:
            ExtractionError: content is not UTF-8 or does not parse cleanly.
        """
        try:
            content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ExtractionError(path, f"not valid UTF-8 ({e.reason} at byte {e.start})") from e

        result = self.parser.parse(self.pack, content)
        if result.has_error:
            raise ExtractionError(path, f"{self.pack.name} syntax error")
        return self.handler(result, self.parser.matches(result), path)


@dataclass
class ExtractorRegistry:
    """Dispatch table from file extension to extractor."""

    _by_extension: dict[str, Extractor] = field(default_factory=dict)
    _test_patterns: dict[str, tuple[str, ...]] = field(default_factory=dict)

    def register(
        self,
        extractor: Extractor,
        extensions: Iterable[str],
        test_patterns: Iterable[str] = (),
    ) -> None:
        patterns = tuple(test_patterns)
        for ext in extensions:
            ext = ext.lower().lstrip(".")
            self._by_extension[ext] = extractor
            self._test_patterns[ext] = patterns

    @staticmethod
    def _extension(path: str) -> str:
        name = path.rsplit("/", 1)[-1]
        return name.rsplit(".", 1)[-1].lower() if "." in name else ""

    @property
    def extensions(self) -> list[str]:
        return sorted(self._by_extension)

    def for_path(self, path: str) -> Extractor | None:
        return self._by_extension.get(self._extension(path))

    def is_test_file(self, path: str) -> bool:
        name = path.rsplit("/", 1)[-1]
        patterns = self._test_patterns.get(self._extension(path), ())
        return any(fnmatch(name, pattern) for pattern in patterns)

    def is_eligible(self, path: str) -> bool:
        """Known language and not a test-only file."""
        return self.for_path(path) is not None and not self.is_test_file(path)

    def extract(self, path: str, content: bytes) -> list[DeclarationRecord]:
        extractor = self.for_path(path)
        if extractor is None:
            raise UnsupportedLanguageError(path)
        records = extractor.extract(path, content)
        log.debug(
            "file_extracted",
            path=path,
            language=extractor.language,
            declarations=len(records),
        )
        return records


def default_registry(packs: Iterable[LanguagePack] | None = None) -> ExtractorRegistry:
    """Registry with one tree-sitter extractor per built-in language pack."""
    parser = TreeSitterParser()
    registry = ExtractorRegistry()
    for pack in packs if packs is not None else PACKS.values():
        extractor = TreeSitterExtractor(pack=pack, parser=parser, handler=_HANDLERS[pack.family])
        registry.register(extractor, pack.extensions, pack.test_patterns)
    return registry
