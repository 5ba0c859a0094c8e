"""Per-language declaration extraction built on tree-sitter."""

from funcdiff.parsing.errors import ExtractionError, UnsupportedLanguageError
from funcdiff.parsing.packs import PACKS, LanguagePack, get_pack
from funcdiff.parsing.registry import (
    Extractor,
    ExtractorRegistry,
    TreeSitterExtractor,
    default_registry,
)
from funcdiff.parsing.treesitter import ParseResult, TreeSitterParser

__all__ = [
    "ExtractionError",
    "UnsupportedLanguageError",
    "LanguagePack",
    "PACKS",
    "get_pack",
    "Extractor",
    "ExtractorRegistry",
    "TreeSitterExtractor",
    "default_registry",
    "ParseResult",
    "TreeSitterParser",
]
