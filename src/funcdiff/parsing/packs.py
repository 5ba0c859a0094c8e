"""LanguagePack: one bundle of tree-sitter config per supported language.

Each pack holds:
- Grammar install metadata (package, module, version, loader function)
- File extensions and test-file patterns
- The declaration query (S-expression patterns) and the name of the
  handler in ``funcdiff.parsing.registry`` that turns its matches into
  ``DeclarationRecord`` objects
- Report rendering hints (code fence language, header family)

The PACKS registry is the canonical lookup: ``PACKS["go"]``.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LanguagePack:
    """Complete tree-sitter configuration for a single language."""

    # -- Identity --
    name: str  # Canonical language name ("go", "typescript", "tsx")
    family: str  # Declaration rules shared across packs ("go", "typescript")

    # -- Grammar install --
    grammar_package: str  # PyPI package ("tree-sitter-go")
    grammar_module: str  # Python import ("tree_sitter_go")
    min_version: str  # Oldest grammar release the queries are written against
    # Non-standard function name (e.g. "language_typescript", "language_tsx")
    language_func: str | None = None

    # -- File detection --
    extensions: frozenset[str] = field(default_factory=frozenset)
    test_patterns: tuple[str, ...] = ()  # fnmatch patterns on the file name

    # -- Declaration extraction --
    declaration_query: str = ""

    # -- Rendering --
    code_fence: str = ""


# =========================================================================
# GO
# =========================================================================

GO_PACK = LanguagePack(
    name="go",
    family="go",
    grammar_package="tree-sitter-go",
    grammar_module="tree_sitter_go",
    min_version="0.23.0",
    extensions=frozenset({"go"}),
    test_patterns=("*_test.go",),
    declaration_query="""
        (function_declaration
            name: (identifier) @name
            parameters: (parameter_list) @params) @node
        (method_declaration
            receiver: (parameter_list) @receiver
            name: (field_identifier) @name
            parameters: (parameter_list) @params) @node
    """,
    code_fence="go",
)


# =========================================================================
# TYPESCRIPT
# =========================================================================

_TS_DECLARATIONS = """
    (function_declaration
        name: (identifier) @name
        parameters: (formal_parameters) @params) @node
    (generator_function_declaration
        name: (identifier) @name
        parameters: (formal_parameters) @params) @node
    (method_definition
        name: [(property_identifier) (private_property_identifier)] @name
        parameters: (formal_parameters) @params) @node
"""

TYPESCRIPT_PACK = LanguagePack(
    name="typescript",
    family="typescript",
    grammar_package="tree-sitter-typescript",
    grammar_module="tree_sitter_typescript",
    min_version="0.23.0",
    language_func="language_typescript",
    extensions=frozenset({"ts", "mts", "cts"}),
    test_patterns=("*.test.ts", "*.spec.ts", "*.d.ts", "*.d.mts", "*.d.cts"),
    declaration_query=_TS_DECLARATIONS,
    code_fence="ts",
)

TSX_PACK = LanguagePack(
    name="tsx",
    family="typescript",
    grammar_package="tree-sitter-typescript",
    grammar_module="tree_sitter_typescript",
    min_version="0.23.0",
    language_func="language_tsx",
    extensions=frozenset({"tsx"}),
    test_patterns=("*.test.tsx", "*.spec.tsx"),
    declaration_query=_TS_DECLARATIONS,
    code_fence="tsx",
)


PACKS: dict[str, LanguagePack] = {
    pack.name: pack for pack in (GO_PACK, TYPESCRIPT_PACK, TSX_PACK)
}


def get_pack(name: str) -> LanguagePack | None:
    return PACKS.get(name)

