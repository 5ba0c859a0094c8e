"""Tests for Go declaration extraction."""

from __future__ import annotations

import pytest

from funcdiff.diff.models import DeclarationRecord
from funcdiff.parsing.errors import ExtractionError
from funcdiff.parsing.go import is_exported, package_path
from funcdiff.parsing.registry import ExtractorRegistry, default_registry

SHAPES_GO = """package shapes

import "fmt"

// Area of a rectangle.
func Area(w, h int) int {
	return w * h
}

type Rect struct{ W, H int }

func (r *Rect) Scale(f float64) {
	r.W = int(float64(r.W) * f)
}

func (r Rect) String() string {
	return fmt.Sprintf("%dx%d", r.W, r.H)
}

func helper(args ...string) (n int, err error) {
	return len(args), nil
}
"""


@pytest.fixture(scope="module")
def registry() -> ExtractorRegistry:
    return default_registry()


@pytest.fixture(scope="module")
def shapes(registry: ExtractorRegistry) -> dict[str, DeclarationRecord]:
    records = registry.extract("geo/shapes/shapes.go", SHAPES_GO.encode())
    return {r.qualified_name: r for r in records}


class TestGoDeclarations:
    """Functions, methods and their metadata."""

    def test_finds_every_declaration_in_source_order(self, registry: ExtractorRegistry) -> None:
        records = registry.extract("geo/shapes/shapes.go", SHAPES_GO.encode())
        assert [r.qualified_name for r in records] == [
            "Area",
            "(*Rect).Scale",
            "(Rect).String",
            "helper",
        ]

    def test_package_is_dir_joined_with_clause(self, shapes: dict[str, DeclarationRecord]) -> None:
        assert {r.package for r in shapes.values()} == {"geo/shapes/shapes"}

    def test_grouped_params_expand(self, shapes: dict[str, DeclarationRecord]) -> None:
        assert shapes["Area"].signature == "(int, int) (int)"

    def test_variadic_and_named_results(self, shapes: dict[str, DeclarationRecord]) -> None:
        assert shapes["helper"].signature == "(...string) (int, error)"

    def test_no_result(self, shapes: dict[str, DeclarationRecord]) -> None:
        assert shapes["(*Rect).Scale"].signature == "(float64)"

    def test_pointer_and_value_receivers(self, shapes: dict[str, DeclarationRecord]) -> None:
        assert shapes["(*Rect).Scale"].receiver == "*Rect"
        assert shapes["(Rect).String"].receiver == "Rect"
        assert shapes["(*Rect).Scale"].kind == "method"
        assert shapes["Area"].kind == "function"

    def test_exported_rule(self, shapes: dict[str, DeclarationRecord]) -> None:
        assert shapes["Area"].exported
        assert shapes["(Rect).String"].exported
        assert not shapes["helper"].exported

    def test_line_span_excludes_doc_comment(self, shapes: dict[str, DeclarationRecord]) -> None:
        area = shapes["Area"]
        assert (area.start_line, area.end_line, area.line_count) == (6, 8, 3)

    def test_records_language(self, shapes: dict[str, DeclarationRecord]) -> None:
        assert {r.language for r in shapes.values()} == {"go"}

    def test_parameter_rename_keeps_signature(self, registry: ExtractorRegistry) -> None:
        renamed = SHAPES_GO.replace("func Area(w, h int)", "func Area(width, height int)")
        records = registry.extract("geo/shapes/shapes.go", renamed.encode())
        area = next(r for r in records if r.name == "Area")
        assert area.signature == "(int, int) (int)"

    def test_root_package(self, registry: ExtractorRegistry) -> None:
        records = registry.extract("main.go", b"package main\n\nfunc main() {}\n")
        assert [(r.package, r.name) for r in records] == [("main", "main")]

    def test_syntax_error_raises(self, registry: ExtractorRegistry) -> None:
        with pytest.raises(ExtractionError):
            registry.extract("x/x.go", b"package x\n\nfunc Broken( {\n")


class TestHelpers:
    @pytest.mark.parametrize(
        ("path", "name", "expected"),
        [
            ("main.go", "main", "main"),
            ("cmd/tool/main.go", "main", "cmd/tool/main"),
            ("pkg/a/b.go", "a", "pkg/a/a"),
        ],
    )
    def test_package_path(self, path: str, name: str, expected: str) -> None:
        assert package_path(path, name) == expected

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("Run", True), ("run", False), ("_x", False), ("Ünicode", True), ("", False)],
    )
    def test_is_exported(self, name: str, expected: bool) -> None:
        assert is_exported(name) is expected
