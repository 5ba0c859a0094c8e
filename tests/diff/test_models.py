"""Tests for diff models."""

from __future__ import annotations

from funcdiff.diff.models import DeclarationRecord, DeclKey, Inventory, PackageStats


def _decl(package: str, name: str, receiver: str = "", **kw: object) -> DeclarationRecord:
    fields: dict[str, object] = {
        "file": f"{package}/x.go",
        "signature": "()",
        "exported": name[:1].isupper(),
        "start_line": 1,
        "end_line": 3,
    }
    fields.update(kw)
    return DeclarationRecord(
        package=package, name=name, receiver=receiver, **fields  # type: ignore[arg-type]
    )


class TestDeclarationRecord:
    """DeclarationRecord derived properties."""

    def test_key_is_package_receiver_name(self) -> None:
        decl = _decl("pkg/a", "Run", receiver="*Server")
        assert decl.key == DeclKey("pkg/a", "*Server", "Run")

    def test_line_count_is_inclusive(self) -> None:
        assert _decl("a", "F", start_line=4, end_line=9).line_count == 6

    def test_line_count_never_negative(self) -> None:
        assert _decl("a", "F", start_line=9, end_line=4).line_count == 0

    def test_qualified_name(self) -> None:
        assert _decl("a", "F").qualified_name == "F"
        assert _decl("a", "M", receiver="*T").qualified_name == "(*T).M"

    def test_span(self) -> None:
        assert _decl("a", "F", file="a/f.go", start_line=2, end_line=5).span == "a/f.go:2-5"


class TestDeclKey:
    """DeclKey ordering and display."""

    def test_orders_by_package_then_receiver_then_name(self) -> None:
        keys = [
            DeclKey("b", "", "A"),
            DeclKey("a", "T", "A"),
            DeclKey("a", "", "Z"),
            DeclKey("a", "", "B"),
        ]
        assert sorted(keys) == [
            DeclKey("a", "", "B"),
            DeclKey("a", "", "Z"),
            DeclKey("a", "T", "A"),
            DeclKey("b", "", "A"),
        ]

    def test_str(self) -> None:
        assert str(DeclKey("pkg", "*T", "M")) == "pkg:(*T).M"
        assert str(DeclKey("pkg", "", "F")) == "pkg:F"


class TestInventory:
    """Inventory mapping behavior."""

    def test_iterates_in_sorted_key_order(self) -> None:
        inv = Inventory.from_records(
            "main",
            [_decl("b", "F"), _decl("a", "Z"), _decl("a", "B", receiver="T"), _decl("a", "A")],
        )
        assert list(inv) == sorted(inv.records)
        assert [r.name for r in inv.values()] == ["A", "Z", "B", "F"]

    def test_mapping_protocol(self) -> None:
        decl = _decl("a", "F")
        inv = Inventory.from_records("main", [decl])

        assert len(inv) == 1
        assert decl.key in inv
        assert inv[decl.key] is decl
        assert inv.get(DeclKey("a", "", "missing")) is None

    def test_from_records_later_wins(self) -> None:
        first = _decl("a", "F", start_line=1)
        second = _decl("a", "F", start_line=10)
        inv = Inventory.from_records("main", [first, second])
        assert inv[first.key] is second

    def test_packages_sorted_and_unique(self) -> None:
        inv = Inventory.from_records("main", [_decl("b", "F"), _decl("a", "F"), _decl("a", "G")])
        assert inv.packages() == ["a", "b"]


class TestPackageStats:
    def test_total(self) -> None:
        assert PackageStats(new=1, removed=2, changed=3).total == 6
