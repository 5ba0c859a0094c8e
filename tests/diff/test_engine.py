"""Tests for the pure diff engine.

Covers:
- classification of new / removed / changed / unchanged keys
- per-package counters
- partition, idempotence and symmetry properties
"""

from __future__ import annotations

import itertools

import pytest

from funcdiff.diff.engine import classify, compute_diff, is_changed
from funcdiff.diff.models import DeclarationRecord, DeclKey, Inventory


def _decl(
    package: str,
    name: str,
    receiver: str = "",
    *,
    signature: str = "()",
    file: str | None = None,
    start_line: int = 1,
    end_line: int = 3,
) -> DeclarationRecord:
    return DeclarationRecord(
        package=package,
        file=file or f"{package}.go",
        name=name,
        receiver=receiver,
        signature=signature,
        exported=name[:1].isupper(),
        start_line=start_line,
        end_line=end_line,
        language="go",
    )


def _inv(revision: str, *records: DeclarationRecord) -> Inventory:
    return Inventory.from_records(revision, list(records))


class TestWorkedExamples:
    """Behavior on small hand-built inventories."""

    def test_signature_change_is_changed(self) -> None:
        """Same key, different signature: changed, counted under its package."""
        # Given
        before = _decl("a", "F", signature="(x int)", file="a.go", start_line=1, end_line=3)
        after = _decl("a", "F", signature="(x int, y int)", file="a.go", start_line=1, end_line=3)

        # When
        result = compute_diff(_inv("dev", before), _inv("main", after))

        # Then
        assert [p.key for p in result.changed] == [DeclKey("a", "", "F")]
        assert result.changed[0].signature_changed
        assert result.package_stats["a"].changed == 1
        assert result.new == () and result.removed == ()

    def test_key_only_in_from_is_new(self) -> None:
        """A method missing from the to-side is new, with nothing else counted."""
        decl = _decl("b", "M", receiver="*T")

        result = compute_diff(_inv("dev", decl), _inv("main"))

        assert result.new == (decl,)
        stats = result.package_stats["b"]
        assert (stats.new, stats.removed, stats.changed) == (1, 0, 0)

    def test_identical_key_is_not_reported(self) -> None:
        decl = _decl("c", "G", signature="(string) (error)")
        same = _decl("c", "G", signature="(string) (error)")

        result = compute_diff(_inv("dev", decl), _inv("main", same))

        assert result.is_empty
        assert result.package_stats == {}
        assert result.from_total == result.to_total == 1

    def test_key_only_in_to_is_removed_under_to_package(self) -> None:
        gone = _decl("old/pkg", "Legacy")

        result = compute_diff(_inv("dev"), _inv("main", gone))

        assert result.removed == (gone,)
        assert result.package_stats["old/pkg"].removed == 1


class TestChangeSensitivity:
    """Which field differences count as a change."""

    @pytest.mark.parametrize(
        "changes",
        [
            {"signature": "(int)"},
            {"file": "moved.go"},
            {"start_line": 2},
            {"end_line": 30},
        ],
    )
    def test_each_sensitive_field_registers(self, changes: dict[str, object]) -> None:
        base = _decl("a", "F")
        fields = {
            "signature": base.signature,
            "file": base.file,
            "start_line": base.start_line,
            "end_line": base.end_line,
        }
        fields.update(changes)
        other = _decl("a", "F", **fields)  # type: ignore[arg-type]
        assert is_changed(base, other)

    def test_export_flag_alone_is_not_a_change(self) -> None:
        base = _decl("a", "F")
        flipped = DeclarationRecord(
            package=base.package,
            file=base.file,
            name=base.name,
            receiver=base.receiver,
            signature=base.signature,
            exported=not base.exported,
            start_line=base.start_line,
            end_line=base.end_line,
        )
        assert not is_changed(base, flipped)

    def test_pointer_and_value_receivers_are_distinct_keys(self) -> None:
        result = compute_diff(
            _inv("dev", _decl("a", "M", receiver="*T")),
            _inv("main", _decl("a", "M", receiver="T")),
        )
        assert [d.receiver for d in result.new] == ["*T"]
        assert [d.receiver for d in result.removed] == ["T"]


def _sample_inventories() -> list[tuple[Inventory, Inventory]]:
    pool = [
        _decl("a", "F"),
        _decl("a", "F", signature="(int)"),
        _decl("a", "G", receiver="*T"),
        _decl("b", "H", start_line=5, end_line=9),
        _decl("b", "H", start_line=6, end_line=10),
        _decl("c", "K"),
    ]
    combos = []
    for left, right in itertools.product(
        itertools.combinations(pool, 2), itertools.combinations(pool, 3)
    ):
        combos.append((_inv("dev", *left), _inv("main", *right)))
    return combos


class TestProperties:
    """Partition, idempotence and symmetry over many small inventories."""

    @pytest.mark.parametrize(("from_inv", "to_inv"), _sample_inventories())
    def test_every_key_in_exactly_one_bucket(self, from_inv: Inventory, to_inv: Inventory) -> None:
        result = compute_diff(from_inv, to_inv)
        new = {d.key for d in result.new}
        removed = {d.key for d in result.removed}
        changed = {p.key for p in result.changed}

        assert not (new & removed) and not (new & changed) and not (removed & changed)
        for key in set(from_inv) | set(to_inv):
            bucket = classify(key, from_inv, to_inv)
            assert bucket is not None
            assert (key in new) == (bucket == "new")
            assert (key in removed) == (bucket == "removed")
            assert (key in changed) == (bucket == "changed")

    @pytest.mark.parametrize(("inv", "_other"), _sample_inventories()[:20])
    def test_diff_with_itself_is_empty(self, inv: Inventory, _other: Inventory) -> None:
        result = compute_diff(inv, inv)
        assert result.is_empty
        assert result.from_total == result.to_total == len(inv)

    @pytest.mark.parametrize(("from_inv", "to_inv"), _sample_inventories())
    def test_new_mirrors_removed(self, from_inv: Inventory, to_inv: Inventory) -> None:
        forward = compute_diff(from_inv, to_inv)
        backward = compute_diff(to_inv, from_inv)
        assert {d.key for d in forward.new} == {d.key for d in backward.removed}
        assert {p.key for p in forward.changed} == {p.key for p in backward.changed}

    @pytest.mark.parametrize(("from_inv", "to_inv"), _sample_inventories()[:20])
    def test_outputs_sorted_by_key(self, from_inv: Inventory, to_inv: Inventory) -> None:
        result = compute_diff(from_inv, to_inv)
        for seq in (result.new, result.removed):
            keys = [d.key for d in seq]
            assert keys == sorted(keys)
        assert list(result.package_stats) == sorted(result.package_stats)


class TestEdgeCases:
    def test_empty_inventories(self) -> None:
        result = compute_diff(_inv("dev"), _inv("main"))
        assert result.is_empty
        assert (result.from_total, result.to_total) == (0, 0)
        assert result.package_stats == {}

    def test_plain_dicts_are_accepted(self) -> None:
        decl = _decl("a", "F")
        result = compute_diff({decl.key: decl}, {})
        assert result.new == (decl,)

    def test_classify_unknown_key(self) -> None:
        assert classify(DeclKey("x", "", "y"), _inv("dev"), _inv("main")) is None

    def test_classify_unchanged(self) -> None:
        decl = _decl("a", "F")
        assert classify(decl.key, _inv("dev", decl), _inv("main", decl)) == "unchanged"
