"""Summary document rendering."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import groupby

from funcdiff.diff.models import DeclarationRecord, DiffResult, Inventory

NONE = "_None_"


def _listing(out: list[str], records: Sequence[DeclarationRecord]) -> None:
    """Records grouped by package, each group ordered by receiver then name."""
    if not records:
        out.append(f"{NONE}\n\n")
        return
    ordered = sorted(records, key=lambda r: r.key)
    for package, group in groupby(ordered, key=lambda r: r.package):
        out.append(f"- `{package}`\n")
        for r in group:
            out.append(f"  - `{r.qualified_name}`\n")
            out.append(f"    - signature: `{r.signature}`\n")
            out.append(
                f"    - file: `{r.file}` "
                f"(lines {r.start_line}–{r.end_line}, {r.line_count} LOC)\n"
            )
        out.append("\n")


def _index(out: list[str], out_dir: str, names: Sequence[str]) -> None:
    if not names:
        return
    root = out_dir.rstrip("/") or out_dir
    out.append(f"Per-function reports (Markdown files) written to `{out_dir}`:\n\n")
    for name in sorted(names):
        out.append(f"- `{root}/{name}`\n")
    out.append("\n")


def render_summary(
    from_ref: str,
    to_ref: str,
    diff: DiffResult,
    *,
    summary_only: bool = False,
    out_dir: str | None = None,
    artifact_names: Sequence[str] = (),
) -> str:
    """The Markdown document printed for a diff run.

    Sections appear in fixed order: header, totals, per-package table, then
    (unless summary_only) new, removed and changed listings. With an output
    directory the changed section becomes an index of the artifact files.
    """
    out: list[str] = [f"### Function Diff: `{from_ref}` → `{to_ref}`\n\n"]

    out.append("#### Summary\n")
    out.append(f"- Total functions in `{from_ref}`: {diff.from_total}\n")
    out.append(f"- Total functions in `{to_ref}`: {diff.to_total}\n")
    out.append("\n")
    out.append(f"- New functions in `{from_ref}` only: {len(diff.new)}\n")
    out.append(f"- Removed functions (only in `{to_ref}`): {len(diff.removed)}\n")
    out.append(f"- Changed functions: {len(diff.changed)}\n\n")

    out.append("#### High-Level Changes by Package\n\n")
    out.append("| Package | New | Removed | Changed |\n")
    out.append("|---------|-----|---------|---------|\n")
    for package in diff.packages():
        stats = diff.package_stats[package]
        out.append(f"| `{package}` | {stats.new} | {stats.removed} | {stats.changed} |\n")
    out.append("\n")

    if summary_only:
        if out_dir:
            _index(out, out_dir, artifact_names)
        return "".join(out)

    out.append(f"#### New Functions in `{from_ref}` (not in `{to_ref}`)\n\n")
    _listing(out, diff.new)

    out.append(f"#### Removed Functions (only in `{to_ref}`)\n\n")
    _listing(out, diff.removed)

    out.append("#### Changed Functions\n\n")
    if not diff.changed:
        out.append(f"{NONE}\n\n")
    elif out_dir:
        _index(out, out_dir, artifact_names)
    else:
        for pair in diff.changed:
            out.append(f"- `{pair.from_decl.file}`: `{pair.from_decl.qualified_name}`\n")
        out.append("\n")

    return "".join(out)


def render_inventory(inventory: Inventory) -> str:
    """Markdown listing of one revision's declarations."""
    records = list(inventory.values())
    out: list[str] = [f"### Declarations in `{inventory.revision}`\n\n"]
    out.append(f"- Total functions: {len(records)}\n")
    out.append(f"- Packages: {len(inventory.packages())}\n")
    out.append(f"- Files scanned: {inventory.files_scanned}\n")
    out.append(f"- Files skipped: {len(inventory.files_skipped)}\n\n")
    _listing(out, records)
    return "".join(out)
