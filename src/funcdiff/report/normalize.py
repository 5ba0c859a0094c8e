"""Body text helpers: line slicing and whitespace normalization."""

from __future__ import annotations


def extract_lines(source: str, start_line: int, end_line: int) -> str:
    """Lines ``start_line..end_line`` (1-based, inclusive), clamped to the source.

    Returns "" when the clamped range is empty.
    """
    lines = source.split("\n")
    start = max(start_line, 1)
    end = min(end_line, len(lines))
    if start > end:
        return ""
    return "\n".join(line.removesuffix("\r") for line in lines[start - 1 : end])


def normalize_body(text: str) -> str:
    """Unify line endings, trim trailing blanks per line and outer blank lines.

    ``normalize_body(normalize_body(s)) == normalize_body(s)`` for any s.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    lines = [line.rstrip(" \t") for line in text.split("\n")]
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    return "\n".join(lines)


def bodies_identical(a: str | None, b: str | None) -> bool:
    """Both bodies present, non-empty and equal after normalization."""
    if a is None or b is None:
        return False
    na = normalize_body(a)
    return na != "" and na == normalize_body(b)
