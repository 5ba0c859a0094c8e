"""Per-declaration Markdown artifacts for changed declarations.

Each artifact shows both sides of a changed pair: the reconstructed header,
location and the body re-read from the file at that revision. Rendering is a
pure function of its inputs, so two renders of the same pair are
byte-identical.
"""

from __future__ import annotations

import hashlib
from collections.abc import Callable
from dataclasses import dataclass

import structlog

from funcdiff.config.constants import BODY_UNAVAILABLE, REPORT_HASH_BYTES
from funcdiff.diff.models import ChangedPair, DeclarationRecord, DeclKey
from funcdiff.git.errors import GitError
from funcdiff.parsing.packs import get_pack
from funcdiff.report.normalize import bodies_identical, extract_lines

log = structlog.get_logger(__name__)

ReadSource = Callable[[str, str], str]
"""``read_source(revision, path)`` returns file text or raises GitError."""


@dataclass(frozen=True, slots=True)
class Artifact:
    """One rendered artifact, not yet written anywhere."""

    key: DeclKey
    name: str
    content: str
    identical: bool


def _go_header(record: DeclarationRecord) -> str:
    recv = f"({record.receiver}) " if record.receiver else ""
    return f"func {recv}{record.name}{record.signature}"


def _ts_header(record: DeclarationRecord) -> str:
    if record.receiver:
        return f"{record.receiver}.{record.name}{record.signature}"
    return f"function {record.name}{record.signature}"


# Language family -> header reconstruction
_HEADERS: dict[str, Callable[[DeclarationRecord], str]] = {
    "go": _go_header,
    "typescript": _ts_header,
}


def format_header(record: DeclarationRecord) -> str:
    pack = get_pack(record.language)
    family = pack.family if pack is not None else "go"
    return _HEADERS[family](record)


def code_fence(record: DeclarationRecord) -> str:
    pack = get_pack(record.language)
    return pack.code_fence if pack is not None else ""


def report_hash(text: str) -> str:
    return hashlib.sha1(text.encode("utf-8")).digest()[:REPORT_HASH_BYTES].hex()


class SourceCache:
    """Reads each (revision, path) once per report and slices bodies out of it."""

    def __init__(self, read_source: ReadSource) -> None:
        self._read_source = read_source
        self._texts: dict[tuple[str, str], str | None] = {}

    def _text(self, revision: str, path: str) -> str | None:
        cache_key = (revision, path)
        if cache_key not in self._texts:
            try:
                self._texts[cache_key] = self._read_source(revision, path)
            except GitError as e:
                log.warning("body_unavailable", revision=revision, path=path, error=str(e))
                self._texts[cache_key] = None
        return self._texts[cache_key]

    def body(self, revision: str, record: DeclarationRecord) -> str | None:
        """Declaration body at revision, or None when it cannot be recovered."""
        text = self._text(revision, record.file)
        if text is None:
            return None
        body = extract_lines(text, record.start_line, record.end_line)
        if not body.strip():
            log.warning(
                "body_unavailable",
                revision=revision,
                path=record.file,
                error="empty line range",
            )
            return None
        return body


def _side(out: list[str], ref: str, record: DeclarationRecord, body: str | None) -> None:
    fence = code_fence(record)
    out.append(f"#### {ref}\n\n")
    out.append(f"```{fence}\n{format_header(record)}\n```\n")
    out.append(f"- file: `{record.file}`\n")
    out.append(
        f"- lines: {record.start_line}–{record.end_line} ({record.line_count} LOC)\n\n"
    )
    if body is not None:
        out.append(f"```{fence}\n{body}\n```\n\n")
    else:
        out.append(f"{BODY_UNAVAILABLE}\n\n")


def render_artifact(
    from_ref: str,
    to_ref: str,
    pair: ChangedPair,
    from_body: str | None,
    to_body: str | None,
    *,
    fingerprint: bool = True,
) -> str:
    """Markdown for one changed pair."""
    a, b = pair.from_decl, pair.to_decl
    out: list[str] = [f"### {a.qualified_name} — `{a.file}`\n\n"]

    _side(out, from_ref, a, from_body)
    _side(out, to_ref, b, to_body)

    if pair.signature_changed:
        out.append("#### Signature Change\n\n")
        out.append(f"- {from_ref}: `{a.signature}`\n")
        out.append(f"- {to_ref}: `{b.signature}`\n\n")

    if bodies_identical(from_body, to_body):
        out.append(
            f"> Note: function bodies are identical between `{from_ref}` and `{to_ref}`.\n\n"
        )

    text = "".join(out)
    if fingerprint:
        text += f"_report hash: {report_hash(text)}_\n"
    return text
