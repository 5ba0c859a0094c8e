"""Serializable data models for git operations."""

from __future__ import annotations

from dataclasses import dataclass

import pygit2


@dataclass(frozen=True, slots=True)
class RevisionInfo:
    """A revision name resolved to its commit."""

    ref: str
    sha: str
    short_sha: str
    summary: str

    @classmethod
    def from_pygit2(cls, ref: str, commit: pygit2.Commit) -> RevisionInfo:
        sha = str(commit.id)
        return cls(
            ref=ref,
            sha=sha,
            short_sha=sha[:7],
            summary=commit.message.split("\n", 1)[0],
        )
