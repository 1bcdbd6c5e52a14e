"""Typed data structures used by the link rewriting engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class LinkCandidate:
    """A rewrite opportunity taken from one anchor of the rendered article.

    ``left`` and ``right`` are the single characters that surrounded the
    anchor tag in the rendered HTML. They are part of the match so that
    punctuation next to the linked term stays where it was.
    """

    left: str
    text: str
    right: str
    target: str

    @property
    def key(self) -> str:
        return f"{self.left}{self.text}{self.right}"


@dataclass(frozen=True)
class RewriteSpan:
    """Half-open range of working text produced by an earlier rewrite."""

    start: int
    end: int

    def contains(self, position: int) -> bool:
        return self.start <= position < self.end

    def shifted(self, offset: int) -> "RewriteSpan":
        return RewriteSpan(self.start + offset, self.end + offset)


@dataclass(frozen=True)
class RewriteResult:
    """Rewritten text together with the spans that hold clickable references."""

    text: str
    spans: List[RewriteSpan] = field(default_factory=list)
