"""Overlap-safe rewriting of linked terms into clickable references."""

from __future__ import annotations

from typing import Callable, List, Sequence

from .types import LinkCandidate, RewriteResult, RewriteSpan

OPEN_MARKER = "<a"
CLOSE_MARKER = "</a"

ReferenceBuilder = Callable[[str, str], str]


def rewrite_links(
    text: str,
    candidates: Sequence[LinkCandidate],
    make_reference: ReferenceBuilder,
) -> RewriteResult:
    """Replace the first mention of each candidate with a reference.

    Candidates are applied in the given order, which is expected to be the
    longest-key-first order produced by ``prioritize_candidates``. For each
    candidate only the first occurrence of its key (boundary characters
    included) in the working text is considered. The candidate is dropped
    when that occurrence overlaps a span written by an earlier candidate or
    sits after an opening ``<a`` marker that has not been closed yet; later
    occurrences are never linked instead. Only the visible text is swapped
    for the reference; the boundary characters stay in place.

    Parameters
    ----------
    text:
        The normalized plain-text extract.
    candidates:
        Ordered link candidates.
    make_reference:
        Callable receiving ``(label, target)`` and returning the markup of a
        clickable reference.

    Returns
    -------
    RewriteResult
        The new text and the spans occupied by inserted references.
    """

    working = text
    spans: List[RewriteSpan] = []

    for candidate in candidates:
        position = working.find(candidate.key)
        if position < 0 or _is_rejected(working, position, len(candidate.key), spans):
            continue

        start = position + len(candidate.left)
        end = start + len(candidate.text)
        reference = make_reference(candidate.text, candidate.target)
        working = working[:start] + reference + working[end:]

        offset = len(reference) - (end - start)
        spans = [span.shifted(offset) if span.start >= end else span for span in spans]
        spans.append(RewriteSpan(start, start + len(reference)))
        spans.sort(key=lambda span: span.start)

    return RewriteResult(text=working, spans=spans)


def inside_open_marker(text: str, position: int) -> bool:
    """Return True when ``position`` follows an ``<a`` that is not yet closed."""

    before = text[:position]
    return before.rfind(OPEN_MARKER) > before.rfind(CLOSE_MARKER)


def _is_rejected(text: str, position: int, length: int, spans: Sequence[RewriteSpan]) -> bool:
    return _overlaps(position, position + length, spans) or inside_open_marker(text, position)


def _overlaps(start: int, end: int, spans: Sequence[RewriteSpan]) -> bool:
    return any(start < span.end and span.start < end for span in spans)
