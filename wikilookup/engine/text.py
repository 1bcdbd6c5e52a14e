"""Plain-text helpers applied to article extracts."""

from __future__ import annotations

import re

_MISSING_SENTENCE_SPACE_RE = re.compile(r"([a-z0-9])\.([A-Z])")

DISAMBIGUATION_SUFFIX = "may refer to:"


def normalize_sentence_spacing(text: str) -> str:
    """Restore the space after a sentence-ending period lost by the extractor."""

    return _MISSING_SENTENCE_SPACE_RE.sub(r"\1. \2", text)


def is_disambiguation(extract: str | None) -> bool:
    """Return True when the extract is a disambiguation stub."""

    return (extract or "").rstrip().endswith(DISAMBIGUATION_SUFFIX)
