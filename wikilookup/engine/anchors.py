"""Anchor extraction and ordering for rendered article HTML."""

from __future__ import annotations

import re
from typing import Dict, Iterable, Iterator, List
from urllib.parse import unquote

from bs4 import BeautifulSoup  # type: ignore

from .config import EngineConfig, load_config
from .types import LinkCandidate

# One character on each side of the anchor is captured as its boundary. The
# right boundary is a lookahead so the next anchor can reuse it as its left.
_ANCHOR_RE = re.compile(r'(.)<a href="/wiki/([^"]*)"[^>]*>(.*?)</a>(?=(.))')


def extract_link_candidates(html: str, config: EngineConfig | None = None) -> Iterator[LinkCandidate]:
    """Yield link candidates for every article anchor in ``html``.

    Only anchors pointing at ``/wiki/<title>`` are considered. Anchors whose
    visible text or target is empty, or whose target lives in one of the
    configured excluded namespaces, are skipped without error.

    Parameters
    ----------
    html:
        Rendered article body as returned by the parse API.
    config:
        Engine configuration providing ``excluded_namespaces``.

    Yields
    ------
    LinkCandidate
        Candidates in their order of appearance in ``html``.
    """

    if not html:
        return

    engine_config = config or load_config(None)
    excluded = set(engine_config.excluded_namespaces)

    for match in _ANCHOR_RE.finditer(html):
        left, raw_target, inner, right = match.groups()
        target = _decode_target(raw_target)
        if not target or _namespace_of(target) in excluded:
            continue
        text = _visible_text(inner)
        if not text:
            continue
        yield LinkCandidate(left=left, text=text, right=right, target=target)


def prioritize_candidates(candidates: Iterable[LinkCandidate]) -> List[LinkCandidate]:
    """Deduplicate candidates by key and order them longest key first.

    A later candidate with the same key replaces the target of an earlier
    one but keeps the earlier position, so ties in key length stay in the
    order the keys were first seen.
    """

    unique: Dict[str, LinkCandidate] = {}
    for candidate in candidates:
        unique[candidate.key] = candidate
    return sorted(unique.values(), key=lambda candidate: len(candidate.key), reverse=True)


def _decode_target(raw_target: str) -> str:
    return unquote(raw_target).replace("_", " ").strip()


def _namespace_of(target: str) -> str:
    if ":" not in target:
        return ""
    return target.split(":", 1)[0].strip()


def _visible_text(inner_html: str) -> str:
    if "<" not in inner_html and "&" not in inner_html:
        return inner_html
    return BeautifulSoup(inner_html, "html.parser").get_text()
