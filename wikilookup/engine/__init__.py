"""Link-aware rewriting engine for article extracts."""

from .anchors import extract_link_candidates, prioritize_candidates
from .config import EngineConfig, load_config
from .rewrite import rewrite_links
from .text import is_disambiguation, normalize_sentence_spacing
from .types import LinkCandidate, RewriteResult, RewriteSpan

__all__ = [
    "EngineConfig",
    "LinkCandidate",
    "RewriteResult",
    "RewriteSpan",
    "extract_link_candidates",
    "is_disambiguation",
    "load_config",
    "normalize_sentence_spacing",
    "prioritize_candidates",
    "rewrite_links",
]
