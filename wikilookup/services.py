"""Service functions for answering lookup queries.

These wire the lookup pipeline to its default collaborators (configuration
from the Django settings, the urllib HTTP client and the chat formatter) so
the view and the management command share one entry point.
"""

from __future__ import annotations

from typing import List

from django.conf import settings

from .chat import ChatFormatter
from .engine.config import EngineConfig, load_config
from .http import HttpClient, UrllibHttpClient
from .pipeline import ArticleFetchPipeline


def engine_config() -> EngineConfig:
    """Load the engine configuration named by ``settings.WIKILOOKUP_CONFIG``."""

    return load_config(getattr(settings, 'WIKILOOKUP_CONFIG', None))


def build_client(config: EngineConfig) -> HttpClient:
    return UrllibHttpClient(user_agent=config.user_agent)


async def lookup(
    query: str,
    *,
    client: HttpClient | None = None,
    config: EngineConfig | None = None,
    formatter: ChatFormatter | None = None,
) -> str:
    """Run a lookup for ``query`` and return the reply message."""

    config = config or engine_config()
    replies: List[str] = []
    pipeline = ArticleFetchPipeline(
        client or build_client(config),
        replies.append,
        config=config,
        formatter=formatter,
    )
    await pipeline.run(query)
    return replies[0]
