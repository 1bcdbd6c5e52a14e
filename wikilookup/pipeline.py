"""Three-stage article lookup: summary, then links or render, then reply.

Each query runs through its own ``ArticleFetchPipeline`` instance. The
stages are awaited one after another and every failure ends the query with
exactly one reply; nothing is retried.
"""

from __future__ import annotations

import enum
import html
import logging
from typing import Callable, Dict

from .chat import ChatFormatter
from .contracts import Article, decode_article, decode_rendered_html
from .engine.anchors import extract_link_candidates, prioritize_candidates
from .engine.config import EngineConfig, load_config
from .engine.rewrite import rewrite_links
from .engine.text import is_disambiguation, normalize_sentence_spacing
from .errors import EmptyResponseError, LookupFailure, TransportError
from .http import HttpClient, QueryParams

logger = logging.getLogger(__name__)

ReplySink = Callable[[str], None]


class PipelineState(enum.Enum):
    IDLE = 'idle'
    SUMMARY_REQUESTED = 'summary_requested'
    LINKS_REQUESTED = 'links_requested'
    RENDER_REQUESTED = 'render_requested'
    REPLIED = 'replied'


def summary_params(title: str) -> Dict[str, str | int]:
    return {
        'format': 'json',
        'action': 'query',
        'prop': 'extracts',
        'exintro': 1,
        'explaintext': 1,
        'redirects': 1,
        'titles': title,
    }


def links_params(title: str) -> Dict[str, str | int]:
    return {
        'format': 'json',
        'action': 'query',
        'prop': 'links',
        'pllimit': 'max',
        'redirects': 1,
        'plnamespace': 0,
        'titles': title,
    }


def render_params(page_id: int) -> Dict[str, str | int]:
    return {
        'format': 'json',
        'action': 'parse',
        'prop': 'text',
        'pageid': page_id,
    }


class ArticleFetchPipeline:
    """State machine answering one lookup query.

    Parameters
    ----------
    client:
        Asynchronous HTTP client used for the API calls.
    reply:
        Sink receiving the single final message.
    config:
        Engine configuration; defaults are used when omitted.
    formatter:
        Chat markup builder for commands and blobs.
    """

    def __init__(
        self,
        client: HttpClient,
        reply: ReplySink,
        *,
        config: EngineConfig | None = None,
        formatter: ChatFormatter | None = None,
    ) -> None:
        self.client = client
        self.reply = reply
        self.config = config or load_config(None)
        self.formatter = formatter or ChatFormatter()
        self.state = PipelineState.IDLE
        self.article: Article | None = None

    async def run(self, query: str) -> None:
        """Answer ``query`` and deliver exactly one reply."""

        if self.state is not PipelineState.IDLE:
            raise RuntimeError('A pipeline answers a single query; create a new one.')

        try:
            message = await self._lookup(html.unescape(query))
        except LookupFailure as exc:
            logger.info("lookup for %r failed in state %s: %s", query, self.state.value, exc.message)
            message = exc.message

        self._transition(PipelineState.REPLIED)
        self.reply(message)

    async def _lookup(self, title: str) -> str:
        self._transition(PipelineState.SUMMARY_REQUESTED)
        article = decode_article(await self._fetch(summary_params(title)))
        self.article = article

        # A stub listing several meanings: present the pages it links to.
        if is_disambiguation(article.extract):
            self._transition(PipelineState.LINKS_REQUESTED)
            listing = decode_article(await self._fetch(links_params(article.title)))
            return self._disambiguation_message(listing)

        self._transition(PipelineState.RENDER_REQUESTED)
        rendered = decode_rendered_html(await self._fetch(render_params(article.id)))
        return self._article_message(article, rendered)

    async def _fetch(self, params: QueryParams) -> str:
        response = await self.client.get(self.config.api_url, params, timeout=self.config.timeout)
        if response.error:
            raise TransportError(response.error)
        if not response.body:
            raise EmptyResponseError()
        return response.body

    def _disambiguation_message(self, listing: Article) -> str:
        entries = [
            self.formatter.chat_command(link.title, self.config.command_for(link.title))
            for link in listing.links
        ]
        return self.formatter.blob(f"{listing.title} (disambiguation)", "\n".join(entries))

    def _article_message(self, article: Article, rendered_html: str) -> str:
        text = normalize_sentence_spacing(article.extract or "")
        candidates = prioritize_candidates(extract_link_candidates(rendered_html, self.config))
        result = rewrite_links(text, candidates, self._reference)
        logger.debug(
            "linked %d of %d candidates for %r", len(result.spans), len(candidates), article.title
        )
        return self.formatter.blob(article.title, result.text)

    def _reference(self, label: str, target: str) -> str:
        return self.formatter.chat_command(label, self.config.command_for(target))

    def _transition(self, state: PipelineState) -> None:
        logger.debug("lookup pipeline %s -> %s", self.state.value, state.value)
        self.state = state
