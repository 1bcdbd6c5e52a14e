"""Asynchronous HTTP access to the MediaWiki API."""

from __future__ import annotations

import asyncio
import http.client
import logging
import urllib.request
from dataclasses import dataclass
from typing import Mapping, Protocol
from urllib.error import HTTPError
from urllib.parse import urlencode

logger = logging.getLogger(__name__)

QueryParams = Mapping[str, str | int]


@dataclass(frozen=True)
class HttpResponse:
    """Outcome of a GET request: either a body or a transport error."""

    body: str | None = None
    error: str | None = None


class HttpClient(Protocol):
    async def get(self, url: str, params: QueryParams, *, timeout: float) -> HttpResponse:
        ...


class UrllibHttpClient:
    """``HttpClient`` backed by ``urllib.request`` running in a worker thread.

    Transport problems are reported through ``HttpResponse.error`` rather than
    raised, so callers handle every outcome from the returned value.
    """

    def __init__(self, user_agent: str) -> None:
        self.user_agent = user_agent

    async def get(self, url: str, params: QueryParams, *, timeout: float) -> HttpResponse:
        return await asyncio.to_thread(self._get, url, params, timeout)

    def _get(self, url: str, params: QueryParams, timeout: float) -> HttpResponse:
        request = urllib.request.Request(
            f"{url}?{urlencode(params)}",
            headers={'User-Agent': self.user_agent, 'Accept': 'application/json'},
        )
        logger.debug("GET %s params=%s", url, dict(params))
        try:
            with urllib.request.urlopen(request, timeout=timeout) as resp:
                data = resp.read()
                encoding = resp.headers.get_content_charset() or 'utf-8'
        except HTTPError as exc:
            return HttpResponse(error=f"HTTP {exc.code} {exc.reason}")
        except OSError as exc:
            reason = getattr(exc, 'reason', None) or exc
            return HttpResponse(error=str(reason))
        except http.client.HTTPException as exc:
            return HttpResponse(error=str(exc) or exc.__class__.__name__)

        try:
            body = data.decode(encoding, errors='replace')
        except LookupError:
            logger.debug("Unknown charset %r, decoding as utf-8", encoding)
            body = data.decode('utf-8', errors='replace')
        return HttpResponse(body=body)
