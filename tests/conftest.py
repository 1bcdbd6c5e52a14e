"""Pytest configuration shared across test modules."""

from __future__ import annotations

import json
import os
from typing import Any, Dict, Iterable, List

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "wikilookup_tool.settings")
os.environ.setdefault("DJANGO_SECRET_KEY", "test-secret")
os.environ.setdefault("DJANGO_DEBUG", "true")

from wikilookup.http import HttpResponse  # noqa: E402


class FakeHttpClient:
    """Scripted HTTP client returning one canned response per call."""

    def __init__(self, responses: Iterable[HttpResponse]) -> None:
        self.responses: List[HttpResponse] = list(responses)
        self.calls: List[Dict[str, Any]] = []

    async def get(self, url: str, params, *, timeout: float) -> HttpResponse:
        self.calls.append(dict(params))
        return self.responses.pop(0)


def query_response(pages: Dict[str, Dict[str, Any]]) -> HttpResponse:
    return HttpResponse(body=json.dumps({"batchcomplete": "", "query": {"pages": pages}}))


def parse_response(rendered_html: str) -> HttpResponse:
    return HttpResponse(body=json.dumps({"parse": {"title": "x", "pageid": 1, "text": {"*": rendered_html}}}))
