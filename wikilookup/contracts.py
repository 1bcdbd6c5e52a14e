"""Typed envelopes for the MediaWiki API responses the lookup consumes.

Responses are validated strictly: a body whose shape does not match raises
``DecodeError`` instead of yielding half-populated objects.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import DecodeError, NotFoundError

NOT_FOUND_PAGE_ID = -1


class LinkReference(BaseModel):
    """One outbound link of a page, as listed by ``prop=links``."""

    model_config = ConfigDict(frozen=True, strict=True, populate_by_name=True, extra="ignore")

    namespace: int = Field(alias="ns")
    title: str


class Article(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    namespace: int
    title: str
    extract: str | None = None
    links: tuple[LinkReference, ...] = ()


class _PagePayload(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore")

    ns: int = 0
    title: str
    extract: str | None = None
    links: list[LinkReference] = Field(default_factory=list)


class _QueryBody(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore")

    pages: dict[str, _PagePayload] = Field(min_length=1)


class QueryEnvelope(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore")

    query: _QueryBody


class _RenderedText(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore")

    html: str = Field(alias="*")


class _ParseBody(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore")

    text: _RenderedText


class ParseEnvelope(BaseModel):
    model_config = ConfigDict(strict=True, extra="ignore")

    parse: _ParseBody


def decode_article(body: str) -> Article:
    """Decode a ``action=query`` response into the first page it lists.

    Raises ``DecodeError`` on malformed JSON or an unexpected shape, and
    ``NotFoundError`` when the API reports the page as missing.
    """

    try:
        envelope = QueryEnvelope.model_validate_json(body)
    except ValidationError as exc:
        raise DecodeError() from exc

    raw_id, page = next(iter(envelope.query.pages.items()))
    try:
        page_id = int(raw_id)
    except ValueError as exc:
        raise DecodeError() from exc

    if page_id == NOT_FOUND_PAGE_ID:
        raise NotFoundError(page.title)

    return Article(
        id=page_id,
        namespace=page.ns,
        title=page.title,
        extract=page.extract,
        links=tuple(page.links),
    )


def decode_rendered_html(body: str) -> str:
    """Return the rendered HTML carried by an ``action=parse`` response."""

    try:
        envelope = ParseEnvelope.model_validate_json(body)
    except ValidationError as exc:
        raise DecodeError() from exc
    return envelope.parse.text.html
