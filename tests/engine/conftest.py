"""Shared fixtures for engine tests."""

from __future__ import annotations

import pytest

from wikilookup.engine.config import load_config
from wikilookup.engine.types import LinkCandidate


@pytest.fixture()
def engine_config():
    """Provide a fresh copy of the default engine configuration."""

    return load_config(None)


def make_candidate(text: str, target: str | None = None, *, left: str = " ", right: str = " ") -> LinkCandidate:
    return LinkCandidate(left=left, text=text, right=right, target=target or text)


def make_reference(label: str, target: str) -> str:
    return f"<a href='chatcmd:///tell <myname> wiki {target}'>{label}</a>"
