"""Failures that end a lookup with a single user-facing message."""

from __future__ import annotations


class LookupFailure(Exception):
    """Base class for terminal lookup failures.

    ``message`` is the text sent back to the user; ``str(exc)`` is the same.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class TransportError(LookupFailure):
    """The request never produced a response (timeout, DNS, refused...)."""

    def __init__(self, error: str) -> None:
        super().__init__(
            f"There was an error getting data from Wikipedia: {error}. Please try again later."
        )
        self.error = error


class EmptyResponseError(LookupFailure):
    def __init__(self) -> None:
        super().__init__("Empty reply received from Wikipedia. Please try again later.")


class DecodeError(LookupFailure):
    def __init__(self) -> None:
        super().__init__("Unable to parse Wikipedia's reply.")


class NotFoundError(LookupFailure):
    def __init__(self, title: str) -> None:
        super().__init__(f"Couldn't find a Wikipedia entry for <highlight>{title}<end>.")
        self.title = title
