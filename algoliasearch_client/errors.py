"""Errors raised by the Algolia client."""

from __future__ import annotations

from typing import Any


class AlgoliaSearchError(Exception):
    """Base class for every error raised by the client."""

    def __init__(self, message: str, *, more: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.more = more


class Network(AlgoliaSearchError):
    pass


class RequestTimeout(AlgoliaSearchError):
    def __init__(self, message: str = "Request timed out before getting a response") -> None:
        super().__init__(message)


class UnparsableJSON(AlgoliaSearchError):
    def __init__(
        self,
        more: str = "",
        message: str = "Could not parse the incoming response as JSON, see err.more for details",
    ) -> None:
        super().__init__(message, more=more)


__all__ = ["AlgoliaSearchError", "Network", "RequestTimeout", "UnparsableJSON"]
