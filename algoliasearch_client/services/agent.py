"""Keep-alive connection pool used when the caller brings no agent."""

from __future__ import annotations

import httpx

from algoliasearch_client.config import AgentSettings
from algoliasearch_client.errors import AlgoliaSearchError
from algoliasearch_client.logging import build_logger

SUPPORTED_PROTOCOLS = ("http:", "https:")


def get_agent(
    protocol: str,
    settings: AgentSettings | None = None,
    logger=None,
) -> httpx.AsyncClient:
    if protocol not in SUPPORTED_PROTOCOLS:
        raise AlgoliaSearchError(f"Unsupported protocol {protocol!r}, use one of {SUPPORTED_PROTOCOLS}")

    settings = settings or AgentSettings()
    limits = httpx.Limits(
        max_connections=settings.max_connections,
        max_keepalive_connections=settings.max_keepalive_connections,
        keepalive_expiry=settings.keepalive_expiry_seconds,
    )
    logger = logger if logger is not None else build_logger()
    logger.debug(
        "algolia_agent_created",
        protocol=protocol,
        max_connections=settings.max_connections,
        keepalive_expiry=settings.keepalive_expiry_seconds,
    )
    # The executor enforces its own global deadline.
    return httpx.AsyncClient(limits=limits, timeout=None, http2=False)


__all__ = ["get_agent", "SUPPORTED_PROTOCOLS"]
