"""Asyncio client for the Algolia search REST API."""

from __future__ import annotations

import platform
import sys

from algoliasearch_client.errors import AlgoliaSearchError, Network, RequestTimeout, UnparsableJSON

if sys.version_info < (3, 10):
    raise AlgoliaSearchError(f"Python {platform.python_version()} is not supported")

from algoliasearch_client.client import SearchClient, create_client  # noqa: E402
from algoliasearch_client.services.secured_keys import generate_secured_api_key  # noqa: E402
from algoliasearch_client.version import USER_AGENT, __version__  # noqa: E402

__all__ = [
    "AlgoliaSearchError",
    "Network",
    "RequestTimeout",
    "SearchClient",
    "USER_AGENT",
    "UnparsableJSON",
    "__version__",
    "create_client",
    "generate_secured_api_key",
]
