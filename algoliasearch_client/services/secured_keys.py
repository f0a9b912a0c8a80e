"""Secured API key generation."""

from __future__ import annotations

import base64
import hashlib
import hmac
from typing import Any, Mapping, Sequence

from algoliasearch_client.utils.params import encode_uri_component, get_search_params

QueryParametersOrTagFilters = Mapping[str, Any] | Sequence[str] | str | None


def generate_secured_api_key(
    private_api_key: str,
    query_parameters_or_tag_filters: QueryParametersOrTagFilters = None,
    user_token: str | None = None,
) -> str:
    """Derive a secured, public API key restricted to the given parameters.

    ``query_parameters_or_tag_filters`` accepts four shapes:

    - a list of tag filters, ``["user_42"]``;
    - a bare tag filter string, ``"user_42"``;
    - an already encoded query string, ``"tagFilters=user_42"``;
    - a mapping of search parameters, ``{"tagFilters": "user_42"}``.

    ``user_token`` is appended for the first three shapes only; with a mapping
    it has to be part of the mapping itself.

    The key is the base64 encoding of the hex HMAC-SHA256 signature followed by
    the signed parameter string.
    """

    query = query_parameters_or_tag_filters
    if isinstance(query, (list, tuple)):
        search_params: dict[str, Any] = {"tagFilters": list(query)}
        if user_token:
            search_params["userToken"] = user_token
        params = get_search_params(search_params, "")
    elif isinstance(query, str):
        if "=" not in query:
            params = f"tagFilters={query}"
        else:
            params = query
        if user_token:
            params += f"&userToken={encode_uri_component(user_token)}"
    else:
        params = get_search_params(query, "")

    signature = hmac.new(
        private_api_key.encode("utf-8"),
        params.encode("utf-8"),
        hashlib.sha256,
    ).hexdigest()
    return base64.b64encode(f"{signature}{params}".encode("utf-8")).decode("ascii")


__all__ = ["generate_secured_api_key"]
