"""Client factory and the thin facade around the request executor."""

from __future__ import annotations

import json
from typing import Any, Mapping

import httpx

from algoliasearch_client.config import ClientSettings, get_settings
from algoliasearch_client.errors import AlgoliaSearchError
from algoliasearch_client.logging import build_logger
from algoliasearch_client.services.agent import get_agent
from algoliasearch_client.services.requester import (
    HttpxRequester,
    RequestOptions,
    Requester,
    ResponseOutcome,
)
from algoliasearch_client.services.secured_keys import (
    QueryParametersOrTagFilters,
    generate_secured_api_key,
)
from algoliasearch_client.utils.promises import AsyncioPromises
from algoliasearch_client.version import USER_AGENT


class SearchClient:
    """Authenticated entry point bound to one Algolia application."""

    def __init__(
        self,
        application_id: str,
        api_key: str,
        settings: ClientSettings,
        requester: Requester,
    ) -> None:
        self.application_id = application_id
        self._api_key = api_key
        self.settings = settings
        self._requester = requester

    @property
    def host(self) -> str:
        return f"{self.application_id}-dsn.algolia.net"

    @property
    def promises(self) -> AsyncioPromises:
        return self._requester.promises

    async def request(
        self,
        method: str,
        path: str,
        *,
        body: Mapping[str, Any] | str | None = None,
        headers: Mapping[str, str] | None = None,
        timeout: int | None = None,
    ) -> ResponseOutcome:
        url = f"{self.settings.protocol}//{self.host}/{path.lstrip('/')}"
        request_headers = {
            "x-algolia-application-id": self.application_id,
            "x-algolia-api-key": self._api_key,
            "x-algolia-agent": self.settings.user_agent or USER_AGENT,
        }
        request_headers.update(headers or {})
        if body is not None and not isinstance(body, str):
            body = json.dumps(body, ensure_ascii=False)

        options = RequestOptions(
            method=method,
            headers=request_headers,
            body=body,
            timeout=timeout if timeout is not None else self.settings.timeout,
        )
        return await self._requester.execute(url, options)

    def generate_secured_api_key(
        self,
        private_api_key: str,
        query_parameters_or_tag_filters: QueryParametersOrTagFilters = None,
        user_token: str | None = None,
    ) -> str:
        return generate_secured_api_key(private_api_key, query_parameters_or_tag_filters, user_token)

    async def destroy(self) -> None:
        await self._requester.destroy()

    async def __aenter__(self) -> SearchClient:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.destroy()


def create_client(
    application_id: str | None = None,
    api_key: str | None = None,
    settings: ClientSettings | None = None,
    *,
    http_agent: httpx.AsyncClient | None = None,
) -> SearchClient:
    """Build a ``SearchClient`` for ``application_id``.

    Settings are copied so later changes by the caller do not leak into the
    client. ``http_agent`` is used as is and shared with the caller.
    """

    settings = (settings or get_settings()).model_copy(deep=True)

    application_id = application_id or settings.application_id
    if not application_id:
        raise AlgoliaSearchError(
            "Please provide an application ID. Usage: create_client(application_id, api_key, settings)"
        )
    if api_key is None and settings.api_key is not None:
        api_key = settings.api_key.get_secret_value()

    if not settings.user_agent:
        settings.user_agent = USER_AGENT
    logger = build_logger(settings.debug, application_id=application_id)
    agent = (
        http_agent
        if http_agent is not None
        else get_agent(settings.protocol, settings.agent, logger=logger)
    )
    logger.debug(
        "algolia_client_created",
        protocol=settings.protocol,
        timeout_ms=settings.timeout,
        custom_agent=http_agent is not None,
    )
    return SearchClient(application_id, api_key or "", settings, HttpxRequester(agent, logger=logger))


__all__ = ["SearchClient", "create_client"]
