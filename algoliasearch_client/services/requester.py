"""Single HTTP request lifecycle against the Algolia REST API."""

from __future__ import annotations

import asyncio
import inspect
import json
from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol

import httpx

from algoliasearch_client.config import DEFAULT_TIMEOUT_MS
from algoliasearch_client.errors import AlgoliaSearchError, Network, RequestTimeout, UnparsableJSON
from algoliasearch_client.logging import build_logger
from algoliasearch_client.utils.promises import AsyncioPromises

DEFAULT_PORTS = {"https": 443, "http": 80}


@dataclass(slots=True, frozen=True)
class RequestOptions:
    method: str = "GET"
    headers: Mapping[str, str] = field(default_factory=dict)
    body: str | None = None
    timeout: int = DEFAULT_TIMEOUT_MS


@dataclass(slots=True)
class ResponseOutcome:
    body: Any
    status_code: int
    headers: dict[str, str]


@dataclass(slots=True, frozen=True)
class ParsedUrl:
    scheme: str
    host: str
    port: int
    path: str
    url: httpx.URL


def parse_url(raw_url: str) -> ParsedUrl:
    """Parse ``raw_url`` and pin the port instead of relying on agent defaults."""

    try:
        url = httpx.URL(raw_url)
    except httpx.InvalidURL as exc:
        raise AlgoliaSearchError(f"Invalid request URL: {raw_url}") from exc

    if url.scheme not in DEFAULT_PORTS or not url.host:
        raise AlgoliaSearchError(f"Unsupported request URL: {raw_url}")

    port = url.port if url.port is not None else DEFAULT_PORTS[url.scheme]
    return ParsedUrl(
        scheme=url.scheme,
        host=url.host,
        port=port,
        path=url.raw_path.decode("ascii"),
        url=url.copy_with(port=port),
    )


class Requester(Protocol):
    """What the client facade needs from a transport implementation."""

    promises: AsyncioPromises

    async def execute(self, url: str, options: RequestOptions) -> ResponseOutcome:
        ...

    async def destroy(self) -> None:
        ...


class HttpxRequester:
    """Run requests through a shared, caller-owned ``httpx.AsyncClient``.

    Each call is independent: one deadline covers connecting, waiting for the
    headers and reading the whole body. Exactly one outcome settles a call,
    either a ``ResponseOutcome`` or one of ``Network``, ``RequestTimeout`` and
    ``UnparsableJSON``.
    """

    def __init__(
        self,
        agent: httpx.AsyncClient,
        promises: AsyncioPromises | None = None,
        logger=None,
    ) -> None:
        self._agent = agent
        self.promises = promises or AsyncioPromises()
        self._logger = logger if logger is not None else build_logger()

    @property
    def agent(self) -> httpx.AsyncClient:
        return self._agent

    async def execute(self, url: str, options: RequestOptions) -> ResponseOutcome:
        log = self._logger.bind(url=url, method=options.method, timeout_ms=options.timeout)
        log.debug("algolia_request")

        request = self._build_request(parse_url(url), options)
        try:
            return await asyncio.wait_for(self._send(request), timeout=options.timeout / 1000)
        except asyncio.TimeoutError as exc:
            log.debug("algolia_request_timeout")
            raise RequestTimeout() from exc
        except httpx.RequestError as exc:
            log.debug("algolia_request_failed", error=str(exc))
            raise Network(str(exc), more=exc) from exc
        except UnparsableJSON as exc:
            log.debug("algolia_response_unparsable", preview=str(exc.more)[:200])
            raise

    def _build_request(self, parsed: ParsedUrl, options: RequestOptions) -> httpx.Request:
        method = options.method.upper()
        headers = httpx.Headers({"connection": "keep-alive", "accept": "application/json"})
        headers.update(options.headers)
        # Only gzip and deflate bodies are decoded, so callers cannot change this.
        headers["accept-encoding"] = "gzip,deflate"

        content: bytes | None = None
        if options.body:
            content = options.body.encode("utf-8")
            headers["content-type"] = "application/json"
            headers["content-length"] = str(len(content))
        elif method == "DELETE":
            # Without it a bodiless DELETE may go out chunked, which proxies
            # reject on a reused connection.
            headers["content-length"] = "0"

        return self._agent.build_request(
            method,
            parsed.url,
            headers=headers,
            content=content,
            timeout=None,
        )

    async def _send(self, request: httpx.Request) -> ResponseOutcome:
        response: httpx.Response | None = None
        chunks: list[bytes] = []
        try:
            response = await self._agent.send(request, stream=True)
            # A proxy may have decompressed the payload already, httpx only
            # decodes when content-encoding says so.
            async for chunk in response.aiter_bytes():
                chunks.append(chunk)

            data = _decode_text(chunks)
            try:
                body = json.loads(data)
            except ValueError as exc:
                raise UnparsableJSON(more=data) from exc

            return ResponseOutcome(
                body=body,
                status_code=response.status_code,
                headers=dict(response.headers.items()),
            )
        except httpx.DecodingError as exc:
            raise UnparsableJSON(more=_decode_text(chunks)) from exc
        finally:
            if response is not None:
                await response.aclose()

    async def destroy(self) -> None:
        close = getattr(self._agent, "aclose", None)
        if callable(close):
            await close()
            return

        destroy = getattr(self._agent, "destroy", None)
        if callable(destroy):
            result = destroy()
            if inspect.isawaitable(result):
                await result


def _decode_text(chunks: list[bytes]) -> str:
    return b"".join(chunks).decode("utf-8", errors="replace")


__all__ = [
    "DEFAULT_PORTS",
    "HttpxRequester",
    "ParsedUrl",
    "RequestOptions",
    "Requester",
    "ResponseOutcome",
    "parse_url",
]
