"""Awaitable factories for the asyncio environment."""

from __future__ import annotations

import asyncio
from typing import Any, TypeVar

T = TypeVar("T")


class AsyncioPromises:
    """Resolve, reject and delay helpers used by the client facade."""

    async def resolve(self, value: T) -> T:
        return value

    async def reject(self, error: BaseException) -> Any:
        raise error

    async def delay(self, ms: float) -> None:
        await asyncio.sleep(ms / 1000)


__all__ = ["AsyncioPromises"]
