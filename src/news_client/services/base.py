from __future__ import annotations

from types import TracebackType

import httpx
from typing_extensions import Self


class ServiceClient:
    """Owns the ``httpx.AsyncClient`` shared by every call of a client.

    A client passed in by the caller stays owned by the caller and is left
    open by :meth:`close`.
    """

    def __init__(self, http_client: httpx.AsyncClient | None = None) -> None:
        self._owns_client = http_client is None
        self._client = http_client if http_client is not None else httpx.AsyncClient()

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()
