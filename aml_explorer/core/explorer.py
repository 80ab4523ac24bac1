"""Explorer gateway interface and its initialize-once provider."""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import Any, Callable

from aml_explorer.core.exceptions import GatewayUnavailableError

logger = logging.getLogger(__name__)


class ExplorerGateway(ABC):
    """Abstract base class for block explorer backends."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Gateway name identifier."""
        ...

    @abstractmethod
    async def fetch_transaction(self, txid: str) -> dict[str, Any]:
        """
        Fetch the raw JSON of a transaction.

        Args:
            txid: Transaction id (64 hex characters).

        Returns:
            Decoded JSON object as returned by the explorer.

        Raises:
            FetchFailedError: On transport errors or non-success status.
            DecodeFailedError: If the body is not JSON.
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Close the gateway and release pooled connections."""
        ...


class GatewayProvider:
    """
    Builds an ExplorerGateway at most once and hands out the shared instance.

    Concurrent first callers wait on the same lock, so exactly one factory
    call wins and every caller observes that gateway afterwards. A failing
    factory leaves the provider empty.
    """

    def __init__(self, factory: Callable[[], ExplorerGateway]) -> None:
        self._factory = factory
        self._gateway: ExplorerGateway | None = None
        self._lock = asyncio.Lock()

    @property
    def initialized(self) -> bool:
        return self._gateway is not None

    async def get(self) -> ExplorerGateway:
        """Return the shared gateway, building it on first use."""
        if self._gateway is not None:
            return self._gateway

        async with self._lock:
            if self._gateway is None:
                try:
                    self._gateway = self._factory()
                except Exception as e:
                    logger.error(f"Failed to initialize explorer gateway: {e}")
                    raise GatewayUnavailableError(str(e)) from e
                logger.info(f"Explorer gateway initialized: {self._gateway.name}")
        return self._gateway

    async def close(self) -> None:
        """Close the shared gateway if it was built."""
        async with self._lock:
            if self._gateway is not None:
                await self._gateway.close()
                self._gateway = None
