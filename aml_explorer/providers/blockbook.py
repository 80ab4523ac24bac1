"""Blockbook explorer gateway for Bitcoin."""

import logging
from typing import Any

import httpx

from aml_explorer.core.exceptions import DecodeFailedError, FetchFailedError
from aml_explorer.core.explorer import ExplorerGateway

logger = logging.getLogger(__name__)


class BlockbookExplorer(ExplorerGateway):
    """
    Blockbook-compatible explorer API.

    One pooled HTTP client is shared by every request made through this
    gateway. Failures are surfaced immediately; retrying is left to the
    caller.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        max_connections: int = 8,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize Blockbook gateway.

        Args:
            base_url: Base URL of the explorer API (``/tx/{txid}`` is appended).
            timeout: Request timeout in seconds.
            max_connections: Keep-alive connections kept per host.
            transport: Optional transport override (used by tests).
        """
        if not base_url:
            raise ValueError("Explorer base URL is not configured")
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._max_connections = max_connections
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def name(self) -> str:
        """Gateway name identifier."""
        return "blockbook"

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout),
                limits=httpx.Limits(max_keepalive_connections=self._max_connections),
                headers={
                    "Accept": "application/json",
                    "User-Agent": "AmlExplorer/1.0",
                },
                transport=self._transport,
            )
        return self._client

    async def fetch_transaction(self, txid: str) -> dict[str, Any]:
        """Fetch the raw transaction JSON from Blockbook."""
        url = f"{self._base_url}/tx/{txid}"
        logger.info(f"[Blockbook] GET {url}")

        client = self._get_client()
        try:
            response = await client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(f"[Blockbook] HTTP error {e.response.status_code} for {txid[:16]}...")
            raise FetchFailedError(
                txid, "explorer returned an error status", e.response.status_code
            ) from e
        except httpx.HTTPError as e:
            logger.warning(f"[Blockbook] Request failed for {txid[:16]}...: {e}")
            raise FetchFailedError(txid, str(e) or type(e).__name__) from e

        try:
            data = response.json()
        except ValueError as e:
            logger.warning(f"[Blockbook] Response for {txid[:16]}... is not JSON")
            raise DecodeFailedError(txid, f"response is not JSON: {e}") from e

        logger.debug(f"[Blockbook] Success - Status {response.status_code}")
        return data

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
