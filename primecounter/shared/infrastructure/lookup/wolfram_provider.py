"""Wolfram|Alpha lookup provider."""

from __future__ import annotations

import logging
from typing import Optional

import httpx
from pydantic import ValidationError

from .base import (
    LookupNetworkError,
    LookupServiceError,
    LookupUnparseableError,
    PrimeLookupProvider,
)
from .models import WolframAlphaResult

logger = logging.getLogger(__name__)


class WolframAlphaProvider(PrimeLookupProvider):
    """Answers queries through the Wolfram|Alpha full results API."""

    DEFAULT_BASE_URL = "https://api.wolframalpha.com/v2/query"

    def __init__(
        self,
        app_id: Optional[str],
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Args:
            app_id: Wolfram|Alpha application id
            base_url: Query endpoint
            timeout: Request timeout in seconds
            client: Pre-built client; the provider closes only clients it created
        """
        self.app_id = app_id
        self.base_url = base_url
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def query(self, text: str) -> str:
        params = {
            "input": text,
            "format": "plaintext",
            "output": "JSON",
        }
        if self.app_id:
            params["appid"] = self.app_id

        logger.debug(f"Querying Wolfram|Alpha: {text!r}")
        try:
            response = await self._client.get(self.base_url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise LookupNetworkError(
                f"Wolfram|Alpha returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise LookupNetworkError(f"Wolfram|Alpha request failed: {e}") from e

        try:
            result = WolframAlphaResult.model_validate_json(response.content)
        except ValidationError as e:
            raise LookupUnparseableError(f"Malformed Wolfram|Alpha response: {e}") from e

        plaintext = result.primary_plaintext()
        if plaintext is None:
            raise LookupServiceError(f"No primary result for {text!r}")
        return plaintext

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()
