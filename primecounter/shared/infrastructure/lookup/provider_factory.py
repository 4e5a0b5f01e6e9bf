"""
Provider factory for prime lookup providers.

Centralizes provider creation and environment-driven configuration.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

import httpx

from primecounter.shared.core.configuration import LookupConfig, get_config
from .base import PrimeLookupProvider
from .wolfram_provider import WolframAlphaProvider

logger = logging.getLogger(__name__)


class ProviderType(str, Enum):
    """Supported lookup provider types."""
    WOLFRAM_ALPHA = "wolfram_alpha"


class ProviderFactory:
    """Factory for creating lookup provider instances."""

    @staticmethod
    def create(
        provider_type: ProviderType | str,
        app_id: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> PrimeLookupProvider:
        """Create a lookup provider instance.

        Args:
            provider_type: Type of provider to create
            app_id: Service credential
            base_url: Endpoint (uses provider default if not provided)
            timeout: Request timeout in seconds
            client: Optional pre-built HTTP client

        Returns:
            PrimeLookupProvider instance

        Raises:
            ValueError: If provider_type is not supported
        """
        if isinstance(provider_type, str):
            try:
                provider_type = ProviderType(provider_type.strip().lower().replace("-", "_"))
            except ValueError:
                raise ValueError(
                    f"Unsupported provider type: {provider_type}. "
                    f"Supported: {[p.value for p in ProviderType]}"
                ) from None

        if provider_type == ProviderType.WOLFRAM_ALPHA:
            return WolframAlphaProvider(
                app_id=app_id,
                base_url=base_url or WolframAlphaProvider.DEFAULT_BASE_URL,
                timeout=timeout,
                client=client,
            )

        raise ValueError(f"Provider type {provider_type} is not yet implemented.")

    @staticmethod
    def create_from_config(
        config: Optional[LookupConfig] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> PrimeLookupProvider:
        """Create a provider from configuration (env → project → user → defaults)."""
        if config is None:
            config = get_config().lookup

        if not config.app_id:
            logger.warning("No lookup app id configured; requests will likely be rejected")

        logger.debug(f"Creating lookup provider '{config.provider}' for {config.base_url}")
        return ProviderFactory.create(
            config.provider,
            app_id=config.app_id,
            base_url=config.base_url,
            timeout=config.timeout,
            client=client,
        )
