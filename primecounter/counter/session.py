"""Session bootstrap: configuration, logging, lookup provider and store."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from primecounter.shared.core import EventBus, SystemConfig, configure_logging, get_config
from primecounter.shared.domain.primes import PrimeOracle
from primecounter.shared.infrastructure.lookup import ProviderFactory

from .state import Store

logger = logging.getLogger(__name__)


def start_session(
    config: Optional[SystemConfig] = None,
    client: Optional[httpx.AsyncClient] = None,
    setup_logging: bool = True,
) -> Store:
    """Build everything a presentation layer needs and register the Store.

    Args:
        config: Settings to use; loaded through the config manager if omitted
        client: Optional HTTP client handed to the lookup provider
        setup_logging: Install the console log handler

    Returns:
        The initialized session store
    """
    config = config or get_config()
    if setup_logging:
        configure_logging(config.logging)

    provider = ProviderFactory.create_from_config(config.lookup, client=client)
    oracle = PrimeOracle(provider, query_template=config.lookup.query_template)
    store = Store.initialize(EventBus(), oracle)
    logger.info("Session started")
    return store


async def end_session() -> None:
    """Close the lookup provider and drop the store."""
    store = Store.get()
    try:
        if store.oracle is not None:
            await store.oracle.provider.close()
    finally:
        store.bus.clear()
        Store.reset()
        logger.info("Session ended")
