"""Session State Store - Service Locator Pattern.

Provides centralized access to the session's state from any consumer.
"""

from __future__ import annotations

from typing import Optional

from primecounter.shared.core.event_bus import EventBus
from primecounter.shared.domain.primes.oracle import PrimeOracle

from .app_state import AppState
from .favorites import FavoritesProjection
from .nth_prime import NthPrimeWorkflow


class Store:
    """Session-wide state store.

    Owns the one AppState of the session and the bus it publishes to.

    Usage:
        # During app initialization
        Store.initialize(event_bus, oracle)

        # In any consumer
        store = Store.get()
        store.app.increment()
    """

    _instance: Optional['Store'] = None

    def __init__(self, event_bus: EventBus, oracle: Optional[PrimeOracle] = None) -> None:
        """Initialize store with event bus.

        Note: Do not call directly. Use Store.initialize() instead.

        Args:
            event_bus: The shared event bus instance
            oracle: Lookup used by nth prime workflows
        """
        self.bus = event_bus
        self.oracle = oracle
        self.app = AppState(event_bus)

    def favorites(self) -> FavoritesProjection:
        return self.app.project_favorites()

    def nth_prime_workflow(self) -> NthPrimeWorkflow:
        """Create a lookup workflow bound to the session state.

        Raises:
            RuntimeError: If the store was initialized without an oracle
        """
        if self.oracle is None:
            raise RuntimeError("Store has no PrimeOracle; pass one to Store.initialize()")
        return NthPrimeWorkflow(self.app, self.oracle, self.bus)

    @classmethod
    def initialize(cls, event_bus: EventBus, oracle: Optional[PrimeOracle] = None) -> 'Store':
        """Initialize the global store instance.

        Returns:
            The initialized store instance

        Raises:
            RuntimeError: If store is already initialized
        """
        if cls._instance is not None:
            raise RuntimeError("Store already initialized!")

        cls._instance = cls(event_bus, oracle)
        return cls._instance

    @classmethod
    def get(cls) -> 'Store':
        """Get the global store instance.

        Raises:
            RuntimeError: If store has not been initialized
        """
        if cls._instance is None:
            raise RuntimeError("Store not initialized! Call Store.initialize() first.")
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the store instance. Used between tests."""
        cls._instance = None
