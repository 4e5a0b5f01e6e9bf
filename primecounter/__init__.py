"""PrimeCounter package."""

from .shared.core.event_bus import EventBus
from .counter.state import AppState, FavoritesProjection, NthPrimeWorkflow, Store

__version__ = "0.1.0"

__all__ = ["AppState", "EventBus", "FavoritesProjection", "NthPrimeWorkflow", "Store"]
