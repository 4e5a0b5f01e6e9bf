"""Reactive state management for the counter demo.

Architecture:
- AppState: session root state (counter, favorites, activity feed, alerts)
- FavoritesProjection: favorites-only view forwarding to an AppState
- NthPrimeWorkflow: single-flight remote nth prime lookup
- Store: service locator for accessing state from any consumer
"""

from .activity import ActivityEntry, ActivityLog, ActivityType
from .app_state import AppState, StateChange, User
from .errors import AlreadyFavoritedError, FavoriteIndexError, NotFavoritedError, StateError
from .favorites import FavoritesProjection
from .nth_prime import LookupOutcome, NthPrimeWorkflow, OutcomeStatus, WorkflowPhase
from .store import Store

__all__ = [
    "ActivityEntry",
    "ActivityLog",
    "ActivityType",
    "AppState",
    "StateChange",
    "User",
    "StateError",
    "AlreadyFavoritedError",
    "NotFavoritedError",
    "FavoriteIndexError",
    "FavoritesProjection",
    "NthPrimeWorkflow",
    "LookupOutcome",
    "OutcomeStatus",
    "WorkflowPhase",
    "Store",
]
