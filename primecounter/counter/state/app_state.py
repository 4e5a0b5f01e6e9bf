"""Application State.

Single source of truth for the counter demo: the counter value, favorite
primes and their activity feed, the pending nth prime alert and the detail
sheet flag. Every mutator is synchronous and runs to completion, so a
favorites change and its activity entry are always observed together.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterable, List, Optional, Tuple

from primecounter.shared.core import events
from primecounter.shared.core.event_bus import EventBus
from primecounter.shared.domain.primes.oracle import is_prime

from .activity import ActivityEntry, ActivityLog
from .errors import AlreadyFavoritedError, FavoriteIndexError, NotFavoritedError

if TYPE_CHECKING:
    from .favorites import FavoritesProjection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class User:
    id: int
    name: str
    bio: str = ""


@dataclass(frozen=True)
class StateChange:
    """Notification that one field of the state was mutated."""
    field: str
    value: Any


StateListener = Callable[[StateChange], None]


class AppState:
    """Root state of a session.

    Listeners registered with :meth:`subscribe` are called synchronously
    after each mutation. When an EventBus is given, the same changes are also
    published on ``events.TOPIC_STATE_CHANGED``.
    """

    def __init__(self, event_bus: Optional[EventBus] = None) -> None:
        """Initialize application state.

        Args:
            event_bus: Optional bus that receives state change events
        """
        self.bus = event_bus

        self._count = 0
        # dict keys keep insertion order and reject duplicates
        self._favorites: Dict[int, None] = {}
        self._activity_log = ActivityLog()
        self._pending_prime_result: Optional[int] = None
        self._is_detail_sheet_visible = False
        self._logged_in_user: Optional[User] = None

        self._listeners: List[StateListener] = []

    # --- Reads ---

    @property
    def count(self) -> int:
        return self._count

    @count.setter
    def count(self, value: int) -> None:
        self._count = value
        self._changed("count", value)

    @property
    def favorites(self) -> Tuple[int, ...]:
        """Favorite primes in insertion order."""
        return tuple(self._favorites)

    @property
    def activity_log(self) -> Tuple[ActivityEntry, ...]:
        """Activity feed, oldest entry first."""
        return self._activity_log.entries()

    @property
    def pending_prime_result(self) -> Optional[int]:
        return self._pending_prime_result

    @property
    def is_detail_sheet_visible(self) -> bool:
        return self._is_detail_sheet_visible

    @is_detail_sheet_visible.setter
    def is_detail_sheet_visible(self, visible: bool) -> None:
        self._is_detail_sheet_visible = bool(visible)
        self._changed("is_detail_sheet_visible", self._is_detail_sheet_visible)

    @property
    def logged_in_user(self) -> Optional[User]:
        return self._logged_in_user

    @property
    def is_current_count_favorite(self) -> bool:
        return self._count in self._favorites

    # --- Counter ---

    def increment(self) -> None:
        self.count = self._count + 1

    def decrement(self) -> None:
        self.count = self._count - 1

    def check_count_is_prime(self) -> bool:
        """Test the current count; a prime count brings up the detail sheet."""
        result = is_prime(self._count)
        if result:
            self.is_detail_sheet_visible = True
        return result

    # --- Favorites ---

    def add_favorite(self, value: int) -> None:
        """Append ``value`` to the favorites and record it in the feed.

        Raises:
            AlreadyFavoritedError: If ``value`` is already a favorite
        """
        if value in self._favorites:
            raise AlreadyFavoritedError(value)

        self._favorites[value] = None
        self._activity_log.append(ActivityEntry.favorite_added(value))
        logger.debug(f"Favorite added: {value}")
        self._changed("favorites", self.favorites)

    def remove_favorite(self, value: int) -> None:
        """Remove ``value`` from the favorites and record it in the feed.

        Raises:
            NotFavoritedError: If ``value`` is not a favorite
        """
        if value not in self._favorites:
            raise NotFavoritedError(value)

        del self._favorites[value]
        self._activity_log.append(ActivityEntry.favorite_removed(value))
        logger.debug(f"Favorite removed: {value}")
        self._changed("favorites", self.favorites)

    def remove_favorite_at(self, index: int) -> None:
        """Remove the favorite at position ``index``.

        Raises:
            FavoriteIndexError: If ``index`` is not a position in the list
        """
        self.remove_favorite(self._favorite_at(index))

    def remove_favorites_at(self, indices: Iterable[int]) -> None:
        """Remove the favorites at several positions.

        Positions refer to the list as it is before the call. Nothing is
        removed if any of them is out of range.

        Raises:
            FavoriteIndexError: If any index is not a position in the list
        """
        values = [self._favorite_at(index) for index in sorted(set(indices))]
        for value in values:
            self.remove_favorite(value)

    def add_current_count_to_favorites(self) -> None:
        self.add_favorite(self._count)

    def remove_current_count_from_favorites(self) -> None:
        self.remove_favorite(self._count)

    def _favorite_at(self, index: int) -> int:
        favorites = self.favorites
        if not 0 <= index < len(favorites):
            raise FavoriteIndexError(index, len(favorites))
        return favorites[index]

    # --- Alerts & sheets ---

    def set_pending_prime_result(self, value: Optional[int]) -> None:
        """Overwrite the result awaiting display; last writer wins."""
        self._pending_prime_result = value
        self._changed("pending_prime_result", value)

    def acknowledge_prime_result(self) -> None:
        """Clear the pending result once it has been shown."""
        self.set_pending_prime_result(None)

    def show_detail_sheet(self) -> None:
        self.is_detail_sheet_visible = True

    def hide_detail_sheet(self) -> None:
        self.is_detail_sheet_visible = False

    def toggle_detail_sheet(self) -> None:
        self.is_detail_sheet_visible = not self._is_detail_sheet_visible

    # --- Session ---

    def log_in(self, user: User) -> None:
        self._logged_in_user = user
        self._changed("logged_in_user", user)

    def log_out(self) -> None:
        self._logged_in_user = None
        self._changed("logged_in_user", None)

    # --- Projections ---

    def project_favorites(self) -> FavoritesProjection:
        """Return a favorites-only view bound to this state."""
        from .favorites import FavoritesProjection

        return FavoritesProjection(self)

    def snapshot(self) -> Dict[str, Any]:
        """Plain-data copy of the state for rendering."""
        return {
            "count": self._count,
            "favorites": list(self._favorites),
            "activity_log": [entry.to_dict() for entry in self._activity_log],
            "pending_prime_result": self._pending_prime_result,
            "is_detail_sheet_visible": self._is_detail_sheet_visible,
            "logged_in_user": self._logged_in_user.name if self._logged_in_user else None,
        }

    # --- Observation ---

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register a change listener.

        Returns:
            A callable that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _changed(self, field: str, value: Any) -> None:
        change = StateChange(field, value)
        for listener in list(self._listeners):
            try:
                listener(change)
            except Exception:
                logger.exception(f"State listener failed for '{field}'")

        if self.bus is not None:
            self.bus.publish_nowait(
                events.TOPIC_STATE_CHANGED,
                events.create_state_changed_event(field, value),
            )
