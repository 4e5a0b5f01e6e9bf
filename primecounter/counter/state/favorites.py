"""Favorites-only view onto an AppState."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Sequence, Tuple

from .activity import ActivityEntry
from .errors import AlreadyFavoritedError

if TYPE_CHECKING:
    from .app_state import AppState


class FavoritesProjection:
    """Narrow read/write surface over the favorites of an AppState.

    Holds a reference to the root and nothing else. Reads return the root's
    current values and writes are the root's own mutations, so the activity
    feed stays in step whichever object the change went through.
    """

    __slots__ = ("_state",)

    def __init__(self, state: AppState) -> None:
        self._state = state

    @property
    def favorites(self) -> Tuple[int, ...]:
        return self._state.favorites

    @favorites.setter
    def favorites(self, values: Sequence[int]) -> None:
        """Make the favorites equal to ``values``.

        The difference is applied as individual removals and additions, each
        of which is logged. Leading values that already match stay in place;
        any other survivor is removed and added back at its new position.

        Raises:
            AlreadyFavoritedError: If ``values`` repeats a value; nothing changes
        """
        target = list(values)
        seen = set()
        for value in target:
            if value in seen:
                raise AlreadyFavoritedError(value)
            seen.add(value)

        current = list(self._state.favorites)
        survivors = [v for v in current if v in seen]
        # Survivors may stay put only while they form a prefix of the target
        keep = set()
        for expected, actual in zip(target, survivors):
            if expected != actual:
                break
            keep.add(actual)

        for value in current:
            if value not in keep:
                self._state.remove_favorite(value)
        for value in target:
            if value not in keep:
                self._state.add_favorite(value)

    @property
    def activity_log(self) -> Tuple[ActivityEntry, ...]:
        return self._state.activity_log

    def add_favorite(self, value: int) -> None:
        self._state.add_favorite(value)

    def remove_favorite(self, value: int) -> None:
        self._state.remove_favorite(value)

    def remove_favorite_at(self, index: int) -> None:
        self._state.remove_favorite_at(index)

    def remove_favorites_at(self, indices: Iterable[int]) -> None:
        self._state.remove_favorites_at(indices)

    def __contains__(self, value: object) -> bool:
        return value in self._state.favorites

    def __len__(self) -> int:
        return len(self._state.favorites)

    def __repr__(self) -> str:
        return f"FavoritesProjection(favorites={list(self.favorites)})"
