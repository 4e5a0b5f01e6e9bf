"""Errors raised by rejected state mutations.

A rejected mutation leaves the state exactly as it was.
"""

from __future__ import annotations


class StateError(Exception):
    """Base class for rejected AppState mutations."""


class AlreadyFavoritedError(StateError):
    def __init__(self, value: int) -> None:
        super().__init__(f"{value} is already a favorite prime")
        self.value = value


class NotFavoritedError(StateError):
    def __init__(self, value: int) -> None:
        super().__init__(f"{value} is not a favorite prime")
        self.value = value


class FavoriteIndexError(StateError):
    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Favorite index {index} out of range for {size} favorite(s)")
        self.index = index
        self.size = size
