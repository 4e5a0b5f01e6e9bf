"""Lookup provider interface and error hierarchy."""

from __future__ import annotations

from abc import ABC, abstractmethod


class PrimeLookupError(Exception):
    """Base class for failures of the remote prime lookup."""


class LookupNetworkError(PrimeLookupError):
    """The request never produced a usable HTTP response."""


class LookupUnparseableError(PrimeLookupError):
    """The response could not be decoded, or held no integer."""


class LookupServiceError(PrimeLookupError):
    """The service answered but without a primary result."""


class PrimeLookupProvider(ABC):
    """A remote question-answering service.

    Providers answer a free-text query with the plain text of their primary
    result. Interpreting that text is left to the caller.
    """

    @abstractmethod
    async def query(self, text: str) -> str:
        """Return the primary answer's plain text for ``text``.

        Raises:
            LookupNetworkError: On transport failure
            LookupUnparseableError: If the response body cannot be decoded
            LookupServiceError: If no primary answer is present
        """

    async def close(self) -> None:
        """Release any held connections."""

    async def __aenter__(self) -> "PrimeLookupProvider":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()
