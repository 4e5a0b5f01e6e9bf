"""Primality predicate and the remote nth prime lookup."""

from __future__ import annotations

import logging
import re
from typing import Optional

from primecounter.shared.infrastructure.lookup.base import (
    LookupUnparseableError,
    PrimeLookupProvider,
)

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"-?\d+")


def is_prime(n: int) -> bool:
    """Naive trial division over ``[2, n)``; false for ``n <= 1``."""
    return n > 1 and not any(n % d == 0 for d in range(2, n))


def extract_first_integer(text: str) -> Optional[int]:
    """Return the first integer embedded in ``text``, or None."""
    match = _INTEGER_RE.search(text)
    return int(match.group()) if match else None


def ordinal(n: int) -> str:
    """English ordinal label: 1st, 2nd, 3rd, 4th, 11th, 21st, ..."""
    magnitude = abs(n)
    if magnitude % 100 in (11, 12, 13):
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(magnitude % 10, "th")
    return f"{n}{suffix}"


class PrimeOracle:
    """Answers primality locally and nth prime questions remotely."""

    DEFAULT_QUERY_TEMPLATE = "prime {n}"

    def __init__(self, provider: PrimeLookupProvider, query_template: str = DEFAULT_QUERY_TEMPLATE) -> None:
        self.provider = provider
        self.query_template = query_template

    @staticmethod
    def is_prime(n: int) -> bool:
        return is_prime(n)

    async def fetch_nth_prime(self, n: int) -> int:
        """Look up the ``n``th prime.

        Issues one request to the provider and extracts the first integer
        from its free-text answer.

        Raises:
            LookupNetworkError: On transport failure
            LookupServiceError: If the service has no primary answer
            LookupUnparseableError: If the answer holds no integer
        """
        logger.info(f"Looking up the {ordinal(n)} prime")
        answer = await self.provider.query(self.query_template.format(n=n))

        value = extract_first_integer(answer)
        if value is None:
            raise LookupUnparseableError(f"No integer in lookup answer {answer!r}")
        return value
