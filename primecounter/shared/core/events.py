"""Canonical event definitions for PrimeCounter."""

from __future__ import annotations

from typing import Any

from .event_bus import EventPayload

# State topics
TOPIC_STATE_CHANGED = "state.changed"

# Nth prime lookup lifecycle
TOPIC_NTH_PRIME_REQUESTED = "nth_prime.requested"
TOPIC_NTH_PRIME_RESOLVED = "nth_prime.resolved"
TOPIC_NTH_PRIME_FAILED = "nth_prime.failed"


def create_state_changed_event(field: str, value: Any) -> EventPayload:
    """Create a state changed event (one AppState field was mutated)."""
    return {
        "field": field,
        "value": value,
    }


def create_nth_prime_requested_event(n: int) -> EventPayload:
    """Create an nth prime requested event."""
    return {
        "n": n,
    }


def create_nth_prime_resolved_event(n: int, prime: int) -> EventPayload:
    """Create an nth prime resolved event."""
    return {
        "n": n,
        "prime": prime,
    }


def create_nth_prime_failed_event(n: int, error: Exception) -> EventPayload:
    """Create an nth prime failed event.

    Args:
        n: The count the lookup was issued for
        error: The lookup error surfaced to the caller
    """
    return {
        "n": n,
        "error": type(error).__name__,
        "message": str(error),
    }
