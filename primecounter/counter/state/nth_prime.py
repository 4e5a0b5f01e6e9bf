"""Single-flight nth prime lookup.

The workflow is a small state machine::

    IDLE --request(n)--> IN_FLIGHT(n) --resolve(v)--> COMPLETED(v) --> IDLE
                         IN_FLIGHT(n) --fail(e)----------------------> IDLE

At most one lookup is outstanding per workflow. A request made while one is
in flight is rejected, not queued. Once the workflow is discarded, late
responses are dropped without touching the AppState.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

from primecounter.shared.core import events
from primecounter.shared.core.event_bus import EventBus, EventPayload
from primecounter.shared.domain.primes.oracle import PrimeOracle, ordinal
from primecounter.shared.infrastructure.lookup.base import PrimeLookupError

if TYPE_CHECKING:
    from .app_state import AppState

logger = logging.getLogger(__name__)


class WorkflowPhase(str, Enum):
    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    COMPLETED = "completed"


class OutcomeStatus(str, Enum):
    COMPLETED = "completed"
    FAILED = "failed"
    REJECTED = "rejected"    # another request was already pending
    DISCARDED = "discarded"  # the workflow was discarded first


@dataclass(frozen=True)
class LookupOutcome:
    """What a caller of :meth:`NthPrimeWorkflow.request` gets back."""
    status: OutcomeStatus
    n: int
    value: Optional[int] = None
    error: Optional[PrimeLookupError] = None

    @property
    def accepted(self) -> bool:
        return self.status in (OutcomeStatus.COMPLETED, OutcomeStatus.FAILED)


class NthPrimeWorkflow:
    """Runs nth prime lookups for one AppState, one at a time."""

    def __init__(
        self,
        state: AppState,
        oracle: PrimeOracle,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        """
        Args:
            state: Receives the result through ``set_pending_prime_result``
            oracle: Performs the remote lookup
            event_bus: Optional bus for lifecycle events
        """
        self._state = state
        self._oracle = oracle
        self.bus = event_bus

        self._phase = WorkflowPhase.IDLE
        self._for_count: Optional[int] = None
        self._result: Optional[int] = None
        self._ticket = 0
        self._discarded = False
        self._task: Optional[asyncio.Task] = None
        self.last_error: Optional[PrimeLookupError] = None

    @property
    def phase(self) -> WorkflowPhase:
        return self._phase

    @property
    def in_flight_count(self) -> Optional[int]:
        """The count being looked up while IN_FLIGHT, else None."""
        return self._for_count

    @property
    def completed_result(self) -> Optional[int]:
        """The resolved value while COMPLETED, else None."""
        return self._result

    @property
    def is_busy(self) -> bool:
        """True while the triggering control should stay disabled."""
        return self._phase is WorkflowPhase.IN_FLIGHT

    @property
    def is_discarded(self) -> bool:
        return self._discarded

    # --- Public Actions ---

    async def request(self, n: int) -> LookupOutcome:
        """Look up the ``n``th prime and publish it into the state.

        Lookup failures are not raised; they come back in the outcome with
        status FAILED and leave the pending result cleared.
        """
        rejected = self._begin(n)
        if rejected is not None:
            return rejected
        return await self._run(n, self._ticket)

    def start(self, n: int) -> Optional[asyncio.Task]:
        """Schedule :meth:`request` on the running loop.

        Meant for UI callbacks that cannot await. The workflow is IN_FLIGHT
        as soon as this returns a task.

        Returns:
            The lookup task, or None if the request was rejected

        Raises:
            RuntimeError: If no event loop is running; the workflow stays IDLE
        """
        asyncio.get_running_loop()
        if self._begin(n) is not None:
            return None
        ticket = self._ticket
        task = asyncio.create_task(self._run(n, ticket))
        task.add_done_callback(lambda t: self._settle_cancelled(t, ticket))
        self._task = task
        return task

    def discard(self) -> None:
        """Retire the workflow.

        Cancels a lookup started with :meth:`start`. Any response that still
        arrives afterwards is dropped, and further requests are refused.
        """
        if self._discarded:
            return
        self._discarded = True
        if self._phase is WorkflowPhase.IN_FLIGHT:
            logger.debug(f"Discarding workflow with lookup for {self._for_count} in flight")
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None
        self._transition(WorkflowPhase.IDLE)

    # --- Transitions ---

    def _begin(self, n: int) -> Optional[LookupOutcome]:
        if self._discarded:
            return LookupOutcome(OutcomeStatus.DISCARDED, n)
        if self._phase is WorkflowPhase.IN_FLIGHT:
            logger.debug(f"Rejecting lookup for {n}: lookup for {self._for_count} already pending")
            return LookupOutcome(OutcomeStatus.REJECTED, n)

        self._ticket += 1
        self.last_error = None
        self._transition(WorkflowPhase.IN_FLIGHT, for_count=n)
        return None

    async def _run(self, n: int, ticket: int) -> LookupOutcome:
        try:
            await self._publish(events.TOPIC_NTH_PRIME_REQUESTED, events.create_nth_prime_requested_event(n))
            value = await self._oracle.fetch_nth_prime(n)
        except PrimeLookupError as e:
            if self._is_stale(ticket):
                logger.debug(f"Dropping late failure for {n}: {e}")
                return LookupOutcome(OutcomeStatus.DISCARDED, n)
            logger.warning(f"Lookup of the {ordinal(n)} prime failed: {e}")
            self.last_error = e
            self._transition(WorkflowPhase.IDLE)
            self._state.set_pending_prime_result(None)
            await self._publish(events.TOPIC_NTH_PRIME_FAILED, events.create_nth_prime_failed_event(n, e))
            return LookupOutcome(OutcomeStatus.FAILED, n, error=e)
        except asyncio.CancelledError:
            if not self._is_stale(ticket):
                self._transition(WorkflowPhase.IDLE)
            raise
        except Exception:
            if not self._is_stale(ticket):
                self._transition(WorkflowPhase.IDLE)
                self._state.set_pending_prime_result(None)
            raise

        if self._is_stale(ticket):
            logger.debug(f"Dropping late result for {n}: {value}")
            return LookupOutcome(OutcomeStatus.DISCARDED, n)

        logger.info(f"The {ordinal(n)} prime is {value}")
        self._transition(WorkflowPhase.COMPLETED, result=value)
        self._state.set_pending_prime_result(value)
        self._transition(WorkflowPhase.IDLE)
        await self._publish(events.TOPIC_NTH_PRIME_RESOLVED, events.create_nth_prime_resolved_event(n, value))
        return LookupOutcome(OutcomeStatus.COMPLETED, n, value=value)

    def _transition(
        self,
        phase: WorkflowPhase,
        for_count: Optional[int] = None,
        result: Optional[int] = None,
    ) -> None:
        logger.debug(f"NthPrimeWorkflow: {self._phase.value} -> {phase.value}")
        self._phase = phase
        self._for_count = for_count if phase is WorkflowPhase.IN_FLIGHT else None
        self._result = result if phase is WorkflowPhase.COMPLETED else None

    def _settle_cancelled(self, task: asyncio.Task, ticket: int) -> None:
        # A task cancelled before its first step never enters _run
        if task.cancelled() and not self._is_stale(ticket) and self.is_busy:
            self._transition(WorkflowPhase.IDLE)

    def _is_stale(self, ticket: int) -> bool:
        return self._discarded or ticket != self._ticket

    async def _publish(self, topic: str, payload: EventPayload) -> None:
        if self.bus is not None:
            await self.bus.publish(topic, payload)
