"""Tests for the session store and the event bus."""

import pytest

from primecounter.counter.state import NthPrimeWorkflow, Store
from primecounter.shared.core import EventBus


class TestStore:

    def test_get_before_initialize(self):
        with pytest.raises(RuntimeError, match="not initialized"):
            Store.get()

    def test_initialize_once(self, oracle):
        store = Store.initialize(EventBus(), oracle)

        assert Store.get() is store
        with pytest.raises(RuntimeError, match="already initialized"):
            Store.initialize(EventBus(), oracle)

    def test_session_state_is_shared(self, oracle):
        store = Store.initialize(EventBus(), oracle)

        store.favorites().add_favorite(3)

        assert Store.get().app.favorites == (3,)
        assert store.app.bus is store.bus

    @pytest.mark.asyncio
    async def test_workflow_bound_to_session_state(self, oracle):
        store = Store.initialize(EventBus(), oracle)
        workflow = store.nth_prime_workflow()

        assert isinstance(workflow, NthPrimeWorkflow)
        await workflow.request(5)
        assert store.app.pending_prime_result == 11

    def test_workflow_requires_oracle(self):
        store = Store.initialize(EventBus())

        with pytest.raises(RuntimeError):
            store.nth_prime_workflow()


class TestEventBus:

    @pytest.mark.asyncio
    async def test_failing_handler_does_not_stop_others(self):
        bus = EventBus()
        received = []

        async def broken(payload):
            raise RuntimeError("handler bug")

        async def working(payload):
            received.append(payload)

        await bus.subscribe("topic", broken)
        await bus.subscribe("topic", working)
        await bus.publish("topic", {"x": 1})

        assert await bus.wait_until_idle()
        assert received == [{"x": 1}]

    @pytest.mark.asyncio
    async def test_subscribe_is_idempotent_and_unsubscribe(self):
        bus = EventBus()

        async def handler(payload):
            pass

        await bus.subscribe("topic", handler)
        await bus.subscribe("topic", handler)
        assert bus.subscriber_count("topic") == 1

        await bus.unsubscribe("topic", handler)
        assert bus.subscriber_count("topic") == 0

    def test_publish_nowait_without_loop(self):
        assert EventBus().publish_nowait("topic", {}) is False
