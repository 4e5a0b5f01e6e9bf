"""Shared fixtures for the state core tests."""

from __future__ import annotations

import asyncio
from typing import Dict, List, Optional

import pytest

from primecounter.counter.state import AppState, NthPrimeWorkflow, Store
from primecounter.shared.core.configuration import ENV_OVERRIDES
from primecounter.shared.domain.primes import PrimeOracle
from primecounter.shared.infrastructure.lookup import PrimeLookupProvider


class FakeLookupProvider(PrimeLookupProvider):
    """Provider answering from a dict.

    Set ``gate`` to an asyncio.Event to hold every query until it is set,
    and ``error`` to make queries fail once released.
    """

    def __init__(self, answers: Optional[Dict[str, str]] = None) -> None:
        self.answers = dict(answers or {})
        self.queries: List[str] = []
        self.gate: Optional[asyncio.Event] = None
        self.error: Optional[Exception] = None
        self.closed = False

    async def query(self, text: str) -> str:
        self.queries.append(text)
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.answers[text]

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def provider() -> FakeLookupProvider:
    return FakeLookupProvider({"prime 5": "11", "prime 1": "2", "prime 1000": "7919"})


@pytest.fixture
def oracle(provider: FakeLookupProvider) -> PrimeOracle:
    return PrimeOracle(provider)


@pytest.fixture
def state() -> AppState:
    return AppState()


@pytest.fixture
def workflow(state: AppState, oracle: PrimeOracle) -> NthPrimeWorkflow:
    return NthPrimeWorkflow(state, oracle)


@pytest.fixture(autouse=True)
def reset_store():
    Store.reset()
    yield
    Store.reset()


@pytest.fixture
def clean_env(monkeypatch):
    for key in ENV_OVERRIDES:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch
