"""
Account Switcher Test Fixtures

This module provides pytest fixtures for testing the account switcher.
It includes a fake session provider, candidate sources and policies.

The fixtures support:
- Accounts that fail on switch or restart
- Blocking activations for concurrency tests
- Recording of every activation call in order
- Notification capture
"""

import asyncio
from collections.abc import Iterable

import pytest

from authex.switcher.coordinator import SwitchCoordinator
from authex.switcher.exceptions import SessionError
from authex.switcher.interfaces import SessionProvider
from authex.switcher.schemas import FailurePolicy
from authex.switcher.sources import StaticCandidateSource
from authex.switcher.state import SwitchState


class FakeSessionProvider(SessionProvider):
    """Session provider that activates accounts in memory."""

    def __init__(
        self,
        current_index: int | None = None,
        failing: Iterable[int] = (),
        restart_fails: bool = False,
    ) -> None:
        """Initialize fake provider."""
        self._current_index = current_index
        self.failing = set(failing)
        self.restart_fails = restart_fails
        self.calls: list[tuple[str, int]] = []
        self.gate: asyncio.Event | None = None

    async def switch_account(self, index: int) -> None:
        """Activate ``index`` unless it is marked as failing."""
        self.calls.append(("switch", index))
        if self.gate is not None:
            await self.gate.wait()
        if index in self.failing:
            raise SessionError(f"Account #{index} rejected the session")
        self._current_index = index

    async def restart_in_place(self, index: int) -> None:
        """Restart ``index`` unless restarts are set to fail."""
        self.calls.append(("restart", index))
        if self.gate is not None:
            await self.gate.wait()
        if self.restart_fails:
            raise SessionError(f"Account #{index} could not be restarted")
        self._current_index = index

    def get_current_index(self) -> int | None:
        return self._current_index

    def set_current_index(self, index: int | None) -> None:
        self._current_index = index

    @property
    def switched(self) -> list[int]:
        """Indices passed to ``switch_account``, in call order."""
        return [index for kind, index in self.calls if kind == "switch"]


@pytest.fixture
def provider() -> FakeSessionProvider:
    """Provide a fake provider whose active account is #1."""
    return FakeSessionProvider(current_index=1)


@pytest.fixture
def source() -> StaticCandidateSource:
    """Provide three candidates."""
    return StaticCandidateSource([1, 2, 3])


@pytest.fixture
def single_source() -> StaticCandidateSource:
    """Provide a single candidate."""
    return StaticCandidateSource([1])


@pytest.fixture
def policy() -> FailurePolicy:
    """Provide a policy with threshold 3, immediate 429 and rotation every 5 uses."""
    return FailurePolicy(
        failure_threshold=3,
        immediate_switch_statuses=frozenset({429}),
        switch_on_uses=5,
    )


@pytest.fixture
def coordinator(
    source: StaticCandidateSource,
    provider: FakeSessionProvider,
    policy: FailurePolicy,
) -> SwitchCoordinator:
    """Provide a coordinator over three candidates."""
    return SwitchCoordinator(source, provider, policy, SwitchState())


@pytest.fixture
def single_coordinator(
    single_source: StaticCandidateSource,
    provider: FakeSessionProvider,
    policy: FailurePolicy,
) -> SwitchCoordinator:
    """Provide a coordinator over a single candidate."""
    return SwitchCoordinator(single_source, provider, policy, SwitchState())


@pytest.fixture
def notifications() -> list[str]:
    """Collect notification messages; pass ``notifications.append`` as sink."""
    return []
