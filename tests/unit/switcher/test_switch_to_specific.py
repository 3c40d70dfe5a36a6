"""
Unit tests for SwitchCoordinator.switch_to_specific.

Tests cover:
- Invalid targets rejected without activation
- Skipping while busy
- Counter reset on success
- Raw provider errors propagated
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from authex.switcher.coordinator import SwitchCoordinator
from authex.switcher.enums import SwitchErrorKind
from authex.switcher.exceptions import SessionError
from authex.switcher.interfaces import CandidateSource, SessionProvider


def make_coordinator(
    candidates: list[int], policy
) -> tuple[SwitchCoordinator, MagicMock, AsyncMock]:
    source = MagicMock(spec=CandidateSource)
    source.available_candidates.return_value = candidates
    provider = AsyncMock(spec=SessionProvider)
    provider.get_current_index.return_value = candidates[0] if candidates else None
    return SwitchCoordinator(source, provider, policy), source, provider


class TestSwitchToSpecific:
    """Test direct switching to a chosen account."""

    @pytest.mark.asyncio
    async def test_invalid_target_returns_result(self, policy) -> None:
        """Test that an unknown target is rejected without any attempt."""
        coordinator, _, provider = make_coordinator([1, 2, 3], policy)
        coordinator.state.record_failure()

        result = await coordinator.switch_to_specific(9)

        assert result.success is False
        assert result.error_kind == SwitchErrorKind.INVALID_TARGET
        assert result.reason == "Switch failed: Account #9 invalid or does not exist."
        provider.switch_account.assert_not_called()
        assert coordinator.failure_count == 1

    @pytest.mark.asyncio
    async def test_invalid_target_checked_before_busy(self, policy) -> None:
        """Test that an invalid target is reported even while a switch runs."""
        coordinator, _, _ = make_coordinator([1, 2], policy)

        async with coordinator.state.hold():
            result = await coordinator.switch_to_specific(5)

        assert result.error_kind == SwitchErrorKind.INVALID_TARGET

    @pytest.mark.asyncio
    async def test_busy_returns_skip(self, policy) -> None:
        """Test that a valid target is skipped while another switch runs."""
        coordinator, _, provider = make_coordinator([1, 2], policy)

        async with coordinator.state.hold():
            result = await coordinator.switch_to_specific(2)

        assert result.skipped is True
        provider.switch_account.assert_not_called()

    @pytest.mark.asyncio
    async def test_success_resets_counters(self, policy) -> None:
        """Test that a successful direct switch zeroes both counters."""
        coordinator, _, provider = make_coordinator([1, 2, 3], policy)
        coordinator.state.record_failure()
        coordinator.increment_usage_count()

        result = await coordinator.switch_to_specific(3)

        assert result.success is True
        assert result.new_index == 3
        provider.switch_account.assert_awaited_once_with(3)
        assert coordinator.failure_count == 0
        assert coordinator.usage_count == 0
        assert coordinator.busy is False

    @pytest.mark.asyncio
    async def test_provider_error_propagates_unchanged(self, policy) -> None:
        """Test that the provider's own exception reaches the caller."""
        coordinator, _, provider = make_coordinator([1, 2], policy)
        error = SessionError("login page did not load")
        provider.switch_account.side_effect = error
        coordinator.state.record_failure()

        with pytest.raises(SessionError) as exc_info:
            await coordinator.switch_to_specific(2)

        assert exc_info.value is error
        assert coordinator.failure_count == 1
        assert coordinator.busy is False

    @pytest.mark.asyncio
    async def test_switch_to_current_account_is_allowed(self, policy) -> None:
        """Test that the active account itself is a valid target."""
        coordinator, _, provider = make_coordinator([1, 2], policy)

        result = await coordinator.switch_to_specific(1)

        assert result.success is True
        provider.switch_account.assert_awaited_once_with(1)
