from typing import Any

from fastapi import HTTPException

from authex.logging.logger import AuthexLogger
from authex.switcher import messages
from authex.switcher.enums import SwitchErrorKind, SwitchTrigger
from authex.switcher.exceptions import (
    AllCandidatesFailed,
    EmptyCandidateSet,
    SingleCandidateFailure,
)
from authex.switcher.interfaces import (
    CandidateSource,
    NotificationSink,
    SessionProvider,
)
from authex.switcher.schemas import FailureDetails, FailurePolicy, SwitchResult
from authex.switcher.selection import next_candidate, trial_order
from authex.switcher.state import ISwitchState, SwitchState


class SwitchCoordinator:
    """
    Rotates the active account across the available candidates.

    Features:
    - Deterministic next-candidate selection
    - Sequential retry over every other candidate, current one tried last
    - In-place restart when only one candidate exists
    - Failure threshold and immediate-switch status codes
    - Usage-based rotation predicate
    - At most one switch in flight, concurrent requests are skipped

    The candidate list is read from the source on every decision and the
    active index lives in the session provider; only the counters and the
    busy flag are held here, in the injected state.
    """

    logger = AuthexLogger("SwitchCoordinator")

    def __init__(
        self,
        source: CandidateSource,
        provider: SessionProvider,
        policy: FailurePolicy | None = None,
        state: ISwitchState | None = None,
    ) -> None:
        """
        Initialize the coordinator.

        Args:
            source: Supplier of the ordered candidate indices
            provider: Collaborator that activates account sessions
            policy: Failure and usage policy, defaults to ``SWITCHER_*`` settings
            state: Counters and busy flag, a fresh ``SwitchState`` by default
        """
        self._source = source
        self._provider = provider
        self._policy = policy or FailurePolicy.from_settings()
        self._state = state or SwitchState()

    @property
    def current_index(self) -> int | None:
        return self._provider.get_current_index()

    @current_index.setter
    def current_index(self, value: int | None) -> None:
        self._provider.set_current_index(value)

    @property
    def policy(self) -> FailurePolicy:
        return self._policy

    @property
    def state(self) -> ISwitchState:
        return self._state

    @property
    def failure_count(self) -> int:
        return self._state.failure_count

    @property
    def usage_count(self) -> int:
        return self._state.usage_count

    @property
    def busy(self) -> bool:
        return self._state.busy

    def get_next_index(self) -> int | None:
        """Candidate that a rotation would move to, ``None`` without candidates."""
        return next_candidate(self._source.available_candidates(), self.current_index)

    async def switch_to_next(self) -> SwitchResult:
        """
        Move the active session to the next working candidate.

        Returns:
            SwitchResult of the successful switch, or a skipped result when
            another switch is already in flight

        Raises:
            EmptyCandidateSet: If there are no candidates
            SingleCandidateFailure: If the only candidate failed to restart
            SessionFallbackError: If the provider restored another session
                after the only candidate failed to restart
            AllCandidatesFailed: If every candidate, the final attempt
                included, failed
        """
        available = self._source.available_candidates()
        if not available:
            raise EmptyCandidateSet()

        async with self._state.hold() as acquired:
            if not acquired:
                self.logger.info(
                    "🔄 Account switching/restarting in progress, "
                    "skipping duplicate operation"
                )
                return self._skipped()

            if len(available) == 1:
                return await self._restart_single(available[0])
            return await self._rotate(available)

    async def switch_to_specific(self, target: int) -> SwitchResult:
        """
        Switch directly to ``target``.

        An unknown target or a switch already in flight produce an
        unsuccessful result. Errors from the session provider propagate
        unchanged.
        """
        if target not in self._source.available_candidates():
            return SwitchResult(
                success=False,
                reason=f"Switch failed: Account #{target} invalid or does not exist.",
                error_kind=SwitchErrorKind.INVALID_TARGET,
            )

        async with self._state.hold() as acquired:
            if not acquired:
                self.logger.info(
                    "🔄 Account switching in progress, skipping duplicate operation"
                )
                return self._skipped()

            self.logger.info(f"🔄 Starting switch to specified account #{target}...")
            try:
                await self._provider.switch_account(target)
            except Exception as e:
                self.logger.error(
                    f"❌ Switch to specified account #{target} failed: {e}"
                )
                raise

            self._state.reset_counters()
            self.logger.success(
                f"✅ Successfully switched to account #{target}, counters reset."
            )
            return SwitchResult(success=True, new_index=target)

    async def handle_failure(
        self,
        details: FailureDetails | HTTPException,
        notify: NotificationSink | None = None,
    ) -> SwitchResult | None:
        """
        Record an upstream failure and switch accounts when policy says so.

        Nothing raised by the switch escapes; every outcome is reported
        through ``notify`` instead.

        Args:
            details: Classification of the failure (status code required)
            notify: Optional consumer of human-readable status messages

        Returns:
            The switch result on success or skip, ``None`` when no switch
            was triggered or the switch failed
        """
        if isinstance(details, HTTPException):
            details = FailureDetails.from_http_exception(details)

        failures = self._state.record_failure()
        if self._policy.threshold_enabled:
            self.logger.warning(
                f"⚠️ Request failed - failure count: "
                f"{failures}/{self._policy.failure_threshold} "
                f"(Current account index: {self.current_index})"
            )
        else:
            self.logger.warning(
                f"⚠️ Request failed - failure count: {failures} "
                f"(Current account index: {self.current_index})"
            )

        trigger = self._switch_trigger(details, failures)
        if trigger is None:
            return None

        if trigger == SwitchTrigger.IMMEDIATE_STATUS:
            self.logger.warning(
                f"🔴 Received status code {details.status}, "
                f"triggering immediate account switch..."
            )
        else:
            self.logger.warning(
                f"🔴 Failure threshold reached "
                f"({failures}/{self._policy.failure_threshold})! "
                f"Preparing to switch account..."
            )

        try:
            result = await self.switch_to_next()
        except Exception as e:
            if getattr(e, "kind", None) == SwitchErrorKind.SINGLE_CANDIDATE_FAILURE:
                self._state.reset_failures()
                self.logger.info("Only one account available, failure count reset.")
            self.logger.error(f"Background account switching task failed: {e}")
            message = messages.failure_message(e, self.current_index)
            await messages.send(notify, message)
            return None

        if not result.success:
            self.logger.warning(f"⚠️ Account switch skipped: {result.reason}")
            await messages.send(notify, messages.skipped_message(result))
            return result

        message = messages.success_message(result)
        self.logger.info(message)
        await messages.send(notify, message)
        return result

    def increment_usage_count(self) -> int:
        """Count one use of the active account and return the running total."""
        usage = self._state.record_usage()
        self.logger.debug(f"Usage count: {usage}")
        return usage

    def should_switch_by_usage(self) -> bool:
        """Check if the active account has reached its rotation quota."""
        return (
            self._policy.usage_rotation_enabled
            and self._state.usage_count >= self._policy.switch_on_uses
        )

    def get_stats(self) -> dict[str, Any]:
        """Get switcher state for monitoring."""
        return {
            "current_index": self.current_index,
            "available_candidates": self._source.available_candidates(),
            "failure_count": self._state.failure_count,
            "usage_count": self._state.usage_count,
            "busy": self._state.busy,
            "failure_threshold": self._policy.failure_threshold,
            "immediate_switch_statuses": sorted(
                self._policy.immediate_switch_statuses
            ),
            "switch_on_uses": self._policy.switch_on_uses,
        }

    def _switch_trigger(
        self, details: FailureDetails, failures: int
    ) -> SwitchTrigger | None:
        """Decide whether the failure just recorded escalates into a switch."""
        if details.status in self._policy.immediate_switch_statuses:
            return SwitchTrigger.IMMEDIATE_STATUS
        if self._policy.threshold_enabled and failures >= self._policy.failure_threshold:
            return SwitchTrigger.FAILURE_THRESHOLD
        return None

    @staticmethod
    def _skipped() -> SwitchResult:
        return SwitchResult(
            success=False,
            reason="Switch already in progress.",
            error_kind=SwitchErrorKind.SKIPPED,
        )

    async def _restart_single(self, index: int) -> SwitchResult:
        """Restart the only candidate in place."""
        self.logger.banner(
            "INFO",
            "🔄 Single account mode: Rotation threshold reached, "
            "performing in-place restart...",
            f"   • Target account: #{index}",
        )

        try:
            await self._provider.restart_in_place(index)
        except Exception as e:
            self.logger.error(f"❌ Single account restart failed: {e}")
            if getattr(e, "kind", None) == SwitchErrorKind.FALLBACK_RECOVERED:
                raise
            raise SingleCandidateFailure(index, e) from e

        self._state.reset_counters()
        self.logger.success(
            f"✅ Single account #{index} restart/refresh successful, usage count reset."
        )
        return SwitchResult(success=True, new_index=index)

    async def _rotate(self, available: list[int]) -> SwitchResult:
        """Try every other candidate in order, then the current one once more."""
        current = self.current_index
        original = current if current in available else None
        trials = trial_order(available, current)

        if original is not None:
            start_line = f"   • Starting from: #{original}"
        else:
            start_line = "   • No current account, will try all available accounts"
        self.logger.banner(
            "INFO",
            "🔄 Multi-account mode: Starting intelligent account switching",
            f"   • Current account: #{current}",
            f"   • Available accounts: {available}",
            start_line,
        )

        failed_accounts: list[int] = []
        for attempt, index in enumerate(trials, start=1):
            self.logger.info(
                f"🔄 Attempting to switch to account #{index} "
                f"({attempt}/{len(trials)} accounts)..."
            )
            if await self._try_switch(index):
                if failed_accounts:
                    self.logger.success(
                        f"✅ Successfully switched to account #{index} after "
                        f"skipping failed accounts: {failed_accounts}"
                    )
                else:
                    self.logger.success(
                        f"✅ Successfully switched to account #{index}, counters reset."
                    )
                return SwitchResult(
                    success=True, new_index=index, failed_accounts=failed_accounts
                )
            failed_accounts.append(index)

        if original is not None:
            self.logger.banner(
                "WARNING",
                f"⚠️ All other accounts failed. Making final attempt with "
                f"original starting account #{original}...",
            )
            if await self._try_switch(original):
                self.logger.success(
                    f"✅ Final attempt succeeded! Switched to account #{original}."
                )
                return SwitchResult(
                    success=True,
                    new_index=original,
                    failed_accounts=failed_accounts,
                    final_attempt=True,
                )
            self.logger.critical(
                f"❌ Final attempt with account #{original} also failed!"
            )
            failed_accounts.append(original)

        self.logger.critical(
            f"All {len(available)} accounts failed! "
            f"Failed accounts: {failed_accounts}"
        )
        self.current_index = None
        raise AllCandidatesFailed(failed_accounts, len(available))

    async def _try_switch(self, index: int) -> bool:
        """One switch attempt; counters are reset when it succeeds."""
        try:
            await self._provider.switch_account(index)
        except Exception as e:
            self.logger.error(f"❌ Account #{index} failed: {e}")
            return False

        self._state.reset_counters()
        return True
