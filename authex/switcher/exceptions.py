from authex.switcher.enums import SwitchErrorKind


class SwitcherError(RuntimeError):
    """Base exception for all account switcher errors."""

    kind: SwitchErrorKind = SwitchErrorKind.SESSION_ERROR

    def __init__(self, message: str = "Account switcher error occurred") -> None:
        super().__init__(message)


class EmptyCandidateSet(SwitcherError):
    """Raised when a switch is requested but no candidates are available."""

    kind = SwitchErrorKind.EMPTY_CANDIDATE_SET

    def __init__(
        self, message: str = "No available authentication sources, cannot switch."
    ) -> None:
        super().__init__(message)


class SingleCandidateFailure(SwitcherError):
    """Restart of the only available candidate failed.

    The provider error is kept unchanged on ``error`` and as ``__cause__``.
    """

    kind = SwitchErrorKind.SINGLE_CANDIDATE_FAILURE

    def __init__(self, candidate: int, error: BaseException) -> None:
        self.candidate = candidate
        self.error = error
        super().__init__(
            f"Only one account is available and restarting account #{candidate} "
            f"failed: {error}"
        )


class AllCandidatesFailed(SwitcherError):
    """Every candidate, including the final attempt, failed to activate."""

    kind = SwitchErrorKind.ALL_CANDIDATES_FAILED

    def __init__(self, failed_accounts: list[int], total: int) -> None:
        self.failed_accounts = list(failed_accounts)
        self.total = total
        super().__init__(
            f"All {total} available accounts failed to initialize "
            f"(including final retry). Failed accounts: {self.failed_accounts}"
        )


class SessionError(SwitcherError):
    """Base for errors raised by session provider implementations."""

    kind = SwitchErrorKind.SESSION_ERROR

    def __init__(self, message: str = "Session activation failed") -> None:
        super().__init__(message)


class SessionFallbackError(SessionError):
    """Activation failed, but the provider restored a previously working account."""

    kind = SwitchErrorKind.FALLBACK_RECOVERED

    def __init__(self, target: int, fallback_index: int, reason: str = "") -> None:
        self.target = target
        self.fallback_index = fallback_index
        message = (
            f"Switching to account #{target} failed, "
            f"fell back to account #{fallback_index}"
        )
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class SwitcherNotInitialized(RuntimeError):
    """Exception when the switcher is used before initialization."""

    def __init__(
        self, message: str = "Account switcher must be configured before use"
    ) -> None:
        super().__init__(message)
