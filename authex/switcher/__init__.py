from authex.switcher.coordinator import SwitchCoordinator
from authex.switcher.core import configure_switcher, get_switcher, reset_switcher
from authex.switcher.enums import SwitchErrorKind, SwitchTrigger
from authex.switcher.exceptions import (
    AllCandidatesFailed,
    EmptyCandidateSet,
    SessionError,
    SessionFallbackError,
    SingleCandidateFailure,
    SwitcherError,
    SwitcherNotInitialized,
)
from authex.switcher.interfaces import (
    CandidateSource,
    NotificationSink,
    SessionProvider,
)
from authex.switcher.schemas import FailureDetails, FailurePolicy, SwitchResult
from authex.switcher.selection import next_candidate
from authex.switcher.sources import StaticCandidateSource
from authex.switcher.state import SwitchState

__all__ = [
    "SwitchCoordinator",
    "configure_switcher",
    "get_switcher",
    "reset_switcher",
    "SwitchErrorKind",
    "SwitchTrigger",
    "SwitcherError",
    "EmptyCandidateSet",
    "SingleCandidateFailure",
    "AllCandidatesFailed",
    "SessionError",
    "SessionFallbackError",
    "SwitcherNotInitialized",
    "CandidateSource",
    "SessionProvider",
    "NotificationSink",
    "FailureDetails",
    "FailurePolicy",
    "SwitchResult",
    "next_candidate",
    "StaticCandidateSource",
    "SwitchState",
]
