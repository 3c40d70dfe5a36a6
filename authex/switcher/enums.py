from enum import Enum


class SwitchErrorKind(Enum):
    """Discriminator shared by negative switch results and raised switch errors."""

    SKIPPED = "skipped"  # Another switch is in flight
    INVALID_TARGET = "invalid_target"  # Target is not an available candidate
    EMPTY_CANDIDATE_SET = "empty_candidate_set"
    SINGLE_CANDIDATE_FAILURE = "single_candidate_failure"
    ALL_CANDIDATES_FAILED = "all_candidates_failed"
    FALLBACK_RECOVERED = "fallback_recovered"  # Provider restored another account
    SESSION_ERROR = "session_error"


class SwitchTrigger(Enum):
    """Why a failure report escalated into a switch."""

    IMMEDIATE_STATUS = "immediate_status"
    FAILURE_THRESHOLD = "failure_threshold"
