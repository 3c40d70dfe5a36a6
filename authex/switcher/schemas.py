from typing import Any

from fastapi import HTTPException
from pydantic import BaseModel, Field, model_validator

from authex.switcher.config import switcher_settings
from authex.switcher.enums import SwitchErrorKind


class FailurePolicy(BaseModel):
    """Immutable policy deciding when failures and usage trigger a switch."""

    failure_threshold: int = Field(
        ge=0, default=3, description="Failures before switching, 0 disables"
    )
    immediate_switch_statuses: frozenset[int] = frozenset()
    switch_on_uses: int = Field(
        ge=0, default=0, description="Uses before rotating, 0 disables"
    )

    @classmethod
    def from_settings(cls, settings: Any = None) -> "FailurePolicy":
        """Build a policy from ``SWITCHER_*`` settings."""
        settings = settings or switcher_settings
        return cls(
            failure_threshold=settings.FAILURE_THRESHOLD,
            immediate_switch_statuses=frozenset(
                settings.IMMEDIATE_SWITCH_STATUS_CODES
            ),
            switch_on_uses=settings.SWITCH_ON_USES,
        )

    @property
    def threshold_enabled(self) -> bool:
        return self.failure_threshold > 0

    @property
    def usage_rotation_enabled(self) -> bool:
        return self.switch_on_uses > 0

    class Config:
        frozen = True


class FailureDetails(BaseModel):
    """Classification of one upstream failure, supplied by the caller."""

    status: int
    message: str | None = None

    @classmethod
    def from_http_exception(cls, exc: HTTPException) -> "FailureDetails":
        detail = exc.detail if isinstance(exc.detail, str) else None
        return cls(status=exc.status_code, message=detail)

    class Config:
        frozen = True


class SwitchResult(BaseModel):
    """Outcome of a switch operation."""

    success: bool
    new_index: int | None = None
    failed_accounts: list[int] = Field(default_factory=list)
    final_attempt: bool = False
    reason: str | None = None
    error_kind: SwitchErrorKind | None = None

    @model_validator(mode="after")
    def validate_outcome(self) -> "SwitchResult":
        """A successful result names its account, a failed one says why."""
        if self.success and self.new_index is None:
            raise ValueError("Successful switch result must carry new_index")
        if not self.success and self.error_kind is None:
            raise ValueError("Unsuccessful switch result must carry error_kind")
        return self

    @property
    def skipped(self) -> bool:
        return self.error_kind == SwitchErrorKind.SKIPPED

    class Config:
        extra = "forbid"
