from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class ISwitchState(ABC):
    """Interface for the mutable state shared by switch operations."""

    @property
    @abstractmethod
    def failure_count(self) -> int:
        """Failures reported since the last successful switch."""
        raise NotImplementedError

    @property
    @abstractmethod
    def usage_count(self) -> int:
        """Uses counted since the last successful switch."""
        raise NotImplementedError

    @property
    @abstractmethod
    def busy(self) -> bool:
        """Check if a switch is in flight."""
        raise NotImplementedError

    @abstractmethod
    def record_failure(self) -> int:
        """Increment and return the failure count."""
        raise NotImplementedError

    @abstractmethod
    def record_usage(self) -> int:
        """Increment and return the usage count."""
        raise NotImplementedError

    @abstractmethod
    def reset_failures(self) -> None:
        """Reset only the failure count."""
        raise NotImplementedError

    @abstractmethod
    def reset_counters(self) -> None:
        """Reset both counters."""
        raise NotImplementedError

    @abstractmethod
    def hold(self) -> AbstractAsyncContextManager[bool]:
        """Try to take the busy flag, yielding whether it was acquired."""
        raise NotImplementedError
