from abc import ABC, abstractmethod
from collections.abc import Awaitable
from typing import Protocol, runtime_checkable


class CandidateSource(ABC):
    """Interface for suppliers of the ordered list of usable account indices."""

    @abstractmethod
    def available_candidates(self) -> list[int]:
        """Return the current ordered candidate indices."""
        raise NotImplementedError


class SessionProvider(ABC):
    """Interface for the collaborator that activates account sessions."""

    @abstractmethod
    async def switch_account(self, index: int) -> None:
        """Make ``index`` the active session, raising on failure."""
        raise NotImplementedError

    @abstractmethod
    async def restart_in_place(self, index: int) -> None:
        """Restart the session of the only available account."""
        raise NotImplementedError

    @abstractmethod
    def get_current_index(self) -> int | None:
        """Get the active account index, ``None`` when unset."""
        raise NotImplementedError

    @abstractmethod
    def set_current_index(self, index: int | None) -> None:
        """Set the active account index, ``None`` to unset it."""
        raise NotImplementedError


@runtime_checkable
class NotificationSink(Protocol):
    """Protocol for consumers of human-readable switch status messages.

    Both plain callables and coroutine functions are accepted.
    """

    def __call__(self, message: str) -> None | Awaitable[None]: ...
