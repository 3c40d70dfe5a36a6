import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from authex.switcher.state.interfaces import ISwitchState


class SwitchState(ISwitchState):
    """
    Counters and busy flag of one account switcher.

    All methods are meant to be called from a single event loop. Counter
    updates never await, so they cannot interleave with a switch resetting
    them. The busy flag is an ``asyncio.Lock`` that is only ever taken when
    free, which completes without yielding to the loop.
    """

    def __init__(self) -> None:
        self._failure_count = 0
        self._usage_count = 0
        self._busy = asyncio.Lock()

    @property
    def failure_count(self) -> int:
        return self._failure_count

    @property
    def usage_count(self) -> int:
        return self._usage_count

    @property
    def busy(self) -> bool:
        return self._busy.locked()

    def record_failure(self) -> int:
        self._failure_count += 1
        return self._failure_count

    def record_usage(self) -> int:
        self._usage_count += 1
        return self._usage_count

    def reset_failures(self) -> None:
        self._failure_count = 0

    def reset_counters(self) -> None:
        self._failure_count = 0
        self._usage_count = 0

    @asynccontextmanager
    async def hold(self) -> AsyncIterator[bool]:
        """
        Take the busy flag for the duration of the block.

        Yields ``False`` without waiting when another switch holds it.
        The flag is released on every exit path, including cancellation.
        """
        if self._busy.locked():
            yield False
            return

        async with self._busy:
            yield True
