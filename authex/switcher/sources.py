from collections.abc import Iterable

from authex.logging.logger import AuthexLogger
from authex.switcher.interfaces import CandidateSource


class StaticCandidateSource(CandidateSource):
    """
    In-memory candidate source over a mutable list of account indices.

    Suitable for tests and for applications that load their account list
    once and edit it at runtime. Order is preserved and duplicates are
    dropped, keeping the first occurrence.
    """

    logger = AuthexLogger("StaticCandidateSource")

    def __init__(self, candidates: Iterable[int] = ()) -> None:
        self._candidates: list[int] = []
        self.set_candidates(candidates)

    def available_candidates(self) -> list[int]:
        return list(self._candidates)

    def set_candidates(self, candidates: Iterable[int]) -> None:
        """Replace the whole candidate list."""
        self._candidates = list(dict.fromkeys(candidates))
        self.logger.debug(f"Candidates set to {self._candidates}")

    def add(self, index: int) -> None:
        """Append a candidate unless it is already present."""
        if index not in self._candidates:
            self._candidates.append(index)
            self.logger.debug(f"Added candidate #{index}")

    def remove(self, index: int) -> bool:
        """Remove a candidate, returning whether it was present."""
        if index not in self._candidates:
            return False
        self._candidates.remove(index)
        self.logger.debug(f"Removed candidate #{index}")
        return True

    def __len__(self) -> int:
        return len(self._candidates)
