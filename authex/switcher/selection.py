from collections.abc import Sequence

from authex.logging.logger import AuthexLogger

logger = AuthexLogger("Selection")


def next_candidate(candidates: Sequence[int], current_index: int | None) -> int | None:
    """
    Pick the candidate after ``current_index``, wrapping around.

    Returns ``None`` when there are no candidates. An index that is not in
    ``candidates`` yields the first candidate.
    """
    if not candidates:
        return None

    try:
        position = candidates.index(current_index)
    except ValueError:
        logger.warning(
            f"Current index {current_index} not in available list, "
            f"switching to first available index."
        )
        return candidates[0]

    return candidates[(position + 1) % len(candidates)]


def trial_order(candidates: Sequence[int], current_index: int | None) -> list[int]:
    """
    Order in which candidates are tried during a switch.

    Walks forward from the current candidate and leaves it out, so the
    current account is never retried before the others. Without a current
    candidate every candidate is tried, starting from the first.
    """
    if current_index not in candidates:
        return list(candidates)

    start = candidates.index(current_index)
    size = len(candidates)
    return [candidates[(start + offset) % size] for offset in range(1, size)]
