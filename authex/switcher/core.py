from authex.logging.logger import AuthexLogger
from authex.switcher.coordinator import SwitchCoordinator
from authex.switcher.exceptions import SwitcherNotInitialized
from authex.switcher.interfaces import CandidateSource, SessionProvider
from authex.switcher.schemas import FailurePolicy
from authex.switcher.state import SwitchState

logger = AuthexLogger("SwitcherCore")

_coordinator: SwitchCoordinator | None = None


def configure_switcher(
    source: CandidateSource,
    provider: SessionProvider,
    policy: FailurePolicy | None = None,
) -> SwitchCoordinator:
    """Configures the process-wide account switcher.

    Args:
        source (CandidateSource): Supplier of available account indices.
        provider (SessionProvider): Collaborator that activates sessions.
        policy (FailurePolicy | None): Optional policy, ``SWITCHER_*`` settings otherwise.

    Returns:
        SwitchCoordinator: The installed coordinator.
    """
    global _coordinator

    if not isinstance(source, CandidateSource):
        raise TypeError("source must be an instance of CandidateSource")
    if not isinstance(provider, SessionProvider):
        raise TypeError("provider must be an instance of SessionProvider")

    policy = policy or FailurePolicy.from_settings()
    logger.debug(f"Using failure policy {policy.model_dump()}")

    _coordinator = SwitchCoordinator(source, provider, policy, SwitchState())
    logger.debug("Account switcher configured")
    return _coordinator


def get_switcher() -> SwitchCoordinator:
    """Return the coordinator installed by ``configure_switcher``."""
    if _coordinator is None:
        raise SwitcherNotInitialized()
    return _coordinator


def reset_switcher() -> None:
    """Forget the installed coordinator."""
    global _coordinator
    _coordinator = None
