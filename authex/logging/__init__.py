from authex.logging.config import (
    configure_authex_logging,
    disable_authex_logging,
    enable_authex_logging,
)
from authex.logging.logger import AuthexLogger

__all__ = [
    "AuthexLogger",
    "configure_authex_logging",
    "enable_authex_logging",
    "disable_authex_logging",
]
