from fastapi import status
from pydantic_settings import BaseSettings, SettingsConfigDict

from authex.utils import singleton


@singleton
class SwitcherSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SWITCHER_", env_file=".env", case_sensitive=False
    )

    FAILURE_THRESHOLD: int = 3  # 0 disables threshold switching
    IMMEDIATE_SWITCH_STATUS_CODES: list[int] = [
        status.HTTP_429_TOO_MANY_REQUESTS,
        status.HTTP_503_SERVICE_UNAVAILABLE,
    ]
    SWITCH_ON_USES: int = 0  # 0 disables usage-based rotation


switcher_settings = SwitcherSettings()
