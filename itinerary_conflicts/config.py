"""Engine configuration and default detection thresholds."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_BASE_DIR = Path(__file__).resolve().parents[1]
_ENV_FILE = _BASE_DIR / ".env"


class Settings(BaseSettings):
    """Detection defaults loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE, env_file_encoding="utf-8", extra="ignore"
    )

    # Buffers
    min_buffer_minutes: int = Field(
        default=5, ge=0, description="Buffer below which a transition is very tight"
    )
    tight_buffer_minutes: int = Field(
        default=15, ge=0, description="Preferred slack after travel between activities"
    )

    # Gaps
    long_gap_minutes: int = Field(
        default=180, ge=0, description="Idle gap considered unusually long"
    )

    # Informational notices
    include_infos: bool = Field(
        default=True, description="Include info-level conflicts in results"
    )
    check_past_midnight: bool = Field(
        default=True, description="Flag activities that run past midnight"
    )
    past_midnight_cutoff_minutes: int = Field(
        default=360,
        ge=0,
        le=1440,
        description="Latest end time (minutes) still read as a past-midnight span",
    )


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get detection settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
