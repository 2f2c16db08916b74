"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - Navigation delays are positive milliseconds

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - Defaults reproduce the reference timings (300ms commit, 2000ms clear, 200ms stagger)
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from trinity.core.domain_types import (
    DEFAULT_CLEAR_DELAY_MS,
    DEFAULT_COMMIT_DELAY_MS,
    DEFAULT_INITIAL_SCREEN,
    DEFAULT_STEP_STAGGER_MS,
)
from trinity.core.navigation_controller import NavigationTimings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Navigation
    initial_screen: str = DEFAULT_INITIAL_SCREEN
    commit_delay_ms: float = Field(DEFAULT_COMMIT_DELAY_MS, gt=0)
    clear_delay_ms: float = Field(DEFAULT_CLEAR_DELAY_MS, gt=0)
    step_stagger_ms: float = Field(DEFAULT_STEP_STAGGER_MS, gt=0)
    max_navigation_sessions: int = Field(100, ge=1)

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    def navigation_timings(self) -> NavigationTimings:
        return NavigationTimings(
            commit_delay_ms=self.commit_delay_ms,
            clear_delay_ms=self.clear_delay_ms,
            step_stagger_ms=self.step_stagger_ms,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
