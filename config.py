"""Application configuration using Pydantic Settings.

Every value can be overridden via environment variables prefixed with
DIJKSTRA_VIZ_, for example:

- DIJKSTRA_VIZ_DEFAULT_START=a
- DIJKSTRA_VIZ_STEP_INTERVAL_MS=400
- DIJKSTRA_VIZ_GRAPH_TEXT="a: b(3)\\nb: c(4)"
- DIJKSTRA_VIZ_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

import secrets
from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Visualizer configuration.

    Attributes:
        default_start: Start node used when a run request names none.
        default_end: End node used when a run request names none.
        step_interval_ms: Delay between animated steps (browser and console).
        graph_text: Adjacency-list text for a custom graph; the built-in
            sample graph is used when unset.
        host / port / debug: Flask server options.
        log_level: Level for the ``dijkstra_viz`` logger tree.
        secret_key: Flask session signing key.
    """

    model_config = SettingsConfigDict(env_prefix="DIJKSTRA_VIZ_")

    default_start: str = "a"
    default_end: str = "z"
    step_interval_ms: int = Field(default=1000, ge=20)

    graph_text: Optional[str] = None

    host: str = "127.0.0.1"
    port: int = 5000
    debug: bool = False

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    secret_key: str = Field(default_factory=lambda: secrets.token_hex(32))

    @property
    def step_interval(self) -> float:
        """Step interval in seconds."""
        return self.step_interval_ms / 1000.0


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the singleton settings instance.

    Settings are loaded once and cached. Call reset_settings() first to
    pick up changed environment variables (e.g., in tests).
    """
    return Settings()


def reset_settings() -> None:
    """Reset the settings cache."""
    get_settings.cache_clear()
