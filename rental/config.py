"""Application configuration via environment variables."""

from __future__ import annotations

import logging

from pydantic_settings import BaseSettings

from rental.seed import DEFAULT_SEED_PATH

log = logging.getLogger("rental.config")


class Settings(BaseSettings):
    app_name: str = "Bicycle Rental Admin"

    # Admin auth
    admin_api_key: str = ""

    # Server
    host: str = "127.0.0.1"
    port: int = 8080
    debug: bool = False
    log_level: str = "INFO"

    # Data
    seed_path: str = str(DEFAULT_SEED_PATH)
    currency: str = "MAD"
    recent_reservations_limit: int = 5

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def logging_level(self) -> int:
        """Numeric level for LOG_LEVEL. Raises ValueError for unknown names."""
        level = logging.getLevelNamesMapping().get(self.log_level.upper())
        if level is None:
            raise ValueError(f"LOG_LEVEL {self.log_level!r} is not a logging level.")
        return level

    def validate_startup(self) -> list[str]:
        """Validate configuration at startup. Returns warnings, raises on errors."""
        warnings: list[str] = []

        if self.recent_reservations_limit < 0:
            raise ValueError(
                "RECENT_RESERVATIONS_LIMIT must be zero or positive, "
                f"got {self.recent_reservations_limit}."
            )

        self.logging_level()

        # Admin API key: warn if unset
        if not self.admin_api_key:
            if self.debug:
                warnings.append(
                    "ADMIN_API_KEY not set. Admin APIs are open (DEBUG=true)."
                )
            else:
                warnings.append(
                    "ADMIN_API_KEY not set. Admin APIs are locked in production. "
                    "Set ADMIN_API_KEY in .env to enable fleet and status edits."
                )

        return warnings


settings = Settings()


def get_settings() -> Settings:
    """FastAPI dependency returning the process settings."""
    return settings
