from datetime import timedelta

from pydantic_settings import BaseSettings, SettingsConfigDict


class CookieStoreSettings(BaseSettings):
    """Defaults for store builders, read from PYCOOKIESTORE_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="PYCOOKIESTORE_", env_ignore_empty=True, extra="ignore")

    # Seconds to wait for a backend call, unset waits forever
    timeout: float | None = None

    @property
    def timeout_delta(self) -> timedelta | None:
        return timedelta(seconds=self.timeout) if self.timeout is not None else None
