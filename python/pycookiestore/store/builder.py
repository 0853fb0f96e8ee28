from datetime import timedelta
from typing import Self

from pycookiestore.backend import CookieBackend, MemoryCookieBackend
from pycookiestore.config import CookieStoreSettings
from pycookiestore.exceptions import BuilderError
from pycookiestore.store.store import BlockingCookieStore, CookieStore


class BaseCookieStoreBuilder:
    """Fluent builder for cookie stores. The builder is single-use, calling build consumes it.

    Unset options fall back to CookieStoreSettings (PYCOOKIESTORE_* environment variables).
    """

    def __init__(self, settings: CookieStoreSettings | None = None) -> None:
        """Start a builder. Settings are read from the environment when not given."""
        self._settings = settings
        self._backend: CookieBackend | None = None
        self._timeout: timedelta | None = None
        self._timeout_set = False
        self._consumed = False

    def backend(self, backend: CookieBackend) -> Self:
        """Use the given backend. The built store takes ownership and closes it. Defaults to an in-memory backend."""
        self._check_not_consumed()
        self._backend = backend
        return self

    def timeout(self, timeout: timedelta | None) -> Self:
        """Timeout for each backend call. None waits indefinitely, which is the default."""
        self._check_not_consumed()
        if timeout is not None and timeout <= timedelta(0):
            raise BuilderError("timeout must be positive", details={"timeout": timeout.total_seconds()})
        self._timeout = timeout
        self._timeout_set = True
        return self

    def _consume(self) -> tuple[CookieBackend, timedelta | None]:
        self._check_not_consumed()
        self._consumed = True

        timeout = self._timeout
        if not self._timeout_set:
            settings = self._settings if self._settings is not None else CookieStoreSettings()
            timeout = settings.timeout_delta
        backend = self._backend if self._backend is not None else MemoryCookieBackend()
        return backend, timeout

    def _check_not_consumed(self) -> None:
        if self._consumed:
            raise BuilderError("Builder was already used")


class CookieStoreBuilder(BaseCookieStoreBuilder):
    """Builder for the asynchronous CookieStore."""

    def build(self) -> CookieStore:
        """Build and return the store. Consumes the builder."""
        return CookieStore(*self._consume())


class BlockingCookieStoreBuilder(BaseCookieStoreBuilder):
    """Builder for the BlockingCookieStore."""

    def build(self) -> BlockingCookieStore:
        """Build and return the store. Consumes the builder."""
        return BlockingCookieStore(*self._consume())
