import asyncio
import logging
from collections.abc import Callable, Mapping
from concurrent.futures import ThreadPoolExecutor
from datetime import timedelta
from typing import Any, Self, TypeVar

from pycookiestore.backend import CookieBackend
from pycookiestore.codec import decode_set_request
from pycookiestore.cookie import CookieRecord
from pycookiestore.exceptions import BackingStoreTimeoutError
from pycookiestore.store.operations import StoreOperations
from pycookiestore.types import CookieFields

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _to_record(cookie: CookieRecord | Mapping[str, Any]) -> CookieRecord:
    if isinstance(cookie, CookieRecord):
        return cookie
    return decode_set_request(cookie)


def _timeout_error(operation: str, timeout: timedelta) -> BackingStoreTimeoutError:
    msg = f"Cookie backend did not complete {operation} within {timeout.total_seconds()}s"
    return BackingStoreTimeoutError(msg, details={"operation": operation, "timeout": timeout.total_seconds()})


class BaseCookieStore:
    """Common state of the asynchronous and blocking stores."""

    def __init__(self, backend: CookieBackend, timeout: timedelta | None) -> None:
        """Do not use directly. Instead, use CookieStoreBuilder or BlockingCookieStoreBuilder."""
        self._ops = StoreOperations(backend)
        self._timeout = timeout
        logger.debug("Cookie store opened with %s", type(backend).__name__)

    @property
    def closed(self) -> bool:
        """Whether the store has been closed."""
        return self._ops.closed

    @property
    def timeout(self) -> timedelta | None:
        """Timeout applied to each backend call, or None to wait indefinitely."""
        return self._timeout

    @property
    def _timeout_seconds(self) -> float | None:
        return None if self._timeout is None else self._timeout.total_seconds()


class CookieStore(BaseCookieStore):
    """Asynchronous cookie store. Backend calls run in worker threads, one result per call.

    Use as an async context manager to close the backend when done.
    """

    async def set_cookie(self, cookie: CookieRecord | Mapping[str, Any]) -> bool:
        """Store a cookie. A mapping is decoded from setCookie wire arguments first."""
        record = _to_record(cookie)
        return await self._run("setCookie", self._ops.set_cookie, record)

    async def get_cookies(self, url: str) -> list[CookieFields]:
        """Cookies whose domain applies to the host of url. A url without a host yields an empty list."""
        return await self._run("getCookies", self._ops.get_cookies, url)

    async def get_all_cookies(self) -> list[CookieFields]:
        """All stored cookies."""
        return await self._run("getAllCookies", self._ops.get_all_cookies)

    async def delete_cookie(self, url: str, name: str, domain: str, path: str) -> bool:
        """Delete the first matching cookie. Returns False if nothing matched."""
        return await self._run("deleteCookie", self._ops.delete_cookie, url, name, domain, path)

    async def delete_cookies(self, url: str, domain: str, path: str) -> bool:
        """Delete every cookie matching domain and path regardless of name. Always returns True."""
        return await self._run("deleteCookies", self._ops.delete_cookies, url, domain, path)

    async def delete_all_cookies(self) -> bool:
        """Delete every stored cookie. Always returns True."""
        return await self._run("deleteAllCookies", self._ops.delete_all_cookies)

    async def close(self) -> None:
        """Close the store and its backend. Further operations raise StoreClosedError.

        With a timeout configured, an in-flight call that does not finish in time raises BackingStoreTimeoutError.
        """
        await self._run("close", self._ops.close, self._timeout_seconds)

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def _run(self, operation: str, func: Callable[..., T], *args: Any) -> T:
        if self._timeout is None:
            return await asyncio.to_thread(func, *args)
        try:
            return await asyncio.wait_for(asyncio.to_thread(func, *args), timeout=self._timeout.total_seconds())
        except TimeoutError as e:
            raise _timeout_error(operation, self._timeout) from e


class BlockingCookieStore(BaseCookieStore):
    """Blocking cookie store. Calls run on the caller's thread unless a timeout is configured.

    Use as a context manager to close the backend when done.
    """

    def __init__(self, backend: CookieBackend, timeout: timedelta | None) -> None:
        """Do not use directly. Instead, use BlockingCookieStoreBuilder."""
        super().__init__(backend, timeout)
        self._executor: ThreadPoolExecutor | None = None
        if timeout is not None:
            self._executor = ThreadPoolExecutor(thread_name_prefix="pycookiestore")

    def set_cookie(self, cookie: CookieRecord | Mapping[str, Any]) -> bool:
        """Store a cookie. A mapping is decoded from setCookie wire arguments first."""
        record = _to_record(cookie)
        return self._run("setCookie", self._ops.set_cookie, record)

    def get_cookies(self, url: str) -> list[CookieFields]:
        """Cookies whose domain applies to the host of url. A url without a host yields an empty list."""
        return self._run("getCookies", self._ops.get_cookies, url)

    def get_all_cookies(self) -> list[CookieFields]:
        """All stored cookies."""
        return self._run("getAllCookies", self._ops.get_all_cookies)

    def delete_cookie(self, url: str, name: str, domain: str, path: str) -> bool:
        """Delete the first matching cookie. Returns False if nothing matched."""
        return self._run("deleteCookie", self._ops.delete_cookie, url, name, domain, path)

    def delete_cookies(self, url: str, domain: str, path: str) -> bool:
        """Delete every cookie matching domain and path regardless of name. Always returns True."""
        return self._run("deleteCookies", self._ops.delete_cookies, url, domain, path)

    def delete_all_cookies(self) -> bool:
        """Delete every stored cookie. Always returns True."""
        return self._run("deleteAllCookies", self._ops.delete_all_cookies)

    def close(self) -> None:
        """Close the store and its backend. Further operations raise StoreClosedError.

        With a timeout configured, an in-flight call that does not finish in time raises BackingStoreTimeoutError.
        """
        try:
            self._run("close", self._ops.close, self._timeout_seconds)
        finally:
            if self._executor is not None:
                self._executor.shutdown(wait=False)

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def _run(self, operation: str, func: Callable[..., T], *args: Any) -> T:
        if self._executor is None or self._timeout is None or self._ops.closed:
            return func(*args)
        future = self._executor.submit(func, *args)
        try:
            return future.result(timeout=self._timeout.total_seconds())
        except TimeoutError as e:
            raise _timeout_error(operation, self._timeout) from e
