"""Fake backends for exercising store error paths in tests."""

import threading
from datetime import datetime

from pycookiestore.backend import MemoryCookieBackend
from pycookiestore.cookie import CookieRecord


class FailingCookieBackend(MemoryCookieBackend):
    """In-memory backend that raises on selected methods.

    Example:
        backend = FailingCookieBackend(fail_on={"delete_cookie"}, error=OSError("disk full"))
    """

    def __init__(self, fail_on: set[str] | None = None, error: Exception | None = None) -> None:
        super().__init__()
        self.fail_on = fail_on if fail_on is not None else {"set_cookie", "get_all_cookies", "delete_cookie"}
        self.error = error if error is not None else RuntimeError("backend failure")
        self.close_calls = 0

    def _maybe_fail(self, method: str) -> None:
        if method in self.fail_on:
            raise self.error

    def set_cookie(self, record: CookieRecord) -> None:
        self._maybe_fail("set_cookie")
        super().set_cookie(record)

    def get_all_cookies(self) -> list[CookieRecord]:
        self._maybe_fail("get_all_cookies")
        return super().get_all_cookies()

    def delete_cookie(self, record: CookieRecord) -> bool:
        self._maybe_fail("delete_cookie")
        return super().delete_cookie(record)

    def remove_all(self, modified_since: datetime) -> int:
        self._maybe_fail("remove_all")
        return super().remove_all(modified_since)

    def close(self) -> None:
        self.close_calls += 1
        self._maybe_fail("close")


class GatedCookieBackend(MemoryCookieBackend):
    """In-memory backend whose calls block while the gate is held. Simulates a hung platform cookie jar."""

    def __init__(self, max_wait: float = 30.0) -> None:
        super().__init__()
        self._gate = threading.Event()
        self._gate.set()
        self._max_wait = max_wait
        self.entered = threading.Event()

    def hold(self) -> None:
        """Make subsequent calls block until release()."""
        self._gate.clear()
        self.entered.clear()

    def release(self) -> None:
        self._gate.set()

    def _wait(self) -> None:
        self.entered.set()
        self._gate.wait(self._max_wait)

    def set_cookie(self, record: CookieRecord) -> None:
        self._wait()
        super().set_cookie(record)

    def get_all_cookies(self) -> list[CookieRecord]:
        self._wait()
        return super().get_all_cookies()

    def delete_cookie(self, record: CookieRecord) -> bool:
        self._wait()
        return super().delete_cookie(record)

    def remove_all(self, modified_since: datetime) -> int:
        self._wait()
        return super().remove_all(modified_since)
