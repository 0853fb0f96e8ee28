"""Store operations shared by the asynchronous and blocking stores.

Every operation runs under one lock, so a delete scan and its removals form a single critical section that a
concurrent set cannot interleave with.
"""

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from pycookiestore.backend import CookieBackend
from pycookiestore.codec import project_records
from pycookiestore.cookie import EPOCH, CookieRecord
from pycookiestore.exceptions import BackingStoreError, BackingStoreTimeoutError, CookieStoreError, StoreClosedError
from pycookiestore.matching import extract_host, host_matches_domain, matches_delete
from pycookiestore.types import CookieFields

logger = logging.getLogger(__name__)


class StoreOperations:
    def __init__(self, backend: CookieBackend) -> None:
        self._backend = backend
        self._lock = threading.Lock()
        self._closed = False
        self._backend_closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @contextmanager
    def _operation(self, name: str) -> Iterator[CookieBackend]:
        with self._lock:
            if self._closed:
                raise StoreClosedError("Store was closed", details={"operation": name})
            try:
                yield self._backend
            except CookieStoreError:
                raise
            except Exception as e:
                logger.exception("Cookie backend failed during %s", name)
                msg = f"Cookie backend failed during {name}"
                raise BackingStoreError(msg, details={"operation": name, "cause": repr(e)}) from e

    def set_cookie(self, record: CookieRecord) -> bool:
        with self._operation("setCookie") as backend:
            backend.set_cookie(record)
        return True

    def get_cookies(self, url: str) -> list[CookieFields]:
        host = extract_host(url)
        with self._operation("getCookies") as backend:
            if host is None:
                logger.info("Cannot get cookies. No host found for URL: %s", url)
                return []
            records = backend.get_all_cookies()
        return project_records(record for record in records if host_matches_domain(host, record.domain))

    def get_all_cookies(self) -> list[CookieFields]:
        with self._operation("getAllCookies") as backend:
            records = backend.get_all_cookies()
        return project_records(records)

    def delete_cookie(self, url: str, name: str, domain: str, path: str) -> bool:
        with self._operation("deleteCookie") as backend:
            for record in backend.get_all_cookies():
                if matches_delete(record, url, domain, path, name=name):
                    deleted = backend.delete_cookie(record)
                    logger.debug("Deleted cookie %s for domain %s path %s: %s", name, record.domain, path, deleted)
                    return deleted
        return False

    def delete_cookies(self, url: str, domain: str, path: str) -> bool:
        """Delete every record matching domain and path. An empty url deletes regardless of origin."""
        origin = url or None
        with self._operation("deleteCookies") as backend:
            matched = [record for record in backend.get_all_cookies() if matches_delete(record, origin, domain, path)]
            for record in matched:
                backend.delete_cookie(record)
        logger.debug("Deleted %d cookie(s) for domain %s path %s", len(matched), domain, path)
        return True

    def delete_all_cookies(self) -> bool:
        with self._operation("deleteAllCookies") as backend:
            removed = backend.remove_all(EPOCH)
        logger.debug("Deleted all %d cookie(s)", removed)
        return True

    def close(self, timeout: float | None = None) -> None:
        """Close the backend once. New operations are refused as soon as close starts.

        With a timeout, waiting for an in-flight operation raises BackingStoreTimeoutError and leaves the backend
        open, a later close retries it.
        """
        self._closed = True
        if not self._lock.acquire(timeout=-1 if timeout is None else timeout):
            msg = f"Cookie backend did not complete close within {timeout}s"
            raise BackingStoreTimeoutError(msg, details={"operation": "close", "timeout": timeout})
        try:
            if self._backend_closed:
                return
            self._backend_closed = True
            try:
                self._backend.close()
            except Exception as e:
                logger.exception("Cookie backend failed to close")
                raise BackingStoreError("Cookie backend failed to close", details={"cause": repr(e)}) from e
        finally:
            self._lock.release()
        logger.debug("Cookie store closed")
