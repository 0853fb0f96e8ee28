import threading
from collections.abc import Callable
from datetime import UTC, datetime

from pycookiestore.cookie import CookieRecord


def _utcnow() -> datetime:
    return datetime.now(UTC)


class _Entry:
    __slots__ = ("modified_at", "record")

    def __init__(self, record: CookieRecord, modified_at: datetime) -> None:
        self.record = record
        self.modified_at = modified_at


class MemoryCookieBackend:
    """Thread-safe in-memory cookie backend.

    Cookies are kept in insertion order. Setting a cookie with the same name, domain and path as a stored one
    replaces it in place, so it keeps its position. Domains are compared verbatim: `a.com` and `.a.com` are
    distinct cookies.
    """

    def __init__(self, clock: Callable[[], datetime] = _utcnow) -> None:
        """Create an empty backend. clock supplies modification times."""
        self._entries: list[_Entry] = []
        self._lock = threading.RLock()
        self._clock = clock

    def set_cookie(self, record: CookieRecord) -> None:
        now = self._clock()
        key = (record.name, record.domain, record.path)
        with self._lock:
            for entry in self._entries:
                if (entry.record.name, entry.record.domain, entry.record.path) == key:
                    entry.record = record
                    entry.modified_at = now
                    return
            self._entries.append(_Entry(record, now))

    def get_all_cookies(self) -> list[CookieRecord]:
        with self._lock:
            return [entry.record for entry in self._entries]

    def delete_cookie(self, record: CookieRecord) -> bool:
        with self._lock:
            for i, entry in enumerate(self._entries):
                if entry.record == record:
                    del self._entries[i]
                    return True
            return False

    def remove_all(self, modified_since: datetime) -> int:
        with self._lock:
            kept = [entry for entry in self._entries if entry.modified_at < modified_since]
            removed = len(self._entries) - len(kept)
            self._entries = kept
            return removed

    def close(self) -> None:
        pass

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
