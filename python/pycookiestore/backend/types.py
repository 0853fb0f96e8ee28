"""Cookie backend types and interfaces."""

from datetime import datetime
from typing import Protocol

from pycookiestore.cookie import CookieRecord


class CookieBackend(Protocol):
    """Storage engine behind a cookie store.

    Implementations must be thread-safe. The store may call them from worker threads, and it serializes its own
    enumerate-then-mutate sequences, but independent stores may share one backend.
    """

    def set_cookie(self, record: CookieRecord) -> None:
        """Store a cookie.

        Whether an existing cookie with the same name, domain and path is replaced or kept alongside is up to the
        backend.

        Args:
            record: Cookie to store
        """

    def get_all_cookies(self) -> list[CookieRecord]:
        """Return a snapshot of all stored cookies in a stable iteration order."""

    def delete_cookie(self, record: CookieRecord) -> bool:
        """Remove one stored cookie.

        Args:
            record: A cookie previously returned by get_all_cookies

        Returns:
            True if the cookie was stored and has been removed
        """

    def remove_all(self, modified_since: datetime) -> int:
        """Remove every cookie modified at or after modified_since.

        Args:
            modified_since: Horizon, the epoch removes everything

        Returns:
            Number of removed cookies
        """

    def close(self) -> None:
        """Release backend resources. Called once when the owning store closes."""
