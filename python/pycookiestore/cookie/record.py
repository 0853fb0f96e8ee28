from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from pycookiestore.types import SameSite

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_MILLISECOND = timedelta(milliseconds=1)


@dataclass(frozen=True, slots=True)
class CookieRecord:
    """An immutable stored cookie.

    The domain is kept exactly as supplied. Leading dot ambiguity is resolved by matching, never by storage.
    An expiry in the past does not remove the record, expiry enforcement belongs to the caller.
    """

    name: str
    value: str
    domain: str
    path: str = "/"
    expires_at: datetime | None = None
    is_secure: bool = False
    is_http_only: bool = False
    same_site: SameSite | None = None
    origin_url: str | None = None
    max_age: int | None = None

    @staticmethod
    def from_expires_ms(milliseconds: int) -> datetime:
        """Absolute UTC instant for a count of milliseconds since the epoch."""
        return EPOCH + timedelta(milliseconds=milliseconds)

    @property
    def is_session_only(self) -> bool:
        """True when the cookie has no expiry."""
        return self.expires_at is None

    @property
    def expires_ms(self) -> int | None:
        """Expiry as integer milliseconds since the epoch, or None for session cookies."""
        if self.expires_at is None:
            return None
        return (self.expires_at - EPOCH) // _MILLISECOND
