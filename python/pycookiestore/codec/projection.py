from collections.abc import Iterable

from pycookiestore.cookie import CookieRecord
from pycookiestore.types import CookieFields


def encode_record(record: CookieRecord) -> CookieFields:
    """Convert a record to its wire representation."""
    return {
        "name": record.name,
        "value": record.value,
        "expiresDate": record.expires_ms,
        "isSessionOnly": record.is_session_only,
        "domain": record.domain,
        "sameSite": record.same_site,
        "isSecure": record.is_secure,
        "isHttpOnly": record.is_http_only,
        "path": record.path,
    }


def project_records(records: Iterable[CookieRecord]) -> list[CookieFields]:
    """Encode records keeping their order."""
    return [encode_record(record) for record in records]
