"""Cookie record type."""

from pycookiestore.cookie.record import EPOCH, CookieRecord

__all__ = ["EPOCH", "CookieRecord"]
