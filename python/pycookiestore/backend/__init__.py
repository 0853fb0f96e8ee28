"""Cookie backends."""

from pycookiestore.backend.memory import MemoryCookieBackend
from pycookiestore.backend.types import CookieBackend

__all__ = ["CookieBackend", "MemoryCookieBackend"]
