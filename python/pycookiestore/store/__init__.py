"""Cookie store classes and builders."""

from pycookiestore.store.builder import BaseCookieStoreBuilder, BlockingCookieStoreBuilder, CookieStoreBuilder
from pycookiestore.store.store import BaseCookieStore, BlockingCookieStore, CookieStore

__all__ = [
    "BaseCookieStore",
    "BaseCookieStoreBuilder",
    "BlockingCookieStore",
    "BlockingCookieStoreBuilder",
    "CookieStore",
    "CookieStoreBuilder",
]
