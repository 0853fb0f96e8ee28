"""PyCookieStore pytest plugin with store fixtures and fake backends."""

from .fakes import FailingCookieBackend, GatedCookieBackend
from .fixtures import blocking_cookie_store, cookie_store, gated_backend, memory_backend

__all__ = [  # noqa: RUF022
    "cookie_store",
    "blocking_cookie_store",
    "gated_backend",
    "memory_backend",
    "FailingCookieBackend",
    "GatedCookieBackend",
]
