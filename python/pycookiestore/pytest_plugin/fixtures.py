"""Fixtures providing cookie stores over an in-memory backend."""

from collections.abc import AsyncGenerator, Generator

import pytest
import pytest_asyncio

from pycookiestore.backend import MemoryCookieBackend
from pycookiestore.pytest_plugin.fakes import GatedCookieBackend
from pycookiestore.store import BlockingCookieStore, BlockingCookieStoreBuilder, CookieStore, CookieStoreBuilder


@pytest.fixture
def memory_backend() -> MemoryCookieBackend:
    """Empty in-memory backend shared by the store fixtures of a test."""
    return MemoryCookieBackend()


@pytest_asyncio.fixture
async def cookie_store(memory_backend: MemoryCookieBackend) -> AsyncGenerator[CookieStore]:
    """Asynchronous store over memory_backend, closed after the test."""
    async with CookieStoreBuilder().backend(memory_backend).timeout(None).build() as store:
        yield store


@pytest.fixture
def blocking_cookie_store(memory_backend: MemoryCookieBackend) -> Generator[BlockingCookieStore, None, None]:
    """Blocking store over memory_backend, closed after the test."""
    with BlockingCookieStoreBuilder().backend(memory_backend).timeout(None).build() as store:
        yield store


@pytest.fixture
def gated_backend() -> Generator[GatedCookieBackend, None, None]:
    """Backend whose calls can be held to simulate a hung engine. Always released at teardown."""
    backend = GatedCookieBackend()
    try:
        yield backend
    finally:
        backend.release()
