from collections.abc import Generator

import pytest

pytest_plugins = ["pycookiestore.pytest_plugin.plugin"]


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    monkeypatch.delenv("PYCOOKIESTORE_TIMEOUT", raising=False)
    yield
