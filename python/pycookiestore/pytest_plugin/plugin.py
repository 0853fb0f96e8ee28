from .fixtures import blocking_cookie_store, cookie_store, gated_backend, memory_backend  # noqa: F401


def pytest_configure(config):
    """Configure the pytest plugin."""
    config.addinivalue_line(
        "markers",
        "pycookiestore: mark test as using pycookiestore store fixtures"
    )
