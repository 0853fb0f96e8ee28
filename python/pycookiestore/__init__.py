"""pycookiestore - Cookie store core with browser-engine cookie jar semantics.

Modelled on the cookie handling of native web views and exposed through a Pythonic surface.

Feature-rich:
- Set, query and delete cookies scoped by URL, domain and path
- Loose suffix domain matching for queries, exact dotted/undotted matching for deletes
- Origin URL aware targeted deletion
- Millisecond wire timestamps and SameSite normalization
- Asynchronous and blocking stores
- Pluggable, thread-safe backends (in-memory backend included)
- Method dispatcher with JSON envelopes for bridging remote callers
- Pytest fixtures and fake backends for testing
- Type-safe APIs with Python type hints
"""
