"""Basic usage examples for pycookiestore.

Run directly:
    uv run python -m examples.basic_store
"""

import asyncio
import sys

from pycookiestore.dispatch import BlockingCookieMethodHandler, CookieMethodHandler
from pycookiestore.store import BlockingCookieStoreBuilder, CookieStoreBuilder


async def example_set_and_get() -> None:
    """Example 1: Set a cookie and query it by URL"""
    async with CookieStoreBuilder().timeout(None).build() as store:
        await store.set_cookie(
            {"url": "https://example.com", "name": "sid", "value": "1", "domain": "example.com", "path": "/"}
        )
        cookies = await store.get_cookies("https://www.example.com/page")
        print(
            {
                "example": "set_and_get",
                "names": [c["name"] for c in cookies],
                "session_only": [c["isSessionOnly"] for c in cookies],
            }
        )


async def example_dotted_domain() -> None:
    """Example 2: Leading dot domains match subdomains"""
    async with CookieStoreBuilder().timeout(None).build() as store:
        await store.set_cookie(
            {"url": "https://a.com", "name": "pref", "value": "dark", "domain": ".a.com", "path": "/"}
        )
        print(
            {
                "example": "dotted_domain",
                "sub": len(await store.get_cookies("https://sub.a.com")),
                "other": len(await store.get_cookies("https://b.com")),
            }
        )


async def example_expiry_and_attributes() -> None:
    """Example 3: Millisecond expiry and attributes"""
    async with CookieStoreBuilder().timeout(None).build() as store:
        await store.set_cookie(
            {
                "url": "https://a.com",
                "name": "token",
                "value": "abc",
                "domain": "a.com",
                "path": "/",
                "expiresDate": "1700000000000",
                "isSecure": True,
                "sameSite": "Strict",
            }
        )
        (cookie,) = await store.get_all_cookies()
        print(
            {
                "example": "expiry_and_attributes",
                "expires": cookie["expiresDate"],
                "session_only": cookie["isSessionOnly"],
                "secure": cookie["isSecure"],
                "same_site": cookie["sameSite"],
            }
        )


async def example_delete() -> None:
    """Example 4: Targeted and bulk deletion"""
    async with CookieStoreBuilder().timeout(None).build() as store:
        for name, domain in [("a1", "a.com"), ("a2", "a.com"), ("b1", "b.com")]:
            await store.set_cookie(
                {"url": f"https://{domain}", "name": name, "value": "v", "domain": domain, "path": "/"}
            )
        first = await store.delete_cookie("https://a.com", "a1", ".a.com", "/")
        missing = await store.delete_cookie("https://a.com", "a1", "a.com", "/")
        await store.delete_cookies("", "a.com", "/")
        print(
            {
                "example": "delete",
                "first": first,
                "missing": missing,
                "left": [c["name"] for c in await store.get_all_cookies()],
            }
        )


async def example_json_dispatch() -> None:
    """Example 5: Bridging JSON calls"""
    async with CookieStoreBuilder().timeout(None).build() as store:
        handler = CookieMethodHandler(store)
        ok = await handler.handle_json(
            b'{"method": "setCookie", "arguments": '
            b'{"url": "https://a.com", "name": "sid", "value": "1", "domain": "a.com", "path": "/"}}'
        )
        bad = await handler.handle_json(b'{"method": "setCookie", "arguments": {"url": "https://a.com"}}')
        unknown = await handler.handle_json(b'{"method": "flushCookies"}')
        print({"example": "json_dispatch", "ok": ok.decode(), "bad_has_error": b'"error"' in bad})
        print({"example": "json_dispatch", "unknown": unknown.decode()})


def example_blocking() -> None:
    """Example 6: Blocking store"""
    with BlockingCookieStoreBuilder().timeout(None).build() as store:
        handler = BlockingCookieMethodHandler(store)
        handler.handle("setCookie", {"url": "https://a.com", "name": "k", "value": "v", "domain": "a.com", "path": "/"})
        count = len(handler.handle("getAllCookies"))
        print({"example": "blocking", "count": count, "cleared": store.delete_all_cookies()})
        print({"example": "blocking", "after_clear": store.get_all_cookies()})


if __name__ == "__main__":  # pragma: no cover
    from ._utils import run_examples

    asyncio.run(run_examples(sys.modules[__name__]))
