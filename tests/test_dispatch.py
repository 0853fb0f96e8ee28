from typing import Any

import orjson
import pytest
from dirty_equals import IsPartialDict, IsStr
from pycookiestore.dispatch import METHODS, BlockingCookieMethodHandler, CookieMethodHandler, bind_call
from pycookiestore.exceptions import MalformedRequestError, MethodNotImplementedError
from pycookiestore.pytest_plugin import FailingCookieBackend
from pycookiestore.store import BlockingCookieStore, CookieStore, CookieStoreBuilder

from tests.utils import wire_cookie


async def test_handle_all_methods(cookie_store: CookieStore):
    handler = CookieMethodHandler(cookie_store)

    assert await handler.handle("setCookie", wire_cookie(domain=".a.com", expiresDate="1700000000000")) is True
    assert await handler.handle("setCookie", wire_cookie(name="other", domain="b.com")) is True
    assert await handler.handle("getCookies", {"url": "http://sub.a.com"}) == [
        IsPartialDict(name="sid", expiresDate=1700000000000, isSessionOnly=False)
    ]
    assert len(await handler.handle("getAllCookies")) == 2
    assert await handler.handle("deleteCookie", {"url": "http://a.com", "name": "sid", "domain": "a.com", "path": "/"})
    assert await handler.handle("deleteCookies", {"url": "", "domain": "b.com", "path": "/"}) is True
    assert await handler.handle("getAllCookies", None) == []
    assert await handler.handle("deleteAllCookies") is True


def test_bind_call():
    assert bind_call("getAllCookies", None) == ("get_all_cookies", ())
    assert bind_call("getCookies", {"url": "http://a.com"}) == ("get_cookies", ("http://a.com",))
    assert bind_call("deleteCookies", {"url": "u", "domain": "d", "path": "/"}) == ("delete_cookies", ("u", "d", "/"))
    assert {bind_call(m, {**wire_cookie()})[0] for m in METHODS} == {
        "set_cookie",
        "get_cookies",
        "get_all_cookies",
        "delete_cookie",
        "delete_cookies",
        "delete_all_cookies",
    }


@pytest.mark.parametrize("method", ["getCookies", "deleteCookie", "deleteCookies", "setCookie"])
def test_bind_call__malformed(method: str):
    with pytest.raises(MalformedRequestError):
        bind_call(method, {})


def test_bind_call__unknown_method():
    with pytest.raises(MethodNotImplementedError, match="flushCookies") as e:
        bind_call("flushCookies", {})
    assert e.value.details == {"method": "flushCookies"}


async def test_handle_json(cookie_store: CookieStore):
    handler = CookieMethodHandler(cookie_store)

    resp = await handler.handle_json(orjson.dumps({"method": "setCookie", "arguments": wire_cookie()}))
    assert orjson.loads(resp) == {"result": True}

    resp = await handler.handle_json('{"method": "getCookies", "arguments": {"url": "http://a.com"}}')
    assert orjson.loads(resp) == {"result": [IsPartialDict(name="sid", expiresDate=None, sameSite=None)]}


@pytest.mark.parametrize(
    "payload,code",
    [
        (b"not json", "MALFORMED_REQUEST"),
        (b"[]", "MALFORMED_REQUEST"),
        (b'{"arguments": {}}', "MALFORMED_REQUEST"),
        (b'{"method": 1}', "MALFORMED_REQUEST"),
        (b'{"method": "getCookies", "arguments": []}', "MALFORMED_REQUEST"),
        (b'{"method": "getCookies", "arguments": {}}', "MALFORMED_REQUEST"),
        (b'{"method": "setCookie", "arguments": {"url": "http://a.com", "name": 1}}', "MALFORMED_REQUEST"),
        (b'{"method": "unknown"}', "NOT_IMPLEMENTED"),
    ],
)
async def test_handle_json__errors(cookie_store: CookieStore, payload: bytes, code: str):
    resp = orjson.loads(await CookieMethodHandler(cookie_store).handle_json(payload))
    assert resp["error"] == IsPartialDict(code=code, message=IsStr(min_length=1))
    assert await cookie_store.get_all_cookies() == []


async def test_handle_json__backend_failure():
    backend = FailingCookieBackend(fail_on={"get_all_cookies"})
    async with CookieStoreBuilder().backend(backend).build() as store:
        resp = orjson.loads(await CookieMethodHandler(store).handle_json(b'{"method": "getAllCookies"}'))
    assert resp["error"]["code"] == "BACKING_STORE_FAILURE"
    assert resp["error"]["details"] == {"operation": "getAllCookies", "cause": "RuntimeError('backend failure')"}


async def test_handle_json__closed_store():
    store = CookieStoreBuilder().build()
    await store.close()
    resp = orjson.loads(await CookieMethodHandler(store).handle_json(b'{"method": "deleteAllCookies"}'))
    assert resp["error"]["code"] == "STORE_CLOSED"


def test_blocking_handler(blocking_cookie_store: BlockingCookieStore):
    handler = BlockingCookieMethodHandler(blocking_cookie_store)
    assert handler.handle("setCookie", wire_cookie(isHttpOnly=True, sameSite="Strict")) is True
    assert handler.handle("getCookies", {"url": "http://a.com"}) == [IsPartialDict(isHttpOnly=True, sameSite="Strict")]
    assert handler.handle("deleteCookie", {"url": "http://a.com", "name": "x", "domain": "a.com", "path": "/"}) is False

    resp: dict[str, Any] = orjson.loads(handler.handle_json(b'{"method": "deleteAllCookies"}'))
    assert resp == {"result": True}
    resp = orjson.loads(handler.handle_json(b'{"method": "nope"}'))
    assert resp["error"] == IsPartialDict(code="NOT_IMPLEMENTED", details={"method": "nope"})
