"""Method dispatch for remote callers.

A bridge delivers calls as a method name plus a flat argument mapping using the wire names (setCookie, url,
expiresDate, ...). The handlers validate the arguments once, route them to the store and return plain results.
handle_json wraps the same flow in orjson encoded envelopes:

    request:  {"method": "getCookies", "arguments": {"url": "https://example.com"}}
    response: {"result": [...]} or {"error": {"code": "...", "message": "...", "details": {...}}}
"""

import logging
from typing import Any

import orjson

from pycookiestore.codec import DeleteCookieRequest, DeleteCookiesRequest, GetCookiesRequest, SetCookieRequest
from pycookiestore.exceptions import (
    BackingStoreError,
    BackingStoreTimeoutError,
    CookieStoreError,
    MalformedRequestError,
    MethodNotImplementedError,
    StoreClosedError,
)
from pycookiestore.store import BlockingCookieStore, CookieStore
from pycookiestore.types import Arguments

logger = logging.getLogger(__name__)

METHODS = ("setCookie", "getCookies", "getAllCookies", "deleteCookie", "deleteCookies", "deleteAllCookies")

_ERROR_CODES: tuple[tuple[type[CookieStoreError], str], ...] = (
    (MalformedRequestError, "MALFORMED_REQUEST"),
    (MethodNotImplementedError, "NOT_IMPLEMENTED"),
    (StoreClosedError, "STORE_CLOSED"),
    (BackingStoreTimeoutError, "BACKING_STORE_TIMEOUT"),
    (BackingStoreError, "BACKING_STORE_FAILURE"),
)


def bind_call(method: str, arguments: Arguments | None) -> tuple[str, tuple[Any, ...]]:
    """Resolve a wire method to a store method name and its validated positional arguments."""
    if method == "setCookie":
        return "set_cookie", (SetCookieRequest.parse(arguments).to_record(),)
    if method == "getCookies":
        get_req = GetCookiesRequest.parse(arguments)
        return "get_cookies", (get_req.url,)
    if method == "getAllCookies":
        return "get_all_cookies", ()
    if method == "deleteCookie":
        del_req = DeleteCookieRequest.parse(arguments)
        return "delete_cookie", (del_req.url, del_req.name, del_req.domain, del_req.path)
    if method == "deleteCookies":
        dels_req = DeleteCookiesRequest.parse(arguments)
        return "delete_cookies", (dels_req.url, dels_req.domain, dels_req.path)
    if method == "deleteAllCookies":
        return "delete_all_cookies", ()
    raise MethodNotImplementedError(f"Method not implemented: {method}", details={"method": method})


def error_code(error: CookieStoreError) -> str:
    for error_type, code in _ERROR_CODES:
        if isinstance(error, error_type):
            return code
    return "COOKIE_STORE_ERROR"


def decode_call(payload: bytes | str) -> tuple[str, Arguments | None]:
    """Decode a JSON call envelope into its method name and arguments."""
    try:
        call = orjson.loads(payload)
    except orjson.JSONDecodeError as e:
        raise MalformedRequestError(f"Invalid JSON payload: {e}") from e

    if not isinstance(call, dict) or not isinstance(call.get("method"), str):
        raise MalformedRequestError("Call must be an object with a string 'method'")
    arguments = call.get("arguments")
    if arguments is not None and not isinstance(arguments, dict):
        raise MalformedRequestError("Call 'arguments' must be an object", details={"method": call["method"]})
    return call["method"], arguments


def encode_result(result: Any) -> bytes:
    return orjson.dumps({"result": result})


def encode_error(error: CookieStoreError) -> bytes:
    return orjson.dumps({"error": {"code": error_code(error), "message": error.message, "details": error.details}})


class CookieMethodHandler:
    """Routes wire calls to an asynchronous CookieStore."""

    def __init__(self, store: CookieStore) -> None:
        self._store = store

    async def handle(self, method: str, arguments: Arguments | None = None) -> Any:
        """Invoke a wire method. Raises CookieStoreError subclasses on failure."""
        name, args = bind_call(method, arguments)
        return await getattr(self._store, name)(*args)

    async def handle_json(self, payload: bytes | str) -> bytes:
        """Invoke a JSON encoded call. Failures are returned as error envelopes, never raised."""
        try:
            method, arguments = decode_call(payload)
            result = await self.handle(method, arguments)
        except CookieStoreError as e:
            logger.info("Cookie call failed: %s", e.message)
            return encode_error(e)
        return encode_result(result)


class BlockingCookieMethodHandler:
    """Routes wire calls to a BlockingCookieStore."""

    def __init__(self, store: BlockingCookieStore) -> None:
        self._store = store

    def handle(self, method: str, arguments: Arguments | None = None) -> Any:
        """Invoke a wire method. Raises CookieStoreError subclasses on failure."""
        name, args = bind_call(method, arguments)
        return getattr(self._store, name)(*args)

    def handle_json(self, payload: bytes | str) -> bytes:
        """Invoke a JSON encoded call. Failures are returned as error envelopes, never raised."""
        try:
            method, arguments = decode_call(payload)
            result = self.handle(method, arguments)
        except CookieStoreError as e:
            logger.info("Cookie call failed: %s", e.message)
            return encode_error(e)
        return encode_result(result)
