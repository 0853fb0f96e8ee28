"""Conversion between wire argument maps and cookie records."""

from collections.abc import Mapping
from typing import Any

from pycookiestore.codec.models import (
    CookieRequest,
    DeleteCookieRequest,
    DeleteCookiesRequest,
    GetCookiesRequest,
    SetCookieRequest,
)
from pycookiestore.codec.projection import encode_record, project_records
from pycookiestore.cookie import CookieRecord


def decode_set_request(fields: Mapping[str, Any] | None) -> CookieRecord:
    """Decode setCookie wire arguments into a record. Raises MalformedRequestError."""
    return SetCookieRequest.parse(fields).to_record()


__all__ = [
    "CookieRequest",
    "DeleteCookieRequest",
    "DeleteCookiesRequest",
    "GetCookiesRequest",
    "SetCookieRequest",
    "decode_set_request",
    "encode_record",
    "project_records",
]
