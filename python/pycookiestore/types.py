"""Common types and interfaces used in the library."""

from collections.abc import Mapping
from typing import Any, Literal, TypeAlias, TypedDict

SameSite: TypeAlias = Literal["Strict", "Lax", "None"]

Arguments = Mapping[str, Any]


class CookieFields(TypedDict):
    """Wire representation of a stored cookie."""

    name: str
    value: str
    expiresDate: int | None
    isSessionOnly: bool
    domain: str
    sameSite: SameSite | None
    isSecure: bool
    isHttpOnly: bool
    path: str
