"""Typed request models for the wire operations.

Required fields are strict strings, a missing or wrong-typed one fails the whole request. Optional attributes are
permissive: a value of the wrong shape degrades to "absent" instead of failing.
"""

import logging
import re
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError, field_validator

from pycookiestore.cookie import CookieRecord
from pycookiestore.exceptions import MalformedRequestError
from pycookiestore.types import SameSite

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?\d+")

_R = TypeVar("_R", bound="CookieRequest")


class CookieRequest(BaseModel):
    """Base for all request models."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    @classmethod
    def parse(cls: type[_R], fields: Mapping[str, Any] | None) -> _R:
        """Validate a wire argument mapping. Raises MalformedRequestError."""
        try:
            return cls.model_validate(fields if fields is not None else {})
        except ValidationError as e:
            errors = [
                {"field": ".".join(str(part) for part in err["loc"]), "type": err["type"], "message": err["msg"]}
                for err in e.errors()
            ]
            msg = f"Malformed {cls.__name__}: " + ", ".join(f"{err['field']} ({err['type']})" for err in errors)
            raise MalformedRequestError(msg, details={"errors": errors}) from e


class SetCookieRequest(CookieRequest):
    url: StrictStr
    name: StrictStr
    value: StrictStr
    domain: StrictStr
    path: StrictStr
    expires_date: int | None = Field(default=None, alias="expiresDate")
    max_age: int | None = Field(default=None, alias="maxAge")
    is_secure: bool = Field(default=False, alias="isSecure")
    is_http_only: bool = Field(default=False, alias="isHttpOnly")
    same_site: SameSite | None = Field(default=None, alias="sameSite")

    @field_validator("expires_date", mode="before")
    @classmethod
    def lenient_expires_date(cls, value: Any) -> int | None:
        if value is None:
            return None
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, str) and _INTEGER.fullmatch(value):
            return int(value)
        logger.debug("Ignoring unparsable expiresDate: %r", value)
        return None

    @field_validator("max_age", mode="before")
    @classmethod
    def lenient_max_age(cls, value: Any) -> int | None:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return None

    @field_validator("is_secure", "is_http_only", mode="before")
    @classmethod
    def only_true(cls, value: Any) -> bool:
        return value is True

    @field_validator("same_site", mode="before")
    @classmethod
    def normalize_same_site(cls, value: Any) -> SameSite | None:
        if not isinstance(value, str):
            return None
        if value == "Lax":
            return "Lax"
        if value == "Strict":
            return "Strict"
        return "None"

    def to_record(self) -> CookieRecord:
        """Build the stored record. The url becomes the record's origin URL, max_age is carried but not applied."""
        expires_at = None
        if self.expires_date is not None:
            try:
                expires_at = CookieRecord.from_expires_ms(self.expires_date)
            except OverflowError:
                logger.debug("Ignoring out of range expiresDate: %d", self.expires_date)

        return CookieRecord(
            name=self.name,
            value=self.value,
            domain=self.domain,
            path=self.path,
            expires_at=expires_at,
            is_secure=self.is_secure,
            is_http_only=self.is_http_only,
            same_site=self.same_site,
            origin_url=self.url,
            max_age=self.max_age,
        )


class GetCookiesRequest(CookieRequest):
    url: StrictStr


class DeleteCookieRequest(CookieRequest):
    url: StrictStr
    name: StrictStr
    domain: StrictStr
    path: StrictStr


class DeleteCookiesRequest(CookieRequest):
    url: StrictStr
    domain: StrictStr
    path: StrictStr
