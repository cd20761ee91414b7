"""Base models shared across the receiver and processors."""

import base64
import binascii
from enum import Enum

from pydantic import BaseModel, ConfigDict

BASIC_AUTH_PREFIX = "basic "


class TrustVerdict(str, Enum):
    """Outcome of authenticating a single notification item."""

    TRUSTED = "trusted"
    UNTRUSTED = "untrusted"


class HttpCredentials(BaseModel):
    """Username/password pair submitted with a notification request."""

    model_config = ConfigDict(frozen=True)

    username: str | None = None
    password: str | None = None

    @property
    def is_complete(self) -> bool:
        return bool(self.username) and bool(self.password)

    @classmethod
    def from_authorization_header(cls, value: str | None) -> "HttpCredentials | None":
        """
        Decode an ``Authorization: Basic <base64>`` header value.

        The decoded text is split on the first colon, so passwords may contain
        colons. Returns None when the value is not a decodable Basic header.
        """
        if not value or value[: len(BASIC_AUTH_PREFIX)].lower() != BASIC_AUTH_PREFIX:
            return None

        encoded = value[len(BASIC_AUTH_PREFIX):].strip()
        try:
            decoded = base64.b64decode(encoded, validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError):
            return None

        username, sep, password = decoded.partition(":")
        if not sep:
            return None
        return cls(username=username, password=password)

