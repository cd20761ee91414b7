"""HMAC-SHA256 signing and verification of Adyen notification items.

HmacSignature builds the colon-joined signing string of a notification item,
checks that the merchant key is hexadecimal before using it, and compares
signatures in constant time. It also answers which event codes carry a
signature and which of those a merchant can enable or disable.
"""

import base64
import hashlib
import hmac
import logging
import string
from collections.abc import Mapping
from typing import Any

from adyen_webhook.core.exceptions import (
    EmptyPayloadError,
    KeyFormatError,
    MissingSignatureError,
)
from adyen_webhook.receiver.event_codes import EDITABLE_EVENT_CODES, SUPPORTED_EVENT_CODES
from adyen_webhook.receiver.models import NotificationRecord, parse_record

logger = logging.getLogger(__name__)

HEX_DIGITS = frozenset(string.hexdigits)


def _as_record(record: NotificationRecord | Mapping[str, Any] | None) -> NotificationRecord:
    if record is None:
        raise EmptyPayloadError()
    if isinstance(record, NotificationRecord):
        return record
    if not record:
        raise EmptyPayloadError()
    return parse_record(record)


def _text(value: Any) -> str:
    """Render a signed field, empty string for missing values."""
    if value is None:
        return ""
    # Native True signs as "true", matching the string form Adyen posts.
    # A PHP implode of the same array would render "1" instead.
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _decode_key(hmac_key: str) -> bytes:
    if not hmac_key:
        raise KeyFormatError("You did not provide a HMAC key")
    if not HEX_DIGITS.issuperset(hmac_key):
        # Never echo the key itself
        raise KeyFormatError("Invalid HMAC key: must contain only hexadecimal characters")

    # Odd-length keys are right-padded with a zero nibble
    if len(hmac_key) % 2:
        hmac_key += "0"
    return bytes.fromhex(hmac_key)


class HmacSignature:
    """Computes and checks the HMAC-SHA256 signature of notification items."""

    def get_notification_data_to_sign(
        self, record: NotificationRecord | Mapping[str, Any] | None
    ) -> str:
        """
        Build the canonical signing string for a notification item.

        A zero amount is signed as "0"; only a missing amount value signs as an
        empty slot.

        Raises:
            EmptyPayloadError: If none of the signed fields is present
        """
        record = _as_record(record)
        signing_parts = [
            _text(record.pspReference),
            _text(record.originalReference),
            _text(record.merchantAccountCode),
            _text(record.merchantReference),
            _text(record.amount_value),
            _text(record.amount_currency),
            _text(record.eventCode),
            _text(record.success),
        ]
        if not any(signing_parts):
            raise EmptyPayloadError()
        return ":".join(signing_parts)

    def calculate_notification_hmac(
        self,
        hmac_key: str,
        record: NotificationRecord | Mapping[str, Any] | None,
    ) -> str:
        """
        Calculate the signature Adyen would send for a notification item.

        Args:
            hmac_key: HMAC key from Adyen Customer Area (hex string)
            record: The NotificationRequestItem to sign

        Returns:
            Base64-encoded HMAC-SHA256 signature

        Raises:
            KeyFormatError: If the key is empty or not hexadecimal
            EmptyPayloadError: If the item has no signable fields
            InvalidDataError: If a raw item fails validation
        """
        binary_key = _decode_key(hmac_key)
        signing_string = self.get_notification_data_to_sign(record)

        return base64.b64encode(
            hmac.new(binary_key, signing_string.encode("utf-8"), hashlib.sha256).digest()
        ).decode("utf-8")

    def is_valid_notification_hmac(
        self,
        hmac_key: str,
        record: NotificationRecord | Mapping[str, Any] | None,
        submitted_hmac: str | None = None,
    ) -> bool:
        """
        Verify the signature of a notification item.

        Args:
            hmac_key: HMAC key from Adyen Customer Area (hex string)
            record: The NotificationRequestItem from the webhook
            submitted_hmac: Signature to check, defaults to additionalData.hmacSignature

        Returns:
            True if the signature matches

        Raises:
            MissingSignatureError: If no signature was submitted
            KeyFormatError: If the key is empty or not hexadecimal
            EmptyPayloadError: If the item has no signable fields
            InvalidDataError: If a raw item fails validation
        """
        record = _as_record(record)
        if submitted_hmac is None:
            submitted_hmac = record.hmac_signature
        if not submitted_hmac:
            raise MissingSignatureError()

        unsigned = record.model_copy(update={"additionalData": None})
        expected_hmac = self.calculate_notification_hmac(hmac_key, unsigned)

        # Use constant-time comparison to prevent timing attacks
        is_valid = hmac.compare_digest(
            expected_hmac.encode("utf-8"), submitted_hmac.encode("utf-8")
        )
        if not is_valid:
            logger.debug("HMAC mismatch for pspReference %s", record.pspReference)
        return is_valid

    def is_hmac_supported_event_code(self, event_code: str | None) -> bool:
        """Return True when notifications with this event code carry an HMAC."""
        return event_code in SUPPORTED_EVENT_CODES

    @staticmethod
    def get_editable_supported_event_codes() -> frozenset[str]:
        """Event codes that are both HMAC-supported and editable by merchants."""
        return SUPPORTED_EVENT_CODES & EDITABLE_EVENT_CODES
