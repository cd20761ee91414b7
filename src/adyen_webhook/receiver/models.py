"""Pydantic models for Adyen standard notification webhooks."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from adyen_webhook.core.exceptions import InvalidDataError


class NotificationAmount(BaseModel):
    """Adyen amount object.

    Both fields are signed, so they are kept exactly as received.
    """

    model_config = ConfigDict(frozen=True)

    value: int | None = Field(default=None, ge=0, description="Amount in minor units")
    currency: str | None = Field(default=None, description="ISO 4217 currency code")


class NotificationRecord(BaseModel):
    """Single Adyen notification item (NotificationRequestItem).

    Only the eight signed fields take part in HMAC verification; the rest are
    carried for the caller.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    # Signed fields
    pspReference: str | None = Field(default=None, description="Adyen's unique event reference")
    originalReference: str | None = Field(default=None, description="Reference of the prior event")
    merchantAccountCode: str | None = Field(default=None, description="Merchant account code")
    merchantReference: str | None = Field(default=None, description="Merchant's own reference")
    amount: NotificationAmount | None = Field(default=None, description="Transaction amount")
    eventCode: str | None = Field(default=None, description="Event type (AUTHORISATION, ...)")
    success: bool | str | None = Field(
        default=None, description="Outcome, native bool or 'true'/'false'"
    )

    # Unsigned fields
    eventDate: str | None = Field(default=None, description="Event timestamp")
    paymentMethod: str | None = Field(default=None, description="Payment method used")
    reason: str | None = Field(default=None, description="Reason code or message")
    operations: list[str] | None = Field(default=None, description="Available operations")

    additionalData: dict[str, Any] | None = Field(
        default=None,
        description="Additional data including hmacSignature",
    )

    @property
    def amount_value(self) -> int | None:
        return self.amount.value if self.amount else None

    @property
    def amount_currency(self) -> str | None:
        return self.amount.currency if self.amount else None

    @property
    def hmac_signature(self) -> str | None:
        """Signature submitted by Adyen, if any."""
        if not self.additionalData:
            return None
        return self.additionalData.get("hmacSignature") or None


class NotificationItemWrapper(BaseModel):
    """Wrapper for notification item (Adyen wraps items in this structure)."""

    NotificationRequestItem: NotificationRecord


class NotificationRequest(BaseModel):
    """
    Adyen webhook notification request.

    Adyen sends batched notifications - multiple items can be in one request.
    The live flag arrives as a boolean or as the string "true"/"false".
    """

    live: bool | str = Field(..., description="True if production, false if test")
    notificationItems: list[NotificationItemWrapper] = Field(
        default_factory=list,
        description="List of notification items",
    )

    @property
    def items(self) -> list[NotificationRecord]:
        """Extract notification items from wrappers."""
        return [wrapper.NotificationRequestItem for wrapper in self.notificationItems]


class AuthenticationSummary(BaseModel):
    """Per-request result of authenticating every item of a notification."""

    live: bool | str
    trusted: list[NotificationRecord] = Field(default_factory=list)
    untrusted: list[NotificationRecord] = Field(default_factory=list)
    reports: list[NotificationRecord] = Field(
        default_factory=list, description="Report notifications, routed without item checks"
    )
    accepted_message: str = Field(default="[accepted]", description="Body acknowledging receipt")

    @property
    def total(self) -> int:
        return len(self.trusted) + len(self.untrusted) + len(self.reports)


def _validation_details(e: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors()
    )


def parse_record(data: Mapping[str, Any]) -> NotificationRecord:
    """Parse a raw NotificationRequestItem, raising InvalidDataError on bad input."""
    try:
        return NotificationRecord.model_validate(dict(data))
    except ValidationError as e:
        raise InvalidDataError(f"Invalid notification item: {_validation_details(e)}") from e


def parse_request(data: Mapping[str, Any]) -> NotificationRequest:
    """Parse a raw notification request body, raising InvalidDataError on bad input."""
    try:
        return NotificationRequest.model_validate(dict(data))
    except ValidationError as e:
        raise InvalidDataError(f"Invalid notification request: {_validation_details(e)}") from e
