"""Authentication of Adyen payment notification webhooks."""

from adyen_webhook.core import (
    AuthenticationError,
    EmptyPayloadError,
    HMACValidationFailedError,
    HttpCredentials,
    InvalidDataError,
    KeyFormatError,
    MerchantAccountMismatchError,
    MissingSignatureError,
    TrustVerdict,
    WebhookError,
)
from adyen_webhook.receiver import (
    AuthenticationSummary,
    HmacSignature,
    NotificationReceiver,
    NotificationRecord,
    NotificationRequest,
)

__all__ = [
    "AuthenticationError",
    "AuthenticationSummary",
    "EmptyPayloadError",
    "HMACValidationFailedError",
    "HmacSignature",
    "HttpCredentials",
    "InvalidDataError",
    "KeyFormatError",
    "MerchantAccountMismatchError",
    "MissingSignatureError",
    "NotificationReceiver",
    "NotificationRecord",
    "NotificationRequest",
    "TrustVerdict",
    "WebhookError",
]
