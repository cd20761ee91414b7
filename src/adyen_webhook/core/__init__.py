"""Core shared functionality for webhook authentication."""

from adyen_webhook.core.base_models import HttpCredentials, TrustVerdict
from adyen_webhook.core.exceptions import (
    AuthenticationError,
    EmptyPayloadError,
    HMACValidationFailedError,
    InvalidDataError,
    KeyFormatError,
    MerchantAccountMismatchError,
    MissingSignatureError,
    WebhookError,
)

__all__ = [
    "AuthenticationError",
    "EmptyPayloadError",
    "HMACValidationFailedError",
    "HttpCredentials",
    "InvalidDataError",
    "KeyFormatError",
    "MerchantAccountMismatchError",
    "MissingSignatureError",
    "TrustVerdict",
    "WebhookError",
]
