"""Adyen notification receiver."""

from .hmac_signature import HmacSignature
from .models import (
    AuthenticationSummary,
    NotificationAmount,
    NotificationRecord,
    NotificationRequest,
)
from .notification_receiver import NotificationReceiver

__all__ = [
    "AuthenticationSummary",
    "HmacSignature",
    "NotificationAmount",
    "NotificationReceiver",
    "NotificationRecord",
    "NotificationRequest",
]
