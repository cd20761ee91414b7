"""Base interface for payment state processors.

A processor maps one authenticated notification onto a new payment state.
Processors only accept items whose verdict is TRUSTED, which keeps the
authentication boundary upstream of any state change.
"""

from abc import ABC, abstractmethod
from enum import Enum

from adyen_webhook.core.base_models import TrustVerdict
from adyen_webhook.core.exceptions import InvalidDataError
from adyen_webhook.receiver.models import NotificationRecord


class PaymentState(str, Enum):
    """Payment states a processor can move between."""

    NEW = "new"
    IN_PROGRESS = "in_progress"
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"
    PARTIALLY_REFUNDED = "partially_refunded"
    REFUNDED = "refunded"
    CANCELLED = "cancelled"


class Processor(ABC):
    """Processes a trusted notification for a payment in a given state."""

    def __init__(
        self,
        notification: NotificationRecord,
        state: PaymentState | str,
        verdict: TrustVerdict,
        is_auto_capture: bool = True,
    ):
        if verdict is not TrustVerdict.TRUSTED:
            raise InvalidDataError(
                f"Notification {notification.pspReference} is not trusted"
            )

        self.notification = notification
        self.is_auto_capture = is_auto_capture
        self.initial_state = self._validate_state(state)

    @staticmethod
    def _validate_state(state: PaymentState | str) -> PaymentState:
        try:
            return PaymentState(state)
        except ValueError as e:
            raise InvalidDataError("Invalid state.") from e

    @abstractmethod
    def process(self) -> str | None:
        """Return the new payment state, or None when nothing applies."""

    def unchanged(self) -> str:
        """Keep the payment in its initial state."""
        return self.initial_state.value
