"""Payment state processors fed by authenticated notifications."""

from .base import PaymentState, Processor

__all__ = ["PaymentState", "Processor"]
