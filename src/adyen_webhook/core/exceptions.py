"""Custom exceptions for webhook notification authentication."""


class WebhookError(Exception):
    """Base exception for webhook authentication errors."""

    def __init__(self, message: str = "Webhook notification error"):
        self.message = message
        super().__init__(self.message)


class InvalidDataError(WebhookError):
    """Raised when the notification data cannot be processed."""

    def __init__(self, message: str = "Invalid notification data"):
        super().__init__(message)


class EmptyPayloadError(InvalidDataError):
    """Raised when a notification has no fields to sign."""

    def __init__(self, message: str = "You did not provide any parameters"):
        super().__init__(message)


class MissingSignatureError(InvalidDataError):
    """Raised when a notification carries no hmacSignature."""

    def __init__(self, message: str = "You did not provide hmacSignature in additionalData"):
        super().__init__(message)


class KeyFormatError(WebhookError):
    """Raised when the HMAC key is empty or not hexadecimal."""

    def __init__(self, message: str = "You did not provide a HMAC key"):
        super().__init__(message)


class HMACValidationFailedError(WebhookError):
    """Raised when a test notification fails HMAC verification."""

    def __init__(self, message: str = "HMAC key validation failed"):
        super().__init__(message)


class MerchantAccountMismatchError(WebhookError):
    """Raised when a test notification has no merchant account to compare."""

    def __init__(
        self,
        message: str = "merchantAccountCode is empty in settings or in the notification",
    ):
        super().__init__(message)


class AuthenticationError(WebhookError):
    """Raised when a test notification fails basic authentication."""

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message)
