"""Trust decisions for incoming Adyen notifications.

Test notifications, sent from the Customer Area while a merchant validates an
integration, fail loudly with an exception. Production notifications that
fail the same checks are rejected quietly so that one misconfigured item does
not stop processing of the rest of the traffic.
"""

import hmac
import logging
from collections.abc import Mapping
from typing import Any

from adyen_webhook.config import Settings, settings as default_settings
from adyen_webhook.core.base_models import HttpCredentials, TrustVerdict
from adyen_webhook.core.exceptions import (
    AuthenticationError,
    HMACValidationFailedError,
    InvalidDataError,
    MerchantAccountMismatchError,
)
from adyen_webhook.receiver.credentials import resolve_credentials
from adyen_webhook.receiver.hmac_signature import HmacSignature
from adyen_webhook.receiver.models import (
    AuthenticationSummary,
    NotificationRecord,
    NotificationRequest,
    parse_record,
    parse_request,
)

logger = logging.getLogger(__name__)

ACCEPTED_MESSAGE = "[accepted]"
TEST_REFERENCE_MARKERS = ("test_", "testnotification_")
REPORT_EVENT_MARKER = "REPORT_"


def _equals(expected: str, submitted: str) -> bool:
    return hmac.compare_digest(expected.encode("utf-8"), submitted.encode("utf-8"))


class NotificationReceiver:
    """Authenticates notification items before any payment state changes."""

    def __init__(self, hmac_signature: HmacSignature | None = None):
        self.hmac_signature = hmac_signature or HmacSignature()

    def validate_hmac(
        self,
        record: NotificationRecord | Mapping[str, Any],
        hmac_key: str,
    ) -> TrustVerdict:
        """
        Check the HMAC signature of a notification item.

        Raises:
            HMACValidationFailedError: If a test notification has a wrong signature
            MissingSignatureError: If no signature was submitted
            KeyFormatError: If the key is empty or not hexadecimal
            EmptyPayloadError: If the item has no signable fields
            InvalidDataError: If a raw item fails validation
        """
        if not isinstance(record, NotificationRecord):
            record = parse_record(record)

        is_test_notification = self.is_test_notification(record.pspReference)
        if not self.hmac_signature.is_valid_notification_hmac(hmac_key, record):
            if is_test_notification:
                raise HMACValidationFailedError()
            logger.warning(
                "HMAC verification failed for %s (%s)", record.pspReference, record.eventCode
            )
            return TrustVerdict.UNTRUSTED
        return TrustVerdict.TRUSTED

    def is_authenticated(
        self,
        record: NotificationRecord,
        merchant_account: str | None,
        notification_username: str | None,
        notification_password: str | None,
        http_credentials: HttpCredentials | None = None,
        authorization: str | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> bool:
        """
        Check the merchant account and the basic-auth credentials of a request.

        Args:
            record: The notification item
            merchant_account: Merchant account configured for this shop
            notification_username: Configured basic-auth username
            notification_password: Configured basic-auth password
            http_credentials: Credentials already extracted by the transport
            authorization: Raw Authorization header, used when credentials are missing
            environ: CGI/WSGI environ to read HTTP_AUTHORIZATION from

        Returns:
            True if the request is authenticated

        Raises:
            MerchantAccountMismatchError: Test notification without merchant account
            AuthenticationError: Test notification with missing or wrong credentials
        """
        is_test_notification = self.is_test_notification(record.pspReference)

        if not record.merchantAccountCode or not merchant_account:
            if is_test_notification:
                raise MerchantAccountMismatchError()
            logger.warning("Missing merchant account for notification %s", record.pspReference)
            return False

        credentials = resolve_credentials(http_credentials, authorization, environ)
        if credentials is None or not credentials.is_complete:
            if is_test_notification:
                raise AuthenticationError(
                    "Authentication failed: basic auth username or password is empty."
                )
            logger.warning("Missing basic auth credentials for %s", record.pspReference)
            return False

        # Both comparisons always run so timing does not reveal which one failed
        username_is_valid = _equals(notification_username or "", credentials.username)
        password_is_valid = _equals(notification_password or "", credentials.password)
        if username_is_valid and password_is_valid:
            return True

        if is_test_notification:
            raise AuthenticationError(
                "username and/or password are not the same as in settings"
            )
        logger.warning("Invalid basic auth credentials for %s", record.pspReference)
        return False

    def validate_notification_mode(
        self, notification_mode: bool | str | None, test_mode: bool
    ) -> bool:
        """
        Check that the notification's live flag matches the merchant environment.

        The live flag can be a boolean or the string "true"/"false".
        """
        if test_mode:
            return notification_mode is False or notification_mode == "false"
        return notification_mode is True or notification_mode == "true"

    def is_test_notification(self, psp_reference: Any) -> bool:
        """If notification is a test notification from Adyen Customer Area."""
        if not isinstance(psp_reference, str):
            return False
        reference = psp_reference.lower()
        return any(marker in reference for marker in TEST_REFERENCE_MARKERS)

    def is_report_notification(self, event_code: str | None) -> bool:
        return isinstance(event_code, str) and REPORT_EVENT_MARKER in event_code

    def return_accepted(self, accepted_message: str | None) -> str:
        return accepted_message or ACCEPTED_MESSAGE

    def authenticate(
        self,
        record: NotificationRecord,
        *,
        live: bool | str,
        hmac_key: str,
        merchant_account: str,
        username: str,
        password: str,
        test_mode: bool,
        http_credentials: HttpCredentials | None = None,
        authorization: str | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> TrustVerdict:
        """
        Run every check on a single notification item.

        Checks run in order: notification mode, merchant account and basic auth,
        then the HMAC signature for event codes that carry one. Report
        notifications are not authenticated per item; callers route them with
        is_report_notification first.

        Raises:
            InvalidDataError: If the item is a report notification
            WebhookError: Any failure that must not be handled quietly
        """
        if self.is_report_notification(record.eventCode):
            raise InvalidDataError(
                f"Report notification {record.pspReference} is not authenticated per item"
            )

        if not self.validate_notification_mode(live, test_mode):
            logger.warning(
                "Notification %s has live=%s but merchant test mode is %s",
                record.pspReference,
                live,
                test_mode,
            )
            return TrustVerdict.UNTRUSTED

        if not self.is_authenticated(
            record,
            merchant_account,
            username,
            password,
            http_credentials=http_credentials,
            authorization=authorization,
            environ=environ,
        ):
            return TrustVerdict.UNTRUSTED

        if not self.hmac_signature.is_hmac_supported_event_code(record.eventCode):
            logger.debug(
                "Event code %s carries no HMAC, %s authenticated by basic auth only",
                record.eventCode,
                record.pspReference,
            )
            return TrustVerdict.TRUSTED

        return self.validate_hmac(record, hmac_key)

    def authenticate_request(
        self,
        request: NotificationRequest | Mapping[str, Any],
        settings: Settings | None = None,
        http_credentials: HttpCredentials | None = None,
        authorization: str | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> AuthenticationSummary:
        """
        Authenticate every item of a notification request.

        Args:
            request: Parsed request, or its decoded JSON body
            settings: Merchant configuration, defaults to the environment settings
            http_credentials: Credentials already extracted by the transport
            authorization: Raw Authorization header value
            environ: CGI/WSGI environ to read HTTP_AUTHORIZATION from

        Returns:
            AuthenticationSummary splitting items into trusted, untrusted and reports

        Raises:
            InvalidDataError: If the request body fails validation
        """
        if not isinstance(request, NotificationRequest):
            request = parse_request(request)
        settings = settings or default_settings

        summary = AuthenticationSummary(
            live=request.live,
            accepted_message=self.return_accepted(""),
        )
        for item in request.items:
            if self.is_report_notification(item.eventCode):
                summary.reports.append(item)
                continue

            verdict = self.authenticate(
                item,
                live=request.live,
                hmac_key=settings.adyen_hmac_key,
                merchant_account=settings.adyen_merchant_account,
                username=settings.adyen_notification_username,
                password=settings.adyen_notification_password,
                test_mode=settings.adyen_test_mode,
                http_credentials=http_credentials,
                authorization=authorization,
                environ=environ,
            )
            if verdict is TrustVerdict.TRUSTED:
                summary.trusted.append(item)
            else:
                summary.untrusted.append(item)

        logger.info(
            "Authenticated Adyen notification: %d trusted, %d untrusted, %d reports",
            len(summary.trusted),
            len(summary.untrusted),
            len(summary.reports),
        )
        return summary
