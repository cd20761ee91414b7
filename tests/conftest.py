"""Pytest fixtures for webhook authentication tests."""

import base64

import pytest

from adyen_webhook.config import Settings
from adyen_webhook.receiver.hmac_signature import HmacSignature
from adyen_webhook.receiver.notification_receiver import NotificationReceiver


@pytest.fixture
def adyen_hmac_key() -> str:
    """Test HMAC key in hex format (64 hex chars = 32 bytes)."""
    return "44782DEF547AAA06C910C43932B1EB0C71FC68D9D0C057550C48EC2ACF6BA056"


@pytest.fixture
def hmac_signature() -> HmacSignature:
    return HmacSignature()


@pytest.fixture
def receiver() -> NotificationReceiver:
    return NotificationReceiver()


@pytest.fixture
def valid_adyen_notification_item() -> dict:
    """A valid Adyen AUTHORISATION notification item."""
    return {
        "pspReference": "7914073381342284",
        "originalReference": "",
        "merchantAccountCode": "TestMerchant",
        "merchantReference": "TestPayment-1407325143704",
        "amount": {"value": 1130, "currency": "EUR"},
        "eventCode": "AUTHORISATION",
        "success": "true",
        "eventDate": "2024-01-15T12:00:00+01:00",
        "paymentMethod": "visa",
        "operations": ["CANCEL", "CAPTURE", "REFUND"],
        "additionalData": {},
    }


@pytest.fixture
def valid_adyen_refund_item() -> dict:
    """A valid Adyen REFUND notification item."""
    return {
        "pspReference": "8816178952380553",
        "originalReference": "7914073381342284",
        "merchantAccountCode": "TestMerchant",
        "merchantReference": "TestPayment-1407325143704",
        "amount": {"value": 500, "currency": "EUR"},
        "eventCode": "REFUND",
        "success": "true",
        "additionalData": {},
    }


@pytest.fixture
def merchant_settings(adyen_hmac_key) -> Settings:
    """Merchant configuration for a shop running on the Adyen test platform."""
    return Settings(
        _env_file=None,
        adyen_hmac_key=adyen_hmac_key,
        adyen_merchant_account="TestMerchant",
        adyen_notification_username="adyen_user",
        adyen_notification_password="s3cr3t:pass",
        adyen_test_mode=True,
    )


@pytest.fixture
def basic_auth_header() -> str:
    """Authorization header matching merchant_settings."""
    token = base64.b64encode(b"adyen_user:s3cr3t:pass").decode("ascii")
    return f"Basic {token}"


@pytest.fixture
def signed_item(adyen_hmac_key, hmac_signature, valid_adyen_notification_item) -> dict:
    """The AUTHORISATION item with a correct hmacSignature."""
    item = dict(valid_adyen_notification_item)
    item["additionalData"] = {
        "hmacSignature": hmac_signature.calculate_notification_hmac(adyen_hmac_key, item)
    }
    return item
