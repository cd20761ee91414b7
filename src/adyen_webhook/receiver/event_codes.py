"""Adyen notification event codes.

Only the codes in SUPPORTED_EVENT_CODES carry an hmacSignature. The editable
set lists the codes whose downstream payment state a merchant may change.
"""

SUPPORTED_EVENT_CODES = frozenset({
    "ADVICE_OF_DEBIT",
    "AUTHORISATION",
    "AUTHORISATION_ADJUSTMENT",
    "AUTHORISATION_PENDING",
    "AUTHORISE_REFERRAL",
    "AUTORESCUE",
    "CANCELLATION",
    "CANCEL_AUTORESCUE",
    "CANCEL_OR_REFUND",
    "CAPTURE",
    "CAPTURE_FAILED",
    "CAPTURE_WITH_EXTERNAL_AUTH",
    "CHARGEBACK",
    "CHARGEBACK_REVERSED",
    "DEACTIVATE_RECURRING",
    "FRAUD_ONLY",
    "FUND_TRANSFER",
    "HANDLED_EXTERNALLY",
    "MANUAL_REVIEW_ACCEPT",
    "NOTIFICATION_OF_CHARGEBACK",
    "NOTIFICATION_OF_FRAUD",
    "OFFER_CLOSED",
    "ORDER_CLOSED",
    "ORDER_OPENED",
    "PAIDOUT_REVERSED",
    "PAYOUT_DECLINE",
    "PAYOUT_EXPIRE",
    "PAYOUT_THIRDPARTY",
    "POSTPONED_REFUND",
    "PREARBITRATION_LOST",
    "PREARBITRATION_WON",
    "PROCESS_RETRY",
    "RECURRING_CONTRACT",
    "REFUND",
    "REFUNDED_REVERSED",
    "REFUND_FAILED",
    "REFUND_WITH_DATA",
    "REQUEST_FOR_INFORMATION",
    "SECOND_CHARGEBACK",
    "SUBMIT_RECURRING",
    "TECHNICAL_CANCEL",
    "VOID_PENDING_REFUND",
})

EDITABLE_EVENT_CODES = frozenset({
    "ADVICE_OF_DEBIT",
    "AUTHENTICATION",
    "AUTHORISATION",
    "AUTHORISATION_ADJUSTMENT",
    "AUTORESCUE",
    "AUTORESCUE_NEXT_ATTEMPT",
    "CANCELLATION",
    "CANCEL_AUTORESCUE",
    "CANCEL_OR_REFUND",
    "CAPTURE",
    "CAPTURE_FAILED",
    "CHARGEBACK",
    "CHARGEBACK_REVERSED",
    "DISABLE_RECURRING",
    "DISPUTE_DEFENSE_PERIOD_ENDED",
    "DISPUTE_OPENED_WITH_CHARGEBACK",
    "DONATION",
    "EXPIRE",
    "HANDLED_EXTERNALLY",
    "INFORMATION_SUPPLIED",
    "ISSUER_COMMENTS",
    "ISSUER_RESPONSE_TIMEFRAME_EXPIRED",
    "MANUAL_REVIEW_ACCEPT",
    "MANUAL_REVIEW_REJECT",
    "NOTIFICATION_OF_CHARGEBACK",
    "NOTIFICATION_OF_FRAUD",
    "OFFER_CLOSED",
    "ORDER_CLOSED",
    "ORDER_OPENED",
    "PAIDOUT_REVERSED",
    "PAYOUT_DECLINE",
    "PAYOUT_EXPIRE",
    "PAYOUT_THIRDPARTY",
    "PENDING",
    "POSTPONED_REFUND",
    "PREARBITRATION_LOST",
    "PREARBITRATION_WON",
    "RECURRING_CONTRACT",
    "REFUND",
    "REFUNDED_REVERSED",
    "REFUND_FAILED",
    "REFUND_WITH_DATA",
    "REPORT_AVAILABLE",
    "REQUEST_FOR_INFORMATION",
    "SECOND_CHARGEBACK",
    "TECHNICAL_CANCEL",
    "VOID_PENDING_REFUND",
})
