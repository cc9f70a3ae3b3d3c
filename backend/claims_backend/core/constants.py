"""Shared constants and enums used across the application."""

from enum import StrEnum


class ClaimLifecycle(StrEnum):
    """Soft-delete state of a claim record."""

    ACTIVE = "ACTIVE"
    DELETED = "DELETED"


# Status label the seed data and the dashboard use for new claims.
# Not enforced: ``Claim.status`` accepts any string.
DEFAULT_CLAIM_STATUS = "PENDING"

FRAUD_EXPORT_HEADERS = (
    "Claim ID",
    "Policyholder",
    "Policy Number",
    "Claim Type",
    "Amount",
    "Claim Date",
    "Status",
    "Fraud Reason",
    "Flagged Rules",
)


# ─── Fraud rules (advisory; never written to is_fraudulent) ───
HIGH_AMOUNT_THRESHOLD = 100_000.0
HIGH_AMOUNT_MESSAGE = "Claim amount exceeds ₹100,000"

FREQUENT_CLAIMS_THRESHOLD = 3
FREQUENT_CLAIMS_WINDOW_DAYS = 365
FREQUENT_CLAIMS_MESSAGE = "More than 3 claims in the past year"
