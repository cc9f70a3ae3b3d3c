"""API schema package."""

from claims_backend.api.schemas.claims import (
    ClaimPayload,
    ClaimResponse,
    ClaimStatsResponse,
    FraudRulesResponse,
)

__all__ = ["ClaimPayload", "ClaimResponse", "ClaimStatsResponse", "FraudRulesResponse"]
