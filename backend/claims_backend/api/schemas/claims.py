"""Claim request/response schemas.

JSON uses camelCase keys (``claimId``, ``isFraudulent``, ...); snake_case
is accepted on input as well.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from claims_backend.db.models.base import to_naive_utc
from claims_backend.db.models.claim import REPLACEABLE_FIELDS, Claim


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ClaimFields(CamelModel):
    """All replaceable claim attributes.  Every field is optional."""

    claim_id: str | None = None
    policyholder_name: str | None = None
    policy_number: str | None = None
    claim_type: str | None = None
    amount: float | None = None
    description: str | None = None
    incident_date: datetime | None = None
    claim_date: datetime | None = None
    status: str | None = None
    is_fraudulent: bool | None = None
    fraud_reason: str | None = None
    deleted_at: datetime | None = None

    @field_validator("incident_date", "claim_date", "deleted_at")
    @classmethod
    def _naive_utc(cls, value: datetime | None) -> datetime | None:
        return to_naive_utc(value)


class ClaimPayload(ClaimFields):
    """Request body for create and update."""

    id: int | None = None

    def to_model(self, claim_pk: int | None = None) -> Claim:
        """Build a transient Claim carrying every field, for full-replace saves."""
        values = {field: getattr(self, field) for field in REPLACEABLE_FIELDS}
        return Claim(id=claim_pk if claim_pk is not None else self.id, **values)


class ClaimResponse(ClaimFields):
    """A persisted claim."""

    id: int


class ClaimStatsResponse(CamelModel):
    """Totals over active claims."""

    total_claims: int
    fraudulent_claims: int
    total_amount: float
    fraudulent_amount: float
    fraud_percentage: float


class FraudRulesResponse(CamelModel):
    """Rule-based fraud indicators for one claim.  Advisory only."""

    id: int
    claim_id: str | None = None
    is_fraudulent: bool | None = None
    flagged_rules: list[str]
