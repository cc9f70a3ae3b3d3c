"""
Claim model — a single insurance claim record.

Claims are never physically removed.  ``deleted_at`` doubles as the
soft-delete marker:

    NULL      — ACTIVE (listed, searchable as active)
    timestamp — DELETED (retained, visible only through deleted views)

The fraud flag is independent of status, amount and lifecycle.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from claims_backend.core.constants import ClaimLifecycle
from claims_backend.db.models.base import Base

# Columns overwritten by a full-replace save (everything except identity).
REPLACEABLE_FIELDS = (
    "claim_id",
    "policyholder_name",
    "policy_number",
    "claim_type",
    "amount",
    "description",
    "incident_date",
    "claim_date",
    "status",
    "is_fraudulent",
    "fraud_reason",
    "deleted_at",
)


class Claim(Base):
    __tablename__ = "claims"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True
    )
    claim_id: Mapped[Optional[str]] = mapped_column(
        String(255), unique=True, nullable=True
    )

    policyholder_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    policy_number: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    claim_type: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    amount: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    incident_date: Mapped[Optional[datetime]] = mapped_column(
        DateTime, nullable=True
    )
    claim_date: Mapped[Optional[datetime]] = mapped_column(
        DateTime, nullable=True
    )

    status: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # Fraud flagging
    is_fraudulent: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    fraud_reason: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Soft delete
    deleted_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime, nullable=True, index=True
    )

    @property
    def lifecycle(self) -> ClaimLifecycle:
        if self.deleted_at is None:
            return ClaimLifecycle.ACTIVE
        return ClaimLifecycle.DELETED

    def __repr__(self) -> str:
        return f"<Claim id={self.id} {self.claim_id} state={self.lifecycle} fraud={self.is_fraudulent}>"
