"""
Claim service — lifecycle rules on top of the claim repository.

A ClaimService wraps one AsyncSession and is built per request by
``claims_backend.api.deps.get_claim_service``.  It owns the soft-delete
state machine:

    ACTIVE  --delete-->  DELETED   (deleted_at = now, re-stamped if already deleted)
    DELETED --restore--> ACTIVE    (deleted_at = None)

Both transitions are silent no-ops for unknown ids.
"""

from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from datetime import timedelta

from sqlalchemy.ext.asyncio import AsyncSession

from claims_backend.core.constants import (
    FRAUD_EXPORT_HEADERS,
    FREQUENT_CLAIMS_MESSAGE,
    FREQUENT_CLAIMS_THRESHOLD,
    FREQUENT_CLAIMS_WINDOW_DAYS,
    HIGH_AMOUNT_MESSAGE,
    HIGH_AMOUNT_THRESHOLD,
)
from claims_backend.core.logging import get_logger
from claims_backend.db.models.base import utcnow
from claims_backend.db.models.claim import Claim
from claims_backend.repositories import claims as claim_repository

logger = get_logger(__name__)


@dataclass(frozen=True)
class ClaimStats:
    """Dashboard totals over active claims."""

    total_claims: int
    fraudulent_claims: int
    total_amount: float
    fraudulent_amount: float
    fraud_percentage: float


class ClaimService:
    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    # ─── Reads ────────────────────────────────
    async def get_all_active_claims(self) -> list[Claim]:
        return await claim_repository.list_active_claims(self.db)

    async def get_all_fraudulent_claims(self) -> list[Claim]:
        return await claim_repository.list_active_fraudulent_claims(self.db)

    async def get_all_deleted_claims(self) -> list[Claim]:
        return await claim_repository.list_deleted_claims(self.db)

    async def get_claim_by_id(self, claim_pk: int) -> Claim | None:
        """Return the claim or None; absence is not an error."""
        return await claim_repository.get_claim_by_id(self.db, claim_pk)

    async def get_claim_by_claim_id(self, claim_id: str) -> Claim | None:
        return await claim_repository.get_claim_by_claim_id(self.db, claim_id)

    # ─── Writes ───────────────────────────────
    async def save_claim(self, claim: Claim) -> Claim:
        """Create or fully replace a claim.  No field validation."""
        saved = await claim_repository.save_claim(self.db, claim)
        logger.info("Claim saved", id=saved.id, claim_id=saved.claim_id, state=saved.lifecycle)
        return saved

    async def delete_claim(self, claim_pk: int) -> None:
        """Soft-delete a claim by stamping deleted_at."""
        claim = await self.get_claim_by_id(claim_pk)
        if claim is None:
            logger.debug("Delete skipped, claim not found", id=claim_pk)
            return
        from_state = claim.lifecycle
        claim.deleted_at = utcnow()
        await claim_repository.save_claim(self.db, claim)
        logger.info("Claim soft-deleted", id=claim_pk, from_state=from_state, to_state=claim.lifecycle)

    async def restore_claim(self, claim_pk: int) -> None:
        """Bring a soft-deleted claim back to the active set."""
        claim = await self.get_claim_by_id(claim_pk)
        if claim is None:
            logger.debug("Restore skipped, claim not found", id=claim_pk)
            return
        from_state = claim.lifecycle
        claim.deleted_at = None
        await claim_repository.save_claim(self.db, claim)
        logger.info("Claim restored", id=claim_pk, from_state=from_state, to_state=claim.lifecycle)

    # ─── Search ───────────────────────────────
    async def search_active_claims(self, query: str) -> list[Claim]:
        return await claim_repository.search_active_claims(self.db, query)

    async def search_deleted_claims(self, query: str) -> list[Claim]:
        return await claim_repository.search_deleted_claims(self.db, query)

    async def search_claims(self, query: str, include_deleted: bool | None = None) -> list[Claim]:
        """Search deleted claims when the flag is set, active claims otherwise."""
        if include_deleted:
            return await self.search_deleted_claims(query)
        return await self.search_active_claims(query)

    # ─── Reporting ────────────────────────────
    async def get_active_claim_stats(self) -> ClaimStats:
        claims = await self.get_all_active_claims()
        fraudulent = [c for c in claims if c.is_fraudulent]

        total = len(claims)
        percentage = round(len(fraudulent) / total * 100, 2) if total else 0.0

        return ClaimStats(
            total_claims=total,
            fraudulent_claims=len(fraudulent),
            total_amount=sum(c.amount or 0.0 for c in claims),
            fraudulent_amount=sum(c.amount or 0.0 for c in fraudulent),
            fraud_percentage=percentage,
        )

    async def evaluate_fraud_rules(self, claim: Claim) -> list[str]:
        """
        Return the messages of every fraud rule the claim trips.

        Read-only: ``is_fraudulent`` is never touched.  The frequency rule
        counts other active claims on the same policy filed in the year up
        to this claim's claim_date (or now when it has none).
        """
        flagged: list[str] = []

        if claim.amount is not None and claim.amount > HIGH_AMOUNT_THRESHOLD:
            flagged.append(HIGH_AMOUNT_MESSAGE)

        if claim.policy_number:
            filed_to = claim.claim_date or utcnow()
            recent = await claim_repository.count_active_claims_for_policy(
                self.db,
                claim.policy_number,
                filed_from=filed_to - timedelta(days=FREQUENT_CLAIMS_WINDOW_DAYS),
                filed_to=filed_to,
                exclude_pk=claim.id,
            )
            if recent > FREQUENT_CLAIMS_THRESHOLD:
                flagged.append(FREQUENT_CLAIMS_MESSAGE)

        return flagged

    async def export_fraudulent_claims_csv(self) -> str:
        """Render active fraudulent claims as CSV text."""
        claims = await self.get_all_fraudulent_claims()

        buffer = io.StringIO()
        writer = csv.writer(buffer)
        writer.writerow(FRAUD_EXPORT_HEADERS)
        for c in claims:
            writer.writerow([
                c.claim_id or "",
                c.policyholder_name or "",
                c.policy_number or "",
                c.claim_type or "",
                "" if c.amount is None else c.amount,
                c.claim_date.isoformat() if c.claim_date else "",
                c.status or "",
                c.fraud_reason or "",
                "; ".join(await self.evaluate_fraud_rules(c)),
            ])

        logger.info("Fraudulent claims exported", rows=len(claims))
        return buffer.getvalue()
