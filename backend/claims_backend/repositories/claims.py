"""
Claim repository containing all data-access operations for the claims table.

Repository rules:
- Pure data-access logic only
- Every function receives AsyncSession explicitly
- Functions flush, but never commit
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Select, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from claims_backend.db.models.claim import REPLACEABLE_FIELDS, Claim


async def _scalars(db: AsyncSession, stmt: Select) -> list[Claim]:
    result = await db.execute(stmt.order_by(Claim.id))
    return list(result.scalars().all())


def _matches(query: str):
    """Case-insensitive literal substring match on the searchable fields."""
    return or_(
        Claim.claim_id.icontains(query, autoescape=True),
        Claim.policyholder_name.icontains(query, autoescape=True),
        Claim.policy_number.icontains(query, autoescape=True),
    )


async def get_claim_by_id(db: AsyncSession, claim_pk: int) -> Claim | None:
    """Fetch a claim by primary key, regardless of lifecycle state."""
    return await db.get(Claim, claim_pk)


async def get_claim_by_claim_id(db: AsyncSession, claim_id: str) -> Claim | None:
    """Fetch a claim by its external identifier (exact match)."""
    stmt = select(Claim).where(Claim.claim_id == claim_id)
    result = await db.execute(stmt)
    return result.scalar_one_or_none()


async def list_active_claims(db: AsyncSession) -> list[Claim]:
    """All claims whose deleted_at is unset."""
    return await _scalars(db, select(Claim).where(Claim.deleted_at.is_(None)))


async def list_active_fraudulent_claims(db: AsyncSession) -> list[Claim]:
    """Active claims flagged as fraudulent."""
    stmt = select(Claim).where(
        Claim.deleted_at.is_(None),
        Claim.is_fraudulent.is_(True),
    )
    return await _scalars(db, stmt)


async def list_deleted_claims(db: AsyncSession) -> list[Claim]:
    """All soft-deleted claims."""
    return await _scalars(db, select(Claim).where(Claim.deleted_at.is_not(None)))


async def search_active_claims(db: AsyncSession, query: str) -> list[Claim]:
    """Search active claims by claim id, policyholder name or policy number."""
    stmt = select(Claim).where(Claim.deleted_at.is_(None), _matches(query))
    return await _scalars(db, stmt)


async def search_deleted_claims(db: AsyncSession, query: str) -> list[Claim]:
    """Search soft-deleted claims by claim id, policyholder name or policy number."""
    stmt = select(Claim).where(Claim.deleted_at.is_not(None), _matches(query))
    return await _scalars(db, stmt)


async def save_claim(db: AsyncSession, claim: Claim) -> Claim:
    """
    Insert or fully replace a claim and return the persisted row.

    A claim without an id, or with an id that matches no row, is inserted
    and receives a new identity.  Otherwise every replaceable column of the
    stored row is overwritten with the incoming value, None included.
    The returned row is re-read after the flush, so it shows what was stored.
    """
    existing = None
    if claim.id is not None:
        existing = await get_claim_by_id(db, claim.id)

    if existing is None:
        claim.id = None
        db.add(claim)
        await db.flush()
        await db.refresh(claim)
        return claim

    if existing is not claim:
        for field in REPLACEABLE_FIELDS:
            setattr(existing, field, getattr(claim, field))
    await db.flush()
    await db.refresh(existing)
    return existing


async def count_active_claims_for_policy(
    db: AsyncSession,
    policy_number: str,
    *,
    filed_from: datetime,
    filed_to: datetime,
    exclude_pk: int | None = None,
) -> int:
    """Count active claims on a policy whose claim_date falls in [filed_from, filed_to]."""
    stmt = select(func.count()).select_from(Claim).where(
        Claim.deleted_at.is_(None),
        Claim.policy_number == policy_number,
        Claim.claim_date.between(filed_from, filed_to),
    )
    if exclude_pk is not None:
        stmt = stmt.where(Claim.id != exclude_pk)
    return await db.scalar(stmt) or 0
