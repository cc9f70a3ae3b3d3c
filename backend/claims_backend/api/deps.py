"""Shared dependencies for API routes."""

from __future__ import annotations

from typing import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from claims_backend.db.session import get_db as _get_db
from claims_backend.services.claims import ClaimService


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield an async DB session."""
    async for session in _get_db():
        yield session


async def get_claim_service(db: AsyncSession = Depends(get_db)) -> ClaimService:
    """Build a ClaimService bound to the request's session."""
    return ClaimService(db)
