"""Shared fixtures for the claims backend test suite."""

from __future__ import annotations

import os

# Point the module-level engine at SQLite before the app package is imported.
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite+aiosqlite://")
os.environ.setdefault("APP_ENV", "test")

from datetime import datetime
from typing import Any, Callable

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from claims_backend.api.deps import get_db
from claims_backend.api.schemas.claims import ClaimPayload
from claims_backend.db.models import Base, Claim
from claims_backend.main import create_app

# ---------------------------------------------------------------------------
# Database fixtures
# ---------------------------------------------------------------------------


@pytest_asyncio.fixture()
async def engine():
    """Fresh in-memory SQLite database per test."""
    _engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with _engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield _engine
    await _engine.dispose()


@pytest.fixture()
def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture()
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


# ---------------------------------------------------------------------------
# Claim builders
# ---------------------------------------------------------------------------


CLAIM_DEFAULTS: dict[str, Any] = {
    "claim_id": "CLM-1",
    "policyholder_name": "Jane Doe",
    "policy_number": "POL-100",
    "claim_type": "HEALTH",
    "amount": 500.0,
    "description": "Hospitalisation after a road accident",
    "incident_date": datetime(2024, 3, 1, 10, 0),
    "claim_date": datetime(2024, 3, 2, 9, 30),
    "status": "PENDING",
    "is_fraudulent": False,
    "fraud_reason": None,
    "deleted_at": None,
}


@pytest.fixture()
def claim_factory() -> Callable[..., Claim]:
    """Return a builder for transient Claim rows with every column populated."""

    def _build(**overrides: Any) -> Claim:
        fields = {**CLAIM_DEFAULTS, **overrides}
        return ClaimPayload(**fields).to_model()

    return _build


# ---------------------------------------------------------------------------
# App / client fixtures (lifespan is not run by ASGITransport)
# ---------------------------------------------------------------------------


@pytest.fixture()
def app(session_factory) -> FastAPI:
    """Build the real application with the session dependency pointed at SQLite."""

    async def _override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    _app = create_app()
    _app.dependency_overrides[get_db] = _override_get_db
    return _app


@pytest_asyncio.fixture()
async def client(app: FastAPI) -> AsyncClient:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
