"""Claim CRUD, soft-delete/restore, search and reporting endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from claims_backend.api.deps import get_claim_service
from claims_backend.api.schemas.claims import (
    ClaimPayload,
    ClaimResponse,
    ClaimStatsResponse,
    FraudRulesResponse,
)
from claims_backend.db.models.claim import Claim
from claims_backend.services.claims import ClaimService

router = APIRouter(prefix="/claims", tags=["Claims"])


def _found(claim: Claim | None) -> Claim:
    if claim is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Claim not found",
        )
    return claim


# ─── Collections ──────────────────────────────────────────
@router.get("", response_model=list[ClaimResponse])
async def list_active_claims(service: ClaimService = Depends(get_claim_service)):
    """List all active (not soft-deleted) claims."""
    return await service.get_all_active_claims()


@router.get("/fraudulent", response_model=list[ClaimResponse])
async def list_fraudulent_claims(service: ClaimService = Depends(get_claim_service)):
    """List active claims flagged as fraudulent."""
    return await service.get_all_fraudulent_claims()


@router.get("/fraudulent/export")
async def export_fraudulent_claims(service: ClaimService = Depends(get_claim_service)) -> Response:
    """Download active fraudulent claims as CSV."""
    content = await service.export_fraudulent_claims_csv()
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="fraudulent_claims.csv"'},
    )


@router.get("/deleted", response_model=list[ClaimResponse])
async def list_deleted_claims(service: ClaimService = Depends(get_claim_service)):
    """List soft-deleted claims."""
    return await service.get_all_deleted_claims()


@router.get("/search", response_model=list[ClaimResponse])
async def search_claims(
    query: str,
    include_deleted: bool | None = Query(None, alias="includeDeleted"),
    service: ClaimService = Depends(get_claim_service),
):
    """Search by claim id, policyholder name or policy number (case-insensitive)."""
    return await service.search_claims(query, include_deleted)


@router.get("/stats", response_model=ClaimStatsResponse)
async def claim_stats(service: ClaimService = Depends(get_claim_service)):
    """Totals and fraud rate over active claims."""
    return await service.get_active_claim_stats()


# ─── Single claim ─────────────────────────────────────────
@router.get("/by-claim-id/{claim_id}", response_model=ClaimResponse)
async def get_claim_by_claim_id(claim_id: str, service: ClaimService = Depends(get_claim_service)):
    """Look up a claim by its external claim identifier."""
    return _found(await service.get_claim_by_claim_id(claim_id))


@router.get("/{claim_pk}", response_model=ClaimResponse)
async def get_claim(claim_pk: int, service: ClaimService = Depends(get_claim_service)):
    """Fetch one claim, active or deleted."""
    return _found(await service.get_claim_by_id(claim_pk))


@router.get("/{claim_pk}/fraud-rules", response_model=FraudRulesResponse)
async def evaluate_fraud_rules(claim_pk: int, service: ClaimService = Depends(get_claim_service)):
    """Evaluate the amount and frequency fraud rules.  Does not change the fraud flag."""
    claim = _found(await service.get_claim_by_id(claim_pk))
    return FraudRulesResponse(
        id=claim.id,
        claim_id=claim.claim_id,
        is_fraudulent=claim.is_fraudulent,
        flagged_rules=await service.evaluate_fraud_rules(claim),
    )


@router.post("", response_model=ClaimResponse)
async def create_claim(payload: ClaimPayload, service: ClaimService = Depends(get_claim_service)):
    """Create a claim (or fully replace one when the body carries an existing id)."""
    return await service.save_claim(payload.to_model())


@router.put("/{claim_pk}", response_model=ClaimResponse)
async def update_claim(
    claim_pk: int,
    payload: ClaimPayload,
    service: ClaimService = Depends(get_claim_service),
):
    """Fully replace an existing claim.  The path id wins over any id in the body."""
    _found(await service.get_claim_by_id(claim_pk))
    return await service.save_claim(payload.to_model(claim_pk))


@router.delete("/{claim_pk}", response_class=Response)
async def delete_claim(claim_pk: int, service: ClaimService = Depends(get_claim_service)) -> Response:
    """Soft-delete a claim.  Unknown ids succeed silently."""
    await service.delete_claim(claim_pk)
    return Response(status_code=status.HTTP_200_OK)


@router.post("/{claim_pk}/restore", response_class=Response)
async def restore_claim(claim_pk: int, service: ClaimService = Depends(get_claim_service)) -> Response:
    """Restore a soft-deleted claim.  Unknown ids succeed silently."""
    await service.restore_claim(claim_pk)
    return Response(status_code=status.HTTP_200_OK)
