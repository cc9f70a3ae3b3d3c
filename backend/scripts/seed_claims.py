"""
Seed sample claims for development.
Run: python -m scripts.seed_claims  (from backend/)
"""

import asyncio
from datetime import datetime

from claims_backend.core.constants import DEFAULT_CLAIM_STATUS
from claims_backend.db.models.claim import Claim
from claims_backend.db.session import async_session
from claims_backend.services.claims import ClaimService


SEED_CLAIMS = [
    {
        "claim_id": "CLM-1001",
        "policyholder_name": "Raj Kumar",
        "policy_number": "POL-55001",
        "claim_type": "HEALTH",
        "amount": 125000.0,
        "claim_date": datetime(2024, 3, 15),
        "is_fraudulent": True,
        "fraud_reason": "High claim amount and frequency",
    },
    {
        "claim_id": "CLM-1002",
        "policyholder_name": "Priya Sharma",
        "policy_number": "POL-55002",
        "claim_type": "MOTOR",
        "amount": 45000.0,
        "claim_date": datetime(2024, 3, 10),
        "is_fraudulent": False,
    },
    {
        "claim_id": "CLM-1003",
        "policyholder_name": "Amit Patel",
        "policy_number": "POL-55003",
        "claim_type": "PROPERTY",
        "amount": 150000.0,
        "claim_date": datetime(2024, 3, 5),
        "is_fraudulent": True,
        "fraud_reason": "High claim amount",
    },
    {
        "claim_id": "CLM-1004",
        "policyholder_name": "Sneha Gupta",
        "policy_number": "POL-55004",
        "claim_type": "HEALTH",
        "amount": 75000.0,
        "claim_date": datetime(2024, 3, 1),
        "is_fraudulent": True,
        "fraud_reason": "Frequent claims",
    },
]


async def seed():
    """Insert seed claims, skipping any claim id that already exists."""
    async with async_session() as session:
        service = ClaimService(session)
        created = 0
        for data in SEED_CLAIMS:
            if await service.get_claim_by_claim_id(data["claim_id"]) is not None:
                print(f"  Skipped existing claim: {data['claim_id']}")
                continue
            claim = await service.save_claim(Claim(status=DEFAULT_CLAIM_STATUS, deleted_at=None, **data))
            print(f"  Created claim: {claim.claim_id} (id={claim.id})")
            created += 1
        await session.commit()
    print(f"Seeded {created} claims.")


if __name__ == "__main__":
    asyncio.run(seed())
