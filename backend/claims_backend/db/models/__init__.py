"""
Models package — re-exports Base and all models.

Import models here so Alembic's `target_metadata = Base.metadata`
picks up every table automatically.

When adding a new model:
    1. Create `claims_backend/db/models/<table_name>.py`
    2. Import it here
"""

from claims_backend.db.models.base import Base
from claims_backend.db.models.claim import Claim

__all__ = [
    "Base",
    "Claim",
]
