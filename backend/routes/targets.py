"""Code generation targets — GET /api/targets."""

from __future__ import annotations

from fastapi import APIRouter

from backend.models.session import TargetResponse
from pagewright.codegen import available_targets

router = APIRouter(prefix="/api/targets", tags=["targets"])


@router.get("", status_code=200)
async def list_targets() -> list[TargetResponse]:
    """List export targets with their output filename and accepted aliases."""
    return [TargetResponse(**t.describe()) for t in available_targets()]
