"""
Placement query and trace endpoints.

GET /placements             - List placements, optionally by order number or status.
GET /placements/{id}/trace  - Placement with its full audit trail.
"""

import json
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from klarna_checkout.database import get_session
from klarna_checkout.models.records import AuditLog, OrderPlacement

router = APIRouter(prefix="/placements", tags=["placements"])


class PlacementDetail(BaseModel):
    id: str
    order_number: str
    region: str
    currency: str
    order_amount: int
    status: str
    klarna_order_id: Optional[str]
    fraud_status: Optional[str]
    error: Optional[str]
    created_at: Optional[str]


class AuditEntry(BaseModel):
    id: int
    action: str
    details: Optional[dict] = None
    timestamp: Optional[str]


class PlacementTrace(BaseModel):
    placement: PlacementDetail
    audit_trail: list[AuditEntry]


def _placement_to_detail(p: OrderPlacement) -> PlacementDetail:
    return PlacementDetail(
        id=p.id,
        order_number=p.order_number,
        region=p.region,
        currency=p.currency,
        order_amount=p.order_amount,
        status=p.status,
        klarna_order_id=p.klarna_order_id,
        fraud_status=p.fraud_status,
        error=p.error,
        created_at=p.created_at.isoformat() if p.created_at else None,
    )


@router.get("", response_model=list[PlacementDetail])
async def list_placements(
    order_number: Optional[str] = Query(None, description="Filter by order number"),
    status: Optional[str] = Query(None, description="Filter by status"),
    session: AsyncSession = Depends(get_session),
):
    stmt = select(OrderPlacement)
    if order_number:
        stmt = stmt.where(OrderPlacement.order_number == order_number)
    if status:
        stmt = stmt.where(OrderPlacement.status == status)

    result = await session.execute(stmt.order_by(OrderPlacement.created_at.desc()))
    return [_placement_to_detail(p) for p in result.scalars().all()]


@router.get("/{placement_id}/trace", response_model=PlacementTrace)
async def get_placement_trace(placement_id: str, session: AsyncSession = Depends(get_session)):
    """Placement details plus every audit entry, oldest first."""
    placement = await session.get(OrderPlacement, placement_id)
    if not placement:
        raise HTTPException(status_code=404, detail=f"Placement not found: {placement_id}")

    result = await session.execute(
        select(AuditLog)
        .where(AuditLog.placement_id == placement_id)
        .order_by(AuditLog.id.asc())
    )

    audit_trail = []
    for log in result.scalars().all():
        details = None
        if log.details:
            try:
                details = json.loads(log.details)
            except (json.JSONDecodeError, TypeError):
                details = {"raw": log.details}

        audit_trail.append(AuditEntry(
            id=log.id,
            action=log.action,
            details=details,
            timestamp=log.timestamp.isoformat() if log.timestamp else None,
        ))

    return PlacementTrace(placement=_placement_to_detail(placement), audit_trail=audit_trail)
