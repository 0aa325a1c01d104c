"""Deletion remarks API router (admin only)."""

from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from marketplace.db.session import get_db
from marketplace.schemas.schemas import (
    DeletionRemarkCreate, DeletionRemarkOut, DeletionRemarkListResponse,
)
from marketplace.services.deletion_remark_service import deletion_remark_service
from marketplace.core.security import Actor, require_admin

router = APIRouter(prefix="/deletion-remarks", tags=["deletion-remarks"])


@router.post("/", response_model=DeletionRemarkOut, status_code=201)
async def create_remark(
    body: DeletionRemarkCreate,
    db: Session = Depends(get_db),
    actor: Actor = Depends(require_admin),
):
    """Record a deletion remark on behalf of the calling admin."""
    remark = deletion_remark_service.create(
        db,
        entity_type=body.entity_type,
        entity_id=body.entity_id,
        project_id=body.project_id,
        reason=body.reason,
        deleted_by=actor.id,
        deleted_by_role=actor.role,
        metadata=body.metadata,
    )
    return DeletionRemarkOut.model_validate(remark)


@router.get("/", response_model=DeletionRemarkListResponse)
async def list_remarks(
    entity_type: Optional[str] = Query(None),
    entity_id: Optional[str] = Query(None),
    project_id: Optional[str] = Query(None),
    deleted_by: Optional[str] = Query(None),
    page: int = Query(1, ge=1),
    page_size: int = Query(50, ge=1, le=200),
    db: Session = Depends(get_db),
    actor: Actor = Depends(require_admin),
):
    """Query deletion remarks, newest first."""
    result = deletion_remark_service.query(
        db, entity_type, entity_id, project_id, deleted_by, page, page_size,
    )
    return DeletionRemarkListResponse(
        remarks=[DeletionRemarkOut.model_validate(r) for r in result["remarks"]],
        total=result["total"],
        page=result["page"],
        page_size=result["page_size"],
    )


@router.get("/{remark_id}", response_model=DeletionRemarkOut)
async def get_remark(
    remark_id: int,
    db: Session = Depends(get_db),
    actor: Actor = Depends(require_admin),
):
    """Fetch a single deletion remark."""
    return DeletionRemarkOut.model_validate(deletion_remark_service.get(db, remark_id))
