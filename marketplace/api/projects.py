"""Projects API router — project and milestone deletion."""

from typing import Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from marketplace.db.session import get_db
from marketplace.schemas.schemas import (
    DeleteWithReasonRequest, DeleteMilestonePromptOut, MessageResponse,
)
from marketplace.models.project import Milestone
from marketplace.services.deletion_service import deletion_service
from marketplace.core.security import Actor, get_current_user, require_admin
from marketplace.core.exceptions import not_found
from marketplace.ui.milestone_dialog import build_delete_milestone_prompt

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get(
    "/{project_id}/milestones/{milestone_id}/delete-prompt",
    response_model=DeleteMilestonePromptOut,
)
async def milestone_delete_prompt(
    project_id: int,
    milestone_id: int,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_current_user),
):
    """Confirmation text and milestone summary for the delete dialog."""
    milestone = (
        db.query(Milestone)
        .filter(Milestone.id == milestone_id, Milestone.project_id == project_id)
        .first()
    )
    if not milestone:
        raise not_found("Milestone not found")
    return build_delete_milestone_prompt(milestone)


@router.delete("/{project_id}/milestones/{milestone_id}", response_model=MessageResponse)
async def delete_milestone(
    project_id: int,
    milestone_id: int,
    body: Optional[DeleteWithReasonRequest] = None,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_current_user),
):
    """Delete a milestone (admin or assigned agent, reason required)."""
    deletion_service.delete_milestone(db, project_id, milestone_id, actor, body.reason if body else None)
    return MessageResponse(message="Milestone deleted successfully")


@router.delete("/{project_id}", response_model=MessageResponse)
async def delete_project(
    project_id: int,
    body: Optional[DeleteWithReasonRequest] = None,
    db: Session = Depends(get_db),
    actor: Actor = Depends(require_admin),
):
    """Delete a project and everything under it (admin, reason required)."""
    deletion_service.delete_project(db, project_id, actor, body.reason if body else None)
    return MessageResponse(message="Project deleted successfully")
