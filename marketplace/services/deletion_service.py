"""Deletion workflow for bids, milestones and projects.

Privileged deletions (admin, superadmin, or the agent assigned to the
project) must carry a reason and leave a deletion remark behind. The remark
and the removal are committed in the same transaction.
"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from marketplace.core.exceptions import (
    AuthorizationError, ResourceNotFoundError, ValidationError,
)
from marketplace.core.security import Actor
from marketplace.models.bid import Bid
from marketplace.models.project import Project, Milestone
from marketplace.services.deletion_remark_service import deletion_remark_service, clean_reason

logger = logging.getLogger("marketplace")


def _is_assigned_agent(actor: Actor, project: Optional[Project]) -> bool:
    return (
        actor.is_agent
        and project is not None
        and project.assigned_agent_id is not None
        and project.assigned_agent_id == actor.id
    )


class DeletionService:
    """Removes marketplace entities and records why."""

    @staticmethod
    def delete_bid(db: Session, bid_id: int, actor: Actor, reason: Optional[str] = None) -> str:
        """Delete or withdraw a bid.

        Owners may withdraw their own pending bid without a reason. Admins
        may delete any bid; the assigned agent may delete pending bids on
        their project. Both must give a reason, which is recorded.

        Returns the user-facing outcome message.
        """
        bid = db.query(Bid).filter(Bid.id == bid_id).first()
        if not bid:
            raise ResourceNotFoundError("Bid not found")

        project = bid.project
        is_owner = bid.bidder_id == actor.id
        is_agent = _is_assigned_agent(actor, project)
        privileged = actor.is_admin or is_agent

        if not privileged and not is_owner:
            raise AuthorizationError("Unauthorized to delete this bid")

        if privileged:
            reason = clean_reason(reason)

        if not actor.is_admin and not bid.can_withdraw():
            raise ValidationError("Bid cannot be withdrawn", field="status")

        if privileged:
            deletion_remark_service.create(
                db,
                entity_type="bid",
                entity_id=bid.id,
                project_id=project.id if project else None,
                reason=reason,
                deleted_by=actor.id,
                deleted_by_role=actor.role,
                metadata={
                    "bid_id": bid.id,
                    "project_id": project.id if project else None,
                    "project_title": project.title if project else None,
                    "bidder_id": bid.bidder_id,
                },
                commit=False,
            )

        db.delete(bid)
        db.commit()
        logger.info("Bid %s removed by %s (%s)", bid_id, actor.id, actor.role)
        return "Bid deleted successfully" if actor.is_admin else "Bid withdrawn successfully"

    @staticmethod
    def delete_milestone(
        db: Session, project_id: int, milestone_id: int, actor: Actor, reason: Optional[str],
    ) -> None:
        """Delete a milestone. Admins and the project's assigned agent only."""
        milestone = (
            db.query(Milestone)
            .filter(Milestone.id == milestone_id, Milestone.project_id == project_id)
            .first()
        )
        if not milestone:
            raise ResourceNotFoundError("Milestone not found")

        if not actor.is_admin and not _is_assigned_agent(actor, milestone.project):
            raise AuthorizationError("Unauthorized to delete this milestone")

        deletion_remark_service.create(
            db,
            entity_type="milestone",
            entity_id=milestone.id,
            project_id=project_id,
            reason=clean_reason(reason),
            deleted_by=actor.id,
            deleted_by_role=actor.role,
            metadata={
                "title": milestone.title,
                "amount": milestone.amount,
                "due_date": milestone.due_date.isoformat() if milestone.due_date else None,
            },
            commit=False,
        )
        db.delete(milestone)
        db.commit()
        logger.info("Milestone %s of project %s removed by %s", milestone_id, project_id, actor.id)

    @staticmethod
    def delete_project(db: Session, project_id: int, actor: Actor, reason: Optional[str]) -> None:
        """Delete a project with its bids and milestones. Admins only."""
        project = db.query(Project).filter(Project.id == project_id).first()
        if not project:
            raise ResourceNotFoundError("Project not found")

        if not actor.is_admin:
            raise AuthorizationError("Only admins can delete projects")

        deletion_remark_service.create(
            db,
            entity_type="project",
            entity_id=project.id,
            project_id=project.id,
            reason=clean_reason(reason),
            deleted_by=actor.id,
            deleted_by_role=actor.role,
            metadata={
                "title": project.title,
                "client_id": project.client_id,
                "bid_count": len(project.bids),
                "milestone_count": len(project.milestones),
            },
            commit=False,
        )
        db.delete(project)
        db.commit()
        logger.info("Project %s removed by %s", project_id, actor.id)


deletion_service = DeletionService()
