"""Seed a demo project with milestones and bids."""

from datetime import date, timedelta

from sqlalchemy.orm import Session
from marketplace.models.project import Project, Milestone
from marketplace.models.bid import Bid, BidStatusEnum


def seed_sample_data(db: Session) -> None:
    """Insert one sample project unless projects already exist."""
    if db.query(Project).first():
        print("Projects already present, skipping sample data.")
        return

    project = Project(
        title="Marketplace landing page revamp",
        client_id="client-1",
        assigned_agent_id="agent-1",
    )
    db.add(project)
    db.flush()

    today = date.today()
    db.add_all([
        Milestone(project_id=project.id, title="Wireframes", amount=15000, due_date=today + timedelta(days=7)),
        Milestone(project_id=project.id, title="Final handoff", amount=None, due_date=today + timedelta(days=30)),
        Bid(project_id=project.id, bidder_id="freelancer-1", amount=42000),
        Bid(project_id=project.id, bidder_id="freelancer-2", amount=39500, status=BidStatusEnum.rejected),
    ])
    db.commit()
    print(f"Seeded sample project {project.id}")
