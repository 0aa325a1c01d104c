import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("NOTIFICATION_SOUND_ENABLED", "false")

from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from marketplace.core.security import create_access_token
from marketplace.db.base import Base
from marketplace.db.session import get_db
from marketplace.main import app
from marketplace.models import Project, Milestone, Bid, BidStatusEnum


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def auth(role, user_id):
    token = create_access_token({"sub": str(user_id), "role": role})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def project(db):
    """Project client-1, assigned to agent-1, with two milestones and two bids."""
    project = Project(title="Landing page revamp", client_id="client-1", assigned_agent_id="agent-1")
    db.add(project)
    db.flush()
    db.add_all([
        Milestone(project_id=project.id, title="Wireframes", amount=15000, due_date=date(2026, 11, 2)),
        Milestone(project_id=project.id, title="Handoff", amount=None, due_date=date(2026, 12, 1)),
        Bid(project_id=project.id, bidder_id="freelancer-1", amount=42000),
        Bid(project_id=project.id, bidder_id="freelancer-2", amount=39500, status=BidStatusEnum.accepted),
    ])
    db.commit()
    db.refresh(project)
    return project


def pending_bid(project):
    return next(b for b in project.bids if b.status == BidStatusEnum.pending)


def accepted_bid(project):
    return next(b for b in project.bids if b.status == BidStatusEnum.accepted)
