"""Project and milestone models."""

from sqlalchemy import Column, Integer, String, Float, Date, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from marketplace.db.base import Base


class Project(Base):
    """A client project that freelancers bid on."""
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    client_id = Column(String(100), nullable=False, index=True)
    assigned_agent_id = Column(String(100), nullable=True, index=True)
    status = Column(String(30), default="open", nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

    milestones = relationship(
        "Milestone", back_populates="project", cascade="all, delete-orphan",
        order_by="Milestone.due_date",
    )
    bids = relationship("Bid", back_populates="project", cascade="all, delete-orphan")


class Milestone(Base):
    """A payable checkpoint within a project."""
    __tablename__ = "milestones"

    id = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    amount = Column(Float, nullable=True)
    due_date = Column(Date, nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    project = relationship("Project", back_populates="milestones")
