"""Deletion remark model — append-only."""

from sqlalchemy import Column, Integer, String, DateTime, JSON, func
from marketplace.db.base import Base


class DeletionRemark(Base):
    """Why, and by whom, a marketplace entity was removed.

    Rows are written once when the deletion happens and are never updated
    or deleted (enforced at application level).
    """
    __tablename__ = "deletion_remarks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    entity_type = Column(String(20), nullable=False, index=True)  # bid, project, milestone, ...
    entity_id = Column(String(100), nullable=False, index=True)
    project_id = Column(String(100), nullable=True, index=True)
    reason = Column(String(500), nullable=False)
    deleted_by = Column(String(100), nullable=False, index=True)
    deleted_by_role = Column(String(50), nullable=True)
    # "metadata" is reserved on declarative classes
    remark_metadata = Column("metadata", JSON, nullable=False, default=dict)
    created_at = Column(DateTime, server_default=func.now(), nullable=False, index=True)
    updated_at = Column(DateTime, server_default=func.now(), nullable=False)
