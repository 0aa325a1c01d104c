"""Bid model."""

import enum

from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey, Enum, func
from sqlalchemy.orm import relationship
from marketplace.db.base import Base


class BidStatusEnum(str, enum.Enum):
    pending = "pending"
    accepted = "accepted"
    rejected = "rejected"
    withdrawn = "withdrawn"


class Bid(Base):
    """A freelancer's offer on a project."""
    __tablename__ = "bids"

    id = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(Integer, ForeignKey("projects.id", ondelete="CASCADE"), nullable=False, index=True)
    bidder_id = Column(String(100), nullable=False, index=True)
    amount = Column(Float, nullable=False)
    status = Column(Enum(BidStatusEnum), default=BidStatusEnum.pending, nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)

    project = relationship("Project", back_populates="bids")

    def can_withdraw(self) -> bool:
        return self.status == BidStatusEnum.pending
