"""Models package — import all models so metadata.create_all sees them."""

from marketplace.models.project import Project, Milestone
from marketplace.models.bid import Bid, BidStatusEnum
from marketplace.models.deletion_remark import DeletionRemark

__all__ = ["Project", "Milestone", "Bid", "BidStatusEnum", "DeletionRemark"]
