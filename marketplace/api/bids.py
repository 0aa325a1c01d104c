"""Bids API router."""

from typing import Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from marketplace.db.session import get_db
from marketplace.schemas.schemas import DeleteWithReasonRequest, MessageResponse
from marketplace.services.deletion_service import deletion_service
from marketplace.core.security import Actor, get_current_user

router = APIRouter(prefix="/bids", tags=["bids"])


@router.delete("/{bid_id}", response_model=MessageResponse)
async def delete_bid(
    bid_id: int,
    body: Optional[DeleteWithReasonRequest] = None,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_current_user),
):
    """Withdraw (owner) or delete (admin / assigned agent, reason required) a bid."""
    message = deletion_service.delete_bid(db, bid_id, actor, body.reason if body else None)
    return MessageResponse(message=message)
