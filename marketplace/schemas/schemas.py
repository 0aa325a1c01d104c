"""Pydantic schemas for API request/response serialization."""

from pydantic import BaseModel, Field, AliasChoices
from typing import Optional, List, Dict, Union
from datetime import datetime

MetadataValue = Union[str, int, float, bool, None]


# ---- Deletion remarks ----
class DeletionRemarkCreate(BaseModel):
    entity_type: str
    entity_id: Optional[Union[str, int]] = None
    project_id: Optional[Union[str, int]] = None
    reason: Optional[str] = None
    metadata: Dict[str, MetadataValue] = Field(default_factory=dict)

class DeletionRemarkOut(BaseModel):
    id: int
    entity_type: str
    entity_id: str
    project_id: Optional[str] = None
    reason: str
    deleted_by: str
    deleted_by_role: Optional[str] = None
    metadata: Dict[str, MetadataValue] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("remark_metadata", "metadata"),
    )
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class DeletionRemarkListResponse(BaseModel):
    remarks: List[DeletionRemarkOut]
    total: int
    page: int
    page_size: int


# ---- Deletion requests ----
class DeleteWithReasonRequest(BaseModel):
    reason: Optional[str] = None


# ---- Milestone prompt ----
class MilestoneSummary(BaseModel):
    title: str
    amount_display: str
    due_display: str

class DeleteMilestonePromptOut(BaseModel):
    title: str
    description: str
    confirm_label: str
    cancel_label: str
    milestone: Optional[MilestoneSummary] = None


# ---- Catalog ----
class OptionOut(BaseModel):
    value: str
    label: str
    description: Optional[str] = None

class CatalogOut(BaseModel):
    categories: List[str]
    project_types: List[OptionOut]
    priorities: List[OptionOut]
    skills: List[str]


# ---- Generic ----
class MessageResponse(BaseModel):
    message: str
