"""Public catalog of marketplace reference data."""

from fastapi import APIRouter

from marketplace.core.constants import (
    CATEGORIES, PROJECT_TYPES, PROJECT_PRIORITIES, COMMON_SKILLS,
)
from marketplace.schemas.schemas import CatalogOut, OptionOut

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("/", response_model=CatalogOut)
async def get_catalog():
    """Categories, project types, priorities and skills for project forms."""
    return CatalogOut(
        categories=CATEGORIES,
        project_types=[OptionOut(**t) for t in PROJECT_TYPES],
        priorities=[OptionOut(**p) for p in PROJECT_PRIORITIES],
        skills=COMMON_SKILLS,
    )
