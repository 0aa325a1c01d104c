"""Deletion remark service — append-only record of why entities were removed."""

import logging
from typing import Optional, Any, Dict

from sqlalchemy.orm import Session

from marketplace.core.constants import REMARK_ENTITY_TYPES, REMARK_REASON_MAX_LENGTH
from marketplace.core.exceptions import ValidationError, ResourceNotFoundError
from marketplace.models.deletion_remark import DeletionRemark

logger = logging.getLogger("marketplace")

_PRIMITIVES = (str, int, float, bool, type(None))


def _required_ref(value: Any, field: str) -> str:
    text = "" if value is None else str(value).strip()
    if not text:
        raise ValidationError(f"{field} is required", field=field)
    return text


def _optional_ref(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def clean_reason(reason: Any) -> str:
    """Trim a deletion reason and enforce the 1..500 character bound."""
    if not isinstance(reason, str) or not reason.strip():
        raise ValidationError("Deletion reason is required", field="reason")
    reason = reason.strip()
    if len(reason) > REMARK_REASON_MAX_LENGTH:
        raise ValidationError(
            f"Deletion reason must be at most {REMARK_REASON_MAX_LENGTH} characters",
            field="reason",
        )
    return reason


def _clean_metadata(metadata: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    if metadata is None:
        return {}
    if not isinstance(metadata, dict):
        raise ValidationError("metadata must be a key/value map", field="metadata")
    for key, value in metadata.items():
        if not isinstance(key, str):
            raise ValidationError("metadata keys must be strings", field="metadata")
        if not isinstance(value, _PRIMITIVES):
            raise ValidationError(
                f"metadata value for '{key}' must be a string, number, boolean or null",
                field="metadata",
            )
    return dict(metadata)


class DeletionRemarkService:
    """Records and reads deletion remarks. There is no update or delete."""

    @staticmethod
    def create(
        db: Session,
        entity_type: str,
        entity_id: Any,
        reason: str,
        deleted_by: Any,
        project_id: Optional[Any] = None,
        deleted_by_role: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
        commit: bool = True,
    ) -> DeletionRemark:
        """Validate and persist a deletion remark.

        Raises:
            ValidationError: unknown entity type, empty or over-long reason,
                missing entity id or actor, or non-primitive metadata values.

        Commits immediately unless ``commit`` is False, in which case the
        caller owns the transaction the remark is flushed into.
        """
        if entity_type not in REMARK_ENTITY_TYPES:
            raise ValidationError(
                f"entity_type must be one of: {', '.join(REMARK_ENTITY_TYPES)}",
                field="entity_type",
            )

        remark = DeletionRemark(
            entity_type=entity_type,
            entity_id=_required_ref(entity_id, "entity_id"),
            project_id=_optional_ref(project_id),
            reason=clean_reason(reason),
            deleted_by=_required_ref(deleted_by, "deleted_by"),
            deleted_by_role=_optional_ref(deleted_by_role),
            remark_metadata=_clean_metadata(metadata),
        )
        db.add(remark)
        if commit:
            db.commit()
            db.refresh(remark)
        else:
            db.flush()
        logger.info(
            "Deletion remark %s recorded: %s %s by %s",
            remark.id, remark.entity_type, remark.entity_id, remark.deleted_by,
        )
        return remark

    @staticmethod
    def get(db: Session, remark_id: int) -> DeletionRemark:
        """Get a remark by id."""
        remark = db.query(DeletionRemark).filter(DeletionRemark.id == remark_id).first()
        if not remark:
            raise ResourceNotFoundError(f"Deletion remark {remark_id} not found")
        return remark

    @staticmethod
    def query(
        db: Session,
        entity_type: Optional[str] = None,
        entity_id: Optional[str] = None,
        project_id: Optional[str] = None,
        deleted_by: Optional[str] = None,
        page: int = 1,
        page_size: int = 50,
    ):
        """Query remarks with filters and pagination, newest first."""
        query = db.query(DeletionRemark)

        if entity_type:
            query = query.filter(DeletionRemark.entity_type == entity_type)
        if entity_id:
            query = query.filter(DeletionRemark.entity_id == str(entity_id))
        if project_id:
            query = query.filter(DeletionRemark.project_id == str(project_id))
        if deleted_by:
            query = query.filter(DeletionRemark.deleted_by == str(deleted_by))

        total = query.count()
        remarks = (
            query.order_by(DeletionRemark.created_at.desc(), DeletionRemark.id.desc())
            .offset((page - 1) * page_size)
            .limit(page_size)
            .all()
        )

        return {
            "remarks": remarks,
            "total": total,
            "page": page,
            "page_size": page_size,
        }

    @staticmethod
    def list_for_entity(db: Session, entity_type: str, entity_id: Any):
        """All remarks for one entity, oldest first."""
        return (
            db.query(DeletionRemark)
            .filter(
                DeletionRemark.entity_type == entity_type,
                DeletionRemark.entity_id == str(entity_id),
            )
            .order_by(DeletionRemark.created_at.asc(), DeletionRemark.id.asc())
            .all()
        )


deletion_remark_service = DeletionRemarkService()
