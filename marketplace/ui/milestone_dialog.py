"""Confirmation prompt shown before a milestone is deleted."""

from datetime import date, datetime
from typing import Any, Optional, Union

from marketplace.schemas.schemas import DeleteMilestonePromptOut, MilestoneSummary

TITLE = "Delete Milestone"
DESCRIPTION = "Are you sure you want to delete this milestone? This action cannot be undone."


def format_amount(amount: Optional[Union[int, float]]) -> str:
    """Thousands-separated amount with up to 3 decimals; "0" when missing or zero."""
    if not amount:
        return "0"
    return f"{amount:,.3f}".rstrip("0").rstrip(".")


def format_due_date(due: Union[date, datetime, str, None]) -> str:
    if due is None:
        return "-"
    if isinstance(due, str):
        try:
            due = datetime.fromisoformat(due)
        except ValueError:
            return due
    if isinstance(due, datetime):
        due = due.date()
    return due.strftime("%d/%m/%Y")


def _field(milestone: Any, name: str) -> Any:
    if isinstance(milestone, dict):
        return milestone.get(name)
    return getattr(milestone, name, None)


def build_delete_milestone_prompt(milestone: Any = None) -> DeleteMilestonePromptOut:
    """Prompt payload for a milestone (ORM object or dict), or a bare prompt."""
    summary = None
    if milestone is not None:
        summary = MilestoneSummary(
            title=_field(milestone, "title") or "",
            amount_display=format_amount(_field(milestone, "amount")),
            due_display=format_due_date(_field(milestone, "due_date")),
        )
    return DeleteMilestonePromptOut(
        title=TITLE,
        description=DESCRIPTION,
        confirm_label="Delete Milestone",
        cancel_label="Cancel",
        milestone=summary,
    )
