"""Card formatting helpers for list views."""

from datetime import datetime

from src.app.models.base import utc_now
from src.app.models.enums import ProjectStatus

SUMMARY_LENGTH = 150
MAX_CARD_SKILLS = 6
MAX_VISIBLE_TAGS = 3

# Drafts are not open to students, so they show as archived
_DISPLAY_STATUS = {
    ProjectStatus.DRAFT.value: "ARCHIVED",
    ProjectStatus.PUBLISHED.value: "ACTIVE",
    ProjectStatus.IN_PROGRESS.value: "FILLED",
    ProjectStatus.COMPLETED.value: "ARCHIVED",
    ProjectStatus.CANCELLED.value: "ARCHIVED",
}


def summarize(text: str | None, length: int = SUMMARY_LENGTH, ellipsis: bool = False) -> str:
    """First ``length`` characters of ``text``.

    With ``ellipsis``, "..." is appended when the text was cut.
    """
    if not text:
        return ""
    if ellipsis and len(text) > length:
        return text[:length] + "..."
    return text[:length]


def compact_tags(tags: list[str] | None) -> list[str]:
    """First three tags plus a "+N" marker for the rest."""
    if not tags:
        return []
    if len(tags) <= MAX_VISIBLE_TAGS:
        return list(tags)
    return [*tags[:MAX_VISIBLE_TAGS], f"+{len(tags) - MAX_VISIBLE_TAGS}"]


def time_remaining(deadline: datetime | None, now: datetime | None = None) -> str | None:
    """ISO-8601 duration until ``deadline``: months (30-day) if any, else days.

    None when there is no deadline or less than a whole day is left.
    """
    if deadline is None:
        return None
    now = now or utc_now()
    if deadline <= now:
        return None
    days = (deadline - now).days
    months = days // 30
    if months > 0:
        return f"P{months}M"
    if days > 0:
        return f"P{days}D"
    return None


def display_status(status: str) -> str:
    return _DISPLAY_STATUS.get(status, "ACTIVE")
