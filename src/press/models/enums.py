"""Shared enums for models."""

from enum import Enum


class ProjectStatus(str, Enum):
    """Production status of an ebook project."""

    IN_PROGRESS = "in_progress"
    STALLED = "stalled"
    COMPLETED = "completed"
    ABANDONED = "abandoned"

    @classmethod
    def active(cls) -> tuple["ProjectStatus", ...]:
        """Statuses that count as an ebook's active project."""
        return (cls.IN_PROGRESS, cls.STALLED)

    @property
    def is_active(self) -> bool:
        return self in ProjectStatus.active()
