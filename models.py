"""Data models for Atlassian sync previews."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class MilestoneStatus:
    """Completion of a milestone's success criteria checklist."""

    completed: int
    total: int
    percentage: int

    @classmethod
    def from_counts(cls, completed: int, total: int) -> "MilestoneStatus":
        """Build a status, rounding the percentage half up (0 when total is 0)."""
        if total <= 0:
            return cls(completed=completed, total=total, percentage=0)
        percentage = math.floor(completed / total * 100 + 0.5)
        return cls(completed=completed, total=total, percentage=percentage)

    @property
    def progress(self) -> str:
        """Progress as shown in payloads: '2/3 (67%)'."""
        return f"{self.completed}/{self.total} ({self.percentage}%)"


@dataclass(frozen=True)
class MilestoneMeta:
    """Metadata read from a milestone meta document."""

    key: str  # M07
    title: str
    description: str
    status: MilestoneStatus
