"""Per-item outcomes and run summaries."""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class ItemStatus(Enum):
    """What happened to a single profile or repository."""
    CREATED = "created"      # profile written
    APPENDED = "appended"    # keyword line added
    PRESENT = "present"      # keyword line already there
    FAILED = "failed"


@dataclass
class ItemResult:
    """Outcome of one independent unit of work."""
    name: str
    status: ItemStatus
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status != ItemStatus.FAILED


@dataclass
class RunReport:
    """Aggregate of every item attempted during a run.

    Failed items do not stop the run; callers inspect ``ok`` once
    everything has been attempted.
    """
    items: List[ItemResult] = field(default_factory=list)

    def add(self, name: str, status: ItemStatus, error: Optional[str] = None) -> ItemResult:
        result = ItemResult(name=name, status=status, error=error)
        self.items.append(result)
        return result

    @property
    def ok(self) -> bool:
        return all(item.ok for item in self.items)

    @property
    def failures(self) -> List[ItemResult]:
        return [item for item in self.items if not item.ok]

    def count(self, status: ItemStatus) -> int:
        return sum(1 for item in self.items if item.status == status)
