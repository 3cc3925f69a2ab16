"""Call log database model."""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class CallLogDO:
    """Call log data object - maps to calls table."""

    id: str
    contact_id: str
    recorded_at: str
    duration_seconds: int
    summary: str
    follow_ups: List[str] = field(default_factory=list)
