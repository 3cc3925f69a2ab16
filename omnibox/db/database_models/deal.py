"""Deal database model."""

from dataclasses import dataclass
from typing import Optional

DEAL_STAGES = ("lead", "qualified", "demo", "proposal", "negotiation", "won")


@dataclass(frozen=True)
class DealDO:
    """Deal data object - maps to deals table."""

    id: str
    contact_id: str
    title: str
    value: float
    probability: float
    stage: str
    next_step: Optional[str] = None
