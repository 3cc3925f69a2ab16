"""Contact database model."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class ContactDO:
    """Contact data object - maps to contacts table."""

    id: str
    name: str
    handle: str
    channel: str
    email: Optional[str] = None
    phone: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    created_at: Optional[str] = None
