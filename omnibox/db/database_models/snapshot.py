"""Dashboard snapshot - the read-only view of every store collection."""

from dataclasses import dataclass, field
from typing import List

from .call import CallLogDO
from .contact import ContactDO
from .deal import DealDO
from .message import MessageDO
from .task import TaskDO


@dataclass(frozen=True)
class DashboardSnapshot:
    """All contacts, messages, calls, deals and tasks at one point in time."""

    contacts: List[ContactDO] = field(default_factory=list)
    messages: List[MessageDO] = field(default_factory=list)
    calls: List[CallLogDO] = field(default_factory=list)
    deals: List[DealDO] = field(default_factory=list)
    tasks: List[TaskDO] = field(default_factory=list)
