"""Drafting agent interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..db.database_models import MessageDO


@dataclass
class AgentDraft:
    """A proposed reply with the agent's reasoning and follow-up ideas."""

    reply: str = ""
    rationale: str = ""
    suggested_tasks: List[str] = field(default_factory=list)


class BaseAgent(ABC):
    """
    Abstract base class for reply-drafting agents.

    The agent is opaque to the inbox: it receives the raw thread history and
    the channel and returns one AgentDraft. Timeouts are enforced by the
    caller.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}

    @property
    def name(self) -> str:
        return self.config.get("name", "Nova")

    @abstractmethod
    async def draft(self, history: List[MessageDO], channel: str) -> AgentDraft:
        """
        Draft a reply for a conversation.

        Args:
            history: Messages of the thread
            channel: Channel the reply will be sent on

        Returns:
            AgentDraft

        Raises:
            AgentError: If the agent cannot produce a draft
        """
        pass
