"""Reply pipeline - draft, dispatch and record one reply to a thread.

A call moves through ``START -> DRAFTED -> DISPATCHED -> PERSISTED -> DONE``.
Any failure ends the call: nothing is retried and nothing is written to the
message log unless the channel accepted the message. Calls for the same
thread are serialized from history fetch through persistence; suggested
tasks and the message.sent event follow once the thread is released.
"""

import asyncio
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from ..agents.base import AgentDraft, BaseAgent
from ..channels.registry import ChannelRegistry
from ..db.database_models import MessageDO, TaskDO
from ..errors import (
    AgentError,
    AgentTimeout,
    DeliveryFailure,
    OmniboxError,
    StoreFailure,
    ValidationError,
)
from ..utils.logger import get_app_logger
from .events import EventBus
from .locks import ThreadLocks
from .sentiment import FixedSentimentClassifier, SentimentClassifier
from .store import InboxStore
from .tasks import TaskLedger

class PipelineStage(str, Enum):
    START = "start"
    DRAFTED = "drafted"
    DISPATCHED = "dispatched"
    PERSISTED = "persisted"
    DONE = "done"

@dataclass
class ReplyResult:
    """Outcome of a successful reply."""

    message: MessageDO
    rationale: str = ""
    suggested_tasks: List[str] = field(default_factory=list)
    created_tasks: List[TaskDO] = field(default_factory=list)

class ReplyPipeline:
    """Produces, delivers and records replies."""

    def __init__(
        self,
        store: InboxStore,
        channels: ChannelRegistry,
        agent: BaseAgent,
        classifier: Optional[SentimentClassifier] = None,
        events: Optional[EventBus] = None,
        task_ledger: Optional[TaskLedger] = None,
        agent_timeout: float = 20.0,
        delivery_timeout: float = 10.0,
        auto_create_suggested_tasks: bool = False,
        locks: Optional[ThreadLocks] = None
    ):
        """
        Initialize the pipeline.

        Args:
            store: Message store
            channels: Channel registry used for dispatch
            agent: Drafting agent
            classifier: Sentiment classifier for delivered replies
            events: Event bus notified after a reply is recorded
            task_ledger: Ledger used when suggested tasks are auto-created
            agent_timeout: Seconds to wait for a draft
            delivery_timeout: Seconds to wait for channel delivery
            auto_create_suggested_tasks: Persist agent suggestions as open tasks
            locks: Per-thread locks, shared between pipelines on the same store
        """
        self.store = store
        self.channels = channels
        self.agent = agent
        self.classifier = classifier or FixedSentimentClassifier("positive")
        self.events = events
        self.task_ledger = task_ledger
        self.agent_timeout = agent_timeout
        self.delivery_timeout = delivery_timeout
        self.auto_create_suggested_tasks = auto_create_suggested_tasks
        self.locks = locks or ThreadLocks()
        self.logger = get_app_logger("pipeline")

    async def send_reply(
        self,
        channel: str,
        contact_id: str,
        thread_id: str,
        body: Optional[str] = None,
        use_agent: bool = False
    ) -> ReplyResult:
        """
        Reply to a thread.

        The agent drafts the reply when ``use_agent`` is set or no body is
        given; otherwise the body is sent as written and the agent is not
        called.

        Args:
            channel: Channel to reply on
            contact_id: Recipient contact
            thread_id: Thread being answered
            body: Human-written reply text
            use_agent: Let the agent draft the reply

        Returns:
            ReplyResult with the recorded message and the agent's rationale and suggestions

        Raises:
            ValidationError: No usable body, or the thread belongs elsewhere
            UnknownChannel: No adapter for the channel
            DeliveryFailure: The channel rejected the message (nothing recorded)
            AgentTimeout: Drafting took longer than agent_timeout
            AgentError: The agent failed
            StoreFailure: The reply was delivered but could not be recorded
        """
        if not thread_id:
            raise ValidationError("threadId is required")
        channel = (channel or "").strip().lower()

        async with self.locks.hold(thread_id):
            message, draft = await self._run(channel, contact_id, thread_id, body, use_agent)

        created_tasks = await self._create_suggested_tasks(draft.suggested_tasks, contact_id, message.id)

        if self.events:
            await self.events.publish("message.sent", {
                "messageId": message.id,
                "threadId": thread_id,
                "channel": channel,
                "contactId": contact_id,
                "drafted": bool(draft.reply),
                "suggestedTasks": list(draft.suggested_tasks),
            })

        self._log_stage(thread_id, PipelineStage.DONE)
        return ReplyResult(
            message=message,
            rationale=draft.rationale,
            suggested_tasks=list(draft.suggested_tasks),
            created_tasks=created_tasks
        )

    async def _run(
        self,
        channel: str,
        contact_id: str,
        thread_id: str,
        body: Optional[str],
        use_agent: bool
    ) -> Tuple[MessageDO, AgentDraft]:
        history = self.store.get_thread_history(thread_id)
        self.store.validate_thread(channel, contact_id, thread_id, history)

        text = body or ""
        draft = AgentDraft()
        if use_agent or not text.strip():
            draft = await self._draft(history, channel, thread_id)
            text = draft.reply or ""

        if not text.strip():
            raise ValidationError("message body required")
        self._log_stage(thread_id, PipelineStage.DRAFTED, "agent body" if draft.reply else "human body")

        await self._dispatch(channel, contact_id, text)
        self._log_stage(thread_id, PipelineStage.DISPATCHED, f"via {channel}")

        message = self._persist(channel, contact_id, thread_id, text)
        self._log_stage(thread_id, PipelineStage.PERSISTED, f"reply {message.id}")
        return message, draft

    def _log_stage(self, thread_id: str, stage: PipelineStage, detail: str = "") -> None:
        level = self.logger.info if stage is PipelineStage.PERSISTED else self.logger.debug
        level(f"Thread {thread_id}: {stage.value}" + (f" ({detail})" if detail else ""))

    async def _draft(self, history: List[MessageDO], channel: str, thread_id: str) -> AgentDraft:
        try:
            draft = await asyncio.wait_for(self.agent.draft(history, channel), timeout=self.agent_timeout)
        except asyncio.TimeoutError:
            self.logger.warning(f"Thread {thread_id}: agent timed out after {self.agent_timeout:g}s")
            raise AgentTimeout(self.agent_timeout)
        except OmniboxError:
            raise
        except Exception as e:
            self.logger.error(f"Thread {thread_id}: agent failed: {e}")
            raise AgentError(f"Agent failed to draft a reply: {e}") from e

        if draft is None:
            return AgentDraft()
        return draft

    async def _dispatch(self, channel: str, contact_id: str, text: str) -> None:
        adapter = self.channels.resolve(channel)
        try:
            await asyncio.wait_for(adapter.deliver(contact_id, text), timeout=self.delivery_timeout)
        except asyncio.TimeoutError:
            reason = f"Delivery via {channel} timed out after {self.delivery_timeout:g}s"
            self.logger.warning(reason)
            raise DeliveryFailure(reason, channel=channel)
        except DeliveryFailure as e:
            self.logger.warning(f"Channel send error on {channel}: {e.reason}")
            raise
        except Exception as e:
            self.logger.warning(f"Channel send error on {channel}: {e}")
            raise DeliveryFailure(str(e) or e.__class__.__name__, channel=channel) from e

    def _persist(self, channel: str, contact_id: str, thread_id: str, text: str) -> MessageDO:
        try:
            return self.store.append_message(
                channel=channel,
                contact_id=contact_id,
                thread_id=thread_id,
                direction="outbound",
                body=text,
                status="responded",
                sentiment=self.classifier.classify(text)
            )
        except StoreFailure:
            self.logger.error(
                f"Reply to {contact_id} was delivered on {channel} but could not be recorded in thread {thread_id}"
            )
            raise

    async def _create_suggested_tasks(self, suggestions: List[str], contact_id: str, message_id: str) -> List[TaskDO]:
        if not (self.auto_create_suggested_tasks and self.task_ledger and suggestions):
            return []

        created = []
        for description in suggestions:
            try:
                created.append(await self.task_ledger.create_task(
                    description,
                    contact_id=contact_id,
                    message_id=message_id
                ))
            except OmniboxError as e:
                # Suggestions are advisory once the reply is recorded
                self.logger.error(f"Could not create suggested task '{description}': {e}")
        return created
