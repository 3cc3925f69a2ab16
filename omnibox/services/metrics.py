"""Metrics aggregator - point-in-time statistics over a dashboard snapshot."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Dict, List, Optional

from ..db.database_models import (
    DashboardSnapshot,
    MessageDO,
    TaskDO,
    SENTIMENTS,
    TERMINAL_STATUSES,
)
from ..utils.timestamps import parse_timestamp, utc_now
from .threads import build_threads

DEFAULT_DUE_SOON_WINDOW = timedelta(hours=24)


@dataclass
class MetricsResult:
    """Operational statistics derived from one snapshot."""

    open_conversations: int = 0
    avg_first_response_minutes: float = 0.0
    sentiment_breakdown: Dict[str, int] = field(default_factory=dict)
    tasks_due_soon: List[TaskDO] = field(default_factory=list)


def first_response_minutes(messages: List[MessageDO]) -> Optional[float]:
    """
    Minutes between a thread's first inbound message and the first outbound after it.

    Args:
        messages: Messages of a single thread, in any order

    Returns:
        Elapsed minutes, or None if the thread has no answered inbound message
    """
    ordered = sorted(messages, key=lambda m: m.created_at)

    first_inbound = None
    for message in ordered:
        if first_inbound is None:
            if message.direction == "inbound":
                first_inbound = message
        elif message.direction == "outbound":
            delta = parse_timestamp(message.created_at) - parse_timestamp(first_inbound.created_at)
            return delta.total_seconds() / 60

    return None


def sentiment_breakdown(messages: List[MessageDO]) -> Dict[str, int]:
    """
    Count messages per sentiment category across the whole log.

    Unrecognized sentiments fall into "neutral" so the buckets always sum
    to the number of messages.
    """
    breakdown = {sentiment: 0 for sentiment in SENTIMENTS}
    for message in messages:
        sentiment = message.sentiment if message.sentiment in breakdown else "neutral"
        breakdown[sentiment] += 1
    return breakdown


def tasks_due_soon(
    tasks: List[TaskDO],
    now: datetime,
    window: timedelta = DEFAULT_DUE_SOON_WINDOW
) -> List[TaskDO]:
    """
    Open tasks due between ``now`` and ``now + window``, soonest first.

    Args:
        tasks: All tasks
        now: Evaluation time
        window: Forward window

    Returns:
        Matching tasks ordered by due date ascending
    """
    horizon = now + window
    due = []
    for task in tasks:
        if task.status != "open" or not task.due_at:
            continue
        due_at = parse_timestamp(task.due_at)
        if now <= due_at <= horizon:
            due.append((due_at, task))

    due.sort(key=lambda pair: pair[0])
    return [task for _, task in due]


def compute_metrics(
    snapshot: DashboardSnapshot,
    now: Optional[datetime] = None,
    due_soon_window: timedelta = DEFAULT_DUE_SOON_WINDOW
) -> MetricsResult:
    """
    Compute dashboard metrics.

    The result depends only on the snapshot and ``now``; calling it twice
    with the same inputs gives the same output.

    Args:
        snapshot: Dashboard snapshot
        now: Evaluation time, defaults to the current UTC time
        due_soon_window: Forward window for tasks due soon

    Returns:
        MetricsResult
    """
    if now is None:
        now = utc_now()

    threads = build_threads(snapshot.messages, snapshot.contacts)

    open_conversations = sum(1 for thread in threads if thread.status not in TERMINAL_STATUSES)

    response_times = []
    for thread in threads:
        minutes = first_response_minutes(thread.messages)
        if minutes is not None:
            response_times.append(minutes)

    avg_first_response = 0.0
    if response_times:
        avg_first_response = round(sum(response_times) / len(response_times), 1)

    return MetricsResult(
        open_conversations=open_conversations,
        avg_first_response_minutes=avg_first_response,
        sentiment_breakdown=sentiment_breakdown(snapshot.messages),
        tasks_due_soon=tasks_due_soon(snapshot.tasks, now, due_soon_window)
    )
