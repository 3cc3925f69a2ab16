"""Services package."""

from .store import InboxStore
from .threads import ConversationThread, build_threads
from .metrics import MetricsResult, compute_metrics
from .events import Event, EventBus
from .tasks import TaskLedger
from .locks import ThreadLocks
from .sentiment import (
    SentimentClassifier,
    FixedSentimentClassifier,
    KeywordSentimentClassifier,
    create_sentiment_classifier,
)
from .reply_pipeline import ReplyPipeline, ReplyResult, PipelineStage

__all__ = [
    "InboxStore",
    "ConversationThread",
    "build_threads",
    "MetricsResult",
    "compute_metrics",
    "Event",
    "EventBus",
    "TaskLedger",
    "ThreadLocks",
    "SentimentClassifier",
    "FixedSentimentClassifier",
    "KeywordSentimentClassifier",
    "create_sentiment_classifier",
    "ReplyPipeline",
    "ReplyResult",
    "PipelineStage",
]
