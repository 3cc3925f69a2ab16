"""Sentiment classification for persisted replies."""

import re
from abc import ABC, abstractmethod

from ..db.database_models import SENTIMENTS


class SentimentClassifier(ABC):
    """Assigns exactly one of positive, neutral or negative to a message body."""

    @abstractmethod
    def classify(self, body: str) -> str:
        """
        Classify a message body.

        Args:
            body: Message text

        Returns:
            One of "positive", "neutral", "negative"
        """
        pass


class FixedSentimentClassifier(SentimentClassifier):
    """Labels every message with the same sentiment."""

    def __init__(self, sentiment: str = "positive"):
        if sentiment not in SENTIMENTS:
            raise ValueError(f"Unknown sentiment: {sentiment}")
        self.sentiment = sentiment

    def classify(self, body: str) -> str:
        return self.sentiment


class KeywordSentimentClassifier(SentimentClassifier):
    """Small lexicon classifier; ties and no hits are neutral."""

    POSITIVE_WORDS = frozenset({
        "thanks", "thank", "great", "awesome", "love", "perfect", "happy",
        "glad", "excellent", "amazing", "appreciate", "wonderful",
    })
    NEGATIVE_WORDS = frozenset({
        "refund", "broken", "angry", "terrible", "awful", "cancel", "disappointed",
        "problem", "issue", "worst", "bad", "late", "complaint",
    })

    _WORD_RE = re.compile(r"[a-z']+")

    def classify(self, body: str) -> str:
        words = self._WORD_RE.findall(body.lower())
        positive = sum(1 for word in words if word in self.POSITIVE_WORDS)
        negative = sum(1 for word in words if word in self.NEGATIVE_WORDS)
        if positive > negative:
            return "positive"
        if negative > positive:
            return "negative"
        return "neutral"


def create_sentiment_classifier(name: str) -> SentimentClassifier:
    """
    Build the classifier named in settings.

    Args:
        name: "keyword", or a sentiment label for a fixed classifier

    Returns:
        SentimentClassifier instance
    """
    if name == "keyword":
        return KeywordSentimentClassifier()
    return FixedSentimentClassifier(name)
