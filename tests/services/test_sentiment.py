"""Tests for sentiment classifiers."""

import pytest

from omnibox.services import (
    FixedSentimentClassifier,
    KeywordSentimentClassifier,
    create_sentiment_classifier,
)


class TestFixedSentimentClassifier:
    """SUT: FixedSentimentClassifier"""

    def test_default_positive(self):
        assert FixedSentimentClassifier().classify("anything") == "positive"

    def test_rejects_unknown_label(self):
        with pytest.raises(ValueError):
            FixedSentimentClassifier("ecstatic")


class TestKeywordSentimentClassifier:
    """SUT: KeywordSentimentClassifier"""

    @pytest.mark.parametrize("body, expected", [
        ("Thanks, this is great!", "positive"),
        ("The package arrived broken, I want a refund", "negative"),
        ("What time do you open?", "neutral"),
        ("Thanks but it is broken", "neutral"),
    ])
    def test_classify(self, body, expected):
        assert KeywordSentimentClassifier().classify(body) == expected


class TestCreateSentimentClassifier:
    """SUT: create_sentiment_classifier"""

    def test_keyword(self):
        assert isinstance(create_sentiment_classifier("keyword"), KeywordSentimentClassifier)

    def test_fixed_label(self):
        classifier = create_sentiment_classifier("neutral")
        assert isinstance(classifier, FixedSentimentClassifier)
        assert classifier.classify("Thanks!") == "neutral"
