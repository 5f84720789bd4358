"""
Tests for the confidence estimator.

Tests cover:
- Label thresholds (strictly greater / less than one)
- Confidence bounds and the zero-word guard
- Bucket magnitudes
"""

import math

import pytest

from voice_sentiment.confidence import ConfidenceConfig, ConfidenceEstimator
from voice_sentiment.models import SentimentLabel


@pytest.fixture
def estimator():
    return ConfidenceEstimator()


# =============================================================
# TEST: Labels
# =============================================================

class TestLabelFor:
    """Test polarity thresholds."""

    @pytest.mark.parametrize("score,expected", [
        (1.0, SentimentLabel.NEUTRAL),
        (1.01, SentimentLabel.POSITIVE),
        (4.6, SentimentLabel.POSITIVE),
        (0.0, SentimentLabel.NEUTRAL),
        (-1.0, SentimentLabel.NEUTRAL),
        (-1.5, SentimentLabel.NEGATIVE),
    ])
    def test_thresholds(self, estimator, score, expected):
        assert estimator.label_for(score) == expected

    def test_nan_is_neutral(self, estimator):
        assert estimator.label_for(math.nan) == SentimentLabel.NEUTRAL


# =============================================================
# TEST: Confidence
# =============================================================

class TestConfidenceFor:
    """Test the confidence mapping."""

    def test_neutral_is_fifty(self, estimator):
        assert estimator.confidence_for(SentimentLabel.NEUTRAL, 0.5, 10) == 50.0

    def test_density_formula(self, estimator):
        confidence = estimator.confidence_for(SentimentLabel.POSITIVE, 4.6, 6)
        assert confidence == pytest.approx(60 + 4.6 / 6 * 40)

    def test_negative_uses_magnitude(self, estimator):
        confidence = estimator.confidence_for(SentimentLabel.NEGATIVE, -2.0, 8)
        assert confidence == pytest.approx(70.0)

    def test_capped_at_hundred(self, estimator):
        assert estimator.confidence_for(SentimentLabel.POSITIVE, 10.0, 1) == 100.0

    def test_zero_words_guard(self, estimator):
        # Treated as one word, then capped
        assert estimator.confidence_for(SentimentLabel.NEGATIVE, -1.2, 0) == 100.0

    def test_infinite_score_is_capped(self, estimator):
        assert estimator.confidence_for(SentimentLabel.POSITIVE, math.inf, 3) == 100.0

    def test_always_within_bounds(self, estimator):
        for score in [x / 4 for x in range(-40, 41)]:
            for words in range(0, 12):
                label = estimator.label_for(score)
                confidence = estimator.confidence_for(label, score, words)
                assert 0.0 <= confidence <= 100.0
                if label != SentimentLabel.NEUTRAL:
                    assert confidence >= 60.0

    def test_custom_config(self):
        estimator = ConfidenceEstimator(ConfidenceConfig(baseline_confidence=55.0, density_scale=10.0))
        confidence = estimator.confidence_for(SentimentLabel.POSITIVE, 2.0, 2)
        assert confidence == pytest.approx(65.0)


# =============================================================
# TEST: Buckets
# =============================================================

class TestBuckets:
    """Test chart bucket magnitudes."""

    def test_positive_score(self):
        buckets = ConfidenceEstimator.buckets_for(2.5, 1)
        assert buckets.positive == 2.5
        assert buckets.negative == 0.0
        assert buckets.neutral == 0.0

    def test_negative_score_leaves_neutral_room(self):
        buckets = ConfidenceEstimator.buckets_for(-1.0, 3)
        assert buckets.positive == 0.0
        assert buckets.negative == 1.0
        assert buckets.neutral == 2.0

    def test_zero_score(self):
        buckets = ConfidenceEstimator.buckets_for(0.0, 2)
        assert (buckets.positive, buckets.negative, buckets.neutral) == (0.0, 0.0, 2.0)

    def test_never_both_polarities(self):
        for score in [x / 2 for x in range(-20, 21)]:
            buckets = ConfidenceEstimator.buckets_for(score, 3)
            assert not (buckets.positive > 0 and buckets.negative > 0)
            assert buckets.neutral >= 0


# =============================================================
# TEST: Classify
# =============================================================

class TestClassify:
    """Test full result construction."""

    def test_localized_label(self, estimator, registry):
        hindi = registry.resolve("hi")
        result = estimator.classify(3.0, 2, 1, hindi, text="प्यार")

        assert result.polarity == SentimentLabel.POSITIVE
        assert result.label == "सकारात्मक"
        assert result.language_id == "hi"
        assert result.text == "प्यार"
        assert result.confidence == 100.0

    def test_result_fields(self, estimator, english):
        result = estimator.classify(-1.0, 3, 1, english)

        assert result.polarity == SentimentLabel.NEUTRAL
        assert result.label == "Neutral"
        assert result.confidence == 50.0
        assert result.confidence_text == "50.0"
        assert result.bucket_negative == 1.0
        assert result.bucket_neutral == 0.0
        assert result.to_dict()["polarity"] == "neutral"
