"""
Voice Sentiment - Confidence Estimator.

============================================================
RESPONSIBILITY
============================================================
Maps an aggregate score and word count to a polarity label,
a bounded confidence percentage and visualization buckets.

============================================================
THRESHOLD RATIONALE
============================================================
Label:
- POSITIVE when total score > +1
- NEGATIVE when total score < -1
- NEUTRAL otherwise; a lone weak hit (+1 / -1) is noise

Confidence (percent):
- Neutral: fixed 50
- Otherwise: 60 baseline + score density * 40, capped at 100
  where density = |score| / max(1, words)

Buckets (slice magnitudes, not probabilities):
- positive = max(0, score)
- negative = max(0, -score)
- neutral  = max(0, sentences - (positive + negative))

============================================================
"""

import math
from dataclasses import dataclass
from typing import Any, Dict

from .models import (
    AnalysisResult,
    LanguageProfile,
    SentimentBuckets,
    SentimentLabel,
)


# ============================================================
# CONFIGURATION
# ============================================================


@dataclass(frozen=True)
class ConfidenceConfig:
    """Thresholds and constants of the confidence mapping."""

    positive_threshold: float = 1.0   # POSITIVE if score > 1
    negative_threshold: float = -1.0  # NEGATIVE if score < -1

    baseline_confidence: float = 60.0  # Once a threshold is crossed
    density_scale: float = 40.0        # Added per unit of score density
    neutral_confidence: float = 50.0
    max_confidence: float = 100.0
    min_confidence: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "positive_threshold": self.positive_threshold,
            "negative_threshold": self.negative_threshold,
            "baseline_confidence": self.baseline_confidence,
            "density_scale": self.density_scale,
            "neutral_confidence": self.neutral_confidence,
            "max_confidence": self.max_confidence,
            "min_confidence": self.min_confidence,
        }


# ============================================================
# ESTIMATOR
# ============================================================


class ConfidenceEstimator:
    """
    Turns aggregate scores into AnalysisResult records.

    Usage:
        estimator = ConfidenceEstimator()
        result = estimator.classify(4.6, 6, 1, profile)
        result.polarity    # SentimentLabel.POSITIVE
        result.confidence  # 90.67
    """

    def __init__(self, config: ConfidenceConfig = ConfidenceConfig()) -> None:
        self._config = config

    @property
    def config(self) -> ConfidenceConfig:
        return self._config

    def label_for(self, total_score: float) -> SentimentLabel:
        """Polarity for an aggregate score."""
        if total_score > self._config.positive_threshold:
            return SentimentLabel.POSITIVE
        if total_score < self._config.negative_threshold:
            return SentimentLabel.NEGATIVE
        return SentimentLabel.NEUTRAL

    def confidence_for(
        self,
        label: SentimentLabel,
        total_score: float,
        total_words: int,
    ) -> float:
        """Confidence percentage, always within [min, max]."""
        cfg = self._config
        if label == SentimentLabel.NEUTRAL:
            confidence = cfg.neutral_confidence
        else:
            density = abs(total_score) / max(1, total_words)
            confidence = min(cfg.max_confidence, cfg.baseline_confidence + density * cfg.density_scale)

        if math.isnan(confidence):
            return cfg.neutral_confidence
        return max(cfg.min_confidence, min(cfg.max_confidence, confidence))

    @staticmethod
    def buckets_for(total_score: float, sentence_count: int) -> SentimentBuckets:
        """Non-negative slice magnitudes for chart renderers."""
        positive = max(0.0, total_score)
        negative = max(0.0, -total_score)
        neutral = max(0.0, sentence_count - (positive + negative))
        return SentimentBuckets(positive=positive, negative=negative, neutral=neutral)

    def classify(
        self,
        total_score: float,
        total_words: int,
        sentence_count: int,
        profile: LanguageProfile,
        *,
        text: str = "",
    ) -> AnalysisResult:
        """
        Build the analysis result for aggregate values.

        Args:
            total_score: Sum of sentence scores
            total_words: Counted words across sentences
            sentence_count: Number of sentences
            profile: Profile supplying display labels
            text: Original text, carried for display consumers

        Returns:
            AnalysisResult
        """
        label = self.label_for(total_score)
        return AnalysisResult(
            polarity=label,
            label=profile.display_label(label),
            confidence=self.confidence_for(label, total_score, total_words),
            total_score=total_score,
            total_words=total_words,
            sentence_count=sentence_count,
            buckets=self.buckets_for(total_score, sentence_count),
            language_id=profile.language_id,
            text=text,
        )
