"""
Voice Sentiment Analyzer - Tokenize, score, classify.

The analyzer is the single entry point of the scoring core:

    raw text + language id
        -> segment / tokenize
        -> score (profile from registry)
        -> classify (label, confidence, buckets)
        -> AnalysisResult | EmptyInput

Each call is pure given (text, language id) and the immutable
registry; nothing is shared between calls.
"""

import logging
from typing import Optional, Union

from .confidence import ConfidenceEstimator
from .models import AnalysisResult, EmptyInput
from .registry import ProfileRegistry
from .scorer import SentimentScorer
from .tokenizer import segment


logger = logging.getLogger(__name__)


AnalysisOutcome = Union[AnalysisResult, EmptyInput]


class SentimentAnalyzer:
    """
    Lexicon-based multi-language sentiment analyzer.

    Usage:
        analyzer = SentimentAnalyzer(ProfileRegistry.with_builtin_profiles())
        outcome = analyzer.analyze("I love this, it is very good", "en")
        if isinstance(outcome, EmptyInput):
            print(outcome.message)
        else:
            print(outcome.label, outcome.confidence_text)
    """

    def __init__(
        self,
        registry: ProfileRegistry,
        scorer: Optional[SentimentScorer] = None,
        estimator: Optional[ConfidenceEstimator] = None,
    ) -> None:
        self._registry = registry
        self._scorer = scorer or SentimentScorer()
        self._estimator = estimator or ConfidenceEstimator()

    @property
    def registry(self) -> ProfileRegistry:
        return self._registry

    def analyze(
        self,
        raw_text: Optional[str],
        language_id: Optional[str] = None,
    ) -> AnalysisOutcome:
        """
        Analyze free text in the given language.

        Args:
            raw_text: Free-form text (e.g. a transcript)
            language_id: Registry key; unknown ids use the default profile

        Returns:
            AnalysisResult, or EmptyInput when the text is blank
        """
        profile = self._registry.resolve(language_id)
        text = (raw_text or "").strip()

        if not text:
            logger.debug(f"Empty input for language {profile.language_id}")
            return EmptyInput(
                language_id=profile.language_id,
                message=profile.messages.empty_input,
            )

        sentences = segment(text)
        totals = self._scorer.score_sentences(sentences, profile)

        result = self._estimator.classify(
            totals.score,
            totals.word_count,
            len(sentences),
            profile,
            text=text,
        )

        logger.debug(
            f"Analyzed {len(sentences)} sentences / {totals.word_count} words "
            f"[{profile.language_id}]: score={totals.score:.2f} "
            f"label={result.polarity.value} confidence={result.confidence_text}"
        )
        return result
