"""
Voice Sentiment Data Models - Profiles, scoring state and results.

One LanguageProfile record type describes every supported language.
Profiles are immutable once built; results are produced once per
analysis call and handed to display, chart and speech consumers.
"""

import logging
import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .exceptions import ProfileValidationError
from .tokenizer import normalize_token


logger = logging.getLogger(__name__)


# Lexicon weight bounds
MIN_WEIGHT = -3
MAX_WEIGHT = 3


class SentimentLabel(Enum):
    """Polarity of an analysis."""
    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"


def _normalize_key(key: str) -> str:
    """Normalize a profile key the same way tokens are normalized.

    Phrase keys keep a single space between their words, so they can
    never collide with a whitespace-free token.
    """
    parts = [normalize_token(p) for p in str(key).split()]
    return " ".join(p for p in parts if p)


@dataclass(frozen=True)
class ProfileLabels:
    """Localized display labels for the three polarities."""
    positive: str = "Positive"
    negative: str = "Negative"
    neutral: str = "Neutral"

    def for_label(self, label: SentimentLabel) -> str:
        if label == SentimentLabel.POSITIVE:
            return self.positive
        if label == SentimentLabel.NEGATIVE:
            return self.negative
        return self.neutral

    def to_dict(self) -> dict[str, str]:
        return {
            "positive": self.positive,
            "negative": self.negative,
            "neutral": self.neutral,
        }


@dataclass(frozen=True)
class ProfileMessages:
    """
    Localized messages used around the core.

    speak_template takes {label} and {confidence} placeholders; None
    means the default English phrasing is used.
    """
    empty_input: str = "⚠️ Please enter or speak some text!"
    nothing_to_speak: str = "Please enter or speak some text first."
    placeholder: str = "Type or speak your text here..."
    speak_template: Optional[str] = None

    def to_dict(self) -> dict[str, Optional[str]]:
        return {
            "empty_input": self.empty_input,
            "nothing_to_speak": self.nothing_to_speak,
            "placeholder": self.placeholder,
            "speak_template": self.speak_template,
        }


@dataclass(frozen=True)
class LanguageProfile:
    """
    Complete per-language configuration.

    Keys of lexicon, negation_words and intensifiers are normalized
    on construction and the mappings are exposed read-only. Matching
    priority is negation -> intensifier -> lexicon, so overlapping
    keys are tolerated but logged.
    """
    language_id: str
    locale: str
    lexicon: Mapping[str, int]
    negation_words: frozenset = field(default_factory=frozenset)
    intensifiers: Mapping[str, float] = field(default_factory=dict)
    labels: ProfileLabels = field(default_factory=ProfileLabels)
    messages: ProfileMessages = field(default_factory=ProfileMessages)

    def __post_init__(self) -> None:
        """Validate and freeze profile data."""
        if not self.language_id or not str(self.language_id).strip():
            raise ProfileValidationError(
                "Profile language_id must be non-empty",
                field_name="language_id",
            )
        object.__setattr__(self, "language_id", str(self.language_id).strip().lower())

        if not self.locale or not str(self.locale).strip():
            raise ProfileValidationError(
                f"Profile {self.language_id} has no locale",
                language_id=self.language_id,
                field_name="locale",
            )

        for name in ("lexicon", "intensifiers"):
            if not isinstance(getattr(self, name), Mapping):
                raise ProfileValidationError(
                    f"Profile {self.language_id} {name} must be a mapping",
                    language_id=self.language_id,
                    field_name=name,
                )
        if isinstance(self.negation_words, str):
            raise ProfileValidationError(
                f"Profile {self.language_id} negation_words must be a collection of words",
                language_id=self.language_id,
                field_name="negation_words",
            )

        lexicon: dict[str, int] = {}
        for word, weight in dict(self.lexicon).items():
            lexicon_key = _normalize_key(word)
            if not lexicon_key:
                continue
            lexicon[lexicon_key] = self._validate_weight(word, weight)

        negations = frozenset(
            k for k in (_normalize_key(w) for w in self.negation_words) if k
        )

        intensifiers: dict[str, float] = {}
        for word, multiplier in dict(self.intensifiers).items():
            intensifier_key = _normalize_key(word)
            if not intensifier_key:
                continue
            intensifiers[intensifier_key] = self._validate_multiplier(word, multiplier)

        object.__setattr__(self, "lexicon", MappingProxyType(lexicon))
        object.__setattr__(self, "negation_words", negations)
        object.__setattr__(self, "intensifiers", MappingProxyType(intensifiers))

        overlap = self.overlapping_keys()
        if overlap:
            logger.warning(
                f"Profile {self.language_id} has overlapping keys {sorted(overlap)}; "
                f"negation > intensifier > lexicon priority applies"
            )

    def _validate_weight(self, word: str, weight: Any) -> int:
        if isinstance(weight, bool) or not isinstance(weight, (int, float)):
            raise ProfileValidationError(
                f"Lexicon weight for {word!r} must be a number",
                language_id=self.language_id,
                field_name="lexicon",
                details={"word": word, "weight": repr(weight)},
            )
        if isinstance(weight, float) and not weight.is_integer():
            raise ProfileValidationError(
                f"Lexicon weight for {word!r} must be an integer",
                language_id=self.language_id,
                field_name="lexicon",
                details={"word": word, "weight": weight},
            )
        weight = int(weight)
        if not MIN_WEIGHT <= weight <= MAX_WEIGHT:
            raise ProfileValidationError(
                f"Lexicon weight for {word!r} must be between {MIN_WEIGHT} and {MAX_WEIGHT}",
                language_id=self.language_id,
                field_name="lexicon",
                details={"word": word, "weight": weight},
            )
        return weight

    def _validate_multiplier(self, word: str, multiplier: Any) -> float:
        if isinstance(multiplier, bool) or not isinstance(multiplier, (int, float)):
            raise ProfileValidationError(
                f"Intensifier for {word!r} must be a number",
                language_id=self.language_id,
                field_name="intensifiers",
                details={"word": word, "multiplier": repr(multiplier)},
            )
        multiplier = float(multiplier)
        if not math.isfinite(multiplier) or multiplier <= 0:
            raise ProfileValidationError(
                f"Intensifier for {word!r} must be a positive finite number",
                language_id=self.language_id,
                field_name="intensifiers",
                details={"word": word, "multiplier": multiplier},
            )
        return multiplier

    def overlapping_keys(self) -> set[str]:
        """Keys present in more than one of the three key sets."""
        lexicon = set(self.lexicon)
        intensifiers = set(self.intensifiers)
        negations = set(self.negation_words)
        return (
            (lexicon & intensifiers)
            | (lexicon & negations)
            | (intensifiers & negations)
        )

    def display_label(self, label: SentimentLabel) -> str:
        """Localized display string for a polarity."""
        return self.labels.for_label(label)

    def to_dict(self) -> dict[str, Any]:
        return {
            "language_id": self.language_id,
            "locale": self.locale,
            "lexicon": dict(self.lexicon),
            "negation_words": sorted(self.negation_words),
            "intensifiers": dict(self.intensifiers),
            "labels": self.labels.to_dict(),
            "messages": self.messages.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LanguageProfile":
        """Create from a data-only definition."""
        try:
            language_id = data["language_id"]
            locale = data["locale"]
            lexicon = data["lexicon"]
        except KeyError as e:
            raise ProfileValidationError(
                f"Profile definition missing required field {e.args[0]!r}",
                language_id=str(data.get("language_id", "")),
                field_name=str(e.args[0]),
            ) from e

        negation_words = data.get("negation_words", [])
        if isinstance(negation_words, str) or not isinstance(negation_words, (list, tuple, set, frozenset)):
            raise ProfileValidationError(
                "Profile negation_words must be a list of words",
                language_id=str(language_id),
                field_name="negation_words",
                details={"negation_words": repr(negation_words)},
            )

        return cls(
            language_id=language_id,
            locale=locale,
            lexicon=lexicon,
            negation_words=frozenset(negation_words),
            intensifiers=data.get("intensifiers", {}),
            labels=_build_section(ProfileLabels, data, "labels", language_id),
            messages=_build_section(ProfileMessages, data, "messages", language_id),
        )


def _build_section(section_cls: type, data: dict[str, Any], name: str, language_id: Any) -> Any:
    """Build ProfileLabels / ProfileMessages from a definition sub-object."""
    values = data.get(name, {})
    if not isinstance(values, Mapping):
        raise ProfileValidationError(
            f"Profile {name} must be an object",
            language_id=str(language_id),
            field_name=name,
            details={name: repr(values)},
        )
    try:
        return section_cls(**values)
    except TypeError as e:
        raise ProfileValidationError(
            f"Invalid profile {name}: {e}",
            language_id=str(language_id),
            field_name=name,
            details={"keys": sorted(str(k) for k in values)},
        ) from e


@dataclass
class SentenceState:
    """Transient per-sentence accumulator."""
    score: float = 0.0
    negate_pending: bool = False
    intensity_pending: float = 1.0
    word_count: int = 0


@dataclass(frozen=True)
class SentenceScore:
    """Score and word count of one sentence (or of a whole text)."""
    score: float
    word_count: int

    def __add__(self, other: "SentenceScore") -> "SentenceScore":
        return SentenceScore(
            score=self.score + other.score,
            word_count=self.word_count + other.word_count,
        )


@dataclass(frozen=True)
class SentimentBuckets:
    """
    Non-negative magnitudes for proportional visualization.

    These are illustrative slice sizes, not probabilities.
    """
    positive: float = 0.0
    negative: float = 0.0
    neutral: float = 0.0

    def to_dict(self) -> dict[str, float]:
        return {
            "positive": self.positive,
            "negative": self.negative,
            "neutral": self.neutral,
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Outcome of one analysis call."""
    polarity: SentimentLabel
    label: str  # Localized display label
    confidence: float  # 0.0 to 100.0
    total_score: float
    total_words: int
    sentence_count: int
    buckets: SentimentBuckets
    language_id: str
    text: str = ""

    @property
    def bucket_positive(self) -> float:
        return self.buckets.positive

    @property
    def bucket_negative(self) -> float:
        return self.buckets.negative

    @property
    def bucket_neutral(self) -> float:
        return self.buckets.neutral

    @property
    def confidence_text(self) -> str:
        """Confidence formatted with one decimal place."""
        return f"{self.confidence:.1f}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "polarity": self.polarity.value,
            "label": self.label,
            "confidence": self.confidence,
            "confidence_text": self.confidence_text,
            "total_score": self.total_score,
            "total_words": self.total_words,
            "sentence_count": self.sentence_count,
            "buckets": self.buckets.to_dict(),
            "language_id": self.language_id,
            "text": self.text,
        }


@dataclass(frozen=True)
class EmptyInput:
    """
    Distinguished empty-input condition.

    Returned instead of an AnalysisResult when the text is empty or
    whitespace only; carries the localized prompt for the caller.
    """
    language_id: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "empty": True,
            "language_id": self.language_id,
            "message": self.message,
        }


@dataclass(frozen=True)
class HistoryEntry:
    """One recent analysis kept for display and replay."""
    text: str
    label: str
    polarity: SentimentLabel
    confidence: float
    language_id: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_result(cls, result: AnalysisResult) -> "HistoryEntry":
        return cls(
            text=result.text,
            label=result.label,
            polarity=result.polarity,
            confidence=result.confidence,
            language_id=result.language_id,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "label": self.label,
            "polarity": self.polarity.value,
            "confidence": self.confidence,
            "confidence_text": f"{self.confidence:.1f}",
            "language_id": self.language_id,
            "created_at": self.created_at.isoformat(),
        }
