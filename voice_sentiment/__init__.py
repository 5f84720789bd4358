"""
Voice Sentiment - Multi-language lexicon sentiment analysis.

Assigns a polarity label (positive / negative / neutral) and a
confidence percentage to free text, using per-language lexicons
with negation and intensifier handling.

This package provides:
- Language profile registry (en, ta, hi, te, ml, fr, es, de, ar)
- Tokenizer, sentence scorer and confidence estimator
- Caller-owned analysis sessions with a bounded history
- Voice pipeline connecting speech collaborators to the core
- FastAPI router and command-line interface

Usage:
    from voice_sentiment import ProfileRegistry, SentimentAnalyzer

    analyzer = SentimentAnalyzer(ProfileRegistry.with_builtin_profiles())
    result = analyzer.analyze("I love this, it is very good", "en")

    print(f"Label: {result.label}")
    print(f"Confidence: {result.confidence_text}%")

Output Schema:
- label: localized display label
- confidence: 50 for neutral, 60..100 otherwise
- buckets: positive / negative / neutral slice magnitudes
"""

from .analyzer import AnalysisOutcome, SentimentAnalyzer
from .confidence import ConfidenceConfig, ConfidenceEstimator
from .config import Settings, load_settings
from .exceptions import (
    PipelineError,
    ProfileLoadError,
    ProfileValidationError,
    SpeechError,
    SpeechUnavailableError,
    SynthesisError,
    TranscriptionError,
    VoiceSentimentError,
)
from .history import RecentResults
from .models import (
    AnalysisResult,
    EmptyInput,
    HistoryEntry,
    LanguageProfile,
    ProfileLabels,
    ProfileMessages,
    SentenceScore,
    SentenceState,
    SentimentBuckets,
    SentimentLabel,
)
from .pipeline import PipelineOutcome, VoicePipeline
from .registry import ProfileRegistry, default_registry, load_profiles_file
from .scorer import SentimentScorer
from .session import AnalysisSession
from .speech import (
    LoggingSynthesizer,
    SpeechRecognizer,
    SpeechSynthesizer,
    speak_template,
)
from .tokenizer import normalize_token, segment, tokenize


__all__ = [
    # Core
    "SentimentAnalyzer",
    "AnalysisOutcome",
    "SentimentScorer",
    "ConfidenceEstimator",
    "ConfidenceConfig",
    "segment",
    "tokenize",
    "normalize_token",

    # Registry
    "ProfileRegistry",
    "default_registry",
    "load_profiles_file",

    # Session & Pipeline
    "AnalysisSession",
    "RecentResults",
    "VoicePipeline",
    "PipelineOutcome",

    # Speech
    "SpeechRecognizer",
    "SpeechSynthesizer",
    "LoggingSynthesizer",
    "speak_template",

    # Config
    "Settings",
    "load_settings",

    # Models
    "AnalysisResult",
    "EmptyInput",
    "HistoryEntry",
    "LanguageProfile",
    "ProfileLabels",
    "ProfileMessages",
    "SentenceScore",
    "SentenceState",
    "SentimentBuckets",
    "SentimentLabel",

    # Exceptions
    "VoiceSentimentError",
    "ProfileValidationError",
    "ProfileLoadError",
    "SpeechError",
    "SpeechUnavailableError",
    "TranscriptionError",
    "SynthesisError",
    "PipelineError",
]


# Version
__version__ = "1.0.0"
