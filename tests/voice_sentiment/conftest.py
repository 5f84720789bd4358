"""
Shared fixtures for voice sentiment tests.
"""

import pytest

from voice_sentiment.analyzer import SentimentAnalyzer
from voice_sentiment.history import RecentResults
from voice_sentiment.models import LanguageProfile, ProfileLabels
from voice_sentiment.registry import ProfileRegistry
from voice_sentiment.session import AnalysisSession


@pytest.fixture
def registry():
    """Registry with every built-in profile."""
    return ProfileRegistry.with_builtin_profiles()


@pytest.fixture
def english(registry):
    return registry.resolve("en")


@pytest.fixture
def analyzer(registry):
    return SentimentAnalyzer(registry)


@pytest.fixture
def session(analyzer):
    return AnalysisSession(analyzer, history=RecentResults(), language_id="en")


@pytest.fixture
def toy_profile():
    """Small profile with round numbers for scoring arithmetic."""
    return LanguageProfile(
        language_id="toy",
        locale="en-GB",
        lexicon={"up": 2, "down": -2, "meh": -1},
        negation_words=frozenset({"not"}),
        intensifiers={"x3": 3.0, "half": 0.5},
        labels=ProfileLabels(positive="Up", negative="Down", neutral="Flat"),
    )
