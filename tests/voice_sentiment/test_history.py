"""
Tests for recent results and the analysis session.

Tests cover:
- History capacity and most-recent-first order
- Session language selection and history recording
- Spoken message for the latest result
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from voice_sentiment.config import Settings
from voice_sentiment.history import DEFAULT_MAX_ENTRIES, RecentResults
from voice_sentiment.models import EmptyInput, SentimentLabel
from voice_sentiment.session import AnalysisSession


# =============================================================
# TEST: RecentResults
# =============================================================

class TestRecentResults:
    """Test the bounded history."""

    def test_capped_newest_first(self, session):
        for i in range(1, 8):
            session.analyze(f"I love number {i}")

        entries = session.history.entries()
        assert len(entries) == DEFAULT_MAX_ENTRIES == 6
        assert [e.text for e in entries] == [f"I love number {i}" for i in range(7, 1, -1)]

    def test_latest(self, analyzer):
        history = RecentResults()
        assert history.latest() is None

        history.add(analyzer.analyze("good", "en"))
        history.add(analyzer.analyze("I hate it", "en"))

        latest = history.latest()
        assert latest.text == "I hate it"
        assert latest.polarity == SentimentLabel.NEGATIVE

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            RecentResults(max_entries=0)

    def test_clear(self, analyzer):
        history = RecentResults(max_entries=2)
        history.add(analyzer.analyze("good", "en"))
        history.clear()
        assert len(history) == 0

    def test_concurrent_adds(self, analyzer):
        history = RecentResults()
        result = analyzer.analyze("great", "en")

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(lambda _: history.add(result), range(50)))

        assert len(history) == 6

    def test_to_list(self, analyzer):
        history = RecentResults()
        history.add(analyzer.analyze("I love this, it is very good", "en"))

        data = history.to_list()
        assert data[0]["label"] == "Positive"
        assert data[0]["confidence_text"] == "90.7"
        assert data[0]["polarity"] == "positive"


# =============================================================
# TEST: AnalysisSession
# =============================================================

class TestAnalysisSession:
    """Test the caller-owned session."""

    def test_empty_input_not_recorded(self, session):
        outcome = session.analyze("   ")
        assert isinstance(outcome, EmptyInput)
        assert len(session.history) == 0

    def test_uses_session_language(self, session):
        session.set_language("es")
        result = session.analyze("muy bueno")

        assert result.language_id == "es"
        assert result.label == "Positivo"

    def test_call_language_overrides_session(self, session):
        result = session.analyze("gut", "de")
        assert result.language_id == "de"
        assert session.language_id == "en"

    def test_unknown_language_selects_default(self, session):
        assert session.set_language("xx") == "en"
        assert session.profile.locale == "en-US"

    def test_speak_latest_without_history(self, session):
        assert session.speak_latest_message() == "Please enter or speak some text first."

        session.set_language("hi")
        assert session.speak_latest_message() == "पहले कुछ बोलें या लिखें।"

    def test_speak_latest_with_history(self, session):
        session.analyze("I love this, it is very good")
        assert session.speak_latest_message() == (
            "I think this is Positive with 91 percent confidence."
        )

    def test_from_settings(self):
        session = AnalysisSession.from_settings(
            Settings(default_language="ta", history_size=2)
        )

        assert session.language_id == "ta"
        assert session.history.max_entries == 2
        assert session.analyzer.registry.default_language == "ta"
