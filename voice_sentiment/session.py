"""
Voice Sentiment - Analysis Session.

Explicit per-caller context: the analyzer, the recent-results
history and the currently selected language. Callers own their
session; there are no process-wide singletons.
"""

import logging
from typing import Optional

from .analyzer import AnalysisOutcome, SentimentAnalyzer
from .config import Settings
from .history import RecentResults
from .models import AnalysisResult, HistoryEntry, LanguageProfile
from .registry import default_registry
from .speech import speak_entry


logger = logging.getLogger(__name__)


class AnalysisSession:
    """
    Caller-owned analysis context.

    Usage:
        session = AnalysisSession.from_settings(load_settings())
        session.set_language("hi")
        outcome = session.analyze("यह शानदार है")
        session.speak_latest_message()
    """

    def __init__(
        self,
        analyzer: SentimentAnalyzer,
        history: Optional[RecentResults] = None,
        language_id: Optional[str] = None,
    ) -> None:
        self._analyzer = analyzer
        self._history = history if history is not None else RecentResults()
        self._language_id = self._analyzer.registry.resolve(language_id).language_id

    @classmethod
    def from_settings(cls, settings: Settings) -> "AnalysisSession":
        """Build a session (registry, analyzer, history) from settings."""
        registry = default_registry(
            profiles_path=settings.profiles_path,
            default_language=settings.default_language,
        )
        return cls(
            analyzer=SentimentAnalyzer(registry),
            history=RecentResults(max_entries=settings.history_size),
            language_id=settings.default_language,
        )

    @property
    def analyzer(self) -> SentimentAnalyzer:
        return self._analyzer

    @property
    def history(self) -> RecentResults:
        return self._history

    @property
    def language_id(self) -> str:
        return self._language_id

    @property
    def profile(self) -> LanguageProfile:
        """Profile of the selected language."""
        return self._analyzer.registry.resolve(self._language_id)

    def set_language(self, language_id: Optional[str]) -> str:
        """Select a language; unknown ids select the default. Returns the id used."""
        self._language_id = self._analyzer.registry.resolve(language_id).language_id
        logger.debug(f"Session language set to {self._language_id}")
        return self._language_id

    def analyze(
        self,
        text: Optional[str],
        language_id: Optional[str] = None,
    ) -> AnalysisOutcome:
        """
        Analyze text and record non-empty results in the history.

        Args:
            text: Free text
            language_id: Override for this call (session language otherwise)
        """
        outcome = self._analyzer.analyze(text, language_id or self._language_id)
        if isinstance(outcome, AnalysisResult):
            self._history.add(outcome)
        return outcome

    def latest(self) -> Optional[HistoryEntry]:
        return self._history.latest()

    def speak_latest_message(self) -> str:
        """
        Spoken message for the latest result in the session language.

        Returns the localized nothing-to-speak prompt when the history
        is empty.
        """
        profile = self.profile
        entry = self._history.latest()
        if entry is None:
            return profile.messages.nothing_to_speak
        return speak_entry(entry, profile)
