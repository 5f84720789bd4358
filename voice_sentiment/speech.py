"""
Voice Sentiment - Speech Collaborators.

============================================================
RESPONSIBILITY
============================================================
Boundary between the scoring core and the speech subsystems.

- Builds the spoken message for a result, per language
- Defines the recognizer (audio -> text) interface
- Defines the synthesizer (text -> audio) interface

Actual audio capture and playback live outside this package.
Implementations report failures with SpeechError subclasses;
callers must keep the text-only analysis path working.

============================================================
"""

import logging
import math
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple, Union

from .models import HistoryEntry, LanguageProfile
from .profiles import BUILTIN_PROFILES, DEFAULT_LANGUAGE
from .registry import ProfileRegistry


logger = logging.getLogger(__name__)


DEFAULT_SPEAK_TEMPLATE = "I think this is {label} with {confidence} percent confidence."


# ============================================================
# MESSAGE TEMPLATES
# ============================================================

def round_half_up(value: Union[float, str]) -> int:
    """Round to the nearest integer, halves rounding up (87.5 -> 88)."""
    return int(math.floor(float(value) + 0.5))


def speak_message(
    profile: LanguageProfile,
    label: str,
    confidence_percent: Union[float, str],
) -> str:
    """Spoken message for a label and confidence in the profile's language."""
    template = profile.messages.speak_template or DEFAULT_SPEAK_TEMPLATE
    return template.format(label=label, confidence=round_half_up(confidence_percent))


def _builtin_speak_template(language_id: Optional[str]) -> str:
    """Speech template from the built-in profile data (English when unknown)."""
    definition = (
        BUILTIN_PROFILES.get((language_id or "").strip().lower())
        or BUILTIN_PROFILES[DEFAULT_LANGUAGE]
    )
    return definition.get("messages", {}).get("speak_template") or DEFAULT_SPEAK_TEMPLATE


def speak_template(
    label: str,
    confidence_percent: Union[float, str],
    language_id: str,
    registry: Optional[ProfileRegistry] = None,
) -> str:
    """
    Build the spoken message for a result.

    Args:
        label: Localized display label
        confidence_percent: Confidence, rounded half up before use
        language_id: Language of the phrasing; unknown ids use the default
        registry: Profiles to use; when omitted the phrasing is read
            from the built-in profile data, no registry is built

    Returns:
        Message string for a speech synthesizer
    """
    if registry is not None:
        return speak_message(registry.resolve(language_id), label, confidence_percent)

    template = _builtin_speak_template(language_id)
    return template.format(label=label, confidence=round_half_up(confidence_percent))


def speak_entry(entry: HistoryEntry, profile: LanguageProfile) -> str:
    """Spoken message replaying a history entry."""
    return speak_message(profile, entry.label, entry.confidence)


# ============================================================
# COLLABORATOR INTERFACES
# ============================================================

class SpeechRecognizer(ABC):
    """
    Audio capture and transcription.

    Raises:
        SpeechUnavailableError: No recognition support or permission
        TranscriptionError: Capture started but failed
    """

    @abstractmethod
    async def transcribe(self, locale: str) -> str:
        """Listen once and return the final transcript."""
        ...

    async def stop(self) -> None:
        """Stop an in-progress capture."""
        return None


class SpeechSynthesizer(ABC):
    """
    Text-to-speech playback.

    Raises:
        SpeechUnavailableError: No synthesis support
        SynthesisError: Playback failed
    """

    @abstractmethod
    async def speak(self, message: str, locale: str) -> None:
        """Speak a message in the given locale."""
        ...

    async def cancel(self) -> None:
        """Cancel any utterance still playing."""
        return None


class LoggingSynthesizer(SpeechSynthesizer):
    """Synthesizer that logs messages instead of playing audio."""

    def __init__(self) -> None:
        self.spoken: List[Tuple[str, str]] = []

    async def speak(self, message: str, locale: str) -> None:
        logger.info(f"[speech {locale}] {message}")
        self.spoken.append((message, locale))
