"""
Voice Sentiment Exceptions - Custom error hierarchy.

The scoring core never raises for user input: empty text, unknown
languages and unknown words all produce a valid outcome. These
exceptions cover invalid profile data and failures of the speech
collaborators around the core.

============================================================
EXCEPTION HIERARCHY
============================================================
VoiceSentimentError (base)
├── ProfileValidationError
├── ProfileLoadError
├── SpeechError
│   ├── SpeechUnavailableError
│   ├── TranscriptionError
│   └── SynthesisError
└── PipelineError

============================================================
"""

from datetime import datetime, timezone
from typing import Any, Optional


class VoiceSentimentError(Exception):
    """Base exception for all voice sentiment errors."""

    def __init__(
        self,
        message: str,
        language_id: str = "",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.language_id = language_id
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc)
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "language_id": self.language_id,
            "details": self.details,
            "timestamp": self.timestamp.isoformat(),
        }


class ProfileValidationError(VoiceSentimentError):
    """A language profile violates the profile schema."""

    def __init__(
        self,
        message: str,
        language_id: str = "",
        field_name: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, language_id, details)
        self.field_name = field_name

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update({
            "field_name": self.field_name,
        })
        return data


class ProfileLoadError(VoiceSentimentError):
    """Profile definitions could not be read from disk."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, "", details)
        self.path = path

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update({
            "path": self.path,
        })
        return data


class SpeechError(VoiceSentimentError):
    """Base class for speech collaborator failures."""
    pass


class SpeechUnavailableError(SpeechError):
    """No speech device or engine is available (unsupported, permission denied)."""

    def __init__(
        self,
        message: str,
        language_id: str = "",
        is_permanent: bool = False,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, language_id, details)
        self.is_permanent = is_permanent

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update({
            "is_permanent": self.is_permanent,
        })
        return data


class TranscriptionError(SpeechError):
    """Audio capture or transcription failed."""
    pass


class SynthesisError(SpeechError):
    """Text-to-speech playback failed."""
    pass


class PipelineError(VoiceSentimentError):
    """A pipeline stage was used in an invalid state."""

    def __init__(
        self,
        message: str,
        stage: str = "",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, "", details)
        self.stage = stage

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data.update({
            "stage": self.stage,
        })
        return data
