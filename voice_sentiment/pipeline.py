"""
Voice Sentiment - Voice Pipeline.

============================================================
RESPONSIBILITY
============================================================
Connects the asynchronous speech collaborators to the
synchronous scoring core as independent stages:

    recognizer --> [transcripts] --> analysis --> [analyzed]
               --> speech --> [outcomes] --> consumer

- Stages communicate only through asyncio queues
- Each stage runs as its own task and can be cancelled
- Recognizer / synthesizer can be replaced at any time

============================================================
FAILURE HANDLING
============================================================
- Recognizer failures are logged and reported; nothing is
  submitted for analysis
- Synthesizer failures are logged and attached to the outcome;
  the analysis and its history entry are already complete
- The core never fails, so the analysis stage never stops

============================================================
"""

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, AsyncIterator, Optional

from .analyzer import AnalysisOutcome
from .exceptions import PipelineError, SpeechError
from .models import AnalysisResult, EmptyInput
from .session import AnalysisSession
from .speech import SpeechRecognizer, SpeechSynthesizer, speak_message


logger = logging.getLogger(__name__)


# Placed on the outcome queue by stop(); ends results() consumers
_STOPPED = object()


# ============================================================
# MESSAGES
# ============================================================


@dataclass(frozen=True)
class TranscriptMessage:
    """Text delivered to the analysis stage."""
    text: str
    language_id: str
    speak: bool = True
    received_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(frozen=True)
class AnalyzedMessage:
    """Analysis outcome delivered to the speech stage."""
    transcript: TranscriptMessage
    outcome: AnalysisOutcome


@dataclass(frozen=True)
class PipelineOutcome:
    """Final message delivered to consumers."""
    transcript: TranscriptMessage
    outcome: AnalysisOutcome
    spoken_message: Optional[str] = None
    speech_error: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return isinstance(self.outcome, EmptyInput)

    @property
    def result(self) -> Optional[AnalysisResult]:
        return self.outcome if isinstance(self.outcome, AnalysisResult) else None


# ============================================================
# PIPELINE
# ============================================================


class VoicePipeline:
    """
    Transcript -> analyze -> speak pipeline.

    Usage:
        async with VoicePipeline(session, synthesizer=LoggingSynthesizer()) as pipeline:
            await pipeline.submit("I love this", "en")
            outcome = await pipeline.next_outcome()
    """

    def __init__(
        self,
        session: AnalysisSession,
        synthesizer: Optional[SpeechSynthesizer] = None,
        recognizer: Optional[SpeechRecognizer] = None,
    ) -> None:
        self._session = session
        self._synthesizer = synthesizer
        self._recognizer = recognizer

        self._transcripts: Optional[asyncio.Queue] = None
        self._analyzed: Optional[asyncio.Queue] = None
        self._outcomes: Optional[asyncio.Queue] = None
        self._tasks: list[asyncio.Task] = []

        self.last_error: Optional[SpeechError] = None

    # =========================================================
    # LIFECYCLE
    # =========================================================

    @property
    def is_running(self) -> bool:
        return bool(self._tasks) and not all(t.done() for t in self._tasks)

    @property
    def session(self) -> AnalysisSession:
        return self._session

    async def start(self) -> None:
        """Start the analysis and speech stage tasks."""
        if self.is_running:
            return

        self._transcripts = asyncio.Queue()
        self._analyzed = asyncio.Queue()
        self._outcomes = asyncio.Queue()
        self._tasks = [
            asyncio.create_task(self._analysis_stage(), name="analysis_stage"),
            asyncio.create_task(self._speech_stage(), name="speech_stage"),
        ]
        logger.info("Voice pipeline started")

    async def stop(self) -> None:
        """Cancel all stage tasks and any speech in progress, ending results()."""
        for task in self._tasks:
            task.cancel()
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)
        self._tasks = []

        if self._outcomes is not None:
            self._outcomes.put_nowait(_STOPPED)

        if self._recognizer is not None:
            await self._stop_collaborator(self._recognizer.stop, "recognizer")
        if self._synthesizer is not None:
            await self._stop_collaborator(self._synthesizer.cancel, "synthesizer")
        logger.info("Voice pipeline stopped")

    async def __aenter__(self) -> "VoicePipeline":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.stop()

    def replace_synthesizer(self, synthesizer: Optional[SpeechSynthesizer]) -> None:
        self._synthesizer = synthesizer

    def replace_recognizer(self, recognizer: Optional[SpeechRecognizer]) -> None:
        self._recognizer = recognizer

    # =========================================================
    # INPUT
    # =========================================================

    async def submit(
        self,
        text: str,
        language_id: Optional[str] = None,
        speak: bool = True,
    ) -> TranscriptMessage:
        """Queue text for analysis."""
        if not self.is_running or self._transcripts is None:
            raise PipelineError("Pipeline is not running", stage="transcripts")

        message = TranscriptMessage(
            text=text,
            language_id=language_id or self._session.language_id,
            speak=speak,
        )
        await self._transcripts.put(message)
        return message

    async def listen_once(
        self,
        language_id: Optional[str] = None,
        speak: bool = True,
    ) -> Optional[TranscriptMessage]:
        """
        Capture one transcript with the recognizer and submit it.

        Returns None (and sets last_error) when recognition fails.
        """
        if self._recognizer is None:
            raise PipelineError("No speech recognizer configured", stage="recognizer")

        language = language_id or self._session.language_id
        locale = self._session.analyzer.registry.locale_for(language)
        try:
            text = await self._recognizer.transcribe(locale)
        except SpeechError as e:
            self.last_error = e
            logger.warning(f"Speech recognition failed ({locale}): {e.message}")
            return None

        self.last_error = None
        return await self.submit(text, language, speak=speak)

    # =========================================================
    # OUTPUT
    # =========================================================

    async def next_outcome(self, timeout: Optional[float] = None) -> PipelineOutcome:
        """
        Wait for the next outcome from the speech stage.

        Raises:
            PipelineError: Not started, or stopped with no outcomes left
        """
        item = await self._get_outcome(timeout)
        if item is _STOPPED:
            raise PipelineError("Pipeline has been stopped", stage="outcomes")
        return item

    async def results(self) -> AsyncIterator[PipelineOutcome]:
        """Yield outcomes as they arrive until the pipeline stops."""
        while True:
            item = await self._get_outcome(None)
            if item is _STOPPED:
                return
            yield item

    async def _get_outcome(self, timeout: Optional[float]) -> Any:
        if self._outcomes is None:
            raise PipelineError("Pipeline has not been started", stage="outcomes")
        if timeout is None:
            item = await self._outcomes.get()
        else:
            item = await asyncio.wait_for(self._outcomes.get(), timeout=timeout)
        if item is _STOPPED:
            # Leave the marker for other consumers
            self._outcomes.put_nowait(_STOPPED)
        return item

    # =========================================================
    # STAGES
    # =========================================================

    async def _analysis_stage(self) -> None:
        if self._transcripts is None or self._analyzed is None:
            raise PipelineError("Analysis stage has no queues", stage="analysis")
        while True:
            message = await self._transcripts.get()
            outcome = self._session.analyze(message.text, message.language_id)
            await self._analyzed.put(AnalyzedMessage(transcript=message, outcome=outcome))
            self._transcripts.task_done()

    async def _speech_stage(self) -> None:
        if self._analyzed is None or self._outcomes is None:
            raise PipelineError("Speech stage has no queues", stage="speech")
        while True:
            message = await self._analyzed.get()
            outcome = await self._speak(message)
            await self._outcomes.put(outcome)
            self._analyzed.task_done()

    async def _speak(self, message: AnalyzedMessage) -> PipelineOutcome:
        result = message.outcome
        synthesizer = self._synthesizer
        if (
            not message.transcript.speak
            or synthesizer is None
            or not isinstance(result, AnalysisResult)
        ):
            return PipelineOutcome(transcript=message.transcript, outcome=result)

        profile = self._session.analyzer.registry.resolve(result.language_id)
        spoken = speak_message(profile, result.label, result.confidence)
        try:
            await synthesizer.cancel()
            await synthesizer.speak(spoken, profile.locale)
        except SpeechError as e:
            self.last_error = e
            logger.warning(f"Speech synthesis failed ({profile.locale}): {e.message}")
            return PipelineOutcome(
                transcript=message.transcript,
                outcome=result,
                spoken_message=spoken,
                speech_error=e.message,
            )
        except Exception as e:
            logger.error(f"Speech synthesizer error: {e}", exc_info=True)
            return PipelineOutcome(
                transcript=message.transcript,
                outcome=result,
                spoken_message=spoken,
                speech_error=str(e),
            )

        return PipelineOutcome(
            transcript=message.transcript,
            outcome=result,
            spoken_message=spoken,
        )

    async def _stop_collaborator(self, stop, name: str) -> None:
        try:
            await stop()
        except Exception as e:
            logger.warning(f"Could not stop {name}: {e}")
