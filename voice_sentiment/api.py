"""
FastAPI Router for Sentiment Endpoints.

Provides a REST surface over an AnalysisSession:
- Analyze text in a given language
- List supported languages and speech locales
- Read the recent-results history
- Get the spoken message for the latest result
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, FastAPI, Query, Request

from .config import load_settings
from .display import render_history
from .models import EmptyInput
from .schemas import (
    AnalysisResponse,
    AnalyzeRequest,
    HistoryEntrySchema,
    HistoryResponse,
    LanguageSchema,
    LanguagesResponse,
    SpeakResponse,
)
from .session import AnalysisSession
from .speech import speak_entry


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sentiment", tags=["Sentiment"])


# =============================================================
# HELPER: Session dependency
# =============================================================

def get_analysis_session(request: Request) -> AnalysisSession:
    return request.app.state.analysis_session


# =============================================================
# ANALYSIS ENDPOINTS
# =============================================================

@router.post("/analyze", response_model=AnalysisResponse)
def analyze_text(
    body: AnalyzeRequest,
    session: AnalysisSession = Depends(get_analysis_session),
):
    """
    Analyze free text.

    Blank text returns `empty: true` with a localized prompt instead
    of a sentiment label. Unknown languages use the default profile.
    """
    outcome = session.analyze(body.text, body.language)
    if isinstance(outcome, EmptyInput):
        return AnalysisResponse.from_empty(outcome)

    profile = session.analyzer.registry.resolve(outcome.language_id)
    return AnalysisResponse.from_result(outcome, profile)


@router.get("/languages", response_model=LanguagesResponse)
def list_languages(session: AnalysisSession = Depends(get_analysis_session)):
    """Supported languages with labels and speech locales."""
    registry = session.analyzer.registry
    return LanguagesResponse(
        default_language=registry.default_language,
        languages=[
            LanguageSchema.from_profile(registry.resolve(language_id))
            for language_id in registry.languages()
        ],
    )


@router.get("/history", response_model=HistoryResponse)
def get_history(session: AnalysisSession = Depends(get_analysis_session)):
    """Recent results, newest first."""
    entries = session.history.entries()
    return HistoryResponse(
        entries=[HistoryEntrySchema.from_entry(e) for e in entries],
        html=render_history(entries),
    )


@router.get("/speak/latest", response_model=SpeakResponse)
def speak_latest(
    language: Optional[str] = Query(None, description="Language of the phrasing"),
    session: AnalysisSession = Depends(get_analysis_session),
):
    """Spoken message for the latest result, or the localized prompt."""
    profile = session.analyzer.registry.resolve(language or session.language_id)
    entry = session.latest()
    if entry is None:
        message = profile.messages.nothing_to_speak
    else:
        message = speak_entry(entry, profile)

    return SpeakResponse(
        language_id=profile.language_id,
        locale=profile.locale,
        message=message,
        has_result=entry is not None,
    )


# =============================================================
# APPLICATION FACTORY
# =============================================================

def create_app(session: Optional[AnalysisSession] = None) -> FastAPI:
    """Create a FastAPI app serving the sentiment router."""
    app = FastAPI(title="Voice Sentiment Analyzer", version="1.0.0")
    app.state.analysis_session = session or AnalysisSession.from_settings(load_settings())
    app.include_router(router)
    return app
