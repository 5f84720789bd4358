"""
Voice Sentiment - Display Formatting.

Pure formatting helpers for display, history and chart consumers.
Rendering itself (DOM, widgets, chart library) is out of scope;
these functions produce the strings and payloads those layers use.
"""

import html
from typing import Any, Dict, Iterable, Optional

from .models import (
    HistoryEntry,
    ProfileLabels,
    SentimentBuckets,
    SentimentLabel,
)


PREVIEW_LENGTH = 60
ELLIPSIS = "..."

# Initial chart before any analysis: one neutral slice
EMPTY_CHART_BUCKETS = SentimentBuckets(positive=0.0, negative=0.0, neutral=1.0)

CHART_COLORS: Dict[SentimentLabel, str] = {
    SentimentLabel.POSITIVE: "#16a34a",
    SentimentLabel.NEGATIVE: "#dc2626",
    SentimentLabel.NEUTRAL: "#9ca3af",
}

RESULT_COLORS: Dict[SentimentLabel, str] = {
    SentimentLabel.POSITIVE: "green",
    SentimentLabel.NEGATIVE: "red",
    SentimentLabel.NEUTRAL: "gray",
}

EMOJI: Dict[SentimentLabel, str] = {
    SentimentLabel.POSITIVE: "😊",
    SentimentLabel.NEGATIVE: "😞",
    SentimentLabel.NEUTRAL: "😐",
}


def format_confidence(confidence: float) -> str:
    """Confidence with one decimal place (87.5)."""
    return f"{confidence:.1f}"


def preview_text(text: str, limit: int = PREVIEW_LENGTH) -> str:
    """Truncate to limit characters, appending an ellipsis when longer."""
    if len(text) <= limit:
        return text
    return text[:limit] + ELLIPSIS


def escape_html(text: str) -> str:
    """Escape & < > " ' for safe inclusion in markup."""
    return html.escape(text, quote=True)


def emoji_for(polarity: SentimentLabel) -> str:
    return EMOJI[polarity]


def result_headline(polarity: SentimentLabel, label: str) -> str:
    """Headline shown for a result, e.g. '😊 Positive'."""
    return f"{emoji_for(polarity)} {label}"


def render_history_item(entry: HistoryEntry) -> str:
    """One history list item; the text is truncated before escaping."""
    return (
        f"<li><b>{escape_html(entry.label)}</b> "
        f"({format_confidence(entry.confidence)}%) → "
        f"{escape_html(preview_text(entry.text))}</li>"
    )


def render_history(entries: Iterable[HistoryEntry]) -> str:
    return "".join(render_history_item(e) for e in entries)


def chart_payload(
    buckets: SentimentBuckets,
    labels: Optional[ProfileLabels] = None,
) -> Dict[str, Any]:
    """
    Doughnut-chart payload from bucket magnitudes.

    Slice order is positive, negative, neutral.
    """
    labels = labels or ProfileLabels()
    order = (SentimentLabel.POSITIVE, SentimentLabel.NEGATIVE, SentimentLabel.NEUTRAL)
    return {
        "type": "doughnut",
        "labels": [labels.for_label(p) for p in order],
        "data": [buckets.positive, buckets.negative, buckets.neutral],
        "colors": [CHART_COLORS[p] for p in order],
    }
