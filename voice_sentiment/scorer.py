"""
Voice Sentiment - Sentence Scorer.

============================================================
RESPONSIBILITY
============================================================
Scores the tokens of one sentence against a language profile.

Per token, in priority order:
1. Negation word   -> negate the next lexicon hit (consumed)
2. Intensifier     -> scale the next lexicon hit (consumed)
3. Lexicon word    -> add weight * intensity, count the word
4. Unknown word    -> count the word only

============================================================
SCOPE RULES
============================================================
- Negation flips exactly the nearest following lexicon word,
  not the rest of the sentence
- Intensity resets to 1.0 after each lexicon hit
- Pending negation/intensity survive unknown words but never
  cross a sentence boundary (fresh state per sentence)

============================================================
"""

import logging
from typing import Iterable, Sequence

from .models import LanguageProfile, SentenceScore, SentenceState
from .tokenizer import tokenize


logger = logging.getLogger(__name__)


class SentimentScorer:
    """
    Negation / intensifier state machine over sentence tokens.

    Stateless between calls: every sentence gets its own
    SentenceState, so one scorer can be shared freely.
    """

    def score(
        self,
        tokens: Iterable[str],
        profile: LanguageProfile,
    ) -> SentenceScore:
        """
        Score one sentence.

        Args:
            tokens: Normalized tokens of the sentence
            profile: Language profile to match against

        Returns:
            SentenceScore with accumulated score and word count
        """
        state = SentenceState()
        for token in tokens:
            self._apply(state, token, profile)
        return SentenceScore(score=state.score, word_count=state.word_count)

    def score_sentences(
        self,
        sentences: Sequence[str],
        profile: LanguageProfile,
    ) -> SentenceScore:
        """Tokenize and score each sentence, summing the results."""
        total = SentenceScore(score=0.0, word_count=0)
        for sentence in sentences:
            total = total + self.score(tokenize(sentence), profile)
        return total

    def _apply(
        self,
        state: SentenceState,
        token: str,
        profile: LanguageProfile,
    ) -> None:
        if token in profile.negation_words:
            state.negate_pending = True
            return

        multiplier = profile.intensifiers.get(token)
        if multiplier is not None:
            state.intensity_pending = multiplier
            return

        base = profile.lexicon.get(token)
        if base is not None:
            effective = base
            if state.negate_pending:
                effective = -base
                state.negate_pending = False
            state.score += effective * state.intensity_pending
            state.intensity_pending = 1.0

        state.word_count += 1
