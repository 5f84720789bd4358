"""
Voice Sentiment - Tokenizer / Normalizer.

============================================================
RESPONSIBILITY
============================================================
Splits raw text into sentences and sentences into normalized
tokens that can be looked up in a language profile.

- Sentence boundaries: . ! ? and the Devanagari danda (।)
- Consecutive terminators form a single boundary
- Whitespace between terminators still counts as a sentence
- Tokens keep Unicode letters and numbers only
- Tokens are case-folded to lowercase

============================================================
DESIGN PRINCIPLES
============================================================
- Language-agnostic: no per-language rules
- No error conditions: empty input yields an empty list
- The same normalizer is applied to profile keys, so lookups
  compare like with like in every script

============================================================
"""

import re
import unicodedata
from typing import List


# Sentence terminators: ASCII full stop, exclamation, question, danda
SENTENCE_TERMINATORS = ".!?।"

SENTENCE_SPLIT_PATTERN = re.compile(f"[{re.escape(SENTENCE_TERMINATORS)}]+")

WHITESPACE_PATTERN = re.compile(r"\s+")

# Unicode general categories kept in a token: letters and numbers
_KEPT_CATEGORIES = ("L", "N")


def segment(text: str) -> List[str]:
    """
    Split text into sentence fragments.

    Args:
        text: Raw text

    Returns:
        Whitespace-trimmed sentence strings in order. Only empty
        fragments are dropped; a whitespace-only fragment (". . ")
        is kept as a sentence with no words.
    """
    if not text:
        return []

    fragments = SENTENCE_SPLIT_PATTERN.split(text)
    return [f.strip() for f in fragments if f]


def normalize_token(raw: str) -> str:
    """
    Normalize a single raw word.

    NFKC-normalizes, removes every character that is not a Unicode
    letter or number, then lowercases. May return an empty string.
    """
    if not raw:
        return ""

    text = unicodedata.normalize("NFKC", raw)
    kept = "".join(
        ch for ch in text
        if unicodedata.category(ch).startswith(_KEPT_CATEGORIES)
    )
    return kept.lower()


def tokenize(sentence: str) -> List[str]:
    """
    Split a sentence into normalized tokens.

    Pieces that normalize to an empty string are dropped and never
    count toward word totals.
    """
    if not sentence:
        return []

    tokens = []
    for piece in WHITESPACE_PATTERN.split(sentence.strip()):
        token = normalize_token(piece)
        if token:
            tokens.append(token)
    return tokens
