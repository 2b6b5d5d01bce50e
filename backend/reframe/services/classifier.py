# rule-based emotion classifier
# lexicon lookup over word tokens: deterministic and explainable, no model
#
# the first mood in MOOD_KEYWORDS order whose keyword set intersects the
# text's tokens wins. a mood picked manually is never overridden.

import logging
import re
from typing import Optional

from reframe.config import settings
from reframe.lexicon import MOOD_KEYWORDS

logger = logging.getLogger(__name__)

_TOKEN_RE = re.compile(r"[a-z]+(?:'[a-z]+)?")


def tokenize(text: str) -> set[str]:
    """lower-case word tokens (apostrophes kept inside words)"""
    normalized = text.lower().replace("’", "'")
    return set(_TOKEN_RE.findall(normalized))


def classify(text: str, min_length: Optional[int] = None) -> Optional[str]:
    """infer a mood label from raw text. returns None when nothing matches
    or the text is too short to classify reliably."""
    if not text:
        return None
    threshold = settings.MIN_CLASSIFY_LENGTH if min_length is None else min_length
    if len(text.strip()) <= threshold:
        return None

    tokens = tokenize(text)
    for mood, keywords in MOOD_KEYWORDS.items():
        if tokens & keywords:
            return mood
    return None


def resolve_mood(text: str, selected_mood: Optional[str]) -> tuple[Optional[str], bool]:
    """pick the mood for an entry.
    returns (mood, detected): detected is True only when the classifier filled it."""
    if selected_mood:
        return selected_mood, False
    detected = classify(text)
    if detected:
        logger.info(f"Detected mood '{detected}' from entry text")
    return detected, detected is not None
