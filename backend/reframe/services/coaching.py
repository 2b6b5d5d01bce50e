# coaching generator: short supportive reply for an entry
# message pool by mood category, keyword-matched coping technique for challenging moods

import logging
import random
import re
from typing import Optional

from reframe.lexicon import (
    COPING_KEYWORD_FAMILIES,
    COPING_TECHNIQUES,
    NEUTRAL_RESPONSE,
    POSITIVE_REFLECTION_QUESTION,
    POSITIVE_RESPONSES,
    REFLECTION_QUESTIONS,
    SUPPORTIVE_RESPONSES,
)
from reframe.models.content import CoachingResult, CopingTechnique
from reframe.services.transformation import mood_category

logger = logging.getLogger(__name__)

_default_rng = random.Random()

# one compiled pattern per keyword family, matched anywhere in the text
_FAMILY_PATTERNS = {
    family: re.compile("|".join(rule["patterns"]), re.IGNORECASE)
    for family, rule in COPING_KEYWORD_FAMILIES.items()
}


def categorize_mood(mood: Optional[str]) -> str:
    """positive / challenging / neutral bucket used for coaching"""
    return mood_category(mood)


def match_coping_family(mood: Optional[str], text: str) -> Optional[str]:
    """first keyword family hit by the text (or implied by the mood), in declaration order"""
    normalized = (text or "").replace("’", "'")
    for family, rule in COPING_KEYWORD_FAMILIES.items():
        if _FAMILY_PATTERNS[family].search(normalized) or mood in rule["moods"]:
            return family
    return None


def _technique(key: str) -> CopingTechnique:
    return CopingTechnique(**COPING_TECHNIQUES[key])


def generate_coaching(
    mood: Optional[str],
    text: str,
    reframe_text: str = "",
    rng: Optional[random.Random] = None,
) -> CoachingResult:
    """build the coaching reply for (mood, text, reframe).
    only pool members with no distinguishing signal are picked at random."""
    rng = rng or _default_rng
    category = categorize_mood(mood)

    if category == "positive":
        return CoachingResult(
            message=rng.choice(POSITIVE_RESPONSES),
            reflection_question=POSITIVE_REFLECTION_QUESTION,
        )

    if category == "challenging":
        message = rng.choice(SUPPORTIVE_RESPONSES)
        family = match_coping_family(mood, text)
        if family is not None:
            rule = COPING_KEYWORD_FAMILIES[family]
            technique = _technique(rule["technique"])
            question = rule["question"]
        else:
            technique = _technique(rng.choice(list(COPING_TECHNIQUES)))
            question = rng.choice(REFLECTION_QUESTIONS)
        return CoachingResult(
            message=message,
            reflection_question=question,
            coping_technique=technique,
        )

    return CoachingResult(
        message=NEUTRAL_RESPONSE,
        reflection_question=rng.choice(REFLECTION_QUESTIONS),
    )
