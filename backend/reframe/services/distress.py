# distress detector: scores an entry into an ordinal distress level
# additive, non-negative weights so more signals can never lower the level
#
# signal                                weight
# crisis / self-harm keyword (each)       10   (any hit floors the level at high)
# hopelessness keyword (each)              3
# challenging mood                         2
# recent negative entry (each, max 4)      1
#
# thresholds: severe >= 12, high >= 6, moderate >= 3, else low

import logging
import re
from typing import Optional

from reframe.lexicon import (
    CHALLENGING_MOODS,
    CRISIS_KEYWORDS,
    DISTRESS_RECOMMENDATIONS,
    HOPELESSNESS_KEYWORDS,
)
from reframe.models.distress import DistressLevel, DistressRecord

logger = logging.getLogger(__name__)

CRISIS_WEIGHT = 10.0
HOPELESSNESS_WEIGHT = 3.0
CHALLENGING_MOOD_WEIGHT = 2.0
RECENT_NEGATIVE_WEIGHT = 1.0
RECENT_NEGATIVE_CAP = 4

LEVEL_THRESHOLDS = [
    (12.0, DistressLevel.SEVERE),
    (6.0, DistressLevel.HIGH),
    (3.0, DistressLevel.MODERATE),
]


def _compile(keywords: list[str]) -> list[tuple[str, re.Pattern]]:
    return [(kw, re.compile(r"\b" + re.escape(kw) + r"\b", re.IGNORECASE)) for kw in keywords]


_CRISIS_PATTERNS = _compile(CRISIS_KEYWORDS)
_HOPELESSNESS_PATTERNS = _compile(HOPELESSNESS_KEYWORDS)


def _matches(text: str, patterns: list[tuple[str, re.Pattern]]) -> list[str]:
    return [kw for kw, pattern in patterns if pattern.search(text)]


def level_for_score(score: float) -> DistressLevel:
    for threshold, level in LEVEL_THRESHOLDS:
        if score >= threshold:
            return level
    return DistressLevel.LOW


def detect_distress(
    text: str,
    mood: Optional[str],
    recent_negative_count: int = 0,
    entry_id: Optional[str] = None,
) -> DistressRecord:
    """score one entry. support is only flagged when a textual trigger backs the level;
    mood selection alone never raises the flag."""
    normalized = (text or "").replace("’", "'")

    crisis_hits = _matches(normalized, _CRISIS_PATTERNS)
    hopeless_hits = _matches(normalized, _HOPELESSNESS_PATTERNS)

    score = CRISIS_WEIGHT * len(crisis_hits)
    score += HOPELESSNESS_WEIGHT * len(hopeless_hits)
    if mood in CHALLENGING_MOODS:
        score += CHALLENGING_MOOD_WEIGHT
    score += RECENT_NEGATIVE_WEIGHT * min(max(recent_negative_count, 0), RECENT_NEGATIVE_CAP)

    level = level_for_score(score)
    if crisis_hits and level < DistressLevel.HIGH:
        level = DistressLevel.HIGH

    triggers = crisis_hits + hopeless_hits
    should_show = level >= DistressLevel.MODERATE and bool(triggers)

    if crisis_hits:
        logger.warning(f"Crisis language detected (entry={entry_id}, level={level.value})")

    return DistressRecord(
        entry_id=entry_id,
        level=level,
        score=score,
        triggers=triggers,
        should_show_support=should_show,
        recommendation=DISTRESS_RECOMMENDATIONS[level.value],
    )
