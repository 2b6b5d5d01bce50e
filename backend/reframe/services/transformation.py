# transformation generator: 4-step emotional reframe narrative
# two content tables behind one step shape: standard and inner-child
#
# standard:     acknowledge -> reflect -> reframe -> act
# inner-child:  acknowledgment -> affirmations -> comfort -> renewal action
# step 3 is the only step carrying an actionable description.

import logging
import random
from typing import Optional

from reframe.lexicon import (
    CHALLENGING_MOODS,
    DEFAULT_MOOD,
    DEFAULT_TRANSFORMATION,
    INNER_CHILD_AFFIRMATION_COUNTS,
    INNER_CHILD_AFFIRMATIONS,
    INNER_CHILD_COMFORT,
    INNER_CHILD_PROMPTS,
    INNER_CHILD_RENEWAL,
    INNER_CHILD_RESPONSES,
    POSITIVE_MOODS,
    REFRAME_MESSAGES,
    TRANSFORMATION_ACTION_PROMPTS,
    TRANSFORMATION_TEMPLATES,
    TRANSFORMATION_TITLES,
)
from reframe.models.content import Transformation, TransformationStep
from reframe.models.journal import Mode

logger = logging.getLogger(__name__)

_default_rng = random.Random()


def mood_category(mood: Optional[str]) -> str:
    """bucket a mood into positive / challenging / neutral"""
    if mood in POSITIVE_MOODS:
        return "positive"
    if mood in CHALLENGING_MOODS:
        return "challenging"
    return "neutral"


def get_random_reframe(rng: Optional[random.Random] = None) -> str:
    """one line from the general reframe pool"""
    return (rng or _default_rng).choice(REFRAME_MESSAGES)


def random_inner_child_prompt(rng: Optional[random.Random] = None) -> dict:
    """intro/question pair shown above the editor in inner-child mode"""
    return dict((rng or _default_rng).choice(INNER_CHILD_PROMPTS))


def inner_child_response(mood: Optional[str], rng: Optional[random.Random] = None) -> str:
    return (rng or _default_rng).choice(INNER_CHILD_RESPONSES[mood_category(mood)])


def inner_child_affirmations(mood: Optional[str], rng: Optional[random.Random] = None) -> list[str]:
    """affirmations sampled without repeats; the count is fixed per mood category"""
    category = mood_category(mood)
    pool = INNER_CHILD_AFFIRMATIONS[category]
    return (rng or _default_rng).sample(pool, INNER_CHILD_AFFIRMATION_COUNTS[category])


def inner_child_renewal_step(mood: Optional[str], rng: Optional[random.Random] = None) -> str:
    return (rng or _default_rng).choice(INNER_CHILD_RENEWAL[mood_category(mood)])


def _template_for(mood: Optional[str]) -> dict:
    """mood bundle, or the neutral bundle for an unknown/absent mood"""
    mood = mood or DEFAULT_MOOD
    template = TRANSFORMATION_TEMPLATES.get(mood)
    if template is None:
        if mood != DEFAULT_MOOD:
            logger.warning(f"No transformation templates for mood '{mood}', using default content")
        template = DEFAULT_TRANSFORMATION
    return template


def _standard_steps(mood: Optional[str], text: str, rng: random.Random) -> list[TransformationStep]:
    template = _template_for(mood)
    general_reframe = get_random_reframe(rng)
    action = rng.choice(template["action"])

    return [
        TransformationStep(
            index=0,
            title=TRANSFORMATION_TITLES[0],
            content=template["acknowledge"],
            action_prompt=TRANSFORMATION_ACTION_PROMPTS[0],
        ),
        TransformationStep(
            index=1,
            title=TRANSFORMATION_TITLES[1],
            content=template["reflect"],
            action_prompt=TRANSFORMATION_ACTION_PROMPTS[1],
        ),
        TransformationStep(
            index=2,
            title=TRANSFORMATION_TITLES[2],
            content=f"{template['reframe']} {general_reframe}",
            action_prompt=TRANSFORMATION_ACTION_PROMPTS[2],
        ),
        TransformationStep(
            index=3,
            title=TRANSFORMATION_TITLES[3],
            content="Turn this insight into one small, kind action for yourself.",
            action_prompt=TRANSFORMATION_ACTION_PROMPTS[3],
            description=action,
        ),
    ]


def _inner_child_steps(mood: Optional[str], text: str, rng: random.Random) -> list[TransformationStep]:
    category = mood_category(mood)
    if mood and mood != DEFAULT_MOOD and mood not in TRANSFORMATION_TEMPLATES:
        logger.warning(f"Unknown mood '{mood}' in inner-child mode, using neutral content")

    return [
        TransformationStep(
            index=0,
            title="Your Younger Self Hears You",
            content=inner_child_response(mood, rng),
        ),
        TransformationStep(
            index=1,
            title="Inner Child Affirmations",
            content="Gentle truths for your younger self",
            affirmations=inner_child_affirmations(mood, rng),
        ),
        TransformationStep(
            index=2,
            title="Comfort & Nurture",
            content=INNER_CHILD_COMFORT[category],
        ),
        TransformationStep(
            index=3,
            title="Healing Action",
            content="One gentle thing you can do for your younger self today",
            description=inner_child_renewal_step(mood, rng),
        ),
    ]


_BUILDERS = {
    Mode.STANDARD: _standard_steps,
    Mode.INNER_CHILD: _inner_child_steps,
}


def generate_transformation(
    mood: Optional[str],
    text: str,
    mode: Mode = Mode.STANDARD,
    rng: Optional[random.Random] = None,
) -> Transformation:
    """build exactly four ordered steps for (mood, text, mode).
    never fails on an unknown mood: falls back to neutral content."""
    mode = Mode(mode)
    steps = _BUILDERS[mode](mood, text, rng or _default_rng)
    return Transformation(mode=mode.value, mood=mood or DEFAULT_MOOD, steps=steps)


def headline_reframe(
    transformation: Transformation,
    rng: Optional[random.Random] = None,
) -> str:
    """the single reframe line saved with the entry and handed to the coach"""
    if transformation.mode == Mode.INNER_CHILD.value:
        return transformation.steps[0].content
    return get_random_reframe(rng)
