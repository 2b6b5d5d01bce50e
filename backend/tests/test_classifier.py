# tests for the rule-based emotion classifier
# lexicon lookup, length threshold, declaration-order tie-break, manual mood precedence

import pytest

from reframe.lexicon import MOOD_KEYWORDS
from reframe.services.classifier import classify, resolve_mood, tokenize


class TestTokenize:

    def test_lowercases_and_splits(self):
        assert tokenize("I'm SO Anxious, really!") == {"i'm", "so", "anxious", "really"}

    def test_curly_apostrophe_normalized(self):
        assert "can't" in tokenize("I can’t sleep")


class TestClassify:

    def test_detects_anxious(self):
        assert classify("I feel so anxious about the exam tomorrow") == "anxious"

    def test_detects_grateful(self):
        assert classify("Honestly just thankful for my friends this week") == "grateful"

    def test_short_text_is_not_classified(self):
        # 20 characters or fewer never classify
        assert classify("so anxious") is None
        assert classify("x" * 12 + " anxious") is None

    def test_no_match_returns_none(self):
        assert classify("Went to the store and bought some bread and milk") is None

    def test_empty_text(self):
        assert classify("") is None

    def test_tie_broken_by_declaration_order(self):
        # both "happy" and "anxious" keywords present: anxious is declared first
        moods = list(MOOD_KEYWORDS)
        assert moods.index("anxious") < moods.index("happy")
        assert classify("I was happy at first but then got anxious later on") == "anxious"

    def test_whole_tokens_only(self):
        # "madness" must not match the "mad" keyword
        assert classify("The madness of the commute this morning was unreal") is None

    def test_filler_words_do_not_shadow_later_moods(self):
        assert classify("just a calm note today, nothing much") == "peaceful"

    @pytest.mark.parametrize("text", [
        "nothing much happened at work today",
        "went down to the shop after lunch",
        "lost my keys again this morning",
        "the weather was great for a walk",
        "finally got round to the laundry",
    ])
    def test_everyday_words_are_not_mood_signals(self, text):
        assert classify(text) is None

    def test_custom_threshold(self):
        assert classify("so anxious", min_length=5) == "anxious"

    def test_deterministic(self):
        text = "Feeling stressed because of the deadline at work"
        assert classify(text) == classify(text) == "stressed"


class TestResolveMood:

    def test_manual_mood_is_authoritative(self):
        mood, detected = resolve_mood("I feel so anxious about everything today", "happy")
        assert mood == "happy"
        assert detected is False

    def test_classifier_fills_missing_mood(self):
        mood, detected = resolve_mood("I feel so anxious about everything today", None)
        assert mood == "anxious"
        assert detected is True

    def test_no_match_leaves_mood_empty(self):
        mood, detected = resolve_mood("Went to the store and bought some bread", None)
        assert mood is None
        assert detected is False
