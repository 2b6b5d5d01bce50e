# static lexicon and content pools
# single source of truth for moods, keywords and every piece of generated copy
#
# everything here is read-only. dict/list declaration order is significant:
# the classifier breaks ties by MOOD_KEYWORDS order and the coaching scan
# checks COPING_KEYWORD_FAMILIES in order.

# canonical mood labels offered by the mood picker
MOODS = [
    "happy", "sad", "anxious", "frustrated", "tired", "confused", "loved", "angry",
    "hurt", "peaceful", "worried", "vulnerable", "disappointed", "content", "stressed",
    "grateful", "overwhelmed", "numb", "hopeful", "guilty", "embarrassed", "skeptical",
    "relieved", "uncertain",
]

POSITIVE_MOODS = frozenset(["happy", "loved", "peaceful", "content", "grateful", "hopeful", "relieved"])
CHALLENGING_MOODS = frozenset([
    "sad", "anxious", "frustrated", "angry", "hurt", "worried", "stressed", "overwhelmed", "guilty",
])

DEFAULT_MOOD = "neutral"

# mood -> trigger words for the classifier (first intersecting mood wins)
# everyday filler words stay out so they can't shadow a later, clearer mood
MOOD_KEYWORDS = {
    "anxious": {"anxious", "anxiety", "panic", "panicking", "nervous", "uneasy", "restless", "jittery"},
    "worried": {"worried", "worry", "worrying", "afraid", "scared", "fear", "dread"},
    "overwhelmed": {"overwhelmed", "overwhelming", "drowning", "swamped", "buried"},
    "stressed": {"stressed", "stress", "pressure", "deadline", "deadlines", "tense"},
    "angry": {"angry", "furious", "rage", "mad", "livid", "pissed"},
    "frustrated": {"frustrated", "frustrating", "annoyed", "irritated", "stuck"},
    "sad": {"sad", "depressed", "crying", "cried", "tears", "lonely", "miserable", "unhappy"},
    "hurt": {"hurt", "betrayed", "rejected", "abandoned", "heartbroken", "wounded"},
    "guilty": {"guilty", "guilt", "ashamed", "regret", "sorry", "fault"},
    "disappointed": {"disappointed", "disappointing", "letdown", "failed", "failure"},
    "embarrassed": {"embarrassed", "embarrassing", "humiliated", "awkward", "cringe"},
    "vulnerable": {"vulnerable", "exposed", "fragile", "defenseless"},
    "numb": {"numb", "empty", "hollow", "disconnected"},
    "tired": {"tired", "exhausted", "drained", "sleepy", "fatigued", "burnout"},
    "confused": {"confused", "unclear", "puzzled", "torn"},
    "uncertain": {"uncertain", "unsure", "doubt", "undecided"},
    "skeptical": {"skeptical", "doubtful", "suspicious", "unconvinced"},
    "grateful": {"grateful", "thankful", "blessed", "appreciate", "appreciative", "gratitude"},
    "loved": {"loved", "cherished", "adored", "cared", "hugged"},
    "hopeful": {"hopeful", "hope", "optimistic", "excited"},
    "relieved": {"relieved", "relief", "phew"},
    "peaceful": {"peaceful", "calm", "serene", "relaxed", "quiet", "tranquil"},
    "content": {"content", "satisfied", "comfortable"},
    "happy": {"happy", "joy", "joyful", "glad", "wonderful", "amazing", "awesome"},
}

# general reframe lines mixed into every standard transformation
REFRAME_MESSAGES = [
    "Every emotion is a teacher. What is this feeling trying to show you?",
    "You're experiencing this because you care deeply. That's a strength.",
    "Feelings are temporary visitors. This moment will pass, and you'll carry forward the wisdom.",
    "By acknowledging this emotion, you're already practicing courage and self-awareness.",
    "Your feelings are valid. They're part of your unique human experience.",
    "This emotion is information, not your identity. You are bigger than this moment.",
    "You've felt difficult things before and grown from them. You will again.",
    "Expressing your emotions is an act of self-care and healing.",
    "Every feeling you process makes space for more joy and peace.",
    "You're transforming pain into understanding. That's powerful growth.",
    "This emotion shows you're alive, present, and deeply feeling. That's beautiful.",
    "By naming your feelings, you're taking the first step toward freedom.",
    "Your emotional honesty is a gift you give yourself.",
    "Difficult emotions often precede meaningful breakthroughs.",
    "You're not stuck in this feeling. You're moving through it with intention.",
]

# standard-mode transformation bundles
# acknowledge/reflect/reframe are single lines, action is a pool of concrete suggestions
TRANSFORMATION_TEMPLATES = {
    "happy": {
        "acknowledge": "You're feeling happy, and that deserves to be noticed.",
        "reflect": "What made today feel good? Naming it helps you find it again.",
        "reframe": "Joy isn't a fluke. It grows from the choices and people you let in.",
        "action": [
            "Write down three things that contributed to this feeling.",
            "Share one good moment from today with someone you care about.",
        ],
    },
    "sad": {
        "acknowledge": "You're feeling sad. It's okay to sit with that for a moment.",
        "reflect": "Sadness often points to something that matters to you. What might it be?",
        "reframe": "Sadness is a sign of how deeply you can care, not a sign of weakness.",
        "action": [
            "Reach out to one person you trust and tell them how you're feeling.",
            "Take a 10-minute walk outside and notice what you see.",
        ],
    },
    "anxious": {
        "acknowledge": "You're feeling anxious. Your body is trying to protect you.",
        "reflect": "Which part of this worry is about right now, and which part is about a future that hasn't happened?",
        "reframe": "Anxiety is energy looking for a direction. You can give it one.",
        "action": [
            "Do four rounds of box breathing: in for 4, hold for 4, out for 4, hold for 4.",
            "Write the worry down, then write one thing you can do about it today.",
        ],
    },
    "frustrated": {
        "acknowledge": "You're feeling frustrated. Something isn't going the way you need it to.",
        "reflect": "What expectation wasn't met here, and was it yours or someone else's?",
        "reframe": "Frustration shows you where you want change. That's useful information.",
        "action": [
            "Step away for five minutes and move your body before coming back to it.",
            "Break the stuck task into the smallest possible next step and do only that.",
        ],
    },
    "tired": {
        "acknowledge": "You're feeling tired. Your body and mind are asking for care.",
        "reflect": "What has been taking the most energy from you lately?",
        "reframe": "Rest isn't something you earn. It's something you need.",
        "action": [
            "Plan a screen-free wind-down 30 minutes before bed tonight.",
            "Cross one non-essential task off today's list and let it go.",
        ],
    },
    "confused": {
        "acknowledge": "You're feeling confused. Not knowing yet is a normal part of figuring things out.",
        "reflect": "What is the one question that, if answered, would make this clearer?",
        "reframe": "Confusion comes right before understanding. You're in the middle of learning.",
        "action": [
            "Write the situation down as if explaining it to a friend.",
            "List what you know for sure and what you're still guessing.",
        ],
    },
    "loved": {
        "acknowledge": "You're feeling loved. Let that warmth land.",
        "reflect": "Who or what helped you feel this way today?",
        "reframe": "Being loved reflects the connections you've built and nurtured.",
        "action": [
            "Send a message of thanks to someone who made you feel cared for.",
            "Write down what love looked like today so you can return to it.",
        ],
    },
    "angry": {
        "acknowledge": "You're feeling angry. That's a powerful signal worth listening to.",
        "reflect": "What boundary or value feels like it was crossed?",
        "reframe": "Anger can protect what matters to you when you channel it with care.",
        "action": [
            "Try progressive muscle relaxation, starting from your toes.",
            "Write an unsent letter saying everything you feel, then set it aside.",
        ],
    },
    "hurt": {
        "acknowledge": "You're feeling hurt. That pain is real and deserves gentleness.",
        "reflect": "What do you need right now that you aren't getting?",
        "reframe": "Being hurt shows your capacity for connection. That capacity is not a flaw.",
        "action": [
            "Place a hand on your heart and say one kind thing to yourself.",
            "Do something comforting for yourself in the next hour.",
        ],
    },
    "peaceful": {
        "acknowledge": "You're feeling peaceful. What a good place to rest.",
        "reflect": "What helped create this calm today?",
        "reframe": "Peace is a skill you're practicing, not just a mood that happened to you.",
        "action": [
            "Take two minutes to simply notice your breath and savor this calm.",
            "Note what helped you feel this way so you can recreate it.",
        ],
    },
    "worried": {
        "acknowledge": "You're feeling worried. Your mind is trying to prepare you.",
        "reflect": "What is the most likely outcome, not the worst one?",
        "reframe": "Worry means you care about the outcome. You can care without carrying all of it.",
        "action": [
            "Set a 10-minute worry window today and postpone worries until then.",
            "Write down one thing within your control and one you can let go of.",
        ],
    },
    "vulnerable": {
        "acknowledge": "You're feeling vulnerable. Being open takes courage.",
        "reflect": "Where do you feel safe enough to let this feeling be seen?",
        "reframe": "Vulnerability is where connection and courage begin.",
        "action": [
            "Share a small part of how you feel with someone safe.",
            "Wrap yourself in something warm and give yourself five quiet minutes.",
        ],
    },
    "disappointed": {
        "acknowledge": "You're feeling disappointed. You hoped for something and it didn't happen.",
        "reflect": "What did this hope tell you about what you want?",
        "reframe": "Disappointment means you dared to hope. That hope is still yours.",
        "action": [
            "Write down one thing you learned from how this turned out.",
            "Name one small next step toward what you still want.",
        ],
    },
    "content": {
        "acknowledge": "You're feeling content. Enough can feel wonderful.",
        "reflect": "What parts of your life feel balanced right now?",
        "reframe": "Contentment is the quiet proof that what you have is meaningful.",
        "action": [
            "Write down three things that feel just right today.",
            "Spend ten minutes doing something simple that you enjoy.",
        ],
    },
    "stressed": {
        "acknowledge": "You're feeling stressed. A lot is asking for your attention.",
        "reflect": "Which of these demands truly has to happen today?",
        "reframe": "Stress means you're stretching. You can choose where to set things down.",
        "action": [
            "Try the 5-4-3-2-1 grounding exercise to come back to the present.",
            "Pick the single most important task and block 25 minutes for it.",
        ],
    },
    "grateful": {
        "acknowledge": "You're feeling grateful. That's a beautiful lens on your life.",
        "reflect": "What are you most thankful for in this moment?",
        "reframe": "Gratitude multiplies when it's noticed and shared.",
        "action": [
            "Write a short thank-you note to someone who made a difference.",
            "Add three entries to a gratitude list before bed.",
        ],
    },
    "overwhelmed": {
        "acknowledge": "You're feeling overwhelmed. It makes sense when everything arrives at once.",
        "reflect": "If you could only do one thing today, what would it be?",
        "reframe": "You don't have to carry it all at once. One step is still progress.",
        "action": [
            "Write everything down, then circle only the next single step.",
            "Ask someone for help with one item on your list.",
        ],
    },
    "numb": {
        "acknowledge": "You're feeling numb. Sometimes the mind pauses feeling to protect you.",
        "reflect": "When did you last feel something clearly? What was happening then?",
        "reframe": "Numbness is a resting state, not a permanent one.",
        "action": [
            "Engage one sense on purpose: hold something warm or listen to a favorite song.",
            "Take a short walk and name five things you can see.",
        ],
    },
    "hopeful": {
        "acknowledge": "You're feeling hopeful. Something is opening up.",
        "reflect": "What are you looking forward to, and why does it matter?",
        "reframe": "Hope is the first step of every change you've ever made.",
        "action": [
            "Write down one goal this hope points toward.",
            "Take one small action today toward what you're hoping for.",
        ],
    },
    "guilty": {
        "acknowledge": "You're feeling guilty. That often means your values matter to you.",
        "reflect": "Is this guilt asking you to repair something, or to forgive yourself?",
        "reframe": "Guilt can guide growth without defining who you are.",
        "action": [
            "If repair is needed, write down one step to make amends.",
            "Speak to yourself the way you would to a friend who made the same mistake.",
        ],
    },
    "embarrassed": {
        "acknowledge": "You're feeling embarrassed. That sting is very human.",
        "reflect": "Will this moment matter a week from now? A year from now?",
        "reframe": "Everyone has moments like this. They make us relatable, not less.",
        "action": [
            "Tell the story to yourself with kindness and a touch of humor.",
            "Do one thing today that reminds you of your strengths.",
        ],
    },
    "skeptical": {
        "acknowledge": "You're feeling skeptical. Questioning things is healthy.",
        "reflect": "What evidence would help you feel more certain either way?",
        "reframe": "Skepticism keeps you thoughtful. You can stay curious at the same time.",
        "action": [
            "Write down what you doubt and what would change your mind.",
            "Talk it through with someone whose judgment you trust.",
        ],
    },
    "relieved": {
        "acknowledge": "You're feeling relieved. Something heavy has lifted.",
        "reflect": "What helped you get through what came before?",
        "reframe": "Relief is proof that hard moments do pass.",
        "action": [
            "Take three slow breaths and let your body register the release.",
            "Write down what you did that helped, for the next hard moment.",
        ],
    },
    "uncertain": {
        "acknowledge": "You're feeling uncertain. Not every answer comes right away.",
        "reflect": "What feels steady in your life even while this is unclear?",
        "reframe": "Uncertainty leaves room for possibilities you haven't imagined yet.",
        "action": [
            "List two possible paths forward and one small step for each.",
            "Focus on one thing you can control today.",
        ],
    },
}

# fallback bundle for unknown/absent moods
DEFAULT_TRANSFORMATION = {
    "acknowledge": "Thank you for taking a moment to check in with yourself.",
    "reflect": "What feeling is most present for you as you read back what you wrote?",
    "reframe": "Whatever you're feeling, noticing it is already an act of care.",
    "action": [
        "Take three slow, deep breaths and notice how your body feels.",
        "Write down one thing you need today and one way to give it to yourself.",
    ],
}

TRANSFORMATION_TITLES = ["Acknowledge", "Reflect", "Reframe", "Act"]

TRANSFORMATION_ACTION_PROMPTS = [
    "Notice where you feel this in your body.",
    "Take a breath before answering.",
    "Read this line twice and let it settle.",
    "Choose one small step you can take today.",
]

# inner-child mode content, keyed by mood category
INNER_CHILD_PROMPTS = [
    {"intro": "Hello, little one. I'm here.", "question": "What does your younger self need to hear today?"},
    {"intro": "You're safe here.", "question": "What would you tell the child you used to be about today?"},
    {"intro": "Let's be gentle together.", "question": "What is your inner child feeling right now?"},
    {"intro": "Your younger self is listening.", "question": "What did you need back then that you still need now?"},
]

INNER_CHILD_RESPONSES = {
    "challenging": [
        "Little one, I see how hard this feels. You don't have to hold it alone anymore.",
        "It makes sense that you feel this way. Your feelings were always allowed.",
        "I'm here now, and I'm not going anywhere. We'll get through this together.",
    ],
    "positive": [
        "Look at you shining! Your younger self would be so proud of this moment.",
        "This joy belongs to you. You always deserved to feel this good.",
    ],
    "neutral": [
        "I hear you, little one. Whatever you're feeling is welcome here.",
        "Thank you for letting me listen. You matter, just as you are.",
    ],
}

INNER_CHILD_AFFIRMATIONS = {
    "challenging": [
        "You are safe now.",
        "It was never your fault.",
        "Your feelings matter.",
        "You are allowed to rest.",
        "You don't have to be perfect to be loved.",
        "I will take care of you.",
        "You are not too much.",
    ],
    "positive": [
        "You deserve every bit of this happiness.",
        "You are allowed to take up space.",
        "Your joy is important.",
        "You are loved just as you are.",
        "You can play and be free.",
    ],
    "neutral": [
        "You are enough.",
        "You are worthy of kindness.",
        "You can be curious about your feelings.",
        "You belong here.",
        "Your voice matters.",
    ],
}

# affirmation list length per mood category (fixed)
INNER_CHILD_AFFIRMATION_COUNTS = {"challenging": 4, "positive": 3, "neutral": 3}

INNER_CHILD_COMFORT = {
    "challenging": "Imagine holding your younger self close. You are giving yourself the comfort you always needed.",
    "positive": "Let your younger self celebrate with you. This happiness is safe to feel.",
    "neutral": "You are giving yourself what you always needed: attention, patience and care.",
}

INNER_CHILD_RENEWAL = {
    "challenging": [
        "Wrap yourself in a soft blanket and rest for ten minutes without any task.",
        "Write a short letter to your younger self saying what you wish you had heard.",
        "Make yourself a warm drink and sip it slowly, like a gift to your younger self.",
    ],
    "positive": [
        "Do something playful today that your younger self would have loved.",
        "Put on a favorite song from childhood and let yourself move to it.",
    ],
    "neutral": [
        "Spend five minutes drawing, doodling or coloring with no goal at all.",
        "Go outside and notice something small and beautiful, the way a child would.",
    ],
}

# coaching response pools
POSITIVE_RESPONSES = [
    "That's a wonderful perspective! You're showing real emotional awareness.",
    "It's beautiful to see you recognizing these positive feelings.",
    "You're doing great work processing these emotions.",
    "This kind of reflection is so valuable for your growth.",
]

SUPPORTIVE_RESPONSES = [
    "It sounds like you're dealing with something challenging.",
    "I hear you, and what you're feeling is completely valid.",
    "Thank you for sharing something so personal.",
    "It takes courage to acknowledge these feelings.",
]

NEUTRAL_RESPONSE = "Thank you for taking time to reflect on your emotions today."
POSITIVE_REFLECTION_QUESTION = "How can you carry this positive energy into the rest of your day?"

REFLECTION_QUESTIONS = [
    "What would you tell a friend going through the same situation?",
    "How might you view this situation a week from now?",
    "What's one small step you could take to care for yourself right now?",
    "What part of this situation is within your control?",
    "What have you learned about yourself through this experience?",
    "What would self-compassion look like in this moment?",
]

COPING_TECHNIQUES = {
    "box_breathing": {
        "title": "Box Breathing",
        "description": "A calming technique used by Navy SEALs to reduce stress",
        "steps": [
            "Breathe in slowly for 4 counts",
            "Hold your breath for 4 counts",
            "Exhale slowly for 4 counts",
            "Hold empty for 4 counts",
            "Repeat 4 times",
        ],
    },
    "grounding": {
        "title": "5-4-3-2-1 Grounding",
        "description": "Bring yourself to the present moment",
        "steps": [
            "Name 5 things you can see",
            "Name 4 things you can touch",
            "Name 3 things you can hear",
            "Name 2 things you can smell",
            "Name 1 thing you can taste",
        ],
    },
    "muscle_relaxation": {
        "title": "Progressive Muscle Relaxation",
        "description": "Release physical tension from your body",
        "steps": [
            "Start with your toes, tense them for 5 seconds",
            "Release and notice the relaxation",
            "Move up to your calves, then thighs",
            "Continue through your body to your face",
            "End with a full body scan of relaxation",
        ],
    },
    "journaling": {
        "title": "Journaling Prompt",
        "description": "Explore your thoughts deeper",
        "steps": [
            "Set a timer for 5 minutes",
            "Write continuously without editing",
            "Focus on what you're feeling right now",
            "End by writing one thing you're grateful for",
        ],
    },
    "self_compassion": {
        "title": "Self-Compassion Break",
        "description": "Treat yourself with kindness",
        "steps": [
            "Place your hand on your heart",
            "Say: 'This is a moment of suffering'",
            "Say: 'Suffering is part of life'",
            "Say: 'May I be kind to myself'",
            "Take three deep breaths",
        ],
    },
}

# keyword family -> (regex alternatives, moods that imply it, technique key, reflection question)
COPING_KEYWORD_FAMILIES = {
    "anxiety": {
        "patterns": ["anxious", "anxiety", "worried", "panic", "nervous"],
        "moods": {"anxious", "worried"},
        "technique": "box_breathing",
        "question": "What's one worry you could set aside for just the next hour?",
    },
    "overwhelm": {
        "patterns": ["overwhelm", "too much", "can'?t handle", "drowning"],
        "moods": {"overwhelmed", "stressed"},
        "technique": "grounding",
        "question": "What's the smallest, most manageable task you could focus on right now?",
    },
    "anger": {
        "patterns": ["angry", "frustrated", "annoyed", "irritated", "mad"],
        "moods": {"angry", "frustrated"},
        "technique": "muscle_relaxation",
        "question": "What boundary might you need to set to protect your peace?",
    },
    "sadness": {
        "patterns": ["sad", "depressed", "down", "hopeless", "empty"],
        "moods": {"sad", "hurt"},
        "technique": "self_compassion",
        "question": "What would comfort look like for you right now?",
    },
}

# distress keyword families (matched on word boundaries, case-insensitive)
CRISIS_KEYWORDS = [
    "suicide", "suicidal", "kill myself", "killing myself", "end my life", "end it all",
    "want to die", "wanna die", "better off dead", "self harm", "self-harm", "hurt myself",
    "cut myself", "cutting myself", "no reason to live", "overdose",
]

HOPELESSNESS_KEYWORDS = [
    "hopeless", "worthless", "pointless", "no way out", "give up", "giving up",
    "can't go on", "cant go on", "nothing matters", "no point", "burden", "trapped",
    "unlovable", "useless", "empty inside", "no future",
]

DISTRESS_RECOMMENDATIONS = {
    "low": "Keep journaling. Noticing your feelings is a healthy habit.",
    "moderate": "It might help to talk with someone you trust or try one of the coping tools.",
    "high": "You don't have to face this alone. Consider reaching out to a licensed therapist, "
            "or text HOME to 741741 to reach the Crisis Text Line.",
    "severe": "Your safety matters. Please call or text 988 (Suicide & Crisis Lifeline) now, "
              "or text HOME to 741741. If you are in immediate danger, call emergency services.",
}

# achievement table, ordered: (key, metric, threshold)
ACHIEVEMENTS = [
    ("first_entry", "entries", 1),
    ("entries_10", "entries", 10),
    ("entries_50", "entries", 50),
    ("entries_100", "entries", 100),
    ("streak_3", "streak", 3),
    ("streak_7", "streak", 7),
    ("streak_30", "streak", 30),
]

# reward points per event
REWARD_POINTS = {
    "journal_entry": 10,
    "transformation_complete": 25,
    "action_completed": 15,
}
