"""Answer key for the SEMF core skills test.

Static reference data: expected letters for the choice sections, the exact
ordering strings for sentence ordering, keyword sets for the free-text reading
questions and the argument-signal words checked in the essay.
"""

from types import MappingProxyType

# Grammar & Vocabulary (1-20), Story Continuation (21-35), Listening (45-56)
CHOICE_ANSWERS = MappingProxyType({
    1: "B", 2: "A", 3: "C", 4: "B", 5: "C",
    6: "C", 7: "B", 8: "A", 9: "C", 10: "A",
    11: "B", 12: "B", 13: "C", 14: "C", 15: "C",
    16: "B", 17: "B", 18: "B", 19: "C", 20: "B",

    21: "C", 22: "C", 23: "B", 24: "D", 25: "B",
    26: "C", 27: "B", 28: "B", 29: "B", 30: "B",
    31: "B", 32: "B", 33: "C", 34: "A", 35: "C",

    45: "B", 46: "B", 47: "C", 48: "B", 49: "B", 50: "C",
    51: "B", 52: "B", 53: "B", 54: "B", 55: "C", 56: "B",
})

# Sentence Ordering (36-40), compared verbatim
ORDERING_ANSWERS = MappingProxyType({
    36: "B, C, D, A",
    37: "C, B, A, D",
    38: "A, C, D, B",
    39: "B, C, D, A",
    40: "C, B, D, A",
})

# Free-text reading questions (41-43)
TEXT_ANSWER_KEYWORDS = MappingProxyType({
    41: ("flexibility", "commute", "talent", "global", "reduced", "access"),
    42: ("isolation", "culture", "security", "challenges", "difficulties"),
    43: ("maximize", "benefits", "mitigate", "drawbacks", "strategies", "developing"),
})

# Essay (44)
ESSAY_QUESTION = 44
ESSAY_ARGUMENT_SIGNALS = ("advantage", "disadvantage", "benefit", "challenge")
