"""Shared fixtures for the SEMF test suite."""

import os

os.environ.setdefault("APP_ENV", "test")

from typing import Dict, Optional  # noqa: E402

import pytest  # noqa: E402

from semf.data.answer_key import (  # noqa: E402
    CHOICE_ANSWERS,
    ORDERING_ANSWERS,
)

TEXT_ANSWERS = {
    41: "Flexibility, no daily commute and access to global talent.",
    42: "Isolation and a weaker company culture are the main challenges.",
    43: "To maximize the benefits of remote work and mitigate its drawbacks.",
}

ESSAY = " ".join(
    ["Remote work offers a real benefit for employees and employers alike."] * 10
)


def make_answers(
    grammar: int = 0,
    story: int = 0,
    ordering: int = 0,
    text: int = 0,
    essay: bool = False,
    listening: int = 0,
) -> Dict[int, Optional[str]]:
    """Answer set with the first N questions of each section answered correctly.

    Only the correctly answered questions are included.
    """
    answers: Dict[int, Optional[str]] = {}
    for question_id in range(1, 1 + grammar):
        answers[question_id] = CHOICE_ANSWERS[question_id]
    for question_id in range(21, 21 + story):
        answers[question_id] = CHOICE_ANSWERS[question_id]
    for question_id in range(36, 36 + ordering):
        answers[question_id] = ORDERING_ANSWERS[question_id]
    for question_id in range(41, 41 + text):
        answers[question_id] = TEXT_ANSWERS[question_id]
    if essay:
        answers[44] = ESSAY
    for question_id in range(45, 45 + listening):
        answers[question_id] = CHOICE_ANSWERS[question_id]
    return answers


@pytest.fixture
def all_correct_answers() -> Dict[int, Optional[str]]:
    """Every question answered correctly."""
    return make_answers(grammar=20, story=15, ordering=5, text=3, essay=True, listening=12)


@pytest.fixture
def essay_text() -> str:
    """A 110-word essay containing an argument signal."""
    return ESSAY


@pytest.fixture
def answer_factory():
    """Builder for answer sets with a chosen number of correct answers per section."""
    return make_answers
