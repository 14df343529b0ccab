"""Answer grading for the SEMF core skills test.

Each question range is graded by an explicit strategy: exact letter match,
exact ordering match, a keyword heuristic for short free-text answers and an
essay heuristic. Grading never raises; anything missing or malformed simply
earns no point.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Tuple

from pydantic import Field

from semf.models.answer_key import DEFAULT_ANSWER_KEY, AnswerKey
from semf.models.base import ValueModel
from semf.models.scoring import RawScores
from semf.utils.constants import GradingMethod, QuestionConstants, Skill

AnswerSet = Mapping[int, Any]


def get_answer_text(answers: AnswerSet, question_id: int) -> Optional[str]:
    """Submitted answer as text, or None when the question was not answered."""
    value = answers.get(question_id)
    if value is None:
        return None
    if not isinstance(value, str):
        return str(value)
    return value


class GradingStrategy(ABC):
    """Decides whether a single answer earns its point."""

    method: GradingMethod

    @abstractmethod
    def is_correct(self, question_id: int, answer: Optional[str]) -> bool:
        """Grade one answer.

        Args:
            question_id: Question being graded
            answer: Submitted text, None if unanswered

        Returns:
            bool: True if the answer earns the point
        """


class ExactChoiceStrategy(GradingStrategy):
    """Single-letter answers, case and surrounding whitespace ignored."""

    method = GradingMethod.EXACT_CHOICE

    def __init__(self, expected: Mapping[int, str]):
        self.expected = expected

    def is_correct(self, question_id: int, answer: Optional[str]) -> bool:
        if answer is None:
            return False
        return answer.strip().upper() == self.expected.get(question_id)


class OrderedSequenceStrategy(GradingStrategy):
    """Sentence orderings, which must match the key string exactly.

    Only surrounding whitespace is trimmed; "B,C,D,A" or "b, c, d, a" do not
    match "B, C, D, A".
    """

    method = GradingMethod.ORDERED_SEQUENCE

    def __init__(self, expected: Mapping[int, str]):
        self.expected = expected

    def is_correct(self, question_id: int, answer: Optional[str]) -> bool:
        if answer is None:
            return False
        return answer.strip() == self.expected.get(question_id)


class KeywordHeuristicStrategy(GradingStrategy):
    """Short free-text answers scored on keyword presence and length."""

    method = GradingMethod.KEYWORD_HEURISTIC

    def __init__(
        self,
        keywords: Mapping[int, Sequence[str]],
        min_hits: int = QuestionConstants.KEYWORD_MIN_HITS,
        min_length: int = QuestionConstants.KEYWORD_MIN_LENGTH,
    ):
        self.keywords = keywords
        self.min_hits = min_hits
        self.min_length = min_length

    def count_hits(self, question_id: int, answer: Optional[str]) -> int:
        """Number of the question's keywords appearing anywhere in the answer."""
        text = (answer or "").lower()
        return sum(
            1 for keyword in self.keywords.get(question_id, ()) if keyword.lower() in text
        )

    def is_correct(self, question_id: int, answer: Optional[str]) -> bool:
        raw = answer or ""
        return (
            self.count_hits(question_id, raw) >= self.min_hits
            and len(raw) >= self.min_length
        )


class EssayHeuristicStrategy(GradingStrategy):
    """Essay scored on approximate length and an argument-signal word."""

    method = GradingMethod.ESSAY_HEURISTIC

    def __init__(
        self,
        signals: Iterable[str],
        min_words: int = QuestionConstants.ESSAY_MIN_WORDS,
        max_words: int = QuestionConstants.ESSAY_MAX_WORDS,
    ):
        self.signals = tuple(signal.lower() for signal in signals)
        self.min_words = min_words
        self.max_words = max_words

    @staticmethod
    def count_words(answer: Optional[str]) -> int:
        """Whitespace-delimited word count; 0 for blank answers."""
        text = (answer or "").strip()
        return len(text.split()) if text else 0

    def has_argument(self, answer: Optional[str]) -> bool:
        text = (answer or "").lower()
        return any(signal in text for signal in self.signals)

    def is_correct(self, question_id: int, answer: Optional[str]) -> bool:
        word_count = self.count_words(answer)
        if not self.min_words <= word_count <= self.max_words:
            return False
        return self.has_argument(answer)


class QuestionSection:
    """A contiguous question range graded with one strategy for one skill."""

    def __init__(
        self,
        name: str,
        skill: Skill,
        first_question: int,
        last_question: int,
        strategy: GradingStrategy,
    ):
        self.name = name
        self.skill = skill
        self.first_question = first_question
        self.last_question = last_question
        self.strategy = strategy

    @property
    def question_ids(self) -> range:
        return range(self.first_question, self.last_question + 1)

    def __len__(self) -> int:
        return len(self.question_ids)

    def __repr__(self) -> str:
        return (
            f"QuestionSection({self.name!r}, {self.skill.value}, "
            f"{self.first_question}-{self.last_question}, {self.strategy.method.value})"
        )

    def score(self, answers: AnswerSet) -> int:
        """Count the questions in this section answered correctly."""
        return sum(
            1
            for question_id in self.question_ids
            if self.strategy.is_correct(question_id, get_answer_text(answers, question_id))
        )


class SectionScore(ValueModel):
    """Points earned in one question section."""

    section: str
    skill: Skill
    method: GradingMethod
    first_question: int
    last_question: int
    score: int = Field(..., ge=0)
    max_score: int = Field(..., gt=0)


def build_sections(answer_key: AnswerKey) -> Tuple[QuestionSection, ...]:
    """Build the fixed question-range partition for an answer key."""
    choice = ExactChoiceStrategy(answer_key.choices)
    essay = answer_key.essay_question
    return (
        QuestionSection("grammar_vocabulary", Skill.GRAMMAR_VOCABULARY, 1, 20, choice),
        QuestionSection("story_continuation", Skill.READING_WRITING, 21, 35, choice),
        QuestionSection(
            "sentence_ordering", Skill.READING_WRITING, 36, 40,
            OrderedSequenceStrategy(answer_key.orderings),
        ),
        QuestionSection(
            "reading_text", Skill.READING_WRITING, 41, 43,
            KeywordHeuristicStrategy(answer_key.keywords),
        ),
        QuestionSection(
            "essay", Skill.READING_WRITING, essay, essay,
            EssayHeuristicStrategy(answer_key.essay_signals),
        ),
        QuestionSection("listening", Skill.LISTENING, 45, 56, choice),
    )


class AnswerGrader:
    """Turns an answer set into raw per-skill scores."""

    def __init__(
        self,
        answer_key: AnswerKey = DEFAULT_ANSWER_KEY,
        sections: Optional[Sequence[QuestionSection]] = None,
    ):
        """Initialize the grader.

        Args:
            answer_key: Expected answers
            sections: Custom question partition, defaults to the standard one
        """
        self.answer_key = answer_key
        self.sections = tuple(sections) if sections is not None else build_sections(answer_key)

    def grade_sections(self, answers: AnswerSet) -> List[SectionScore]:
        """Score each question section independently."""
        return [
            SectionScore(
                section=section.name,
                skill=section.skill,
                method=section.strategy.method,
                first_question=section.first_question,
                last_question=section.last_question,
                score=section.score(answers),
                max_score=len(section),
            )
            for section in self.sections
        ]

    def calculate_raw_scores(self, answers: AnswerSet) -> RawScores:
        """Sum section scores into per-skill raw counts.

        Args:
            answers: Question id -> submitted answer

        Returns:
            RawScores: Correct-answer counts per skill
        """
        totals = {skill: 0 for skill in Skill}
        for section_score in self.grade_sections(answers):
            totals[section_score.skill] += section_score.score

        return RawScores(
            grammar_vocabulary=totals[Skill.GRAMMAR_VOCABULARY],
            reading_writing=totals[Skill.READING_WRITING],
            listening=totals[Skill.LISTENING],
        )
