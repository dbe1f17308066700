"""Assessment engine - response collection, scoring and risk classification.

Pure logic with no I/O. One engine instance drives one assessment run:

    AWAITING_RESPONSE(1..N) -> SCORED -> CLASSIFIED

There are no backward transitions and no skipping. The caller owns input
and retries; the engine never advances on an invalid value.
"""
import logging
from datetime import datetime
from enum import Enum
from typing import Any, List, Optional, Sequence, Tuple

from neuroscan.shared.models import (
    AssessmentResult,
    Classification,
    Question,
    RiskTier,
)
from .config import (
    MEMORY_QUESTION_INDEX,
    QUESTIONS,
    RECOMMENDATIONS,
    ScoringThresholds,
)

logger = logging.getLogger(__name__)


class AssessmentError(Exception):
    """Base exception for assessment engine errors."""
    pass


class InvalidResponseError(AssessmentError):
    """Response value outside the question's scale, or not an integer."""

    def __init__(self, question_index: int, value: Any):
        super().__init__(
            f"Invalid response {value!r} for question {question_index}: "
            f"expected 0, 1, or 2"
        )
        self.question_index = question_index
        self.value = value


class IncompleteAssessmentError(AssessmentError):
    """Scoring attempted before every question was answered."""
    pass


class AssessmentSequenceError(AssessmentError):
    """Response recorded out of order or after the run was scored."""
    pass


class EngineState(Enum):
    """Lifecycle of a single assessment run."""
    AWAITING_RESPONSE = "awaiting_response"
    SCORED = "scored"
    CLASSIFIED = "classified"


def classify(
    total_score: int,
    thresholds: Optional[ScoringThresholds] = None,
) -> Classification:
    """Map a total score to a risk tier and recommendation.

    Thresholds are inclusive lower bounds tested high to low, so 16
    resolves to HIGH and 9 to MODERATE.

    Args:
        total_score: Sum of all responses
        thresholds: Tier boundaries (defaults to ScoringThresholds())

    Returns:
        Classification with tier and recommendation text

    Raises:
        ValueError: If total_score is negative
    """
    if total_score < 0:
        raise ValueError(f"Total score must be non-negative, got {total_score}")

    thresholds = thresholds or ScoringThresholds()

    if total_score >= thresholds.HIGH_MIN:
        tier = RiskTier.HIGH
    elif total_score >= thresholds.MODERATE_MIN:
        tier = RiskTier.MODERATE
    else:
        tier = RiskTier.LOW

    return Classification(tier=tier, recommendation=RECOMMENDATIONS[tier])


def parse_response(question_index: int, raw: str) -> int:
    """Parse console text into a response value.

    Raises:
        InvalidResponseError: If raw is not an integer in {0, 1, 2}
    """
    try:
        value = int(raw.strip())
    except (AttributeError, ValueError):
        raise InvalidResponseError(question_index, raw)

    if value not in (0, 1, 2):
        raise InvalidResponseError(question_index, raw)
    return value


class AssessmentEngine:
    """Collects one response per question and classifies the total.

    Responses are held only for the lifetime of the run.
    """

    def __init__(
        self,
        questions: Sequence[Question] = QUESTIONS,
        thresholds: Optional[ScoringThresholds] = None,
    ):
        """Initialize engine for a single run.

        Args:
            questions: Ordered question set, indexed 1..N
            thresholds: Tier boundaries for classification
        """
        if not questions:
            raise ValueError("Question set must not be empty")
        for position, question in enumerate(questions, start=1):
            if question.index != position:
                raise ValueError(
                    f"Question at position {position} has index {question.index}"
                )

        self._questions: Tuple[Question, ...] = tuple(questions)
        self.thresholds = thresholds or ScoringThresholds()
        self._responses: List[int] = []
        self._state = EngineState.AWAITING_RESPONSE

    @property
    def questions(self) -> Tuple[Question, ...]:
        return self._questions

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def responses(self) -> Tuple[int, ...]:
        return tuple(self._responses)

    @property
    def max_score(self) -> int:
        return sum(q.max_points for q in self._questions)

    @property
    def is_complete(self) -> bool:
        return len(self._responses) == len(self._questions)

    @property
    def current_question(self) -> Optional[Question]:
        """The question awaiting a response, or None once all are answered."""
        if self.is_complete:
            return None
        return self._questions[len(self._responses)]

    def record_response(self, question_index: int, value: int) -> None:
        """Store the response for the question currently awaited.

        Args:
            question_index: 1-based index of the question being answered
            value: Response on the 0-2 scale

        Raises:
            InvalidResponseError: If value is not an integer on the scale
            AssessmentSequenceError: If question_index is not the one awaited
        """
        expected = self.current_question
        if self._state is not EngineState.AWAITING_RESPONSE or expected is None:
            raise AssessmentSequenceError(
                f"Cannot record question {question_index}: run is {self._state.value}"
            )
        if question_index != expected.index:
            raise AssessmentSequenceError(
                f"Expected response to question {expected.index}, got {question_index}"
            )
        # bool is an int subclass but never a valid answer
        if isinstance(value, bool) or not isinstance(value, int) or not expected.accepts(value):
            logger.debug(
                "RESPONSE_REJECTED",
                extra={"question_index": question_index, "value": repr(value)}
            )
            raise InvalidResponseError(question_index, value)

        self._responses.append(value)

    def score(self) -> int:
        """Sum of all recorded responses.

        Raises:
            IncompleteAssessmentError: If any question is unanswered
        """
        if not self.is_complete:
            logger.error(
                "SCORE_REQUESTED_BEFORE_COMPLETION",
                extra={
                    "answered": len(self._responses),
                    "required": len(self._questions),
                }
            )
            raise IncompleteAssessmentError(
                f"Only {len(self._responses)} of {len(self._questions)} questions answered"
            )

        if self._state is EngineState.AWAITING_RESPONSE:
            self._state = EngineState.SCORED
        return sum(self._responses)

    def has_frequent_memory_flag(self) -> bool:
        """True iff the memory question was answered 2 (Often).

        Advisory only; does not affect scoring or tier.
        """
        position = MEMORY_QUESTION_INDEX - 1
        if position >= len(self._responses):
            return False
        return self._responses[position] == 2

    def evaluate(
        self,
        subject_name: str,
        is_caregiver: bool = False,
        timestamp: Optional[datetime] = None,
    ) -> AssessmentResult:
        """Score, classify and build the immutable result for this run.

        Args:
            subject_name: Name entered at session start
            is_caregiver: Whether a caregiver filled out the assessment
            timestamp: Time of computation (defaults to now)

        Returns:
            AssessmentResult

        Raises:
            IncompleteAssessmentError: If any question is unanswered
        """
        total = self.score()
        classification = classify(total, self.thresholds)
        self._state = EngineState.CLASSIFIED

        result = AssessmentResult(
            subject_name=subject_name,
            is_caregiver=is_caregiver,
            total_score=total,
            max_score=self.max_score,
            tier=classification.tier,
            recommendation=classification.recommendation,
            frequent_memory_flag=self.has_frequent_memory_flag(),
            timestamp=timestamp or datetime.now(),
        )

        logger.info(
            "ASSESSMENT_CLASSIFIED",
            extra={
                "total_score": total,
                "tier": classification.tier.value,
                "frequent_memory_flag": result.frequent_memory_flag,
                "is_caregiver": is_caregiver,
            }
        )
        return result
