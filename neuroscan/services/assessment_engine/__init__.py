"""Assessment Engine: question set, scoring and risk classification.

Pure logic with no I/O side effects. The Session Service drives the engine
and persists what it produces.

Components:
- config.py: Question set, scoring thresholds, recommendation texts
- engine.py: AssessmentEngine state machine, classify(), parse_response()

Usage:
    from neuroscan.services.assessment_engine import AssessmentEngine
    engine = AssessmentEngine()
    for question in engine.questions:
        engine.record_response(question.index, 1)
    result = engine.evaluate("Alex")
"""

from .config import (
    QUESTIONS,
    SCALE_LABELS,
    RECOMMENDATIONS,
    MEMORY_ADVISORY,
    WEEKLY_CHALLENGE,
    ScoringThresholds,
)
from .engine import (
    AssessmentEngine,
    AssessmentError,
    AssessmentSequenceError,
    EngineState,
    IncompleteAssessmentError,
    InvalidResponseError,
    classify,
    parse_response,
)

__all__ = [
    "QUESTIONS",
    "SCALE_LABELS",
    "RECOMMENDATIONS",
    "MEMORY_ADVISORY",
    "WEEKLY_CHALLENGE",
    "ScoringThresholds",
    "AssessmentEngine",
    "AssessmentError",
    "AssessmentSequenceError",
    "EngineState",
    "IncompleteAssessmentError",
    "InvalidResponseError",
    "classify",
    "parse_response",
]
