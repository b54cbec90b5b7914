"""
Multiple-choice quiz runner.
"""
from .models import AnswerOutcome, AnswerRecord, Question, QuestionView, QuizSettings, QuizSummary
from .quiz_engine import make_shuffler, shuffle
from .quiz_session import (
    AlreadyAnsweredError,
    EmptyBankError,
    InvalidJumpTargetError,
    InvalidOptionError,
    QuizSession,
    QuizSessionError,
    SessionNotStartedError,
)

__all__ = [
    "AlreadyAnsweredError",
    "AnswerOutcome",
    "AnswerRecord",
    "EmptyBankError",
    "InvalidJumpTargetError",
    "InvalidOptionError",
    "Question",
    "QuestionView",
    "QuizSession",
    "QuizSessionError",
    "QuizSettings",
    "QuizSummary",
    "SessionNotStartedError",
    "make_shuffler",
    "shuffle",
]
