"""
Core data models for the quiz runner.
"""
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple


@dataclass(frozen=True)
class Question:
    """Represents a single multiple-choice question."""
    text: str
    options: Tuple[str, ...]
    correct_index: int

    def __post_init__(self):
        if isinstance(self.options, str):
            raise ValueError(f"Question '{self.text}' options must be a sequence of strings, not a string")
        object.__setattr__(self, 'options', tuple(self.options))
        if len(self.options) < 2:
            raise ValueError(f"Question '{self.text}' needs at least 2 options, got {len(self.options)}")
        if not 0 <= self.correct_index < len(self.options):
            raise ValueError(
                f"Question '{self.text}' correct_index {self.correct_index} "
                f"is outside [0, {len(self.options)})"
            )

    @classmethod
    def from_options(cls, text: str, options: Sequence[str], correct_index: int) -> "Question":
        return cls(text=text, options=tuple(options), correct_index=correct_index)


@dataclass(frozen=True)
class AnswerRecord:
    """The choice recorded for one answered question."""
    selected_index: int
    correct_index: int

    @property
    def is_correct(self) -> bool:
        return self.selected_index == self.correct_index


@dataclass(frozen=True)
class AnswerOutcome:
    """Result of answering the current question."""
    correct: bool
    correct_index: int


@dataclass(frozen=True)
class QuestionView:
    """Read-only projection of the current question for a rendering layer.

    ``correct_index`` is always populated; whether to reveal it before the
    question is answered is up to the caller.
    """
    position: int
    total: int
    text: str
    options: Tuple[str, ...]
    answered: bool
    selected_index: Optional[int]
    correct_index: int
    can_go_prev: bool
    can_go_next: bool
    score: int

    @property
    def number(self) -> int:
        """1-based question number."""
        return self.position + 1

    @property
    def is_correct(self) -> Optional[bool]:
        if not self.answered:
            return None
        return self.selected_index == self.correct_index


@dataclass(frozen=True)
class QuizSummary:
    """Aggregate results for a quiz session."""
    total_questions: int
    answered_questions: int
    correct_answers: int

    @property
    def accuracy(self) -> float:
        if self.total_questions == 0:
            return 0.0
        return self.correct_answers / self.total_questions

    @property
    def is_complete(self) -> bool:
        return self.total_questions > 0 and self.answered_questions == self.total_questions


@dataclass
class QuizSettings:
    """Configuration settings for running quizzes."""
    quiz_directory: str = "./quizzes/"
    default_quiz: Optional[str] = None
    seed: Optional[int] = None
