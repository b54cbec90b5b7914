"""
Quiz session state machine.
Tracks question order, the active position, recorded answers and the score.
"""
from types import MappingProxyType
from typing import Dict, Mapping, Sequence, Tuple

from .models import AnswerOutcome, AnswerRecord, Question, QuestionView, QuizSummary
from .quiz_engine import Shuffler, shuffle


class QuizSessionError(Exception):
    """Base exception for quiz session errors."""
    pass


class SessionNotStartedError(QuizSessionError):
    """Raised when operating on a session before start() succeeded."""
    pass


class EmptyBankError(QuizSessionError):
    """Raised when starting a session with no questions."""
    pass


class AlreadyAnsweredError(QuizSessionError):
    """Raised when answering a question that already has an answer."""

    def __init__(self, position: int):
        super().__init__(f"Question at position {position} has already been answered")
        self.position = position


class InvalidOptionError(QuizSessionError):
    """Raised when the selected option index does not exist."""

    def __init__(self, selected_index, option_count: int):
        super().__init__(f"Option {selected_index!r} is outside [0, {option_count})")
        self.selected_index = selected_index
        self.option_count = option_count


class InvalidJumpTargetError(QuizSessionError):
    """Raised when a jump target is outside the valid 1-based range."""

    def __init__(self, target, valid_range: Tuple[int, int]):
        super().__init__(
            f"Question number {target!r} is outside [{valid_range[0]}, {valid_range[1]}]"
        )
        self.target = target
        self.valid_range = valid_range


class QuizSession:
    """
    Single-user multiple-choice quiz session.

    The session is driven by one caller at a time. Every failing operation
    raises a QuizSessionError and leaves the session unchanged.
    """

    def __init__(self, shuffler: Shuffler = shuffle):
        """
        Initialize an unstarted session.

        Args:
            shuffler: Function returning a shuffled copy of a question sequence
        """
        self._shuffler = shuffler
        self._order: Tuple[Question, ...] = ()
        self._current_index = 0
        self._answers: Dict[int, AnswerRecord] = {}
        self._score = 0

    @property
    def is_started(self) -> bool:
        return bool(self._order)

    @property
    def order(self) -> Tuple[Question, ...]:
        return self._order

    @property
    def total(self) -> int:
        return len(self._order)

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def answers(self) -> Mapping[int, AnswerRecord]:
        return MappingProxyType(self._answers)

    @property
    def score(self) -> int:
        return self._score

    @property
    def answered_count(self) -> int:
        return len(self._answers)

    def start(self, bank: Sequence[Question]) -> None:
        """
        Start or restart the session with a freshly shuffled bank.

        Args:
            bank: Questions to play; the sequence itself is not modified

        Raises:
            EmptyBankError: If bank has no questions
        """
        if not bank:
            raise EmptyBankError("Cannot start a quiz with an empty question bank")

        self._order = tuple(self._shuffler(bank))
        self._current_index = 0
        self._answers = {}
        self._score = 0

    def current_view(self) -> QuestionView:
        """Project the current question and progress into a QuestionView."""
        self._require_started()
        question = self._order[self._current_index]
        record = self._answers.get(self._current_index)
        return QuestionView(
            position=self._current_index,
            total=len(self._order),
            text=question.text,
            options=question.options,
            answered=record is not None,
            selected_index=record.selected_index if record else None,
            correct_index=question.correct_index,
            can_go_prev=self._current_index > 0,
            can_go_next=self._current_index < len(self._order) - 1,
            score=self._score,
        )

    def answer(self, selected_index: int) -> AnswerOutcome:
        """
        Record an answer for the current question.

        Args:
            selected_index: Zero-based index of the chosen option

        Returns:
            AnswerOutcome telling whether the choice was correct

        Raises:
            AlreadyAnsweredError: If the current question was answered before
            InvalidOptionError: If selected_index is not a valid option index
        """
        self._require_started()
        if self._current_index in self._answers:
            raise AlreadyAnsweredError(self._current_index)

        question = self._order[self._current_index]
        option_count = len(question.options)
        if (isinstance(selected_index, bool) or not isinstance(selected_index, int)
                or not 0 <= selected_index < option_count):
            raise InvalidOptionError(selected_index, option_count)

        record = AnswerRecord(selected_index=selected_index, correct_index=question.correct_index)
        self._answers[self._current_index] = record
        if record.is_correct:
            self._score += 1
        return AnswerOutcome(correct=record.is_correct, correct_index=question.correct_index)

    def go_next(self) -> None:
        """Move to the next question; does nothing on the last one."""
        self._require_started()
        if self._current_index < len(self._order) - 1:
            self._current_index += 1

    def go_prev(self) -> None:
        """Move to the previous question; does nothing on the first one."""
        self._require_started()
        if self._current_index > 0:
            self._current_index -= 1

    def jump_to(self, number: int) -> None:
        """
        Jump to a question by its 1-based number.

        Args:
            number: Question number in [1, total]

        Raises:
            InvalidJumpTargetError: If number is not an integer in range
        """
        self._require_started()
        valid_range = (1, len(self._order))
        if (isinstance(number, bool) or not isinstance(number, int)
                or not valid_range[0] <= number <= valid_range[1]):
            raise InvalidJumpTargetError(number, valid_range)
        self._current_index = number - 1

    def summary(self) -> QuizSummary:
        """Summarize progress and score for the current session."""
        self._require_started()
        return QuizSummary(
            total_questions=len(self._order),
            answered_questions=len(self._answers),
            correct_answers=self._score,
        )

    def _require_started(self) -> None:
        if not self._order:
            raise SessionNotStartedError("Quiz session has not been started")
