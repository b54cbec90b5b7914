"""Rich-powered console front end for a quiz session.

The console renders ``QuestionView`` snapshots, turns raw input lines into
session operations and owns every piece of user-facing text. Input comes from
an injectable provider so the loop can be driven from tests.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import Question, QuestionView, QuizSummary
from .quiz_session import (
    AlreadyAnsweredError,
    InvalidJumpTargetError,
    InvalidOptionError,
    QuizSession,
)

logger = logging.getLogger(__name__)

InputProvider = Callable[[], str]

COMMAND_HINT = "Commands: option number, n (next), p (prev), j N (jump), r (restart), q (quit)"


@dataclass(frozen=True)
class ConsoleCommand:
    """Normalized command parsed from a line of console input."""
    type: str  # answer, next, prev, jump, restart, quit
    argument: Optional[str] = None


def parse_command(raw: Optional[str]) -> Optional[ConsoleCommand]:
    """Parse raw user input into a ConsoleCommand, or None if unrecognized."""
    if raw is None:
        return None
    text = raw.strip()
    if not text:
        return None
    lowered = text.lower()
    if lowered in {"n", "next"}:
        return ConsoleCommand("next")
    if lowered in {"p", "prev", "previous"}:
        return ConsoleCommand("prev")
    if lowered in {"r", "restart", "shuffle"}:
        return ConsoleCommand("restart")
    if lowered in {"q", "quit", "exit"}:
        return ConsoleCommand("quit")
    head, _, rest = lowered.partition(" ")
    if head in {"j", "jump", "g", "goto"}:
        return ConsoleCommand("jump", rest.strip())
    if lowered.isascii() and lowered.isdigit():
        return ConsoleCommand("answer", lowered)
    return None


def parse_number(raw: Optional[str]) -> Optional[int]:
    """Parse a non-negative decimal number typed by the user, or None."""
    if raw is None:
        return None
    text = raw.strip()
    if not (text.isascii() and text.isdigit()):
        return None
    try:
        return int(text)
    except ValueError:
        # Longer than the interpreter's integer string conversion limit
        return None


def parse_jump_target(raw: Optional[str]) -> Optional[int]:
    """Parse a 1-based question number typed by the user."""
    return parse_number(raw)


class QuizConsole:
    """Interactive console loop driving one QuizSession."""

    def __init__(
        self,
        session: QuizSession,
        bank: Sequence[Question],
        console: Optional[Console] = None,
        input_provider: Optional[InputProvider] = None,
        title: str = "Quiz",
    ):
        self.session = session
        self.bank = bank
        self.console = console or Console()
        self.input_provider = input_provider or (lambda: self.console.input("[bold]> [/]"))
        self.title = title

    def run(self) -> QuizSummary:
        """
        Start the session and process commands until quit or end of input.

        Returns:
            Summary of the session at the moment the loop ended

        Raises:
            EmptyBankError: If the bank has no questions
        """
        self.session.start(self.bank)
        logger.info(f"Started quiz '{self.title}' with {self.session.total} questions")

        while True:
            self.render()
            try:
                raw = self.input_provider()
            except (EOFError, KeyboardInterrupt, StopIteration):
                self.console.print("\n[bold yellow]Session interrupted.[/]")
                break
            command = parse_command(raw)
            if command is None:
                self.console.print("[red]Unrecognized command. Try again.[/]")
                continue
            if not self.handle_command(command):
                break

        summary = self.session.summary()
        self.render_summary(summary)
        return summary

    def handle_command(self, command: ConsoleCommand) -> bool:
        """
        Apply one command to the session.

        Returns:
            False when the loop should stop, True otherwise
        """
        logger.debug(f"Handling console command {command.type} {command.argument or ''}".rstrip())

        if command.type == "quit":
            return False
        if command.type == "next":
            self.session.go_next()
        elif command.type == "prev":
            self.session.go_prev()
        elif command.type == "restart":
            self.session.start(self.bank)
            logger.info(f"Restarted quiz '{self.title}' with a new question order")
            self.console.print("[bold cyan]Questions shuffled. Starting over.[/]")
        elif command.type == "jump":
            self._jump(command.argument)
        elif command.type == "answer":
            self._answer(command.argument)
        return True

    def _jump(self, raw_target: Optional[str]) -> None:
        target = parse_jump_target(raw_target)
        try:
            if target is None:
                raise InvalidJumpTargetError(raw_target, (1, self.session.total))
            self.session.jump_to(target)
        except InvalidJumpTargetError as e:
            low, high = e.valid_range
            self.console.print(f"[red]Please enter a number between {low} and {high}.[/]")

    def _answer(self, raw_option: str) -> None:
        try:
            selected = parse_number(raw_option)
            outcome = self.session.answer(selected - 1 if selected is not None else -1)
        except AlreadyAnsweredError:
            self.console.print("[yellow]This question has already been answered.[/]")
            return
        except InvalidOptionError as e:
            self.console.print(f"[red]Choose an option between 1 and {e.option_count}.[/]")
            return
        logger.debug(f"Answer recorded, correct={outcome.correct}")

    def render(self) -> None:
        """Render the current question, its options and any feedback."""
        view = self.session.current_view()
        header = Text.assemble(
            (f"Question {view.number}", "bold cyan"),
            (f" of {view.total}", "dim"),
            (f"   Score: {view.score}", "bold"),
        )
        self.console.print()
        self.console.rule(header)
        self.console.print(Text(view.text, style="bold"))
        self.console.print(self._options_table(view))

        if view.answered:
            if view.is_correct:
                self.console.print(Text("Correct!", style="bold green"))
            else:
                self.console.print(Text("Wrong answer", style="bold red"))

        self.console.print(Text(COMMAND_HINT, style="dim"))

    def _options_table(self, view: QuestionView) -> Table:
        table = Table(show_header=False, box=box.SIMPLE, expand=True)
        table.add_column("Key", justify="center", style="cyan")
        table.add_column("Option")

        for i, option in enumerate(view.options):
            option_text = Text(option)
            # Correctness is only revealed once the question has an answer
            if view.answered:
                if i == view.correct_index:
                    option_text.stylize("bold green")
                elif i == view.selected_index:
                    option_text.stylize("bold red")
                else:
                    option_text.stylize("dim")
            marker = "•" if view.answered and i == view.selected_index else " "
            table.add_row(str(i + 1), Text(marker + " ") + option_text)

        return table

    def render_summary(self, summary: QuizSummary) -> None:
        body = (
            f"Answered {summary.answered_questions} of {summary.total_questions}\n"
            f"Score: {summary.correct_answers} ({summary.accuracy:.0%})"
        )
        self.console.print(Panel(body, title=f"{self.title} results", border_style="cyan"))
