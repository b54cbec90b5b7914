"""
Unit tests for the Rich console front end.
"""
import io
import logging
import unittest

from rich.console import Console

from quiz_runner.console import ConsoleCommand, QuizConsole, parse_command, parse_jump_target, parse_number
from quiz_runner.quiz_session import EmptyBankError, QuizSession
from tests.test_fixtures import TestFixtures, identity_shuffler


def make_console():
    return Console(file=io.StringIO(), width=100, color_system=None, force_terminal=False)


class TestParseCommand(unittest.TestCase):
    """Test cases for raw input parsing."""

    def test_navigation_commands(self):
        self.assertEqual(parse_command("n"), ConsoleCommand("next"))
        self.assertEqual(parse_command(" NEXT "), ConsoleCommand("next"))
        self.assertEqual(parse_command("p"), ConsoleCommand("prev"))
        self.assertEqual(parse_command("previous"), ConsoleCommand("prev"))
        self.assertEqual(parse_command("shuffle"), ConsoleCommand("restart"))
        self.assertEqual(parse_command("r"), ConsoleCommand("restart"))
        self.assertEqual(parse_command("q"), ConsoleCommand("quit"))
        self.assertEqual(parse_command("exit"), ConsoleCommand("quit"))

    def test_jump_commands(self):
        self.assertEqual(parse_command("j 3"), ConsoleCommand("jump", "3"))
        self.assertEqual(parse_command("jump   12"), ConsoleCommand("jump", "12"))
        self.assertEqual(parse_command("j"), ConsoleCommand("jump", ""))
        self.assertEqual(parse_command("goto abc"), ConsoleCommand("jump", "abc"))

    def test_answer_commands(self):
        self.assertEqual(parse_command("2"), ConsoleCommand("answer", "2"))
        self.assertEqual(parse_command(" 10 "), ConsoleCommand("answer", "10"))

    def test_unrecognized(self):
        for raw in (None, "", "   ", "hello", "-1", "2.5"):
            self.assertIsNone(parse_command(raw))

    def test_parse_jump_target(self):
        self.assertEqual(parse_jump_target("4"), 4)
        self.assertEqual(parse_jump_target(" 07 "), 7)
        for raw in (None, "", "x", "-2", "1.5", "²", "٣", "9" * 5000):
            self.assertIsNone(parse_jump_target(raw))

    def test_parse_number(self):
        self.assertEqual(parse_number("12"), 12)
        self.assertIsNone(parse_number("²"))
        self.assertIsNone(parse_number("9" * 5000))

    def test_non_ascii_digits_not_answers(self):
        self.assertIsNone(parse_command("²"))
        self.assertIsNone(parse_command("٣"))


class TestQuizConsole(unittest.TestCase):
    """Test cases for the interactive loop."""

    def setUp(self):
        logging.disable(logging.CRITICAL)
        self.bank = TestFixtures.create_sample_questions()
        self.session = QuizSession(shuffler=identity_shuffler)
        self.console = make_console()

    def tearDown(self):
        logging.disable(logging.NOTSET)

    def run_with(self, inputs):
        quiz_console = QuizConsole(
            self.session,
            self.bank,
            console=self.console,
            input_provider=iter(inputs).__next__,
            title="sample"
        )
        summary = quiz_console.run()
        return summary, self.console.file.getvalue()

    def test_answer_and_feedback(self):
        summary, output = self.run_with(["2", "n", "1", "q"])

        self.assertEqual(summary.answered_questions, 2)
        self.assertEqual(summary.correct_answers, 1)
        self.assertIn("Correct!", output)
        self.assertIn("Wrong answer", output)
        self.assertIn("Question 1 of 5", output)
        self.assertIn("sample results", output)

    def test_already_answered_notice(self):
        summary, output = self.run_with(["2", "3", "q"])

        self.assertIn("already been answered", output)
        self.assertEqual(summary.correct_answers, 1)
        self.assertEqual(self.session.answers[0].selected_index, 1)

    def test_invalid_option_notice(self):
        summary, output = self.run_with(["9", "0", "q"])

        self.assertEqual(output.count("Choose an option between 1 and 3"), 2)
        self.assertEqual(summary.answered_questions, 0)

    def test_jump_out_of_range_and_unparseable(self):
        _, output = self.run_with(["j 9", "j abc", "j", "j 4", "q"])

        self.assertEqual(output.count("Please enter a number between 1 and 5"), 3)
        self.assertEqual(self.session.current_index, 3)
        self.assertIn("Question 4 of 5", output)

    def test_non_ascii_digits_are_rejected(self):
        """Test that superscript digits never reach int()."""
        summary, output = self.run_with(["²", "j ²", "q"])

        self.assertIn("Unrecognized command", output)
        self.assertEqual(output.count("Please enter a number between 1 and 5"), 1)
        self.assertEqual(summary.answered_questions, 0)
        self.assertEqual(self.session.current_index, 0)

    def test_oversized_numbers_are_rejected(self):
        """Test numbers past the integer conversion limit are treated as invalid."""
        huge = "9" * 5000
        summary, output = self.run_with(["j " + huge, huge, "q"])

        self.assertEqual(output.count("Please enter a number between 1 and 5"), 1)
        self.assertEqual(output.count("Choose an option between 1 and 3"), 1)
        self.assertEqual(summary.answered_questions, 0)

    def test_navigation_is_clamped(self):
        self.run_with(["p", "n", "n", "n", "n", "n", "n", "q"])
        self.assertEqual(self.session.current_index, 4)

    def test_restart_clears_answers(self):
        summary, output = self.run_with(["2", "r", "q"])

        self.assertIn("Starting over", output)
        self.assertEqual(summary.answered_questions, 0)
        self.assertEqual(self.session.score, 0)

    def test_unrecognized_command(self):
        _, output = self.run_with(["hello", "q"])
        self.assertIn("Unrecognized command", output)

    def test_end_of_input_stops_loop(self):
        summary, output = self.run_with(["2"])

        self.assertIn("Session interrupted", output)
        self.assertEqual(summary.correct_answers, 1)

    def test_correct_option_hidden_until_answered(self):
        """Test the answer marker only appears after answering."""
        quiz_console = QuizConsole(self.session, self.bank, console=self.console)
        self.session.start(self.bank)

        quiz_console.render()
        self.assertNotIn("•", self.console.file.getvalue())

        self.session.answer(0)
        quiz_console.render()
        self.assertIn("• 3", self.console.file.getvalue())

    def test_empty_bank(self):
        quiz_console = QuizConsole(self.session, [], console=self.console, input_provider=lambda: "q")
        with self.assertRaises(EmptyBankError):
            quiz_console.run()

    def test_handle_command_return_values(self):
        quiz_console = QuizConsole(self.session, self.bank, console=self.console)
        self.session.start(self.bank)

        self.assertTrue(quiz_console.handle_command(ConsoleCommand("next")))
        self.assertFalse(quiz_console.handle_command(ConsoleCommand("quit")))
        self.assertEqual(self.session.current_index, 1)


if __name__ == '__main__':
    unittest.main()
