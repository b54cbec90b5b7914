"""
Data manager for JSON question banks and quiz data validation.
"""
import json
import logging
from pathlib import Path
from typing import Dict, List, Optional

from .models import Question


class QuizFileError(Exception):
    """Raised when a quiz file cannot be read or fails validation."""
    pass


class DataManager:
    """Manages loading and validation of JSON quiz files."""

    def __init__(self, quiz_directory: str = "./quizzes/"):
        """
        Initialize DataManager with quiz directory path.

        Args:
            quiz_directory: Path to directory containing JSON quiz files
        """
        self.quiz_directory = Path(quiz_directory)
        self.loaded_quizzes: Dict[str, List[Question]] = {}
        self.logger = logging.getLogger(__name__)
        self.load_errors: List[str] = []  # Track loading errors for user feedback

    def load_quiz_files(self) -> Dict[str, List[Question]]:
        """
        Load all JSON files from the quiz directory.

        Files that fail to load are skipped and reported in load_errors.

        Returns:
            Dictionary mapping quiz names to lists of Question objects
        """
        self.loaded_quizzes.clear()
        self.load_errors.clear()

        if not self.quiz_directory.is_dir():
            error_msg = f"Quiz directory not found: {self.quiz_directory}"
            self.logger.error(error_msg)
            self.load_errors.append(error_msg)
            return self.loaded_quizzes

        json_files = sorted(self.quiz_directory.glob("*.json"))
        if not json_files:
            self.logger.warning(f"No JSON files found in {self.quiz_directory}")
            self.load_errors.append(f"No quiz files found in {self.quiz_directory}")
            return self.loaded_quizzes

        for json_file in json_files:
            try:
                self.loaded_quizzes[json_file.stem] = self.load_quiz_file(json_file)
            except QuizFileError as e:
                self.load_errors.append(f"{json_file.name}: {e}")

        if not self.loaded_quizzes:
            self.logger.error("No quiz files could be loaded successfully")
        else:
            self.logger.info(f"Successfully loaded {len(self.loaded_quizzes)} quiz files")
        if self.load_errors:
            self.logger.warning(f"Encountered {len(self.load_errors)} loading errors")

        return self.loaded_quizzes

    def load_quiz_file(self, file_path: Path) -> List[Question]:
        """
        Load, validate and parse a single JSON quiz file.

        Args:
            file_path: Path to the JSON file

        Returns:
            List of Question objects in file order

        Raises:
            QuizFileError: If the file cannot be read, is not valid JSON,
                or does not have the expected quiz structure
        """
        file_path = Path(file_path)
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            self.logger.error(f"Invalid JSON in {file_path}: {e}")
            raise QuizFileError(f"Invalid JSON: {e}") from e
        except FileNotFoundError as e:
            self.logger.error(f"Quiz file not found: {file_path}")
            raise QuizFileError(f"File not found: {file_path}") from e
        except OSError as e:
            self.logger.error(f"Failed to read quiz file {file_path}: {e}")
            raise QuizFileError(f"Cannot read file: {e}") from e

        if not self.validate_quiz_structure(data):
            self.logger.error(f"Invalid quiz structure in {file_path}")
            raise QuizFileError("Invalid quiz structure")

        return self._parse_questions(data)

    def validate_quiz_structure(self, data: dict) -> bool:
        """
        Validate that JSON data has the correct quiz structure.

        Expected structure:
        {
            "quiz": [
                {
                    "question": str,
                    "options": [str, str, ...],  # at least two
                    "answer": int | str          # option index or option text
                }
            ]
        }

        Args:
            data: Parsed JSON data to validate

        Returns:
            True if structure is valid, False otherwise
        """
        if not isinstance(data, dict):
            self.logger.error("Quiz data must be a JSON object")
            return False

        if "quiz" not in data:
            self.logger.error("Quiz data must contain a 'quiz' key")
            return False

        quiz_array = data["quiz"]
        if not isinstance(quiz_array, list):
            self.logger.error("'quiz' value must be an array")
            return False

        if not quiz_array:
            self.logger.error("Quiz array cannot be empty")
            return False

        for i, question_data in enumerate(quiz_array):
            if not isinstance(question_data, dict):
                self.logger.error(f"Question {i} must be an object")
                return False

            for required in ("question", "options", "answer"):
                if required not in question_data:
                    self.logger.error(f"Question {i} missing '{required}' field")
                    return False

            if not isinstance(question_data["question"], str):
                self.logger.error(f"Question {i} 'question' field must be a string")
                return False

            options = question_data["options"]
            if not isinstance(options, list) or not all(isinstance(o, str) for o in options):
                self.logger.error(f"Question {i} 'options' field must be an array of strings")
                return False

            if len(options) < 2:
                self.logger.error(f"Question {i} must have at least 2 options")
                return False

            if self._resolve_answer(question_data["answer"], options) is None:
                self.logger.error(f"Question {i} 'answer' does not match any option")
                return False

        return True

    def _resolve_answer(self, answer, options: List[str]) -> Optional[int]:
        """
        Resolve an answer field to a zero-based option index.

        Integers are taken as indexes; strings must match exactly one option.
        """
        if isinstance(answer, bool):
            return None
        if isinstance(answer, int):
            return answer if 0 <= answer < len(options) else None
        if isinstance(answer, str):
            matches = [i for i, option in enumerate(options) if option == answer]
            return matches[0] if len(matches) == 1 else None
        return None

    def _parse_questions(self, quiz_data: dict) -> List[Question]:
        """
        Parse validated quiz data into Question objects.

        Args:
            quiz_data: Validated quiz data dictionary

        Returns:
            List of Question objects
        """
        questions = []

        for question_data in quiz_data["quiz"]:
            options = question_data["options"]
            question = Question.from_options(
                text=question_data["question"],
                options=options,
                correct_index=self._resolve_answer(question_data["answer"], options),
            )
            questions.append(question)

        return questions

    def get_available_quizzes(self) -> List[str]:
        """
        Get list of available quiz names.

        Returns:
            List of quiz names (without file extensions)
        """
        return list(self.loaded_quizzes.keys())

    def get_quiz_questions(self, quiz_name: str) -> Optional[List[Question]]:
        """
        Retrieve questions for a specific quiz.

        Args:
            quiz_name: Name of the quiz (without file extension)

        Returns:
            List of Question objects for the quiz, or None if quiz not found
        """
        return self.loaded_quizzes.get(quiz_name)

    def quiz_exists(self, quiz_name: str) -> bool:
        return quiz_name in self.loaded_quizzes

    def get_quiz_count(self) -> int:
        return len(self.loaded_quizzes)

    def get_question_count(self, quiz_name: str) -> int:
        """
        Get the number of questions in a specific quiz.

        Args:
            quiz_name: Name of the quiz

        Returns:
            Number of questions in the quiz, or 0 if quiz not found
        """
        questions = self.get_quiz_questions(quiz_name)
        return len(questions) if questions else 0
