"""
Configuration manager for quiz runner settings.
"""
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from .models import QuizSettings


class ConfigManager:
    """Manages quiz runner settings with validated setters."""

    # Default configuration values
    DEFAULT_QUIZ_DIRECTORY = "./quizzes/"
    DEFAULT_QUIZ = None  # First available quiz
    DEFAULT_SEED = None  # Unseeded shuffle

    # Validation limits
    MIN_SEED = 0
    MAX_SEED = 2 ** 32 - 1

    def __init__(self):
        """Initialize ConfigManager with default settings."""
        self.logger = logging.getLogger(__name__)
        self._settings = QuizSettings(
            quiz_directory=self.DEFAULT_QUIZ_DIRECTORY,
            default_quiz=self.DEFAULT_QUIZ,
            seed=self.DEFAULT_SEED
        )

    def get_quiz_settings(self) -> QuizSettings:
        """
        Get current quiz settings.

        Returns:
            Copy of the current QuizSettings
        """
        return QuizSettings(
            quiz_directory=self._settings.quiz_directory,
            default_quiz=self._settings.default_quiz,
            seed=self._settings.seed
        )

    def _error_result(self, error_msg: str, user_message: str) -> Dict[str, Any]:
        self.logger.error(error_msg)
        return {
            'success': False,
            'error': error_msg,
            'user_message': user_message
        }

    def _success_result(self, message: str) -> Dict[str, Any]:
        self.logger.info(message)
        return {
            'success': True,
            'message': message,
            'user_message': f"✅ {message}"
        }

    def set_seed(self, seed: Optional[int]) -> Dict[str, Any]:
        """
        Set the seed used to shuffle question order.

        Args:
            seed: Non-negative integer seed, or None for a fresh random order each run

        Returns:
            Dictionary with success status, error message, and user-friendly message
        """
        if seed is None:
            self._settings.seed = None
            return self._success_result("Shuffle seed cleared, order will differ each run")

        if isinstance(seed, bool) or not isinstance(seed, int):
            return self._error_result(
                f"Seed must be an integer, got {type(seed).__name__}",
                f"❌ Invalid input: Expected a number, got {type(seed).__name__}"
            )

        if not self.MIN_SEED <= seed <= self.MAX_SEED:
            return self._error_result(
                f"Seed must be between {self.MIN_SEED} and {self.MAX_SEED}",
                f"❌ Seed out of range: use {self.MIN_SEED} to {self.MAX_SEED}"
            )

        self._settings.seed = seed
        return self._success_result(f"Shuffle seed set to {seed}")

    def get_seed(self) -> Optional[int]:
        return self._settings.seed

    def set_quiz_directory(self, directory: str) -> Dict[str, Any]:
        """
        Set the directory path for quiz files.

        Args:
            directory: Path to quiz files directory

        Returns:
            Dictionary with success status, error message, and user-friendly message
        """
        if not isinstance(directory, str):
            return self._error_result(
                f"Quiz directory must be a string, got {type(directory).__name__}",
                f"❌ Invalid input: Expected a path string, got {type(directory).__name__}"
            )

        if not directory.strip():
            return self._error_result(
                "Quiz directory cannot be empty",
                "❌ Directory path cannot be empty"
            )

        try:
            normalized_path = str(Path(directory).expanduser().resolve())
        except (OSError, ValueError) as e:
            return self._error_result(
                f"Invalid directory path format: {e}",
                f"❌ Invalid path format: {directory}"
            )

        self._settings.quiz_directory = normalized_path
        return self._success_result(f"Quiz directory set to {normalized_path}")

    def get_quiz_directory(self) -> str:
        return self._settings.quiz_directory

    def set_default_quiz(self, quiz_name: Optional[str]) -> Dict[str, Any]:
        """
        Set the quiz played when none is named on the command line.

        Args:
            quiz_name: Quiz name (file stem), or None to use the first available quiz

        Returns:
            Dictionary with success status, error message, and user-friendly message
        """
        if quiz_name is None:
            self._settings.default_quiz = None
            return self._success_result("Default quiz cleared, the first available quiz will be used")

        if not isinstance(quiz_name, str) or not quiz_name.strip():
            return self._error_result(
                f"Default quiz must be a non-empty string, got {quiz_name!r}",
                "❌ Quiz name cannot be empty"
            )

        self._settings.default_quiz = quiz_name.strip()
        return self._success_result(f"Default quiz set to {self._settings.default_quiz}")

    def get_default_quiz(self) -> Optional[str]:
        return self._settings.default_quiz

    def apply_config(self, quiz_config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply the 'quiz' section of a loaded config.json.

        Every recognized key is applied; failures are collected rather than
        stopping at the first one.

        Args:
            quiz_config: Mapping with optional quiz_directory, default_quiz and seed keys

        Returns:
            Dictionary with overall success flag and the list of error messages
        """
        errors = []
        setters = {
            'quiz_directory': self.set_quiz_directory,
            'default_quiz': self.set_default_quiz,
            'seed': self.set_seed,
        }
        for key, value in quiz_config.items():
            setter = setters.get(key)
            if setter is None:
                self.logger.warning(f"Ignoring unknown quiz setting '{key}'")
                continue
            result = setter(value)
            if not result['success']:
                errors.append(result['error'])

        return {
            'success': not errors,
            'errors': errors
        }

    def reset_to_defaults(self) -> None:
        """Reset all settings to their default values."""
        self._settings = QuizSettings(
            quiz_directory=self.DEFAULT_QUIZ_DIRECTORY,
            default_quiz=self.DEFAULT_QUIZ,
            seed=self.DEFAULT_SEED
        )
        self.logger.info("All settings reset to default values")

    def validate_settings(self) -> Dict[str, Any]:
        """
        Validate current settings and return validation results.

        Returns:
            Dictionary with validation results and any issues found
        """
        validation_result = {
            "valid": True,
            "issues": []
        }

        seed = self._settings.seed
        if seed is not None:
            if (isinstance(seed, bool) or not isinstance(seed, int) or
                    not self.MIN_SEED <= seed <= self.MAX_SEED):
                validation_result["valid"] = False
                validation_result["issues"].append(f"Invalid seed: {seed}")

        directory = self._settings.quiz_directory
        if not isinstance(directory, str) or not directory.strip():
            validation_result["valid"] = False
            validation_result["issues"].append(f"Invalid quiz directory: {directory}")

        default_quiz = self._settings.default_quiz
        if default_quiz is not None and (not isinstance(default_quiz, str) or not default_quiz.strip()):
            validation_result["valid"] = False
            validation_result["issues"].append(f"Invalid default quiz: {default_quiz}")

        return validation_result

    def get_settings_summary(self) -> str:
        """
        Get a formatted summary of current settings.

        Returns:
            Human-readable string describing current settings
        """
        seed_str = str(self._settings.seed) if self._settings.seed is not None else "random"
        quiz_str = self._settings.default_quiz or "first available"

        return (
            f"Quiz Settings:\n"
            f"• Quiz: {quiz_str}\n"
            f"• Shuffle seed: {seed_str}\n"
            f"• Quiz Directory: {self._settings.quiz_directory}"
        )
