#!/usr/bin/env python3
"""
Quiz Runner - Main Entry Point

Plays a multiple-choice quiz from a JSON question bank in the terminal.

Usage:
    python main.py [quiz_name]

Configuration:
    1. Put quiz files (*.json) in the quiz directory (default ./quizzes/)
    2. Adjust the "quiz" and "logging" sections of config.json as needed

Environment Variables:
    QUIZ_SEED: Integer seed for the question shuffle (overrides config.json)
"""

import json
import logging
import os
import sys
from pathlib import Path

from quiz_runner.config_manager import ConfigManager
from quiz_runner.console import QuizConsole
from quiz_runner.data_manager import DataManager
from quiz_runner.quiz_engine import make_shuffler
from quiz_runner.quiz_session import QuizSession

logger = logging.getLogger(__name__)


def load_config(config_path="config.json"):
    """Load configuration from a JSON file, falling back to defaults if it is missing."""
    config_path = Path(config_path)

    if not config_path.exists():
        print(f"⚠️  {config_path} not found, using default settings.")
        return {}

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        print(f"❌ Error: Invalid JSON in {config_path}: {e}")
        sys.exit(1)
    except OSError as e:
        print(f"❌ Error loading {config_path}: {e}")
        sys.exit(1)

    if not isinstance(config, dict):
        print(f"❌ Error: {config_path} must contain a JSON object")
        sys.exit(1)
    return config


def setup_logging_from_config(config):
    """Set up logging based on configuration."""
    log_config = config.get('logging', {})
    log_level = getattr(logging, str(log_config.get('level', 'INFO')).upper(), logging.INFO)
    log_directory = Path(log_config.get('log_directory', './logs/'))

    log_directory.mkdir(parents=True, exist_ok=True)

    # Console output belongs to the quiz, so the stream handler only shows warnings
    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(logging.WARNING)

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            stream_handler,
            logging.FileHandler(log_directory / "quiz_runner.log", encoding='utf-8')
        ]
    )


def build_config_manager(config):
    """Create a ConfigManager from the config file and environment."""
    config_manager = ConfigManager()
    result = config_manager.apply_config(config.get('quiz', {}))
    for error in result['errors']:
        print(f"⚠️  Ignoring invalid setting: {error}")

    # Environment variable takes precedence
    env_seed = os.getenv('QUIZ_SEED')
    if env_seed:
        try:
            seed_result = config_manager.set_seed(int(env_seed))
        except ValueError:
            seed_result = {'success': False, 'user_message': f"❌ QUIZ_SEED must be an integer, got {env_seed!r}"}
        if not seed_result['success']:
            print(seed_result['user_message'])

    return config_manager


def select_quiz(data_manager, quiz_name=None):
    """Pick the quiz to play, returning (name, questions) or None."""
    available = data_manager.get_available_quizzes()
    if not available:
        return None
    if quiz_name is None:
        quiz_name = available[0]
    questions = data_manager.get_quiz_questions(quiz_name)
    if questions is None:
        return None
    return quiz_name, questions


def run_quiz(argv=None):
    """Run the quiz runner and return a process exit code."""
    argv = sys.argv[1:] if argv is None else argv

    config = load_config()
    setup_logging_from_config(config)
    config_manager = build_config_manager(config)
    settings = config_manager.get_quiz_settings()
    logger.info(config_manager.get_settings_summary())

    data_manager = DataManager(settings.quiz_directory)
    data_manager.load_quiz_files()
    for error in data_manager.load_errors:
        print(f"⚠️  {error}")

    requested = argv[0] if argv else settings.default_quiz
    selection = select_quiz(data_manager, requested)
    if selection is None:
        available = ", ".join(data_manager.get_available_quizzes()) or "none"
        print(f"❌ Error: quiz '{requested}' not found (available: {available})")
        return 1

    quiz_name, questions = selection
    session = QuizSession(shuffler=make_shuffler(settings.seed))
    QuizConsole(session, questions, title=quiz_name).run()
    return 0


def cli():
    try:
        sys.exit(run_quiz())
    except KeyboardInterrupt:
        print("\n👋 Quiz stopped by user")


if __name__ == "__main__":
    cli()
