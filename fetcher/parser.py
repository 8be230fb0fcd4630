"""
Quiz Payload Parser
===================

Converts the decoded JSON payload of the quiz data source into QuizQuestion
records. Records with unusable text are kept with empty text; records without
a readable correctness rate are skipped.
"""

import logging
from typing import Any, List

from models.quiz_models import QuizQuestion

logger = logging.getLogger(__name__)


class QuizDataError(Exception):
    """Raised when quiz questions cannot be fetched or read."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def parse_percent_correct(value: Any) -> float:
    if isinstance(value, bool):
        raise ValueError(f"not a number: {value!r}")
    return float(value)


def parse_question(record: Any) -> QuizQuestion:
    if not isinstance(record, dict):
        raise ValueError(f"expected an object, got {type(record).__name__}")

    text = record.get("text")
    return QuizQuestion(
        text=text if isinstance(text, str) else "",
        percent_correct=parse_percent_correct(record.get("percent_correct")),
    )


def parse_questions(payload: Any) -> List[QuizQuestion]:
    """
    Accepts either a list of question objects or an object holding them under
    a "questions" key.
    """
    if isinstance(payload, dict) and "questions" in payload:
        payload = payload["questions"]

    if not isinstance(payload, list):
        raise QuizDataError("Unexpected quiz data format: expected a list of questions")

    questions = []
    for idx, record in enumerate(payload):
        try:
            questions.append(parse_question(record))
        except (TypeError, ValueError) as e:
            logger.warning("Skipping quiz record %d: %s", idx, e)

    return questions
