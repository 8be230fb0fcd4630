"""
QuizFetcher Module (Async Version)
==================================
Retrieves the quiz question list with httpx.AsyncClient, or from a local JSON
file.
"""

import json
import logging
from typing import List, Optional

import httpx

from config.settings import DEFAULT_DATA_URL
from fetcher.parser import QuizDataError, parse_questions
from models.quiz_models import QuizQuestion

logger = logging.getLogger(__name__)


class QuizFetcher:
    def __init__(self, data_url: str = DEFAULT_DATA_URL, timeout: float = 30.0,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.data_url = data_url
        self.client = httpx.AsyncClient(
            headers={"Accept": "application/json"},
            follow_redirects=True,
            timeout=timeout,
            transport=transport,
        )

    async def fetch_questions(self) -> List[QuizQuestion]:
        """Downloads and parses the question list. Raises QuizDataError on failure."""
        try:
            resp = await self.client.get(self.data_url)
        except httpx.HTTPError as e:
            logger.error("Request to %s failed: %s", self.data_url, e)
            raise QuizDataError(f"Failed to fetch quiz questions: {e}") from e

        if not resp.is_success:
            logger.error("Request to %s returned status %d", self.data_url, resp.status_code)
            raise QuizDataError("Failed to fetch quiz questions")

        try:
            payload = resp.json()
        except ValueError as e:
            raise QuizDataError("Quiz data is not valid JSON") from e

        questions = parse_questions(payload)
        logger.info("Fetched %d quiz questions from %s", len(questions), self.data_url)
        return questions

    async def close(self):
        """Closes the async client session."""
        await self.client.aclose()


def load_local_questions(path: str) -> List[QuizQuestion]:
    """Reads the question list from a JSON file on disk."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)
    except OSError as e:
        raise QuizDataError(f"Could not read quiz data file '{path}': {e}") from e
    except ValueError as e:
        raise QuizDataError(f"Quiz data file '{path}' is not valid JSON") from e

    questions = parse_questions(payload)
    logger.info("Loaded %d quiz questions from %s", len(questions), path)
    return questions
