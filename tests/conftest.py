import pytest

from models.quiz_models import QuizQuestion
from save_mock_data import mock_data


@pytest.fixture
def climate_economy_questions():
    """Three well answered and three wrong answered questions with disjoint words."""
    well = [QuizQuestion("climate change affects global temperatures", 0.7) for _ in range(3)]
    wrong = [QuizQuestion("economic growth impacts market stability", 0.3) for _ in range(3)]
    return well + wrong


@pytest.fixture
def mock_payload():
    return [dict(record) for record in mock_data]
