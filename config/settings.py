import os
from dataclasses import dataclass
from typing import Dict, Optional

from models.quiz_models import TopWordsOptions

DEFAULT_DATA_URL = "https://newsela-quiz.s3.us-east-1.amazonaws.com/data.json"
WELL_ANSWER_THRESHOLD = 0.5

TOP_WORDS_MODES: Dict[str, TopWordsOptions] = {
    "top3": TopWordsOptions(min_frequency=1, limit=3),
    "top10": TopWordsOptions(min_frequency=3, limit=10),
}
DEFAULT_TOP_WORDS_MODE = "top10"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    data_url: str = DEFAULT_DATA_URL
    data_path: str = ""
    well_threshold: float = WELL_ANSWER_THRESHOLD
    top_words_mode: str = DEFAULT_TOP_WORDS_MODE
    min_frequency: Optional[int] = None
    top_limit: Optional[int] = None
    fetch_timeout: float = 30.0
    auto_refresh: bool = False
    log_level: str = "INFO"

    def top_words_options(self) -> TopWordsOptions:
        """Resolves the ranking mode, applying any explicit overrides."""
        if self.top_words_mode not in TOP_WORDS_MODES:
            raise ValueError(
                f"Unknown top words mode '{self.top_words_mode}', "
                f"expected one of: {', '.join(sorted(TOP_WORDS_MODES))}"
            )
        base = TOP_WORDS_MODES[self.top_words_mode]
        return TopWordsOptions(
            min_frequency=base.min_frequency if self.min_frequency is None else self.min_frequency,
            limit=base.limit if self.top_limit is None else self.top_limit,
        )


def _parse_env(name: str, raw: str, cast):
    try:
        return cast(raw)
    except ValueError as e:
        raise ValueError(f"Invalid value for {name}: {raw!r}") from e


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    return _parse_env(name, raw, float) if raw else default


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name, "").strip()
    return _parse_env(name, raw, int) if raw else None


def load_settings() -> Settings:
    return Settings(
        data_url=os.getenv("QUIZ_DATA_URL", DEFAULT_DATA_URL),
        data_path=os.getenv("QUIZ_DATA_PATH", "").strip(),
        well_threshold=_env_float("QUIZ_WELL_THRESHOLD", WELL_ANSWER_THRESHOLD),
        top_words_mode=os.getenv("QUIZ_TOP_WORDS_MODE", DEFAULT_TOP_WORDS_MODE).strip().lower(),
        min_frequency=_optional_int("QUIZ_MIN_FREQUENCY"),
        top_limit=_optional_int("QUIZ_TOP_LIMIT"),
        fetch_timeout=_env_float("QUIZ_FETCH_TIMEOUT", 30.0),
        auto_refresh=os.getenv("QUIZ_AUTO_REFRESH", "0").strip().lower() in _TRUTHY,
        log_level=os.getenv("QUIZ_LOG_LEVEL", "INFO").strip().upper(),
    )
