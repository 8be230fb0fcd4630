"""
Analytics and Metrics Calculation Module
=========================================

This module turns a list of quiz questions into the word rankings and summary
shown on the dashboard.
"""

import logging
import math
from numbers import Real
from typing import List, Optional, Sequence, Tuple

import pandas as pd

from analytics.text_processing import calculate_summary, get_frequency, get_top_words, tokenize
from config.settings import WELL_ANSWER_THRESHOLD, Settings
from models.quiz_models import AnalysisResult, QuizQuestion, TopWordsOptions, WordCount

logger = logging.getLogger(__name__)


def partition_questions(questions: Sequence[QuizQuestion],
                        threshold: float = WELL_ANSWER_THRESHOLD
                        ) -> Tuple[List[QuizQuestion], List[QuizQuestion]]:
    """
    Splits questions into (well answered, wrong answered).
    A question exactly at the threshold counts as well answered. Questions
    without a numeric correctness rate land in neither group.
    """
    well, wrong = [], []
    for question in questions:
        rate = getattr(question, "percent_correct", None)
        if not isinstance(rate, Real) or isinstance(rate, bool) or math.isnan(rate):
            logger.warning("Skipping question without a numeric correctness rate: %r", rate)
            continue
        if rate >= threshold:
            well.append(question)
        else:
            wrong.append(question)
    return well, wrong


def get_words_from_questions(questions: Sequence[QuizQuestion]) -> List[str]:
    texts = " ".join(q.text if isinstance(q.text, str) else "" for q in questions)
    return tokenize(texts)


def get_top_words_from_questions(questions: Sequence[QuizQuestion],
                                 options: TopWordsOptions = TopWordsOptions()) -> List[WordCount]:
    """Ranks the words of one question group. Failures degrade to an empty list."""
    if not questions:
        return []

    try:
        frequency = get_frequency(get_words_from_questions(questions))
        ranked = get_top_words(frequency, options.min_frequency, options.limit)
        return [WordCount(word=word, count=int(count)) for word, count in ranked]
    except Exception:
        logger.exception("Failed to rank words for a group of %d questions", len(questions))
        return []


def analyze_questions(questions: Optional[Sequence[QuizQuestion]],
                      settings: Settings = Settings()) -> Optional[AnalysisResult]:
    """
    Runs the full analysis:
    1. Partition by the well-answered threshold
    2. Rank the words of each group
    3. Summarize over the words of both groups combined

    Returns None when there is nothing to analyze.
    """
    if not questions:
        return None

    options = settings.top_words_options()
    well, wrong = partition_questions(questions, settings.well_threshold)

    all_words = get_words_from_questions(well) + get_words_from_questions(wrong)
    summary = calculate_summary(well + wrong, well, wrong, all_words)

    logger.info(
        "Analyzed %d questions (%d well answered, %d wrong answered, %d words)",
        summary.total_questions, summary.well_answered_count,
        summary.wrong_answered_count, summary.words_analyzed,
    )

    return AnalysisResult(
        summary=summary,
        well_answered=get_top_words_from_questions(well, options),
        wrong_answered=get_top_words_from_questions(wrong, options),
    )


def word_counts_to_frame(word_counts: Sequence[WordCount]) -> pd.DataFrame:
    """Tabulates a ranking as Word/Count columns, keeping the rank order."""
    return pd.DataFrame(
        [{"Word": wc.word, "Count": wc.count} for wc in word_counts],
        columns=["Word", "Count"],
    )
