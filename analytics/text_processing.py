"""
Text Processing Module
======================

Tokenizing, counting and ranking of question words, plus the summary
statistics reported next to the rankings.

Punctuation and symbols are deleted rather than treated as separators, so
"hello-world" becomes the single token "helloworld". Downstream rankings rely
on this behaviour.
"""

import math
import re
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Sequence, Tuple

from models.quiz_models import AnalysisSummary, QuizQuestion

STOP_WORDS: FrozenSet[str] = frozenset({
    "the", "a", "an", "and", "or", "but", "is", "are", "was", "were", "be",
    "been", "to", "of", "in", "on", "for", "with", "as", "at", "by", "from",
    "that", "this", "it", "its", "your", "you", "we", "they", "their", "our",
    "i", "what", "which", "who", "whom", "how", "why", "when", "where", "can",
    "could", "should", "would", "may", "might", "will", "shall", "do", "does",
    "did",
})

# Excludes single characters
MIN_WORD_LENGTH = 2

_NON_WORD_CHARS = re.compile(r"[^a-zA-Z0-9\s]")


def tokenize(text, stop_words: FrozenSet[str] = STOP_WORDS,
             min_word_length: int = MIN_WORD_LENGTH) -> List[str]:
    """
    Lowercases the text, strips everything except ASCII letters, digits and
    whitespace, and returns the remaining words in order of appearance,
    without stop words and words shorter than ``min_word_length``.
    Anything that is not a string yields an empty list.
    """
    if not text or not isinstance(text, str):
        return []

    cleaned = _NON_WORD_CHARS.sub("", text.lower())
    return [
        word for word in cleaned.split()
        if len(word) >= min_word_length and word not in stop_words
    ]


def get_frequency(words: Optional[Iterable[str]]) -> Dict[str, int]:
    """Counts each word; empty, blank and non-string entries are skipped."""
    frequency: Dict[str, int] = {}
    if not words:
        return frequency

    for word in words:
        if isinstance(word, str) and word.strip():
            frequency[word] = frequency.get(word, 0) + 1

    return frequency


def get_top_words(frequency: Optional[Mapping[str, int]], min_frequency: int = 1,
                  limit: int = 3) -> List[Tuple[str, int]]:
    """
    Returns up to ``limit`` (word, count) pairs with ``count >= min_frequency``,
    most frequent first. The sort is stable: words with the same count keep the
    iteration order of ``frequency``, which is first-seen order for maps built
    by ``get_frequency``.
    """
    if not frequency:
        return []

    candidates = [(word, count) for word, count in frequency.items() if count >= min_frequency]
    ranked = sorted(candidates, key=lambda item: item[1], reverse=True)
    return ranked[:max(limit, 0)]


def round_half_up(value: float, digits: int = 2) -> float:
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def calculate_summary(all_questions: Sequence[QuizQuestion],
                      well_questions: Sequence[QuizQuestion],
                      wrong_questions: Sequence[QuizQuestion],
                      all_words: Sequence[str]) -> AnalysisSummary:
    """
    Aggregates question and word counts. The caller decides which words
    ``all_words`` holds; it is counted as given.
    """
    total_questions = len(all_questions)
    total_words = len(all_words)
    average = total_words / total_questions if total_questions > 0 else 0

    return AnalysisSummary(
        total_questions=total_questions,
        well_answered_count=len(well_questions),
        wrong_answered_count=len(wrong_questions),
        average_words_per_question=round_half_up(average),
        words_analyzed=total_words,
    )
