"""
Data Models for Quiz Word Analysis
==================================

This module defines the data structures used to represent quiz questions and
analysis results throughout the fetching and analysis pipeline. All models are
implemented as dataclasses.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class QuizQuestion:
    text: str
    percent_correct: float


@dataclass(frozen=True)
class WordCount:
    word: str
    count: int


@dataclass(frozen=True)
class TopWordsOptions:
    """How many ranked words to keep and the minimum count a word needs."""
    min_frequency: int = 1
    limit: int = 3


@dataclass(frozen=True)
class AnalysisSummary:
    total_questions: int
    well_answered_count: int
    wrong_answered_count: int
    average_words_per_question: float
    words_analyzed: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalQuestions": self.total_questions,
            "wellAnsweredCount": self.well_answered_count,
            "wrongAnsweredCount": self.wrong_answered_count,
            "averageWordsPerQuestion": self.average_words_per_question,
            "wordsAnalyzed": self.words_analyzed,
        }


@dataclass
class AnalysisResult:
    summary: AnalysisSummary
    well_answered: List[WordCount] = field(default_factory=list)
    wrong_answered: List[WordCount] = field(default_factory=list)
