"""Tests for tokenizing, counting, ranking and summarizing."""

import pytest

from analytics.text_processing import (
    MIN_WORD_LENGTH,
    STOP_WORDS,
    calculate_summary,
    get_frequency,
    get_top_words,
    round_half_up,
    tokenize,
)
from models.quiz_models import QuizQuestion


def _questions(n):
    return [QuizQuestion(f"question {i}", 0.5) for i in range(n)]


# tokenize

def test_tokenize_removes_stop_words():
    text = "the quick brown fox jumps over the lazy dog"
    assert tokenize(text) == ["quick", "brown", "fox", "jumps", "over", "lazy", "dog"]


def test_tokenize_strips_punctuation():
    assert tokenize("Hello, world! How are you?") == ["hello", "world"]


def test_tokenize_lowercases():
    assert tokenize("HELLO WORLD") == ["hello", "world"]


def test_tokenize_drops_short_words():
    assert tokenize("a b c hello world") == ["hello", "world"]


def test_tokenize_keeps_numbers():
    assert tokenize("hello 123 world 456") == ["hello", "123", "world", "456"]


def test_tokenize_glues_words_joined_by_symbols():
    assert tokenize("hello-world test@example.com") == ["helloworld", "testexamplecom"]


def test_tokenize_keeps_order_and_duplicates():
    assert tokenize("market growth market") == ["market", "growth", "market"]


def test_tokenize_splits_on_any_whitespace_run():
    assert tokenize("  climate\tchange\n\nglobal  ") == ["climate", "change", "global"]


@pytest.mark.parametrize("value", ["", None, 42, ["hello world"], {"text": "hello"}])
def test_tokenize_non_text_is_empty(value):
    assert tokenize(value) == []


def test_tokenize_only_punctuation_is_empty():
    assert tokenize("?! -- ...") == []


def test_tokenize_output_never_short_or_stop_word():
    text = "I do it, we DID it; a x is to be... Were they? OK ok 7 77 café"
    words = tokenize(text)
    assert words
    assert all(len(w) >= MIN_WORD_LENGTH for w in words)
    assert not set(words) & STOP_WORDS


def test_tokenize_accepts_custom_stop_words_and_length():
    assert tokenize("alpha beta gamma", stop_words=frozenset({"beta"}), min_word_length=5) == ["alpha", "gamma"]


def test_stop_words_list():
    assert len(STOP_WORDS) == 52
    assert {"the", "how", "are", "you", "shall", "did"} <= STOP_WORDS
    assert "over" not in STOP_WORDS


# get_frequency

def test_frequency_counts_words():
    words = ["hello", "world", "hello", "test", "world", "hello"]
    assert get_frequency(words) == {"hello": 3, "world": 2, "test": 1}


def test_frequency_all_same_word():
    assert get_frequency(["same"] * 4) == {"same": 4}


def test_frequency_skips_blank_entries():
    words = ["hello", "", "  ", "world", "\t", "hello"]
    frequency = get_frequency(words)
    assert frequency == {"hello": 2, "world": 1}
    assert sum(frequency.values()) == len(words) - 3


def test_frequency_is_case_sensitive():
    assert get_frequency(["Hello", "hello", "HELLO", "hello"]) == {"Hello": 1, "hello": 2, "HELLO": 1}


@pytest.mark.parametrize("value", [None, []])
def test_frequency_empty_input(value):
    assert get_frequency(value) == {}


def test_frequency_keeps_first_seen_order():
    assert list(get_frequency(["b", "a", "b", "c"])) == ["b", "a", "c"]


# get_top_words

def test_top_words_sorted_by_frequency():
    frequency = {"hello": 5, "world": 3, "test": 1, "example": 4}
    assert get_top_words(frequency) == [("hello", 5), ("example", 4), ("world", 3)]


def test_top_words_minimum_frequency():
    frequency = {"hello": 5, "world": 3, "test": 1, "example": 2}
    assert get_top_words(frequency, min_frequency=3) == [("hello", 5), ("world", 3)]


def test_top_words_limit():
    frequency = {f"w{i}": i for i in range(1, 20)}
    result = get_top_words(frequency, min_frequency=3, limit=10)
    assert len(result) == 10
    assert result[0] == ("w19", 19)
    assert all(count >= 3 for _, count in result)
    counts = [count for _, count in result]
    assert counts == sorted(counts, reverse=True)


def test_top_words_ties_keep_mapping_order():
    frequency = {"zeta": 2, "alpha": 3, "beta": 2, "gamma": 3, "delta": 2}
    assert get_top_words(frequency, limit=5) == [
        ("alpha", 3), ("gamma", 3), ("zeta", 2), ("beta", 2), ("delta", 2),
    ]


def test_top_words_nothing_reaches_minimum():
    assert get_top_words({"rare": 1, "word": 2}, min_frequency=3) == []


@pytest.mark.parametrize("value", [None, {}])
def test_top_words_empty_input(value):
    assert get_top_words(value) == []


def test_top_words_does_not_modify_input():
    frequency = {"a1": 1, "b2": 2}
    get_top_words(frequency)
    assert frequency == {"a1": 1, "b2": 2}


# calculate_summary

def test_summary_counts():
    questions = _questions(4)
    words = ["w"] * 8
    summary = calculate_summary(questions, questions[:2], questions[2:], words)
    assert summary.total_questions == 4
    assert summary.well_answered_count == 2
    assert summary.wrong_answered_count == 2
    assert summary.words_analyzed == 8
    assert summary.average_words_per_question == 2


def test_summary_only_wrong_answered():
    questions = _questions(2)
    summary = calculate_summary(questions, [], questions, ["one", "two", "three", "four"])
    assert summary.well_answered_count == 0
    assert summary.wrong_answered_count == 2
    assert summary.average_words_per_question == 2


def test_summary_rounds_average():
    questions = _questions(2)
    summary = calculate_summary(questions, questions, [], ["one", "two", "three"])
    assert summary.average_words_per_question == 1.5


def test_summary_rounds_to_two_decimals():
    questions = _questions(3)
    summary = calculate_summary(questions, questions, [], ["w"] * 10)
    assert summary.average_words_per_question == 3.33


def test_summary_without_questions():
    summary = calculate_summary([], [], [], [])
    assert summary.total_questions == 0
    assert summary.average_words_per_question == 0
    assert summary.words_analyzed == 0


def test_summary_is_repeatable():
    questions = _questions(3)
    args = (questions, questions[:1], questions[1:], ["w"] * 7)
    assert calculate_summary(*args) == calculate_summary(*args)


def test_summary_to_dict_keys():
    questions = _questions(4)
    summary = calculate_summary(questions, questions[:2], questions[2:], ["w"] * 8)
    assert summary.to_dict() == {
        "totalQuestions": 4,
        "wellAnsweredCount": 2,
        "wrongAnsweredCount": 2,
        "averageWordsPerQuestion": 2,
        "wordsAnalyzed": 8,
    }


@pytest.mark.parametrize("value, expected", [(0.125, 0.13), (4.375, 4.38), (2.5, 2.5), (10 / 3, 3.33)])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected
