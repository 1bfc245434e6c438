import dataclasses

import pytest

from docsim.self_check import SELF_CHECK_CASES
from docsim.similarity import SimilarityResult, Verdict, classify, compare, score

PAIRS = [
    ("cat dog", "cat dog bird"),
    ("The quick brown fox.", "A slow green turtle!"),
    ("今天天气晴", "今天下雨"),
    ("", "something"),
    ("a", "b"),
] + [(a, b) for _, a, b in SELF_CHECK_CASES]


def test_identical_fingerprints():
    result = score(0, 0)
    assert result == SimilarityResult(0, 1.0, Verdict.HIGH)


@pytest.mark.parametrize(
    "difference, verdict",
    [
        (0, Verdict.HIGH),
        (12, Verdict.HIGH),
        (13, Verdict.MODERATE),
        (32, Verdict.MODERATE),
        (33, Verdict.LIGHT),
        (44, Verdict.LIGHT),
        (45, Verdict.LOW),
        (64, Verdict.LOW),
    ],
)
def test_verdict_bands(difference, verdict):
    result = score(0, (1 << difference) - 1)
    assert result.difference_score == difference
    assert result.similarity_ratio == 1.0 - difference / 64
    assert result.verdict == verdict


def test_classify_lower_bounds_are_inclusive():
    assert classify(0.8) == Verdict.HIGH
    assert classify(0.5) == Verdict.MODERATE
    assert classify(0.3) == Verdict.LIGHT
    assert classify(0.29) == Verdict.LOW


def test_verdicts_are_ordered_and_labelled():
    assert Verdict.LOW < Verdict.LIGHT < Verdict.MODERATE < Verdict.HIGH
    assert Verdict.HIGH.label == "highly similar / possible plagiarism"
    assert Verdict.LOW.label == "low similarity / likely original"


def test_exact_score_for_single_letter_documents():
    result = compare("a", "b")
    assert result.difference_score == 3
    assert result.similarity_ratio == 1.0 - 3 / 64
    assert result.verdict == Verdict.HIGH


def test_exact_score_against_empty_document():
    # fingerprint of "a" is 183051, which has 9 bits set
    result = compare("a", "")
    assert result.difference_score == 9
    assert result.percentage == "85.94%"


@pytest.mark.parametrize("text_a, text_b", PAIRS)
def test_compare_is_symmetric(text_a, text_b):
    assert compare(text_a, text_b) == compare(text_b, text_a)


@pytest.mark.parametrize("text_a, text_b", PAIRS)
def test_compare_is_deterministic(text_a, text_b):
    assert compare(text_a, text_b) == compare(text_a, text_b)


@pytest.mark.parametrize("text_a, text_b", PAIRS)
def test_result_ranges(text_a, text_b):
    result = compare(text_a, text_b)
    assert 0 <= result.difference_score <= 64
    assert 0.0 <= result.similarity_ratio <= 1.0


@pytest.mark.parametrize("text", [t for pair in PAIRS for t in pair])
def test_self_similarity(text):
    result = compare(text, text)
    assert result.difference_score == 0
    assert result.similarity_ratio == 1.0
    assert result.verdict == Verdict.HIGH


@pytest.mark.parametrize("text_a, text_b", [("", ""), ("   ", "\n\t"), (None, ""), (None, None)])
def test_empty_documents_compare_as_identical(text_a, text_b):
    assert compare(text_a, text_b) == SimilarityResult(0, 1.0, Verdict.HIGH)


def test_case_and_punctuation_do_not_matter():
    assert compare("Cat Dog", "cat, dog!").difference_score == 0
    assert compare("Hello world", "HELLO... World?").difference_score == 0


def test_result_is_immutable():
    result = compare("a", "b")
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.difference_score = 0
