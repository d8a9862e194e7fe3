from collections import Counter
from itertools import product

import pytest

from wordlesolver.classes.Feedback import ALL_CORRECT, Feedback, FeedbackCode, compare_words
from wordlesolver.classes.Word import Word


def cmp(guess, answer):
    return compare_words(Word.parse(guess), Word.parse(answer)).pattern()


@pytest.mark.parametrize("guess,answer,expected", [
    ("aabbb", "ababa", "gyygb"),
    ("abcde", "edcba", "yygyy"),
    ("belle", "level", "bgyyy"),
    ("cools", "scoop", "yygby"),
    ("raise", "crane", "yybbg"),
    ("stare", "crane", "bbgyg"),
    ("lemon", "level", "ggbbb"),
    ("abide", "adieu", "gbgyy"),
    ("abide", "added", "gbbyy"),
    ("speed", "abide", "bbyby"),
    ("eerie", "there", "ybybg"),
])
def test_compare_golden(guess, answer, expected):
    assert cmp(guess, answer) == expected


def test_repeated_letter_claims_one_occurrence():
    # the answer's single `a` is taken by the exact match at position 0
    assert cmp("aaxxx", "abcde") == "gbbbb"
    # exact matches are claimed before present-elsewhere ones
    assert cmp("xaaxx", "yyaay") == "bygbb"


@pytest.mark.parametrize("word", ["crane", "aaaaa", "level", "abide"])
def test_compare_with_itself_is_all_correct(word):
    w = Word.parse(word)
    assert compare_words(w, w) == ALL_CORRECT
    assert ALL_CORRECT == 0


SAMPLE = ["aabbb", "ababa", "level", "belle", "eerie", "there", "speed", "abide", "llama"]


def test_marked_letters_never_exceed_answer_letters():
    for guess, answer in product(SAMPLE, SAMPLE):
        states = compare_words(Word.parse(guess), Word.parse(answer)).states()
        marked = Counter(c for c, fb in zip(guess, states) if fb != Feedback.incorrect)
        available = Counter(answer)
        for letter, count in marked.items():
            assert count <= available[letter], (guess, answer)


def test_encoding_is_base_three_most_significant_first():
    assert FeedbackCode.from_pattern("ggggg") == 0
    assert FeedbackCode.from_pattern("ggggy") == 1
    assert FeedbackCode.from_pattern("ygggg") == 81
    assert FeedbackCode.from_pattern("gyygb") == 38
    assert FeedbackCode.from_pattern("bbbbb") == 242


def test_encoding_is_a_bijection():
    patterns = {FeedbackCode(n).pattern() for n in range(243)}
    assert len(patterns) == 243
    assert {FeedbackCode.from_pattern(p) for p in patterns} == set(range(243))


def test_code_rejects_out_of_range():
    with pytest.raises(ValueError):
        FeedbackCode(243)
    with pytest.raises(ValueError):
        FeedbackCode(-1)
    with pytest.raises(ValueError):
        FeedbackCode.from_pattern("ggg")
    with pytest.raises(ValueError):
        FeedbackCode.from_pattern("gggxg")


def test_emoji_rendering():
    assert FeedbackCode.from_pattern("gybbb").emoji() == "🟩🟨⬛⬛⬛"
