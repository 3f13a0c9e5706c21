from collections import Counter

import pytest

from saltong.models.errors import IncompleteGuessError
from saltong.models.game import LetterStatus
from saltong.services.scoring import score, score_attempt

C = LetterStatus.correct
S = LetterStatus.wrongSpot
W = LetterStatus.wrong


def test_repeated_guess_letter_only_marked_as_often_as_answer_has_it():
    assert score('ALLOP', 'APPLE') == [C, S, W, W, S]


def test_exact_guess_is_all_correct():
    for word in ('APPLE', 'ARAW', 'KALABAW'):
        assert score(word, word) == [C] * len(word)


def test_comparison_ignores_case():
    assert score('apple', 'APPLE') == [C] * 5
    assert score('ALLOP', 'apple') == [C, S, W, W, S]


def test_positional_match_wins_over_earlier_duplicate():
    assert score('BBBBB', 'ABBEY') == [W, C, C, W, W]
    assert score('SPEED', 'ABIDE') == [W, W, S, W, S]


def test_length_mismatch_raises_with_expected_length():
    with pytest.raises(IncompleteGuessError) as exc_info:
        score('APPLES', 'APPLE')
    assert exc_info.value.expected_length == 5

    with pytest.raises(IncompleteGuessError):
        score('', 'ARAW')


@pytest.mark.parametrize('guess, answer', [
    ('ALLOP', 'APPLE'),
    ('EEEEE', 'EERIE'),
    ('LLAMA', 'LABAL'),
    ('AAAAAAA', 'KALABAW'),
    ('TAKBO', 'TAKOT'),
    ('PAPAA', 'APPLE'),
])
def test_marks_never_exceed_answer_multiplicity(guess, answer):
    statuses = score(guess, answer)
    answer_counts = Counter(answer)
    marked = Counter(letter for letter, status in zip(guess, statuses) if status != W)

    for letter, count in marked.items():
        assert count <= answer_counts[letter]


def test_score_attempt_pairs_uppercase_letters_with_statuses():
    attempt = score_attempt('allop', 'APPLE')

    assert attempt.letters == 'ALLOP'
    assert attempt.statuses == (C, S, W, W, S)
    assert not attempt.is_solved
    assert score_attempt('apple', 'APPLE').is_solved


def test_letters_without_single_letter_uppercase_keep_word_length():
    assert score('STRAßE', 'STRASE') == [C, C, C, C, W, C]
    assert score_attempt('straße', 'STRASE').letters == 'STRAßE'

    with pytest.raises(IncompleteGuessError) as exc_info:
        score('ß', 'SS')
    assert exc_info.value.expected_length == 2
