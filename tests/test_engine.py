"""
Testing pure game logic.
"""
import itertools

import pytest

from mastermind.engine import ScoreResult, evaluate


def test_evaluate_no_matches():
    result = evaluate([1, 2, 3, 4], [5, 5, 6, 6])
    assert result == ScoreResult(black=0, white=0)


def test_evaluate_exact_match():
    result = evaluate([3, 4, 1, 6], [3, 4, 1, 6])
    assert result.black == 4
    assert result.white == 0
    assert result.is_win(4)


def test_evaluate_permutation_without_fixed_points():
    # every digit is present but none in its place
    result = evaluate([1, 2, 3, 4], [2, 1, 4, 3])
    assert result == ScoreResult(black=0, white=4)


def test_evaluate_duplicates_cross_match():
    result = evaluate([1, 1, 2, 2], [1, 2, 1, 2])
    assert result.black == 2
    assert result.white == 2


def test_evaluate_duplicates_not_over_counted():
    # only the two 1s that sit in place count; the secret has no 2
    result = evaluate([1, 1, 1, 1], [1, 1, 2, 2])
    assert result == ScoreResult(black=2, white=0)


def test_evaluate_black_position_not_reused_for_white():
    # the 6 in position 0 is black; the extra 6s in the guess find nothing
    result = evaluate([6, 1, 2, 3], [6, 6, 6, 6])
    assert result == ScoreResult(black=1, white=0)


def test_evaluate_secret_position_used_once_for_white():
    # secret has a single 5; two 5s in the guess can only score one white
    result = evaluate([5, 1, 1, 1], [2, 5, 5, 2])
    assert result == ScoreResult(black=0, white=1)


def test_evaluate_does_not_mutate_inputs():
    secret = [1, 1, 2, 2]
    guess = [1, 2, 1, 2]
    evaluate(secret, guess)
    assert secret == [1, 1, 2, 2]
    assert guess == [1, 2, 1, 2]


def test_evaluate_never_double_counts():
    # exhaustive over a small alphabet: black + white never exceeds the length
    codes = [list(c) for c in itertools.product([1, 2, 3], repeat=3)]
    for secret in codes:
        for guess in codes:
            result = evaluate(secret, guess)
            assert result.black + result.white <= 3
            assert (result.black == 3) == (secret == guess)


def test_evaluate_other_lengths():
    assert evaluate([1, 2, 3, 4, 5], [5, 4, 3, 2, 1]) == ScoreResult(black=1, white=4)
    assert evaluate([7], [7]) == ScoreResult(black=1, white=0)


@pytest.mark.parametrize("secret, guess", [([1, 2, 3, 4], [1, 2, 3]), ([], [])])
def test_evaluate_rejects_bad_lengths(secret, guess):
    with pytest.raises(ValueError):
        evaluate(secret, guess)


def test_score_result_is_win():
    assert ScoreResult(black=4, white=0).is_win(4)
    assert not ScoreResult(black=3, white=1).is_win(4)
    assert ScoreResult(black=5, white=0).is_win(5)
