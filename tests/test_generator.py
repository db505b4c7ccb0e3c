import pytest

import mastermind.generator as generator
from mastermind.config import GameConfig
from mastermind.generator import generate_code, generate_code_for


def test_generate_code_shape_and_range():
    for _ in range(200):
        code = generate_code(4, 1, 6)
        assert len(code) == 4
        assert all(1 <= d <= 6 for d in code)


def test_generate_code_covers_whole_range():
    seen = set()
    for _ in range(500):
        seen.update(generate_code(4, 1, 6))
    assert seen == {1, 2, 3, 4, 5, 6}


def test_generate_code_uses_randbelow(monkeypatch):
    # randbelow(6) -> 0..5, shifted to 1..6
    values = iter([2, 3, 0, 5])
    monkeypatch.setattr(generator, "randbelow", lambda span: next(values))
    assert generate_code(4, 1, 6) == [3, 4, 1, 6]


def test_generate_code_for_config():
    code = generate_code_for(GameConfig(code_length=6, min_digit=0, max_digit=2))
    assert len(code) == 6
    assert all(0 <= d <= 2 for d in code)


def test_generate_code_single_value_range():
    assert generate_code(3, 5, 5) == [5, 5, 5]


@pytest.mark.parametrize("length, low, high", [(0, 1, 6), (4, 6, 1)])
def test_generate_code_rejects_bad_parameters(length, low, high):
    with pytest.raises(ValueError):
        generate_code(length, low, high)
