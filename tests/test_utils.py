import pytest

from isingmc.utils import rel_err


def test_exact_match_is_zero():
    assert rel_err(3.5, 3.5) == 0.0


def test_simple_relative_error():
    assert rel_err(1.1, 1.0) == pytest.approx(0.1)


def test_sign_of_exact_ignored():
    assert rel_err(-2.0, -4.0) == pytest.approx(rel_err(2.0, 4.0))


def test_symmetric_deviation():
    assert rel_err(12.0, 10.0) == pytest.approx(rel_err(8.0, 10.0))


def test_non_negative():
    assert rel_err(-5.0, 3.0) >= 0.0


def test_zero_exact_rejected():
    with pytest.raises(ValueError):
        rel_err(1.0, 0.0)