"""Tests for baby-step giant-step."""
import pytest

from numTheory.discrete_log import baby_step_giant_step
from numTheory.errors import InvalidArgument


def brute_force_log(g, h, p):
    value = 1
    for x in range(p):
        if value == h % p:
            return x
        value = value * g % p
    return None


def test_classic_example():
    x = baby_step_giant_step(2, 11, 59)
    assert pow(2, x, 59) == 11
    assert x == brute_force_log(2, 11, 59)


def test_every_target_for_a_generator():
    p, g = 59, 2
    for h in range(1, p):
        x = baby_step_giant_step(g, h, p)
        assert pow(g, x, p) == h
        assert x == brute_force_log(g, h, p)


def test_minimal_exponent_when_base_has_small_order():
    """2 has order 5 mod 31, so every power repeats inside the baby-step table."""
    p, g = 31, 2
    for h in range(1, p):
        assert baby_step_giant_step(g, h, p) == brute_force_log(g, h, p)
    assert baby_step_giant_step(2, pow(2, 7, 31), 31) == 2


def test_target_outside_subgroup_has_no_solution():
    assert baby_step_giant_step(2, 3, 31) is None
    assert baby_step_giant_step(5, 0, 23) is None


def test_zero_is_a_valid_answer():
    assert baby_step_giant_step(3, 1, 101) == 0


def test_larger_prime():
    p = 1000003
    g = 2
    x0 = 777777
    x = baby_step_giant_step(g, pow(g, x0, p), p)
    assert pow(g, x, p) == pow(g, x0, p)
    assert x <= x0


def test_invalid_inputs():
    with pytest.raises(InvalidArgument):
        baby_step_giant_step(2, 1, 1)
    with pytest.raises(InvalidArgument):
        baby_step_giant_step(59, 11, 59)
