"""Tests for the number-theory tracers.

Each test checks the computed answer on the final step plus the shape
guarantees every trace carries (numbering, final flag, invalid input).
"""

import pytest

from algorithms.mathematical import (
    fast_exp_steps,
    fibonacci_steps,
    gcd_steps,
    prime_factor_steps,
    sieve_steps,
)


def assert_well_formed(steps):
    assert steps, "expected a non-empty trace"
    assert [s.step_number for s in steps] == list(range(len(steps)))
    assert [s.is_final for s in steps] == [False] * (len(steps) - 1) + [True]
    assert all(s.explanation for s in steps)


class TestGCD:
    """Euclidean GCD traces."""

    def test_gcd_48_18_is_6(self):
        steps = gcd_steps(48, 18)
        assert_well_formed(steps)
        assert steps[-1].result == 6
        assert steps[-1].is_complete

    def test_operands_are_ordered_larger_first(self):
        steps = gcd_steps(18, 48)
        assert (steps[0].a, steps[0].b) == (48, 18)
        assert steps[-1].result == 6

    def test_division_step_records_remainder(self):
        divisions = [s for s in gcd_steps(48, 18) if s.remainder is not None]
        assert [s.remainder for s in divisions] == [12, 6, 0]

    @pytest.mark.parametrize("a,b", [(0, 5), (5, 0), (-4, 8)])
    def test_non_positive_operand_gives_empty_trace(self, a, b):
        assert gcd_steps(a, b) == []


class TestSieve:
    """Sieve of Eratosthenes traces."""

    def test_sieve_30_finds_ten_primes(self):
        steps = sieve_steps(30)
        assert_well_formed(steps)
        assert steps[-1].primes == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]

    def test_final_sieve_array_matches_primes(self):
        last = sieve_steps(30)[-1]
        assert [i for i, flag in enumerate(last.sieve) if flag] == last.primes

    def test_marked_numbers_start_at_square(self):
        marks = [s for s in sieve_steps(30) if s.marked_numbers]
        assert marks[0].current_number == 2
        assert marks[0].marked_numbers[0] == 4

    def test_n_below_two_gives_empty_trace(self):
        assert sieve_steps(1) == []


class TestFastExponentiation:
    """Square-and-multiply traces."""

    def test_three_to_the_tenth(self):
        steps = fast_exp_steps(3, 10)
        assert_well_formed(steps)
        assert steps[-1].result == 59049
        assert steps[0].binary_rep == "1010"

    def test_zero_exponent_is_one(self):
        assert fast_exp_steps(7, 0)[-1].result == 1

    def test_negative_base(self):
        assert fast_exp_steps(-2, 5)[-1].result == -32

    def test_negative_exponent_gives_empty_trace(self):
        assert fast_exp_steps(2, -1) == []


class TestFibonacci:
    """Iterative Fibonacci traces."""

    def test_fib_10_is_55(self):
        steps = fibonacci_steps(10)
        assert_well_formed(steps)
        assert steps[-1].sequence[10] == 55

    def test_fib_0_is_single_step(self):
        steps = fibonacci_steps(0)
        assert len(steps) == 1
        assert steps[0].sequence == [0]

    def test_formula_on_recurrence_steps(self):
        steps = fibonacci_steps(5)
        assert steps[2].formula == "F(2) = 1 + 0"

    def test_negative_n_gives_empty_trace(self):
        assert fibonacci_steps(-1) == []


class TestPrimeFactorization:
    """Trial-division factorisation traces."""

    def test_84_is_2_2_3_7(self):
        steps = prime_factor_steps(84)
        assert_well_formed(steps)
        assert steps[-1].factors == [2, 2, 3, 7]
        assert steps[-1].is_complete

    def test_prime_input_is_its_own_factor(self):
        assert prime_factor_steps(97)[-1].factors == [97]

    def test_power_of_two(self):
        assert prime_factor_steps(64)[-1].factors == [2] * 6

    def test_factors_multiply_back(self):
        factors = prime_factor_steps(9240)[-1].factors
        product = 1
        for f in factors:
            product *= f
        assert product == 9240

    def test_n_below_two_gives_empty_trace(self):
        assert prime_factor_steps(1) == []
