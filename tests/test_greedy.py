"""Tests for the greedy tracers."""

import pytest

from algorithms.greedy import (
    Activity,
    Item,
    Job,
    activity_selection_steps,
    coin_change_steps,
    fractional_knapsack_steps,
    huffman_steps,
    job_sequencing_steps,
)

ACTIVITIES = [
    Activity(1, 1, 4), Activity(2, 3, 5), Activity(3, 0, 6), Activity(4, 5, 7),
    Activity(5, 3, 9), Activity(6, 5, 9), Activity(7, 6, 10), Activity(8, 8, 11),
    Activity(9, 8, 12), Activity(10, 2, 14),
]


class TestActivitySelection:
    """Earliest-finish-first selection."""

    def test_classic_instance_selects_1_4_8(self):
        steps = activity_selection_steps(ACTIVITIES)
        assert [a.id for a in steps[-1].selected] == [1, 4, 8]
        assert steps[-1].is_final

    def test_first_step_sorts_by_finish(self):
        first = activity_selection_steps(ACTIVITIES)[0]
        finishes = [a.finish for a in first.activities]
        assert finishes == sorted(finishes)

    def test_selected_activities_never_overlap(self):
        selected = activity_selection_steps(ACTIVITIES)[-1].selected
        for prev, nxt in zip(selected, selected[1:]):
            assert nxt.start >= prev.finish

    def test_empty_input(self):
        assert activity_selection_steps([]) == []


class TestHuffman:
    """Huffman tree construction and code assignment."""

    def test_abracadabra_codes(self):
        steps = huffman_steps("abracadabra")
        last = steps[-1]
        assert len(steps) == 6          # leaves, four merges, codes
        assert last.codes["a"] == "0"
        assert len(last.encoded) == 23
        assert last.tree.frequency == 11

    def test_codes_are_prefix_free(self):
        codes = huffman_steps("mississippi river")[-1].codes
        values = list(codes.values())
        for a in values:
            for b in values:
                if a != b:
                    assert not b.startswith(a)

    def test_single_symbol_gets_code_zero(self):
        last = huffman_steps("aaaa")[-1]
        assert last.codes == {"a": "0"}
        assert last.encoded == "0000"

    def test_empty_text(self):
        assert huffman_steps("") == []


class TestCoinChangeGreedy:
    """Largest-coin-first change making."""

    def test_63_with_us_coins(self):
        last = coin_change_steps(63, [1, 5, 10, 25])[-1]
        assert [(c.value, c.count) for c in last.coins_used] == [(25, 2), (10, 1), (1, 3)]
        assert last.remaining_amount == 0

    def test_denominations_sorted_descending(self):
        first = coin_change_steps(30, [5, 25, 10])[0]
        assert first.denominations == [25, 10, 5]

    def test_inexact_change_is_reported(self):
        last = coin_change_steps(6, [4])[-1]
        assert last.remaining_amount == 2
        assert "Cannot make exact change" in last.explanation

    def test_no_usable_coins(self):
        assert coin_change_steps(10, [0, -5]) == []


class TestFractionalKnapsack:
    """Value-per-weight greedy fill."""

    ITEMS = [Item(1, 10, 60), Item(2, 20, 100), Item(3, 30, 120), Item(4, 15, 80), Item(5, 25, 120)]

    def test_total_value(self):
        last = fractional_knapsack_steps(50, self.ITEMS)[-1]
        assert last.total_value == pytest.approx(264)
        assert last.remaining_capacity == 0

    def test_only_last_taken_item_is_fractional(self):
        taken = fractional_knapsack_steps(50, self.ITEMS)[-1].selected_items
        assert [t.item.id for t in taken] == [1, 4, 2, 5]
        assert all(t.fraction == 1.0 for t in taken[:-1])
        assert taken[-1].fraction == pytest.approx(0.2)

    def test_zero_weight_item_is_rejected(self):
        assert fractional_knapsack_steps(10, [Item(1, 0, 5)]) == []

    def test_item_serialises_ratio(self):
        assert Item(1, 4, 10).to_dict()["ratio"] == 2.5


class TestJobSequencing:
    """Most-profitable-first scheduling into latest free slots."""

    JOBS = [Job(1, 4, 20), Job(2, 1, 10), Job(3, 1, 40), Job(4, 2, 30), Job(5, 3, 25)]

    def test_schedule_and_profit(self):
        last = job_sequencing_steps(self.JOBS)[-1]
        assert last.sequence == [3, 4, 5, 1]
        assert last.total_profit == 115

    def test_rejected_job_has_no_slot(self):
        last = job_sequencing_steps(self.JOBS)[-1]
        assert 2 not in [j.id for j in last.result]

    def test_empty_input(self):
        assert job_sequencing_steps([]) == []
