"""Tests for the array, stack, queue and linked-list operation tracers."""

import random

import pytest

from algorithms.data_structures import (
    array_add_steps,
    array_insert_steps,
    array_remove_steps,
    array_update_steps,
    linked_list_delete_steps,
    linked_list_insert_steps,
    linked_list_search_steps,
    queue_dequeue_steps,
    queue_enqueue_steps,
    random_array,
    stack_pop_steps,
    stack_push_steps,
)


class TestArray:
    """Array operations."""

    def test_add_appends(self):
        steps = array_add_steps([10, 20, 30], 40)
        assert steps[-1].items == [10, 20, 30, 40]
        assert steps[-1].active_index == 3

    def test_insert_shifts_tail(self):
        steps = array_insert_steps([10, 20, 30], 1, 15)
        assert steps[0].items == [10, 20, 30]
        assert steps[-1].items == [10, 15, 20, 30]

    def test_insert_at_end_is_allowed(self):
        assert array_insert_steps([10, 20], 2, 30)[-1].items == [10, 20, 30]

    def test_remove(self):
        steps = array_remove_steps([10, 20, 30], 1)
        assert steps[-1].items == [10, 30]
        assert steps[-1].explanation == "Shifting elements to fill the gap"

    def test_update(self):
        steps = array_update_steps([10, 20, 30], 2, 99)
        assert steps[-1].items == [10, 20, 99]
        assert steps[-1].explanation == "Updated value at index 2 to 99"

    @pytest.mark.parametrize("fn,args", [
        (array_insert_steps, ([1, 2], 3, 9)),
        (array_remove_steps, ([1, 2], 2)),
        (array_update_steps, ([1, 2], -1, 9)),
        (array_remove_steps, ([], 0)),
    ])
    def test_out_of_range_index(self, fn, args):
        assert fn(*args) == []

    def test_input_not_mutated(self):
        data = [1, 2, 3]
        array_remove_steps(data, 0)
        assert data == [1, 2, 3]


class TestStackQueue:
    """LIFO and FIFO operations."""

    def test_push_then_pop_top(self):
        assert stack_push_steps([1, 2], 3)[-1].items == [1, 2, 3]
        last = stack_pop_steps([1, 2, 3])[-1]
        assert last.items == [1, 2]
        assert last.explanation.startswith("Popped 3")

    def test_enqueue_rear_dequeue_front(self):
        assert queue_enqueue_steps([1, 2], 3)[-1].items == [1, 2, 3]
        last = queue_dequeue_steps([1, 2, 3])[-1]
        assert last.items == [2, 3]
        assert last.explanation.startswith("Dequeued 1")

    def test_empty_pop_and_dequeue(self):
        assert stack_pop_steps([]) == []
        assert queue_dequeue_steps([]) == []

    def test_structure_tags(self):
        assert stack_push_steps([], 1)[0].structure == "stack"
        assert queue_enqueue_steps([], 1)[0].structure == "queue"


class TestLinkedList:
    """Node-by-node walks from the head."""

    def test_insert_walks_to_predecessor(self):
        steps = linked_list_insert_steps([10, 20, 30], 2, 25)
        assert len(steps) == 4
        assert [s.active_index for s in steps[:2]] == [0, 1]
        assert steps[-1].items == [10, 20, 25, 30]

    def test_insert_at_head(self):
        steps = linked_list_insert_steps([10, 20], 0, 5)
        assert len(steps) == 2
        assert "new head" in steps[-1].explanation

    def test_delete(self):
        steps = linked_list_delete_steps([10, 20, 30], 1)
        assert len(steps) == 3
        assert steps[-1].items == [10, 30]

    def test_search_found(self):
        steps = linked_list_search_steps([10, 20, 30], 30)
        assert len(steps) == 3
        assert steps[-1].active_index == 2
        assert "Found 30" in steps[-1].explanation

    def test_search_missing(self):
        steps = linked_list_search_steps([10, 20, 30], 99)
        assert len(steps) == 4
        assert steps[-1].active_index is None

    def test_out_of_range(self):
        assert linked_list_insert_steps([1], 5, 2) == []
        assert linked_list_delete_steps([1], 1) == []
        assert linked_list_search_steps([], 1) == []


class TestRandomArray:
    """Random example arrays."""

    def test_shape(self):
        rng = random.Random(0)
        for _ in range(20):
            arr = random_array(rng)
            assert 5 <= len(arr) <= 10
            assert all(10 <= v <= 99 for v in arr)
