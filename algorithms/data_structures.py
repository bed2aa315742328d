"""
data_structures.py — Elementary Structure Operations
=====================================================
One tracer per operation on an array, stack, queue or singly linked list.
Each step shows the structure's contents and the slot being touched.

  array        : add / insert / remove / update
  stack        : push / pop              (top = last element)
  queue        : enqueue / dequeue       (front = first element)
  linked list  : insert / delete / search (walked node by node from head)

An out-of-range index or an operation on an empty structure yields [].
"""

import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from algorithms.step import Step, TraceBuilder

DEFAULT_ARRAY: List[int] = [10, 20, 30, 40, 50]


@dataclass(frozen=True)
class StructureStep(Step):
    kind = "structure"

    structure:    str           = "array"
    items:        List[int]     = field(default_factory=list)
    active_index: Optional[int] = None
    operation:    str           = ""


def random_array(rng: Optional[random.Random] = None) -> List[int]:
    """5–10 two-digit values."""
    rng = rng or random.Random()
    return [rng.randint(10, 99) for _ in range(rng.randint(5, 10))]


def _valid(index: int, length: int) -> bool:
    return 0 <= index < length


# ---------------------------------------------------------------------------
# Array
# ---------------------------------------------------------------------------
def array_add_steps(array: Sequence[int], value: int) -> List[StructureStep]:
    trace = TraceBuilder()
    items = list(array)
    n     = len(items)

    trace.add(StructureStep(
        items=list(items), active_index=n, operation="add",
        explanation="Creating space at the end of the array",
    ))
    items.append(value)
    trace.add(StructureStep(
        items=list(items), active_index=n, operation="add",
        explanation=f"Added {value} at index {n}",
    ))
    return trace.build()


def array_insert_steps(array: Sequence[int], index: int, value: int) -> List[StructureStep]:
    if not 0 <= index <= len(array):
        return []

    trace = TraceBuilder()
    items = list(array)

    trace.add(StructureStep(
        items=list(items), active_index=index, operation="insert",
        explanation=f"Shifting elements after index {index} to make space",
    ))
    items.insert(index, value)
    trace.add(StructureStep(
        items=list(items), active_index=index, operation="insert",
        explanation=f"Inserting {value} at index {index}",
    ))
    trace.add(StructureStep(
        items=list(items), active_index=index, operation="insert",
        explanation=f"Inserted {value} at index {index}",
    ))
    return trace.build()


def array_remove_steps(array: Sequence[int], index: int) -> List[StructureStep]:
    if not _valid(index, len(array)):
        return []

    trace = TraceBuilder()
    items = list(array)

    trace.add(StructureStep(
        items=list(items), active_index=index, operation="remove",
        explanation=f"Removing element at index {index}",
    ))
    del items[index]
    trace.add(StructureStep(
        items=list(items), active_index=index if index < len(items) else None, operation="remove",
        explanation="Shifting elements to fill the gap",
    ))
    return trace.build()


def array_update_steps(array: Sequence[int], index: int, value: int) -> List[StructureStep]:
    if not _valid(index, len(array)):
        return []

    trace = TraceBuilder()
    items = list(array)

    trace.add(StructureStep(
        items=list(items), active_index=index, operation="update",
        explanation=f"Accessing element at index {index}",
    ))
    items[index] = value
    trace.add(StructureStep(
        items=list(items), active_index=index, operation="update",
        explanation=f"Updated value at index {index} to {value}",
    ))
    return trace.build()


# ---------------------------------------------------------------------------
# Stack
# ---------------------------------------------------------------------------
def stack_push_steps(stack: Sequence[int], value: int) -> List[StructureStep]:
    trace = TraceBuilder()
    items = list(stack)
    top   = len(items)

    trace.add(StructureStep(
        structure="stack", items=list(items), active_index=top, operation="push",
        explanation=f"Pushing {value} onto the top of the stack",
    ))
    items.append(value)
    trace.add(StructureStep(
        structure="stack", items=list(items), active_index=top, operation="push",
        explanation=f"Pushed {value}. Stack size is now {len(items)}",
    ))
    return trace.build()


def stack_pop_steps(stack: Sequence[int]) -> List[StructureStep]:
    if not stack:
        return []

    trace = TraceBuilder()
    items = list(stack)
    top   = len(items) - 1

    trace.add(StructureStep(
        structure="stack", items=list(items), active_index=top, operation="pop",
        explanation=f"Top element is {items[top]}",
    ))
    value = items.pop()
    trace.add(StructureStep(
        structure="stack", items=list(items), active_index=top - 1 if items else None, operation="pop",
        explanation=f"Popped {value}. Stack size is now {len(items)}",
    ))
    return trace.build()


# ---------------------------------------------------------------------------
# Queue
# ---------------------------------------------------------------------------
def queue_enqueue_steps(queue: Sequence[int], value: int) -> List[StructureStep]:
    trace = TraceBuilder()
    items = list(queue)
    rear  = len(items)

    trace.add(StructureStep(
        structure="queue", items=list(items), active_index=rear, operation="enqueue",
        explanation=f"Enqueuing {value} at the rear of the queue",
    ))
    items.append(value)
    trace.add(StructureStep(
        structure="queue", items=list(items), active_index=rear, operation="enqueue",
        explanation=f"Enqueued {value}. Queue size is now {len(items)}",
    ))
    return trace.build()


def queue_dequeue_steps(queue: Sequence[int]) -> List[StructureStep]:
    if not queue:
        return []

    trace = TraceBuilder()
    items = list(queue)

    trace.add(StructureStep(
        structure="queue", items=list(items), active_index=0, operation="dequeue",
        explanation=f"Front element is {items[0]}",
    ))
    value = items.pop(0)
    trace.add(StructureStep(
        structure="queue", items=list(items), active_index=0 if items else None, operation="dequeue",
        explanation=f"Dequeued {value}. Queue size is now {len(items)}",
    ))
    return trace.build()


# ---------------------------------------------------------------------------
# Singly linked list (stored as the list of node values, head first)
# ---------------------------------------------------------------------------
def _walk(trace: TraceBuilder, items: List[int], upto: int, operation: str) -> None:
    """One step per node visited from head up to (not including) `upto`."""
    for i in range(upto):
        trace.add(StructureStep(
            structure="linked_list", items=list(items), active_index=i, operation=operation,
            explanation=f"Traversing: at node {i} with value {items[i]}",
        ))


def linked_list_insert_steps(values: Sequence[int], index: int, value: int) -> List[StructureStep]:
    if not 0 <= index <= len(values):
        return []

    trace = TraceBuilder()
    items = list(values)

    if index == 0:
        trace.add(StructureStep(
            structure="linked_list", items=list(items), active_index=None, operation="insert",
            explanation=f"Create node {value} and point it at the current head",
        ))
    else:
        _walk(trace, items, index, "insert")
        trace.add(StructureStep(
            structure="linked_list", items=list(items), active_index=index - 1, operation="insert",
            explanation=f"Create node {value}; link it after node {index - 1}",
        ))

    items.insert(index, value)
    where = "new head" if index == 0 else f"position {index}"
    trace.add(StructureStep(
        structure="linked_list", items=list(items), active_index=index, operation="insert",
        explanation=f"Inserted {value} as {where}. List length is now {len(items)}",
    ))
    return trace.build()


def linked_list_delete_steps(values: Sequence[int], index: int) -> List[StructureStep]:
    if not _valid(index, len(values)):
        return []

    trace = TraceBuilder()
    items = list(values)

    _walk(trace, items, index, "delete")
    if index == 0:
        explanation = f"Move head to the next node, unlinking {items[0]}"
    else:
        explanation = f"Point node {index - 1} past node {index} ({items[index]})"
    trace.add(StructureStep(
        structure="linked_list", items=list(items), active_index=index, operation="delete",
        explanation=explanation,
    ))

    removed = items.pop(index)
    trace.add(StructureStep(
        structure="linked_list", items=list(items), active_index=None, operation="delete",
        explanation=f"Deleted {removed}. List length is now {len(items)}",
    ))
    return trace.build()


def linked_list_search_steps(values: Sequence[int], target: int) -> List[StructureStep]:
    if not values:
        return []

    trace = TraceBuilder()
    items = list(values)

    for i, value in enumerate(items):
        if value == target:
            trace.add(StructureStep(
                structure="linked_list", items=list(items), active_index=i, operation="search",
                explanation=f"Node {i} holds {value}. Found {target} at position {i}",
            ))
            return trace.build()
        trace.add(StructureStep(
            structure="linked_list", items=list(items), active_index=i, operation="search",
            explanation=f"Node {i} holds {value}, not {target}. Follow next pointer",
        ))

    trace.add(StructureStep(
        structure="linked_list", items=list(items), active_index=None, operation="search",
        explanation=f"Reached the end of the list: {target} not found",
    ))
    return trace.build()
