"""
sorting.py — Comparison Sort Tracers
=====================================
Bubble, selection, insertion, quick and merge sort.  All five share one
record shape:

  array          – snapshot after the event
  active         – indices being compared / moved
  sorted_indices – positions already known to be final
  swapped        – True when the event changed the array

The input sequence is never mutated.
"""

import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from algorithms.step import Step, TraceBuilder

BAR_COUNT  = 16
BAR_LOW    = 20
BAR_HIGH   = 120


@dataclass(frozen=True)
class SortStep(Step):
    kind = "sort"

    array:          List[int] = field(default_factory=list)
    active:         List[int] = field(default_factory=list)
    sorted_indices: List[int] = field(default_factory=list)
    swapped:        bool      = False


BUBBLE_SORT_PSEUDOCODE = [
    "for i in 0..n-2:",
    "    for j in 0..n-i-2:",
    "        if a[j] > a[j+1]: swap(a[j], a[j+1])",
]
SELECTION_SORT_PSEUDOCODE = [
    "for i in 0..n-2:",
    "    m ← i",
    "    for j in i+1..n-1: if a[j] < a[m]: m ← j",
    "    swap(a[i], a[m])",
]
INSERTION_SORT_PSEUDOCODE = [
    "for i in 1..n-1:",
    "    j ← i",
    "    while j > 0 and a[j-1] > a[j]:",
    "        swap(a[j-1], a[j]); j ← j - 1",
]
QUICK_SORT_PSEUDOCODE = [
    "quick_sort(lo, hi):",
    "    if lo < hi:",
    "        p ← partition(lo, hi)   # pivot a[hi] lands at p",
    "        quick_sort(lo, p-1); quick_sort(p+1, hi)",
]
MERGE_SORT_PSEUDOCODE = [
    "merge_sort(lo, hi):",
    "    if lo < hi:",
    "        mid ← (lo + hi) / 2",
    "        merge_sort(lo, mid); merge_sort(mid+1, hi)",
    "        merge a[lo..mid] and a[mid+1..hi] back into a[lo..hi]",
]


def random_bar_heights(
    count: int = BAR_COUNT,
    low: int = BAR_LOW,
    high: int = BAR_HIGH,
    rng: Optional[random.Random] = None,
) -> List[int]:
    """Bar heights for the mini sorting demo, inclusive on both ends."""
    rng = rng or random.Random()
    return [rng.randint(low, high) for _ in range(count)]


# ---------------------------------------------------------------------------
# Bubble sort
# ---------------------------------------------------------------------------
def bubble_sort_steps(array: Sequence[int]) -> List[SortStep]:
    if not array:
        return []

    trace = TraceBuilder()
    arr   = list(array)
    n     = len(arr)
    done: List[int] = []

    trace.add(SortStep(array=list(arr), explanation=f"Start bubble sort on {n} elements"))

    for i in range(n - 1):
        for j in range(n - i - 1):
            trace.add(SortStep(
                array=list(arr), active=[j, j + 1], sorted_indices=list(done),
                explanation=f"Compare a[{j}]={arr[j]} and a[{j + 1}]={arr[j + 1]}",
            ))
            if arr[j] > arr[j + 1]:
                arr[j], arr[j + 1] = arr[j + 1], arr[j]
                trace.add(SortStep(
                    array=list(arr), active=[j, j + 1], sorted_indices=list(done), swapped=True,
                    explanation=f"{arr[j + 1]} > {arr[j]}: swap them",
                ))
        done.insert(0, n - i - 1)

    trace.add(SortStep(
        array=list(arr), sorted_indices=list(range(n)),
        explanation=f"Array sorted: {', '.join(map(str, arr))}",
    ))
    return trace.build()


# ---------------------------------------------------------------------------
# Selection sort
# ---------------------------------------------------------------------------
def selection_sort_steps(array: Sequence[int]) -> List[SortStep]:
    if not array:
        return []

    trace = TraceBuilder()
    arr   = list(array)
    n     = len(arr)

    trace.add(SortStep(array=list(arr), explanation=f"Start selection sort on {n} elements"))

    for i in range(n - 1):
        smallest = i
        for j in range(i + 1, n):
            trace.add(SortStep(
                array=list(arr), active=[smallest, j], sorted_indices=list(range(i)),
                explanation=f"Compare current minimum a[{smallest}]={arr[smallest]} with a[{j}]={arr[j]}",
            ))
            if arr[j] < arr[smallest]:
                smallest = j
        if smallest != i:
            arr[i], arr[smallest] = arr[smallest], arr[i]
            trace.add(SortStep(
                array=list(arr), active=[i, smallest], sorted_indices=list(range(i + 1)), swapped=True,
                explanation=f"Swap minimum {arr[i]} into position {i}",
            ))
        else:
            trace.add(SortStep(
                array=list(arr), active=[i], sorted_indices=list(range(i + 1)),
                explanation=f"{arr[i]} is already the minimum; position {i} is final",
            ))

    trace.add(SortStep(
        array=list(arr), sorted_indices=list(range(n)),
        explanation=f"Array sorted: {', '.join(map(str, arr))}",
    ))
    return trace.build()


# ---------------------------------------------------------------------------
# Insertion sort
# ---------------------------------------------------------------------------
def insertion_sort_steps(array: Sequence[int]) -> List[SortStep]:
    if not array:
        return []

    trace = TraceBuilder()
    arr   = list(array)
    n     = len(arr)

    trace.add(SortStep(
        array=list(arr), sorted_indices=[0],
        explanation=f"Start insertion sort: a[0]={arr[0]} forms a sorted prefix",
    ))

    for i in range(1, n):
        j = i
        trace.add(SortStep(
            array=list(arr), active=[j], sorted_indices=list(range(i)),
            explanation=f"Insert a[{i}]={arr[i]} into the sorted prefix",
        ))
        while j > 0 and arr[j - 1] > arr[j]:
            arr[j - 1], arr[j] = arr[j], arr[j - 1]
            trace.add(SortStep(
                array=list(arr), active=[j - 1, j], sorted_indices=list(range(i + 1)), swapped=True,
                explanation=f"{arr[j]} > {arr[j - 1]}: shift {arr[j]} right",
            ))
            j -= 1

    trace.add(SortStep(
        array=list(arr), sorted_indices=list(range(n)),
        explanation=f"Array sorted: {', '.join(map(str, arr))}",
    ))
    return trace.build()


# ---------------------------------------------------------------------------
# Quick sort (Lomuto partition, last element as pivot)
# ---------------------------------------------------------------------------
def quick_sort_steps(array: Sequence[int]) -> List[SortStep]:
    if not array:
        return []

    trace = TraceBuilder()
    arr   = list(array)
    n     = len(arr)
    done: List[int] = []

    def snap(active: List[int], explanation: str, swapped: bool = False) -> None:
        trace.add(SortStep(
            array=list(arr), active=active, sorted_indices=sorted(done),
            swapped=swapped, explanation=explanation,
        ))

    def partition(low: int, high: int) -> int:
        pivot = arr[high]
        snap([high], f"Partition a[{low}..{high}] around pivot {pivot}")
        i = low - 1
        for j in range(low, high):
            snap([j, high], f"Compare a[{j}]={arr[j]} with pivot {pivot}")
            if arr[j] <= pivot:
                i += 1
                if i != j:
                    arr[i], arr[j] = arr[j], arr[i]
                    snap([i, j], f"{arr[i]} <= {pivot}: swap a[{i}] and a[{j}]", swapped=True)
        p     = i + 1
        moved = p != high
        if moved:
            arr[p], arr[high] = arr[high], arr[p]
        done.append(p)
        snap([p], f"Place pivot {pivot} at its final position {p}", swapped=moved)
        return p

    def sort(low: int, high: int) -> None:
        if low < high:
            p = partition(low, high)
            sort(low, p - 1)
            sort(p + 1, high)
        elif low == high:
            done.append(low)

    snap([], f"Start quick sort on {n} elements")
    sort(0, n - 1)

    trace.add(SortStep(
        array=list(arr), sorted_indices=list(range(n)),
        explanation=f"Array sorted: {', '.join(map(str, arr))}",
    ))
    return trace.build()


# ---------------------------------------------------------------------------
# Merge sort (top-down)
# ---------------------------------------------------------------------------
def merge_sort_steps(array: Sequence[int]) -> List[SortStep]:
    if not array:
        return []

    trace = TraceBuilder()
    arr   = list(array)
    n     = len(arr)

    def merge(low: int, mid: int, high: int) -> None:
        left, right = arr[low:mid + 1], arr[mid + 1:high + 1]
        trace.add(SortStep(
            array=list(arr), active=list(range(low, high + 1)),
            explanation=f"Merge a[{low}..{mid}] and a[{mid + 1}..{high}]",
        ))
        i = j = 0
        for k in range(low, high + 1):
            if j >= len(right) or (i < len(left) and left[i] <= right[j]):
                value, i = left[i], i + 1
            else:
                value, j = right[j], j + 1
            changed = arr[k] != value
            arr[k]  = value
            trace.add(SortStep(
                array=list(arr), active=[k], swapped=changed,
                explanation=f"Write {value} to position {k}",
            ))

    def sort(low: int, high: int) -> None:
        if low < high:
            mid = (low + high) // 2
            sort(low, mid)
            sort(mid + 1, high)
            merge(low, mid, high)

    trace.add(SortStep(array=list(arr), explanation=f"Start merge sort on {n} elements"))
    sort(0, n - 1)

    trace.add(SortStep(
        array=list(arr), sorted_indices=list(range(n)),
        explanation=f"Array sorted: {', '.join(map(str, arr))}",
    ))
    return trace.build()
