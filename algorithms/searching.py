"""
searching.py — Search Tracers
==============================
Linear and binary search over an integer array.  Binary search sorts
its input first and records that as its opening step.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from algorithms.step import Step, TraceBuilder


@dataclass(frozen=True)
class SearchStep(Step):
    kind = "search"

    array:         List[int]     = field(default_factory=list)
    target:        int           = 0
    current_index: Optional[int] = None
    low:           Optional[int] = None
    high:          Optional[int] = None
    found_index:   Optional[int] = None
    checked:       List[int]     = field(default_factory=list)


LINEAR_SEARCH_PSEUDOCODE = [
    "for i in 0..n-1:",
    "    if a[i] == target: return i",
    "return NOT FOUND",
]
BINARY_SEARCH_PSEUDOCODE = [
    "sort(a); lo ← 0; hi ← n - 1",
    "while lo ≤ hi:",
    "    mid ← (lo + hi) // 2",
    "    if a[mid] == target: return mid",
    "    if a[mid] < target: lo ← mid + 1 else: hi ← mid - 1",
    "return NOT FOUND",
]


def linear_search_steps(array: Sequence[int], target: int) -> List[SearchStep]:
    if not array:
        return []

    trace = TraceBuilder()
    arr   = list(array)
    checked: List[int] = []

    for i, value in enumerate(arr):
        checked.append(i)
        if value == target:
            trace.add(SearchStep(
                array=arr, target=target, current_index=i, found_index=i, checked=list(checked),
                explanation=f"a[{i}]={value} equals {target}. Found at index {i}",
            ))
            return trace.build()
        trace.add(SearchStep(
            array=arr, target=target, current_index=i, checked=list(checked),
            explanation=f"a[{i}]={value} is not {target}, move on",
        ))

    trace.add(SearchStep(
        array=arr, target=target, checked=list(checked),
        explanation=f"{target} not found after checking all {len(arr)} elements",
    ))
    return trace.build()


def binary_search_steps(array: Sequence[int], target: int) -> List[SearchStep]:
    if not array:
        return []

    trace = TraceBuilder()
    arr   = sorted(array)
    low, high = 0, len(arr) - 1
    checked: List[int] = []

    trace.add(SearchStep(
        array=arr, target=target, low=low, high=high,
        explanation=f"Binary search needs sorted input. Sorted array: {', '.join(map(str, arr))}",
    ))

    while low <= high:
        mid = (low + high) // 2
        checked.append(mid)
        value = arr[mid]
        if value == target:
            trace.add(SearchStep(
                array=arr, target=target, current_index=mid, low=low, high=high,
                found_index=mid, checked=list(checked),
                explanation=f"a[{mid}]={value} equals {target}. Found at index {mid}",
            ))
            return trace.build()

        if value < target:
            explanation = f"a[{mid}]={value} < {target}: discard left half, low = {mid + 1}"
            next_low, next_high = mid + 1, high
        else:
            explanation = f"a[{mid}]={value} > {target}: discard right half, high = {mid - 1}"
            next_low, next_high = low, mid - 1
        trace.add(SearchStep(
            array=arr, target=target, current_index=mid, low=low, high=high,
            checked=list(checked), explanation=explanation,
        ))
        low, high = next_low, next_high

    trace.add(SearchStep(
        array=arr, target=target, checked=list(checked),
        explanation=f"Search range is empty: {target} is not in the array",
    ))
    return trace.build()
