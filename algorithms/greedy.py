"""
greedy.py — Greedy Algorithm Tracers
=====================================
Each tracer follows the same rhythm:

  1. Sort the input by the problem's greedy key (stable sort).
  2. For every element: a "considering" step, then an accept/reject step.
  3. A final summary step.

Inputs are small immutable value records (Activity, Item, Job).  They
are never mutated, only sorted / filtered into new lists.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from algorithms.step import Step, TraceBuilder


# ---------------------------------------------------------------------------
# Value records
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class Activity:
    id:     int
    start:  int
    finish: int


@dataclass(frozen=True)
class Item:
    id:     int
    weight: float
    value:  float

    @property
    def ratio(self) -> float:
        return self.value / self.weight

    def to_dict(self) -> dict:
        return {"id": self.id, "weight": self.weight, "value": self.value, "ratio": self.ratio}


@dataclass(frozen=True)
class TakenItem:
    item:     Item
    fraction: float


@dataclass(frozen=True)
class Job:
    id:       int
    deadline: int
    profit:   float


@dataclass(frozen=True)
class Coin:
    value: int
    count: int


@dataclass(frozen=True)
class HuffmanNode:
    char:      str
    frequency: int
    left:      Optional["HuffmanNode"] = None
    right:     Optional["HuffmanNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


# ---------------------------------------------------------------------------
# Step records
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class ActivityStep(Step):
    kind = "activity_selection"

    activities: List[Activity]     = field(default_factory=list)
    selected:   List[Activity]     = field(default_factory=list)
    current:    Optional[Activity] = None


@dataclass(frozen=True)
class HuffmanStep(Step):
    kind = "huffman"

    nodes:   List[HuffmanNode]     = field(default_factory=list)
    tree:    Optional[HuffmanNode] = None
    codes:   Dict[str, str]        = field(default_factory=dict)
    encoded: str                   = ""


@dataclass(frozen=True)
class CoinChangeStep(Step):
    kind = "coin_change"

    amount:           int           = 0
    denominations:    List[int]     = field(default_factory=list)
    coins_used:       List[Coin]    = field(default_factory=list)
    current_coin:     Optional[int] = None
    remaining_amount: int           = 0


@dataclass(frozen=True)
class FractionalKnapsackStep(Step):
    kind = "fractional_knapsack"

    capacity:           float            = 0
    items:              List[Item]       = field(default_factory=list)
    selected_items:     List[TakenItem]  = field(default_factory=list)
    current_item:       Optional[Item]   = None
    remaining_capacity: float            = 0
    total_value:        float            = 0


@dataclass(frozen=True)
class JobSequencingStep(Step):
    kind = "job_sequencing"

    jobs:         List[Job]           = field(default_factory=list)
    sequence:     List[Optional[int]] = field(default_factory=list)   # job id per slot, None = free
    current_job:  Optional[Job]       = None
    result:       List[Job]           = field(default_factory=list)
    total_profit: float               = 0


# ---------------------------------------------------------------------------
# Activity selection
# ---------------------------------------------------------------------------
def activity_selection_steps(activities: Sequence[Activity]) -> List[ActivityStep]:
    if not activities:
        return []

    trace   = TraceBuilder()
    ordered = sorted(activities, key=lambda a: a.finish)
    selected: List[Activity] = []

    trace.add(ActivityStep(activities=ordered, explanation="Sort all activities by finish time"))

    first = ordered[0]
    selected.append(first)
    trace.add(ActivityStep(
        activities=ordered, selected=list(selected), current=first,
        explanation=f"Select first activity (ID: {first.id}) with finish time {first.finish}",
    ))

    last = first
    for act in ordered[1:]:
        trace.add(ActivityStep(
            activities=ordered, selected=list(selected), current=act,
            explanation=(
                f"Considering activity (ID: {act.id}) with start time {act.start} "
                f"and finish time {act.finish}"
            ),
        ))
        if act.start >= last.finish:
            selected.append(act)
            trace.add(ActivityStep(
                activities=ordered, selected=list(selected), current=act,
                explanation=(
                    f"Select activity (ID: {act.id}) as its start time {act.start} is after "
                    f"the finish time of the last selected activity {last.finish}"
                ),
            ))
            last = act
        else:
            trace.add(ActivityStep(
                activities=ordered, selected=list(selected), current=act,
                explanation=(
                    f"Skip activity (ID: {act.id}) as its start time {act.start} conflicts "
                    f"with the finish time of the last selected activity {last.finish}"
                ),
            ))

    trace.add(ActivityStep(
        activities=ordered, selected=list(selected),
        explanation=f"Finished! Selected {len(selected)} activities out of {len(ordered)}",
    ))
    return trace.build()


# ---------------------------------------------------------------------------
# Huffman coding
# ---------------------------------------------------------------------------
def huffman_steps(text: str) -> List[HuffmanStep]:
    if not text:
        return []

    trace = TraceBuilder()
    # Counter keeps first-appearance order
    nodes = [HuffmanNode(char=ch, frequency=freq) for ch, freq in Counter(text).items()]

    trace.add(HuffmanStep(
        nodes=list(nodes),
        explanation=f"Created {len(nodes)} leaf nodes based on character frequencies",
    ))

    while len(nodes) > 1:
        nodes.sort(key=lambda nd: nd.frequency)
        left, right = nodes[0], nodes[1]
        nodes = nodes[2:]
        merged = HuffmanNode(
            char=left.char + right.char,
            frequency=left.frequency + right.frequency,
            left=left,
            right=right,
        )
        nodes.append(merged)
        trace.add(HuffmanStep(
            nodes=list(nodes), tree=merged,
            explanation=(
                f"Merged nodes '{left.char}' ({left.frequency}) and '{right.char}' "
                f"({right.frequency}) into new node with frequency {merged.frequency}"
            ),
        ))

    root  = nodes[0]
    codes = huffman_codes(root)
    encoded = "".join(codes[ch] for ch in text)

    trace.add(HuffmanStep(
        nodes=list(nodes), tree=root, codes=codes, encoded=encoded,
        explanation=(
            f"Generated Huffman codes for all characters. '{text}' encodes to "
            f"{len(encoded)} bits (vs {8 * len(text)} bits uncompressed)"
        ),
    ))
    return trace.build()


def huffman_codes(root: HuffmanNode) -> Dict[str, str]:
    """Walk the tree: left edge = '0', right edge = '1'."""
    if root.is_leaf:
        return {root.char: "0"}

    codes: Dict[str, str] = {}
    stack = [(root, "")]
    while stack:
        node, code = stack.pop()
        if node.is_leaf:
            codes[node.char] = code
            continue
        # push right first so the left subtree is walked first
        if node.right is not None:
            stack.append((node.right, code + "1"))
        if node.left is not None:
            stack.append((node.left, code + "0"))
    return codes


# ---------------------------------------------------------------------------
# Coin change (greedy)
# ---------------------------------------------------------------------------
def coin_change_steps(amount: int, denominations: Sequence[int]) -> List[CoinChangeStep]:
    denoms = sorted((d for d in denominations if d > 0), reverse=True)
    if amount < 0 or not denoms:
        return []

    trace     = TraceBuilder()
    remaining = amount
    used: List[Coin] = []

    def snap(current: Optional[int], explanation: str) -> CoinChangeStep:
        return CoinChangeStep(
            amount=amount, denominations=denoms, coins_used=list(used),
            current_coin=current, remaining_amount=remaining, explanation=explanation,
        )

    trace.add(snap(None, f"Starting with amount {amount} and denominations sorted in descending order"))

    for denom in denoms:
        trace.add(snap(denom, f"Considering coin of value {denom}"))
        if denom <= remaining:
            count, remaining = divmod(remaining, denom)
            used.append(Coin(value=denom, count=count))
            trace.add(snap(denom, f"Used {count} coin(s) of value {denom}. Remaining amount: {remaining}"))
        else:
            trace.add(snap(denom, (
                f"Skipped coin of value {denom} as it's greater than remaining amount {remaining}"
            )))

    if remaining == 0:
        total = sum(c.count for c in used)
        summary = f"Finished! Used {total} coins to make {amount}"
    else:
        summary = f"Cannot make exact change. Remaining amount: {remaining}"
    trace.add(snap(None, summary))
    return trace.build()


# ---------------------------------------------------------------------------
# Fractional knapsack
# ---------------------------------------------------------------------------
def fractional_knapsack_steps(capacity: float, items: Sequence[Item]) -> List[FractionalKnapsackStep]:
    if capacity < 0 or not items or any(it.weight <= 0 for it in items):
        return []

    trace     = TraceBuilder()
    ordered   = sorted(items, key=lambda it: it.ratio, reverse=True)
    remaining = capacity
    total     = 0.0
    taken: List[TakenItem] = []

    def snap(current: Optional[Item], explanation: str) -> FractionalKnapsackStep:
        return FractionalKnapsackStep(
            capacity=capacity, items=ordered, selected_items=list(taken),
            current_item=current, remaining_capacity=remaining, total_value=total,
            explanation=explanation,
        )

    trace.add(snap(None, (
        f"Starting with knapsack capacity {capacity} and items sorted by value-to-weight ratio"
    )))

    for item in ordered:
        trace.add(snap(item, (
            f"Considering item {item.id} with weight {item.weight}, value {item.value}, "
            f"and ratio {item.ratio:.2f}"
        )))
        if remaining >= item.weight:
            remaining -= item.weight
            total += item.value
            taken.append(TakenItem(item=item, fraction=1.0))
            trace.add(snap(item, (
                f"Added entire item {item.id}. Remaining capacity: {remaining}, Total value: {total:g}"
            )))
        elif remaining > 0:
            fraction = remaining / item.weight
            total += item.value * fraction
            taken.append(TakenItem(item=item, fraction=fraction))
            remaining = 0
            trace.add(snap(item, (
                f"Added {fraction * 100:.0f}% of item {item.id}. Knapsack is now full. "
                f"Total value: {total:.2f}"
            )))
        else:
            trace.add(snap(item, f"Skipped item {item.id} as knapsack is full"))

    trace.add(snap(None, f"Finished! Total value in knapsack: {total:.2f}"))
    return trace.build()


# ---------------------------------------------------------------------------
# Job sequencing with deadlines
# ---------------------------------------------------------------------------
def job_sequencing_steps(jobs: Sequence[Job]) -> List[JobSequencingStep]:
    if not jobs:
        return []

    trace    = TraceBuilder()
    ordered  = sorted(jobs, key=lambda j: j.profit, reverse=True)
    slots    = max(0, max(j.deadline for j in jobs))
    sequence: List[Optional[int]] = [None] * slots
    result:   List[Job] = []
    total    = 0

    def snap(current: Optional[Job], explanation: str) -> JobSequencingStep:
        return JobSequencingStep(
            jobs=ordered, sequence=list(sequence), current_job=current,
            result=list(result), total_profit=total, explanation=explanation,
        )

    trace.add(snap(None, (
        f"Starting with {len(ordered)} jobs sorted by profit and {slots} time slots"
    )))

    for job in ordered:
        trace.add(snap(job, (
            f"Considering job {job.id} with deadline {job.deadline} and profit {job.profit}"
        )))
        # latest free slot at or before the deadline
        slot = min(job.deadline, slots) - 1
        while slot >= 0 and sequence[slot] is not None:
            slot -= 1

        if slot >= 0:
            sequence[slot] = job.id
            result.append(job)
            total += job.profit
            trace.add(snap(job, f"Assigned job {job.id} to time slot {slot + 1}. Total profit: {total}"))
        else:
            trace.add(snap(job, (
                f"Could not assign job {job.id} as no free slot available before its deadline"
            )))

    trace.add(snap(None, f"Finished! Scheduled {len(result)} jobs with total profit: {total}"))
    return trace.build()
