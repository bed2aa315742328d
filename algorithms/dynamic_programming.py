"""
dynamic_programming.py — Table-Filling Tracers
===============================================
Eight bottom-up DP problems.  Each tracer emits:

  1. One initial step   – table created, base cases filled
  2. One step per recurrence cell write (row-major order)

Every step carries a full copy of the table (`dp`, 1-D or 2-D) and the
coordinates of the cell just written (`highlight`, empty on the initial
step).  The last step also carries `result`, and for LCS / LIS one
reconstructed optimal subsequence in `sequence`.

Inputs outside a problem's domain produce [].
"""

import math
from dataclasses import dataclass, field
from typing import Any, List, Sequence, Tuple

from algorithms.step import Step, TraceBuilder


@dataclass(frozen=True)
class DPStep(Step):
    kind = "dp"

    dp:        List[Any]       = field(default_factory=list)
    highlight: Tuple[int, ...] = ()
    result:    Any             = None
    sequence:  List[Any]       = field(default_factory=list)


def _table(dp: List[List[Any]]) -> List[List[Any]]:
    return [list(row) for row in dp]


# ---------------------------------------------------------------------------
# Pseudocode (recurrence first, loop shape second)
# ---------------------------------------------------------------------------
FIBONACCI_DP_PSEUDOCODE = [
    "dp[0] ← 0; dp[1] ← 1",
    "for i in 2..n: dp[i] ← dp[i-1] + dp[i-2]",
]
KNAPSACK_PSEUDOCODE = [
    "dp[0][*] ← 0",
    "for i in 1..n: for w in 0..W:",
    "    if wt[i] ≤ w: dp[i][w] ← max(dp[i-1][w], dp[i-1][w-wt[i]] + val[i])",
    "    else:         dp[i][w] ← dp[i-1][w]",
]
LCS_PSEUDOCODE = [
    "dp[0][*] ← 0; dp[*][0] ← 0",
    "for i in 1..n: for j in 1..m:",
    "    if s1[i-1] == s2[j-1]: dp[i][j] ← 1 + dp[i-1][j-1]",
    "    else:                  dp[i][j] ← max(dp[i-1][j], dp[i][j-1])",
]
LIS_PSEUDOCODE = [
    "dp[i] ← 1 for all i",
    "for i in 1..n-1: for j in 0..i-1:",
    "    if arr[j] < arr[i]: dp[i] ← max(dp[i], dp[j] + 1)",
]
COIN_CHANGE_DP_PSEUDOCODE = [
    "dp[0] ← 0; dp[x] ← ∞ otherwise",
    "for coin in coins: for x in coin..amount:",
    "    dp[x] ← min(dp[x], dp[x-coin] + 1)",
]
EDIT_DISTANCE_PSEUDOCODE = [
    "dp[i][0] ← i; dp[0][j] ← j",
    "for i in 1..n: for j in 1..m:",
    "    cost ← 0 if s1[i-1] == s2[j-1] else 1",
    "    dp[i][j] ← min(dp[i-1][j] + 1, dp[i][j-1] + 1, dp[i-1][j-1] + cost)",
]
SUBSET_SUM_PSEUDOCODE = [
    "dp[i][0] ← true",
    "for i in 1..n: for s in 1..target:",
    "    dp[i][s] ← dp[i-1][s] or (arr[i-1] ≤ s and dp[i-1][s-arr[i-1]])",
]
MIN_PATH_SUM_PSEUDOCODE = [
    "dp[0][0] ← grid[0][0]; first row / column are running sums",
    "for i in 1..m-1: for j in 1..n-1:",
    "    dp[i][j] ← grid[i][j] + min(dp[i-1][j], dp[i][j-1])",
]


# ---------------------------------------------------------------------------
# Fibonacci
# ---------------------------------------------------------------------------
def fibonacci_dp_steps(n: int) -> List[DPStep]:
    if n < 1:
        return []

    trace = TraceBuilder()
    dp = [0] * (n + 1)
    dp[1] = 1
    trace.add(DPStep(dp=list(dp), explanation="Base cases: dp[0]=0, dp[1]=1"))

    for i in range(2, n + 1):
        dp[i] = dp[i - 1] + dp[i - 2]
        trace.add(DPStep(
            dp=list(dp), highlight=(i,),
            explanation=f"dp[{i}] = dp[{i - 1}] + dp[{i - 2}] = {dp[i - 1]} + {dp[i - 2]} = {dp[i]}",
        ))

    trace.amend_last(result=dp[n])
    return trace.build()


# ---------------------------------------------------------------------------
# 0/1 knapsack
# ---------------------------------------------------------------------------
def knapsack_steps(capacity: int, weights: Sequence[int], values: Sequence[int]) -> List[DPStep]:
    n = len(weights)
    if n == 0 or n != len(values) or capacity < 0 or any(w < 0 for w in weights):
        return []

    trace = TraceBuilder()
    dp = [[0] * (capacity + 1) for _ in range(n + 1)]
    trace.add(DPStep(dp=_table(dp), explanation="Base case: dp[0][*]=0"))

    for i in range(1, n + 1):
        wt, val = weights[i - 1], values[i - 1]
        for w in range(capacity + 1):
            if wt <= w:
                dp[i][w] = max(dp[i - 1][w], dp[i - 1][w - wt] + val)
                explanation = (
                    f"dp[{i}][{w}] = max(dp[{i - 1}][{w}], dp[{i - 1}][{w - wt}]+{val}) = {dp[i][w]}"
                )
            else:
                dp[i][w] = dp[i - 1][w]
                explanation = f"dp[{i}][{w}] = dp[{i - 1}][{w}] = {dp[i][w]}"
            trace.add(DPStep(dp=_table(dp), highlight=(i, w), explanation=explanation))

    trace.amend_last(result=dp[n][capacity])
    return trace.build()


# ---------------------------------------------------------------------------
# Longest common subsequence
# ---------------------------------------------------------------------------
def lcs_steps(s1: str, s2: str) -> List[DPStep]:
    if not s1 and not s2:
        return []

    trace = TraceBuilder()
    n, m = len(s1), len(s2)
    dp = [[0] * (m + 1) for _ in range(n + 1)]
    trace.add(DPStep(dp=_table(dp), explanation="Base case: dp[0][*]=0, dp[*][0]=0"))

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            if s1[i - 1] == s2[j - 1]:
                dp[i][j] = 1 + dp[i - 1][j - 1]
                explanation = f"dp[{i}][{j}] = 1 + dp[{i - 1}][{j - 1}] = {dp[i][j]}"
            else:
                dp[i][j] = max(dp[i - 1][j], dp[i][j - 1])
                explanation = f"dp[{i}][{j}] = max(dp[{i - 1}][{j}], dp[{i}][{j - 1}]) = {dp[i][j]}"
            trace.add(DPStep(dp=_table(dp), highlight=(i, j), explanation=explanation))

    # walk back from the corner, preferring "up" on ties
    chars: List[str] = []
    i, j = n, m
    while i > 0 and j > 0:
        if s1[i - 1] == s2[j - 1]:
            chars.append(s1[i - 1])
            i, j = i - 1, j - 1
        elif dp[i - 1][j] >= dp[i][j - 1]:
            i -= 1
        else:
            j -= 1
    chars.reverse()

    trace.amend_last(
        result=dp[n][m], sequence=chars,
        explanation=f"{trace.last.explanation}. LCS length is {dp[n][m]}: \"{''.join(chars)}\"",
    )
    return trace.build()


# ---------------------------------------------------------------------------
# Longest increasing subsequence
# ---------------------------------------------------------------------------
def lis_steps(nums: Sequence[int]) -> List[DPStep]:
    """Steps are emitted only when dp[i] improves, then one summary step."""
    if not nums:
        return []

    trace = TraceBuilder()
    n = len(nums)
    dp = [1] * n
    prev = [-1] * n
    trace.add(DPStep(dp=list(dp), explanation="Initialize all dp[i]=1"))

    for i in range(1, n):
        for j in range(i):
            if nums[j] < nums[i] and dp[i] < dp[j] + 1:
                dp[i] = dp[j] + 1
                prev[i] = j
                trace.add(DPStep(
                    dp=list(dp), highlight=(i,),
                    explanation=(
                        f"arr[{j}]={nums[j]} < arr[{i}]={nums[i]}, "
                        f"dp[{i}]=max(dp[{i}],dp[{j}]+1)={dp[i]}"
                    ),
                ))

    best = max(dp)
    k = dp.index(best)
    seq: List[int] = []
    while k != -1:
        seq.append(nums[k])
        k = prev[k]
    seq.reverse()

    trace.add(DPStep(
        dp=list(dp), result=best, sequence=seq,
        explanation=f"LIS length is {best}, e.g. {', '.join(map(str, seq))}",
    ))
    return trace.build()


# ---------------------------------------------------------------------------
# Coin change (minimum coins)
# ---------------------------------------------------------------------------
def coin_change_dp_steps(coins: Sequence[int], amount: int) -> List[DPStep]:
    """Unreachable amounts stay at infinity; the answer is -1 if `amount` is one."""
    usable = [c for c in coins if c > 0]
    if not usable or amount < 0:
        return []

    trace = TraceBuilder()
    dp = [math.inf] * (amount + 1)
    dp[0] = 0
    trace.add(DPStep(dp=list(dp), explanation="Base case: dp[0]=0"))

    for coin in usable:
        for x in range(coin, amount + 1):
            if dp[x] > dp[x - coin] + 1:
                dp[x] = dp[x - coin] + 1
                trace.add(DPStep(
                    dp=list(dp), highlight=(x,),
                    explanation=f"Using coin {coin}: dp[{x}]=min(dp[{x}],dp[{x - coin}]+1)={dp[x]}",
                ))

    answer = dp[amount] if dp[amount] != math.inf else -1
    trace.amend_last(result=answer)
    return trace.build()


# ---------------------------------------------------------------------------
# Edit distance (Levenshtein)
# ---------------------------------------------------------------------------
def edit_distance_steps(s1: str, s2: str) -> List[DPStep]:
    if not s1 and not s2:
        return []

    trace = TraceBuilder()
    n, m = len(s1), len(s2)
    dp = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n + 1):
        dp[i][0] = i
    for j in range(m + 1):
        dp[0][j] = j
    trace.add(DPStep(dp=_table(dp), explanation="Base case: dp[i][0]=i, dp[0][j]=j"))

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            cost = 0 if s1[i - 1] == s2[j - 1] else 1
            dp[i][j] = min(dp[i - 1][j] + 1, dp[i][j - 1] + 1, dp[i - 1][j - 1] + cost)
            trace.add(DPStep(
                dp=_table(dp), highlight=(i, j),
                explanation=(
                    f"dp[{i}][{j}]=min({dp[i - 1][j]}+1,{dp[i][j - 1]}+1,"
                    f"{dp[i - 1][j - 1]}+cost={cost})={dp[i][j]}"
                ),
            ))

    trace.amend_last(result=dp[n][m])
    return trace.build()


# ---------------------------------------------------------------------------
# Subset sum
# ---------------------------------------------------------------------------
def subset_sum_steps(nums: Sequence[int], target: int) -> List[DPStep]:
    if not nums or target < 1 or any(x < 0 for x in nums):
        return []

    trace = TraceBuilder()
    n = len(nums)
    dp = [[False] * (target + 1) for _ in range(n + 1)]
    for i in range(n + 1):
        dp[i][0] = True
    trace.add(DPStep(dp=_table(dp), explanation="Base case: dp[i][0]=true"))

    for i in range(1, n + 1):
        x = nums[i - 1]
        for s in range(1, target + 1):
            if x > s:
                dp[i][s] = dp[i - 1][s]
                rule = f"dp[{i - 1}][{s}]"
            else:
                dp[i][s] = dp[i - 1][s] or dp[i - 1][s - x]
                rule = f"dp[{i - 1}][{s}] || dp[{i - 1}][{s - x}]"
            trace.add(DPStep(
                dp=_table(dp), highlight=(i, s),
                explanation=f"dp[{i}][{s}]={rule}={str(dp[i][s]).lower()}",
            ))

    trace.amend_last(result=dp[n][target])
    return trace.build()


# ---------------------------------------------------------------------------
# Minimum path sum
# ---------------------------------------------------------------------------
def min_path_sum_steps(grid: Sequence[Sequence[int]]) -> List[DPStep]:
    if not grid or not grid[0] or any(len(row) != len(grid[0]) for row in grid):
        return []

    trace = TraceBuilder()
    m, n = len(grid), len(grid[0])
    dp = [[0] * n for _ in range(m)]
    dp[0][0] = grid[0][0]
    trace.add(DPStep(
        dp=_table(dp), explanation=f"Initialize dp[0][0]=grid[0][0]={dp[0][0]}",
    ))

    for i in range(1, m):
        dp[i][0] = dp[i - 1][0] + grid[i][0]
        trace.add(DPStep(
            dp=_table(dp), highlight=(i, 0),
            explanation=f"First column: dp[{i}][0]=dp[{i - 1}][0]+grid[{i}][0]={dp[i][0]}",
        ))
    for j in range(1, n):
        dp[0][j] = dp[0][j - 1] + grid[0][j]
        trace.add(DPStep(
            dp=_table(dp), highlight=(0, j),
            explanation=f"First row: dp[0][{j}]=dp[0][{j - 1}]+grid[0][{j}]={dp[0][j]}",
        ))

    for i in range(1, m):
        for j in range(1, n):
            dp[i][j] = grid[i][j] + min(dp[i - 1][j], dp[i][j - 1])
            trace.add(DPStep(
                dp=_table(dp), highlight=(i, j),
                explanation=(
                    f"dp[{i}][{j}]=grid[{i}][{j}]+min(dp[{i - 1}][{j}],dp[{i}][{j - 1}])={dp[i][j]}"
                ),
            ))

    trace.amend_last(result=dp[m - 1][n - 1])
    return trace.build()
