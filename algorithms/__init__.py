"""
algorithms/__init__.py — Algorithm Registry
=============================================
Single source of truth for every algorithm the visualizer knows about.

    from algorithms import REGISTRY, get_algorithm, run_algorithm

REGISTRY is a dict:
    {
        "gcd": AlgoInfo(key, label, category, fn, params, example, …),
        …
    }

AlgoInfo is a lightweight dataclass.  The engine and the web layer both
consume it, so adding a new algorithm is: write the tracer, add one
entry here.  That's the plugin system.

`example` and the output of `randomize(rng)` are *raw* parameter dicts
(JSON-safe, the same shape a client would POST); they go through
`coerce_params` like any other input.
"""

import random
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

import config
from graph import default_graph, random_graph
from algorithms.step import Step, TraceBuilder, to_plain
from algorithms.params import ParamSpec, coerce
from algorithms import mathematical as _math
from algorithms import greedy as _greedy
from algorithms import traversal as _trav
from algorithms import spanning_tree as _mst
from algorithms import dynamic_programming as _dp
from algorithms import sorting as _sort
from algorithms import searching as _search
from algorithms import data_structures as _ds

CATEGORIES = [
    "mathematical",
    "greedy",
    "graph",
    "dynamic_programming",
    "sorting",
    "searching",
    "data_structures",
]


# ---------------------------------------------------------------------------
# AlgoInfo: metadata card for each algorithm
# ---------------------------------------------------------------------------
@dataclass
class AlgoInfo:
    key:              str                        # registry key, e.g. "gcd"
    label:            str                        # human label, e.g. "Euclidean GCD"
    category:         str                        # one of CATEGORIES
    fn:               Callable[..., List[Step]]  # the tracer
    params:           List[ParamSpec] = field(default_factory=list)
    example:          Dict[str, Any]  = field(default_factory=dict)
    pseudocode:       List[str]       = field(default_factory=list)
    description:      str             = ""
    complexity_time:  str             = ""
    complexity_space: str             = ""
    randomize:        Optional[Callable[[random.Random], Dict[str, Any]]] = None

    def to_dict(self) -> dict:
        return {
            "key":              self.key,
            "label":            self.label,
            "category":         self.category,
            "params":           [p.to_dict() for p in self.params],
            "example":          self.example,
            "pseudocode":       self.pseudocode,
            "description":      self.description,
            "complexity_time":  self.complexity_time,
            "complexity_space": self.complexity_space,
            "has_randomize":    self.randomize is not None,
        }


# ---------------------------------------------------------------------------
# Shared parameter specs & examples
# ---------------------------------------------------------------------------
def _graph_params(with_start: bool = True) -> List[ParamSpec]:
    specs = [ParamSpec("graph", "Graph", "graph", None, min=1, max=config.GRAPH_MAX_NODES)]
    if with_start:
        specs.append(ParamSpec("start", "Start node", "node", "1"))
    return specs


def _graph_example(with_start: bool = True) -> Dict[str, Any]:
    example: Dict[str, Any] = {"graph": default_graph().to_dict()}
    if with_start:
        example["start"] = "1"
    return example


def _random_graph_params(with_start: bool = True):
    def randomize(rng: random.Random) -> Dict[str, Any]:
        params: Dict[str, Any] = {"graph": random_graph(rng=rng).to_dict()}
        if with_start:
            params["start"] = "1"
        return params
    return randomize


def _array_spec(name: str = "array", label: str = "Array", min_len: int = 0) -> ParamSpec:
    return ParamSpec(name, label, "int_list", "10,20,30,40,50", min=min_len, max=config.ARRAY_MAX_LENGTH)


def _value_spec(name: str = "value", label: str = "Value") -> ParamSpec:
    return ParamSpec(name, label, "int", 60, min=-999, max=999)


def _index_spec() -> ParamSpec:
    return ParamSpec("index", "Index", "int", 0, min=0, max=config.ARRAY_MAX_LENGTH)


def _random_word(rng: random.Random, alphabet: str, low: int, high: int) -> str:
    return "".join(rng.choice(alphabet) for _ in range(rng.randint(low, high)))


def _random_activities(rng: random.Random, count: int = 10) -> List[dict]:
    out = []
    for i in range(count):
        start = rng.randint(0, 14)
        out.append({"id": i + 1, "start": start, "finish": start + rng.randint(1, 5)})
    return out


def _random_knapsack(rng: random.Random) -> Dict[str, Any]:
    n = rng.randint(4, 6)
    return {
        "capacity": rng.randint(8, 15),
        "weights": [rng.randint(1, 7) for _ in range(n)],
        "values": [rng.randint(1, 15) for _ in range(n)],
    }


def _random_ds_edit(rng: random.Random, with_value: bool, allow_end: bool = False) -> Dict[str, Any]:
    array = _ds.random_array(rng)
    params: Dict[str, Any] = {
        "array": array,
        "index": rng.randint(0, len(array) if allow_end else len(array) - 1),
    }
    if with_value:
        params["value"] = rng.randint(10, 99)
    return params


def _random_search(rng: random.Random) -> Dict[str, Any]:
    array = _ds.random_array(rng)
    return {"array": array, "target": rng.choice(array)}


def _random_list_search(rng: random.Random) -> Dict[str, Any]:
    params = _random_search(rng)
    return {"values": params["array"], "target": params["target"]}


_DEFAULT_ACTIVITIES = [
    {"id": 1, "start": 1, "finish": 4},  {"id": 2, "start": 3, "finish": 5},
    {"id": 3, "start": 0, "finish": 6},  {"id": 4, "start": 5, "finish": 7},
    {"id": 5, "start": 3, "finish": 9},  {"id": 6, "start": 5, "finish": 9},
    {"id": 7, "start": 6, "finish": 10}, {"id": 8, "start": 8, "finish": 11},
    {"id": 9, "start": 8, "finish": 12}, {"id": 10, "start": 2, "finish": 14},
]
_DEFAULT_ITEMS = [
    {"id": 1, "weight": 10, "value": 60},  {"id": 2, "weight": 20, "value": 100},
    {"id": 3, "weight": 30, "value": 120}, {"id": 4, "weight": 15, "value": 80},
    {"id": 5, "weight": 25, "value": 120},
]
_DEFAULT_JOBS = [
    {"id": 1, "deadline": 4, "profit": 20}, {"id": 2, "deadline": 1, "profit": 10},
    {"id": 3, "deadline": 1, "profit": 40}, {"id": 4, "deadline": 2, "profit": 30},
    {"id": 5, "deadline": 3, "profit": 25},
]


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
_ENTRIES: List[AlgoInfo] = [

    # ---- mathematical ----------------------------------------------------
    AlgoInfo(
        key="gcd", label="Euclidean GCD", category="mathematical", fn=_math.gcd_steps,
        params=[
            ParamSpec("a", "a", "int", 48, min=1, max=config.GCD_MAX_OPERAND),
            ParamSpec("b", "b", "int", 18, min=1, max=config.GCD_MAX_OPERAND),
        ],
        example={"a": 48, "b": 18}, pseudocode=_math.GCD_PSEUDOCODE,
        complexity_time="O(log min(a, b))", complexity_space="O(1)",
        description="Repeatedly replace the larger number by the remainder until it hits zero.",
        randomize=lambda rng: {"a": rng.randint(10, 109), "b": rng.randint(10, 109)},
    ),
    AlgoInfo(
        key="sieve", label="Sieve of Eratosthenes", category="mathematical", fn=_math.sieve_steps,
        params=[ParamSpec("n", "n", "int", 30, min=2, max=config.SIEVE_MAX_N)],
        example={"n": 30}, pseudocode=_math.SIEVE_PSEUDOCODE,
        complexity_time="O(n log log n)", complexity_space="O(n)",
        description="Cross out multiples of each prime to leave only the primes up to n.",
        randomize=lambda rng: {"n": rng.randint(10, 59)},
    ),
    AlgoInfo(
        key="fast_exp", label="Fast Exponentiation", category="mathematical", fn=_math.fast_exp_steps,
        params=[
            ParamSpec("base", "Base", "int", 3, min=-config.FAST_EXP_MAX_BASE, max=config.FAST_EXP_MAX_BASE),
            ParamSpec("exponent", "Exponent", "int", 10, min=0, max=config.FAST_EXP_MAX_EXP),
        ],
        example={"base": 3, "exponent": 10}, pseudocode=_math.FAST_EXP_PSEUDOCODE,
        complexity_time="O(log exp)", complexity_space="O(1)",
        description="Square-and-multiply over the binary digits of the exponent.",
        randomize=lambda rng: {"base": rng.randint(2, 9), "exponent": rng.randint(5, 19)},
    ),
    AlgoInfo(
        key="fibonacci", label="Fibonacci Sequence", category="mathematical", fn=_math.fibonacci_steps,
        params=[ParamSpec("n", "n", "int", 10, min=0, max=config.FIBONACCI_MAX_N)],
        example={"n": 10}, pseudocode=_math.FIBONACCI_PSEUDOCODE,
        complexity_time="O(n)", complexity_space="O(n)",
        description="Build the sequence term by term from F(0) = 0 and F(1) = 1.",
        randomize=lambda rng: {"n": rng.randint(5, 19)},
    ),
    AlgoInfo(
        key="prime_factor", label="Prime Factorization", category="mathematical",
        fn=_math.prime_factor_steps,
        params=[ParamSpec("n", "n", "int", 84, min=2, max=config.FACTOR_MAX_N)],
        example={"n": 84}, pseudocode=_math.PRIME_FACTOR_PSEUDOCODE,
        complexity_time="O(√n)", complexity_space="O(log n)",
        description="Trial division by 2, then odd divisors up to √n.",
        randomize=lambda rng: {"n": rng.randint(50, 249)},
    ),

    # ---- greedy ----------------------------------------------------------
    AlgoInfo(
        key="activity_selection", label="Activity Selection", category="greedy",
        fn=_greedy.activity_selection_steps,
        params=[ParamSpec("activities", "Activities", "activities", _DEFAULT_ACTIVITIES,
                          min=1, max=config.GREEDY_MAX_ELEMENTS)],
        example={"activities": _DEFAULT_ACTIVITIES},
        pseudocode=[
            "sort activities by finish time",
            "select the first; last ← its finish",
            "for each remaining activity a:",
            "    if a.start ≥ last: select a; last ← a.finish",
        ],
        complexity_time="O(n log n)", complexity_space="O(n)",
        description="Pick the compatible activity that finishes earliest, again and again.",
        randomize=lambda rng: {"activities": _random_activities(rng)},
    ),
    AlgoInfo(
        key="huffman", label="Huffman Coding", category="greedy", fn=_greedy.huffman_steps,
        params=[ParamSpec("text", "Text", "text", "abracadabra", min=1, max=config.HUFFMAN_MAX_TEXT)],
        example={"text": "abracadabra"},
        pseudocode=[
            "make a leaf per symbol with its frequency",
            "while more than one node:",
            "    take the two least frequent nodes",
            "    merge them under a new parent",
            "read codes: left = 0, right = 1",
        ],
        complexity_time="O(n log n)", complexity_space="O(n)",
        description="Merge the two rarest symbols until one prefix-code tree remains.",
        randomize=lambda rng: {"text": _random_word(rng, "abcdef", 8, 16)},
    ),
    AlgoInfo(
        key="coin_change", label="Coin Change (Greedy)", category="greedy",
        fn=_greedy.coin_change_steps,
        params=[
            ParamSpec("amount", "Amount", "int", 63, min=0, max=config.GREEDY_MAX_AMOUNT),
            ParamSpec("denominations", "Coins", "int_list", "1,5,10,25", min=1,
                      max=config.GREEDY_MAX_ELEMENTS),
        ],
        example={"amount": 63, "denominations": [1, 5, 10, 25]},
        pseudocode=[
            "sort coins descending",
            "for coin in coins:",
            "    take ⌊remaining / coin⌋ of coin",
            "    remaining ← remaining mod coin",
        ],
        complexity_time="O(k log k)", complexity_space="O(k)",
        description="Always take the largest coin that still fits.",
        randomize=lambda rng: {"amount": rng.randint(10, 99), "denominations": [1, 5, 10, 25]},
    ),
    AlgoInfo(
        key="fractional_knapsack", label="Fractional Knapsack", category="greedy",
        fn=_greedy.fractional_knapsack_steps,
        params=[
            ParamSpec("capacity", "Capacity", "int", 50, min=0, max=config.GREEDY_MAX_CAPACITY),
            ParamSpec("items", "Items", "items", _DEFAULT_ITEMS, min=1, max=config.GREEDY_MAX_ELEMENTS),
        ],
        example={"capacity": 50, "items": _DEFAULT_ITEMS},
        pseudocode=[
            "sort items by value / weight, descending",
            "for item in items:",
            "    if it fits: take all of it",
            "    else: take the fraction that fits; stop",
        ],
        complexity_time="O(n log n)", complexity_space="O(n)",
        description="Fill the knapsack with the best value-per-weight first; split the last item.",
        randomize=lambda rng: {
            "capacity": 50,
            "items": [
                {"id": i + 1, "weight": rng.randint(5, 34), "value": rng.randint(20, 119)}
                for i in range(5)
            ],
        },
    ),
    AlgoInfo(
        key="job_sequencing", label="Job Sequencing", category="greedy",
        fn=_greedy.job_sequencing_steps,
        params=[ParamSpec("jobs", "Jobs", "jobs", _DEFAULT_JOBS, min=1, max=config.GREEDY_MAX_ELEMENTS)],
        example={"jobs": _DEFAULT_JOBS},
        pseudocode=[
            "sort jobs by profit, descending",
            "for job in jobs:",
            "    slot ← latest free slot ≤ job.deadline",
            "    if slot exists: schedule job there",
        ],
        complexity_time="O(n²)", complexity_space="O(n)",
        description="Schedule the most profitable jobs as late as their deadlines allow.",
        randomize=lambda rng: {
            "jobs": [
                {"id": i + 1, "deadline": rng.randint(1, 5), "profit": rng.randint(10, 59)}
                for i in range(5)
            ],
        },
    ),

    # ---- graph -----------------------------------------------------------
    AlgoInfo(
        key="bfs", label="Breadth-First Search", category="graph", fn=_trav.bfs_steps,
        params=_graph_params(), example=_graph_example(), pseudocode=_trav.BFS_PSEUDOCODE,
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Breadth-First Search traverses level by level, visiting all neighbors before moving deeper.",
        randomize=_random_graph_params(),
    ),
    AlgoInfo(
        key="dfs", label="Depth-First Search", category="graph", fn=_trav.dfs_steps,
        params=_graph_params(), example=_graph_example(), pseudocode=_trav.DFS_PSEUDOCODE,
        complexity_time="O(V + E)", complexity_space="O(V)",
        description="Depth-First Search explores as far as possible along each branch before backtracking.",
        randomize=_random_graph_params(),
    ),
    AlgoInfo(
        key="dijkstra", label="Dijkstra's Algorithm", category="graph", fn=_trav.dijkstra_steps,
        params=_graph_params(), example=_graph_example(), pseudocode=_trav.DIJKSTRA_PSEUDOCODE,
        complexity_time="O(V²)", complexity_space="O(V)",
        description="Finds the shortest path between nodes in a weighted graph.",
        randomize=_random_graph_params(),
    ),
    AlgoInfo(
        key="prim", label="Prim's Algorithm", category="graph", fn=_mst.prim_steps,
        params=_graph_params(), example=_graph_example(), pseudocode=_mst.PRIM_PSEUDOCODE,
        complexity_time="O(V · E)", complexity_space="O(V)",
        description="Finds a minimum spanning tree for a weighted undirected graph.",
        randomize=_random_graph_params(),
    ),
    AlgoInfo(
        key="kruskal", label="Kruskal's Algorithm", category="graph", fn=_mst.kruskal_steps,
        params=_graph_params(with_start=False), example=_graph_example(with_start=False),
        pseudocode=_mst.KRUSKAL_PSEUDOCODE,
        complexity_time="O(E log E)", complexity_space="O(V)",
        description="Another algorithm to find the minimum spanning tree using a greedy approach.",
        randomize=_random_graph_params(with_start=False),
    ),

    # ---- dynamic programming ---------------------------------------------
    AlgoInfo(
        key="fibonacci_dp", label="Fibonacci (DP)", category="dynamic_programming",
        fn=_dp.fibonacci_dp_steps,
        params=[ParamSpec("n", "n (Index)", "int", 8, min=1, max=config.DP_FIBONACCI_MAX_N)],
        example={"n": 8}, pseudocode=_dp.FIBONACCI_DP_PSEUDOCODE,
        complexity_time="O(n)", complexity_space="O(n)",
        description="Compute the nth Fibonacci number using dynamic programming.",
        randomize=lambda rng: {"n": rng.randint(5, 20)},
    ),
    AlgoInfo(
        key="knapsack", label="Knapsack (0/1)", category="dynamic_programming", fn=_dp.knapsack_steps,
        params=[
            ParamSpec("capacity", "Capacity (W)", "int", 10, min=1, max=config.KNAPSACK_MAX_CAP),
            ParamSpec("weights", "Weights", "int_list", "2,3,4,5", min=1, max=config.KNAPSACK_MAX_ITEMS),
            ParamSpec("values", "Values", "int_list", "3,4,5,6", min=1, max=config.KNAPSACK_MAX_ITEMS),
        ],
        example={"capacity": 10, "weights": [2, 3, 4, 5], "values": [3, 4, 5, 6]},
        pseudocode=_dp.KNAPSACK_PSEUDOCODE,
        complexity_time="O(n · W)", complexity_space="O(n · W)",
        description="Given weights and values, maximize value in a knapsack of capacity W.",
        randomize=_random_knapsack,
    ),
    AlgoInfo(
        key="lcs", label="Longest Common Subsequence", category="dynamic_programming", fn=_dp.lcs_steps,
        params=[
            ParamSpec("s1", "String 1", "text", "abcde", max=config.DP_MAX_STRING),
            ParamSpec("s2", "String 2", "text", "ace", max=config.DP_MAX_STRING),
        ],
        example={"s1": "abcde", "s2": "ace"}, pseudocode=_dp.LCS_PSEUDOCODE,
        complexity_time="O(n · m)", complexity_space="O(n · m)",
        description="Find the length of the longest common subsequence of two strings.",
        randomize=lambda rng: {"s1": _random_word(rng, "abcd", 4, 8), "s2": _random_word(rng, "abcd", 3, 6)},
    ),
    AlgoInfo(
        key="lis", label="Longest Increasing Subsequence", category="dynamic_programming",
        fn=_dp.lis_steps,
        params=[ParamSpec("nums", "Array", "int_list", "10,9,2,5,3,7,101,18", min=1, max=config.DP_MAX_ARRAY)],
        example={"nums": "10,9,2,5,3,7,101,18"}, pseudocode=_dp.LIS_PSEUDOCODE,
        complexity_time="O(n²)", complexity_space="O(n)",
        description="Find the length of the longest increasing subsequence in an array.",
        randomize=lambda rng: {"nums": _ds.random_array(rng)},
    ),
    AlgoInfo(
        key="coin_change_dp", label="Coin Change (DP)", category="dynamic_programming",
        fn=_dp.coin_change_dp_steps,
        params=[
            ParamSpec("coins", "Coins", "int_list", "1,2,5", min=1, max=config.GREEDY_MAX_ELEMENTS),
            ParamSpec("amount", "Amount", "int", 11, min=1, max=config.DP_MAX_AMOUNT),
        ],
        example={"coins": "1,2,5", "amount": 11}, pseudocode=_dp.COIN_CHANGE_DP_PSEUDOCODE,
        complexity_time="O(k · amount)", complexity_space="O(amount)",
        description="Find the minimum number of coins to make up a given amount.",
        randomize=lambda rng: {"coins": sorted(rng.sample(range(1, 10), 3)), "amount": rng.randint(5, 30)},
    ),
    AlgoInfo(
        key="edit_distance", label="Edit Distance", category="dynamic_programming",
        fn=_dp.edit_distance_steps,
        params=[
            ParamSpec("s1", "String 1", "text", "horse", max=config.DP_MAX_STRING),
            ParamSpec("s2", "String 2", "text", "ros", max=config.DP_MAX_STRING),
        ],
        example={"s1": "horse", "s2": "ros"}, pseudocode=_dp.EDIT_DISTANCE_PSEUDOCODE,
        complexity_time="O(n · m)", complexity_space="O(n · m)",
        description="Find the minimum number of operations to convert one string to another.",
        randomize=lambda rng: {
            "s1": _random_word(rng, "abcdeh", 3, 7), "s2": _random_word(rng, "abcdeh", 3, 7),
        },
    ),
    AlgoInfo(
        key="subset_sum", label="Subset Sum", category="dynamic_programming", fn=_dp.subset_sum_steps,
        params=[
            ParamSpec("nums", "Array", "int_list", "3,34,4,12,5,2", min=1, max=config.DP_MAX_ARRAY),
            ParamSpec("target", "Target", "int", 9, min=1, max=config.DP_MAX_AMOUNT),
        ],
        example={"nums": "3,34,4,12,5,2", "target": 9}, pseudocode=_dp.SUBSET_SUM_PSEUDOCODE,
        complexity_time="O(n · target)", complexity_space="O(n · target)",
        description="Determine if a subset of the array sums to a target value.",
        randomize=lambda rng: {
            "nums": [rng.randint(1, 15) for _ in range(rng.randint(4, 6))], "target": rng.randint(5, 20),
        },
    ),
    AlgoInfo(
        key="min_path_sum", label="Min Path Sum", category="dynamic_programming",
        fn=_dp.min_path_sum_steps,
        params=[ParamSpec("grid", "Grid", "grid", "1,3,1;1,5,1;4,2,1", min=1, max=config.DP_MAX_GRID_SIDE)],
        example={"grid": "1,3,1;1,5,1;4,2,1"}, pseudocode=_dp.MIN_PATH_SUM_PSEUDOCODE,
        complexity_time="O(m · n)", complexity_space="O(m · n)",
        description="Find the minimum path sum from top-left to bottom-right in a grid.",
        randomize=lambda rng: {
            "grid": [[rng.randint(1, 9) for _ in range(3)] for _ in range(3)],
        },
    ),

    # ---- sorting ---------------------------------------------------------
    AlgoInfo(
        key="bubble_sort", label="Bubble Sort", category="sorting", fn=_sort.bubble_sort_steps,
        params=[_array_spec(min_len=1)], example={"array": "64,34,25,12,22,11,90"},
        pseudocode=_sort.BUBBLE_SORT_PSEUDOCODE,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Repeatedly swap adjacent out-of-order pairs; the largest value bubbles to the end.",
        randomize=lambda rng: {"array": _sort.random_bar_heights(rng=rng)},
    ),
    AlgoInfo(
        key="selection_sort", label="Selection Sort", category="sorting", fn=_sort.selection_sort_steps,
        params=[_array_spec(min_len=1)], example={"array": "64,34,25,12,22,11,90"},
        pseudocode=_sort.SELECTION_SORT_PSEUDOCODE,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Find the minimum of the unsorted part and swap it to the front.",
        randomize=lambda rng: {"array": _sort.random_bar_heights(rng=rng)},
    ),
    AlgoInfo(
        key="insertion_sort", label="Insertion Sort", category="sorting", fn=_sort.insertion_sort_steps,
        params=[_array_spec(min_len=1)], example={"array": "64,34,25,12,22,11,90"},
        pseudocode=_sort.INSERTION_SORT_PSEUDOCODE,
        complexity_time="O(n²)", complexity_space="O(1)",
        description="Grow a sorted prefix by sliding each new element left into place.",
        randomize=lambda rng: {"array": _sort.random_bar_heights(rng=rng)},
    ),
    AlgoInfo(
        key="quick_sort", label="Quick Sort", category="sorting", fn=_sort.quick_sort_steps,
        params=[_array_spec(min_len=1)], example={"array": "64,34,25,12,22,11,90"},
        pseudocode=_sort.QUICK_SORT_PSEUDOCODE,
        complexity_time="O(n log n) average, O(n²) worst", complexity_space="O(log n)",
        description="Partition around the last element, then sort each side of the pivot.",
        randomize=lambda rng: {"array": _sort.random_bar_heights(rng=rng)},
    ),
    AlgoInfo(
        key="merge_sort", label="Merge Sort", category="sorting", fn=_sort.merge_sort_steps,
        params=[_array_spec(min_len=1)], example={"array": "64,34,25,12,22,11,90"},
        pseudocode=_sort.MERGE_SORT_PSEUDOCODE,
        complexity_time="O(n log n)", complexity_space="O(n)",
        description="Split the array in halves, sort each half, and merge them back in order.",
        randomize=lambda rng: {"array": _sort.random_bar_heights(rng=rng)},
    ),

    # ---- searching -------------------------------------------------------
    AlgoInfo(
        key="linear_search", label="Linear Search", category="searching", fn=_search.linear_search_steps,
        params=[_array_spec(min_len=1), ParamSpec("target", "Target", "int", 40)],
        example={"array": "10,20,30,40,50", "target": 40}, pseudocode=_search.LINEAR_SEARCH_PSEUDOCODE,
        complexity_time="O(n)", complexity_space="O(1)",
        description="Check every element from left to right.",
        randomize=_random_search,
    ),
    AlgoInfo(
        key="binary_search", label="Binary Search", category="searching", fn=_search.binary_search_steps,
        params=[_array_spec(min_len=1), ParamSpec("target", "Target", "int", 40)],
        example={"array": "50,10,40,20,30", "target": 40}, pseudocode=_search.BINARY_SEARCH_PSEUDOCODE,
        complexity_time="O(n log n) with the sort, O(log n) search", complexity_space="O(n)",
        description="Sort, then halve the search range around the middle element.",
        randomize=_random_search,
    ),

    # ---- data structures -------------------------------------------------
    AlgoInfo(
        key="array_add", label="Array: Add", category="data_structures", fn=_ds.array_add_steps,
        params=[_array_spec(), _value_spec()], example={"array": _ds.DEFAULT_ARRAY, "value": 60},
        complexity_time="O(1) amortized", complexity_space="O(1)",
        description="Append a value at the end of the array.",
        randomize=lambda rng: {"array": _ds.random_array(rng), "value": rng.randint(10, 99)},
    ),
    AlgoInfo(
        key="array_insert", label="Array: Insert", category="data_structures", fn=_ds.array_insert_steps,
        params=[_array_spec(), _index_spec(), _value_spec()],
        example={"array": _ds.DEFAULT_ARRAY, "index": 2, "value": 25},
        complexity_time="O(n)", complexity_space="O(1)",
        description="Shift the tail right and place a value at the index.",
        randomize=lambda rng: _random_ds_edit(rng, with_value=True, allow_end=True),
    ),
    AlgoInfo(
        key="array_remove", label="Array: Remove", category="data_structures", fn=_ds.array_remove_steps,
        params=[_array_spec(), _index_spec()], example={"array": _ds.DEFAULT_ARRAY, "index": 1},
        complexity_time="O(n)", complexity_space="O(1)",
        description="Remove the element at the index and shift the tail left.",
        randomize=lambda rng: _random_ds_edit(rng, with_value=False),
    ),
    AlgoInfo(
        key="array_update", label="Array: Update", category="data_structures", fn=_ds.array_update_steps,
        params=[_array_spec(), _index_spec(), _value_spec()],
        example={"array": _ds.DEFAULT_ARRAY, "index": 3, "value": 99},
        complexity_time="O(1)", complexity_space="O(1)",
        description="Overwrite the element at the index.",
        randomize=lambda rng: _random_ds_edit(rng, with_value=True),
    ),
    AlgoInfo(
        key="stack_push", label="Stack: Push", category="data_structures", fn=_ds.stack_push_steps,
        params=[_array_spec("stack", "Stack"), _value_spec()], example={"stack": [10, 20, 30], "value": 40},
        complexity_time="O(1)", complexity_space="O(1)",
        description="Place a value on top of the stack (LIFO).",
        randomize=lambda rng: {"stack": _ds.random_array(rng), "value": rng.randint(10, 99)},
    ),
    AlgoInfo(
        key="stack_pop", label="Stack: Pop", category="data_structures", fn=_ds.stack_pop_steps,
        params=[_array_spec("stack", "Stack")], example={"stack": [10, 20, 30]},
        complexity_time="O(1)", complexity_space="O(1)",
        description="Remove the value on top of the stack (LIFO).",
        randomize=lambda rng: {"stack": _ds.random_array(rng)},
    ),
    AlgoInfo(
        key="queue_enqueue", label="Queue: Enqueue", category="data_structures", fn=_ds.queue_enqueue_steps,
        params=[_array_spec("queue", "Queue"), _value_spec()], example={"queue": [10, 20, 30], "value": 40},
        complexity_time="O(1)", complexity_space="O(1)",
        description="Add a value at the rear of the queue (FIFO).",
        randomize=lambda rng: {"queue": _ds.random_array(rng), "value": rng.randint(10, 99)},
    ),
    AlgoInfo(
        key="queue_dequeue", label="Queue: Dequeue", category="data_structures", fn=_ds.queue_dequeue_steps,
        params=[_array_spec("queue", "Queue")], example={"queue": [10, 20, 30]},
        complexity_time="O(1)", complexity_space="O(1)",
        description="Remove the value at the front of the queue (FIFO).",
        randomize=lambda rng: {"queue": _ds.random_array(rng)},
    ),
    AlgoInfo(
        key="linked_list_insert", label="Linked List: Insert", category="data_structures",
        fn=_ds.linked_list_insert_steps,
        params=[_array_spec("values", "List"), _index_spec(), _value_spec()],
        example={"values": [10, 20, 30, 40], "index": 2, "value": 25},
        complexity_time="O(n)", complexity_space="O(1)",
        description="Walk to the predecessor and splice in a new node.",
        randomize=lambda rng: {
            "values": _ds.random_array(rng), "index": rng.randint(0, 4), "value": rng.randint(10, 99),
        },
    ),
    AlgoInfo(
        key="linked_list_delete", label="Linked List: Delete", category="data_structures",
        fn=_ds.linked_list_delete_steps,
        params=[_array_spec("values", "List"), _index_spec()],
        example={"values": [10, 20, 30, 40], "index": 2},
        complexity_time="O(n)", complexity_space="O(1)",
        description="Walk to the node and unlink it from its predecessor.",
        randomize=lambda rng: {"values": _ds.random_array(rng), "index": rng.randint(0, 4)},
    ),
    AlgoInfo(
        key="linked_list_search", label="Linked List: Search", category="data_structures",
        fn=_ds.linked_list_search_steps,
        params=[_array_spec("values", "List"), ParamSpec("target", "Target", "int", 30)],
        example={"values": [10, 20, 30, 40], "target": 30},
        complexity_time="O(n)", complexity_space="O(1)",
        description="Follow next pointers from the head until the value is found.",
        randomize=_random_list_search,
    ),
]


REGISTRY: Dict[str, AlgoInfo] = {info.key: info for info in _ENTRIES}


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_algorithm(key: str) -> Optional[AlgoInfo]:
    """Return AlgoInfo by key, or None."""
    return REGISTRY.get(key)


def list_algorithms() -> List[AlgoInfo]:
    """Return all registered algorithms in insertion order."""
    return list(REGISTRY.values())


def algorithms_by_category(category: str) -> List[AlgoInfo]:
    """Filter registry by category."""
    return [a for a in REGISTRY.values() if a.category == category]


def coerce_params(info: AlgoInfo, raw: Optional[dict]) -> Dict[str, Any]:
    """Typed, bound-checked arguments for info.fn.  Raises ValueError."""
    return coerce(info.params, raw)


def random_params(info: AlgoInfo, seed: Optional[int] = None) -> Dict[str, Any]:
    """Fresh example params; falls back to the fixed example."""
    if info.randomize is None:
        return dict(info.example)
    return info.randomize(random.Random(seed))


def run_algorithm(key: str, params: Optional[dict] = None) -> List[Step]:
    """Look up, coerce and run.  Raises ValueError for unknown keys or bad params."""
    info = get_algorithm(key)
    if info is None:
        raise ValueError(f"Unknown algorithm '{key}'")
    return info.fn(**coerce_params(info, params))


__all__ = [
    "AlgoInfo",
    "ParamSpec",
    "Step",
    "TraceBuilder",
    "CATEGORIES",
    "REGISTRY",
    "get_algorithm",
    "list_algorithms",
    "algorithms_by_category",
    "coerce_params",
    "random_params",
    "run_algorithm",
    "to_plain",
]
