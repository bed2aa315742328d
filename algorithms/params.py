"""
params.py — Parameter Specs & Coercion
=======================================
Every registered algorithm declares its inputs as a list of ParamSpec.
`coerce_params` turns raw request data (JSON values or form strings)
into the typed arguments the tracer expects.

Kinds:
    int         plain integer                     min/max bound the value
    text        string                            max bounds the length
    int_list    "3,1,2" or [3, 1, 2]              max bounds the length
    grid        "1,3;4,2" or [[1, 3], [4, 2]]     max bounds rows and columns
    activities  [{id?, start, finish}, …]         max bounds the count
    items       [{id?, weight, value}, …]         max bounds the count
    jobs        [{id?, deadline, profit}, …]      max bounds the count
    graph       {nodes: […], edges: […]}          max bounds the node count
    node        node id string

Record fields (times, weights, values, deadlines, profits) are
range-checked against the GREEDY_MAX_* caps in config.

Comma-separated numbers are parsed leniently: tokens that are not numbers
are dropped.  Anything else that cannot be coerced raises ValueError.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

import config
from graph import Graph, default_graph
from algorithms.greedy import Activity, Item, Job

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParamSpec:
    name:    str
    label:   str
    kind:    str
    default: Any            = None
    min:     Optional[int]  = None
    max:     Optional[int]  = None

    def to_dict(self) -> dict:
        return {
            "name": self.name, "label": self.label, "kind": self.kind,
            "default": self.default, "min": self.min, "max": self.max,
        }


# ---------------------------------------------------------------------------
# Scalar parsers
# ---------------------------------------------------------------------------
def parse_int(raw: Any) -> int:
    if isinstance(raw, bool):
        raise ValueError(f"expected an integer, got {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        if raw.is_integer():
            return int(raw)
        raise ValueError(f"expected an integer, got {raw!r}")
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError:
            pass
        try:
            value = float(raw.strip())
        except ValueError:
            raise ValueError(f"expected an integer, got {raw!r}") from None
        if value.is_integer():
            return int(value)
    raise ValueError(f"expected an integer, got {raw!r}")


def parse_text(raw: Any) -> str:
    if not isinstance(raw, str):
        raise ValueError(f"expected text, got {type(raw).__name__}")
    return raw


def _lenient_number(token: str) -> Optional[int]:
    try:
        return parse_int(token)
    except ValueError:
        return None


def parse_int_list(raw: Any) -> List[int]:
    """ "10, 9, x, 2" → [10, 9, 2];  [10, "9"] → [10, 9]."""
    if isinstance(raw, str):
        tokens = raw.split(",")
    elif isinstance(raw, (list, tuple)):
        tokens = raw
    else:
        raise ValueError(f"expected a list of integers, got {raw!r}")

    values = []
    for token in tokens:
        value = _lenient_number(token) if isinstance(token, str) else parse_int(token)
        if value is not None:
            values.append(value)
    return values


def parse_grid(raw: Any) -> List[List[int]]:
    """ "1,3,1;1,5,1" → [[1, 3, 1], [1, 5, 1]].  Empty rows are dropped."""
    if isinstance(raw, str):
        rows = raw.split(";")
    elif isinstance(raw, (list, tuple)):
        rows = raw
    else:
        raise ValueError(f"expected a grid, got {raw!r}")
    return [r for r in (parse_int_list(row) for row in rows) if r]


# ---------------------------------------------------------------------------
# Record parsers
# ---------------------------------------------------------------------------
def _records(raw: Any, build: Callable[[int, dict], Any]) -> list:
    if not isinstance(raw, (list, tuple)):
        raise ValueError(f"expected a list of records, got {type(raw).__name__}")
    out = []
    for i, entry in enumerate(raw):
        if not isinstance(entry, dict):
            raise ValueError(f"record {i} is not an object")
        try:
            out.append(build(i, entry))
        except KeyError as exc:
            raise ValueError(f"record {i} is missing field {exc.args[0]!r}") from None
        except ValueError as exc:
            raise ValueError(f"record {i}: {exc}") from None
    return out


def _field(entry: dict, name: str, low: int, high: int) -> int:
    value = parse_int(entry[name])
    if not low <= value <= high:
        raise ValueError(f"{name} must be between {low} and {high} (got {value})")
    return value


def parse_activities(raw: Any) -> List[Activity]:
    return _records(raw, lambda i, d: Activity(
        id=parse_int(d.get("id", i + 1)),
        start=_field(d, "start", 0, config.GREEDY_MAX_TIME),
        finish=_field(d, "finish", 0, config.GREEDY_MAX_TIME),
    ))


def parse_items(raw: Any) -> List[Item]:
    return _records(raw, lambda i, d: Item(
        id=parse_int(d.get("id", i + 1)),
        weight=_field(d, "weight", 1, config.GREEDY_MAX_QUANTITY),
        value=_field(d, "value", 0, config.GREEDY_MAX_QUANTITY),
    ))


def parse_jobs(raw: Any) -> List[Job]:
    return _records(raw, lambda i, d: Job(
        id=parse_int(d.get("id", i + 1)),
        deadline=_field(d, "deadline", 1, config.GREEDY_MAX_DEADLINE),
        profit=_field(d, "profit", 0, config.GREEDY_MAX_QUANTITY),
    ))


def parse_graph(raw: Any) -> Graph:
    if raw is None:
        return default_graph()
    if isinstance(raw, Graph):
        return raw
    if isinstance(raw, str):
        return Graph.from_adjacency_list(raw)
    if not isinstance(raw, dict):
        raise ValueError(f"expected a graph object, got {type(raw).__name__}")
    try:
        return Graph.from_dict(raw)
    except (KeyError, TypeError) as exc:
        raise ValueError(f"malformed graph: {exc}") from None


_PARSERS: Dict[str, Callable[[Any], Any]] = {
    "int":        parse_int,
    "text":       parse_text,
    "int_list":   parse_int_list,
    "grid":       parse_grid,
    "activities": parse_activities,
    "items":      parse_items,
    "jobs":       parse_jobs,
    "graph":      parse_graph,
    "node":       lambda raw: str(raw).strip(),
}


# ---------------------------------------------------------------------------
# Bounds
# ---------------------------------------------------------------------------
def _size(spec: ParamSpec, value: Any) -> int:
    if spec.kind == "int":
        return value
    if spec.kind == "graph":
        return value.node_count()
    if spec.kind == "grid":
        return max([len(value)] + [len(row) for row in value])
    return len(value)


def _check_bounds(spec: ParamSpec, value: Any) -> None:
    if spec.kind == "node":
        return
    size = _size(spec, value)
    what = spec.label if spec.kind == "int" else f"{spec.label} size"
    if spec.min is not None and size < spec.min:
        raise ValueError(f"{what} must be at least {spec.min} (got {size})")
    if spec.max is not None and size > spec.max:
        raise ValueError(f"{what} must be at most {spec.max} (got {size})")


def coerce_value(spec: ParamSpec, raw: Any) -> Any:
    # a blank form field means "use the default", except for free text
    if raw is None or (isinstance(raw, str) and not raw.strip() and spec.kind != "text"):
        raw = spec.default
    try:
        value = _PARSERS[spec.kind](raw)
    except ValueError as exc:
        raise ValueError(f"{spec.label}: {exc}") from None
    _check_bounds(spec, value)
    return value


def coerce(specs: List[ParamSpec], raw: Optional[dict]) -> Dict[str, Any]:
    """Fill defaults, parse and bound-check every declared parameter."""
    raw = raw or {}
    out: Dict[str, Any] = {}
    for spec in specs:
        try:
            out[spec.name] = coerce_value(spec, raw.get(spec.name))
        except ValueError as exc:
            log.warning("rejected parameter %s=%r: %s", spec.name, raw.get(spec.name), exc)
            raise
    return out
