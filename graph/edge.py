"""
edge.py — Graph Edge
====================
An undirected, weighted connection between two node ids.

Design decisions:
  - `source` and `target` are node-id strings, NOT Node references.
    This keeps edges serialisable and avoids circular references.
  - Serialised form uses the keys `from` / `to` (the editor wire
    format); `from` is a Python keyword, hence the attribute
    names.
  - Weight defaults to 1 for unweighted traversals; BFS / DFS simply
    never read it.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Edge:
    source: str
    target: str
    weight: float = 1

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def connects(self, node_a: str, node_b: str) -> bool:
        """True if this edge links node_a ↔ node_b (either direction)."""
        return {self.source, self.target} == {node_a, node_b}

    def touches(self, node_id: str) -> bool:
        return node_id in (self.source, self.target)

    def other_end(self, node_id: str) -> Optional[str]:
        """Given one endpoint, return the other. None if node_id isn't an endpoint."""
        if node_id == self.source:
            return self.target
        if node_id == self.target:
            return self.source
        return None

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {"from": self.source, "to": self.target, "weight": self.weight}

    @classmethod
    def from_dict(cls, data: dict) -> "Edge":
        weight = float(data.get("weight", 1))
        return cls(
            source=str(data.get("from", data.get("source"))),
            target=str(data.get("to", data.get("target"))),
            weight=int(weight) if weight.is_integer() else weight,
        )

    def __str__(self) -> str:
        return f"({self.source}, {self.target})"
