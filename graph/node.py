"""
node.py — Graph Node
====================
A positioned, labelled vertex.  Nodes are frozen value objects, so a
Node captured inside a Step can never drift.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Node:
    """
    Attributes:
        id    : Unique identifier (string, e.g. "1").
        x, y  : Canvas coordinates in pixels.
        label : Human-readable name shown on the canvas (defaults to id).
    """

    id:    str
    x:     float         = 0.0
    y:     float         = 0.0
    label: Optional[str] = None

    @property
    def display(self) -> str:
        return self.label or self.id

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {"id": self.id, "x": self.x, "y": self.y, "label": self.display}

    @classmethod
    def from_dict(cls, data: dict) -> "Node":
        return cls(
            id=str(data["id"]),
            x=float(data.get("x", 0.0)),
            y=float(data.get("y", 0.0)),
            label=data.get("label"),
        )
