from typing import Optional, Tuple
import uuid


# ---------------------------------------------------------------------------
# Node
# ---------------------------------------------------------------------------
class Node:
    """
    Identity (id), canvas position and the label drawn inside the circle.

    Attributes:
        id    : Unique opaque identifier (short uuid by default, or user-supplied).
                Never assumed to be contiguous or ordered.
        label : Human-readable name shown on the canvas.
        x, y  : Canvas coordinates (pixels; the presentation layer decides).
    """

    __slots__ = ("id", "label", "x", "y")

    def __init__(
        self,
        x: float = 0.0,
        y: float = 0.0,
        label: Optional[str] = None,
        node_id: Optional[str] = None,
    ):
        self.id: str    = node_id if node_id is not None else new_node_id()
        self.label: str = label if label is not None else self.id
        self.x: float   = x
        self.y: float   = y

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def copy(self) -> "Node":
        return Node(x=self.x, y=self.y, label=self.label, node_id=self.id)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "id":    self.id,
            "label": self.label,
            "x":     self.x,
            "y":     self.y,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Node":
        return cls(x=data.get("x", 0.0), y=data.get("y", 0.0), label=data.get("label"), node_id=str(data["id"]))

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Node(id={self.id}, label={self.label}, pos=({self.x:.2f},{self.y:.2f}))"

    def __eq__(self, other) -> bool:
        return isinstance(other, Node) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


def new_node_id() -> str:
    return uuid.uuid4().hex[:8]
