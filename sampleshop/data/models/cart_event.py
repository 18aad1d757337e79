# sampleshop/data/models/cart_event.py
from dataclasses import dataclass, field
from typing import List, Literal, Optional, Tuple

from sampleshop.data.models.cart_line import CartLine

EventKind = Literal["added", "updated", "limited", "removed"]


@dataclass(frozen=True)
class CartEvent:
    """User-facing notification produced by a cart mutation."""

    kind: EventKind
    product_label: str
    quantity: Optional[int] = None


@dataclass(frozen=True)
class CartResult:
    """Outcome of one mutating call: resulting lines plus the events it emitted, in order."""

    lines: Tuple[CartLine, ...]
    events: List[CartEvent] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(line.quantity for line in self.lines)
