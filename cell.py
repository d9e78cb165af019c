from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, Tuple
from rules import Transition

ALIVE_SYMBOL = "o"
DEAD_SYMBOL = " "


@dataclass
class Cell:
    """
    One grid position.
    neighbor_refs holds the integer keys of the neighboring cells inside the
    owning World (never the Cell objects themselves). It is None until the
    World computes it and does not change afterwards.
    """
    x: int
    y: int
    alive: bool = False
    pending_state: Transition = field(default=Transition.UNCHANGED, compare=False)
    neighbor_refs: Optional[Tuple[int, ...]] = field(default=None, compare=False, repr=False)

    def to_display_symbol(self) -> str:
        return ALIVE_SYMBOL if self.alive else DEAD_SYMBOL

    def set_pending_state(self, value: Transition) -> None:
        """Record the next-generation outcome without touching `alive`."""
        self.pending_state = value

    def apply_pending_state(self) -> None:
        self.alive = self.pending_state.apply(self.alive)
        self.pending_state = Transition.UNCHANGED
