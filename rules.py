from __future__ import annotations
from enum import Enum

NEIGHBOR_COUNT = 8 # Moore neighborhood


class Transition(Enum):
    """
    Outcome of the decide phase for a single cell.
    UNCHANGED is an explicit outcome, not a missing value.
    """
    BECOME_ALIVE = "become_alive"
    BECOME_DEAD = "become_dead"
    UNCHANGED = "unchanged"

    def apply(self, alive: bool) -> bool:
        """Return the state after applying this transition to `alive`."""
        if self is Transition.BECOME_ALIVE:
            return True
        if self is Transition.BECOME_DEAD:
            return False
        return alive


def conway_rule(alive: bool, neighbor_sum: int) -> Transition:
    """
    Standard B3/S23 rule.
        dead  cell with exactly 3 live neighbors -> BECOME_ALIVE
        alive cell with < 2 or > 3 live neighbors -> BECOME_DEAD
        everything else                           -> UNCHANGED
    """
    if not (0 <= neighbor_sum <= NEIGHBOR_COUNT):
        raise ValueError(f"invalid neighbor sum {neighbor_sum}, expected 0..{NEIGHBOR_COUNT}")

    if alive:
        if neighbor_sum < 2 or neighbor_sum > 3:
            return Transition.BECOME_DEAD
        return Transition.UNCHANGED

    if neighbor_sum == 3:
        return Transition.BECOME_ALIVE
    return Transition.UNCHANGED
