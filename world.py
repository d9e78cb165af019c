from __future__ import annotations
from typing import Dict, List, Optional, Sequence, Tuple
import numpy as np
from cell import Cell
from rules import conway_rule

DEFAULT_DENSITY = 0.2

# (dx, dy) offsets of the Moore neighborhood
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, 1), (0, 1), (1, 1),    # above
    (-1, 0),         (1, 0),    # sides
    (-1, -1), (0, -1), (1, -1), # below
)


class LocationOccupied(ValueError):
    """Raised when a cell is added at a coordinate that already holds one."""


class World:
    """
    Fixed-size, non-toroidal Game of Life grid.
    Cells outside the width x height rectangle do not exist, so edge and
    corner cells simply have fewer neighbors.
    """
    def __init__(
        self,
        width: int,
        height: int,
        *,
        density: float = DEFAULT_DENSITY,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ):
        for size in (width, height):
            if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
                raise ValueError(f"world size must be integers, got {width!r}x{height!r}")
        if width < 1 or height < 1:
            raise ValueError(f"world must be at least 1x1, got {width}x{height}")
        if not (0.0 <= density <= 1.0):
            raise ValueError(f"density must be in [0, 1], got {density}")

        self.width = width
        self.height = height
        self.density = density
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self._tick_count = 0
        self.cells: Dict[int, Cell] = {}

        self._populate_cells()
        self._prepopulate_neighbors()

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[int]]) -> World:
        """
        Build a world from a row-major nested list of 0/1 (grid[y][x]).
        Every cell starts dead and is then set from the grid, so no randomness leaks in.
        """
        if not grid or not grid[0]:
            raise ValueError("grid must have at least one row and one column")
        width = len(grid[0])
        if any(len(row) != width for row in grid):
            raise ValueError("grid rows must all have the same length")

        world = cls(width, len(grid), density=0.0)
        for y, row in enumerate(grid):
            for x, value in enumerate(row):
                if value not in (0, 1):
                    raise ValueError(f"invalid cell value {value!r} at ({x}, {y})")
                world.cells[world._key(x, y)].alive = bool(value)
        return world

    @property
    def tick_count(self) -> int:
        return self._tick_count

    @property
    def population(self) -> int:
        return sum(1 for cell in self.cells.values() if cell.alive)

    def tick(self) -> None:
        """
        Advance one generation. Every decision is made against the current
        generation before any cell is changed.
        """
        for cell in self.cells.values():
            cell.set_pending_state(conway_rule(cell.alive, self.alive_neighbor_count(cell)))

        for cell in self.cells.values():
            cell.apply_pending_state()

        self._tick_count += 1

    def render(self) -> str:
        rows = []
        for y in range(self.height):
            rows.append("".join(self.cells[self._key(x, y)].to_display_symbol() for x in range(self.width)))
            rows.append("\n")
        return "".join(rows)

    def to_grid(self) -> List[List[int]]:
        return [
            [int(self.cells[self._key(x, y)].alive) for x in range(self.width)]
            for y in range(self.height)
        ]

    def cell_at(self, x: int, y: int) -> Optional[Cell]:
        if not (0 <= x < self.width and 0 <= y < self.height):
            return None
        return self.cells.get(self._key(x, y))

    def neighbors_around(self, cell: Cell) -> List[Cell]:
        if cell.neighbor_refs is None:
            refs = []
            for dx, dy in DIRECTIONS:
                neighbor = self.cell_at(cell.x + dx, cell.y + dy)
                if neighbor is not None:
                    refs.append(self._key(neighbor.x, neighbor.y))
            cell.neighbor_refs = tuple(refs)
        return [self.cells[key] for key in cell.neighbor_refs]

    def alive_neighbor_count(self, cell: Cell) -> int:
        if cell.neighbor_refs is None:
            self.neighbors_around(cell)
        cells = self.cells
        return sum(1 for key in cell.neighbor_refs if cells[key].alive)

    def _key(self, x: int, y: int) -> int:
        return y * self.width + x

    def _add_cell(self, x: int, y: int, alive: bool = False) -> Cell:
        key = self._key(x, y)
        if key in self.cells:
            raise LocationOccupied(f"cell already exists at ({x}, {y})")
        cell = Cell(x, y, alive)
        self.cells[key] = cell
        return cell

    def _populate_cells(self) -> None:
        for y in range(self.height):
            for x in range(self.width):
                self._add_cell(x, y, bool(self.rng.random() < self.density))

    def _prepopulate_neighbors(self) -> None:
        for cell in self.cells.values():
            self.neighbors_around(cell)
