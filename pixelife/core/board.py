"""Board state and generation stepping for Conway's Game of Life.

The board holds a fixed-size 2D boolean array (True=alive, False=dead)
and advances it one generation at a time. Each generation is computed
into a fresh array and swapped in, so no cell ever sees a neighbor's
next state during the same step. Positions outside the board count as
dead; there is no wraparound.
"""

import numpy as np
from typing import Iterable, List, Optional, Tuple
import logging

from .rules import BIRTH_COUNT, Rule, standard_survival

logger = logging.getLogger(__name__)

# Moore neighborhood offsets (row, col), center excluded
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


def _as_cells(initial) -> np.ndarray:
    """Validate a seed matrix and return it as a fresh boolean array."""
    if isinstance(initial, np.ndarray):
        if initial.ndim != 2:
            raise ValueError(f"Seed must be 2-dimensional, got shape {initial.shape}")
        cells = initial.astype(bool, copy=True)
    else:
        rows = [list(row) for row in initial]
        if rows:
            widths = {len(row) for row in rows}
            if len(widths) != 1:
                raise ValueError(f"Seed rows must all have the same length, got lengths {sorted(widths)}")
        cells = np.array(rows, dtype=bool).reshape(len(rows), len(rows[0]) if rows else 0)

    if cells.shape[0] < 1 or cells.shape[1] < 1:
        raise ValueError(f"Seed must have at least one row and one column, got shape {cells.shape}")
    return cells


class Board:
    """Rectangular Game of Life board.

    Attributes:
        rows: Board height in cells
        cols: Board width in cells
        rule: Survival rule applied to live cells
        generation: Number of completed advance() calls
    """

    def __init__(self, initial, rule: Optional[Rule] = None):
        """Create a board from a seed matrix.

        Args:
            initial: Rectangular matrix of liveness values (nested sequences
                or a 2D numpy array); values are coerced to bool and copied
            rule: Survival rule for live cells (standard 2-3 rule if None)

        Raises:
            ValueError: If the seed is empty, ragged, or not 2-dimensional
        """
        self._cells = _as_cells(initial)
        self.rows, self.cols = self._cells.shape
        self.rule: Rule = rule if rule is not None else standard_survival
        self.generation = 0

        logger.debug(f"Created board {self.rows}x{self.cols} with {self.count_alive()} live cells")

    @classmethod
    def from_strings(cls, lines: Iterable[str], alive: str = "X", rule: Optional[Rule] = None) -> 'Board':
        """Create a board from text rows, where `alive` marks a live cell.

        Example:
            Board.from_strings([".X.", ".X.", ".X."])
        """
        return cls([[char == alive for char in line] for line in lines], rule=rule)

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"Cell ({row}, {col}) out of bounds for {self.rows}x{self.cols} board")

    def get(self, row: int, col: int) -> bool:
        """Get liveness of the cell at (row, col).

        Raises:
            IndexError: If coordinates are out of bounds
        """
        self._check_bounds(row, col)
        return bool(self._cells[row, col])

    def __getitem__(self, key: Tuple[int, int]) -> bool:
        """Access cell state using board[row, col] syntax."""
        row, col = key
        return self.get(row, col)

    def count_live_neighbors(self, row: int, col: int) -> int:
        """Count live cells in the Moore neighborhood of (row, col).

        Neighbor positions outside the board are treated as dead, so
        corner cells have 3 candidate neighbors and edge cells have 5.

        Args:
            row: Cell row (0 to rows-1)
            col: Cell column (0 to cols-1)

        Returns:
            Number of live neighbors (0-8)

        Raises:
            IndexError: If the cell itself is out of bounds
        """
        self._check_bounds(row, col)
        count = 0

        for dr, dc in NEIGHBOR_OFFSETS:
            nr, nc = row + dr, col + dc
            if 0 <= nr < self.rows and 0 <= nc < self.cols:
                if self._cells[nr, nc]:
                    count += 1

        return count

    def advance(self) -> None:
        """Advance the board one generation.

        Live cells consult the survival rule; dead cells are born with
        exactly three live neighbors. The whole next generation is built
        in a separate array before replacing the current one.
        """
        next_cells = np.zeros_like(self._cells)

        for row in range(self.rows):
            for col in range(self.cols):
                neighbors = self.count_live_neighbors(row, col)
                if self._cells[row, col]:
                    next_cells[row, col] = bool(self.rule(neighbors))
                else:
                    next_cells[row, col] = neighbors == BIRTH_COUNT

        self._cells = next_cells
        self.generation += 1

        logger.debug(f"Generation {self.generation}: {self.count_alive()} live cells")

    def run(self, steps: int) -> List[int]:
        """Advance multiple generations.

        Args:
            steps: Number of generations to advance

        Returns:
            Live cell count after each generation
        """
        if steps < 0:
            raise ValueError(f"Steps must be non-negative, got {steps}")

        live_counts = []
        for _ in range(steps):
            self.advance()
            live_counts.append(self.count_alive())
        return live_counts

    def count_alive(self) -> int:
        """Count total number of live cells."""
        return int(np.sum(self._cells))

    def is_empty(self) -> bool:
        """Check if all cells are dead."""
        return not np.any(self._cells)

    def to_array(self) -> np.ndarray:
        """Get a copy of the board as a boolean numpy array."""
        return self._cells.copy()

    def to_lists(self) -> List[List[bool]]:
        """Get the board as nested lists of bools."""
        return [[bool(cell) for cell in row] for row in self._cells]

    def __eq__(self, other: object) -> bool:
        """Boards are equal when their cell contents are equal."""
        if not isinstance(other, Board):
            return NotImplemented
        return np.array_equal(self._cells, other._cells)

    __hash__ = None

    def __str__(self) -> str:
        """String representation showing live cells as X."""
        return "\n".join("".join("X" if cell else "." for cell in row) for row in self._cells)

    def __repr__(self) -> str:
        return f"Board({self.rows}x{self.cols}, alive={self.count_alive()}, generation={self.generation})"

