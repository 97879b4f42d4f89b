"""Seed patterns for starting a Game of Life board.

Provides the classic test patterns (block, blinker, glider), the 19x19
demo seed shown by the desktop program, and helpers for parsing text
patterns and placing them on an empty board.
"""

import numpy as np
from typing import Callable, Dict, Iterable


DEMO_SEED_ROWS = (
    "...................",
    "..X................",
    "..X....XX..........",
    "..X.....X..........",
    ".......X...........",
    ".......XX......XX..",
    ".......X.......XX..",
    ".....X.X.....X..X..",
    ".....XXX......XX...",
    ".............X.X...",
    "...........X.XX....",
    "...........XXXX....",
    "..............X....",
    "...........X..X....",
    "...........XXXX....",
    "...................",
    "...................",
    "...................",
    "...................",
)


def parse_pattern(lines: Iterable[str], alive: str = "X") -> np.ndarray:
    """Parse text rows into a boolean pattern array.

    Args:
        lines: Equal-length strings, one per row
        alive: Character marking a live cell; any other character is dead

    Returns:
        2D boolean numpy array

    Raises:
        ValueError: If there are no rows, rows are empty, or rows differ in length
    """
    rows = list(lines)
    if not rows or not rows[0]:
        raise ValueError("Pattern must have at least one row and one column")

    widths = {len(row) for row in rows}
    if len(widths) != 1:
        raise ValueError(f"Pattern rows must all have the same length, got lengths {sorted(widths)}")

    return np.array([[char == alive for char in row] for row in rows], dtype=bool)


def place(pattern: np.ndarray, rows: int, cols: int, row: int = 0, col: int = 0) -> np.ndarray:
    """Stamp a pattern onto an empty rows x cols array.

    Args:
        pattern: 2D boolean array
        rows: Height of the resulting array
        cols: Width of the resulting array
        row: Top row for the pattern
        col: Left column for the pattern

    Returns:
        New boolean array containing the pattern

    Raises:
        ValueError: If the pattern does not fit entirely inside the array
    """
    pattern = np.asarray(pattern, dtype=bool)
    height, width = pattern.shape
    if row < 0 or col < 0 or row + height > rows or col + width > cols:
        raise ValueError(f"Pattern {height}x{width} at ({row}, {col}) does not fit in {rows}x{cols} board")

    cells = np.zeros((rows, cols), dtype=bool)
    cells[row:row + height, col:col + width] = pattern
    return cells


def block() -> np.ndarray:
    """Create stable 2x2 block still life."""
    return np.array([
        [True, True],
        [True, True]
    ], dtype=bool)


def blinker() -> np.ndarray:
    """Create horizontal blinker pattern (3 cells)."""
    return np.array([[True, True, True]], dtype=bool)


def glider() -> np.ndarray:
    """Create classic glider heading toward the bottom-right."""
    return np.array([
        [False, True, False],
        [False, False, True],
        [True, True, True]
    ], dtype=bool)


def demo_seed() -> np.ndarray:
    """The 19x19 starting board of the desktop demo."""
    return parse_pattern(DEMO_SEED_ROWS)


def _padded(factory: Callable[[], np.ndarray], pad: int = 3) -> Callable[[], np.ndarray]:
    def build() -> np.ndarray:
        pattern = factory()
        height, width = pattern.shape
        return place(pattern, height + 2 * pad, width + 2 * pad, pad, pad)
    build.__doc__ = factory.__doc__
    return build


# Named seeds for the command line; small patterns get a dead margin
SEEDS: Dict[str, Callable[[], np.ndarray]] = {
    "demo": demo_seed,
    "block": _padded(block),
    "blinker": _padded(blinker),
    "glider": _padded(glider, pad=8),
}


def get_seed(name: str) -> np.ndarray:
    """Look up a named seed.

    Raises:
        KeyError: If no seed has that name
    """
    try:
        factory = SEEDS[name]
    except KeyError:
        raise KeyError(f"Unknown seed '{name}', expected one of: {', '.join(sorted(SEEDS))}") from None
    return factory()
