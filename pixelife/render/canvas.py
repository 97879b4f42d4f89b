"""Pixel rendering of a board into a linear RGBA byte buffer.

Each cell becomes a solid cell_size x cell_size block: live cells are
opaque black, dead cells opaque white. The buffer is row-major, top to
bottom, left to right, four bytes per pixel, and is owned by the caller.
"""

import numpy as np
from typing import Tuple
import logging

from ..core.board import Board

logger = logging.getLogger(__name__)

LIVE_COLOR: Tuple[int, int, int, int] = (0, 0, 0, 255)
DEAD_COLOR: Tuple[int, int, int, int] = (255, 255, 255, 255)
BYTES_PER_PIXEL = 4


def _writable_bytes(frame, expected_length: int) -> np.ndarray:
    """Return a flat uint8 view over the caller's buffer, checking its size."""
    if isinstance(frame, np.ndarray):
        if frame.dtype != np.uint8:
            raise ValueError(f"Frame array must have dtype uint8, got {frame.dtype}")
        if not frame.flags.c_contiguous:
            raise ValueError("Frame array must be C-contiguous")
        if not frame.flags.writeable:
            raise ValueError("Frame array is read-only")
        view = frame.reshape(-1)
    else:
        if memoryview(frame).readonly:
            raise ValueError("Frame buffer is read-only")
        view = np.frombuffer(frame, dtype=np.uint8)

    if view.size != expected_length:
        raise ValueError(f"Frame buffer has {view.size} bytes, expected {expected_length}")
    return view


class BoardRenderer:
    """Paints a board's current generation into an RGBA frame buffer."""

    def __init__(self, board: Board):
        self.board = board

    def canvas_size(self, cell_size: int) -> Tuple[int, int]:
        """Get canvas (width, height) in pixels for the given cell size."""
        if cell_size < 1:
            raise ValueError(f"Cell size must be at least 1, got {cell_size}")
        return (self.board.cols * cell_size, self.board.rows * cell_size)

    def frame_length(self, cell_size: int) -> int:
        """Number of bytes a frame buffer needs for the given cell size."""
        width, height = self.canvas_size(cell_size)
        return width * height * BYTES_PER_PIXEL

    def new_frame(self, cell_size: int) -> bytearray:
        """Allocate a zeroed frame buffer sized for this board."""
        return bytearray(self.frame_length(cell_size))

    def draw(self, frame, cell_size: int) -> None:
        """Overwrite the whole frame with the board's current state.

        Pixel (x, y) takes the color of cell (y // cell_size, x // cell_size).
        Drawing only reads the board, so it can be repeated any number of
        times between generations.

        Args:
            frame: Writable buffer (bytearray, memoryview or uint8 array) of
                exactly width * height * 4 bytes
            cell_size: Side length of a cell in pixels

        Raises:
            ValueError: If cell_size < 1 or the buffer is mis-sized or read-only
        """
        view = _writable_bytes(frame, self.frame_length(cell_size))

        cells = self.board.to_array()
        colors = np.where(cells[:, :, np.newaxis],
                          np.array(LIVE_COLOR, dtype=np.uint8),
                          np.array(DEAD_COLOR, dtype=np.uint8))
        pixels = np.repeat(np.repeat(colors, cell_size, axis=0), cell_size, axis=1)

        view[:] = pixels.reshape(-1)
