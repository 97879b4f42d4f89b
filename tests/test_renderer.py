"""Tests for painting a board into an RGBA frame buffer."""

import pytest
import numpy as np

from pixelife.core.board import Board
from pixelife.render.canvas import BoardRenderer, LIVE_COLOR, DEAD_COLOR, BYTES_PER_PIXEL


BLACK = bytes([0, 0, 0, 255])
WHITE = bytes([255, 255, 255, 255])


class TestSingleCell:
    """1x1 board with cell_size 2 covers exactly four pixels."""

    def test_live_cell_is_black(self):
        renderer = BoardRenderer(Board([[True]]))
        frame = bytearray(16)
        renderer.draw(frame, 2)
        assert bytes(frame) == BLACK * 4

    def test_dead_cell_is_white(self):
        renderer = BoardRenderer(Board([[False]]))
        frame = bytearray(16)
        renderer.draw(frame, 2)
        assert bytes(frame) == WHITE * 4

    def test_colors(self):
        assert bytes(LIVE_COLOR) == BLACK
        assert bytes(DEAD_COLOR) == WHITE
        assert BYTES_PER_PIXEL == 4


class TestLayout:
    """Pixels are row-major, each owned by cell (y // size, x // size)."""

    def test_pixel_ownership(self):
        board = Board([[True, False, False], [False, False, True]])
        renderer = BoardRenderer(board)
        cell_size = 2

        frame = renderer.new_frame(cell_size)
        renderer.draw(frame, cell_size)
        pixels = np.frombuffer(bytes(frame), dtype=np.uint8).reshape(4, 6, 4)

        for y in range(4):
            for x in range(6):
                expected = LIVE_COLOR if board[y // cell_size, x // cell_size] else DEAD_COLOR
                assert tuple(pixels[y, x]) == expected, f"Pixel ({x}, {y}) has wrong color"

    def test_first_row_of_bytes(self):
        board = Board([[True, False]])
        frame = bytearray(2 * 3 * 1 * 3 * 4)
        BoardRenderer(board).draw(frame, 3)
        # Top pixel row: three black pixels then three white
        assert bytes(frame[:24]) == BLACK * 3 + WHITE * 3

    def test_canvas_size_and_frame_length(self):
        renderer = BoardRenderer(Board(np.zeros((19, 19), dtype=bool)))
        assert renderer.canvas_size(19) == (361, 361)
        assert renderer.frame_length(19) == 361 * 361 * 4
        assert len(renderer.new_frame(19)) == 361 * 361 * 4

    def test_non_square_canvas(self):
        renderer = BoardRenderer(Board(np.zeros((2, 5), dtype=bool)))
        assert renderer.canvas_size(3) == (15, 6)


class TestBufferHandling:
    """Whole-buffer overwrite and buffer precondition checks."""

    def test_full_overwrite(self):
        board = Board([[True, False], [False, True]])
        frame = bytearray([7]) * (4 * 4 * 4)
        BoardRenderer(board).draw(frame, 2)
        assert set(frame) == {0, 255}

    def test_numpy_frame(self):
        board = Board([[False, True]])
        frame = np.zeros((1, 2, 4), dtype=np.uint8)
        BoardRenderer(board).draw(frame, 1)
        assert tuple(frame[0, 0]) == DEAD_COLOR
        assert tuple(frame[0, 1]) == LIVE_COLOR

    def test_memoryview_frame(self):
        backing = bytearray(4)
        BoardRenderer(Board([[True]])).draw(memoryview(backing), 1)
        assert bytes(backing) == BLACK

    def test_repeated_draws_are_identical(self):
        board = Board.from_strings(["...", "XXX", "..."])
        renderer = BoardRenderer(board)

        first = renderer.new_frame(2)
        second = renderer.new_frame(2)
        renderer.draw(first, 2)
        renderer.draw(second, 2)
        renderer.draw(second, 2)
        assert first == second

        board.advance()
        renderer.draw(second, 2)
        assert first != second

    @pytest.mark.parametrize("length", [0, 15, 17, 64])
    def test_mis_sized_buffer_rejected(self, length):
        renderer = BoardRenderer(Board([[True]]))
        with pytest.raises(ValueError, match="expected 16"):
            renderer.draw(bytearray(length), 2)

    @pytest.mark.parametrize("cell_size", [0, -1])
    def test_invalid_cell_size_rejected(self, cell_size):
        renderer = BoardRenderer(Board([[True]]))
        with pytest.raises(ValueError, match="Cell size"):
            renderer.draw(bytearray(16), cell_size)

    def test_read_only_buffer_rejected(self):
        renderer = BoardRenderer(Board([[True]]))
        with pytest.raises(ValueError, match="read-only"):
            renderer.draw(bytes(4), 1)

        frozen = np.zeros(4, dtype=np.uint8)
        frozen.setflags(write=False)
        with pytest.raises(ValueError, match="read-only"):
            renderer.draw(frozen, 1)

    def test_wrong_dtype_rejected(self):
        renderer = BoardRenderer(Board([[True]]))
        with pytest.raises(ValueError, match="uint8"):
            renderer.draw(np.zeros(4, dtype=np.float32), 1)
