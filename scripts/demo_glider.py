#!/usr/bin/env python3
"""
Glider Demonstration Script

Runs a single glider on a bounded board without a window and reports its
diagonal drift and mass conservation. Useful as a quick end-to-end check
that the board, rule and renderer agree.
"""

import sys
import json
import logging

import numpy as np

from pixelife.core.board import Board
from pixelife.patterns.seeds import glider, place
from pixelife.render.canvas import BoardRenderer, LIVE_COLOR

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def center_of_mass(board):
    """(row, col) centroid of live cells, or (0.0, 0.0) for an empty board."""
    live_rows, live_cols = np.where(board.to_array())
    if len(live_rows) == 0:
        return (0.0, 0.0)
    return (float(np.mean(live_rows)), float(np.mean(live_cols)))


def run_glider_demo(board_size=30, steps=40, start_row=2, start_col=2, cell_size=4):
    """Run the glider demonstration and return metrics."""
    logger.info("=== GLIDER DEMONSTRATION ===")
    logger.info(f"Board size: {board_size}x{board_size}, steps: {steps}")

    board = Board(place(glider(), board_size, board_size, start_row, start_col))
    renderer = BoardRenderer(board)
    frame = renderer.new_frame(cell_size)

    initial_com = center_of_mass(board)
    live_counts = [board.count_alive()]

    for step in range(steps):
        board.advance()
        live_counts.append(board.count_alive())
        if step % 10 == 0 or step == steps - 1:
            com = center_of_mass(board)
            logger.info(f"Generation {board.generation}: COM=({com[0]:.1f}, {com[1]:.1f}), live={live_counts[-1]}")

    final_com = center_of_mass(board)
    delta_row = final_com[0] - initial_com[0]
    delta_col = final_com[1] - initial_com[1]

    renderer.draw(frame, cell_size)
    pixels = np.frombuffer(frame, dtype=np.uint8).reshape(-1, 4)
    live_pixels = int(np.all(pixels == np.array(LIVE_COLOR, dtype=np.uint8), axis=1).sum())

    results = {
        "board_size": board_size,
        "steps": steps,
        "initial_com": initial_com,
        "final_com": final_com,
        "displacement_row": delta_row,
        "displacement_col": delta_col,
        "live_count_history": live_counts,
        "mass_conserved": all(count == 5 for count in live_counts),
        "live_pixels": live_pixels,
        "pixels_match_cells": live_pixels == live_counts[-1] * cell_size * cell_size,
    }

    logger.info(f"Displacement: rows {delta_row:+.1f}, cols {delta_col:+.1f}")
    logger.info(f"Mass conserved: {'YES' if results['mass_conserved'] else 'NO'}")
    logger.info(f"Rendered live pixels: {live_pixels}")
    return results


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description="Glider Demonstration")
    parser.add_argument("--board-size", type=int, default=30, help="Board size (square)")
    parser.add_argument("--steps", type=int, default=40, help="Generations to run")
    parser.add_argument("--output", default=None, help="Write results as JSON to this file")

    args = parser.parse_args()

    try:
        results = run_glider_demo(board_size=args.board_size, steps=args.steps)

        if args.output:
            with open(args.output, 'w') as f:
                json.dump(results, f, indent=2)
            logger.info(f"Results saved to: {args.output}")

        if not (results["mass_conserved"] and results["pixels_match_cells"]):
            logger.error("Glider did not behave as expected")
            sys.exit(1)

    except ValueError as e:
        logger.error(f"Demonstration failed: {e}")
        sys.exit(1)
