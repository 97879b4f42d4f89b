"""
pixelife: Conway's Game of Life with an RGBA pixel renderer.

The board and its survival rule form the simulation core; the renderer
paints a board into a caller-owned frame buffer. The pygame host loop
lives in `pixelife.host.window` and is imported only when a window is
needed.
"""

from .core.board import Board
from .core.rules import SurvivalRule, standard_survival, SURVIVAL_COUNTS, BIRTH_COUNT
from .render.canvas import BoardRenderer, LIVE_COLOR, DEAD_COLOR

__version__ = "0.1.0"

# Public API
__all__ = [
    'Board',
    'SurvivalRule',
    'standard_survival',
    'SURVIVAL_COUNTS',
    'BIRTH_COUNT',
    'BoardRenderer',
    'LIVE_COLOR',
    'DEAD_COLOR',
]
