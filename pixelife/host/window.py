"""
Pygame host loop for the Game of Life demo.

Owns the window, the frame buffer and the timing. Every frame it polls
events, advances the board when a step is due, paints the board into the
RGBA frame and presents it. Stepping runs on its own fixed interval so
the board can be redrawn many times per generation.
"""

import logging
from typing import Optional

import pygame

from ..config import SimulationConfig
from ..core.board import Board
from ..render.canvas import BoardRenderer
from .clock import FixedStepClock

logger = logging.getLogger(__name__)


class PygameHost:
    """Runs a board in a pygame window until it is closed or Escape is pressed."""

    def __init__(self, board: Board, config: Optional[SimulationConfig] = None):
        self.board = board
        self.config = config or SimulationConfig()
        self.renderer = BoardRenderer(board)
        self.size = self.renderer.canvas_size(self.config.cell_size)
        self.frame = self.renderer.new_frame(self.config.cell_size)

        self.screen = None
        self.step_clock: Optional[FixedStepClock] = None
        self.running = False
        self.generations = 0

    def _limit_reached(self) -> bool:
        limit = self.config.max_generations
        return limit is not None and self.generations >= limit

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False

    def _update(self, now_ms: int) -> None:
        if self.step_clock.due(now_ms):
            self.board.advance()
            self.generations += 1
            if self._limit_reached():
                self.running = False

    def _render(self) -> None:
        self.renderer.draw(self.frame, self.config.cell_size)
        surface = pygame.image.frombuffer(self.frame, self.size, "RGBA")
        self.screen.blit(surface, (0, 0))
        pygame.display.flip()

    def run(self) -> int:
        """Run the event loop.

        Returns:
            Number of generations advanced before the loop ended
        """
        pygame.init()
        try:
            self.screen = pygame.display.set_mode(self.size)
            pygame.display.set_caption(self.config.title)
            clock = pygame.time.Clock()
            self.step_clock = FixedStepClock(self.config.step_interval_ms, pygame.time.get_ticks())
            self.running = not self._limit_reached()

            width, height = self.size
            logger.info(f"Window {width}x{height} opened for {self.board.rows}x{self.board.cols} board, "
                        f"stepping every {self.config.step_interval_ms} ms")

            while self.running:
                self._handle_events()
                if not self.running:
                    break

                self._update(pygame.time.get_ticks())

                try:
                    self._render()
                except pygame.error as e:
                    logger.error(f"Render failed, closing window: {e}")
                    break

                clock.tick(self.config.fps)
        finally:
            pygame.quit()

        logger.info(f"Host loop finished after {self.generations} generations")
        return self.generations
