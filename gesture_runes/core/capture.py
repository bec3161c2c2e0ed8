"""
Stroke capture from the mouse pointer in a pygame window.
"""

import logging
from typing import Dict, List, Optional, Tuple

import pygame

logger = logging.getLogger(__name__)


class PygameStrokeCapture:
    """Shows a drawing surface and returns the stroke drawn with the left button.

    Escape, a right click or closing the window cancels.
    """

    BACKGROUND = (20, 20, 20)
    STROKE = (255, 165, 0)
    HINT = (128, 128, 128)

    def __init__(self, size: Tuple[int, int] = (1024, 768), fullscreen: bool = False):
        self.size = size
        self.fullscreen = fullscreen
        self.path: List[Dict[str, float]] = []
        self.is_drawing = False

    def capture(self) -> Optional[List[Dict[str, float]]]:
        """Block until a stroke is finished; None if it was cancelled."""
        pygame.init()
        try:
            if self.fullscreen:
                screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
            else:
                screen = pygame.display.set_mode(self.size)
            pygame.display.set_caption("Gesture Runes - draw a stroke, Esc to cancel")
            font = pygame.font.Font(None, 32)
            clock = pygame.time.Clock()

            self.path = []
            self.is_drawing = False
            while True:
                for event in pygame.event.get():
                    result = self._handle_event(event)
                    if result is not None:
                        done, path = result
                        if done:
                            return path
                self._draw(screen, font)
                clock.tick(60)
        finally:
            pygame.quit()

    def _handle_event(self, event) -> Optional[Tuple[bool, Optional[List[Dict[str, float]]]]]:
        """Return (True, path) to finish, (True, None) to cancel, None to continue."""
        if event.type == pygame.QUIT:
            return True, None
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return True, None

        if event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == 1:  # Left click
                self.is_drawing = True
                self.path = []
                self._add_point(event.pos)
            elif event.button == 3:
                return True, None
        elif event.type == pygame.MOUSEMOTION:
            if self.is_drawing:
                self._add_point(event.pos)
        elif event.type == pygame.MOUSEBUTTONUP:
            if event.button == 1 and self.is_drawing:
                self.is_drawing = False
                self._add_point(event.pos)
                logger.debug("Captured stroke of %d points", len(self.path))
                return True, self.path
        return None

    def _add_point(self, pos: Tuple[int, int]):
        x, y = pos
        point = {
            'x': float(x),
            'y': float(y),
            't': float(pygame.time.get_ticks()),
        }
        # Button release repeats the last motion position
        if self.path and self.path[-1]['x'] == point['x'] and self.path[-1]['y'] == point['y']:
            return
        self.path.append(point)

    def _draw(self, screen, font):
        screen.fill(self.BACKGROUND)
        hint = font.render("Draw with the left button. Esc or right click cancels.", True, self.HINT)
        screen.blit(hint, (10, 10))

        pts = [(p['x'], p['y']) for p in self.path]
        if len(pts) > 1:
            pygame.draw.lines(screen, self.STROKE, False, pts, 4)
        pygame.display.flip()
