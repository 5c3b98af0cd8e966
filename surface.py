# surface.py
from __future__ import annotations
import pygame
from typing import Dict, Optional, Protocol, Tuple

from elements import Alignment

Color = Tuple[int, int, int]


class DrawingSurface(Protocol):
    """Drawing capabilities the widgets render through."""

    def draw_rect(self, x: float, y: float, width: float, height: float,
                  filled: bool, line_width: int, color: Color) -> None:
        """Fill or stroke a rectangle."""

    def draw_line(self, x1: float, y1: float, x2: float, y2: float,
                  line_width: int, color: Color) -> None:
        """Stroke a line segment."""

    def draw_text(self, x: float, y: float, color: Color, text: str, size: int,
                  font: Optional[str], bold: bool, align: Alignment, baseline: Alignment) -> None:
        """Draw text anchored at (x, y) per align/baseline."""

    def measure_text_width(self, text: str, size: int, font: Optional[str], bold: bool,
                           align: Alignment, baseline: Alignment) -> float:
        """Width in pixels the text would occupy."""

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        """Reset a rectangle to the background."""


class PygameSurface:
    __slots__ = ('target', 'background', '_fonts')

    def __init__(self, target: pygame.Surface, background: Color = (255, 255, 255)) -> None:
        self.target = target
        self.background = background
        self._fonts: Dict[Tuple[Optional[str], int, bool], pygame.font.Font] = {}

    def font(self, name: Optional[str], size: int, bold: bool) -> pygame.font.Font:
        key = (name, size, bold)
        if key not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            if name is None:
                _font = pygame.font.Font(None, size)
                _font.set_bold(bold)
            else:
                _font = pygame.font.SysFont(name, size, bold=bold)
            self._fonts[key] = _font
        return self._fonts[key]

    def draw_rect(self, x: float, y: float, width: float, height: float,
                  filled: bool, line_width: int, color: Color) -> None:
        rect = pygame.Rect(round(x), round(y), round(width), round(height))
        if filled:
            pygame.draw.rect(self.target, color, rect)
        else:
            pygame.draw.rect(self.target, color, rect, max(1, line_width))

    def draw_line(self, x1: float, y1: float, x2: float, y2: float,
                  line_width: int, color: Color) -> None:
        pygame.draw.line(self.target, color, (x1, y1), (x2, y2), max(1, line_width))

    def draw_text(self, x: float, y: float, color: Color, text: str, size: int,
                  font: Optional[str], bold: bool, align: Alignment, baseline: Alignment) -> None:
        if not text:
            return
        text_surf = self.font(font, size, bold).render(text, True, color)
        rect = text_surf.get_rect()
        if align == Alignment.CENTER:
            rect.centerx = round(x)
        elif align == Alignment.RIGHT:
            rect.right = round(x)
        else:
            rect.left = round(x)
        if baseline == Alignment.CENTER:
            rect.centery = round(y)
        elif baseline == Alignment.BOTTOM:
            rect.bottom = round(y)
        else:
            rect.top = round(y)
        self.target.blit(text_surf, rect)

    def measure_text_width(self, text: str, size: int, font: Optional[str], bold: bool,
                           align: Alignment, baseline: Alignment) -> float:
        return self.font(font, size, bold).size(text)[0]

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        self.target.fill(self.background, pygame.Rect(round(x), round(y), round(width), round(height)))
