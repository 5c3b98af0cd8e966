# elements.py

from __future__ import annotations
from enum import Enum, IntEnum
from typing import Any, Callable, Tuple, TYPE_CHECKING

from bbox import BoundingBox

if TYPE_CHECKING:
    from options import Options
    from surface import DrawingSurface


class Alignment(IntEnum):
    CENTER = 0
    LEFT = 1
    RIGHT = 2
    TOP = 3
    BOTTOM = 4


class Direction(str, Enum):
    LEFT = 'left'
    RIGHT = 'right'


# ############################################
#
# Capabilities
#
# The manager dispatches on these with isinstance(), a widget only
# receives the events for the capabilities it inherits.
#

class Renderable:
    __slots__ = ()

    def render(self) -> None:
        raise NotImplementedError


class Hoverable:
    __slots__ = ()

    def dehover(self) -> None:
        raise NotImplementedError

    def receive_mouse_over(self, x: float, y: float) -> None:
        raise NotImplementedError


class Clickable:
    __slots__ = ()

    def receive_click(self, x: float, y: float) -> None:
        raise NotImplementedError


class Selectable:
    __slots__ = ()

    def deselect(self) -> None:
        raise NotImplementedError


class CursorMovable:
    __slots__ = ()

    def receive_cursor_move(self, direction: Direction) -> None:
        raise NotImplementedError


class CharacterReceivable:
    __slots__ = ()

    def receive_character(self, character: str) -> None:
        raise NotImplementedError

    def delete_character(self) -> None:
        raise NotImplementedError


# ############################################
#
# Widget Chassis
#

class UIWidget(Renderable, Hoverable):
    __slots__ = ('name', 'surface', 'callback', 'options', 'bbox',
                 '_x', '_y', 'hover', 'disposed', '__weakref__')

    def __init__(self, surface: 'DrawingSurface', x: float, y: float,
                 callback: Callable[..., Any], options: 'Options') -> None:
        self.name           = self.__class__.__name__
        self.surface        = surface
        self.callback       = callback
        self.options        = options
        # geometry
        self._x             = x
        self._y             = y
        self.bbox           = BoundingBox(*self.bounds())
        # states
        self.hover          = False
        self.disposed       = False

    # Core routines

    def bounds(self) -> Tuple[float, float, float, float]:
        """ Box corners (min_x, min_y, max_x, max_y) for the current geometry """
        return (self._x, self._y, self._x + self.options.width, self._y + self.options.height)

    def render(self) -> None:
        if self.disposed:
            return
        self.bbox.set(*self.bounds())
        self.draw()

    def draw(self) -> None:
        raise NotImplementedError

    def destroy(self) -> None:
        self.disposed = True

    # Hover

    def dehover(self) -> None:
        self.hover = False

    def receive_mouse_over(self, x: float, y: float) -> None:
        # never clears, the manager dehovers everything first
        if self.bbox.point_intersects(x, y):
            self.hover = True

    # Properties

    @property
    def x(self) -> float:
        return self._x

    @x.setter
    def x(self, value: float) -> None:
        self._x = value

    @property
    def y(self) -> float:
        return self._y

    @y.setter
    def y(self, value: float) -> None:
        self._y = value

    @property
    def position(self) -> Tuple[float, float]:
        return (self._x, self._y)

    @position.setter
    def position(self, value: Tuple[float, float]) -> None:
        self._x, self._y = value[0], value[1]

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__},pos=({self._x},{self._y}),hover={self.hover}>"
