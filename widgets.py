from __future__ import annotations
from typing import Any, Callable, Mapping, Optional, Tuple, Union, TYPE_CHECKING

from elements import (UIWidget, Alignment, Direction, Clickable, Selectable,
                      CursorMovable, CharacterReceivable)
from options import ButtonOptions, CheckBoxOptions, TextOptions, TextFieldOptions

if TYPE_CHECKING:
    from schedule import Scheduler
    from surface import DrawingSurface

CARET = '|'
CARET_HIDDEN = ' '

# UIButton

class Button(UIWidget, Clickable):
    __slots__ = ('text',)

    def __init__(self, surface: 'DrawingSurface', x: float, y: float, text: str,
                 callback: Callable[[], Any],
                 options: Union[None, ButtonOptions, Mapping[str, Any]] = None) -> None:
        super().__init__(surface, x, y, callback, ButtonOptions.resolve(options))
        self.text = text

    def receive_click(self, x: float, y: float) -> None:
        if self.bbox.point_intersects(x, y):
            self.callback()

    def draw(self) -> None:
        opts = self.options
        background = opts.hover_background_color if self.hover else opts.background_color
        self.surface.draw_rect(self.x, self.y, opts.width, opts.height, True, 1, background)
        self.surface.draw_text(self.x + opts.width / 2, self.y + opts.height / 2,
                               opts.font_color, self.text, opts.font_size, opts.font,
                               False, Alignment.CENTER, Alignment.CENTER)

# UICheckBox

class CheckBox(UIWidget, Clickable):
    __slots__ = ('checked',)

    def __init__(self, surface: 'DrawingSurface', x: float, y: float,
                 callback: Callable[[bool], Any],
                 options: Union[None, CheckBoxOptions, Mapping[str, Any]] = None) -> None:
        super().__init__(surface, x, y, callback, CheckBoxOptions.resolve(options))
        self.checked = False

    def receive_click(self, x: float, y: float) -> None:
        if self.bbox.point_intersects(x, y):
            self.checked = not self.checked
            self.callback(self.checked)

    def draw(self) -> None:
        opts = self.options
        outline = opts.hover_outline_color if self.hover else opts.outline_color
        self.surface.draw_rect(self.x, self.y, opts.width, opts.height,
                               False, opts.outline_line_width, outline)
        if self.checked:
            near, far = opts.buffer_percent, 1.0 - opts.buffer_percent
            left, right = self.x + opts.width * near, self.x + opts.width * far
            top, bottom = self.y + opts.height * near, self.y + opts.height * far
            self.surface.draw_line(left, top, right, bottom, opts.check_line_width, opts.check_color)
            self.surface.draw_line(left, bottom, right, top, opts.check_line_width, opts.check_color)

# UIText

class Text(UIWidget, Clickable):
    """Clickable label, its hit box follows the measured width of the text."""
    __slots__ = ('text',)

    def __init__(self, surface: 'DrawingSurface', x: float, y: float, text: str,
                 callback: Callable[[], Any],
                 options: Union[None, TextOptions, Mapping[str, Any]] = None) -> None:
        self.text = text
        super().__init__(surface, x, y, callback, TextOptions.resolve(options))

    def set_text(self, text: str) -> None:
        self.text = text

    def bounds(self, text_width: Optional[float] = None) -> Tuple[float, float, float, float]:
        size = self.options.font_size
        if text_width is None:
            # nothing measured before the first render
            return (self.x, self.y, self.x + size, self.y + size)
        if self.options.text_align == Alignment.CENTER:
            return (self.x - text_width / 2, self.y, self.x + text_width / 2, self.y + size)
        return (self.x, self.y, self.x + text_width, self.y + size)

    def receive_click(self, x: float, y: float) -> None:
        if self.bbox.point_intersects(x, y):
            self.callback()

    def render(self) -> None:
        if self.disposed:
            return
        opts = self.options
        text_width = self.surface.measure_text_width(self.text, opts.font_size, opts.font,
                                                     opts.bold, opts.text_align, Alignment.TOP)
        self.bbox.set(*self.bounds(text_width))
        self.draw()

    def draw(self) -> None:
        opts = self.options
        color = opts.hover_font_color if self.hover else opts.font_color
        self.surface.draw_text(self.x, self.y, color, self.text, opts.font_size, opts.font,
                               opts.bold, opts.text_align, Alignment.TOP)

# UITextField

class TextField(UIWidget, Clickable, Selectable, CursorMovable, CharacterReceivable):
    """
    Single line text input.

    Clicking inside selects the field, while selected it takes characters,
    backspace and left/right cursor moves. The caret blinks on the
    scheduler given at construction.
    """
    __slots__ = ('_text', '_cursor', 'selected', 'cursor_visible', 'scheduler', 'blink_task')

    def __init__(self, surface: 'DrawingSurface', x: float, y: float,
                 callback: Callable[[str], Any],
                 options: Union[None, TextFieldOptions, Mapping[str, Any]] = None,
                 scheduler: Optional['Scheduler'] = None) -> None:
        super().__init__(surface, x, y, callback, TextFieldOptions.resolve(options))
        self._text = ''
        self._cursor = 0
        self.selected = False
        self.cursor_visible = True
        self.scheduler = scheduler
        self.blink_task: Optional[int] = None
        if scheduler is not None:
            self.blink_task = scheduler.every(self.options.cursor_blink_rate, self.blink,
                                              name=f'{self.name}.blink')

    # Editing state

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self._text = value
        self.cursor_location = self._cursor

    @property
    def cursor_location(self) -> int:
        return self._cursor

    @cursor_location.setter
    def cursor_location(self, value: int) -> None:
        self._cursor = max(0, min(int(value), len(self._text)))

    def deselect(self) -> None:
        self.selected = False

    def receive_click(self, x: float, y: float) -> None:
        if self.bbox.point_intersects(x, y):
            self.selected = True

    def receive_cursor_move(self, direction: Direction) -> None:
        if not self.selected:
            return
        if direction == Direction.LEFT:
            self.cursor_location = self._cursor - 1
        elif direction == Direction.RIGHT:
            self.cursor_location = self._cursor + 1

    def delete_character(self) -> None:
        if not self.selected or self._cursor <= 0:
            return
        self._text = self._text[:self._cursor - 1] + self._text[self._cursor:]
        self.cursor_location = self._cursor - 1
        self.callback(self._text)

    def receive_character(self, character: str) -> None:
        if not self.selected:
            return
        # at 0 the slice is empty, so this is a plain prepend
        self._text = self._text[:self._cursor] + character + self._text[self._cursor:]
        self.cursor_location = self._cursor + 1
        self.callback(self._text)

    def blink(self) -> None:
        if self.selected:
            self.cursor_visible = not self.cursor_visible

    def destroy(self) -> None:
        if self.disposed:
            return
        if self.scheduler is not None and self.blink_task is not None:
            self.scheduler.cancel(self.blink_task)
            self.blink_task = None
        super().destroy()

    # Drawing

    def visible_text(self) -> str:
        """ Display copy of the text with the caret, trimmed to the interior width """
        opts = self.options
        text = self._text
        cursor = self._cursor
        if self.selected:
            caret = CARET if self.cursor_visible else CARET_HIDDEN
            text = text[:cursor] + caret + text[cursor:]
        interior = opts.width - opts.padding * 2
        # drop from whichever end is farther from the cursor
        while text and self.surface.measure_text_width(text, opts.font_size, opts.font, False,
                                                       Alignment.LEFT, Alignment.CENTER) > interior:
            if len(text) - cursor < cursor:
                text = text[1:]
                cursor -= 1
            else:
                text = text[:-1]
        return text

    def draw(self) -> None:
        opts = self.options
        outline = opts.hover_outline_color if self.hover else opts.outline_color
        text = self.visible_text()
        self.surface.draw_rect(self.x, self.y, opts.width, opts.height,
                               False, opts.outline_line_width, outline)
        self.surface.draw_text(self.x + opts.padding, self.y + opts.height / 2, opts.font_color,
                               text, opts.font_size, opts.font, False,
                               Alignment.LEFT, Alignment.CENTER)
