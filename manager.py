# manager.py
from __future__ import annotations
import pygame
from typing import Any, Dict, Iterator, List, Mapping, Optional, Set, Tuple

from elements import (Direction, Renderable, Hoverable, Clickable, Selectable,
                      CursorMovable, CharacterReceivable)

SHIFT = 'Shift'

# US layout, key code -> (unshifted, shifted)
DEFAULT_CHARACTERS: Dict[int, Tuple[str, str]] = {
    **{getattr(pygame, f'K_{c}'): (c, c.upper()) for c in 'abcdefghijklmnopqrstuvwxyz'},
    **{getattr(pygame, f'K_{d}'): (d, s) for d, s in zip('1234567890', '!@#$%^&*()')},
    pygame.K_SPACE:         (' ', ' '),
    pygame.K_MINUS:         ('-', '_'),
    pygame.K_EQUALS:        ('=', '+'),
    pygame.K_LEFTBRACKET:   ('[', '{'),
    pygame.K_RIGHTBRACKET:  (']', '}'),
    pygame.K_BACKSLASH:     ('\\', '|'),
    pygame.K_SEMICOLON:     (';', ':'),
    pygame.K_QUOTE:         ("'", '"'),
    pygame.K_COMMA:         (',', '<'),
    pygame.K_PERIOD:        ('.', '>'),
    pygame.K_SLASH:         ('/', '?'),
    pygame.K_BACKQUOTE:     ('`', '~'),
}

DEFAULT_MODIFIERS: Dict[int, str] = {
    pygame.K_LSHIFT: SHIFT,
    pygame.K_RSHIFT: SHIFT,
    pygame.K_LCTRL: 'Control',
    pygame.K_RCTRL: 'Control',
    pygame.K_LALT: 'Alt',
    pygame.K_RALT: 'Alt',
}


def pointer_position(event: Any) -> Tuple[float, float]:
    """ Canvas local (x, y) from a pygame mouse event, an {x, y} mapping or a pair """
    if hasattr(event, 'pos'):
        return event.pos[0], event.pos[1]
    if isinstance(event, Mapping):
        return event['x'], event['y']
    x, y = event
    return x, y


class WidgetManager:
    """
    Owns the widgets and fans raw input out to them.

    Insertion order is dispatch and paint order. Pointer events run two
    full passes (deselect all then click all, dehover all then hover all)
    so only a widget hit by the current event keeps selection or hover.
    """
    __slots__ = ('_widgets', 'characters', 'modifiers', '_pressed',
                 'left_key', 'right_key', 'backspace_key')

    def __init__(self, characters: Optional[Mapping[int, Tuple[str, str]]] = None,
                 modifiers: Optional[Mapping[int, str]] = None,
                 left_key: int = pygame.K_LEFT, right_key: int = pygame.K_RIGHT,
                 backspace_key: int = pygame.K_BACKSPACE) -> None:
        self._widgets       : List[Any] = []
        self.characters     : Dict[int, Tuple[str, str]] = dict(DEFAULT_CHARACTERS if characters is None else characters)
        self.modifiers      : Dict[int, str] = dict(DEFAULT_MODIFIERS if modifiers is None else modifiers)
        self._pressed       : Dict[str, Set[int]] = {}
        self.left_key       = left_key
        self.right_key      = right_key
        self.backspace_key  = backspace_key

    # Collection

    def add_widget(self, widget: Any) -> None:
        if any(w is widget for w in self._widgets):
            return
        if getattr(widget, 'disposed', False):
            print(f"[manager] refusing disposed {getattr(widget, 'name', repr(widget))}")
            return
        self._widgets.append(widget)
        print(f"[manager] adding {getattr(widget, 'name', repr(widget))} at {len(self._widgets) - 1}")

    def remove_widget(self, widget: Any) -> None:
        """ Drop every occurrence by identity and destroy it """
        kept = [w for w in self._widgets if w is not widget]
        if len(kept) == len(self._widgets):
            return
        self._widgets = kept
        print(f"[manager] removing {getattr(widget, 'name', repr(widget))}")
        destroy = getattr(widget, 'destroy', None)
        if callable(destroy):
            destroy()

    def wipe(self) -> None:
        for widget in list(self._widgets):
            self.remove_widget(widget)

    @property
    def widgets(self) -> Tuple[Any, ...]:
        return tuple(self._widgets)

    def _each(self, capability: type) -> Iterator[Any]:
        # snapshot, a callback may add or remove widgets mid pass
        return (w for w in list(self._widgets) if isinstance(w, capability))

    # Keyboard

    def on_key_down(self, event: Any) -> None:
        code = event.key
        if code in self.characters:
            unshifted, shifted = self.characters[code]
            character = shifted if self.is_pressed(SHIFT) else unshifted
            for widget in self._each(CharacterReceivable):
                widget.receive_character(character)
        elif code in self.modifiers:
            self._pressed.setdefault(self.modifiers[code], set()).add(code)
        elif code == self.left_key:
            for widget in self._each(CursorMovable):
                widget.receive_cursor_move(Direction.LEFT)
        elif code == self.right_key:
            for widget in self._each(CursorMovable):
                widget.receive_cursor_move(Direction.RIGHT)
        elif code == self.backspace_key:
            for widget in self._each(CharacterReceivable):
                widget.delete_character()

    def on_key_up(self, event: Any) -> None:
        code = event.key
        if code in self.modifiers:
            self._pressed.get(self.modifiers[code], set()).discard(code)

    def is_pressed(self, modifier: str) -> bool:
        return bool(self._pressed.get(modifier))

    @property
    def modifier_states(self) -> Dict[str, bool]:
        return {name: bool(codes) for name, codes in self._pressed.items()}

    def reset_modifiers(self) -> None:
        """ Release everything, keys let go while unfocused never send key up """
        self._pressed.clear()

    # Pointer

    def on_mouse_down(self, event: Any) -> None:
        x, y = pointer_position(event)
        for widget in self._each(Selectable):
            widget.deselect()
        for widget in self._each(Clickable):
            widget.receive_click(x, y)

    def on_mouse_up(self, event: Any) -> None:
        pass

    def on_mouse_move(self, event: Any) -> None:
        x, y = pointer_position(event)
        for widget in self._each(Hoverable):
            widget.dehover()
        for widget in self._each(Hoverable):
            widget.receive_mouse_over(x, y)

    # Drawing

    def render(self) -> None:
        for widget in self._each(Renderable):
            widget.render()

    def __len__(self) -> int:
        return len(self._widgets)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._widgets))

    def __contains__(self, widget: object) -> bool:
        return any(w is widget for w in self._widgets)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__},widgets={len(self._widgets)},modifiers={self.modifier_states}>"
