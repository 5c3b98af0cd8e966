# options.py
from __future__ import annotations
from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional, Tuple, Type, TypeVar, Union

from elements import Alignment

Color = Tuple[int, int, int]

T = TypeVar('T', bound='Options')


@dataclass(frozen=True)
class Options:
    """ Immutable widget configuration, defaults are resolved once at construction """

    @classmethod
    def resolve(cls: Type[T], options: Union[None, T, Mapping[str, Any]] = None) -> T:
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        known = {f.name for f in fields(cls)}
        unknown = set(options) - known
        if unknown:
            raise TypeError(f"{cls.__name__} got unknown options: {', '.join(sorted(unknown))}")
        return cls(**options)


@dataclass(frozen=True)
class ButtonOptions(Options):
    width: float = 160
    height: float = 30
    background_color: Color = (200, 200, 200)
    hover_background_color: Color = (255, 200, 200)
    font_size: int = 20
    font: Optional[str] = 'Arial'
    font_color: Color = (0, 0, 0)


@dataclass(frozen=True)
class CheckBoxOptions(Options):
    width: float = 20
    height: float = 20
    outline_color: Color = (0, 0, 0)
    hover_outline_color: Color = (255, 0, 0)
    check_color: Color = (0, 0, 0)
    check_line_width: int = 2
    outline_line_width: int = 1
    buffer_percent: float = 0.2     # inset of the check mark, fraction of the box


@dataclass(frozen=True)
class TextOptions(Options):
    font_size: int = 20
    font_color: Color = (0, 0, 0)
    hover_font_color: Color = (100, 0, 0)
    font: Optional[str] = 'Arial'
    bold: bool = False
    text_align: Alignment = Alignment.LEFT

    def __post_init__(self) -> None:
        align = self.text_align
        if isinstance(align, str):
            try:
                align = Alignment[align.upper()]
            except KeyError:
                raise ValueError(f"unknown text_align: {self.text_align!r}") from None
        elif not isinstance(align, Alignment):
            align = Alignment(align)
        object.__setattr__(self, 'text_align', align)


@dataclass(frozen=True)
class TextFieldOptions(Options):
    width: float = 160
    height: float = 30
    font_size: int = 20
    font: Optional[str] = 'Arial'
    font_color: Color = (0, 0, 130)
    outline_color: Color = (0, 0, 0)
    hover_outline_color: Color = (255, 0, 0)
    outline_line_width: int = 1
    cursor_blink_rate: float = 0.5  # seconds

    @property
    def padding(self) -> float:
        """ Gap between the outline and the text on each side """
        return (self.height - self.font_size) / 2
