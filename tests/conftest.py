from __future__ import annotations

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

from dataclasses import dataclass, field
from typing import Any, List, Tuple

import pytest

CHAR_WIDTH = 10


@dataclass
class FakeSurface:
    """Records draw calls and measures every character as CHAR_WIDTH px."""

    calls: List[Tuple[str, Tuple[Any, ...]]] = field(default_factory=list)

    def draw_rect(self, *args: Any) -> None:
        self.calls.append(("rect", args))

    def draw_line(self, *args: Any) -> None:
        self.calls.append(("line", args))

    def draw_text(self, *args: Any) -> None:
        self.calls.append(("text", args))

    def measure_text_width(self, text: str, *args: Any) -> float:
        return len(text) * CHAR_WIDTH

    def clear_rect(self, *args: Any) -> None:
        self.calls.append(("clear", args))

    def named(self, kind: str) -> List[Tuple[Any, ...]]:
        return [args for name, args in self.calls if name == kind]


@dataclass(frozen=True)
class Key:
    key: int


@dataclass(frozen=True)
class Pointer:
    pos: Tuple[float, float]


class Recorder:
    def __init__(self) -> None:
        self.calls: List[Tuple[Any, ...]] = []

    def __call__(self, *args: Any) -> None:
        self.calls.append(args)


@pytest.fixture
def surface() -> FakeSurface:
    return FakeSurface()


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()
