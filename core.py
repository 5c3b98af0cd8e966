from __future__ import annotations
import pygame
import traceback
from typing import Any, Optional, Tuple

from manager import WidgetManager
from schedule import Scheduler
from surface import PygameSurface

Color = Tuple[int, int, int]


class UIRoot:
    """ Window and event loop, translates pygame events for the widget manager """
    __slots__ = ('name', 'clock', 'display', 'surface', 'fps', 'running', 'manager',
                 'scheduler', 'background', 'current_fps', 'frame_count')

    def __init__(self, width: int = 800, height: int = 600, fps: int = 60, title: str = "root",
                 manager: Optional[WidgetManager] = None, background: Color = (255, 255, 255)):
        pygame.init()
        pygame.display.set_caption(title)
        self.name = 'UIRoot'
        self.clock = pygame.time.Clock()
        self.display: pygame.Surface = pygame.display.set_mode((width, height), 0)
        self.background = background
        self.surface = PygameSurface(self.display, background)
        self.fps = fps
        self.running = False
        self.manager = manager or WidgetManager()
        self.scheduler = Scheduler()
        self.current_fps = 0
        self.frame_count = 0
        print(f"[root] display {width}x{height} at {fps}fps")

    def add(self, widget: Any) -> Any:
        self.manager.add_widget(widget)
        return widget

    def remove(self, widget: Any) -> None:
        self.manager.remove_widget(widget)

    def run(self) -> None:
        self.running = True
        try:
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.destroy()
                        continue
                    self.handle_event(event)

                dt = self.clock.tick(self.fps) / 1000.0

                # stats
                self.current_fps = self.clock.get_fps()
                self.frame_count += 1

                self.scheduler.pump(dt)

                width, height = self.display.get_size()
                self.surface.clear_rect(0, 0, width, height)
                self.manager.render()

                pygame.display.flip()
        except KeyboardInterrupt:
            print("[root] Interrupted...")
            self.destroy()
        except Exception as e:
            print(f"Fatal exception:\n{e}")
            print(f"Stack:\n{traceback.format_exc()}")
            self.destroy()
        finally:
            print('[root] quit')
            pygame.quit()

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.destroy()
                return True
            self.manager.on_key_down(event)
        elif event.type == pygame.KEYUP:
            self.manager.on_key_up(event)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.manager.on_mouse_down(event)
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.manager.on_mouse_up(event)
        elif event.type == pygame.MOUSEMOTION:
            self.manager.on_mouse_move(event)
        elif event.type == pygame.WINDOWFOCUSLOST:
            self.manager.reset_modifiers()
        else:
            return False
        return True

    def destroy(self) -> None:
        if not self.running:
            return
        self.manager.wipe()
        self.scheduler.clear()
        self.running = False

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__},name={self.name},fps={self.fps},widgets={len(self.manager)}>"
