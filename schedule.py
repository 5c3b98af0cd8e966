# schedule.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional

import weakref


@dataclass
class Task:
    handle: int
    name: str
    period: float
    callback: 'weakref.WeakMethod'
    elapsed: float = field(default=0.0)


class Scheduler:
    """ Cooperative interval timers, pumped from the event loop with elapsed seconds """
    __slots__ = (
        "_tasks",
        "_next_handle",
        "_fired",
    )

    def __init__(self) -> None:
        self._next_handle   : int = 1
        self._fired         : int = 0
        self._tasks         : Dict[int, Task] = {}

    def every(self, period: float, callback: Callable[[], None], name: Optional[str] = None) -> int:
        """ Run a bound method every `period` seconds, the owner is only weakly held """
        if period <= 0:
            raise ValueError(f"period must be positive, got {period}")
        handle = self._next_handle
        self._next_handle += 1

        # owner collected without cancelling
        def cleanup(ref: weakref.ReferenceType) -> None:
            self._tasks.pop(handle, None)

        name = name or getattr(callback, "__qualname__", repr(callback))
        self._tasks[handle] = Task(handle, name, period, weakref.WeakMethod(callback, cleanup))
        print(f"[schedule] task({name}) every {period}s at {handle}")
        return handle

    def cancel(self, handle: int) -> None:
        task = self._tasks.pop(handle, None)
        if task is not None:
            print(f"[schedule] cancel task({task.name}) at {handle}")

    def pump(self, dt: float) -> int:
        if not self._tasks:
            return 0

        fired = 0
        # a task may cancel others while running
        for handle, task in list(self._tasks.items()):
            if handle not in self._tasks:
                continue
            task.elapsed += dt
            while task.elapsed >= task.period:
                task.elapsed -= task.period
                callback = task.callback()
                if callback is None:
                    self._tasks.pop(handle, None)
                    break
                self._call_task(task, callback)
                fired += 1
                if handle not in self._tasks:
                    break
        self._fired += fired
        return fired

    def _call_task(self, task: Task, callback: Callable[[], None]) -> None:
        try:
            callback()
        except Exception as exc:
            print(f"Error: task exception in {task.name} at {task.handle}: {exc}")

    # QoL Functions

    def clear(self) -> None:
        """Drop all scheduled tasks."""
        self._tasks.clear()

    @property
    def fired(self) -> int:
        return self._fired

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, handle: object) -> bool:
        return handle in self._tasks
