"""Dispatch boundary.

Keeps a registry of named realtime triggers and named solo routines and
hands routines to a Worker thread. Triggers are only registered here; the
scheduler that fires them lives elsewhere.
"""
from __future__ import annotations

import logging
import queue
import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from .errors import InvalidArgumentError, UnknownRoutineError
from .worker import Worker

logger = logging.getLogger(__name__)

Routine = Callable[..., None]


@dataclass
class RealtimeTimer:
    """A named recurring trigger and its settings."""

    name: str
    config: Optional[Dict[str, Any]] = None


@dataclass
class SoloTask:
    """A request to run one named routine once."""

    name: str
    params: Dict[str, Any] = field(default_factory=dict)


class Dispatcher:
    """Routes routine names to callables and queues them for a worker."""

    def __init__(self, config_manager=None, task_queue: Optional[queue.Queue] = None):
        self.config_manager = config_manager
        self.task_queue = task_queue if task_queue is not None else queue.Queue()
        self.lock = threading.Lock()
        self._timers: Dict[str, RealtimeTimer] = {}
        self._routines: Dict[str, Routine] = {}
        self._worker: Optional[Worker] = None

    # --------------------------- triggers ---------------------------
    def add_timer(self, timer: RealtimeTimer) -> None:
        if timer is None:
            raise InvalidArgumentError("realtime timer must not be None")
        if not timer.name:
            raise InvalidArgumentError("realtime timer name must not be empty")
        with self.lock:
            self._timers[timer.name] = timer
        logger.info("dispatcher: trigger %s registered", timer.name)

    def remove_timer(self, name: str) -> None:
        with self.lock:
            self._timers.pop(name, None)

    def timers(self) -> List[RealtimeTimer]:
        with self.lock:
            return list(self._timers.values())

    # --------------------------- routines ---------------------------
    def register_routine(self, name: str, routine: Routine) -> None:
        if not name:
            raise InvalidArgumentError("routine name must not be empty")
        if not callable(routine):
            raise InvalidArgumentError(f"routine {name} is not callable")
        with self.lock:
            self._routines[name] = routine

    def routine_names(self) -> List[str]:
        with self.lock:
            return sorted(self._routines)

    def run_task(self, task: SoloTask) -> None:
        """Queue the routine named by `task` with its parameters."""
        if task is None:
            raise InvalidArgumentError("solo task must not be None")
        if not task.name:
            raise InvalidArgumentError("solo task name must not be empty")
        with self.lock:
            routine = self._routines.get(task.name)
        if routine is None:
            raise UnknownRoutineError(task.name)
        self.task_queue.put_nowait((task.name, routine, dict(task.params)))
        logger.info("dispatcher: queued routine %s", task.name)

    def start_routine(self, name: str, **params) -> None:
        self.run_task(SoloTask(name, params))

    # --------------------------- worker ---------------------------
    def start(self, status_callback=None) -> Worker:
        """Start the worker thread that executes queued routines."""
        if self._worker is None or not self._worker.is_alive():
            self._worker = Worker(self.task_queue, self.config_manager, status_callback)
            self._worker.start()
        return self._worker

    def stop(self, timeout: Optional[float] = None) -> None:
        """Let queued routines finish, then stop the worker."""
        worker = self._worker
        if worker is None:
            return
        self.task_queue.put(None)
        worker.join(timeout)
        self._worker = None
