"""
Worker Thread Module
Runs routines queued by the dispatcher.
"""

import threading
import logging
import time

logger = logging.getLogger(__name__)


class Worker(threading.Thread):
    """Worker thread for executing routines from the queue.

    Queue items are (label, callable, kwargs) tuples; None stops the thread.
    """

    def __init__(self, task_queue, config_manager=None, status_callback=None):
        super().__init__(daemon=True, name="framevision-worker")
        self.task_queue = task_queue
        self.config_manager = config_manager
        self.status_callback = status_callback

    def run(self):
        """Main loop delegating to a per-iteration handler."""
        while self._process_queue_iteration():
            pass

    def _process_queue_iteration(self) -> bool:
        """Process a single queue item. Return False to break the loop."""
        item = self.task_queue.get()
        if item is None:
            self.task_queue.task_done()
            return False
        label, fn, kwargs = item
        t0 = time.perf_counter()
        try:
            fn(**kwargs)
        except Exception as e:
            logger.exception("worker: routine error for %s", label)
            self._set_status(f"Routine error: {e}")
        finally:
            dur_ms = (time.perf_counter() - t0) * 1000.0
            if dur_ms > self._slow_threshold_ms():
                logger.warning("worker: slow routine %s took %.1fms", label, dur_ms)
            else:
                logger.info("worker: routine %s executed in %.1fms", label, dur_ms)
            self.task_queue.task_done()
        return True

    def _slow_threshold_ms(self) -> float:
        if self.config_manager is None:
            return 1000.0
        return self.config_manager.get_float("slow_task_threshold_ms", 1000.0)

    def _set_status(self, text: str):
        if self.status_callback is None:
            return
        try:
            self.status_callback(text)
        except Exception:
            # Status updates must never stop the worker
            logger.debug("worker: status callback failed", exc_info=True)
