import logging
import queue
import threading
from typing import Optional

from tinyspec.application.ports import SpecSource

logger = logging.getLogger("tinyspec.watch")

DEFAULT_POLL_INTERVAL = 0.25


class SpecWatcher:
    """Background observer that only reports "something changed".

    The watcher thread polls the source's signature and pushes the new value
    onto ``notifications``. It never parses documents or touches dashboard
    state; the consumer decides when to reload.
    """

    def __init__(
        self,
        source: SpecSource,
        notifications: "queue.Queue[int]",
        poll_interval: float = DEFAULT_POLL_INTERVAL,
    ):
        self.source = source
        self.notifications = notifications
        self.poll_interval = poll_interval
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._last_signature: Optional[int] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> bool:
        """Start watching; False means reload-on-change is unavailable."""
        if self.running:
            return True
        try:
            self._last_signature = self.source.compute_signature()
        except OSError as exc:
            logger.debug("watch disabled: %s", exc)
            return False
        self._stop.clear()
        thread = threading.Thread(target=self._run, name="tinyspec-watch", daemon=True)
        try:
            thread.start()
        except RuntimeError as exc:
            logger.debug("watch thread failed to start: %s", exc)
            return False
        self._thread = thread
        return True

    def stop(self, timeout: float = 1.0) -> None:
        self._stop.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)
        self._thread = None

    def poll_once(self) -> bool:
        """Compare signatures once; enqueue a notification on change."""
        try:
            signature = self.source.compute_signature()
        except OSError as exc:
            logger.debug("signature failed: %s", exc)
            return False
        if signature == self._last_signature:
            return False
        self._last_signature = signature
        self.notifications.put(signature)
        return True

    def _run(self) -> None:
        while not self._stop.wait(self.poll_interval):
            self.poll_once()


__all__ = ["SpecWatcher", "DEFAULT_POLL_INTERVAL"]
