"""Trailing debounce timer for bursts of keystrokes."""

from typing import Callable, Optional
from PyQt6.QtCore import QTimer


class DebounceTimer:
    """
    Trailing debounce timer.

    Restarts on each trigger. The handler fires only after delay_ms of
    inactivity, with the arguments of the last trigger.

    Usage:
        self._debounce = DebounceTimer(delay_ms=300, handler=self._fetch_suggestions)

        def on_text_changed(self, text):
            self._debounce.trigger(text)  # Restarts timer
    """

    def __init__(self, delay_ms: int, handler: Callable[..., None]):
        self._delay_ms = delay_ms
        self._handler = handler
        self._args: tuple = ()
        self._timer: Optional[QTimer] = None

    @property
    def is_pending(self) -> bool:
        return self._timer is not None and self._timer.isActive()

    def trigger(self, *args):
        """Trigger debounce — restarts timer."""
        self._args = args
        if self._delay_ms <= 0:
            self.force()
            return
        if self._timer is None:
            self._timer = QTimer()
            self._timer.setSingleShot(True)
            self._timer.timeout.connect(self._fire)
        self._timer.start(self._delay_ms)

    def cancel(self):
        """Cancel pending trigger."""
        if self._timer is not None:
            self._timer.stop()

    def force(self):
        """Cancel timer and fire handler immediately."""
        self.cancel()
        self._fire()

    def _fire(self):
        self._handler(*self._args)
