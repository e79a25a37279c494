"""Module: border_drag.py

Date: 2026-10-19

Interactive resize of the border between two adjacent columns.

A drag session captures both column widths when the pointer goes down and
derives every update from those start widths and the absolute pointer
offset. Replaying the same pointer positions therefore always ends in the
same widths, however many intermediate move events were coalesced by the
throttle.
"""

from __future__ import annotations

import time
from collections.abc import Callable

from tabgrid.config import KEYBOARD_STEP_LARGE, KEYBOARD_STEP_SMALL, RESIZE_THROTTLE_MS
from tabgrid.core.layout.column_layout_engine import ColumnLayoutEngine
from tabgrid.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

# (delay_seconds, callback) -> None
Scheduler = Callable[[float, Callable[[], None]], None]


class ColumnBorderDrag:
    """Pointer-driven resize of the border between ``left_field`` and ``right_field``.

    Usage:
        drag = ColumnBorderDrag(engine, "name", "age")
        drag.start(event_x)
        drag.move(event_x)   # many times, throttled
        drag.finish()

    Moves arriving less than ``throttle_ms`` after the last applied one are
    held back; the newest held position is applied by the next move that
    falls outside the window, by ``flush()``, or by ``finish()``.

    Pass ``schedule`` to have a held position applied once the window closes
    even when no further move arrives. It is called as
    ``schedule(delay_seconds, callback)``; a Qt host can pass
    ``lambda delay, cb: QTimer.singleShot(int(delay * 1000), cb)``.
    """

    def __init__(
        self,
        engine: ColumnLayoutEngine,
        left_field: str,
        right_field: str,
        *,
        throttle_ms: int = RESIZE_THROTTLE_MS,
        clock: Callable[[], float] = time.monotonic,
        schedule: Scheduler | None = None,
    ) -> None:
        self._engine = engine
        self.left_field = left_field
        self.right_field = right_field
        self._throttle = max(0, throttle_ms) / 1000.0
        self._clock = clock
        self._schedule = schedule

        self._start_x: float | None = None
        self._left_start = 0
        self._right_start = 0
        self._last_applied_at: float | None = None
        self._pending_x: float | None = None
        self._trailing_scheduled = False

    @property
    def active(self) -> bool:
        return self._start_x is not None

    def start(self, x: float) -> bool:
        """Begin a drag at pointer position ``x``.

        Returns:
            False when either column is unknown to the engine

        """
        left = self._engine.get_column_width(self.left_field)
        right = self._engine.get_column_width(self.right_field)
        if left is None or right is None:
            return False

        self._start_x = x
        self._left_start = left
        self._right_start = right
        self._last_applied_at = None
        self._pending_x = None
        self._engine.set_is_resizing(True)
        return True

    def move(self, x: float) -> None:
        if not self.active:
            return

        now = self._clock()
        if self._last_applied_at is not None and now - self._last_applied_at < self._throttle:
            self._pending_x = x
            if self._schedule is not None and not self._trailing_scheduled:
                self._trailing_scheduled = True
                remaining = self._throttle - (now - self._last_applied_at)
                self._schedule(remaining, self._on_trailing_edge)
            return

        self._apply(x, now)

    def flush(self) -> None:
        """Apply the newest held-back position, if any."""
        if self.active and self._pending_x is not None:
            self._apply(self._pending_x, self._clock())

    def _on_trailing_edge(self) -> None:
        self._trailing_scheduled = False
        self.flush()

    def finish(self) -> None:
        if not self.active:
            return
        self.flush()
        self._end()

    def cancel(self) -> None:
        """Abort the drag and restore the widths it started from."""
        if not self.active:
            return
        self._engine.update_column_widths(
            self.left_field, self._left_start, self.right_field, self._right_start
        )
        self._end()

    def step(self, steps: int, *, large: bool = False) -> None:
        """Keyboard resize of this border; see nudge_border."""
        if self.active:
            return
        nudge_border(self._engine, self.left_field, self.right_field, steps, large=large)

    def _apply(self, x: float, now: float) -> None:
        assert self._start_x is not None
        delta = round(x - self._start_x)
        self._engine.update_column_widths(
            self.left_field,
            self._left_start + delta,
            self.right_field,
            self._right_start - delta,
        )
        self._last_applied_at = now
        self._pending_x = None

    def _end(self) -> None:
        logger.debug(
            "[BorderDrag] %s|%s finished at %s/%s",
            self.left_field,
            self.right_field,
            self._engine.get_column_width(self.left_field),
            self._engine.get_column_width(self.right_field),
            extra={"dev_only": True},
        )
        self._start_x = None
        self._pending_x = None
        self._last_applied_at = None
        self._engine.set_is_resizing(False)


def nudge_border(
    engine: ColumnLayoutEngine,
    left_field: str,
    right_field: str,
    steps: int,
    *,
    large: bool = False,
) -> None:
    """Move a border by keyboard: ``steps`` positive moves it right.

    Each step is KEYBOARD_STEP_SMALL px, or KEYBOARD_STEP_LARGE px with
    ``large`` (shift held).
    """
    left = engine.get_column_width(left_field)
    right = engine.get_column_width(right_field)
    if left is None or right is None or not steps:
        return

    delta = steps * (KEYBOARD_STEP_LARGE if large else KEYBOARD_STEP_SMALL)
    engine.update_column_widths(left_field, left + delta, right_field, right - delta)
