"""Module: observable.py

Date: 2026-10-19

Observable - Pure Python observer pattern for grid state.

Provides Qt signal-like notifications without a Qt dependency:
- Signal descriptor for declaring events on a class
- SignalInstance holding the callbacks of one object
- Observable base class

Used by GridState and ColumnLayoutEngine so that view layers (Qt models,
tests, headless hosts) can react to state changes.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any

from tabgrid.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

__all__ = ["Observable", "Signal", "SignalInstance"]


class Signal:
    """Descriptor for defining observable signals.

    Usage:
        class Counter(Observable):
            value_changed = Signal(int)

        counter = Counter()
        counter.value_changed.connect(callback)
        counter.value_changed.emit(42)
    """

    def __init__(self, *arg_types: type):
        """Initialize signal with expected argument types.

        Args:
            *arg_types: Type hints for signal arguments (for documentation only)

        """
        self.arg_types = arg_types
        self.name = ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, obj: Observable | None, _objtype: type | None = None) -> SignalInstance:
        if obj is None:
            return self  # type: ignore[return-value]

        attr_name = f"_signal_{self.name}"
        instance = obj.__dict__.get(attr_name)
        if instance is None:
            instance = SignalInstance(self.name, self.arg_types)
            obj.__dict__[attr_name] = instance

        return instance


class SignalInstance:
    """Instance of a signal for a specific object."""

    def __init__(self, name: str, arg_types: tuple[type, ...]):
        self.name = name
        self.arg_types = arg_types
        self._callbacks: list[Callable[..., Any]] = []
        self._lock = threading.Lock()

    def connect(self, callback: Callable[..., Any]) -> None:
        """Connect callback to signal. Connecting twice is a no-op."""
        with self._lock:
            if callback not in self._callbacks:
                self._callbacks.append(callback)
                logger.debug(
                    "Signal connected: %s -> %s",
                    self.name,
                    getattr(callback, "__name__", repr(callback)),
                    extra={"dev_only": True},
                )

    def disconnect(self, callback: Callable[..., Any] | None = None) -> None:
        """Disconnect callback from signal.

        Args:
            callback: Callback to remove. If None, removes all callbacks.

        """
        with self._lock:
            if callback is None:
                self._callbacks.clear()
            elif callback in self._callbacks:
                self._callbacks.remove(callback)

    def emit(self, *args: Any) -> None:
        """Emit signal with arguments.

        A callback that raises is logged and does not stop the remaining
        callbacks from running.
        """
        with self._lock:
            callbacks = self._callbacks.copy()

        for callback in callbacks:
            try:
                callback(*args)
            except Exception:
                logger.exception(
                    "Error in signal callback: %s -> %s",
                    self.name,
                    getattr(callback, "__name__", repr(callback)),
                )

    @property
    def receiver_count(self) -> int:
        return len(self._callbacks)


class Observable:
    """Base class for objects with observable signals."""

    def __init__(self) -> None:
        super().__init__()
