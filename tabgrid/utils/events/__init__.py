"""Event system.

Pure Python signal implementation used by the non-UI layers.
"""

from tabgrid.utils.events.observable import Observable, Signal, SignalInstance

__all__ = ["Observable", "Signal", "SignalInstance"]
