"""Module: column_layout_engine.py

Date: 2026-10-19

ColumnLayoutEngine - pixel widths for a fixed set of resizable columns.

Keeps integer column widths that sum exactly to the container width while
every width stays within its column's [min_width, max_width] bounds. The
engine reacts to four layout events:

- initial mount (initialize_columns)
- border drag between two adjacent columns (update_column_widths,
  resize_column)
- container resize (update_container_width)
- reset (reset_to_initial_sizes)

When the bounds make the exact total impossible (container narrower than
the sum of minimum widths, or wider than the sum of bounded maximum widths),
the bounds win and the total gets as close as they allow.

Calls referencing an unknown column, or made before initialize_columns,
are no-ops.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from tabgrid.config import DEFAULT_COLUMN_WIDTH, MIN_COLUMN_WIDTH
from tabgrid.domain import ColumnDescriptor, coerce_columns
from tabgrid.utils.events import Observable, Signal
from tabgrid.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)


@dataclass
class ColumnTrack:
    """Mutable width state of one column."""

    field_name: str
    width: int
    min_width: int
    max_width: int | None
    flex: float
    initial_width: int
    explicit: bool

    @property
    def adjustable(self) -> bool:
        """Columns without an explicit width, or with a flex weight, absorb slack."""
        return not self.explicit or self.flex > 0

    def clamp(self, width: float) -> int:
        width = max(self.min_width, int(width))
        if self.max_width is not None:
            width = min(width, self.max_width)
        return width

    def can_absorb(self, delta: int) -> bool:
        if delta > 0:
            return self.max_width is None or self.width < self.max_width
        if delta < 0:
            return self.width > self.min_width
        return False

    def adjust(self, amount: int) -> int:
        """Move the width by ``amount`` within bounds; return the applied amount."""
        new_width = self.clamp(self.width + amount)
        applied = new_width - self.width
        self.width = new_width
        return applied


def _track_from_descriptor(column: ColumnDescriptor) -> ColumnTrack:
    min_width = column.min_width if column.min_width is not None else MIN_COLUMN_WIDTH
    min_width = max(0, int(min_width))
    max_width = column.max_width
    if max_width is not None:
        max_width = max(min_width, int(max_width))

    track = ColumnTrack(
        field_name=column.field_name,
        width=0,
        min_width=min_width,
        max_width=max_width,
        flex=max(0.0, float(column.flex or 0)),
        initial_width=0,
        explicit=column.has_explicit_width,
    )
    start = int(column.width) if column.has_explicit_width else DEFAULT_COLUMN_WIDTH
    start = max(start, min_width)
    track.width = track.initial_width = track.clamp(start)
    return track


def distribute(
    delta: int,
    tracks: list[ColumnTrack],
    weight: Callable[[ColumnTrack], float],
) -> int:
    """Spread ``delta`` px over ``tracks`` proportionally to ``weight``.

    Shares are truncated to whole pixels and clamped to each track's bounds;
    the rounding remainder of every pass is pushed onto the designated
    (last still-eligible) track. Passes repeat over the tracks that can
    still move until nothing is left or every track is saturated.

    Returns:
        The part of ``delta`` that could not be placed

    """
    active = [track for track in tracks if track.can_absorb(delta)]
    while delta and active:
        weights = [max(weight(track), 0.0) for track in active]
        total_weight = sum(weights)
        if total_weight <= 0:
            weights = [1.0] * len(active)
            total_weight = float(len(active))

        placed = 0
        for track, track_weight in zip(active, weights):
            placed += track.adjust(int(delta * track_weight / total_weight))
        delta -= placed

        if delta:
            delta -= active[-1].adjust(delta)

        active = [track for track in active if track.can_absorb(delta)]

    return delta


class ColumnLayoutEngine(Observable):
    """Per-column pixel widths for one grid, independent of its data."""

    widths_changed = Signal(dict)  # field_name -> width
    resizing_changed = Signal(bool)

    def __init__(self) -> None:
        super().__init__()
        self._tracks: list[ColumnTrack] = []
        self._by_field: dict[str, ColumnTrack] = {}
        self._container_width = 0
        self._initialized = False
        self._is_resizing = False

    # =====================================
    # Layout events
    # =====================================

    def initialize_columns(
        self,
        columns: Iterable[ColumnDescriptor | Mapping[str, Any]],
        container_width: int,
    ) -> None:
        """Compute starting widths and fit them to ``container_width``."""
        self._tracks = [_track_from_descriptor(col) for col in coerce_columns(columns)]
        self._by_field = {track.field_name: track for track in self._tracks}
        self._container_width = max(0, int(container_width))
        self._initialized = True

        self._fit_from_initial()
        logger.debug(
            "[ColumnLayout] Initialized %d columns for %dpx: %s",
            len(self._tracks),
            self._container_width,
            self.grid_template_columns,
            extra={"dev_only": True},
        )
        self._emit_widths()

    def resize_column(self, field_name: str, new_width: int) -> None:
        """Resize one column, trading width with its neighbour.

        The neighbour is the column to the right, or to the left for the last
        column. The pair's combined width is preserved.
        """
        track = self._by_field.get(field_name)
        if not self._initialized or track is None:
            return

        index = self._tracks.index(track)
        neighbour_index = index + 1 if index + 1 < len(self._tracks) else index - 1
        if neighbour_index < 0:
            return

        if self._trade(track, self._tracks[neighbour_index], new_width):
            self._emit_widths()

    def update_column_widths(
        self,
        field_a: str,
        width_a: int,
        field_b: str,
        width_b: int,
    ) -> None:
        """Apply a border drag between two adjacent columns.

        ``width_a`` is honoured within column A's bounds and column B receives
        the rest of the pair's combined width, so a drag only ever trades
        width between the two columns. ``width_b`` is the caller's view of B
        and is only used for logging when it disagrees.
        """
        track_a = self._by_field.get(field_a)
        track_b = self._by_field.get(field_b)
        if not self._initialized or track_a is None or track_b is None or track_a is track_b:
            return

        combined = track_a.width + track_b.width
        if width_a + width_b != combined:
            logger.debug(
                "[ColumnLayout] Pair widths %d+%d differ from combined %dpx; deriving '%s'",
                width_a,
                width_b,
                combined,
                field_b,
                extra={"dev_only": True},
            )

        if self._trade(track_a, track_b, width_a):
            self._emit_widths()

    def update_container_width(self, new_width: int) -> None:
        """Rescale every column to a new container width."""
        if not self._initialized:
            return

        new_width = max(0, int(new_width))
        old_width = self._container_width
        if new_width == old_width:
            return

        self._container_width = new_width
        if old_width <= 0 or not self._tracks:
            distribute(new_width - self.total_width, self._tracks, lambda track: 1.0)
        else:
            scale = new_width / old_width
            for track in self._tracks:
                track.width = track.clamp(round(track.width * scale))
            distribute(
                new_width - self.total_width,
                self._tracks,
                lambda track: float(max(track.width, 1)),
            )

        logger.debug(
            "[ColumnLayout] Container %dpx -> %dpx (total %dpx)",
            old_width,
            new_width,
            self.total_width,
            extra={"dev_only": True},
        )
        self._emit_widths()

    def reset_to_initial_sizes(self) -> None:
        """Restore the widths captured at initialization and refit them."""
        if not self._initialized:
            return

        self._fit_from_initial()
        self._emit_widths()

    def set_is_resizing(self, is_resizing: bool) -> None:
        if self._is_resizing == bool(is_resizing):
            return
        self._is_resizing = bool(is_resizing)
        self.resizing_changed.emit(self._is_resizing)

    # =====================================
    # Queries
    # =====================================

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    @property
    def is_resizing(self) -> bool:
        return self._is_resizing

    @property
    def container_width(self) -> int:
        return self._container_width

    @property
    def total_width(self) -> int:
        return sum(track.width for track in self._tracks)

    @property
    def grid_template_columns(self) -> str:
        """Width-track descriptor, e.g. ``"120px 80px 200px"``."""
        return " ".join(f"{track.width}px" for track in self._tracks)

    def get_column_widths(self) -> dict[str, int]:
        return {track.field_name: track.width for track in self._tracks}

    def get_column_width(self, field_name: str) -> int | None:
        track = self._by_field.get(field_name)
        return track.width if track is not None else None

    def get_column_bounds(self, field_name: str) -> tuple[int, int | None] | None:
        track = self._by_field.get(field_name)
        return (track.min_width, track.max_width) if track is not None else None

    # =====================================
    # Internals
    # =====================================

    def _fit_from_initial(self) -> None:
        for track in self._tracks:
            track.width = track.initial_width

        delta = self._container_width - self.total_width
        adjustable = [track for track in self._tracks if track.adjustable]
        if any(track.flex > 0 for track in adjustable):
            candidates = [track for track in adjustable if track.flex > 0]
            remaining = distribute(delta, candidates, lambda track: track.flex)
        else:
            remaining = distribute(delta, adjustable, lambda track: 1.0)

        if remaining:
            remaining = distribute(remaining, self._tracks, lambda track: 1.0)
        if remaining:
            logger.debug(
                "[ColumnLayout] Column bounds leave %dpx of %dpx unplaced",
                remaining,
                self._container_width,
                extra={"dev_only": True},
            )

    def _trade(self, track_a: ColumnTrack, track_b: ColumnTrack, requested_a: int) -> bool:
        """Give ``track_a`` the requested width, paid for by ``track_b``.

        Returns:
            True when any width changed

        """
        combined = track_a.width + track_b.width
        new_a = track_a.clamp(requested_a)
        new_b = track_b.clamp(combined - new_a)
        new_a = track_a.clamp(combined - new_b)
        if new_a + new_b != combined:
            return False

        changed = (new_a, new_b) != (track_a.width, track_b.width)
        track_a.width = new_a
        track_b.width = new_b
        return changed

    def _emit_widths(self) -> None:
        self.widths_changed.emit(self.get_column_widths())
