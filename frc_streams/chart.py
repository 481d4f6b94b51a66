"""Chart data buffer and static chart rendering.

ChartBuffer is the data model behind a debug chart: an explicit bounded ring
buffer of (x, y) points with a drop-oldest eviction policy. Producers (a
control loop) append while a renderer snapshots, possibly from another
thread, so all access is locked.

render_chart draws a buffer to a PNG file. Nothing here opens a window.
"""

import logging
import numbers
import threading
from collections import deque
from pathlib import Path
from typing import Deque, Optional, Tuple

import numpy as np

from .config import CHART_DEFAULT_MAX_SIZE, STREAM_BLUE, STREAM_CREAM, STREAM_RED
from .exceptions import InvalidConfiguration
from .plot_styles import create_figure, save_figure, style_axis

Bounds = Tuple[Optional[float], Optional[float]]


def _validate_max_size(max_size: Optional[int]) -> Optional[int]:
    if max_size is None:
        return None
    if (
        isinstance(max_size, (bool, np.bool_))
        or not isinstance(max_size, numbers.Integral)
        or max_size <= 0
    ):
        raise InvalidConfiguration(f"max_size must be a positive int or None, got {max_size!r}")
    return int(max_size)


def _validate_bounds(lower: float, upper: float) -> Bounds:
    if not lower < upper:
        raise InvalidConfiguration(f"bounds must satisfy min < max, got ({lower}, {upper})")
    return (float(lower), float(upper))


class ChartBuffer:
    """Bounded, thread-safe series of (x, y) points for one chart.

    The buffer starts with a single point at the origin, matching a freshly
    reset chart. When ``max_size`` is set, appending beyond it drops the
    oldest points first.

    Attributes:
        title: Chart and series title.
        x_label: X-axis label.
        y_label: Y-axis label.
    """

    def __init__(
        self,
        title: str,
        x_label: str = "x",
        y_label: str = "y",
        max_size: Optional[int] = CHART_DEFAULT_MAX_SIZE,
    ) -> None:
        """Initialize the buffer.

        Args:
            title: Chart title.
            x_label: X-axis label (default: "x").
            y_label: Y-axis label (default: "y").
            max_size: Maximum number of points kept, or None for unbounded.

        Raises:
            InvalidConfiguration: If max_size is not a positive int or None.
        """
        self.title = title
        self.x_label = x_label
        self.y_label = y_label

        self._max_size = _validate_max_size(max_size)
        self._lock = threading.Lock()
        self._points: Deque[Tuple[float, float]] = deque([(0.0, 0.0)], maxlen=self._max_size)

        self._x_bounds: Bounds = (None, None)
        self._y_bounds: Bounds = (None, None)

    # ------------------------------------------------------------------
    # Data
    # ------------------------------------------------------------------

    def update(self, x: float, y: float) -> None:
        """Append a point, evicting the oldest if the buffer is full."""
        with self._lock:
            self._points.append((float(x), float(y)))

    def update_y(self, y: float) -> None:
        """Append a point one step to the right of the last one."""
        with self._lock:
            last_x = self._points[-1][0] if self._points else -1.0
            self._points.append((last_x + 1.0, float(y)))

    def reset(self, x: float = 0.0, y: float = 0.0) -> None:
        """Clear all points and seed the buffer with (x, y)."""
        with self._lock:
            self._points.clear()
            self._points.append((float(x), float(y)))

    @property
    def max_size(self) -> Optional[int]:
        return self._max_size

    def set_max_size(self, max_size: Optional[int]) -> "ChartBuffer":
        """Change the capacity, dropping the oldest points that no longer fit.

        Raises:
            InvalidConfiguration: If max_size is not a positive int or None.
        """
        max_size = _validate_max_size(max_size)
        with self._lock:
            self._max_size = max_size
            self._points = deque(self._points, maxlen=max_size)
        return self

    def points(self) -> Tuple[Tuple[float, float], ...]:
        with self._lock:
            return tuple(self._points)

    def as_arrays(self) -> Tuple[np.ndarray, np.ndarray]:
        """Snapshot of the x and y data as float arrays."""
        with self._lock:
            points = list(self._points)
        if not points:
            return np.array([], dtype=float), np.array([], dtype=float)
        data = np.array(points, dtype=float)
        return data[:, 0], data[:, 1]

    def __len__(self) -> int:
        with self._lock:
            return len(self._points)

    def __str__(self) -> str:
        xs, ys = self.as_arrays()
        x_vals = "".join(f"{x}, " for x in xs)
        y_vals = "".join(f"{y}, " for y in ys)
        return f"X: {x_vals}\nY: {y_vals}"

    # ------------------------------------------------------------------
    # Bounds
    # ------------------------------------------------------------------

    @property
    def x_bounds(self) -> Bounds:
        return self._x_bounds

    def set_x_bounds(self, lower: float, upper: float) -> "ChartBuffer":
        self._x_bounds = _validate_bounds(lower, upper)
        return self

    def reset_x_bounds(self) -> "ChartBuffer":
        self._x_bounds = (None, None)
        return self

    @property
    def y_bounds(self) -> Bounds:
        return self._y_bounds

    def set_y_bounds(self, lower: float, upper: float) -> "ChartBuffer":
        self._y_bounds = _validate_bounds(lower, upper)
        return self

    def reset_y_bounds(self) -> "ChartBuffer":
        self._y_bounds = (None, None)
        return self


def render_chart(
    buffer: ChartBuffer,
    output_path: Path,
    dark_mode: bool = False,
    reference: Optional[ChartBuffer] = None,
) -> Path:
    """Render a chart buffer to an image file.

    Args:
        buffer: Series to draw (line, no markers). Its title, labels and
            bounds configure the chart.
        output_path: Destination image path (format from the suffix).
        dark_mode: Whether to use dark mode styling (default: False).
        reference: Optional second series drawn underneath, e.g. the raw
            signal behind a filtered one.

    Returns:
        The path written.
    """
    fig, ax = create_figure(dark_mode=dark_mode)
    style_axis(
        ax,
        title=buffer.title,
        xlabel=buffer.x_label,
        ylabel=buffer.y_label,
        dark_mode=dark_mode,
    )

    if reference is not None:
        ref_x, ref_y = reference.as_arrays()
        ax.plot(ref_x, ref_y, "-", color=STREAM_BLUE, linewidth=1.0, alpha=0.5, label=reference.title)

    xs, ys = buffer.as_arrays()
    ax.plot(xs, ys, "-", color=STREAM_RED, linewidth=1.5, label=buffer.title)

    # None leaves that side on autoscale
    x_min, x_max = buffer.x_bounds
    y_min, y_max = buffer.y_bounds
    ax.set_xlim(left=x_min, right=x_max)
    ax.set_ylim(bottom=y_min, top=y_max)

    if reference is not None:
        legend = ax.legend(loc="upper right", fontsize=8)
        if dark_mode:
            for text in legend.get_texts():
                text.set_color(STREAM_CREAM)

    logging.debug(f"Rendering chart '{buffer.title}' with {len(xs)} points")
    return save_figure(fig, output_path)
