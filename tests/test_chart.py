"""Test the chart buffer and chart rendering."""

import threading
from pathlib import Path

import numpy as np
import pytest

from frc_streams.chart import ChartBuffer, render_chart
from frc_streams.exceptions import InvalidConfiguration


class TestChartBufferData:
    """Test point storage and eviction."""

    def test_starts_at_origin(self) -> None:
        """Test a new buffer holds the origin point."""
        chart = ChartBuffer("Speed")
        assert chart.points() == ((0.0, 0.0),)
        assert len(chart) == 1

    def test_update_appends(self) -> None:
        """Test explicit (x, y) updates."""
        chart = ChartBuffer("Speed")
        chart.update(0.5, 2.0)
        chart.update(1.0, 3.0)
        assert chart.points()[-2:] == ((0.5, 2.0), (1.0, 3.0))

    def test_update_y_increments_x(self) -> None:
        """Test y-only updates step x by one from the last point."""
        chart = ChartBuffer("Speed")
        chart.update(10.0, 1.0)
        chart.update_y(2.0)
        chart.update_y(3.0)
        xs, ys = chart.as_arrays()
        np.testing.assert_array_equal(xs, [0.0, 10.0, 11.0, 12.0])
        np.testing.assert_array_equal(ys, [0.0, 1.0, 2.0, 3.0])

    def test_reset_seeds_single_point(self) -> None:
        """Test reset clears and seeds."""
        chart = ChartBuffer("Speed")
        chart.update(1.0, 1.0)
        chart.reset(5.0, -1.0)
        assert chart.points() == ((5.0, -1.0),)
        chart.reset()
        assert chart.points() == ((0.0, 0.0),)

    def test_max_size_drops_oldest(self) -> None:
        """Test drop-oldest eviction keeps exactly max_size points."""
        chart = ChartBuffer("Speed", max_size=3)
        for y in [1.0, 2.0, 3.0, 4.0]:
            chart.update_y(y)
        assert len(chart) == 3
        _, ys = chart.as_arrays()
        np.testing.assert_array_equal(ys, [2.0, 3.0, 4.0])

    def test_set_max_size_trims_immediately(self) -> None:
        """Test shrinking the capacity evicts the oldest points now."""
        chart = ChartBuffer("Speed")
        for y in range(10):
            chart.update_y(float(y))
        chart.set_max_size(4)
        assert chart.max_size == 4
        _, ys = chart.as_arrays()
        np.testing.assert_array_equal(ys, [6.0, 7.0, 8.0, 9.0])

    def test_set_max_size_none_unbounds(self) -> None:
        """Test removing the limit."""
        chart = ChartBuffer("Speed", max_size=2).set_max_size(None)
        for y in range(5):
            chart.update_y(float(y))
        assert len(chart) == 6

    @pytest.mark.parametrize("bad", [0, -1, 2.5, True])
    def test_rejects_invalid_max_size(self, bad) -> None:
        """Test capacity validation."""
        with pytest.raises(InvalidConfiguration):
            ChartBuffer("Speed", max_size=bad)
        with pytest.raises(InvalidConfiguration):
            ChartBuffer("Speed").set_max_size(bad)

    def test_accepts_numpy_int_max_size(self) -> None:
        """Test numpy integers are valid capacities."""
        chart = ChartBuffer("Speed", max_size=np.int64(3))
        assert chart.max_size == 3
        assert type(chart.max_size) is int
        chart.set_max_size(np.int32(2))
        assert chart.max_size == 2

    def test_str_lists_data(self) -> None:
        """Test the text dump."""
        chart = ChartBuffer("Speed")
        chart.update(1.0, 2.0)
        assert str(chart) == "X: 0.0, 1.0, \nY: 0.0, 2.0, "

    def test_concurrent_producers_respect_bound(self) -> None:
        """Test the size invariant holds with several writers."""
        chart = ChartBuffer("Speed", max_size=50)

        def produce() -> None:
            for i in range(500):
                chart.update(float(i), float(i))

        threads = [threading.Thread(target=produce) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(chart) == 50


class TestChartBufferBounds:
    """Test axis bounds."""

    def test_default_bounds_are_auto(self) -> None:
        """Test no bounds by default."""
        chart = ChartBuffer("Speed")
        assert chart.x_bounds == (None, None)
        assert chart.y_bounds == (None, None)

    def test_x_bounds_do_not_touch_y(self) -> None:
        """Test setting x bounds records x bounds only."""
        chart = ChartBuffer("Speed").set_x_bounds(0, 100)
        assert chart.x_bounds == (0.0, 100.0)
        assert chart.y_bounds == (None, None)

    def test_set_and_reset_y_bounds(self) -> None:
        """Test y bounds lifecycle."""
        chart = ChartBuffer("Speed").set_y_bounds(-1.0, 1.0)
        assert chart.y_bounds == (-1.0, 1.0)
        chart.reset_y_bounds()
        assert chart.y_bounds == (None, None)

    def test_reset_x_bounds(self) -> None:
        """Test removing x bounds."""
        chart = ChartBuffer("Speed").set_x_bounds(0, 1).reset_x_bounds()
        assert chart.x_bounds == (None, None)

    def test_rejects_inverted_bounds(self) -> None:
        """Test min must be below max."""
        with pytest.raises(InvalidConfiguration):
            ChartBuffer("Speed").set_x_bounds(5.0, 5.0)
        with pytest.raises(InvalidConfiguration):
            ChartBuffer("Speed").set_y_bounds(2.0, -2.0)


class TestRenderChart:
    """Test rendering to an image file."""

    def test_writes_png(self, tmp_path: Path) -> None:
        """Test a chart is rendered to disk."""
        chart = ChartBuffer("Speed", x_label="t", y_label="m/s").set_y_bounds(-1.0, 12.0)
        for y in [1.0, 4.0, 9.0]:
            chart.update_y(y)
        output = render_chart(chart, tmp_path / "charts" / "speed.png")
        assert output.exists()
        assert output.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"

    def test_dark_mode_with_reference(self, tmp_path: Path) -> None:
        """Test the raw-behind-filtered layout in dark mode."""
        raw = ChartBuffer("raw")
        filtered = ChartBuffer("filtered")
        for y in [2.0, 0.0, 2.0]:
            raw.update_y(y)
            filtered.update_y(1.0)
        output = render_chart(filtered, tmp_path / "dark.png", dark_mode=True, reference=raw)
        assert output.stat().st_size > 0

    def test_light_mode_with_labels(self, tmp_path: Path) -> None:
        """Test the default light style renders titled and labelled axes."""
        raw = ChartBuffer("raw", x_label="sample", y_label="rate")
        filtered = ChartBuffer("filtered", x_label="sample", y_label="rate")
        for y in [2.0, 0.0, 2.0]:
            raw.update_y(y)
            filtered.update_y(1.0)
        output = render_chart(filtered, tmp_path / "light.png", dark_mode=False, reference=raw)
        assert output.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"

    def test_does_not_touch_pyplot(self, tmp_path: Path) -> None:
        """Test rendering leaves no figures open in pyplot's figure manager."""
        import matplotlib.pyplot as plt

        before = plt.get_fignums()
        render_chart(ChartBuffer("Speed"), tmp_path / "speed.png")
        assert plt.get_fignums() == before
