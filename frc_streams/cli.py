"""
Command-line interface for filtering recorded sample streams.

Reads a CSV log of raw samples (e.g. a joystick axis or encoder rate recorded
from the robot), runs one column through a chain of exponential moving
averages, and writes the raw and filtered values side by side. Optionally
renders a chart of the result to an image file.
"""

import argparse
import logging
from pathlib import Path
from typing import List, Optional, Tuple

import numpy as np

from .chart import ChartBuffer, render_chart
from .config import (
    CSV_SAMPLE_COLUMN,
    CSV_TIME_COLUMN,
    DEFAULT_EMA_WEIGHT,
    TERM_BLUE,
    TERM_RED,
    TERM_RESET,
)
from .data_io import load_samples, load_timestamps, write_filtered_csv
from .exceptions import InvalidConfiguration
from .filters import ExpMovingAverage, FilterChain, filter_samples


class CustomFormatter(logging.Formatter):
    """Custom logging formatter that removes timestamps from INFO messages.

    INFO messages are shown bare for clean console output; WARNING, ERROR and
    DEBUG keep their timestamp and level.
    """

    def format(self, record: logging.LogRecord) -> str:
        if record.levelno == logging.INFO:
            return record.getMessage()
        return f"{self.formatTime(record, self.datefmt)} - {record.levelname} - {record.getMessage()}"


def setup_logging(verbose: bool = False) -> None:
    """Configure logging based on verbosity level.

    Args:
        verbose: If True, show all levels with timestamps. If False, show INFO
                 without timestamps and WARNING/ERROR with timestamps.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        return

    logger = logging.getLogger()
    logger.setLevel(logging.INFO)
    if any(isinstance(h.formatter, CustomFormatter) for h in logger.handlers):
        return
    handler = logging.StreamHandler()
    handler.setFormatter(CustomFormatter(datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="frc_streams",
        description="Filter a recorded sample stream with exponential moving averages",
    )
    parser.add_argument("input", help="CSV file containing raw samples")
    parser.add_argument(
        "--column",
        default=CSV_SAMPLE_COLUMN,
        help=f"Column holding the raw samples (default: {CSV_SAMPLE_COLUMN})",
    )
    parser.add_argument(
        "--ema",
        type=float,
        action="append",
        metavar="WEIGHT",
        help=f"Add an EMA stage with this weight (> 1). Repeat to chain stages. "
        f"Default: one stage of {DEFAULT_EMA_WEIGHT}",
    )
    parser.add_argument(
        "-o", "--output", help="Output CSV path (default: <input>_filtered.csv)"
    )
    parser.add_argument(
        "--time-column",
        default=CSV_TIME_COLUMN,
        help=f"Column holding sample times for the chart x axis, if present "
        f"(default: {CSV_TIME_COLUMN})",
    )
    parser.add_argument("--plot", help="Render a chart of the filtered signal to this image")
    parser.add_argument(
        "--max-points",
        type=int,
        default=None,
        help="Keep only the last N points in the chart (default: all)",
    )
    parser.add_argument("--dark", action="store_true", help="Dark mode chart")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging with timestamps"
    )
    return parser


def build_chain(weights: Optional[List[float]]) -> FilterChain:
    """Build the EMA chain for the given weights (default weight if none).

    Raises:
        InvalidConfiguration: If any weight is <= 1. No chain is built.
    """
    if not weights:
        weights = [DEFAULT_EMA_WEIGHT]
    return FilterChain(ExpMovingAverage(weight) for weight in weights)


def build_charts(
    column: str, x_label: str, max_points: Optional[int]
) -> Tuple[ChartBuffer, ChartBuffer]:
    """Create the (filtered, raw) chart buffers for the CLI plot.

    Raises:
        InvalidConfiguration: If max_points is not a positive int or None.
    """
    filtered_chart = ChartBuffer(
        f"{column} (filtered)", x_label=x_label, y_label=column, max_size=max_points
    )
    raw_chart = ChartBuffer(f"{column} (raw)", x_label=x_label, y_label=column, max_size=max_points)
    return filtered_chart, raw_chart


def fill_chart(chart: ChartBuffer, values: np.ndarray, times: Optional[np.ndarray]) -> None:
    """Load a series into a chart, against times when given, else the index."""
    if times is None:
        times = np.arange(len(values), dtype=float)
    if not len(values):
        return
    chart.reset(float(times[0]), float(values[0]))
    for x, y in zip(times[1:], values[1:]):
        chart.update(float(x), float(y))


def run(args: argparse.Namespace) -> int:
    """Execute the filter command.

    Nothing is written unless the whole configuration (filter chain and
    chart size) is valid and the input loads.

    Returns:
        Exit code (0 for success)
    """
    input_path = Path(args.input)
    output_path = (
        Path(args.output)
        if args.output
        else input_path.with_name(f"{input_path.stem}_filtered.csv")
    )

    try:
        chain = build_chain(args.ema)
        charts = None
        if args.plot:
            charts = build_charts(args.column, args.time_column, args.max_points)
        raw = load_samples(input_path, args.column)
        filtered = filter_samples(chain, raw)
        write_filtered_csv(output_path, raw, filtered)

        if charts is not None:
            filtered_chart, raw_chart = charts
            times = load_timestamps(input_path, args.time_column)
            if times is None:
                filtered_chart.x_label = "sample"
                raw_chart.x_label = "sample"
            fill_chart(filtered_chart, filtered, times)
            fill_chart(raw_chart, raw, times)
            render_chart(filtered_chart, Path(args.plot), dark_mode=args.dark, reference=raw_chart)
            logging.info(f"{TERM_BLUE}✓ Chart saved to {args.plot}{TERM_RESET}")
    except InvalidConfiguration as e:
        logging.error(f"{TERM_RED}Invalid configuration: {e}{TERM_RESET}")
        return 1
    except (FileNotFoundError, ValueError) as e:
        logging.error(f"{TERM_RED}Error: {e}{TERM_RESET}")
        return 1

    logging.info(
        f"{TERM_BLUE}✓ Filtered {len(raw)} samples through {chain!r} -> {output_path}{TERM_RESET}"
    )
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, configure logging and run the command."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    return run(args)
