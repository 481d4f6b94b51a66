"""Configuration parameters for the frc_streams toolkit.

This module centralizes all default parameters including:
- Filter defaults
- Gamepad thresholds
- Chart buffer and rendering settings
- CLI / CSV conventions

All parameters are documented with their purpose and valid ranges.
"""

# ============================================================================
# Filter Parameters
# ============================================================================

DEFAULT_EMA_WEIGHT = 4.0
"""Default weight for the exponential moving average (must be > 1).

Each call moves the output 1/weight of the way toward the new sample:
    output = output + (sample - output) / weight

Higher weight = smoother but slower response
Lower weight = faster response but more noise

Rationale:
- 4.0 (alpha = 0.25) is a reasonable starting point for joystick smoothing
  in a 50 Hz control loop: ~90% of a step is reached after 8 calls (160 ms)
- Tune per signal; sensor streams usually want larger values
"""

MIN_EMA_WEIGHT = 1.0
"""Exclusive lower bound for EMA weights.

A weight of exactly 1.0 replaces the state with the input on every call,
which degenerates to a pass-through.
"""


# ============================================================================
# Gamepad Parameters
# ============================================================================

TRIGGER_PRESSED_THRESHOLD = 1.0 / 4.0
"""Amount an analog trigger must be pressed (range: [0, 1]) to count as pressed."""


# ============================================================================
# Chart Parameters
# ============================================================================

CHART_DEFAULT_MAX_SIZE = None
"""Default maximum number of (x, y) points kept by a chart buffer.

None = unbounded. Positive int = drop oldest points beyond this size.
"""

CHART_FIGSIZE = (6.94, 6.94)
"""Rendered chart size in inches (694 x 694 px at 100 dpi)."""

CHART_DPI = 100
"""Rendered chart resolution in dots per inch."""


# ============================================================================
# Visualization Colors
# ============================================================================

STREAM_RED = "#e4322b"
"""Primary color - used for filtered signals."""

STREAM_BLUE = "#2374f7"
"""Secondary color - used for raw signals."""

STREAM_CREAM = "#fffdee"
"""Light color for text and labels on dark backgrounds."""

STREAM_GREY = "#686a5f"
"""Neutral color for guides, grids, and secondary elements."""

STREAM_DARK_BLUE = "#0d1b2a"
"""Dark background color for dark mode charts."""

# Terminal color codes (ANSI escape sequences)
TERM_RED = "\033[38;2;228;50;43m"
"""Terminal color code for the primary red (RGB: 228, 50, 43)."""

TERM_BLUE = "\033[38;2;35;116;247m"
"""Terminal color code for the secondary blue (RGB: 35, 116, 247)."""

TERM_RESET = "\033[0m"
"""Terminal color reset code."""


# ============================================================================
# CSV Conventions
# ============================================================================

CSV_SAMPLE_COLUMN = "sample"
"""Default input column holding raw samples."""

CSV_TIME_COLUMN = "timestamp"
"""Optional input column holding sample times.

When present, charts plot samples against it; otherwise against the sample
index. The filtered output CSV is always indexed by sample number.
"""

CSV_OUTPUT_HEADERS = ["index", "raw", "filtered"]
"""Column headers of the filtered output CSV."""
