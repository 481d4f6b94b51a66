"""CSV loading and writing for recorded sample streams."""

import csv
import logging
from pathlib import Path
from typing import Dict, List, Optional

import numpy as np

from .config import CSV_OUTPUT_HEADERS, CSV_TIME_COLUMN


def load_csv_to_dict(csv_path: Path) -> Dict[str, np.ndarray]:
    """Load CSV file into dictionary of numpy arrays.

    Automatically converts numeric values to floats. Non-numeric values
    become NaN.

    Args:
        csv_path: Path to CSV file.

    Returns:
        Dictionary mapping column names to numpy arrays.

    Raises:
        FileNotFoundError: If the CSV file does not exist.

    Example:
        >>> data = load_csv_to_dict(Path("encoder_log.csv"))
        >>> print(data.keys())
        dict_keys(['timestamp', 'sample'])
    """
    csv_path = Path(csv_path)
    if not csv_path.exists():
        raise FileNotFoundError(f"CSV file not found: {csv_path}")

    with open(csv_path, newline="") as f:
        reader = csv.DictReader(f)
        data: Dict[str, List[float]] = {name: [] for name in reader.fieldnames or []}
        for row in reader:
            for key, value in row.items():
                if key not in data:
                    continue
                try:
                    data[key].append(float(value))
                except (ValueError, TypeError):
                    data[key].append(np.nan)

    return {key: np.array(values, dtype=float) for key, values in data.items()}


def load_samples(csv_path: Path, column: str) -> np.ndarray:
    """Load one column of a CSV file as raw samples.

    Raises:
        FileNotFoundError: If the CSV file does not exist.
        ValueError: If the column is missing.
    """
    data = load_csv_to_dict(csv_path)
    if column not in data:
        raise ValueError(
            f"Column '{column}' not found in {csv_path} (columns: {', '.join(data) or 'none'})"
        )
    samples = data[column]
    nan_count = int(np.isnan(samples).sum())
    if nan_count:
        logging.warning(f"{nan_count} non-numeric value(s) in column '{column}' read as NaN")
    logging.debug(f"Loaded {len(samples)} samples from {csv_path}")
    return samples


def write_filtered_csv(output_path: Path, raw: np.ndarray, filtered: np.ndarray) -> Path:
    """Write raw and filtered samples side by side.

    Raises:
        ValueError: If the arrays differ in length.
    """
    if len(raw) != len(filtered):
        raise ValueError(f"Length mismatch: {len(raw)} raw vs {len(filtered)} filtered samples")

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(CSV_OUTPUT_HEADERS)
        for index, (raw_value, filtered_value) in enumerate(zip(raw, filtered)):
            writer.writerow([index, float(raw_value), float(filtered_value)])

    logging.debug(f"Wrote {len(raw)} rows to {output_path}")
    return output_path


def load_timestamps(csv_path: Path, column: str = CSV_TIME_COLUMN) -> Optional[np.ndarray]:
    """Load the time column of a CSV file if it has one.

    Returns:
        Array of sample times, or None if the column is missing or holds
        non-numeric values.

    Raises:
        FileNotFoundError: If the CSV file does not exist.
    """
    times = load_csv_to_dict(csv_path).get(column)
    if times is None:
        return None
    if np.isnan(times).any():
        logging.warning(f"Column '{column}' has non-numeric values; using sample index instead")
        return None
    return times
