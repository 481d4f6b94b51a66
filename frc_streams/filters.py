"""Streaming filters for robot signals.

This module provides stateful ``float -> float`` transforms that sit between
a producer of raw samples (sensor, joystick axis, another filter) and a
consumer (control loop, logger, chart):
- Filter: the abstract capability, one sample in, one sample out
- ExpMovingAverage: single-pole exponential smoothing
- FilterChain: ordered composition of filters with independent state

Filters are not synchronized. Each instance is meant to be owned by a single
control loop; callers sharing one across threads must serialize access.
"""

import logging
import numbers
from abc import ABC, abstractmethod
from typing import Any, Iterable, Iterator, List, Sequence

import numpy as np

from .config import MIN_EMA_WEIGHT
from .exceptions import InvalidConfiguration


def _is_real(value: Any) -> bool:
    """Real number check that accepts numpy scalars and rejects bool."""
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


class Filter(ABC):
    """Stateful unary transform over a stream of samples.

    ``apply`` is a pure function of (current state, sample) that returns the
    next output and updates the state as a side effect. All validation
    happens at construction time, so ``apply`` never raises.
    """

    @abstractmethod
    def apply(self, sample: float) -> float:
        """Consume the next raw sample and return the next filtered sample."""

    def reset(self) -> None:
        """Return the filter to its initial state (no-op for stateless filters)."""

    def then(self, other: "Filter") -> "FilterChain":
        """Chain ``other`` after this filter."""
        return FilterChain([self, other])

    def __call__(self, sample: float) -> float:
        return self.apply(sample)


class ExpMovingAverage(Filter):
    """Exponential moving average (single-pole IIR low-pass filter).

    Update rule:
        last_value = last_value + (sample - last_value) / weight

    This is the textbook ``alpha * sample + (1 - alpha) * previous`` with
    ``alpha = 1 / weight``. The higher the weight, the longer it takes the
    output to follow the input.

    The filter is not time dependent: the output depends only on the number
    of calls, not on the wall-clock gap between them. Calling it at a
    different rate gives a proportionally different effective time constant.

    Attributes:
        weight: Smoothing constant (> 1), fixed after construction.
        initial: Seed value the output starts from and returns to on reset.
        last_value: Most recent filtered output.
    """

    def __init__(self, weight: float, initial: float = 0.0) -> None:
        """Initialize the moving average.

        Args:
            weight: Smoothing constant, must be strictly greater than 1.
                A weight of 1 would replace the state with every input.
            initial: Value of the output before the first sample (default: 0.0).

        Raises:
            InvalidConfiguration: If weight is not a number greater than 1,
                or initial is not a number.
        """
        if not _is_real(weight):
            raise InvalidConfiguration(f"weight must be a number, got {weight!r}")
        # NaN fails this comparison
        if not weight > MIN_EMA_WEIGHT:
            raise InvalidConfiguration(f"weight must be > {MIN_EMA_WEIGHT}, got {weight}")
        if not _is_real(initial):
            raise InvalidConfiguration(f"initial must be a number, got {initial!r}")

        self._weight = float(weight)
        self.initial = float(initial)
        self.last_value = self.initial

    @property
    def weight(self) -> float:
        return self._weight

    @property
    def alpha(self) -> float:
        """Equivalent blend factor of the canonical EMA formulation (1 / weight)."""
        return 1.0 / self._weight

    def apply(self, sample: float) -> float:
        delta = sample - self.last_value
        self.last_value = self.last_value + delta / self._weight
        return self.last_value

    def reset(self) -> None:
        self.last_value = self.initial

    def __repr__(self) -> str:
        return f"ExpMovingAverage(weight={self._weight}, last_value={self.last_value})"


class FilterChain(Filter):
    """Sequential composition of filters.

    ``chain.apply(x)`` equals ``fn.apply(... f2.apply(f1.apply(x)))``. Each
    stage keeps its own state; the chain never reorders or merges stages.
    An empty chain passes samples through unchanged.
    """

    def __init__(self, filters: Iterable[Filter] = ()) -> None:
        """Build the chain.

        Args:
            filters: Stages in application order.

        Raises:
            InvalidConfiguration: If any stage is not a Filter. No partial
                chain is created.
        """
        stages: List[Filter] = list(filters)
        for index, stage in enumerate(stages):
            if not isinstance(stage, Filter):
                raise InvalidConfiguration(
                    f"stage {index} is not a Filter: {type(stage).__name__}"
                )

        self._stages = tuple(stages)
        logging.debug(f"Built filter chain: {self!r}")

    @property
    def stages(self) -> Sequence[Filter]:
        return self._stages

    def apply(self, sample: float) -> float:
        value = sample
        for stage in self._stages:
            value = stage.apply(value)
        return value

    def reset(self) -> None:
        for stage in self._stages:
            stage.reset()

    def then(self, other: Filter) -> "FilterChain":
        return FilterChain([*self._stages, other])

    def __len__(self) -> int:
        return len(self._stages)

    def __iter__(self) -> Iterator[Filter]:
        return iter(self._stages)

    def __repr__(self) -> str:
        inner = " -> ".join(repr(stage) for stage in self._stages) or "identity"
        return f"FilterChain({inner})"


def compose(*filters: Filter) -> FilterChain:
    """Compose filters left to right into a single filter."""
    return FilterChain(filters)


def filter_samples(filt: Filter, samples: Iterable[float]) -> np.ndarray:
    """Run samples through a filter in order.

    Args:
        filt: Filter to apply. Its state is advanced by every sample.
        samples: Raw samples in arrival order.

    Returns:
        Array of filtered outputs, same length as the input.

    Example:
        >>> filter_samples(ExpMovingAverage(2.0), [10.0, 10.0, 10.0])
        array([5.  , 7.5 , 8.75])
    """
    return np.array([filt.apply(float(sample)) for sample in samples], dtype=float)
