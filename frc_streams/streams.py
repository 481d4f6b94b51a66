"""Pull-based numeric streams.

A NumberStream wraps any zero-argument producer (sensor read, joystick axis,
tunable value) so filters can be attached without the filter knowing the
concrete producer type.
"""

from typing import Callable

from .filters import Filter, FilterChain


class NumberStream:
    """Stream of floats pulled from a producer on every ``get()``.

    Example:
        >>> raw = NumberStream(lambda: read_encoder())
        >>> smooth = raw.filtered(ExpMovingAverage(8.0))
        >>> speed = smooth.get()
    """

    def __init__(self, source: Callable[[], float]) -> None:
        self._source = source

    @classmethod
    def constant(cls, value: float) -> "NumberStream":
        return cls(lambda: value)

    def get(self) -> float:
        """Pull the next value from the producer."""
        return float(self._source())

    def filtered(self, *filters: Filter) -> "NumberStream":
        """New stream that pushes every value through the given filters in order.

        The filters are owned by the returned stream; pulling from it advances
        their state once per ``get()``.
        """
        chain = FilterChain(filters)
        return NumberStream(lambda: chain.apply(self.get()))

    def map(self, fn: Callable[[float], float]) -> "NumberStream":
        """New stream applying a plain function to every value."""
        return NumberStream(lambda: fn(self.get()))

    def __call__(self) -> float:
        return self.get()
