"""Live-tunable named values.

Tunable values are named entries in an explicit key-value store. Creating one
writes its default into the store, so the value is always initialized when
the control loop first reads it. A dashboard (or a test) can then change the
entry while the robot runs, and ``reset()`` puts the default back.

There is no global registry: every tunable is bound to the store it was
given.
"""

import logging
import numbers
import threading
from typing import Any, Dict, Generic, Optional, Protocol, Tuple, Type, TypeVar

from .exceptions import InvalidConfiguration

T = TypeVar("T")


class ValueStore(Protocol):
    """Named key-value store that tunable values read and write."""

    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...


class MemoryStore:
    """In-process store backed by a dict.

    Guarded by a lock so a dashboard thread and the control loop can share it.
    """

    def __init__(self, initial: Optional[Dict[str, Any]] = None) -> None:
        self._values: Dict[str, Any] = dict(initial or {})
        self._lock = threading.Lock()

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._values[key] = value

    def keys(self) -> Tuple[str, ...]:
        with self._lock:
            return tuple(self._values)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._values


class Tunable(Generic[T]):
    """Named value in a ValueStore with a default it can be reset to.

    Subclasses set ``value_types`` to the accepted Python types.
    """

    value_types: Tuple[Type, ...] = ()

    def __init__(self, store: ValueStore, key: str, default: T) -> None:
        """Bind to ``key`` and force-write the default into the store.

        Raises:
            InvalidConfiguration: If the key is empty or the default has the
                wrong type.
        """
        if not key:
            raise InvalidConfiguration("tunable key must be a non-empty string")
        self._store = store
        self._key = key
        self._default = self._validate(default)
        self._store.set(key, self._default)

    def _accepts(self, value: Any) -> bool:
        # bool is an int subclass; only accept it where it is listed explicitly
        if isinstance(value, bool) and bool not in self.value_types:
            return False
        return isinstance(value, self.value_types)

    def _validate(self, value: Any) -> T:
        if not self._accepts(value):
            raise InvalidConfiguration(
                f"{type(self).__name__} '{self._key}' expects "
                f"{'/'.join(t.__name__ for t in self.value_types)}, got {type(value).__name__}"
            )
        return value

    @property
    def key(self) -> str:
        return self._key

    @property
    def default(self) -> T:
        return self._default

    def get(self) -> T:
        """Current value in the store.

        Falls back to the default when the entry is missing or holds a value
        of the wrong type (a dashboard can write anything into the store).
        """
        value = self._store.get(self._key, self._default)
        if value is None or not self._accepts(value):
            return self._default
        return value

    def set(self, value: T) -> None:
        """Write a new value into the store.

        Raises:
            InvalidConfiguration: If the value has the wrong type.
        """
        self._store.set(self._key, self._validate(value))
        logging.debug(f"Tunable '{self._key}' set to {value!r}")

    def reset(self) -> None:
        """Write the default back into the store."""
        self._store.set(self._key, self._default)
        logging.debug(f"Tunable '{self._key}' reset to {self._default!r}")

    def __call__(self) -> T:
        return self.get()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._key!r}, default={self._default!r})"


class TunableNumber(Tunable[float]):
    """Tunable float; can be used directly as a NumberStream source."""

    value_types = (numbers.Real,)

    def get(self) -> float:
        return float(super().get())


class TunableString(Tunable[str]):
    value_types = (str,)


class TunableBoolean(Tunable[bool]):
    value_types = (bool,)
