"""Gamepad capability set.

A gamepad is anything that can produce a GamepadReading: a snapshot of raw
stick, trigger, and button values in a controller-independent layout. How a
particular controller maps its hardware indices onto that layout is left to
the concrete Gamepad implementation.

Derived values (sticks as vectors, the D-pad as a stick, trigger presses) are
computed from the reading, so every implementation gets them for free.
"""

from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from typing import Dict, Union

from .config import TRIGGER_PRESSED_THRESHOLD
from .geometry import Vector2D
from .streams import NumberStream

# Telemetry labels for each raw field, in display order
READING_LABELS = {
    "left_x": "Left Stick X",
    "left_y": "Left Stick Y",
    "right_x": "Right Stick X",
    "right_y": "Right Stick Y",
    "dpad_up": "D-Pad Up",
    "dpad_down": "D-Pad Down",
    "dpad_left": "D-Pad Left",
    "dpad_right": "D-Pad Right",
    "left_bumper": "Bumper Left",
    "right_bumper": "Bumper Right",
    "left_trigger": "Trigger Left",
    "right_trigger": "Trigger Right",
    "top_button": "Face Button Top",
    "bottom_button": "Face Button Bottom",
    "left_button": "Face Button Left",
    "right_button": "Face Button Right",
    "select_button": "Button Select",
    "start_button": "Button Start",
    "left_stick_button": "Left Stick Button",
    "right_stick_button": "Right Stick Button",
}


@dataclass(frozen=True)
class GamepadReading:
    """Snapshot of every raw gamepad input.

    Sticks are in [-1, 1] with +y pointing forward. Triggers are in [0, 1].
    Unsupported inputs stay at their defaults and are never "pressed".
    """

    # Sticks
    left_x: float = 0.0
    left_y: float = 0.0
    right_x: float = 0.0
    right_y: float = 0.0

    # D-Pad
    dpad_up: bool = False
    dpad_down: bool = False
    dpad_left: bool = False
    dpad_right: bool = False

    # Bumpers and triggers
    left_bumper: bool = False
    right_bumper: bool = False
    left_trigger: float = 0.0
    right_trigger: float = 0.0

    # Face buttons
    top_button: bool = False
    bottom_button: bool = False
    left_button: bool = False
    right_button: bool = False

    # Start / Select
    select_button: bool = False
    start_button: bool = False

    # Stick buttons
    left_stick_button: bool = False
    right_stick_button: bool = False

    @property
    def left_stick(self) -> Vector2D:
        return Vector2D(self.left_x, self.left_y)

    @property
    def right_stick(self) -> Vector2D:
        return Vector2D(self.right_x, self.right_y)

    @property
    def dpad_x(self) -> float:
        """D-pad x position as if it were a stick."""
        return (1.0 if self.dpad_right else 0.0) - (1.0 if self.dpad_left else 0.0)

    @property
    def dpad_y(self) -> float:
        """D-pad y position as if it were a stick."""
        return (1.0 if self.dpad_up else 0.0) - (1.0 if self.dpad_down else 0.0)

    @property
    def dpad(self) -> Vector2D:
        return Vector2D(self.dpad_x, self.dpad_y)

    @property
    def left_trigger_pressed(self) -> bool:
        return self.left_trigger > TRIGGER_PRESSED_THRESHOLD

    @property
    def right_trigger_pressed(self) -> bool:
        return self.right_trigger > TRIGGER_PRESSED_THRESHOLD

    def to_dict(self) -> Dict[str, Union[float, bool]]:
        """Labelled raw values for telemetry."""
        raw = asdict(self)
        return {label: raw[field] for field, label in READING_LABELS.items()}


class Gamepad(ABC):
    """Input device producing GamepadReading snapshots."""

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def read(self) -> GamepadReading:
        """Sample every input of the device."""

    def set_rumble(self, intensity: float) -> None:
        """Rumble the device (ignored by devices without rumble)."""

    def telemetry(self) -> Dict[str, Union[str, float, bool]]:
        """Name plus every labelled raw value, for a telemetry sink."""
        values: Dict[str, Union[str, float, bool]] = {"Gamepad Name": self.name}
        values.update(self.read().to_dict())
        return values


def gamepad_axis(gamepad: Gamepad, axis: str) -> NumberStream:
    """Stream one numeric attribute of a gamepad's readings.

    Args:
        gamepad: Device to read on every ``get()``.
        axis: Any numeric GamepadReading attribute, e.g. "left_y",
            "right_trigger" or "dpad_x".

    Raises:
        AttributeError: If the reading has no such attribute.
    """
    # Fail at construction instead of on the first pull
    getattr(GamepadReading(), axis)
    return NumberStream(lambda: float(getattr(gamepad.read(), axis)))
