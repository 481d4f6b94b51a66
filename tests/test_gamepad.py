"""Test gamepad readings, derived values and axis streams."""

import pytest

from frc_streams.filters import ExpMovingAverage
from frc_streams.gamepad import Gamepad, GamepadReading, gamepad_axis
from frc_streams.geometry import Vector2D


class ScriptedGamepad(Gamepad):
    """Gamepad returning a scripted sequence of readings."""

    def __init__(self, *readings: GamepadReading) -> None:
        self.readings = list(readings)
        self.rumble = 0.0

    def read(self) -> GamepadReading:
        if len(self.readings) > 1:
            return self.readings.pop(0)
        return self.readings[0]

    def set_rumble(self, intensity: float) -> None:
        self.rumble = intensity


class SilentGamepad(Gamepad):
    def read(self) -> GamepadReading:
        return GamepadReading()


class TestGamepadReading:
    """Test derived values computed from a reading."""

    def test_defaults_are_neutral(self) -> None:
        """Test an empty reading reports nothing pressed."""
        reading = GamepadReading()
        assert reading.left_stick == Vector2D(0.0, 0.0)
        assert reading.dpad == Vector2D(0.0, 0.0)
        assert not reading.left_trigger_pressed
        assert not reading.right_trigger_pressed

    def test_sticks_as_vectors(self) -> None:
        """Test stick axes combine into vectors."""
        reading = GamepadReading(left_x=0.5, left_y=-0.25, right_x=-1.0, right_y=1.0)
        assert reading.left_stick == Vector2D(0.5, -0.25)
        assert reading.right_stick == Vector2D(-1.0, 1.0)

    @pytest.mark.parametrize(
        "kwargs,expected",
        [
            ({"dpad_up": True}, (0.0, 1.0)),
            ({"dpad_down": True}, (0.0, -1.0)),
            ({"dpad_left": True}, (-1.0, 0.0)),
            ({"dpad_right": True, "dpad_up": True}, (1.0, 1.0)),
            ({"dpad_left": True, "dpad_right": True}, (0.0, 0.0)),
        ],
    )
    def test_dpad_as_stick(self, kwargs, expected) -> None:
        """Test the D-pad is read as a stick."""
        reading = GamepadReading(**kwargs)
        assert (reading.dpad_x, reading.dpad_y) == expected
        assert tuple(reading.dpad) == expected

    def test_trigger_threshold_is_exclusive(self) -> None:
        """Test triggers count as pressed strictly above 0.25."""
        assert not GamepadReading(left_trigger=0.25).left_trigger_pressed
        assert GamepadReading(left_trigger=0.26).left_trigger_pressed
        assert GamepadReading(right_trigger=1.0).right_trigger_pressed

    def test_to_dict_labels(self) -> None:
        """Test telemetry labels."""
        values = GamepadReading(left_x=0.3, start_button=True).to_dict()
        assert values["Left Stick X"] == 0.3
        assert values["Button Start"] is True
        assert values["Face Button Top"] is False
        assert len(values) == 20


class TestGamepad:
    """Test the Gamepad base class."""

    def test_name_defaults_to_class_name(self) -> None:
        """Test the default device name."""
        assert SilentGamepad().name == "SilentGamepad"

    def test_default_rumble_is_ignored(self) -> None:
        """Test devices without rumble accept the call."""
        SilentGamepad().set_rumble(0.5)

    def test_rumble_override(self) -> None:
        """Test an implementation receiving rumble requests."""
        pad = ScriptedGamepad(GamepadReading())
        pad.set_rumble(0.75)
        assert pad.rumble == 0.75

    def test_telemetry_includes_name(self) -> None:
        """Test the telemetry mapping."""
        values = ScriptedGamepad(GamepadReading(right_y=-0.5)).telemetry()
        assert values["Gamepad Name"] == "ScriptedGamepad"
        assert values["Right Stick Y"] == -0.5

    def test_cannot_instantiate_abstract(self) -> None:
        """Test read must be implemented."""
        with pytest.raises(TypeError):
            Gamepad()  # type: ignore[abstract]


class TestGamepadAxis:
    """Test gamepad axes as number streams."""

    def test_axis_stream_reads_each_pull(self) -> None:
        """Test each get samples the device again."""
        pad = ScriptedGamepad(GamepadReading(left_y=0.2), GamepadReading(left_y=0.4))
        stream = gamepad_axis(pad, "left_y")
        assert stream.get() == 0.2
        assert stream.get() == 0.4

    def test_derived_axis(self) -> None:
        """Test derived values can be streamed too."""
        pad = ScriptedGamepad(GamepadReading(dpad_left=True))
        assert gamepad_axis(pad, "dpad_x").get() == -1.0

    def test_filtered_axis(self) -> None:
        """Test smoothing a joystick axis."""
        pad = ScriptedGamepad(GamepadReading(right_x=1.0))
        smooth = gamepad_axis(pad, "right_x").filtered(ExpMovingAverage(4.0))
        assert smooth.get() == 0.25
        assert smooth.get() == pytest.approx(0.4375)

    def test_unknown_axis_fails_early(self) -> None:
        """Test typos are caught when the stream is built."""
        with pytest.raises(AttributeError):
            gamepad_axis(SilentGamepad(), "left_z")
