"""frc_streams - Signal Streams and Utilities for FRC Robot Code

A small toolkit for robot code built around composable streaming filters.
Raw samples come from a producer (sensor, joystick axis, tunable value), flow
through one or more stateful filters, and the result goes to a consumer
(control loop, log, chart).

## Modules

### Core
- `filters.py` - Filter abstraction, exponential moving average, filter chains
- `streams.py` - Pull-based number streams that filters attach to
- `exceptions.py` - InvalidConfiguration, raised at construction time

### Helpers
- `geometry.py` - Angle normalization, Angle and Vector2D value types
- `tunable.py` - Live-tunable named values backed by a key-value store
- `gamepad.py` - Controller-independent gamepad readings and derived values

### Charts & Data
- `chart.py` - Bounded chart buffer and PNG rendering
- `plot_styles.py` - Shared plotting styles
- `data_io.py` - CSV sample loading and filtered output
- `cli.py` - Command-line filtering of recorded logs

## Quick Start

```python
from frc_streams import ExpMovingAverage, NumberStream

speed = NumberStream(read_encoder_rate).filtered(ExpMovingAverage(8.0))
drive(speed.get())
```

Or filter a recorded log from the command line:
```bash
python -m frc_streams encoder_log.csv --column rate --ema 8 --plot rate.png
```

## Configuration

Defaults (EMA weight, trigger threshold, chart size and colors) live in
`config.py`.

## Version

0.1.0 - Initial implementation
"""

__version__ = "0.1.0"

from .chart import ChartBuffer, render_chart
from .exceptions import InvalidConfiguration
from .filters import ExpMovingAverage, Filter, FilterChain, compose, filter_samples
from .gamepad import Gamepad, GamepadReading, gamepad_axis
from .geometry import Angle, Vector2D, normalize_degrees, normalize_radians
from .streams import NumberStream
from .tunable import MemoryStore, TunableBoolean, TunableNumber, TunableString, ValueStore

__all__ = [
    "Filter",
    "ExpMovingAverage",
    "FilterChain",
    "compose",
    "filter_samples",
    "NumberStream",
    "InvalidConfiguration",
    "Angle",
    "Vector2D",
    "normalize_radians",
    "normalize_degrees",
    "ValueStore",
    "MemoryStore",
    "TunableNumber",
    "TunableString",
    "TunableBoolean",
    "Gamepad",
    "GamepadReading",
    "gamepad_axis",
    "ChartBuffer",
    "render_chart",
]
