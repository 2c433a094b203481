# symposium

A threaded simulation of the dining philosophers problem. The philosophers sit
in a ring, and each one shares a fork with each of its neighbours. Every
philosopher runs in its own thread. It takes both of its forks, eats, sleeps
and thinks, and then starts again.

A monitor thread watches the table. The simulation ends in one of two ways:

- a philosopher goes longer than the time to die without starting a meal, and the monitor reports that it died;
- every philosopher has eaten the required number of meals.

## Installation

```
pip install .
```

## Usage

```
symposium NUMBER_OF_PHILOSOPHERS TIME_TO_DIE TIME_TO_EAT TIME_TO_SLEEP [MEALS]
```

You can also run `python -m symposium.simulation` with the same arguments.

All times are in milliseconds.

- `NUMBER_OF_PHILOSOPHERS` must be positive.
- `TIME_TO_DIE` must be positive.
- `TIME_TO_EAT` must not be negative.
- `TIME_TO_SLEEP` must not be negative.
- `MEALS` is optional. If you give it, the simulation ends once every philosopher has eaten this many times. It must be positive. The value `-1` means there is no limit, which is the same as leaving it out.

Arguments are read leniently. Leading whitespace is skipped and one sign is
accepted. Digits are read up to the first character that is not a digit.
Text that has no digits counts as `0`.

The command exits with status 1 if it is given anything other than four or
five arguments, or if a value is out of range. Otherwise it runs the
simulation and exits with status 0.

Each event is printed on its own line. A line holds three things:

1. the milliseconds since that philosopher started;
2. the philosopher's number, counting from 1;
3. the event.

The events are `has taken a fork`, `is eating`, `is sleeping`, `is thinking`
and `died`. For example:

```
0 2 has taken a fork
0 2 has taken a fork
0 2 is eating
200 2 is sleeping
...
410 1 died
```

The odd-numbered philosophers wait for a tenth of the time to die before they
first reach for their forks.

A lone philosopher has only one fork. It takes the fork, waits for the time
to die, and then dies.

## Library use

```python
import sys
from symposium.config import parse_config
from symposium.simulation import run

dead = run(parse_config(["4", "410", "200", "200", "3"]), sys.stdout)
```

- `symposium.config` provides `Config`, a frozen dataclass that checks its values and raises `ConfigError` if one is invalid. It also provides `parse_config`.
- `symposium.simulation.run` writes the log to the stream you pass it. It returns the `Philosopher` that died, or `None` if everyone finished their meals. The same module provides the pieces that `run` is built from: `eat`, `sleep`, `think`, `routine`, `monitor` and `lone_philosopher`.
- `symposium.table` provides three classes:
  - `Table` seats the philosophers in a ring.
  - `Philosopher` holds one seat with its two forks, its start time and the time of its last meal.
  - `SharedState` holds the stop flag, the print lock and the count of philosophers that still have meals to eat.
- `symposium.utils` provides the `State` enum of events, `parse_int` and `now_ms`.