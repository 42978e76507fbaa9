# philosophers

A simulation of the dining philosophers problem. Each philosopher runs in
its own thread and shares one fork with each of its two neighbours. A
monitor thread watches for a philosopher starving, or for every philosopher
having eaten enough meals.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [meals]
```

The same entry point can be run as `python -m philosophers.cli`.

- `number_of_philosophers`: from 1 to 200.
- `time_to_die`: milliseconds a philosopher may go without starting a meal.
- `time_to_eat`: milliseconds a meal takes, holding both forks.
- `time_to_sleep`: milliseconds spent sleeping after a meal.
- `meals` (optional): the simulation stops once every philosopher has eaten
  at least this many times. Zero is accepted.

Each argument must be made up only of digits. The count and the three times
must be greater than zero. A wrong argument count prints
`Wrong argument count` on standard error; an invalid value prints a message
such as `Invalid time to die` on standard output. Both exit with status 1.

Each event is printed as one line: the milliseconds since the start, the
philosopher's number, and what happened:

```
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
200 1 is sleeping
400 1 is thinking
...
```

Even-numbered philosophers wait half of `time_to_eat` before their first
meal. Forks are always taken in a fixed global order. A lone philosopher
takes its single fork and waits until it dies.

The simulation ends when a philosopher dies (`<time> <id> died`) or, given a
meal limit, when every philosopher has eaten enough. No line is printed
after the end.

Examples:

```
philo 5 800 200 200
philo 5 800 200 200 7
philo 4 310 200 100
```

## Library use

```python
import sys
from philosophers.config import parse_settings
from philosophers.simulation import Simulation

settings = parse_settings(["4", "410", "200", "200", "3"])
simulation = Simulation(settings, sys.stdout)
simulation.run()
print(simulation.dead_philosopher)  # number of the philosopher who died, or None
```

- `philosophers.config.parse_settings(args)` takes the arguments after the
  program name and returns a frozen `Settings` dataclass
  (`number_of_philosophers`, `time_to_die`, `time_to_eat`, `time_to_sleep`,
  `meals_required`, the last being `None` when no limit was given). It raises
  `philosophers.config.ConfigError`, a `ValueError`, for invalid input.
- `philosophers.simulation.Simulation(settings, out)` writes its event lines
  to `out` (standard output when `None`). `run()` blocks until the end;
  `is_over()` reports whether it has ended.
- `philosophers.timing` provides `current_time_ms()`, `precise_sleep(ms)`
  and `parse_int(text)`, a lenient leading-integer parser.

## Tests

```
pip install .[test]
pytest
```