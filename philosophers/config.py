"""Validation of command-line arguments into simulation settings."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from philosophers.timing import parse_int

PHILO_MAX = 200


class ConfigError(ValueError):
    """Raised when the simulation arguments are not acceptable."""


@dataclass(frozen=True)
class Settings:
    """Parameters of one dining-philosophers simulation (times in ms)."""

    number_of_philosophers: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meals_required: int | None = None


def is_valid_number(text: str) -> bool:
    """Return True when ``text`` consists of ASCII digits only."""
    return all("0" <= char <= "9" for char in text)


def _positive(text: str, message: str, upper: int | None = None) -> int:
    value = parse_int(text)
    if not is_valid_number(text) or value <= 0 or (upper is not None and value > upper):
        raise ConfigError(message)
    return value


def parse_settings(args: Sequence[str]) -> Settings:
    """Build :class:`Settings` from the arguments following the program name.

    Expects ``philosophers time_to_die time_to_eat time_to_sleep
    [meals_required]``.
    """
    if len(args) not in (4, 5):
        raise ConfigError("Wrong argument count")
    count = _positive(args[0], "Invalid number of philosophers", PHILO_MAX)
    time_to_die = _positive(args[1], "Invalid time to die")
    time_to_eat = _positive(args[2], "Invalid time to eat")
    time_to_sleep = _positive(args[3], "Invalid time to sleep")
    meals_required = None
    if len(args) == 5:
        limit_text = args[4]
        meals_required = parse_int(limit_text)
        if not is_valid_number(limit_text) or meals_required < 0:
            raise ConfigError("Invalid meal limit")
    return Settings(
        number_of_philosophers=count,
        time_to_die=time_to_die,
        time_to_eat=time_to_eat,
        time_to_sleep=time_to_sleep,
        meals_required=meals_required,
    )