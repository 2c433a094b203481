"""Simulation parameters and their parsing from command-line arguments."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

from symposium.utils import parse_int

UNLIMITED_ROUNDS = -1


class ConfigError(ValueError):
    """Raised when the simulation parameters are missing or invalid."""


@dataclass(frozen=True)
class Config:
    """Parameters of one simulation; times are in milliseconds.

    ``rounds`` is the number of meals each philosopher must have before the
    simulation ends, or ``None`` to run until someone dies.
    """

    philosophers: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    rounds: Optional[int] = None

    def __post_init__(self) -> None:
        if self.philosophers <= 0:
            raise ConfigError("number of philosophers must be positive")
        if self.time_to_die <= 0:
            raise ConfigError("time to die must be positive")
        if self.time_to_eat < 0:
            raise ConfigError("time to eat must not be negative")
        if self.time_to_sleep < 0:
            raise ConfigError("time to sleep must not be negative")
        if self.rounds is not None and self.rounds <= 0:
            raise ConfigError("number of rounds must be positive")


def parse_config(args: Sequence[str]) -> Config:
    """Build a Config from four or five arguments (program name excluded).

    The arguments are: number of philosophers, time to die, time to eat,
    time to sleep and, optionally, the number of rounds; -1 rounds means
    no limit.
    """
    args = list(args)
    if len(args) not in (4, 5):
        raise ConfigError(f"expected 4 or 5 arguments, got {len(args)}")
    philosophers, die, eat, sleep = (parse_int(arg) for arg in args[:4])
    rounds = parse_int(args[4]) if len(args) == 5 else UNLIMITED_ROUNDS
    return Config(
        philosophers=philosophers,
        time_to_die=die,
        time_to_eat=eat,
        time_to_sleep=sleep,
        rounds=None if rounds == UNLIMITED_ROUNDS else rounds,
    )