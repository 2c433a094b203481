"""The shared table: philosophers, their forks and the state they share."""

from __future__ import annotations

import threading
import time
from typing import Optional, TextIO

from symposium.config import Config
from symposium.utils import State, now_ms

_POLL_SECONDS = 0.0005


class SharedState:
    """State every philosopher sees: the stop flag, the output and the count
    of philosophers that still have rounds to eat."""

    def __init__(self, config: Config, stream: TextIO) -> None:
        self.config = config
        self.stream = stream
        self.print_lock = threading.Lock()
        # Held by the starter while threads are created; routines pass
        # through it before they begin.
        self.sim_lock = threading.Lock()
        self._stopped = False
        self._remaining_lock = threading.Lock()
        self._remaining = config.philosophers

    def stop(self) -> None:
        with self.sim_lock:
            self._stopped = True

    def resume(self) -> None:
        with self.sim_lock:
            self._stopped = False

    def stopped(self) -> bool:
        with self.sim_lock:
            return self._stopped

    def finish_rounds(self) -> None:
        """Record that one more philosopher has eaten all its rounds."""
        with self._remaining_lock:
            self._remaining -= 1

    def remaining(self) -> int:
        with self._remaining_lock:
            return self._remaining


class Philosopher:
    """One seat at the table with its own fork and a neighbour's fork."""

    def __init__(
        self,
        ident: int,
        config: Config,
        shared: SharedState,
        fork: Optional[threading.Lock] = None,
    ) -> None:
        self.ident = ident
        self.config = config
        self.shared = shared
        self.fork = fork if fork is not None else threading.Lock()
        self.other_fork = self.fork
        self._start_lock = threading.Lock()
        self._start: Optional[int] = None
        self._meal_lock = threading.Lock()
        self._last_meal: Optional[int] = None

    def mark_start(self, when: int) -> None:
        with self._start_lock:
            self._start = when

    def start_time(self) -> Optional[int]:
        with self._start_lock:
            return self._start

    def record_meal(self, when: int) -> None:
        with self._meal_lock:
            self._last_meal = when

    def last_meal(self) -> Optional[int]:
        """Time of the last meal, or None before the philosopher has begun."""
        with self._meal_lock:
            return self._last_meal

    def take_forks(self) -> None:
        """Take both forks; even and odd seats take them in opposite order."""
        if self.ident % 2 == 0:
            self.fork.acquire()
            self.other_fork.acquire()
        else:
            self.other_fork.acquire()
            self.fork.acquire()

    def release_forks(self) -> None:
        if self.ident % 2 == 1:
            self.fork.release()
            self.other_fork.release()
        else:
            self.other_fork.release()
            self.fork.release()

    def wait(self, duration_ms: int) -> None:
        """Sleep for duration_ms, returning early once the simulation stops."""
        deadline = now_ms() + duration_ms
        while now_ms() < deadline and not self.shared.stopped():
            time.sleep(_POLL_SECONDS)

    def _elapsed(self) -> int:
        now = now_ms()
        start = self.start_time()
        return now - (start if start is not None else now)

    def _write(self, state: State) -> None:
        self.shared.stream.write(f"{self._elapsed()} {self.ident} {state.message}\n")
        self.shared.stream.flush()

    def announce(self, state: State) -> bool:
        """Print a state change; False if the simulation has already stopped."""
        with self.shared.print_lock:
            if self.shared.stopped():
                return False
            if state is not State.DEAD:
                self._write(state)
            return True

    def announce_death(self) -> None:
        """Stop the simulation and print that this philosopher died."""
        with self.shared.print_lock:
            self.shared.stop()
            self._write(State.DEAD)


class Table:
    """All philosophers seated in a ring, each sharing a fork with the
    previous seat."""

    def __init__(self, config: Config, stream: TextIO) -> None:
        self.config = config
        self.shared = SharedState(config, stream)
        self.philosophers = [
            Philosopher(ident, config, self.shared)
            for ident in range(1, config.philosophers + 1)
        ]
        for seat, philosopher in enumerate(self.philosophers):
            philosopher.other_fork = self.philosophers[seat - 1].fork