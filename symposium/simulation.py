"""Running the dining philosophers: the routines, the monitor and the entry point."""

from __future__ import annotations

import sys
import threading
import time
from collections.abc import Sequence
from typing import Optional, TextIO

from symposium.config import Config, ConfigError, parse_config
from symposium.table import Philosopher, Table
from symposium.utils import State, now_ms

_MONITOR_POLL_SECONDS = 0.0001


def eat(philosopher: Philosopher) -> bool:
    """Take both forks, announce them and the meal, then eat.

    Returns False, with the forks released, once the simulation has stopped.
    """
    philosopher.take_forks()
    try:
        if (
            philosopher.shared.stopped()
            or not philosopher.announce(State.HUNGRY)
            or not philosopher.announce(State.HUNGRY)
            or not philosopher.announce(State.EATING)
        ):
            return False
        philosopher.record_meal(now_ms())
        philosopher.wait(philosopher.config.time_to_eat)
        return True
    finally:
        philosopher.release_forks()


def sleep(philosopher: Philosopher) -> bool:
    """Announce sleeping and sleep; False once the simulation has stopped."""
    if not philosopher.announce(State.SLEEPING):
        return False
    philosopher.wait(philosopher.config.time_to_sleep)
    return True


def think(philosopher: Philosopher) -> bool:
    """Announce thinking; False once the simulation has stopped."""
    return philosopher.announce(State.THINKING)


def routine(philosopher: Philosopher) -> None:
    """Life of one philosopher: eat, sleep and think until the simulation stops."""
    shared = philosopher.shared
    # Wait until every thread has been created.
    with shared.sim_lock:
        pass
    philosopher.mark_start(now_ms())
    if philosopher.ident % 2 == 1:
        philosopher.wait(philosopher.config.time_to_die // 10)
    philosopher.record_meal(now_ms())
    rounds_left = philosopher.config.rounds
    while not shared.stopped():
        if not (eat(philosopher) and sleep(philosopher) and think(philosopher)):
            break
        if rounds_left is not None:
            rounds_left -= 1
            if rounds_left == 0:
                shared.finish_rounds()


def monitor(table: Table) -> Optional[Philosopher]:
    """Watch the table until someone starves or everyone has eaten enough.

    Returns the philosopher that died, or None if the simulation ended
    otherwise.
    """
    shared = table.shared
    philosophers = table.philosophers
    for philosopher in philosophers:
        while philosopher.last_meal() is None:
            time.sleep(_MONITOR_POLL_SECONDS)
    while True:
        for philosopher in philosophers:
            if shared.remaining() == 0:
                shared.stop()
                return None
            if shared.stopped():
                return None
            last_meal = philosopher.last_meal()
            if now_ms() - last_meal > table.config.time_to_die:
                philosopher.announce_death()
                return philosopher
        philosophers[0].wait(table.config.time_to_die // 100)


def lone_philosopher(table: Table) -> Philosopher:
    """A single philosopher has one fork only: it takes it and starves."""
    philosopher = table.philosophers[0]
    philosopher.record_meal(now_ms())
    philosopher.mark_start(now_ms())
    philosopher.announce(State.HUNGRY)
    philosopher.wait(table.config.time_to_die)
    philosopher.announce_death()
    return philosopher


def run(config: Config, stream: TextIO) -> Optional[Philosopher]:
    """Run a whole simulation, writing its log to stream.

    Returns the philosopher that died, or None if all finished their rounds.
    """
    table = Table(config, stream)
    shared = table.shared
    shared.resume()
    if config.philosophers == 1:
        return lone_philosopher(table)

    threads = [
        threading.Thread(target=routine, args=(philosopher,), daemon=True)
        for philosopher in table.philosophers
    ]
    with shared.sim_lock:
        for thread in threads:
            thread.start()

    shared.resume()
    outcome: list[Optional[Philosopher]] = []
    watcher = threading.Thread(
        target=lambda: outcome.append(monitor(table)), daemon=True
    )
    watcher.start()
    watcher.join()
    for thread in threads:
        thread.join()
    return outcome[0] if outcome else None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point; returns the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        config = parse_config(args)
    except ConfigError:
        return 1
    run(config, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())