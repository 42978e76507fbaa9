"""Threaded dining-philosophers simulation with a monitoring thread."""

from __future__ import annotations

import sys
import threading
import time
from typing import TextIO

from philosophers.config import Settings
from philosophers.timing import current_time_ms, precise_sleep

_MONITOR_INTERVAL = 0.0005


class Philosopher:
    """One diner sharing a fork with each neighbour."""

    def __init__(
        self,
        ident: int,
        left_fork: threading.Lock,
        right_fork: threading.Lock,
        simulation: Simulation,
    ) -> None:
        self.ident = ident
        self.left_fork = left_fork
        self.right_fork = right_fork
        self.simulation = simulation
        self.meals_eaten = 0
        self.last_meal = simulation.start_time

    def has_starved(self) -> bool:
        """Return True when time_to_die has passed since the last meal."""
        with self.simulation.meal_lock:
            since_meal = current_time_ms() - self.last_meal
            return since_meal >= self.simulation.settings.time_to_die

    def stagger_start(self) -> None:
        """Delay even-numbered philosophers by half a meal to avoid contention."""
        settings = self.simulation.settings
        if settings.number_of_philosophers > 1 and self.ident % 2 == 0:
            precise_sleep(settings.time_to_eat // 2)

    def eat(self) -> None:
        """Take both forks in a global order, eat, then put them down."""
        sim = self.simulation
        settings = sim.settings
        first, second = sorted((self.left_fork, self.right_fork), key=id)
        with first:
            sim.print_message("has taken a fork", self)
            if settings.number_of_philosophers == 1:
                precise_sleep(settings.time_to_die)
                return
            with second:
                sim.print_message("has taken a fork", self)
                with sim.meal_lock:
                    self.last_meal = current_time_ms()
                sim.print_message("is eating", self)
                precise_sleep(settings.time_to_eat)
                with sim.meal_lock:
                    self.meals_eaten += 1

    def run(self) -> None:
        """Eat, sleep and think until the simulation ends."""
        sim = self.simulation
        self.stagger_start()
        while not sim.is_over():
            self.eat()
            if sim.is_over():
                break
            sim.print_message("is sleeping", self)
            precise_sleep(sim.settings.time_to_sleep)
            sim.print_message("is thinking", self)
            precise_sleep(1)


class Simulation:
    """Shared table state: forks, locks, the end flag and the output stream."""

    def __init__(self, settings: Settings, out: TextIO | None = None) -> None:
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        self.start_time = current_time_ms()
        self.write_lock = threading.Lock()
        self.dead_lock = threading.Lock()
        self.meal_lock = threading.Lock()
        self.dead_philosopher: int | None = None
        self._over = False
        count = settings.number_of_philosophers
        self.forks = [threading.Lock() for _ in range(count)]
        self.philosophers = [
            Philosopher(index + 1, self.forks[index], self.forks[index - 1], self)
            for index in range(count)
        ]

    def _finish(self) -> None:
        with self.dead_lock:
            self._over = True

    def is_over(self) -> bool:
        """Return True once a philosopher died or everyone ate enough."""
        with self.dead_lock:
            return self._over

    def print_message(self, message: str, philosopher: Philosopher) -> None:
        """Write a timestamped status line unless the simulation has ended."""
        with self.write_lock:
            elapsed = current_time_ms() - self.start_time
            if not self.is_over():
                self.out.write(f"{elapsed} {philosopher.ident} {message}\n")
                self.out.flush()

    def check_if_dead(self) -> bool:
        """Announce the first starved philosopher and end the simulation."""
        for philosopher in self.philosophers:
            if philosopher.has_starved():
                self.print_message("died", philosopher)
                self.dead_philosopher = philosopher.ident
                self._finish()
                return True
        return False

    def check_if_all_ate(self) -> bool:
        """End the simulation once every philosopher reached the meal limit."""
        required = self.settings.meals_required
        if required is None:
            return False
        with self.meal_lock:
            finished = sum(p.meals_eaten >= required for p in self.philosophers)
        if finished == len(self.philosophers):
            self._finish()
            return True
        return False

    def monitor(self) -> None:
        """Poll for death or completion until one of them happens."""
        while not (self.check_if_dead() or self.check_if_all_ate()):
            time.sleep(_MONITOR_INTERVAL)

    def run(self) -> None:
        """Start the monitor and every philosopher, then wait for them all."""
        threads = [threading.Thread(target=self.monitor, name="monitor")]
        threads.extend(
            threading.Thread(target=p.run, name=f"philosopher-{p.ident}")
            for p in self.philosophers
        )
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()