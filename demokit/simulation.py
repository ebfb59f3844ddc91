"""The boids simulation and the application state that drives it."""

from __future__ import annotations

import random
from typing import List, Optional

from demokit.boid import SIZE, Boid, update_all
from demokit.boids_settings import Settings
from demokit.storage import JsonStorage

_GENERATION_MODULUS = 2**64


class Simulation:
    """A flock of boids advanced one tick at a time."""

    def __init__(
        self,
        settings: Settings,
        generation: int = 0,
        paused: bool = False,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.settings = settings
        self.generation = generation
        self.paused = paused
        self._rng = rng if rng is not None else random.Random()
        self.boids: List[Boid] = self._spawn()

    def _spawn(self) -> List[Boid]:
        return [Boid.random(self.settings, self._rng) for _ in range(self.settings.boids)]

    def tick(self) -> bool:
        """Advance one step; returns whether anything changed."""
        if self.paused:
            return False
        update_all(self.settings, self.boids)
        return True

    def restart(self, settings: Settings) -> None:
        """Replace the flock with fresh boids for ``settings``."""
        self.settings = settings
        self.boids = self._spawn()

    def render(self) -> str:
        view_box = f"0 0 {SIZE.x:g} {SIZE.y:g}"
        body = "".join(boid.render() for boid in self.boids)
        return f'<svg class="simulation-window" viewBox="{view_box}">{body}</svg>'


class BoidsApp:
    """Application state: settings, pause flag and restart counter."""

    def __init__(
        self, storage: Optional[JsonStorage] = None, rng: Optional[random.Random] = None
    ) -> None:
        self.storage = storage if storage is not None else JsonStorage()
        self.settings = Settings.load(self.storage)
        self.generation = 0
        self.paused = False
        self.simulation = Simulation(self.settings, self.generation, self.paused, rng)

    def _sync(self) -> None:
        # Any change in what the simulation was started with restarts it.
        sim = self.simulation
        current = (sim.settings, sim.generation, sim.paused)
        wanted = (self.settings, self.generation, self.paused)
        if current != wanted:
            sim.generation = self.generation
            sim.paused = self.paused
            sim.restart(self.settings)

    def change_settings(self, settings: Settings) -> None:
        self.settings = settings
        settings.store(self.storage)
        self._sync()

    def reset_settings(self) -> None:
        self.settings = Settings()
        Settings.remove(self.storage)
        self._sync()

    def restart(self) -> None:
        self.generation = (self.generation + 1) % _GENERATION_MODULUS
        self._sync()

    def toggle_pause(self) -> None:
        self.paused = not self.paused
        self._sync()

    def pause_label(self) -> str:
        return "Resume" if self.paused else "Pause"