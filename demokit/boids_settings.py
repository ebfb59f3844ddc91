"""Tunable parameters of the boids simulation."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Mapping

from demokit.storage import JsonStorage

STORAGE_KEY = "demokit.boids.settings"

_INT_FIELDS = ("boids", "tick_interval_ms")


@dataclass(frozen=True)
class Settings:
    """Simulation parameters; defaults match a pleasant-looking flock."""

    boids: int = 300
    tick_interval_ms: int = 50
    visible_range: float = 80.0
    min_distance: float = 15.0
    max_speed: float = 20.0
    cohesion_factor: float = 0.05
    separation_factor: float = 0.6
    alignment_factor: float = 0.15
    turn_speed_ratio: float = 0.25
    border_margin: float = 0.1
    color_adapt_factor: float = 0.05

    @classmethod
    def _from_mapping(cls, data: Any) -> "Settings":
        if not isinstance(data, Mapping):
            raise TypeError("settings must be a mapping")
        values = {}
        for field in dataclasses.fields(cls):
            value = data[field.name]
            if isinstance(value, bool):
                raise TypeError(f"{field.name} must be a number")
            if field.name in _INT_FIELDS:
                if not isinstance(value, int) or value < 0:
                    raise ValueError(f"{field.name} must be a non-negative integer")
            elif not isinstance(value, (int, float)):
                raise TypeError(f"{field.name} must be a number")
            else:
                value = float(value)
            values[field.name] = value
        return cls(**values)

    @classmethod
    def load(cls, storage: JsonStorage) -> "Settings":
        """Load stored settings, falling back to the defaults."""
        try:
            return cls._from_mapping(storage.get(STORAGE_KEY))
        except (KeyError, TypeError, ValueError):
            return cls()

    def store(self, storage: JsonStorage) -> None:
        storage.set(STORAGE_KEY, dataclasses.asdict(self))

    @classmethod
    def remove(cls, storage: JsonStorage) -> None:
        storage.delete(STORAGE_KEY)

    def replace(self, **kwargs: Any) -> "Settings":
        return dataclasses.replace(self, **kwargs)