"""A single boid and the flocking rules that move it."""

from __future__ import annotations

import random
from dataclasses import dataclass
from itertools import chain
from typing import Iterable, List, Optional, Sequence

from demokit.boids_settings import Settings
from demokit.vector import (
    FRAC_TAU_3,
    TAU,
    Vector2D,
    mean,
    smallest_angle_between,
    weighted_mean,
)

SIZE = Vector2D(1600.0, 1000.0)

_SHAPE = ((0.0 * FRAC_TAU_3, 2.0), (1.0 * FRAC_TAU_3, 1.0), (2.0 * FRAC_TAU_3, 1.0))


def shape_points(radius: float, rotation: float) -> List[Vector2D]:
    """Corners of the boid triangle relative to its centre."""
    return [
        Vector2D.from_polar(angle + rotation, radius_mul * radius)
        for angle, radius_mul in _SHAPE
    ]


@dataclass
class Boid:
    position: Vector2D
    velocity: Vector2D
    radius: float
    hue: float

    @classmethod
    def random(cls, settings: Settings, rng: Optional[random.Random] = None) -> "Boid":
        rng = rng if rng is not None else random.Random()
        max_radius = settings.min_distance / 2.0
        min_radius = max_radius / 6.0
        # cubing makes large boids rarer
        radius = min_radius + rng.random() ** 3 * (max_radius - min_radius)
        position = Vector2D(rng.random() * SIZE.x, rng.random() * SIZE.y)
        velocity = Vector2D.from_polar(rng.random() * TAU, settings.max_speed)
        hue = rng.random() * TAU
        return cls(position=position, velocity=velocity, radius=radius, hue=hue)

    def _coherence(self, visible: Iterable["VisibleBoid"], factor: float) -> Vector2D:
        centre = weighted_mean(
            (other.boid.position, other.boid.radius * other.boid.radius) for other in visible
        )
        if centre is None:
            return Vector2D()
        return (centre - self.position) * factor

    def _separation(self, visible: Iterable["VisibleBoid"], settings: Settings) -> Vector2D:
        accel = Vector2D()
        for other in visible:
            if other.distance <= settings.min_distance:
                accel = accel - other.offset
        return accel * settings.separation_factor

    def _alignment(self, visible: Iterable["VisibleBoid"], factor: float) -> Vector2D:
        avg = mean(other.boid.velocity for other in visible)
        if avg is None:
            return Vector2D()
        return (avg - self.velocity) * factor

    def _adapt_color(self, visible: Iterable["VisibleBoid"], factor: float) -> None:
        offset = mean(
            smallest_angle_between(self.hue, other.boid.hue)
            for other in visible
            if other.boid.radius > self.radius
        )
        if offset is not None:
            self.hue += offset * factor

    def _keep_in_bounds(self, settings: Settings) -> None:
        low = SIZE * settings.border_margin
        high = SIZE - low
        turn_speed = self.velocity.magnitude() * settings.turn_speed_ratio
        dx = dy = 0.0
        pos = self.position
        if pos.x < low.x:
            dx += turn_speed
        if pos.x > high.x:
            dx -= turn_speed
        if pos.y < low.y:
            dy += turn_speed
        if pos.y > high.y:
            dy -= turn_speed
        self.velocity = self.velocity + Vector2D(dx, dy)

    def _update_velocity(self, settings: Settings, visible: Sequence["VisibleBoid"]) -> None:
        v = (
            self.velocity
            + self._coherence(visible, settings.cohesion_factor)
            + self._separation(visible, settings)
            + self._alignment(visible, settings.alignment_factor)
        )
        self.velocity = v.clamp_magnitude(settings.max_speed)

    def update(self, settings: Settings, visible: Iterable["VisibleBoid"]) -> None:
        """Advance this boid one tick given the boids it can see."""
        visible = list(visible)
        self._adapt_color(visible, settings.color_adapt_factor)
        self._update_velocity(settings, visible)
        self._keep_in_bounds(settings)
        self.position = self.position + self.velocity

    def render(self) -> str:
        """SVG polygon for this boid."""
        color = f"hsl({self.hue:.3f}rad, 100%, 50%)"
        points = "".join(
            f"{p.x:.2f},{p.y:.2f} "
            for p in (
                self.position + offset
                for offset in shape_points(self.radius, self.velocity.angle())
            )
        )
        return f'<polygon points="{points}" fill="{color}"/>'


@dataclass(frozen=True)
class VisibleBoid:
    boid: Boid
    offset: Vector2D
    distance: float


def visible_boids(boids: Sequence[Boid], index: int, visible_range: float) -> List[VisibleBoid]:
    """Other boids within ``visible_range`` of ``boids[index]``, in list order."""
    position = boids[index].position
    result = []
    for other in chain(boids[:index], boids[index + 1 :]):
        offset = other.position - position
        distance = offset.magnitude()
        if distance <= visible_range:
            result.append(VisibleBoid(boid=other, offset=offset, distance=distance))
    return result


def update_all(settings: Settings, boids: Sequence[Boid]) -> None:
    """Update every boid in place; later boids see earlier ones already moved."""
    for index, boid in enumerate(boids):
        boid.update(settings, visible_boids(boids, index, settings.visible_range))