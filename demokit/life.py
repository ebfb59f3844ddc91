"""Conway's Game of Life on a wrapping grid."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

log = logging.getLogger(__name__)


class CellState(Enum):
    ALIVE = "alive"
    DEAD = "dead"


@dataclass
class Cell:
    state: CellState = CellState.DEAD

    @property
    def is_alive(self) -> bool:
        return self.state is CellState.ALIVE

    def toggle(self) -> None:
        self.state = CellState.DEAD if self.is_alive else CellState.ALIVE


def count_alive(neighbors: Sequence[Cell]) -> int:
    return sum(1 for cell in neighbors if cell.is_alive)


def alone(neighbors: Sequence[Cell]) -> bool:
    return count_alive(neighbors) < 2


def overpopulated(neighbors: Sequence[Cell]) -> bool:
    return count_alive(neighbors) > 3


def can_be_revived(neighbors: Sequence[Cell]) -> bool:
    return count_alive(neighbors) == 3


def wrap(coord: int, size: int) -> int:
    """Wrap a coordinate that is at most one step outside ``[0, size)``."""
    if coord < 0:
        return coord + size
    if coord >= size:
        return coord - size
    return coord


_NEIGHBOR_OFFSETS = (
    (1, 0),
    (1, 1),
    (1, -1),
    (-1, 0),
    (-1, 1),
    (-1, -1),
    (0, -1),
    (0, 1),
)


class Life:
    """A toroidal grid of cells that can be stepped or run on a timer."""

    def __init__(self, width: int = 53, height: int = 40) -> None:
        if width < 1 or height < 1:
            raise ValueError("grid dimensions must be positive")
        self.width = width
        self.height = height
        self.active = False
        self.cells: List[Cell] = [Cell() for _ in range(width * height)]

    def random_mutate(self, rng: Optional[random.Random] = None) -> None:
        rng = rng if rng is not None else random.Random()
        for cell in self.cells:
            cell.state = CellState.ALIVE if rng.getrandbits(1) else CellState.DEAD
        log.info("Random")

    def reset(self) -> None:
        for cell in self.cells:
            cell.state = CellState.DEAD
        log.info("Reset")

    def index(self, row: int, col: int) -> int:
        return wrap(row, self.height) * self.width + wrap(col, self.width)

    def neighbors(self, row: int, col: int) -> List[Cell]:
        return [self.cells[self.index(row + dr, col + dc)] for dr, dc in _NEIGHBOR_OFFSETS]

    def step(self) -> None:
        """Apply one generation of the rules to every cell at once."""
        to_dead = []
        to_live = []
        for row in range(self.height):
            for col in range(self.width):
                neighbors = self.neighbors(row, col)
                idx = self.index(row, col)
                if self.cells[idx].is_alive:
                    if alone(neighbors) or overpopulated(neighbors):
                        to_dead.append(idx)
                elif can_be_revived(neighbors):
                    to_live.append(idx)
        for idx in to_dead:
            self.cells[idx].state = CellState.DEAD
        for idx in to_live:
            self.cells[idx].state = CellState.ALIVE

    def toggle(self, index: int) -> None:
        if not 0 <= index < len(self.cells):
            raise IndexError(f"cell index {index} out of range")
        self.cells[index].toggle()

    def start(self) -> bool:
        """Run on ticks; returns whether a redraw is needed."""
        self.active = True
        log.info("Start")
        return False

    def stop(self) -> bool:
        self.active = False
        log.info("Stop")
        return False

    def tick(self) -> bool:
        """Step if running; returns whether anything changed."""
        if self.active:
            self.step()
            return True
        return False

    def render(self) -> str:
        rows = []
        for y in range(self.height):
            offset = y * self.width
            cells = []
            for x in range(self.width):
                idx = offset + x
                status = "cellule-live" if self.cells[idx].is_alive else "cellule-dead"
                cells.append(f'<div class="game-cellule {status}" data-index="{idx}"></div>')
            body = "".join(cells)
            rows.append(f'<div class="game-row" data-row="{y}">{body}</div>')
        grid = "".join(rows)
        return f'<div class="game-of-life">{grid}</div>'