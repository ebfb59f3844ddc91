"""A labelled range slider that formats its value for display."""

from __future__ import annotations

import html
import itertools
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional

_slider_ids = itertools.count()


def _next_slider_id() -> int:
    return next(_slider_ids)


def _format_number(value: float) -> str:
    """Shortest plain decimal form of ``value``, without exponent or trailing ``.0``."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


@dataclass
class Slider:
    """A range input with a label and a formatted value read-out."""

    label: str
    value: float
    max: float
    min: float = 0.0
    step: Optional[float] = None
    precision: Optional[int] = None
    percentage: bool = False
    id: int = field(default_factory=_next_slider_id, compare=False)

    def _precision(self) -> int:
        if self.precision is not None:
            return self.precision
        return 1 if self.percentage else 0

    def display_value(self) -> str:
        """The value as shown next to the slider."""
        p = self._precision()
        if self.percentage:
            return f"{100.0 * self.value:.{p}f}%"
        return f"{self.value:.{p}f}"

    def effective_step(self) -> float:
        """The explicit step, or one unit of the last displayed digit."""
        if self.step is not None:
            return self.step
        p = self._precision()
        if self.percentage:
            p += 2
        return 10.0 ** -p

    def render(self) -> str:
        element_id = f"slider-{self.id}"
        label = html.escape(self.label)
        low = _format_number(self.min)
        high = _format_number(self.max)
        step = _format_number(self.effective_step())
        value = html.escape(self.display_value())
        return (
            '<div class="slider">'
            f'<label for="{element_id}" class="slider__label">{label}</label>'
            f'<input type="range" id="{element_id}" class="slider__input" '
            f'min="{low}" max="{high}" step="{step}"/>'
            f'<span class="slider__value">{value}</span>'
            "</div>"
        )