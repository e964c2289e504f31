"""Value types for Chart Forge."""

from __future__ import annotations

import typing as t

from dataclasses import dataclass, field


@dataclass
class LineChartSeries:
    """One plotted line.

    Points in `data` that are not finite numbers (e.g. `None`) are kept as
    gaps in the line.
    """

    data: t.Sequence[t.Any] = field(default_factory=list)
    label: str | None = None


@dataclass(frozen=True)
class MinMaxValues:
    min_value: float = 0
    max_value: float = 0

    @property
    def span(self) -> float:
        return self.max_value - self.min_value


@dataclass(frozen=True)
class ContainerSize:
    svg_width: float
    svg_height: float
