"""Axis draw commands: a domain line, tick marks and tick labels."""
from __future__ import annotations

from typing import Sequence

from meteoritestory.model.frame import DrawCommand, Line, Text

AXIS_COLOR = "#ccc"
TICK_SIZE = 6.0

# (pixel position along the axis, label)
Tick = tuple[float, str]


def bottom_axis(ticks: Sequence[Tick], width: float, y: float, rotation: float = 0.0) -> list[DrawCommand]:
    """Horizontal axis along `y`. Rotated labels are right-anchored so they end under their tick."""
    commands: list[DrawCommand] = [Line(0.0, y, width, y, stroke=AXIS_COLOR)]
    anchor = "end" if rotation else "middle"
    for x, label in ticks:
        commands.append(Line(x, y, x, y + TICK_SIZE, stroke=AXIS_COLOR))
        commands.append(Text(x, y + TICK_SIZE + 3.0, label, color=AXIS_COLOR, anchor=anchor, rotation=rotation))
    return commands


def left_axis(ticks: Sequence[Tick], height: float) -> list[DrawCommand]:
    commands: list[DrawCommand] = [Line(0.0, 0.0, 0.0, height, stroke=AXIS_COLOR)]
    for y, label in ticks:
        commands.append(Line(-TICK_SIZE, y, 0.0, y, stroke=AXIS_COLOR))
        commands.append(Text(-TICK_SIZE - 3.0, y, label, color=AXIS_COLOR, anchor="end"))
    return commands
