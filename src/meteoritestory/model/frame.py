"""
Frame (Draw Commands)
=====================
Declarative output of a scene renderer.

Why is this file needed?
------------------------
Scene geometry is computed without touching Qt. Renderers return a Frame
holding plain draw commands; the canvas widget is the only code that turns
them into graphics items. This keeps every scene testable in isolation.

Coordinates are in the inner plot area (origin at the top-left margin corner).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union, TYPE_CHECKING

import numpy as np

from meteoritestory.model.records import Record
from meteoritestory.model.state import Scene

if TYPE_CHECKING:
    import numpy.typing as npt

Color = Union[str, tuple[int, int, int, int]]


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    fill: Color = "#555"


@dataclass(frozen=True)
class Circle:
    cx: float
    cy: float
    r: float
    fill: Color = "#777"
    datum: Optional[Record] = None  # hoverable when set


@dataclass(frozen=True)
class Line:
    x1: float
    y1: float
    x2: float
    y2: float
    stroke: Color = "#ccc"
    width: float = 1.0


@dataclass(frozen=True)
class Text:
    x: float
    y: float
    text: str
    color: Color = "#ccc"
    anchor: str = "middle"  # start | middle | end
    rotation: float = 0.0  # degrees, clockwise
    size: int = 10


@dataclass(eq=False)
class Polygon:
    points: npt.NDArray[np.float64]  # (N, 2) pixel coordinates, closed
    fill: Color = "#111"
    stroke: Color = "#333"


DrawCommand = Union[Rect, Circle, Line, Text, Polygon]


@dataclass(frozen=True)
class Annotation:
    """A labelled callout: the label sits at anchor + offset, with a connector back to the anchor."""
    label: str
    anchor_x: float
    anchor_y: float
    offset_x: float
    offset_y: float

    @property
    def label_pos(self) -> tuple[float, float]:
        return self.anchor_x + self.offset_x, self.anchor_y + self.offset_y


@dataclass
class Frame:
    scene: Scene
    title: str
    width: float
    height: float
    origin: tuple[float, float] = (0.0, 0.0)
    commands: list[DrawCommand] = field(default_factory=list)
    annotations: list[Annotation] = field(default_factory=list)

    def add(self, *commands: DrawCommand) -> None:
        self.commands.extend(commands)

    def of_type(self, kind: type) -> list[DrawCommand]:
        return [c for c in self.commands if isinstance(c, kind)]

    @property
    def data_points(self) -> list[Circle]:
        return [c for c in self.commands if isinstance(c, Circle) and c.datum is not None]
