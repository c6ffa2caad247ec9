"""
Scene Dispatcher
================
Owns the SceneState, the shared dataset, the viewport and the tooltip, and
routes every external event to the active scene renderer.

Why is this file needed?
------------------------
1. Single writer: navigation, filter and resize events are command messages
   consumed by one `dispatch()` function; nothing else mutates SceneState.
2. Full redraws: every transition clears the surface, hides the tooltip and
   re-invokes the active renderer from scratch, so no stale frame survives.
3. Decoupling: results leave through Qt signals; the window and the canvas
   never call renderers directly.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from PySide6.QtCore import QObject, Signal

from meteoritestory.config import ALL_CLASSES, MARGINS, Margins
from meteoritestory.controller import aggregate
from meteoritestory.controller.scenes import SceneContext, create_renderer
from meteoritestory.controller.tooltip import TooltipController
from meteoritestory.model.frame import Frame
from meteoritestory.model.records import Boundary, Dataset, Record
from meteoritestory.model.state import FIRST_SCENE, LAST_SCENE, SceneState

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------------------
# Commands
# ------------------------------------------------------------------------------

@dataclass(frozen=True)
class NavigateNext:
    pass


@dataclass(frozen=True)
class NavigatePrev:
    pass


@dataclass(frozen=True)
class SetFilter:
    year: int
    recclass: str = ALL_CLASSES


@dataclass(frozen=True)
class Resize:
    width: float
    height: float


@dataclass(frozen=True)
class PointerEnter:
    record: Record
    x: float
    y: float


@dataclass(frozen=True)
class PointerLeave:
    pass


Command = Union[NavigateNext, NavigatePrev, SetFilter, Resize, PointerEnter, PointerLeave]


@dataclass(frozen=True)
class Viewport:
    width: float
    height: float
    margins: Margins = MARGINS

    @property
    def inner_width(self) -> float:
        return max(0.0, self.width - self.margins.left - self.margins.right)

    @property
    def inner_height(self) -> float:
        return max(0.0, self.height - self.margins.top - self.margins.bottom)

    @property
    def origin(self) -> tuple[float, float]:
        return float(self.margins.left), float(self.margins.top)


# ------------------------------------------------------------------------------
# Dispatcher
# ------------------------------------------------------------------------------

class SceneDispatcher(QObject):
    """Central update loop with signals for the window chrome and the canvas."""
    frame_changed = Signal(object)
    title_changed = Signal(str)
    controls_visible_changed = Signal(bool)
    navigation_changed = Signal(bool, bool)  # (can go back, can go forward)

    def __init__(
        self,
        records: Dataset,
        boundaries: Sequence[Boundary],
        viewport: tuple[float, float],
        tooltip: Optional[TooltipController] = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self.records: Dataset = records
        self.boundaries: Sequence[Boundary] = boundaries
        self.viewport = Viewport(max(0.0, viewport[0]), max(0.0, viewport[1]))
        self.tooltip = tooltip or TooltipController(parent=self)

        extent = aggregate.year_extent(records)
        self.state = SceneState(filter_year=extent[0] if extent else 0)
        self.frame: Optional[Frame] = None

    # ---- entry points ----

    def on_next(self) -> None:
        self.dispatch(NavigateNext())

    def on_prev(self) -> None:
        self.dispatch(NavigatePrev())

    def on_filter_changed(self, year: int, recclass: str) -> None:
        self.dispatch(SetFilter(int(year), recclass))

    def on_resize(self, width: float, height: float) -> None:
        self.dispatch(Resize(width, height))

    def on_pointer_enter(self, record: Record, x: float, y: float) -> None:
        self.dispatch(PointerEnter(record, x, y))

    def on_pointer_leave(self) -> None:
        self.dispatch(PointerLeave())

    # ---- update ----

    def dispatch(self, command: Command) -> None:
        match command:
            case NavigateNext():
                if self.state.step(+1):
                    self.redraw()
            case NavigatePrev():
                if self.state.step(-1):
                    self.redraw()
            case SetFilter(year=year, recclass=recclass):
                self.state.filter_year = year
                self.state.filter_class = recclass
                logger.debug(f"Filter set to year >= {year}, class {recclass!r}")
                if self.state.explore_controls_visible:
                    self.redraw()
            case Resize(width=width, height=height):
                viewport = Viewport(max(0.0, width), max(0.0, height), self.viewport.margins)
                if viewport == self.viewport and self.frame is not None:
                    return
                self.viewport = viewport
                self.redraw()
            case PointerEnter(record=record, x=x, y=y):
                self.tooltip.show(record, (x, y), (self.viewport.width, self.viewport.height))
            case PointerLeave():
                self.tooltip.hide()
            case _:
                raise TypeError(f"Unknown command: {command!r}")

    def redraw(self) -> Frame:
        """Clear everything from the previous frame and render the current scene from scratch."""
        self.tooltip.hide()
        self.title_changed.emit(self.state.title)
        self.controls_visible_changed.emit(self.state.explore_controls_visible)
        self.navigation_changed.emit(self.state.index > FIRST_SCENE, self.state.index < LAST_SCENE)

        ctx = SceneContext(
            records=self.records,
            boundaries=self.boundaries,
            state=self.state,
            width=self.viewport.inner_width,
            height=self.viewport.inner_height,
            origin=self.viewport.origin,
        )
        self.frame = create_renderer(self.state.index).render(ctx)
        self.frame_changed.emit(self.frame)
        return self.frame
