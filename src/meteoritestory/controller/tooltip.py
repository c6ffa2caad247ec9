"""
Tooltip Controller
==================
Hidden -> Visible on pointer-enter over a plotted point, back to Hidden on
pointer-leave.

The box size is only known once the content has been laid out, so showing is
two passes: set the content, ask the backend to measure it, then clamp the
candidate position against the viewport edges.
"""
from __future__ import annotations

import html
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from PySide6.QtCore import QObject, Signal

from meteoritestory.model.records import Record
from meteoritestory.utils import format_thousands

logger = logging.getLogger(__name__)

# content -> (width, height) of the rendered box in pixels
Measure = Callable[[str], tuple[float, float]]


@dataclass(frozen=True)
class TooltipState:
    visible: bool = False
    content: str = ""
    x: float = 0.0
    y: float = 0.0


def tooltip_content(record: Record) -> str:
    """Rich-text body: name, year and mass with thousands separators."""
    return (
        f"<b>{html.escape(record.name)}</b><br/>"
        f"Year: {record.year}<br/>"
        f"Mass: {format_thousands(record.mass)} g"
    )


def estimate_box(content: str) -> tuple[float, float]:
    """Fallback measure used until a rendering backend provides a real one."""
    lines = content.replace("<br/>", "\n").replace("<b>", "").replace("</b>", "").splitlines() or [""]
    return 8.0 + 7.0 * max(len(line) for line in lines), 8.0 + 16.0 * len(lines)


class TooltipController(QObject):
    """Owns the TooltipState; every change is published on `changed`."""
    changed = Signal(object)

    POINTER_OFFSET = (10.0, 10.0)
    EDGE_GAP = 10.0

    def __init__(self, measure: Optional[Measure] = None, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._measure: Measure = measure or estimate_box
        self._state = TooltipState()

    @property
    def state(self) -> TooltipState:
        return self._state

    def set_measure(self, measure: Measure) -> None:
        self._measure = measure

    def show(self, record: Record, pointer: tuple[float, float], viewport: tuple[float, float]) -> TooltipState:
        content = tooltip_content(record)
        x = pointer[0] + self.POINTER_OFFSET[0]
        y = pointer[1] + self.POINTER_OFFSET[1]

        box_w, box_h = self._measure(content)
        view_w, view_h = viewport
        if x + box_w > view_w:
            x = view_w - box_w - self.EDGE_GAP
        if y + box_h > view_h:
            y = view_h - box_h - self.EDGE_GAP

        self._set_state(TooltipState(visible=True, content=content, x=x, y=y))
        return self._state

    def hide(self) -> None:
        if self._state.visible:
            self._set_state(TooltipState())

    def _set_state(self, state: TooltipState) -> None:
        self._state = state
        self.changed.emit(state)
