"""
Scene Canvas
Executes a Frame's draw commands on a QGraphicsScene and reports resize and
hover events back to the dispatcher. Also hosts the floating tooltip label.
"""
from __future__ import annotations

import logging
from typing import Optional

import pyqtgraph as pg
from PySide6.QtCore import QPointF, Qt, Signal
from PySide6.QtGui import QPainter, QPolygonF
from PySide6.QtWidgets import (
    QFrame, QGraphicsEllipseItem, QGraphicsScene, QGraphicsSceneHoverEvent,
    QGraphicsSimpleTextItem, QGraphicsView, QLabel, QWidget
)

from meteoritestory.controller.tooltip import TooltipState
from meteoritestory.model.frame import Annotation, Circle, DrawCommand, Frame, Line, Polygon, Rect, Text
from meteoritestory.model.records import Record

logger = logging.getLogger(__name__)

BACKGROUND = "#1b1d23"
ANNOTATION_COLOR = "#eee"


class PointItem(QGraphicsEllipseItem):
    """A plotted record. Hovering it routes through the owning canvas."""

    def __init__(self, cmd: Circle, ox: float, oy: float, canvas: SceneCanvas) -> None:
        super().__init__(ox + cmd.cx - cmd.r, oy + cmd.cy - cmd.r, 2 * cmd.r, 2 * cmd.r)
        self.record: Record = cmd.datum
        self._canvas = canvas
        self.setAcceptHoverEvents(True)

    def hoverEnterEvent(self, event: QGraphicsSceneHoverEvent) -> None:
        pos = self._canvas.mapFromScene(event.scenePos())
        self._canvas.point_entered.emit(self.record, float(pos.x()), float(pos.y()))
        super().hoverEnterEvent(event)

    def hoverLeaveEvent(self, event: QGraphicsSceneHoverEvent) -> None:
        self._canvas.point_left.emit()
        super().hoverLeaveEvent(event)


class SceneCanvas(QGraphicsView):
    resized = Signal(float, float)
    point_entered = Signal(object, float, float)
    point_left = Signal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._scene = QGraphicsScene(self)
        self.setScene(self._scene)
        self.setRenderHint(QPainter.RenderHint.Antialiasing)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop)
        self.setFrameShape(QFrame.Shape.NoFrame)
        self.setBackgroundBrush(pg.mkBrush(BACKGROUND))
        self.setMouseTracking(True)

        self.tooltip_label = QLabel(self)
        self.tooltip_label.setTextFormat(Qt.TextFormat.RichText)
        self.tooltip_label.setAttribute(Qt.WidgetAttribute.WA_TransparentForMouseEvents)
        self.tooltip_label.setStyleSheet(
            "QLabel { background-color: rgba(0, 0, 0, 200); color: #eee; padding: 6px; border-radius: 4px; }"
        )
        self.tooltip_label.hide()

        self.frame: Optional[Frame] = None

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def set_frame(self, frame: Frame) -> None:
        """Replace everything on the surface with `frame`."""
        self._scene.clear()
        self.frame = frame
        ox, oy = frame.origin
        for cmd in frame.commands:
            self._add_command(cmd, ox, oy)
        for annotation in frame.annotations:
            self._add_annotation(annotation, ox, oy)
        self._scene.setSceneRect(0, 0, self.viewport().width(), self.viewport().height())
        logger.debug(f"Canvas holds {len(self._scene.items())} items for {frame.scene.name}")

    def measure_tooltip(self, content: str) -> tuple[float, float]:
        """Lay out `content` in the tooltip label and return its box size."""
        self.tooltip_label.setText(content)
        self.tooltip_label.adjustSize()
        size = self.tooltip_label.sizeHint()
        return float(size.width()), float(size.height())

    def show_tooltip(self, state: TooltipState) -> None:
        if not state.visible:
            self.tooltip_label.hide()
            return
        self.tooltip_label.setText(state.content)
        self.tooltip_label.adjustSize()
        self.tooltip_label.move(int(state.x), int(state.y))
        self.tooltip_label.raise_()
        self.tooltip_label.show()

    # ------------------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------------------

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        size = self.viewport().size()
        self.resized.emit(float(size.width()), float(size.height()))

    # ------------------------------------------------------------------------------
    # Command execution
    # ------------------------------------------------------------------------------

    def _add_command(self, cmd: DrawCommand, ox: float, oy: float) -> None:
        match cmd:
            case Rect():
                item = self._scene.addRect(ox + cmd.x, oy + cmd.y, cmd.width, cmd.height)
                item.setPen(pg.mkPen(None))
                item.setBrush(pg.mkBrush(cmd.fill))
            case Circle(datum=None):
                item = self._scene.addEllipse(ox + cmd.cx - cmd.r, oy + cmd.cy - cmd.r, 2 * cmd.r, 2 * cmd.r)
                item.setPen(pg.mkPen(None))
                item.setBrush(pg.mkBrush(cmd.fill))
            case Circle():
                item = PointItem(cmd, ox, oy, self)
                item.setPen(pg.mkPen(None))
                item.setBrush(pg.mkBrush(cmd.fill))
                self._scene.addItem(item)
            case Line():
                self._scene.addLine(ox + cmd.x1, oy + cmd.y1, ox + cmd.x2, oy + cmd.y2,
                                    pg.mkPen(cmd.stroke, width=cmd.width))
            case Text():
                self._add_text(cmd, ox, oy)
            case Polygon():
                polygon = QPolygonF([QPointF(ox + x, oy + y) for x, y in cmd.points])
                item = self._scene.addPolygon(polygon)
                item.setPen(pg.mkPen(cmd.stroke, width=0.5))
                item.setBrush(pg.mkBrush(cmd.fill))
            case _:
                raise TypeError(f"Unknown draw command: {cmd!r}")

    def _add_text(self, cmd: Text, ox: float, oy: float) -> QGraphicsSimpleTextItem:
        item = self._scene.addSimpleText(cmd.text)
        item.setBrush(pg.mkBrush(cmd.color))
        font = item.font()
        font.setPixelSize(cmd.size)
        item.setFont(font)

        rect = item.boundingRect()
        dx = {"start": 0.0, "middle": rect.width() / 2.0, "end": rect.width()}[cmd.anchor]
        # anchor point sits on the vertical centre of the text
        item.setPos(ox + cmd.x - dx, oy + cmd.y - rect.height() / 2.0)
        if cmd.rotation:
            item.setTransformOriginPoint(dx, rect.height() / 2.0)
            item.setRotation(cmd.rotation)
        return item

    def _add_annotation(self, annotation: Annotation, ox: float, oy: float) -> None:
        lx, ly = annotation.label_pos
        self._scene.addLine(ox + annotation.anchor_x, oy + annotation.anchor_y, ox + lx, oy + ly,
                            pg.mkPen(ANNOTATION_COLOR, width=1))
        anchor = "start" if annotation.offset_x >= 0 else "end"
        self._add_text(Text(lx + (4.0 if anchor == "start" else -4.0), ly, annotation.label,
                            color=ANNOTATION_COLOR, anchor=anchor, size=12), ox, oy)
