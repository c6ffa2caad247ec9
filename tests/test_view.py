"""Tests for the Qt canvas and main window (offscreen platform)."""

import numpy as np
import pytest

from meteoritestory.controller.dispatcher import SceneDispatcher
from meteoritestory.controller.tooltip import TooltipState
from meteoritestory.main import parse_args
from meteoritestory.model.frame import Annotation, Circle, Frame, Line, Polygon, Rect, Text
from meteoritestory.model.state import SCENE_TITLES, Scene
from meteoritestory.view.main_window import MainWindow
from meteoritestory.view.widgets.scene_canvas import PointItem, SceneCanvas


@pytest.fixture()
def canvas():
    return SceneCanvas()


def sample_frame(record):
    frame = Frame(Scene.DECADES, "t", 100.0, 100.0, origin=(10.0, 20.0))
    frame.add(
        Rect(0.0, 0.0, 10.0, 10.0),
        Circle(5.0, 5.0, 2.0),
        Circle(50.0, 50.0, 3.0, datum=record),
        Line(0.0, 0.0, 100.0, 0.0),
        Text(10.0, 10.0, "1990", rotation=-45.0, anchor="end"),
        Polygon(np.array([[0.0, 0.0], [10.0, 0.0], [10.0, 10.0]])),
    )
    frame.annotations.append(Annotation("Heaviest: X", 50.0, 50.0, 30.0, 30.0))
    return frame


def test_canvas_draws_every_command(canvas, make_record):
    record = make_record()
    canvas.set_frame(sample_frame(record))
    items = canvas.scene().items()
    # six commands, plus connector and label for the annotation
    assert len(items) == 8
    [point] = [i for i in items if isinstance(i, PointItem)]
    assert point.record is record
    assert point.rect().center().x() == pytest.approx(60.0)


def test_canvas_replaces_previous_frame(canvas, make_record):
    canvas.set_frame(sample_frame(make_record()))
    canvas.set_frame(Frame(Scene.EXPLORE, "t", 0.0, 0.0))
    assert canvas.scene().items() == []


def test_tooltip_label(canvas):
    width, height = canvas.measure_tooltip("<b>Hoba</b><br/>Year: 1920")
    assert width > 0 and height > 0

    canvas.show_tooltip(TooltipState(True, "<b>Hoba</b>", 30.0, 40.0))
    assert not canvas.tooltip_label.isHidden()
    assert (canvas.tooltip_label.x(), canvas.tooltip_label.y()) == (30, 40)

    canvas.show_tooltip(TooltipState())
    assert canvas.tooltip_label.isHidden()


def test_main_window_follows_dispatcher(landings):
    dispatcher = SceneDispatcher(landings, [], viewport=(800.0, 600.0))
    window = MainWindow(dispatcher)
    window.start(viewport=(800.0, 600.0))

    assert window.lbl_title.text() == SCENE_TITLES[Scene.DECADES]
    assert not window.btn_prev.isEnabled()
    assert window.explore_panel.isHidden()

    for _ in range(3):
        window.btn_next.click()
    assert window.lbl_title.text() == SCENE_TITLES[Scene.EXPLORE]
    assert not window.explore_panel.isHidden()
    assert not window.btn_next.isEnabled()

    window.slider_year.setValue(1950)
    window.combo_class.setCurrentText("Iron")
    assert (dispatcher.state.filter_year, dispatcher.state.filter_class) == (1950, "Iron")
    assert [c.datum.name for c in window.canvas.frame.data_points] == ["m11"]
    window.close()


def test_parse_args_defaults():
    args = parse_args([])
    assert args.log_level == "INFO"
    assert args.data.endswith("Meteorite_Landings.csv")
    assert parse_args(["--data", "x.csv"]).data == "x.csv"
