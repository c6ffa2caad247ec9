"""Tests for the scene renderers."""

import numpy as np
import pytest

from meteoritestory.controller import aggregate
from meteoritestory.controller.scenes import SceneContext, create_renderer
from meteoritestory.model.frame import Circle, Polygon, Rect, Text
from meteoritestory.model.records import Boundary
from meteoritestory.model.state import SCENE_TITLES, Scene, SceneState

WIDTH, HEIGHT = 700.0, 480.0


@pytest.fixture()
def boundaries():
    square = np.array([[-10, -10], [10, -10], [10, 10], [-10, 10], [-10, -10]], dtype=np.float64)
    return [Boundary("Square", [square]), Boundary("Islands", [square + 40, square - 40])]


def render(scene, records, boundaries=(), **state):
    ctx = SceneContext(records, list(boundaries), SceneState(index=scene, **state), WIDTH, HEIGHT, (70.0, 60.0))
    return create_renderer(scene).render(ctx)


@pytest.mark.parametrize("scene", list(Scene))
def test_every_scene_is_registered(scene, landings):
    frame = render(scene, landings)
    assert frame.scene == scene
    assert frame.title == SCENE_TITLES[scene]
    assert (frame.width, frame.height, frame.origin) == (WIDTH, HEIGHT, (70.0, 60.0))


@pytest.mark.parametrize("scene", list(Scene))
def test_every_scene_survives_an_empty_dataset(scene):
    frame = render(scene, ())
    assert frame.data_points == []
    assert frame.annotations == []


class TestDecades:
    def test_one_bar_per_decade(self, landings):
        frame = render(Scene.DECADES, landings)
        bars = frame.of_type(Rect)
        assert len(bars) == len(aggregate.decade_counts(landings))
        for bar in bars:
            assert 0.0 <= bar.y <= HEIGHT
            assert bar.y + bar.height == pytest.approx(HEIGHT)

    def test_decade_labels_are_rotated(self, make_record):
        frame = render(Scene.DECADES, [make_record(year=y) for y in (1990, 1991, 2005)])
        labels = [t.text for t in frame.of_type(Text) if t.rotation == -45.0]
        assert labels == ["1990", "2000"]

    def test_tallest_bar_reaches_top_of_niced_axis(self, make_record):
        frame = render(Scene.DECADES, [make_record(year=1990)] * 10)
        [bar] = frame.of_type(Rect)
        assert bar.y == pytest.approx(0.0)


class TestTopMass:
    def test_all_points_then_highlights(self, landings):
        frame = render(Scene.TOP_MASS_OVER_TIME, landings)
        circles = frame.of_type(Circle)
        assert len(circles) == len(landings) + 10
        highlighted = [c for c in circles if c.r == 6.0]
        assert len(highlighted) == 10
        assert circles[-10:] == highlighted

    def test_heaviest_is_annotated_at_its_point(self, landings):
        frame = render(Scene.TOP_MASS_OVER_TIME, landings)
        [annotation] = frame.annotations
        assert annotation.label == "nowhere-1 (50,000,000 g)"
        [point] = [c for c in frame.of_type(Circle) if c.r == 6.0 and c.datum.name == "nowhere-1"]
        assert (annotation.anchor_x, annotation.anchor_y) == (point.cx, point.cy)
        # heaviest mass sits on the top of the plot
        assert point.cy == pytest.approx(0.0, abs=1e-9)


class TestGeo:
    def test_outlines_drawn_before_points(self, landings, boundaries):
        frame = render(Scene.GEO_DISTRIBUTION, landings, boundaries)
        kinds = [type(c) for c in frame.commands]
        assert kinds.count(Polygon) == 3
        assert kinds.index(Circle) > max(i for i, k in enumerate(kinds) if k is Polygon)

    def test_only_geolocated_points(self, landings, boundaries):
        frame = render(Scene.GEO_DISTRIBUTION, landings, boundaries)
        assert len(frame.data_points) == 12
        assert all(c.datum.has_location for c in frame.data_points)

    def test_radius_grows_with_mass(self, landings):
        frame = render(Scene.GEO_DISTRIBUTION, landings)
        by_mass = sorted(frame.data_points, key=lambda c: c.datum.mass)
        assert by_mass[-1].r == pytest.approx(12.0)
        assert [c.r for c in by_mass] == sorted(c.r for c in by_mass)

    def test_heaviest_located_record_is_annotated(self, landings):
        frame = render(Scene.GEO_DISTRIBUTION, landings)
        [annotation] = frame.annotations
        assert annotation.label == "Heaviest: m6"

    def test_no_located_records(self, make_record, boundaries):
        frame = render(Scene.GEO_DISTRIBUTION, [make_record(), make_record(lat=1.0)], boundaries)
        assert frame.data_points == []
        assert frame.annotations == []
        assert len(frame.of_type(Polygon)) == 3


class TestExplore:
    def test_filtered_points(self, landings):
        frame = render(Scene.EXPLORE, landings, filter_year=1900, filter_class="Iron")
        names = sorted(c.datum.name for c in frame.data_points)
        assert names == ["m11", "m7", "m9", "nowhere-1"]
        assert frame.annotations == []

    def test_axes_do_not_move_with_the_filter(self, landings):
        wide = render(Scene.EXPLORE, landings, filter_year=0)
        narrow = render(Scene.EXPLORE, landings, filter_year=1950)
        position = {c.datum.name: (c.cx, c.cy) for c in wide.data_points}
        for c in narrow.data_points:
            assert position[c.datum.name] == (c.cx, c.cy)

    def test_empty_filter_keeps_axes(self, landings):
        frame = render(Scene.EXPLORE, landings, filter_year=3000)
        assert frame.data_points == []
        assert frame.of_type(Text)
