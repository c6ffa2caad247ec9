"""
Scene Renderers
===============
One renderer per narrative scene. Each turns the shared dataset, the scene
state and the current plot size into a Frame of draw commands.

Renderers register themselves by scene index; the dispatcher looks them up
with `create_renderer()`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from meteoritestory.controller import aggregate
from meteoritestory.controller.annotations import map_annotation, timeline_annotation
from meteoritestory.controller.axes import bottom_axis, left_axis
from meteoritestory.controller.scales import BandScale, LinearScale, LogScale, MercatorProjection, SqrtScale
from meteoritestory.model.frame import Circle, Frame, Polygon, Rect
from meteoritestory.model.records import Boundary, Dataset
from meteoritestory.model.state import Scene, SceneState
from meteoritestory.utils import format_si

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SceneContext:
    """Everything a renderer may read. `width`/`height` are the inner plot size."""
    records: Dataset
    boundaries: Sequence[Boundary]
    state: SceneState
    width: float
    height: float
    origin: tuple[float, float] = (0.0, 0.0)


class SceneRenderer:
    """Base class for scene renderers."""
    SCENE: Scene

    def render(self, ctx: SceneContext) -> Frame:
        frame = Frame(
            scene=self.SCENE,
            title=ctx.state.title,
            width=ctx.width,
            height=ctx.height,
            origin=ctx.origin,
        )
        self.draw(ctx, frame)
        logger.debug(f"Rendered {self.SCENE.name}: {len(frame.commands)} commands, {len(frame.annotations)} annotations")
        return frame

    def draw(self, ctx: SceneContext, frame: Frame) -> None:
        raise NotImplementedError


_REGISTRY: dict[Scene, type[SceneRenderer]] = {}


def register_scene(cls: type[SceneRenderer]) -> type[SceneRenderer]:
    """Class decorator to register a renderer by its SCENE."""
    scene = getattr(cls, "SCENE", None)
    if scene is None:
        raise ValueError(f"{cls.__name__} must define SCENE")
    _REGISTRY[scene] = cls
    return cls


def create_renderer(scene: Scene) -> SceneRenderer:
    cls = _REGISTRY.get(scene)
    if not cls:
        raise KeyError(f"No renderer registered for scene '{scene.name}'")
    return cls()


def timeline_scales(ctx: SceneContext) -> tuple[LinearScale, LogScale]:
    """Year x log-mass scales over the full dataset, so filtering never moves the axes."""
    x = LinearScale.from_values((r.year for r in ctx.records), (0.0, ctx.width))
    y = LogScale.for_mass(aggregate.max_mass(ctx.records), (ctx.height, 0.0))
    return x, y


def draw_timeline_axes(frame: Frame, x: LinearScale, y: LogScale, ctx: SceneContext) -> None:
    frame.add(*bottom_axis([(x(t), f"{t:.0f}") for t in x.ticks()], ctx.width, ctx.height))
    frame.add(*left_axis([(y(t), format_si(t)) for t in y.ticks()], ctx.height))


# ------------------------------------------------------------------------------
# Scenes
# ------------------------------------------------------------------------------

@register_scene
class DecadesScene(SceneRenderer):
    SCENE = Scene.DECADES
    BAR_COLOR = "#555"
    LABEL_ROTATION = -45.0

    def draw(self, ctx: SceneContext, frame: Frame) -> None:
        buckets = aggregate.decade_counts(ctx.records)
        x = BandScale.from_keys([decade for decade, _ in buckets], (0.0, ctx.width))
        y = LinearScale.from_values((count for _, count in buckets), (ctx.height, 0.0), include_zero=True)

        frame.add(*bottom_axis(
            [(x.center(decade), str(decade)) for decade in x.domain],
            ctx.width, ctx.height, rotation=self.LABEL_ROTATION,
        ))
        frame.add(*left_axis([(y(t), f"{t:g}") for t in y.ticks()], ctx.height))

        for decade, count in buckets:
            top = y(count)
            frame.add(Rect(x(decade), top, x.bandwidth, max(0.0, ctx.height - top), fill=self.BAR_COLOR))


@register_scene
class TopMassScene(SceneRenderer):
    SCENE = Scene.TOP_MASS_OVER_TIME

    def draw(self, ctx: SceneContext, frame: Frame) -> None:
        x, y = timeline_scales(ctx)
        draw_timeline_axes(frame, x, y, ctx)

        for r in ctx.records:
            frame.add(Circle(x(r.year), y(r.mass), 2.0, fill="#777", datum=r))

        top = aggregate.top_by_mass(ctx.records)
        for r in top:
            frame.add(Circle(x(r.year), y(r.mass), 6.0, fill="#ff0", datum=r))

        frame.annotations.extend(timeline_annotation(top, lambda r: (x(r.year), y(r.mass))))


@register_scene
class GeoScene(SceneRenderer):
    SCENE = Scene.GEO_DISTRIBUTION
    LAND_FILL = "#111"
    LAND_STROKE = "#333"
    POINT_FILL = (255, 255, 255, 153)

    def draw(self, ctx: SceneContext, frame: Frame) -> None:
        projection = MercatorProjection.fitted(ctx.width, ctx.height)

        # outlines first so points sit on top
        for boundary in ctx.boundaries:
            for ring in boundary.rings:
                frame.add(Polygon(projection.project(ring), fill=self.LAND_FILL, stroke=self.LAND_STROKE))

        points = aggregate.geolocated(ctx.records)
        radius = SqrtScale.for_mass(aggregate.max_mass(points))
        for r in points:
            px, py = projection(r.lon, r.lat)
            frame.add(Circle(px, py, radius(r.mass), fill=self.POINT_FILL, datum=r))

        frame.annotations.extend(map_annotation(points, lambda r: projection(r.lon, r.lat)))


@register_scene
class ExploreScene(SceneRenderer):
    SCENE = Scene.EXPLORE
    POINT_FILL = "#0af"

    def draw(self, ctx: SceneContext, frame: Frame) -> None:
        x, y = timeline_scales(ctx)
        draw_timeline_axes(frame, x, y, ctx)

        subset = aggregate.filter_by_year_and_class(ctx.records, ctx.state.filter_year, ctx.state.filter_class)
        for r in subset:
            frame.add(Circle(x(r.year), y(r.mass), 3.0, fill=self.POINT_FILL, datum=r))
