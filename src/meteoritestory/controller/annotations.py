"""
Annotation Planner
One callout per emphasised scene, pinned to the heaviest record of the
scene's active subset. An empty subset yields no callout.
"""
from __future__ import annotations

from typing import Callable, Sequence

from meteoritestory.controller.aggregate import heaviest
from meteoritestory.model.frame import Annotation
from meteoritestory.model.records import Record
from meteoritestory.utils import format_thousands

TIMELINE_OFFSET = (40.0, -40.0)
MAP_OFFSET = (30.0, 30.0)


def plan_heaviest(
    records: Sequence[Record],
    locate: Callable[[Record], tuple[float, float]],
    label: Callable[[Record], str],
    offset: tuple[float, float],
) -> list[Annotation]:
    big = heaviest(records)
    if big is None:
        return []
    x, y = locate(big)
    return [Annotation(label=label(big), anchor_x=x, anchor_y=y, offset_x=offset[0], offset_y=offset[1])]


def timeline_annotation(records: Sequence[Record], locate: Callable[[Record], tuple[float, float]]) -> list[Annotation]:
    return plan_heaviest(
        records,
        locate,
        label=lambda r: f"{r.name} ({format_thousands(r.mass)} g)",
        offset=TIMELINE_OFFSET,
    )


def map_annotation(records: Sequence[Record], locate: Callable[[Record], tuple[float, float]]) -> list[Annotation]:
    return plan_heaviest(
        records,
        locate,
        label=lambda r: f"Heaviest: {r.name}",
        offset=MAP_OFFSET,
    )
