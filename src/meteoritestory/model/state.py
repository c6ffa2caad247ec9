"""
Scene State
===========
The only mutable state the rendering engine owns.

Why is this file needed?
------------------------
1. Ownership: One explicit object replaces loose module globals for the
   current scene index and the explore filters.
2. Single writer: Only the SceneDispatcher mutates it; views read it.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum

from meteoritestory.config import ALL_CLASSES

logger = logging.getLogger(__name__)


class Scene(IntEnum):
    """The fixed narrative order."""
    DECADES = 0
    TOP_MASS_OVER_TIME = 1
    GEO_DISTRIBUTION = 2
    EXPLORE = 3


SCENE_TITLES: dict[Scene, str] = {
    Scene.DECADES: "1 Meteorite Falls per Decade",
    Scene.TOP_MASS_OVER_TIME: "2 Heaviest Meteorites Over Time",
    Scene.GEO_DISTRIBUTION: "3 Global Distribution by Mass",
    Scene.EXPLORE: "4 Explore Meteorites Freely",
}

FIRST_SCENE = min(Scene)
LAST_SCENE = max(Scene)


@dataclass
class SceneState:
    index: Scene = Scene.DECADES
    filter_year: int = 0
    filter_class: str = ALL_CLASSES

    @property
    def title(self) -> str:
        return SCENE_TITLES[self.index]

    @property
    def explore_controls_visible(self) -> bool:
        return self.index == Scene.EXPLORE

    def step(self, delta: int) -> bool:
        """Move by `delta` scenes, clamped to the first/last scene. Returns True if the index changed."""
        target = Scene(max(FIRST_SCENE, min(LAST_SCENE, self.index + delta)))
        if target == self.index:
            return False
        logger.debug(f"Scene {self.index.name} -> {target.name}")
        self.index = target
        return True
