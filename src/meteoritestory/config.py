"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: Data file locations and layout constants live in one place
   instead of being scattered through the scene code.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find the bundled CSV and GeoJSON when the app is frozen into an .exe.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    DEFAULT_DATA_PATH (str): Meteorite landings CSV.
    DEFAULT_WORLD_PATH (str): World countries GeoJSON.
    MARGINS (Margins): Fixed drawing-surface margins in pixels.
"""
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Margins:
    top: int = 60
    right: int = 30
    bottom: int = 60
    left: int = 70


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # config.py is in src/meteoritestory/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


# Global Constants
ASSETS_PATH: str = get_resource_path("assets")
DEFAULT_DATA_PATH: str = os.path.join(ASSETS_PATH, "Meteorite_Landings.csv")
DEFAULT_WORLD_PATH: str = os.path.join(ASSETS_PATH, "countries.geojson")

MARGINS = Margins()
DEFAULT_VIEWPORT: tuple[int, int] = (960, 600)

TOP_N: int = 10
ALL_CLASSES: str = "All"

if not os.path.exists(ASSETS_PATH):
    logger.warning(f"Assets path not found at {ASSETS_PATH}")
