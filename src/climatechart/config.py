"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents hardcoded paths scattered throughout the code.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find assets (the temperature CSV) when the app is frozen into an .exe.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    DEFAULT_DATA_PATH (str): Absolute path to the surface temperature table.
    CANVAS_WIDTH, CANVAS_HEIGHT (int): Size of the chart canvas in pixels.
    DEFAULT_FPS (int): Draw ticks per second.
    DATA_PATH_ENV (str): Environment variable overriding the data file.
"""
import logging
import sys
import os
from pathlib import Path
from typing import List

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: resolve relative to this file
    # config.py is in src/climatechart/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


# Global Constants
ASSETS_PATH: str = get_resource_path("assets")
DEFAULT_DATA_PATH: str = os.path.join(ASSETS_PATH, "surface-temperature.csv")

CANVAS_WIDTH: int = 1024
CANVAS_HEIGHT: int = 576
DEFAULT_FPS: int = 60

# Environment variable that overrides the bundled data file
DATA_PATH_ENV: str = "CLIMATECHART_DATA"


def resolve_data_path(argv: List[str]) -> str:
    """First command line argument, then $CLIMATECHART_DATA, then the bundled CSV."""
    if len(argv) > 1 and argv[1]:
        return argv[1]
    return os.environ.get(DATA_PATH_ENV) or DEFAULT_DATA_PATH


if not os.path.exists(ASSETS_PATH):
    logger.warning(f"Assets path not found at {ASSETS_PATH}")
