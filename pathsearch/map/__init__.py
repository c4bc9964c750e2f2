# pathsearch/map/__init__.py

from .base import SpaceModel
from .grid_map import GridModel
from .generator import GridGenerator

__all__ = ["SpaceModel", "GridModel", "GridGenerator"]
