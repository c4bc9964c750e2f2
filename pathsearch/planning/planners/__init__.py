# pathsearch/planning/planners/__init__.py

from .base import SearchBase
from .a_star import AStarSearch, find_path


__all__ = [
    "SearchBase",
    "AStarSearch",
    "find_path",
]
