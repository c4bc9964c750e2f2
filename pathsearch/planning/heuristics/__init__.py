# pathsearch/planning/heuristics/__init__.py

from .base import Heuristic
from .euclidean import EuclideanHeuristic
from .octile import OctileHeuristic, DIAGONAL_COST
from .zero import ZeroHeuristic
from .manhattan import ManhattanHeuristic
from .weighted import WeightedHeuristic


__all__ = [
    "Heuristic",
    "EuclideanHeuristic",
    "OctileHeuristic",
    "ZeroHeuristic",
    "ManhattanHeuristic",
    "WeightedHeuristic",
    "DIAGONAL_COST",
]
