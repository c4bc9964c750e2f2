# pathsearch/planning/heuristics/euclidean.py
import math
from pathsearch.types import Position
from .base import Heuristic

class EuclideanHeuristic(Heuristic):
    """
    欧氏距离启发式
    注意：GridModel 的斜行代价是 1.4 < sqrt(2)，所以单步斜行时会略微高估，
    严格来说不是 admissible。需要保证最优时用 OctileHeuristic。
    """
    def estimate(self, current: Position, goal: Position) -> float:
        return math.dist(current.coords, goal.coords)
