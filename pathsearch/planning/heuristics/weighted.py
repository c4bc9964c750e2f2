# pathsearch/planning/heuristics/weighted.py
from pathsearch.types import Position
from .base import Heuristic

class WeightedHeuristic(Heuristic):
    """
    Weighted A*: h' = weight * h
    weight > 1 时不再 admissible，结果不保证最优，但扩展节点数通常明显减少。
    调用方需要自己决定是否接受这种 best-effort 结果。
    """
    def __init__(self, inner: Heuristic, weight: float = 1.5):
        if weight < 0:
            raise ValueError("weight must be non-negative")
        self.inner = inner
        self.weight = weight

    def estimate(self, current: Position, goal: Position) -> float:
        return self.weight * self.inner.estimate(current, goal)
