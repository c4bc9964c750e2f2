from abc import ABC, abstractmethod
from pathsearch.types import Position

class Heuristic(ABC):
    @abstractmethod
    def estimate(self, current: Position, goal: Position) -> float:
        """统一接口：只接受当前点和目标点"""
        pass
