# pathsearch/map/base.py
from abc import ABC, abstractmethod
from typing import Sequence

from pathsearch.types import Position


class SpaceModel(ABC):
    """
    搜索空间抽象基类
    A* 只通过这几个接口了解搜索空间，不关心底层是栅格、图还是别的什么。

    调用方义务 (A* 不强制，只在 validate_model 打开时做检查)：
    - neighbors 必须是有限序列，且不包含节点本身
    - heuristic_estimate 非负；要保证最优路径，必须是 admissible (不高估真实代价)
    - movement_cost 必须为正
    搜索过程中只读，不会被修改，所以多个线程可以共享同一个模型各自搜索。
    """

    @abstractmethod
    def neighbors(self, node: Position) -> Sequence[Position]:
        """一步可达的所有节点"""
        pass

    @abstractmethod
    def heuristic_estimate(self, node: Position, goal: Position) -> float:
        """从 node 到 goal 的剩余代价估计"""
        pass

    @abstractmethod
    def movement_cost(self, a: Position, b: Position) -> float:
        """相邻节点 a -> b 的单步精确代价"""
        pass

    def contains(self, node: Position) -> bool:
        """
        node 是否在模型的定义域内。
        起点/终点不在定义域内时 A* 会抛出 InvalidInputError。
        """
        return True
