# pathsearch/planning/costs/base.py
from abc import ABC, abstractmethod
from pathsearch.types import Position

class CostFunction(ABC):
    """
    代价函数基类 (Strategy Interface)
    用于定义从 current 移动到相邻 next_node 的代价。
    """
    @abstractmethod
    def calculate(self, current: Position, next_node: Position) -> float:
        """
        计算单步移动代价
        :param current: 当前节点
        :param next_node: 下一步节点 (与 current 相邻)
        :return: 代价数值 (必须 >= 0)
        """
        pass
