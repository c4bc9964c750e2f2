# pathsearch/planning/planners/base.py
from abc import ABC, abstractmethod
from typing import Optional

from pathsearch.types import Position, SearchResult
from pathsearch.map.base import SpaceModel
from pathsearch.planning.interfaces import ISearchObserver

class SearchBase(ABC):
    """
    所有路径搜索器的抽象基类
    """

    @abstractmethod
    def search(self,
               model: SpaceModel,
               start: Position,
               goal: Position,
               observer: Optional[ISearchObserver] = None) -> SearchResult:
        """
        执行路径搜索
        :param model: 搜索空间
        :param start: 起点
        :param goal: 终点
        :param observer: 观察者钩子 (用于记录/可视化搜索过程)
        :return: SearchResult，失败时 status 为 NO_PATH 或 ABORTED
        """
        pass
