# pathsearch/planning/planners/a_star.py
import itertools
import logging
from typing import Dict, List, Optional

from pathsearch.types import Position, SearchNode, SearchResult, SearchStats, SearchStatus
from pathsearch.config import SearchConfig
from pathsearch.exceptions import ContractViolationError, InvalidInputError
from pathsearch.map.base import SpaceModel
from pathsearch.planning.interfaces import ISearchObserver
from pathsearch.planning.planners.base import SearchBase
from pathsearch.planning.priority_queue import PriorityQueue
from pathsearch.visualization.observers import EfficientObserver

logger = logging.getLogger(__name__)


class AStarSearch(SearchBase):
    """
    通用 A* 搜索，搜索空间由 SpaceModel 提供。

    工作流程：
    1. g(start) = 0, f(start) = h(start, goal)，起点入 OpenSet。
    2. 每轮从 OpenSet (PriorityQueue) 取出 f 最小的节点：
       - 是终点则沿前驱回溯得到路径；
       - 否则移入 ClosedSet，并用 movement_cost 松弛所有未关闭的邻居。
    3. OpenSet 耗尽仍未到达终点 -> NO_PATH。

    OpenSet 的成员关系和取最小值全部走 PriorityQueue：
    已在 OpenSet 中的节点找到更短路径时用句柄做 decrease-key，而不是重复插入。
    优先级是 (f, seq)，seq 每次插入/更新递增，所以 f 相同时先进先出，结果可复现。
    """

    def __init__(self, config: Optional[SearchConfig] = None):
        self.config = config or SearchConfig()

    def search(self,
               model: SpaceModel,
               start: Position,
               goal: Position,
               observer: Optional[ISearchObserver] = None) -> SearchResult:

        # 1. 初始化观察者
        if observer is None:
            observer = EfficientObserver()
        observer.set_map_info(model)

        # 2. 输入检查：起终点必须在模型定义域内
        self._check_input(model, start, goal)
        observer.log("Start planning", payload={"start": start.key(), "goal": goal.key()})

        # 3. 初始化核心容器
        stats = SearchStats()
        seq = itertools.count()
        open_set = PriorityQueue()

        # 每个被发现的节点一条记录：g / f / 前驱 / 句柄
        nodes: Dict[Position, SearchNode] = {}
        closed_order: List[Position] = []

        h_start = self._heuristic(model, start, goal)
        start_node = SearchNode(start, 0.0, h_start, None)
        start_node.handle = open_set.push((h_start, next(seq)), start)
        nodes[start] = start_node
        stats.pushes += 1
        observer.record_open_set_node(start, h_start, h_start)

        max_expansions = self.config.max_expansions

        # 4. 主循环
        while open_set:
            current = open_set.pop_min()
            current_node = nodes[current]
            current_node.handle = None

            # A. 终止条件
            if current == goal:
                path = self._reconstruct_path(nodes, current)
                logger.debug("[A*] Path found: %d nodes, cost=%.3f, expansions=%d",
                             len(path), current_node.g, stats.expansions)
                observer.log("Path found", payload={"cost": current_node.g, "expansions": stats.expansions})
                return self._make_result(SearchStatus.FOUND, nodes, closed_order, stats,
                                         path=path, cost=current_node.g)

            # B. 扩展上限：由调用方设置，超过后报告 ABORTED (区别于 NO_PATH)
            if max_expansions is not None and stats.expansions >= max_expansions:
                logger.info("[A*] Expansion limit %d reached, search aborted.", max_expansions)
                observer.log("Search aborted", level='WARN', payload={"max_expansions": max_expansions})
                return self._make_result(SearchStatus.ABORTED, nodes, closed_order, stats)

            # C. 关闭当前节点
            current_node.closed = True
            closed_order.append(current)
            stats.expansions += 1
            observer.record_current_expansion(current)

            # D. 扩展邻居
            for neighbor in model.neighbors(current):
                if self.config.validate_model and neighbor == current:
                    raise ContractViolationError(f"{current!r} was returned as its own neighbor")
                neighbor_node = nodes.get(neighbor)

                # D.1 已关闭的节点不再考虑
                if neighbor_node is not None and neighbor_node.closed:
                    continue

                # D.2 计算 G 值
                tentative_g = current_node.g + self._step_cost(model, current, neighbor)

                # D.3 新发现的节点，或者找到了更短的路径
                if neighbor_node is None or tentative_g < neighbor_node.g:
                    h_val = self._heuristic(model, neighbor, goal)
                    f_val = tentative_g + h_val

                    if neighbor_node is None:
                        neighbor_node = SearchNode(neighbor, tentative_g, f_val, current)
                        neighbor_node.handle = open_set.push((f_val, next(seq)), neighbor)
                        nodes[neighbor] = neighbor_node
                        stats.pushes += 1
                    else:
                        # 已在 OpenSet 中：decrease-key
                        neighbor_node.g = tentative_g
                        neighbor_node.f = f_val
                        neighbor_node.parent = current
                        open_set.update_priority(neighbor_node.handle, (f_val, next(seq)))
                        stats.updates += 1

                    observer.record_edge(current, neighbor)
                    observer.record_open_set_node(neighbor, f_val, h_val)

        logger.debug("[A*] Open set is empty, no path found (%d nodes expanded).", stats.expansions)
        observer.log("Open set is empty, no path found", payload={"expansions": stats.expansions})
        return self._make_result(SearchStatus.NO_PATH, nodes, closed_order, stats)

    # ------------------------------------------------------------------
    # 辅助函数
    # ------------------------------------------------------------------

    def _check_input(self, model: SpaceModel, start: Position, goal: Position):
        if not isinstance(start, Position) or not isinstance(goal, Position):
            raise InvalidInputError(f"Start and goal must be Position instances, got {start!r} and {goal!r}")
        if not model.contains(start):
            raise InvalidInputError(f"Start {start!r} is outside the search space")
        if not model.contains(goal):
            raise InvalidInputError(f"Goal {goal!r} is outside the search space")

    def _heuristic(self, model: SpaceModel, node: Position, goal: Position) -> float:
        h_val = model.heuristic_estimate(node, goal)
        if self.config.validate_model and h_val < 0:
            raise ContractViolationError(f"Heuristic returned negative estimate {h_val} for {node!r}")
        return h_val

    def _step_cost(self, model: SpaceModel, current: Position, neighbor: Position) -> float:
        cost = model.movement_cost(current, neighbor)
        if self.config.validate_model and not cost > 0:
            raise ContractViolationError(
                f"Movement cost {current!r} -> {neighbor!r} must be positive, got {cost}")
        return cost

    def _reconstruct_path(self, nodes: Dict[Position, SearchNode], current: Position) -> List[Position]:
        """从终点沿前驱回溯到起点，再反转"""
        path = []
        while current is not None:
            path.append(current)
            current = nodes[current].parent
        return path[::-1]

    def _make_result(self, status, nodes, closed_order, stats, path=None, cost=float("inf")) -> SearchResult:
        return SearchResult(
            status=status,
            path=path or [],
            cost=cost,
            came_from={pos: node.parent for pos, node in nodes.items()},
            closed=list(closed_order),
            stats=stats,
        )


def find_path(model: SpaceModel,
              start: Position,
              goal: Position,
              config: Optional[SearchConfig] = None,
              observer: Optional[ISearchObserver] = None) -> SearchResult:
    """便捷入口：用默认配置跑一次 A*"""
    return AStarSearch(config).search(model, start, goal, observer)
