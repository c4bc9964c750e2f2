# pathsearch/types.py
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True, order=True)
class Position:
    """
    统一的节点坐标定义 (不可变)
    维度由 SpaceModel 决定，网格模型里就是 (x, y)。
    相等性 / hash / 排序都基于 coords 元组，所以可以直接作为 dict 的 key。
    """
    coords: Tuple[int, ...]

    def __init__(self, *coords):
        # 支持 Position(1, 2) 和 Position((1, 2)) 两种写法
        if len(coords) == 1 and isinstance(coords[0], (tuple, list)):
            coords = tuple(coords[0])
        if not coords:
            raise ValueError("Position needs at least one coordinate")
        object.__setattr__(self, "coords", tuple(coords))

    @classmethod
    def of(cls, *coords) -> "Position":
        return cls(*coords)

    @property
    def dim(self) -> int:
        return len(self.coords)

    # 为了方便访问 x, y (网格模型里常用 pos.x)
    @property
    def x(self): return self.coords[0]

    @property
    def y(self): return self.coords[1]

    @property
    def z(self): return self.coords[2]

    def offset(self, *deltas) -> "Position":
        """返回平移后的新坐标，维度必须一致"""
        if len(deltas) != len(self.coords):
            raise ValueError(f"Offset {deltas} does not match dimension {self.dim}")
        return Position(*(c + d for c, d in zip(self.coords, deltas)))

    def key(self) -> str:
        """稳定的字符串 key，只用于日志/序列化，不参与查找"""
        return ",".join(str(c) for c in self.coords)

    def __getitem__(self, i):
        return self.coords[i]

    def __len__(self):
        return len(self.coords)

    def __iter__(self):
        return iter(self.coords)

    def __repr__(self):
        return f"Position({self.key()})"


@dataclass
class SearchNode:
    """
    搜索内部记录 (每个被发现的 Position 一份)
    不变量：f = g + h(node, goal)；g 只会被向下修正。
    """
    position: Position
    g: float
    f: float
    parent: Optional[Position] = None
    # PriorityQueue 返回的句柄，节点进入 closed 后置为 None
    handle: Any = None
    closed: bool = False


class SearchStatus(Enum):
    # 找到路径
    FOUND = "found"
    # open set 耗尽，目标不可达 (正常结果，不是错误)
    NO_PATH = "no_path"
    # 超过扩展上限被外部中止，和 NO_PATH 区分开
    ABORTED = "aborted"


@dataclass
class SearchStats:
    expansions: int = 0
    pushes: int = 0
    updates: int = 0


@dataclass
class SearchResult:
    """一次搜索的完整结果"""
    status: SearchStatus
    path: List[Position] = field(default_factory=list)
    cost: float = float("inf")
    # child -> parent，根节点 (start) 映射到 None
    came_from: Dict[Position, Optional[Position]] = field(default_factory=dict)
    closed: List[Position] = field(default_factory=list)
    stats: SearchStats = field(default_factory=SearchStats)

    @property
    def found(self) -> bool:
        return self.status is SearchStatus.FOUND

    @property
    def discovered(self) -> set:
        """所有被发现过的节点 (open + closed)"""
        return set(self.came_from)

    def __bool__(self):
        return self.found
