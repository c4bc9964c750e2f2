# pathsearch/config.py
from dataclasses import dataclass
from typing import Optional


@dataclass
class SearchConfig:
    # 扩展节点数上限，None 表示不限制；超过上限时返回 ABORTED 而不是 NO_PATH
    max_expansions: Optional[int] = None
    # 每一步检查 SpaceModel 是否遵守契约 (代价为正、启发值非负、邻居不含自身)
    validate_model: bool = True

    def __post_init__(self):
        if self.max_expansions is not None and self.max_expansions < 0:
            raise ValueError("max_expansions must be >= 0")


@dataclass
class QueueConfig:
    # 底层数组的最小容量，shrink 不会低于这个值
    min_capacity: int = 8
    # 长度低于 capacity * shrink_fraction 时才减半，避免在边界处反复 grow/shrink
    shrink_fraction: float = 0.25

    def __post_init__(self):
        if self.min_capacity < 1:
            raise ValueError("min_capacity must be >= 1")
        if not 0.0 < self.shrink_fraction <= 0.5:
            raise ValueError("shrink_fraction must be in (0, 0.5]")
