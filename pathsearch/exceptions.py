# pathsearch/exceptions.py
"""
异常定义

约定：
- "找不到路径" / "搜索被中止" 是正常结果 (SearchStatus)，不抛异常。
- 只有调用方传入了非法输入、或者 SpaceModel 违反契约时才抛出。
"""


class PathSearchError(Exception):
    """本包所有异常的基类"""


class InvalidInputError(PathSearchError, ValueError):
    """起点/终点不在模型定义域内，或队列操作参数非法"""


class EmptyQueueError(InvalidInputError, IndexError):
    """对空队列执行 pop_min / peek"""


class ContractViolationError(PathSearchError):
    """
    SpaceModel 违反契约：
    负的或零移动代价、负的启发值、把节点自己作为邻居返回。
    """
