# pathsearch/planning/priority_queue.py
from typing import Any, Iterable, List, Optional, Sequence, Tuple

from pathsearch.config import QueueConfig
from pathsearch.exceptions import EmptyQueueError, InvalidInputError


class Handle:
    """
    元素句柄
    push 时返回给调用方，内部记录该元素当前在数组中的下标。
    每次交换 (bubble / sink) 都会同步更新 index，因此 update_priority 是 O(log n)，
    不需要线性查找。元素被弹出后 index 置为 -1，句柄失效。
    """
    __slots__ = ("payload", "index", "_owner")

    def __init__(self, payload: Any, index: int, owner: "PriorityQueue"):
        self.payload = payload
        self.index = index
        self._owner = owner

    @property
    def valid(self) -> bool:
        return self.index >= 0

    def __repr__(self):
        return f"Handle(index={self.index}, payload={self.payload!r})"


class PriorityQueue:
    """
    基于数组的二叉最小堆 (Binary Min-Heap)

    存储结构：
    - _priorities[i]: 第 i 个槽位的优先级 (任意可比较值，例如 float 或 (f, seq) 元组)
    - _entries[i]:    第 i 个槽位对应的 Handle (持有 payload)
    - _length:        逻辑长度，和底层数组容量 (capacity) 分开记录

    堆不变量：对所有合法下标 i，priority[i] <= priority[2i+1] 且 priority[i] <= priority[2i+2]。

    容量策略：
    - 满了就翻倍 (grow)
    - 长度低于 capacity * shrink_fraction 时减半 (shrink)，但不低于 min_capacity
    """

    def __init__(self,
                 priorities: Optional[Sequence[Any]] = None,
                 payloads: Optional[Sequence[Any]] = None,
                 config: Optional[QueueConfig] = None):
        self.config = config or QueueConfig()

        priorities = list(priorities) if priorities is not None else []
        if payloads is None:
            payloads = [None] * len(priorities)
        payloads = list(payloads)
        if len(payloads) != len(priorities):
            raise InvalidInputError(
                f"Cannot build a heap from {len(priorities)} priorities and {len(payloads)} payloads")

        self._length = len(priorities)
        capacity = self.config.min_capacity
        while capacity < self._length:
            capacity *= 2

        self._priorities: List[Any] = priorities + [None] * (capacity - self._length)
        self._entries: List[Optional[Handle]] = (
            [Handle(p, i, self) for i, p in enumerate(payloads)]
            + [None] * (capacity - self._length))

        if self._length:
            self.heapify()

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[Any, Any]],
                   config: Optional[QueueConfig] = None) -> "PriorityQueue":
        """从任意顺序的 (priority, payload) 对构建堆，O(n)"""
        pairs = list(pairs)
        return cls([p for p, _ in pairs], [e for _, e in pairs], config=config)

    # ------------------------------------------------------------------
    # 观察接口
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self._length

    def __bool__(self) -> bool:
        return self._length > 0

    @property
    def length(self) -> int:
        return self._length

    @property
    def capacity(self) -> int:
        return len(self._priorities)

    def contains(self, handle: Handle) -> bool:
        return (isinstance(handle, Handle) and handle._owner is self
                and 0 <= handle.index < self._length
                and self._entries[handle.index] is handle)

    def priority_of(self, handle: Handle) -> Any:
        self._check_handle(handle)
        return self._priorities[handle.index]

    def items(self) -> List[Tuple[Any, Any]]:
        """按数组顺序 (不是排序顺序) 返回 (priority, payload) 快照"""
        return [(self._priorities[i], self._entries[i].payload) for i in range(self._length)]

    def is_valid_heap(self) -> bool:
        """检查每个下标是否满足堆不变量，且句柄下标与槽位一致"""
        for i in range(self._length):
            if self._entries[i].index != i:
                return False
            for child in (2 * i + 1, 2 * i + 2):
                if child < self._length and self._priorities[child] < self._priorities[i]:
                    return False
        return True

    # ------------------------------------------------------------------
    # 核心操作
    # ------------------------------------------------------------------

    def push(self, priority: Any, payload: Any = None) -> Handle:
        """
        追加到逻辑末尾，然后向上冒泡直到父节点不再严格大于它。
        :return: 元素句柄，用于 update_priority
        """
        if self._length >= len(self._priorities):
            self._grow()

        index = self._length
        handle = Handle(payload, index, self)
        self._priorities[index] = priority
        self._entries[index] = handle
        self._length += 1

        self._bubble(index)
        return handle

    def pop_min(self) -> Any:
        """弹出优先级最小的 payload"""
        return self.pop_min_item()[1]

    def pop_min_item(self) -> Tuple[Any, Any]:
        """
        弹出堆顶，返回 (priority, payload)。
        末尾元素移到根部后向下沉；只剩一个元素时不需要 sink。
        """
        if self._length == 0:
            raise EmptyQueueError("pop from an empty priority queue")

        priority = self._priorities[0]
        handle = self._entries[0]

        self._length -= 1
        last = self._length
        if last > 0:
            self._priorities[0] = self._priorities[last]
            self._entries[0] = self._entries[last]
            self._entries[0].index = 0
        self._priorities[last] = None
        self._entries[last] = None

        if self._length > 1:
            self._sink(0)

        handle.index = -1
        self._maybe_shrink()
        return priority, handle.payload

    def peek(self) -> Any:
        if self._length == 0:
            raise EmptyQueueError("peek at an empty priority queue")
        return self._entries[0].payload

    def peek_priority(self) -> Any:
        if self._length == 0:
            raise EmptyQueueError("peek at an empty priority queue")
        return self._priorities[0]

    def update_priority(self, handle: Handle, new_priority: Any) -> None:
        """
        修改已有元素的优先级 (decrease-key / increase-key)。
        总是写入新值，然后：变小则上浮，变大则下沉，不变则什么都不做。
        """
        self._check_handle(handle)
        index = handle.index
        old_priority = self._priorities[index]
        self._priorities[index] = new_priority

        if new_priority < old_priority:
            self._bubble(index)
        elif old_priority < new_priority:
            self._sink(index)

    def heapify(self) -> None:
        """
        自底向上建堆，O(n)。
        从最后一个非叶子节点开始，依次对每个节点 sink 直到根。
        下标更大的子树已经是合法堆，所以处理完根以后整棵树都是合法的。
        对已经合法的堆调用不会改变任何元素位置。
        """
        for index in range(self._length // 2 - 1, -1, -1):
            self._sink(index)

    def clear(self) -> None:
        for i in range(self._length):
            self._entries[i].index = -1
        capacity = self.config.min_capacity
        self._priorities = [None] * capacity
        self._entries = [None] * capacity
        self._length = 0

    # ------------------------------------------------------------------
    # 内部辅助
    # ------------------------------------------------------------------

    def _check_handle(self, handle: Handle):
        if not self.contains(handle):
            raise InvalidInputError(f"{handle!r} does not belong to this queue or was already popped")

    def _swap(self, i: int, j: int):
        self._priorities[i], self._priorities[j] = self._priorities[j], self._priorities[i]
        self._entries[i], self._entries[j] = self._entries[j], self._entries[i]
        self._entries[i].index = i
        self._entries[j].index = j

    def _bubble(self, index: int):
        """上浮：父节点严格大于当前节点时交换，到根或遇到不大于的祖先为止"""
        priorities = self._priorities
        while index > 0:
            parent = (index - 1) // 2
            if priorities[index] < priorities[parent]:
                self._swap(index, parent)
                index = parent
            else:
                break

    def _sink(self, index: int):
        """
        下沉：和更小的孩子交换，直到叶子或者没有孩子严格更小。
        只有左孩子时，右孩子不参与比较 (不存在 != 无穷大哨兵)。
        """
        priorities = self._priorities
        length = self._length
        while True:
            left = 2 * index + 1
            if left >= length:
                break
            right = left + 1
            smaller = left
            if right < length and priorities[right] < priorities[left]:
                smaller = right

            if priorities[smaller] < priorities[index]:
                self._swap(index, smaller)
                index = smaller
            else:
                break

    def _grow(self):
        extra = max(len(self._priorities), 1)
        self._priorities.extend([None] * extra)
        self._entries.extend([None] * extra)

    def _maybe_shrink(self):
        # 减半以后依然能放下所有活跃元素，且不会跌破 min_capacity
        capacity = len(self._priorities)
        half = capacity // 2
        if half < self.config.min_capacity:
            return
        if self._length < capacity * self.config.shrink_fraction:
            del self._priorities[half:]
            del self._entries[half:]
