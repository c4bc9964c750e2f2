# tests/planning/test_priority_queue.py
import sys
import os
import random

import pytest

sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from pathsearch.config import QueueConfig
from pathsearch.exceptions import EmptyQueueError, InvalidInputError
from pathsearch.planning.priority_queue import PriorityQueue


def drain(queue):
    out = []
    while queue:
        out.append(queue.pop_min_item())
    return out


def test_push_to_empty_queue():
    q = PriorityQueue()
    handle = q.push(3.0, "a")
    assert len(q) == 1
    assert q.peek() == "a"
    assert q.peek_priority() == 3.0
    assert handle.index == 0
    assert q.is_valid_heap()


def test_pop_returns_global_minimum():
    rng = random.Random(7)
    q = PriorityQueue()
    priorities = [rng.uniform(0, 100) for _ in range(200)]
    for i, p in enumerate(priorities):
        q.push(p, i)
        assert q.is_valid_heap()

    popped = []
    while q:
        assert q.peek_priority() == min(p for p, _ in q.items())
        priority, payload = q.pop_min_item()
        assert priorities[payload] == priority
        popped.append(priority)
        assert q.is_valid_heap()

    # 出队顺序非递减
    assert popped == sorted(priorities)


def test_pop_last_element():
    q = PriorityQueue()
    h = q.push(1, "only")
    assert q.pop_min() == "only"
    assert len(q) == 0
    assert not h.valid


def test_empty_queue_operations_raise():
    q = PriorityQueue()
    with pytest.raises(EmptyQueueError):
        q.pop_min()
    with pytest.raises(EmptyQueueError):
        q.peek()
    with pytest.raises(EmptyQueueError):
        q.peek_priority()
    # EmptyQueueError 同时是 InvalidInputError / IndexError
    with pytest.raises(IndexError):
        q.pop_min()
    with pytest.raises(InvalidInputError):
        q.peek()


def test_sink_with_single_child():
    # 长度为 4 时下标 1 只有左孩子 (下标 3)，右孩子不存在不能参与比较
    q = PriorityQueue()
    for p in [1, 2, 3, 4]:
        q.push(p, p)
    assert q.pop_min() == 1
    assert q.items()[0][0] == 2
    assert q.is_valid_heap()

    q = PriorityQueue([10, 20, 30, 5], ["a", "b", "c", "d"])
    assert q.is_valid_heap()
    assert [p for p, _ in drain(q)] == [5, 10, 20, 30]


def test_update_priority_decrease_and_increase():
    q = PriorityQueue()
    handles = {name: q.push(p, name) for name, p in [("a", 5), ("b", 6), ("c", 7), ("d", 8), ("e", 9)]}

    # decrease-key: e 变成最小
    q.update_priority(handles["e"], 1)
    assert q.peek() == "e"
    assert q.priority_of(handles["e"]) == 1
    assert q.is_valid_heap()

    # increase-key: e 又沉到底
    q.update_priority(handles["e"], 100)
    assert q.peek() == "a"
    assert q.is_valid_heap()

    # 所有句柄依然指向自己的元素
    for name, h in handles.items():
        assert q.contains(h)
        assert q.items()[h.index][1] == name

    assert [e for _, e in drain(q)] == ["a", "b", "c", "d", "e"]


def test_update_to_same_priority_is_noop():
    q = PriorityQueue()
    handles = [q.push(p, p) for p in [4, 1, 3, 2]]
    before = q.items()
    q.update_priority(handles[2], 3)
    assert q.items() == before
    assert q.is_valid_heap()


def test_update_with_stale_or_foreign_handle_raises():
    q = PriorityQueue()
    h = q.push(1, "x")
    q.push(2, "y")
    q.pop_min()
    with pytest.raises(InvalidInputError):
        q.update_priority(h, 0)

    other = PriorityQueue()
    foreign = other.push(1, "z")
    with pytest.raises(InvalidInputError):
        q.update_priority(foreign, 0)
    assert not q.contains(foreign)


def test_random_operation_sequences_keep_invariant():
    rng = random.Random(2024)
    q = PriorityQueue(config=QueueConfig(min_capacity=1))
    live = {}
    counter = 0
    for _ in range(2000):
        op = rng.random()
        if op < 0.45 or not live:
            counter += 1
            live[counter] = q.push(rng.randint(0, 50), counter)
        elif op < 0.75:
            key = rng.choice(list(live))
            q.update_priority(live[key], rng.randint(0, 50))
        else:
            expected = q.peek_priority()
            priority, payload = q.pop_min_item()
            assert priority == expected
            assert priority == min([priority] + [q.priority_of(h) for k, h in live.items() if k != payload])
            del live[payload]
        assert q.is_valid_heap()
        assert len(q) == len(live)
        assert q.capacity >= len(q)


def test_heapify_builds_valid_heap_and_is_idempotent():
    rng = random.Random(3)
    pairs = [(rng.randint(0, 1000), i) for i in range(101)]
    q = PriorityQueue.from_pairs(pairs)
    assert len(q) == 101
    assert q.is_valid_heap()

    snapshot = q.items()
    q.heapify()
    assert q.items() == snapshot

    assert [p for p, _ in drain(q)] == sorted(p for p, _ in pairs)


@pytest.mark.parametrize("n", [1, 7, 64, 1000])
def test_heapify_swaps_are_linear(monkeypatch, n):
    swaps = []
    original = PriorityQueue._swap

    def counting_swap(self, i, j):
        swaps.append((i, j))
        original(self, i, j)

    monkeypatch.setattr(PriorityQueue, "_swap", counting_swap)

    # 逆序输入让每个非叶子节点都下沉到底，交换次数仍不超过 n
    q = PriorityQueue(list(range(n, 0, -1)), list(range(n)))
    assert q.is_valid_heap()
    assert len(swaps) <= n

    swaps.clear()
    q.heapify()
    assert swaps == []


def test_construct_with_mismatched_lengths_raises():
    with pytest.raises(InvalidInputError):
        PriorityQueue([1, 2, 3], ["a"])


def test_tuple_priorities_break_ties_in_insertion_order():
    q = PriorityQueue()
    for seq, name in enumerate(["first", "second", "third"]):
        q.push((1.0, seq), name)
    q.push((0.5, 99), "best")
    assert [e for _, e in drain(q)] == ["best", "first", "second", "third"]


def test_capacity_grows_by_doubling_and_shrinks_by_halving():
    q = PriorityQueue(config=QueueConfig(min_capacity=2))
    assert q.capacity == 2
    seen = set()
    for i in range(32):
        q.push(i, i)
        seen.add(q.capacity)
    assert seen == {2, 4, 8, 16, 32}
    assert q.capacity == 32

    capacities = []
    while q:
        q.pop_min()
        assert q.capacity >= len(q)
        capacities.append(q.capacity)
    # 只在长度低于 1/4 容量时减半，且不低于 min_capacity
    assert capacities[32 - 8 - 1] == 32
    assert capacities[32 - 7 - 1] == 16
    assert q.capacity == 2


def test_clear_invalidates_handles():
    q = PriorityQueue()
    handles = [q.push(i, i) for i in range(10)]
    q.clear()
    assert len(q) == 0
    assert all(not h.valid for h in handles)
    with pytest.raises(EmptyQueueError):
        q.pop_min()
