# tests/test_types.py
import sys
import os

import pytest

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pathsearch.types import Position, SearchResult, SearchStatus
from pathsearch.config import QueueConfig, SearchConfig


def test_position_equality_and_hash():
    a = Position(1, 2)
    assert a == Position((1, 2))
    assert a == Position.of(1, 2)
    assert a != Position(2, 1)
    assert a != Position(1, 2, 0)
    assert len({a, Position(1, 2), Position(2, 1)}) == 2
    assert {a: "x"}[Position(1, 2)] == "x"


def test_position_is_immutable():
    p = Position(0, 0)
    with pytest.raises(AttributeError):
        p.coords = (1, 1)


def test_position_order_and_key():
    assert sorted([Position(1, 0), Position(0, 5), Position(0, 1)]) == [
        Position(0, 1), Position(0, 5), Position(1, 0)]
    assert Position(3, -4).key() == "3,-4"
    assert repr(Position(3, -4)) == "Position(3,-4)"
    # key 只用于展示，不会出现 "1,23" / "12,3" 这种拼接冲突影响查找
    assert Position(1, 23) != Position(12, 3)


def test_position_accessors_and_offset():
    p = Position(1, 2, 3)
    assert (p.x, p.y, p.z) == (1, 2, 3)
    assert p.dim == 3
    assert list(p) == [1, 2, 3]
    assert p.offset(1, 0, -1) == Position(2, 2, 2)
    with pytest.raises(ValueError):
        p.offset(1, 1)
    with pytest.raises(ValueError):
        Position()


def test_search_result_truthiness():
    assert SearchResult(SearchStatus.FOUND, path=[Position(0, 0)], cost=0.0)
    assert not SearchResult(SearchStatus.NO_PATH)
    assert not SearchResult(SearchStatus.ABORTED)
    assert SearchResult(SearchStatus.NO_PATH).cost == float("inf")


def test_config_validation():
    with pytest.raises(ValueError):
        SearchConfig(max_expansions=-1)
    with pytest.raises(ValueError):
        QueueConfig(min_capacity=0)
    with pytest.raises(ValueError):
        QueueConfig(shrink_fraction=0.75)
