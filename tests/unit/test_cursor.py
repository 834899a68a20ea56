"""Unit tests for ChainCursor."""

import pytest

from node_chain import ChainConfig, ChainCursor, ChainModifiedError, NodeChain


@pytest.fixture
def chain():
    return NodeChain.from_iterable(["Hello", "World"])


def test_cursor_walks_root_to_tail(chain):
    cursor = chain.iter()
    assert isinstance(cursor, ChainCursor)
    assert next(cursor) == "Hello"
    assert next(cursor) == "World"
    with pytest.raises(StopIteration):
        next(cursor)


def test_single_node_cursor():
    cursor = NodeChain("only").iter()
    assert not cursor.exhausted
    assert list(cursor) == ["only"]
    assert cursor.exhausted


def test_exhausted_is_terminal(chain):
    cursor = chain.iter()
    list(cursor)

    for _ in range(3):
        with pytest.raises(StopIteration):
            next(cursor)

    # mutating after exhaustion does not revive or break the cursor
    chain.append("again")
    with pytest.raises(StopIteration):
        next(cursor)


def test_cursor_is_not_restartable(chain):
    cursor = iter(chain)
    assert list(cursor) == ["Hello", "World"]
    assert list(cursor) == []
    assert list(chain.iter()) == ["Hello", "World"]


def test_cursors_are_independent(chain):
    first = chain.iter()
    second = chain.iter()
    assert next(first) == "Hello"
    assert next(second) == "Hello"
    assert next(first) == "World"
    assert next(second) == "World"


def test_cursor_yields_element_references():
    payload = {"key": "value"}
    chain = NodeChain(payload)
    assert next(chain.iter()) is payload


def test_mutation_during_iteration_raises(chain):
    cursor = chain.iter()
    assert next(cursor) == "Hello"

    chain.insert_after("Hello", "Beautiful")

    with pytest.raises(ChainModifiedError):
        next(cursor)


def test_modified_error_is_runtime_error(chain):
    cursor = chain.iter()
    chain.append("x")
    with pytest.raises(RuntimeError):
        next(cursor)


def test_failed_insert_does_not_invalidate_cursor(chain):
    cursor = chain.iter()
    assert next(cursor) == "Hello"
    chain.insert_before("Coconut", "New")
    assert next(cursor) == "World"


def test_unchecked_cursor_observes_live_links():
    chain = NodeChain.from_iterable(["a", "c"], ChainConfig(check_modification=False))
    cursor = chain.iter()
    assert next(cursor) == "a"

    chain.insert_after("c", "d")

    assert list(cursor) == ["c", "d"]


def test_repr(chain):
    cursor = chain.iter()
    assert repr(cursor) == "ChainCursor(at='Hello')"
    list(cursor)
    assert repr(cursor) == "ChainCursor(exhausted)"
