import random

from theta_nav.path_planner.priority_queue import PriorityQueue


def test_pop_order_is_non_decreasing():
    rng = random.Random(7)
    for n in (1, 2, 17, 200):
        pq = PriorityQueue()
        priorities = [rng.uniform(-50.0, 50.0) for _ in range(n)]
        for i, p in enumerate(priorities):
            pq.push(i, p)

        popped = [pq.pop() for _ in range(n)]
        popped_priorities = [priorities[i] for i in popped]

        assert popped_priorities == sorted(priorities)
        assert sorted(popped) == list(range(n))
        assert pq.is_empty()


def test_pop_empty_returns_none():
    pq = PriorityQueue()
    assert pq.is_empty()
    assert pq.pop() is None
    assert pq.peek_priority() is None

    pq.push("a", 1.0)
    assert pq.pop() == "a"
    assert pq.pop() is None


def test_len_bool_and_peek():
    pq = PriorityQueue()
    assert not pq
    pq.push(3, 2.5)
    pq.push(4, 0.5)
    pq.push(5, 1.5)

    assert len(pq) == 3
    assert pq
    assert pq.peek_priority() == 0.5
    assert pq.pop() == 4
    assert len(pq) == 2


def test_equal_priorities_do_not_compare_items():
    # dict 不可比较，同优先级时不能触发 item 比较
    pq = PriorityQueue()
    items = [{"id": i} for i in range(5)]
    for item in items:
        pq.push(item, 1.0)

    out = [pq.pop() for _ in range(5)]
    assert sorted(o["id"] for o in out) == list(range(5))


def test_duplicate_items_are_kept():
    pq = PriorityQueue()
    pq.push(9, 3.0)
    pq.push(9, 1.0)

    assert len(pq) == 2
    assert pq.pop() == 9
    assert pq.pop() == 9
    assert pq.is_empty()


def test_infinite_priority_sorts_last():
    pq = PriorityQueue()
    pq.push("far", float("inf"))
    pq.push("near", 10.0)
    assert pq.pop() == "near"
    assert pq.pop() == "far"
