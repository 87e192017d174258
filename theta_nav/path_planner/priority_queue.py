#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
优先队列模块：基于 heapq 的二叉最小堆
"""

import heapq
from itertools import count
from typing import Any, List, Optional, Tuple


class PriorityQueue:
    """
    二叉最小堆，按浮点优先级出队

    不提供 decrease-key / 任意删除：被取代的旧条目留在堆中，
    由调用方在出队时通过 closed 标记惰性过滤。

    示例:
        ```python
        pq = PriorityQueue()
        pq.push(7, 2.5)
        pq.push(3, 1.0)
        pq.pop()  # -> 3
        ```
    """

    def __init__(self) -> None:
        # (priority, seq, item)，seq 保证不会比较 item 本身
        self._heap: List[Tuple[float, int, Any]] = []
        self._counter = count()

    def push(self, item: Any, priority: float) -> None:
        """插入元素，O(log n)"""
        heapq.heappush(self._heap, (priority, next(self._counter), item))

    def pop(self) -> Optional[Any]:
        """
        弹出优先级最小的元素，O(log n)

        Returns:
            最小优先级元素，队列为空时返回 None
        """
        if not self._heap:
            return None
        return heapq.heappop(self._heap)[2]

    def peek_priority(self) -> Optional[float]:
        """查看当前最小优先级，队列为空时返回 None"""
        if not self._heap:
            return None
        return self._heap[0][0]

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
