# search/frontier.py

import heapq

from grid_path.domain.entities.node import Node


class Frontier:
    """
    Min-heap of open nodes keyed on f, FIFO among equal f.
    The key is captured at push time, so a node relaxed while open is simply
    pushed again; the old entry surfaces later and the engine drops it
    because the coordinate is already closed.
    """

    def __init__(self):
        self._q: list[tuple[float, int, Node]] = []
        self._seq = 0

    def push(self, node: Node) -> None:
        self._seq += 1
        heapq.heappush(self._q, (node.f, self._seq, node))

    def peek(self) -> Node:
        if not self._q:
            raise IndexError("peek from an empty frontier")
        return self._q[0][2]

    def pop(self) -> Node:
        if not self._q:
            raise IndexError("pop from an empty frontier")
        return heapq.heappop(self._q)[2]

    def __len__(self) -> int:
        return len(self._q)

    def __bool__(self) -> bool:
        return bool(self._q)
