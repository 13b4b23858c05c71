from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple

from .graph_generation import GeometricGraph

logger = logging.getLogger(__name__)

_NIL = -1


class DegreeBuckets:
    """Bucket queue keyed by residual degree.

    每个桶是建立在顶点下标上的侵入式双向链表（head/tail + prev/next 数组），
    任意顶点都可以 O(1) 地从所在桶中摘除；桶内按插入顺序先进先出。
    """

    def __init__(self, n_vertices: int, max_key: int):
        self.head = [_NIL] * (max_key + 1)
        self.tail = [_NIL] * (max_key + 1)
        self.prev = [_NIL] * n_vertices
        self.next = [_NIL] * n_vertices
        self.key = [_NIL] * n_vertices

    def is_empty(self, k: int) -> bool:
        return self.head[k] == _NIL

    def append(self, v: int, k: int) -> None:
        self.key[v] = k
        self.prev[v] = self.tail[k]
        self.next[v] = _NIL
        if self.tail[k] == _NIL:
            self.head[k] = v
        else:
            self.next[self.tail[k]] = v
        self.tail[k] = v

    def unlink(self, v: int) -> None:
        k = self.key[v]
        p, nx = self.prev[v], self.next[v]
        if p == _NIL:
            self.head[k] = nx
        else:
            self.next[p] = nx
        if nx == _NIL:
            self.tail[k] = p
        else:
            self.prev[nx] = p
        self.prev[v] = self.next[v] = _NIL
        self.key[v] = _NIL

    def pop_front(self, k: int) -> int:
        v = self.head[k]
        self.unlink(v)
        return v


@dataclass(frozen=True)
class SmallestLastOrdering:
    """Result of the smallest-last pass.

    order[j] is the vertex eliminated at step n-1-j: the array is filled from
    the back, so order[n-1] was removed first and order[0] last.
    """

    order: Tuple[int, ...]
    position: Tuple[int, ...]           # position[v] = index of v in order
    degree_at_removal: Tuple[int, ...]  # indexed like order
    original_degree: Tuple[int, ...]    # indexed like order

    @property
    def max_degree_at_removal(self) -> int:
        return max(self.degree_at_removal, default=0)

    @property
    def terminal_clique_size(self) -> int:
        """Length of the prefix whose removal degrees read 0, 1, 2, ..."""
        size = 0
        for d in self.degree_at_removal:
            if d != size:
                break
            size += 1
        return size


def smallest_last_ordering(graph: GeometricGraph) -> SmallestLastOrdering:
    """Compute the smallest-last (degeneracy) elimination order.

    - 初始时每个顶点按度数放入对应的桶；
    - 游标 i 从 0 开始向上扫描，遇到非空桶就取出队首顶点 p，
      把 p 所有尚未删除的邻居的剩余度数减一并移到低一级的桶尾；
    - 删除一个顶点后游标回退两格（随后循环再加一），
      因为邻居只会落到更低的桶里；
    - 游标越界时回绕到 0。
    """

    n = graph.n
    max_degree = graph.max_degree
    residual = list(graph.degrees)
    removed = [False] * n
    buckets = DegreeBuckets(n, max_degree)
    for v in range(n):
        buckets.append(v, residual[v])

    order = [0] * n
    position = [0] * n
    degree_at_removal = [0] * n
    original_degree = [0] * n

    i = 0
    j = n - 1
    while j >= 0:
        if i > max_degree or i < 0:
            i = 0
        if not buckets.is_empty(i):
            p = buckets.pop_front(i)
            removed[p] = True
            for x in graph.adjacency[p]:
                if removed[x]:
                    continue
                buckets.unlink(x)
                residual[x] -= 1
                buckets.append(x, residual[x])
            order[j] = p
            position[p] = j
            degree_at_removal[j] = residual[p]
            original_degree[j] = graph.degrees[p]
            j -= 1
            i -= 2
        i += 1

    result = SmallestLastOrdering(
        order=tuple(order),
        position=tuple(position),
        degree_at_removal=tuple(degree_at_removal),
        original_degree=tuple(original_degree),
    )
    logger.debug(
        "Smallest-last ordering: n=%d, max degree when deleted=%d, terminal clique=%d",
        n,
        result.max_degree_at_removal,
        result.terminal_clique_size,
    )
    return result
