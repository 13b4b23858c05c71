from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence


@dataclass(frozen=True)
class ComponentFaceCount:
    components: int
    faces: int


def count_components_and_faces(
    first: Sequence[int],
    second: Sequence[int],
    neighbors: Callable[[int], Sequence[int]],
    accept: Optional[Callable[[int], bool]] = None,
) -> ComponentFaceCount:
    """Count connected components and faces of a bipartite subgraph.

    Every vertex of ``first`` and ``second`` starts as its own component.
    Each edge from a vertex of ``first`` to a neighbor ``x`` with
    ``accept(x)`` either merges two components (union by size) or, when both
    ends already share a component, closes a cycle.

    面数按欧拉公式 V - E + F = 2 计算，但所有连通分量共用同一个外部面：
    F = 1 + Σ (1 - V_c + E_c)，只对大小 > 1 的分量求和。

    ``accept`` must only select members of ``second``; it defaults to that
    membership test.
    """

    slot: Dict[int, int] = {}
    for v in first:
        slot[v] = len(slot)
    for v in second:
        slot[v] = len(slot)
    if accept is None:
        second_set = set(second)
        accept = second_set.__contains__

    total = len(slot)
    parent: List[int] = list(range(total))
    size = [1] * total
    edges = [0] * total

    def find(a: int) -> int:
        while parent[a] != a:
            a = parent[a]
        return a

    for p in first:
        for x in neighbors(p):
            if not accept(x):
                continue
            a = find(slot[p])
            b = find(slot[x])
            if a == b:
                edges[a] += 1
                continue
            if size[a] < size[b]:
                a, b = b, a
            # b 并入较大的 a
            parent[b] = a
            size[a] += size[b]
            edges[a] += edges[b] + 1
            edges[b] = 0

    components = 0
    faces = 1  # 外部（背景）面只算一次
    for r in range(total):
        if parent[r] != r:
            continue
        components += 1
        if size[r] > 1:
            faces += 1 - size[r] + edges[r]
    return ComponentFaceCount(components=components, faces=faces)
