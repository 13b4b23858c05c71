from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Sequence, Tuple

from .graph_generation import GeometricGraph
from .smallest_last import SmallestLastOrdering

logger = logging.getLogger(__name__)

UNCOLORED = -1


@dataclass(frozen=True)
class ColoringResult:
    colors: Tuple[int, ...]
    number_of_colors: int
    color_sizes: Tuple[int, ...]
    color_classes: Tuple[Tuple[int, ...], ...]  # vertex ids per class, ascending
    distinct_adjacent_colors: Tuple[int, ...]

    @classmethod
    def from_colors(
        cls,
        colors: Sequence[int],
        distinct_adjacent_colors: Sequence[int] | None = None,
    ) -> "ColoringResult":
        """Derive class sizes and member lists from a complete color vector."""
        number_of_colors = max(colors) + 1 if len(colors) else 0
        classes: List[List[int]] = [[] for _ in range(number_of_colors)]
        for v, c in enumerate(colors):
            classes[c].append(v)
        if distinct_adjacent_colors is None:
            distinct_adjacent_colors = [0] * len(colors)
        return cls(
            colors=tuple(colors),
            number_of_colors=number_of_colors,
            color_sizes=tuple(len(members) for members in classes),
            color_classes=tuple(tuple(members) for members in classes),
            distinct_adjacent_colors=tuple(distinct_adjacent_colors),
        )

    def two_largest_classes_size(self) -> int:
        return sum(sorted(self.color_sizes, reverse=True)[:2])


def first_fit_color(
    degree: int,
    neighbors: Sequence[int],
    neighbor_color: Callable[[int], int],
) -> Tuple[int, int]:
    """Pick the smallest color in [0, degree) unused by the given neighbors.

    只需要长度为 degree 的标记数组：颜色 >= degree 的邻居不可能让所有
    [0, degree) 都被占用，找不到空位时返回 degree。

    Returns (color, number of distinct neighbor colors below degree).
    """

    used = [False] * degree
    distinct = 0
    for x in neighbors:
        c = neighbor_color(x)
        if c != UNCOLORED and c < degree:
            if not used[c]:
                used[c] = True
                distinct += 1
    for c in range(degree):
        if not used[c]:
            return c, distinct
    return degree, distinct


def smallest_last_coloring(
    graph: GeometricGraph,
    ordering: SmallestLastOrdering,
) -> ColoringResult:
    """Greedy first-fit coloring in increasing elimination position.

    顺序与删点顺序相反（最后删掉的点最先染色），
    因此每个点染色时已染色的邻居数不超过它被删除时的剩余度数。
    """

    n = graph.n
    colors = [UNCOLORED] * n
    distinct_adjacent = [0] * n

    for p in ordering.order:
        color, distinct = first_fit_color(
            graph.degrees[p], graph.adjacency[p], colors.__getitem__
        )
        colors[p] = color
        distinct_adjacent[p] = distinct

    result = ColoringResult.from_colors(colors, distinct_adjacent)
    logger.debug(
        "Colored %d vertices with %d colors, class sizes %s",
        n,
        result.number_of_colors,
        list(result.color_sizes),
    )
    return result
