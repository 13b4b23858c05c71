from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import combinations
from typing import List, Optional, Sequence, Tuple

from .faces import count_components_and_faces
from .graph_generation import GeometricGraph
from .greedy_coloring import UNCOLORED, ColoringResult, first_fit_color
from .smallest_last import SmallestLastOrdering

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BipartitePair:
    label: str
    first_class: int
    second_class: int
    vertex_count: int
    edge_count: int
    components: int
    faces: int


def largest_pair(pairs: Sequence[BipartitePair]) -> BipartitePair:
    """Pair with the most edges; the earliest one wins ties."""
    best = pairs[0]
    for pair in pairs[1:]:
        if pair.edge_count > best.edge_count:
            best = pair
    return best


@dataclass(frozen=True)
class FirstBipartites:
    four_largest: Tuple[int, int, int, int]
    pairs: Tuple[BipartitePair, ...]  # six pairs in slot order (0,1),(0,2),...,(2,3)

    @property
    def largest(self) -> BipartitePair:
        return largest_pair(self.pairs)


@dataclass(frozen=True)
class SecondBipartites:
    adjacency_count_to_first_class: Tuple[int, ...]
    secondary_colors: Tuple[int, ...]       # UNCOLORED outside R3 ∪ R2
    number_of_secondary_colors: int
    second_sets: Tuple[Tuple[int, ...], ...]  # members of secondary classes 0, 1, 2
    pairs: Tuple[BipartitePair, ...]

    @property
    def largest(self) -> BipartitePair:
        return largest_pair(self.pairs)


def four_largest_classes(color_sizes: Sequence[int]) -> Tuple[int, int, int, int]:
    """Pick four large classes with the selection rule used for the summary.

    - 先对前四个颜色类按大小排序（反复找严格更大的最大值，相等时保留较小编号）；
    - 再依次扫描编号 >= 4 的颜色类：若它严格大于第 k 个槽位（k 从 0 到 3 依次比较），
      就直接替换该槽位，不做后移。

    When sizes repeat this does not always return the true four largest.
    """

    slots = [0, 1, 2, 3]
    remaining = list(color_sizes[:4])
    for i in range(4):
        max_index = 0
        for j in range(1, 4):
            if remaining[j] > remaining[max_index]:
                max_index = j
        remaining[max_index] = -1
        slots[i] = max_index

    for c in range(4, len(color_sizes)):
        for k in range(4):
            if color_sizes[c] > color_sizes[slots[k]]:
                slots[k] = c
                break
    return slots[0], slots[1], slots[2], slots[3]


def extract_first_bipartites(
    graph: GeometricGraph,
    coloring: ColoringResult,
) -> Optional[FirstBipartites]:
    """Bipartite subgraphs induced by pairs among the four largest color classes.

    Returns None when fewer than four color classes exist.
    """

    if coloring.number_of_colors < 4:
        logger.warning(
            "Not enough color classes for the first bipartite method (%d < 4)",
            coloring.number_of_colors,
        )
        return None

    colors = coloring.colors
    four = four_largest_classes(coloring.color_sizes)
    pairs: List[BipartitePair] = []
    for i, j in combinations(range(4), 2):
        a, b = four[i], four[j]
        first = coloring.color_classes[a]
        second = coloring.color_classes[b]
        edge_total = sum(1 for p in first for x in graph.adjacency[p] if colors[x] == b)
        count = count_components_and_faces(
            first,
            second,
            graph.neighbors,
            accept=lambda x, b=b: colors[x] == b,
        )
        pairs.append(
            BipartitePair(
                label=f"<{a},{b}>",
                first_class=a,
                second_class=b,
                vertex_count=len(first) + len(second),
                edge_count=edge_total,
                components=count.components,
                faces=count.faces,
            )
        )

    result = FirstBipartites(four_largest=four, pairs=tuple(pairs))
    logger.info(
        "First bipartite method: classes %s, largest %s with %d edges",
        list(four),
        result.largest.label,
        result.largest.edge_count,
    )
    return result


def extract_second_bipartites(
    graph: GeometricGraph,
    ordering: SmallestLastOrdering,
    coloring: ColoringResult,
) -> Optional[SecondBipartites]:
    """Bipartite subgraphs between class 0 and a recoloring of its neighborhood.

    1. 统计每个顶点与第 0 类相邻的次数；
    2. 非第 0 类的顶点中，恰好 2 次的放入 R2，3 次及以上的放入 R3；
    3. R3、R2 分别按 smallest-last 位置稳定排序后拼接为 R3 + R2；
    4. 在这个顺序上重新做一次贪心染色（只看同样属于 R3 ∪ R2 的邻居）；
    5. 若至少得到 3 种颜色，则第 0 类分别与新颜色 0、1、2 组成三个二部图。

    Returns None when the coloring has a single class or the recoloring yields
    fewer than three classes.
    """

    if coloring.number_of_colors <= 1:
        logger.warning(
            "Not enough color classes for the second bipartite method (%d <= 1)",
            coloring.number_of_colors,
        )
        return None

    n = graph.n
    first_class = coloring.color_classes[0]
    adjacent_to_first = [0] * n
    for p in first_class:
        for x in graph.adjacency[p]:
            adjacent_to_first[x] += 1

    r2: List[int] = []
    r3: List[int] = []
    for members in coloring.color_classes[1:]:
        for p in members:
            if adjacent_to_first[p] == 2:
                r2.append(p)
            elif adjacent_to_first[p] >= 3:
                r3.append(p)
    r3.sort(key=ordering.position.__getitem__)
    r2.sort(key=ordering.position.__getitem__)
    recolor_order = r3 + r2

    secondary = [UNCOLORED] * n

    def secondary_of(x: int) -> int:
        return secondary[x] if adjacent_to_first[x] >= 2 else UNCOLORED

    count = 0
    for p in recolor_order:
        color, _ = first_fit_color(graph.degrees[p], graph.adjacency[p], secondary_of)
        secondary[p] = color
        count = max(count, color + 1)

    if count < 3:
        logger.warning(
            "Second bipartite method produced %d secondary classes, need at least 3", count
        )
        return None

    second_sets: List[List[int]] = [[], [], []]
    for p in recolor_order:
        if secondary[p] < 3:
            second_sets[secondary[p]].append(p)

    pairs: List[BipartitePair] = []
    for k, second in enumerate(second_sets):
        faces = count_components_and_faces(
            first_class,
            second,
            graph.neighbors,
            accept=lambda x, k=k: secondary[x] == k,
        )
        pairs.append(
            BipartitePair(
                label=f"<0,{k}>",
                first_class=0,
                second_class=k,
                vertex_count=len(first_class) + len(second),
                edge_count=sum(adjacent_to_first[p] for p in second),
                components=faces.components,
                faces=faces.faces,
            )
        )

    result = SecondBipartites(
        adjacency_count_to_first_class=tuple(adjacent_to_first),
        secondary_colors=tuple(secondary),
        number_of_secondary_colors=count,
        second_sets=tuple(tuple(s) for s in second_sets),
        pairs=tuple(pairs),
    )
    logger.info(
        "Second bipartite method: |R3|=%d, |R2|=%d, %d secondary colors, largest %s with %d edges",
        len(r3),
        len(r2),
        count,
        result.largest.label,
        result.largest.edge_count,
    )
    return result
