from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import numpy as np

from .bipartite import (
    FirstBipartites,
    SecondBipartites,
    extract_first_bipartites,
    extract_second_bipartites,
)
from .export import export_tables
from .graph_generation import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    Distribution,
    GeometricGraph,
    Vertex,
    create_graph,
)
from .greedy_coloring import ColoringResult, smallest_last_coloring
from .smallest_last import SmallestLastOrdering, smallest_last_ordering
from .summary import SummaryRow, build_summary

logger = logging.getLogger(__name__)


class StageOrderError(RuntimeError):
    """A pass was requested before the pass it depends on has run."""


class RandomGeometricGraph:
    """One graph instance and the results of every pass run on it.

    流程：generate -> create_smallest_last_ordering -> create_color_classes
    -> {create_first_bipartites, create_second_bipartites}。
    重新 generate 会丢弃所有派生结果。
    """

    def __init__(
        self,
        distribution: Distribution,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
    ):
        self.distribution = distribution
        self.width = width
        self.height = height
        self._graph: Optional[GeometricGraph] = None
        self._reset_derived()

    def _reset_derived(self) -> None:
        self._ordering: Optional[SmallestLastOrdering] = None
        self._coloring: Optional[ColoringResult] = None
        self._first: Optional[FirstBipartites] = None
        self._second: Optional[SecondBipartites] = None

    # ---- stages ----

    def generate(
        self,
        n: int,
        radius: float,
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ) -> GeometricGraph:
        # create_graph validates first, so a rejected request keeps the old instance
        graph = create_graph(
            n,
            radius,
            self.distribution,
            seed=seed,
            rng=rng,
            width=self.width,
            height=self.height,
        )
        self._graph = graph
        self._reset_derived()
        return graph

    def create_smallest_last_ordering(self) -> SmallestLastOrdering:
        graph = self.graph
        self._reset_derived()
        self._ordering = smallest_last_ordering(graph)
        return self._ordering

    def create_color_classes(self) -> ColoringResult:
        ordering = self.ordering
        self._coloring = smallest_last_coloring(self.graph, ordering)
        self._first = None
        self._second = None
        return self._coloring

    def create_first_bipartites(self) -> bool:
        result = extract_first_bipartites(self.graph, self.coloring)
        if result is None:
            return False
        self._first = result
        return True

    def create_second_bipartites(self) -> bool:
        result = extract_second_bipartites(self.graph, self.ordering, self.coloring)
        if result is None:
            return False
        self._second = result
        return True

    def run_all(self, n: int, radius: float, seed: int | None = None) -> List[SummaryRow]:
        """Generate a graph and run every pass; returns the summary table."""
        self.generate(n, radius, seed=seed)
        self.create_smallest_last_ordering()
        self.create_color_classes()
        self.create_first_bipartites()
        self.create_second_bipartites()
        return self.summary()

    # ---- results ----

    @property
    def graph(self) -> GeometricGraph:
        if self._graph is None:
            raise StageOrderError("No graph has been generated yet")
        return self._graph

    @property
    def ordering(self) -> SmallestLastOrdering:
        if self._ordering is None:
            raise StageOrderError("Smallest-last ordering has not been created yet")
        return self._ordering

    @property
    def coloring(self) -> ColoringResult:
        if self._coloring is None:
            raise StageOrderError("Color classes have not been created yet")
        return self._coloring

    @property
    def first_bipartites(self) -> Optional[FirstBipartites]:
        return self._first

    @property
    def second_bipartites(self) -> Optional[SecondBipartites]:
        return self._second

    # ---- query surface for viewers ----

    @property
    def vertices(self) -> List[Vertex]:
        return self.graph.vertices

    @property
    def min_degree(self) -> int:
        return self.graph.min_degree

    @property
    def max_degree(self) -> int:
        return self.graph.max_degree

    @property
    def total_edges(self) -> int:
        """Edge endpoints, i.e. twice the number of edges."""
        return self.graph.total_edge_endpoints

    @property
    def edge_count(self) -> int:
        return self.graph.edge_count

    @property
    def number_of_colors(self) -> int:
        return self.coloring.number_of_colors

    @property
    def color_sizes(self) -> Tuple[int, ...]:
        return self.coloring.color_sizes

    @property
    def color_classes(self) -> Tuple[Tuple[int, ...], ...]:
        return self.coloring.color_classes

    def vertex_color(self, v: int) -> int:
        return self.coloring.colors[v]

    def summary(self) -> List[SummaryRow]:
        return build_summary(self.graph, self.ordering, self.coloring, self._first, self._second)

    def export(self, prefix: Path | str) -> Dict[str, Path]:
        paths = export_tables(
            prefix,
            self.ordering,
            self.coloring,
            self.graph.degree_distribution(),
            self.summary(),
        )
        logger.info("Exported tables with prefix %s", prefix)
        return paths
