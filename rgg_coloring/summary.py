from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .bipartite import FirstBipartites, SecondBipartites
from .graph_generation import GeometricGraph
from .greedy_coloring import ColoringResult
from .smallest_last import SmallestLastOrdering


@dataclass(frozen=True)
class SummaryRow:
    attribute: str
    value: str


def _largest_rows(procedure: str, pairs) -> List[SummaryRow]:
    best = pairs.largest
    return [
        SummaryRow(f"Edges for Largest Bipartite in {procedure} procedure", str(best.edge_count)),
        SummaryRow(f"Components for Largest Bipartite in {procedure} procedure", str(best.components)),
        SummaryRow(f"Faces for Largest Bipartite in {procedure} procedure", str(best.faces)),
    ]


def build_summary(
    graph: GeometricGraph,
    ordering: SmallestLastOrdering,
    coloring: ColoringResult,
    first: Optional[FirstBipartites] = None,
    second: Optional[SecondBipartites] = None,
) -> List[SummaryRow]:
    """Attribute/value table describing one colored graph."""

    label = graph.distribution.label if graph.distribution is not None else "Custom"
    rows = [
        SummaryRow("ID", "#"),
        SummaryRow("N", str(graph.n)),
        SummaryRow("R", f"{graph.radius:.3f}"),
        SummaryRow("Distribution", label),
        SummaryRow("M", str(graph.edge_count)),
        SummaryRow("Min Degree", str(graph.min_degree)),
        SummaryRow("Avg Degree", str(graph.total_edge_endpoints // graph.n)),
        SummaryRow("Max Degree", str(graph.max_degree)),
        SummaryRow("Max Degree when deleted", str(ordering.max_degree_at_removal)),
        SummaryRow("Number of Colors", str(coloring.number_of_colors)),
        SummaryRow("Color Size of first two", str(coloring.two_largest_classes_size())),
        SummaryRow("Terminal clique size", str(ordering.terminal_clique_size)),
    ]

    if first is None:
        rows.append(SummaryRow("ERROR!", "Not enough of classes for first bipartite method."))
    else:
        rows.extend(_largest_rows("first", first))

    if second is None:
        rows.append(SummaryRow("ERROR!", "Not enough of classes for second bipartite method."))
    else:
        rows.extend(_largest_rows("second", second))
    return rows


def format_summary(rows: List[SummaryRow]) -> str:
    """Plain-text two-column rendering for the console."""
    width = max(len(r.attribute) for r in rows)
    return "\n".join(f"{r.attribute:<{width}}  {r.value}" for r in rows)
