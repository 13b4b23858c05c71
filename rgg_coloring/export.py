"""CSV tables written for spreadsheet analysis of a colored graph.

每个文件一张表：第一行是 Excel 用的 ``sep=,`` 提示，第二行是表头，行尾为 CRLF。
"""
from __future__ import annotations

import csv
from pathlib import Path
from typing import Dict, Iterable, List, Sequence

from .greedy_coloring import ColoringResult
from .smallest_last import SmallestLastOrdering
from .summary import SummaryRow

DEGREE_PLOT_HEADER = ["ID", "Original Degree", "Degree at Deletion", "Distinct Colors Adjacent"]
COLOR_SIZE_HEADER = ["Color", "Size"]
DEGREE_DISTRIBUTION_HEADER = ["Degree", "Vertex Count"]
SUMMARY_HEADER = ["Attribute", "Value"]


def degree_plot_rows(ordering: SmallestLastOrdering, coloring: ColoringResult) -> List[List[int]]:
    return [
        [v, ordering.original_degree[j], ordering.degree_at_removal[j], coloring.distinct_adjacent_colors[v]]
        for j, v in enumerate(ordering.order)
    ]


def color_size_rows(coloring: ColoringResult) -> List[List[int]]:
    return [[c, size] for c, size in enumerate(coloring.color_sizes)]


def degree_distribution_rows(distribution: Sequence[int]) -> List[List[int]]:
    return [[d, count] for d, count in enumerate(distribution)]


def summary_rows(rows: Iterable[SummaryRow]) -> List[List[str]]:
    return [[r.attribute, r.value] for r in rows]


def write_table(path: Path | str, header: Sequence[str], rows: Iterable[Sequence]) -> int:
    """Write one table; returns the number of data rows."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    count = 0
    with path.open("w", newline="", encoding="utf-8") as f:
        f.write("sep=,\r\n")
        writer = csv.writer(f, lineterminator="\r\n")
        writer.writerow(header)
        for row in rows:
            writer.writerow(row)
            count += 1
    return count


def export_tables(
    prefix: Path | str,
    ordering: SmallestLastOrdering,
    coloring: ColoringResult,
    degree_distribution: Sequence[int],
    summary: Iterable[SummaryRow],
) -> Dict[str, Path]:
    """Write the four tables as <prefix>DegreePlot.csv, ... and return their paths."""
    prefix = str(prefix)
    paths = {
        "degree_plot": Path(prefix + "DegreePlot.csv"),
        "color_size": Path(prefix + "ColorSize.csv"),
        "degree_distribution": Path(prefix + "DegreeDistribution.csv"),
        "summary": Path(prefix + "SummaryTable.csv"),
    }
    write_table(paths["degree_plot"], DEGREE_PLOT_HEADER, degree_plot_rows(ordering, coloring))
    write_table(paths["color_size"], COLOR_SIZE_HEADER, color_size_rows(coloring))
    write_table(
        paths["degree_distribution"],
        DEGREE_DISTRIBUTION_HEADER,
        degree_distribution_rows(degree_distribution),
    )
    write_table(paths["summary"], SUMMARY_HEADER, summary_rows(summary))
    return paths
