import csv

from rgg_coloring.export import (
    COLOR_SIZE_HEADER,
    DEGREE_DISTRIBUTION_HEADER,
    DEGREE_PLOT_HEADER,
    SUMMARY_HEADER,
    export_tables,
    write_table,
)
from rgg_coloring.graph_generation import GeometricGraph
from rgg_coloring.greedy_coloring import smallest_last_coloring
from rgg_coloring.smallest_last import smallest_last_ordering
from rgg_coloring.summary import SummaryRow, build_summary, format_summary


def read_table(path):
    with open(path, newline="", encoding="utf-8") as f:
        lines = f.read().splitlines()
    assert lines[0] == "sep=,"
    return list(csv.reader(lines[1:]))


def _triangle_with_tail():
    graph = GeometricGraph.from_edges(4, [(0, 1), (1, 2), (0, 2), (2, 3)])
    graph.radius = 0.25
    ordering = smallest_last_ordering(graph)
    coloring = smallest_last_coloring(graph, ordering)
    return graph, ordering, coloring


def test_summary_rows_without_bipartites():
    graph, ordering, coloring = _triangle_with_tail()
    rows = build_summary(graph, ordering, coloring)
    table = {r.attribute: r.value for r in rows if r.attribute != "ERROR!"}
    assert [r.attribute for r in rows[:4]] == ["ID", "N", "R", "Distribution"]
    assert table["N"] == "4"
    assert table["R"] == "0.250"
    assert table["Distribution"] == "Custom"
    assert table["M"] == "4"
    assert table["Min Degree"] == "1"
    assert table["Avg Degree"] == "2"
    assert table["Max Degree"] == "3"
    assert table["Max Degree when deleted"] == "2"
    assert table["Number of Colors"] == "3"
    assert table["Color Size of first two"] == "3"
    assert table["Terminal clique size"] == "3"
    errors = [r.value for r in rows if r.attribute == "ERROR!"]
    assert errors == [
        "Not enough of classes for first bipartite method.",
        "Not enough of classes for second bipartite method.",
    ]


def test_summary_with_bipartites_reports_largest_pairs():
    from rgg_coloring.pipeline import RandomGeometricGraph
    from rgg_coloring.graph_generation import Distribution

    rgg = RandomGeometricGraph(Distribution.UNIT_SQUARE)
    rows = rgg.run_all(400, 0.12, seed=3)
    attributes = [r.attribute for r in rows]
    if rgg.first_bipartites is not None:
        best = rgg.first_bipartites.largest
        value = dict((r.attribute, r.value) for r in rows)
        assert value["Edges for Largest Bipartite in first procedure"] == str(best.edge_count)
        assert value["Faces for Largest Bipartite in first procedure"] == str(best.faces)
        assert max(p.edge_count for p in rgg.first_bipartites.pairs) == best.edge_count
    assert attributes[:12] == [
        "ID", "N", "R", "Distribution", "M", "Min Degree", "Avg Degree", "Max Degree",
        "Max Degree when deleted", "Number of Colors", "Color Size of first two",
        "Terminal clique size",
    ]


def test_format_summary_aligns_columns():
    text = format_summary([SummaryRow("N", "10"), SummaryRow("Distribution", "Disk")])
    assert text.splitlines() == ["N             10", "Distribution  Disk"]


def test_write_table_format(tmp_path):
    path = tmp_path / "nested" / "table.csv"
    count = write_table(path, ["A", "B"], [[1, 2], [3, "x,y"]])
    assert count == 2
    raw = path.read_bytes()
    assert raw.startswith(b"sep=,\r\nA,B\r\n1,2\r\n")
    assert raw.endswith(b'3,"x,y"\r\n')
    assert read_table(path) == [["A", "B"], ["1", "2"], ["3", "x,y"]]


def test_export_tables_contents(tmp_path):
    graph, ordering, coloring = _triangle_with_tail()
    summary = build_summary(graph, ordering, coloring)
    paths = export_tables(
        tmp_path / "run", ordering, coloring, graph.degree_distribution(), summary
    )
    assert sorted(p.name for p in paths.values()) == [
        "runColorSize.csv",
        "runDegreeDistribution.csv",
        "runDegreePlot.csv",
        "runSummaryTable.csv",
    ]

    degree_plot = read_table(paths["degree_plot"])
    assert degree_plot[0] == DEGREE_PLOT_HEADER
    assert len(degree_plot) == 1 + graph.n
    for j, row in enumerate(degree_plot[1:]):
        v = ordering.order[j]
        assert row == [
            str(v),
            str(graph.degree(v)),
            str(ordering.degree_at_removal[j]),
            str(coloring.distinct_adjacent_colors[v]),
        ]

    sizes = read_table(paths["color_size"])
    assert sizes[0] == COLOR_SIZE_HEADER
    assert [int(r[1]) for r in sizes[1:]] == list(coloring.color_sizes)

    distribution = read_table(paths["degree_distribution"])
    assert distribution[0] == DEGREE_DISTRIBUTION_HEADER
    assert distribution[1:] == [["0", "0"], ["1", "1"], ["2", "2"], ["3", "1"]]

    table = read_table(paths["summary"])
    assert table[0] == SUMMARY_HEADER
    assert table[1:] == [[r.attribute, r.value] for r in summary]
