import pytest

from rgg_coloring.graph_generation import Distribution, InvalidParameterError
from rgg_coloring.pipeline import RandomGeometricGraph, StageOrderError


def test_stages_require_their_inputs():
    rgg = RandomGeometricGraph(Distribution.UNIT_DISK)
    with pytest.raises(StageOrderError):
        rgg.create_smallest_last_ordering()
    rgg.generate(50, 0.2, seed=1)
    with pytest.raises(StageOrderError):
        rgg.create_color_classes()
    with pytest.raises(StageOrderError):
        rgg.create_first_bipartites()
    rgg.create_smallest_last_ordering()
    with pytest.raises(StageOrderError):
        rgg.create_second_bipartites()
    with pytest.raises(StageOrderError):
        rgg.summary()


def test_run_all_every_distribution(distribution):
    radius = 0.4 if distribution is Distribution.UNIT_SPHERE else 0.15
    rgg = RandomGeometricGraph(distribution)
    rows = rgg.run_all(300, radius, seed=21)
    assert rows[3].value == distribution.label
    assert rgg.number_of_colors == len(rgg.color_sizes) == len(rgg.color_classes)
    assert rgg.total_edges == 2 * rgg.edge_count
    assert rgg.min_degree <= rgg.max_degree
    assert len(rgg.vertices) == 300
    for v in rgg.vertices:
        for x in rgg.graph.neighbors(v.id):
            assert rgg.vertex_color(v.id) != rgg.vertex_color(x)


def test_generate_discards_derived_results():
    rgg = RandomGeometricGraph(Distribution.UNIT_SQUARE)
    rgg.run_all(300, 0.15, seed=2)
    rgg.generate(30, 0.1, seed=3)
    assert rgg.first_bipartites is None
    assert rgg.second_bipartites is None
    with pytest.raises(StageOrderError):
        rgg.ordering
    with pytest.raises(StageOrderError):
        rgg.coloring


def test_rejected_generate_keeps_previous_graph():
    rgg = RandomGeometricGraph(Distribution.UNIT_SQUARE)
    graph = rgg.generate(20, 0.3, seed=4)
    rgg.create_smallest_last_ordering()
    with pytest.raises(InvalidParameterError):
        rgg.generate(5, 1.5)
    assert rgg.graph is graph
    assert rgg.ordering is not None


def test_failed_second_method_leaves_no_result():
    rgg = RandomGeometricGraph(Distribution.UNIT_SQUARE)
    rgg.generate(10, 0.0, seed=5)
    rgg.create_smallest_last_ordering()
    rgg.create_color_classes()
    assert rgg.number_of_colors == 1
    assert rgg.create_second_bipartites() is False
    assert rgg.second_bipartites is None
    assert rgg.create_first_bipartites() is False
    assert rgg.first_bipartites is None


def test_failed_rerun_keeps_previous_extraction(monkeypatch):
    import rgg_coloring.pipeline as pipeline

    rgg = RandomGeometricGraph(Distribution.UNIT_SQUARE)
    rgg.run_all(400, 0.12, seed=8)
    previous = rgg.first_bipartites
    assert previous is not None
    monkeypatch.setattr(pipeline, "extract_first_bipartites", lambda graph, coloring: None)
    assert rgg.create_first_bipartites() is False
    assert rgg.first_bipartites is previous


def test_recoloring_resets_bipartites():
    rgg = RandomGeometricGraph(Distribution.UNIT_SQUARE)
    rgg.run_all(400, 0.12, seed=9)
    colors = rgg.coloring.colors
    rgg.create_color_classes()
    assert rgg.coloring.colors == colors
    assert rgg.first_bipartites is None


def test_export_writes_four_tables(tmp_path):
    rgg = RandomGeometricGraph(Distribution.DENSE_RIM_DISK)
    rgg.run_all(120, 0.2, seed=6)
    paths = rgg.export(tmp_path / "rim")
    assert set(paths) == {"degree_plot", "color_size", "degree_distribution", "summary"}
    assert all(p.exists() for p in paths.values())


def test_export_before_coloring_raises(tmp_path):
    rgg = RandomGeometricGraph(Distribution.UNIT_SQUARE)
    rgg.generate(40, 0.3, seed=2)
    rgg.create_smallest_last_ordering()
    with pytest.raises(StageOrderError):
        rgg.export(tmp_path / "early")
    assert not list(tmp_path.iterdir())
