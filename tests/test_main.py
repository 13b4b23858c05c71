import rgg_coloring.main as cli


def test_main_runs_and_exports(tmp_path, capsys):
    prefix = tmp_path / "out" / "square"
    code = cli.main(["--n", "200", "--radius", "0.15", "--seed", "1", "--output-prefix", str(prefix)])
    assert code == 0
    out = capsys.readouterr().out
    assert "Colors used:" in out
    assert "Number of Colors" in out
    for suffix in ("DegreePlot.csv", "ColorSize.csv", "DegreeDistribution.csv", "SummaryTable.csv"):
        assert (tmp_path / "out" / f"square{suffix}").exists()


def test_main_rejects_invalid_radius(capsys):
    code = cli.main(["--n", "5", "--radius", "1.5", "--distribution", "square"])
    assert code == 2
    assert "Invalid parameters" in capsys.readouterr().out


def test_main_sphere_with_plots(tmp_path):
    prefix = tmp_path / "sphere"
    code = cli.main(
        [
            "--n", "150",
            "--radius", "0.5",
            "--distribution", "sphere",
            "--seed", "2",
            "--output-prefix", str(prefix),
            "--plot",
        ]
    )
    assert code == 0
    assert (tmp_path / "sphereColored.png").exists()
    assert (tmp_path / "sphereDegreePlot.png").exists()


def test_parser_defaults():
    args = cli.build_parser().parse_args([])
    assert args.n == cli.N
    assert args.radius == cli.RADIUS
    assert args.distribution is cli.DISTRIBUTION
    assert args.output_prefix is None
