from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from .graph_generation import Distribution, InvalidParameterError
from .pipeline import RandomGeometricGraph
from .plotting import plot_colored_graph, plot_degree_sequence
from .summary import format_summary


ROOT = Path(__file__).resolve().parent

# ======== 配置 ========
N: int = 1000
RADIUS: float = 0.06
DISTRIBUTION: Distribution = Distribution.UNIT_SQUARE
SEED: Optional[int] = None  # 设为 None 以获得非确定性结果
WIDTH: int = 650
HEIGHT: int = 650
OUTPUT_PREFIX: Path = ROOT / "outputs" / "rgg"
# =====================


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Random geometric graph smallest-last coloring and bipartite statistics"
    )
    parser.add_argument("--n", type=int, default=N, help=f"Number of vertices (default: {N})")
    parser.add_argument(
        "--radius", type=float, default=RADIUS, help=f"Connection radius (default: {RADIUS})"
    )
    parser.add_argument(
        "--distribution",
        type=Distribution.from_name,
        default=DISTRIBUTION,
        help="square, disk, dense rim disk or sphere (default: square)",
    )
    parser.add_argument("--seed", type=int, default=SEED, help="Random seed")
    parser.add_argument(
        "--output-prefix",
        type=Path,
        default=None,
        help="Write <prefix>DegreePlot.csv, <prefix>ColorSize.csv, ... when given",
    )
    parser.add_argument("--plot", action="store_true", help="Save colored graph and degree plot figures")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.log_level)

    rgg = RandomGeometricGraph(args.distribution, width=WIDTH, height=HEIGHT)
    print(f"N={args.n}, R={args.radius}, distribution={args.distribution.label}, seed={args.seed}")

    try:
        graph = rgg.generate(args.n, args.radius, seed=args.seed)
    except InvalidParameterError as exc:
        print(f"Invalid parameters: {exc}")
        return 2

    print(
        f"|E|={graph.edge_count}, min degree={graph.min_degree}, max degree={graph.max_degree}"
    )

    ordering = rgg.create_smallest_last_ordering()
    print(
        f"Smallest-last: max degree when deleted={ordering.max_degree_at_removal}, "
        f"terminal clique={ordering.terminal_clique_size}"
    )

    coloring = rgg.create_color_classes()
    print(f"Colors used: {coloring.number_of_colors}, class sizes: {list(coloring.color_sizes)}")

    if rgg.create_first_bipartites():
        for pair in rgg.first_bipartites.pairs:
            print(
                f"  I  {pair.label}: V={pair.vertex_count}, E={pair.edge_count}, "
                f"components={pair.components}, faces={pair.faces}"
            )
    else:
        print("Not enough color classes for the first bipartite method.")

    if rgg.create_second_bipartites():
        for pair in rgg.second_bipartites.pairs:
            print(
                f"  II {pair.label}: V={pair.vertex_count}, E={pair.edge_count}, "
                f"components={pair.components}, faces={pair.faces}"
            )
    else:
        print("Not enough color classes for the second bipartite method.")

    print()
    print(format_summary(rgg.summary()))

    if args.output_prefix is not None:
        paths = rgg.export(args.output_prefix)
        for path in paths.values():
            print(f"Saved table to {path}")

    if args.plot:
        prefix = str(args.output_prefix or OUTPUT_PREFIX)
        title = (
            f"{args.distribution.label}: n={graph.n}, r={graph.radius:.3f}, "
            f"|E|={graph.edge_count}, colors={coloring.number_of_colors}"
        )
        plot_colored_graph(graph, coloring.colors, title=title, save_path=prefix + "Colored.png")
        plot_degree_sequence(ordering, title=title, save_path=prefix + "DegreePlot.png")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
