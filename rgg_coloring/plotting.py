from __future__ import annotations

import os
from typing import Sequence

import matplotlib
import matplotlib.pyplot as plt
import numpy as np

from .graph_generation import GeometricGraph
from .smallest_last import SmallestLastOrdering


def _class_colormap(num_colors: int):
    if num_colors <= 10:
        return matplotlib.colormaps["tab10"]
    if num_colors <= 20:
        return matplotlib.colormaps["tab20"]
    return matplotlib.colormaps["hsv"].resampled(num_colors)


def _finish(save_path: str | None) -> None:
    plt.tight_layout()
    if save_path is not None:
        directory = os.path.dirname(save_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        plt.savefig(save_path, dpi=200)
        print(f"Saved figure to {save_path}")
    else:
        plt.show()
    plt.close()


def plot_colored_graph(
    graph: GeometricGraph,
    colors: Sequence[int],
    title: str,
    save_path: str | None = None,
    draw_edges: bool = True,
):
    """Scatter the vertices colored by class; sphere graphs are drawn as (x, y)."""
    pts = graph.points()

    plt.figure(figsize=(5, 5))
    # 先画边
    if draw_edges:
        for i, j in graph.edges():
            x = [pts[i, 0], pts[j, 0]]
            y = [pts[i, 1], pts[j, 1]]
            plt.plot(x, y, "k-", linewidth=0.3, alpha=0.3)

    # 再按颜色画点
    colors_arr = np.array(colors)
    num_colors = int(colors_arr.max()) + 1 if colors_arr.size > 0 else 0
    cmap = _class_colormap(num_colors)
    size = max(2.0, 40.0 / max(1.0, np.log(max(graph.n, 1))))
    for c in range(num_colors):
        mask = colors_arr == c
        if not np.any(mask):
            continue
        plt.scatter(pts[mask, 0], pts[mask, 1], color=[cmap(c)], s=size, label=f"color {c}")

    plt.title(title)
    plt.axis("equal")
    if 0 < num_colors <= 12:
        plt.legend(loc="best", fontsize=6)
    _finish(save_path)


def plot_degree_sequence(
    ordering: SmallestLastOrdering,
    title: str,
    save_path: str | None = None,
):
    """Original degree and degree when deleted along the smallest-last order."""
    xs = np.arange(len(ordering.order))

    plt.figure(figsize=(6, 4))
    plt.plot(xs, ordering.original_degree, "b-", linewidth=0.8, label="original degree")
    plt.plot(xs, ordering.degree_at_removal, "r-", linewidth=0.8, label="degree when deleted")
    plt.xlabel("position in smallest-last order")
    plt.ylabel("degree")
    plt.title(title)
    plt.legend(loc="best", fontsize=8)
    _finish(save_path)
