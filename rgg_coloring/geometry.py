from __future__ import annotations

from typing import List

import numpy as np


def sq_distances_from(points: np.ndarray, i: int) -> np.ndarray:
    """Squared Euclidean distances from point i to every point of an (n, d) array."""
    diff = points - points[i]
    return (diff * diff).sum(axis=1)


def radius_adjacency(points: np.ndarray, radius: float) -> List[List[int]]:
    """Return adjacency lists joining every pair at distance <= radius.

    比较的是平方距离 (radius**2)，避免开方。邻居按编号升序排列，
    不含自环。所有点对都要比较，复杂度 Θ(n²)，但逐行计算，
    临时数组只有 O(n)。
    """
    n = points.shape[0]
    distance_sq = radius * radius
    adj: List[List[int]] = []
    for i in range(n):
        close = sq_distances_from(points, i) <= distance_sq
        close[i] = False
        adj.append(np.flatnonzero(close).tolist())
    return adj


def adjacency_from_edges(n: int, edges) -> List[List[int]]:
    """Build symmetric adjacency lists from (u, v) pairs, neighbors sorted."""
    adj: List[set] = [set() for _ in range(n)]
    for u, v in edges:
        if u == v:
            continue
        adj[u].add(v)
        adj[v].add(u)
    return [sorted(nbrs) for nbrs in adj]
