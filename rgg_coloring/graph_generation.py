from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from enum import Enum
from numbers import Integral, Real
from typing import Callable, Dict, Iterable, List, Sequence, Tuple

import numpy as np

from .geometry import adjacency_from_edges, radius_adjacency

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 650
DEFAULT_HEIGHT = 650


class InvalidParameterError(ValueError):
    """Raised when n or radius is outside the range a distribution accepts."""


class Distribution(Enum):
    UNIT_SQUARE = ("Square", 2, 1.0)
    UNIT_DISK = ("Disk", 2, 1.0)
    DENSE_RIM_DISK = ("Dense Rim Disk", 2, 1.0)
    UNIT_SPHERE = ("Sphere", 3, 2.0)

    def __init__(self, label: str, dimension: int, max_radius: float):
        self.label = label
        self.dimension = dimension
        # 单位球面上两点距离最大为 2（对跖点）
        self.max_radius = max_radius

    @classmethod
    def from_name(cls, name: str) -> "Distribution":
        """Look up a distribution by enum name or label, case-insensitive."""
        key = name.strip().lower().replace("-", " ").replace("_", " ")
        for dist in cls:
            if key in (dist.name.lower().replace("_", " "), dist.label.lower()):
                return dist
        raise InvalidParameterError(f"Unknown distribution {name!r}")


@dataclass(frozen=True)
class Vertex:
    id: int
    position: Tuple[float, ...]  # (x, y) or (x, y, z)
    display: Tuple[int, ...]     # pixel coordinates, only used for drawing

    @property
    def is_3d(self) -> bool:
        return len(self.position) == 3


@dataclass
class GeometricGraph:
    """Vertex arena plus index adjacency lists of a random geometric graph."""

    vertices: List[Vertex]
    adjacency: List[List[int]]
    radius: float
    distribution: Distribution | None = None
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    degrees: List[int] = field(init=False)

    def __post_init__(self):
        self.degrees = [len(nbrs) for nbrs in self.adjacency]

    @property
    def n(self) -> int:
        return len(self.vertices)

    @property
    def min_degree(self) -> int:
        return min(self.degrees) if self.degrees else 0

    @property
    def max_degree(self) -> int:
        return max(self.degrees) if self.degrees else 0

    @property
    def total_edge_endpoints(self) -> int:
        """Sum of all degrees, i.e. every edge counted once per endpoint."""
        return sum(self.degrees)

    @property
    def edge_count(self) -> int:
        return self.total_edge_endpoints // 2

    def degree(self, v: int) -> int:
        return self.degrees[v]

    def neighbors(self, v: int) -> List[int]:
        return self.adjacency[v]

    def edges(self) -> List[Tuple[int, int]]:
        """Each undirected edge once as (u, v) with u < v."""
        return [(u, v) for u, nbrs in enumerate(self.adjacency) for v in nbrs if u < v]

    def points(self) -> np.ndarray:
        return np.array([v.position for v in self.vertices], dtype=float)

    def degree_distribution(self) -> List[int]:
        """Number of vertices having each degree 0..max_degree."""
        counts = [0] * (self.max_degree + 1)
        for d in self.degrees:
            counts[d] += 1
        return counts

    @classmethod
    def from_points(
        cls,
        points: np.ndarray | Sequence[Sequence[float]],
        radius: float,
        distribution: Distribution | None = None,
    ) -> "GeometricGraph":
        pts = np.asarray(points, dtype=float)
        vertices = [
            Vertex(id=i, position=tuple(float(c) for c in p), display=())
            for i, p in enumerate(pts)
        ]
        return cls(
            vertices=vertices,
            adjacency=radius_adjacency(pts, radius),
            radius=radius,
            distribution=distribution,
        )

    @classmethod
    def from_edges(cls, n: int, edges: Iterable[Tuple[int, int]]) -> "GeometricGraph":
        """Graph with the given combinatorial structure and no geometry."""
        vertices = [Vertex(id=i, position=(0.0, 0.0), display=(0, 0)) for i in range(n)]
        return cls(vertices=vertices, adjacency=adjacency_from_edges(n, edges), radius=0.0)


def _polar_to_vertices(
    lengths: np.ndarray,
    angles_deg: np.ndarray,
    width: int,
    height: int,
) -> List[Vertex]:
    theta = np.radians(angles_deg)
    xs = lengths * np.cos(theta) + 0.5
    ys = lengths * np.sin(theta) + 0.5
    return [
        Vertex(
            id=i,
            position=(float(x), float(y)),
            display=(int(x * width), int(y * height)),
        )
        for i, (x, y) in enumerate(zip(xs, ys))
    ]


def _random_angles(n: int, rng: np.random.Generator) -> np.ndarray:
    # 整数度数 + [0,1) 的小数部分，得到 [0, 360) 内的角度
    return rng.integers(0, 360, size=n) + rng.random(n)


def sample_unit_square(
    n: int, radius: float, rng: np.random.Generator, width: int, height: int
) -> List[Vertex]:
    """Uniform points in [0, 1)^2."""
    pts = rng.random((n, 2))
    return [
        Vertex(
            id=i,
            position=(float(x), float(y)),
            display=(int(x * width), int(y * height)),
        )
        for i, (x, y) in enumerate(pts)
    ]


def sample_unit_disk(
    n: int, radius: float, rng: np.random.Generator, width: int, height: int
) -> List[Vertex]:
    """Polar sampling in the disk of radius 0.5 centred at (0.5, 0.5).

    半径在 [0, 0.5) 内均匀取值（因此点在圆心附近更密），角度均匀。
    """
    lengths = rng.random(n) / 2.0
    return _polar_to_vertices(lengths, _random_angles(n, rng), width, height)


def sample_dense_rim_disk(
    n: int, radius: float, rng: np.random.Generator, width: int, height: int
) -> List[Vertex]:
    """Disk sampling biased 2:1 toward the rim band [0.5 - r/2, 0.5).

    - 以 1/3 的概率落在内部区域 [0, 0.5 - r/2)；
    - 以 2/3 的概率落在宽度为 r/2 的外圈环带上。
    """
    inner_edge = 0.5 - radius / 2.0
    inner = rng.integers(0, 3, size=n) == 2
    u = rng.random(n)
    lengths = np.where(inner, inner_edge * u, inner_edge + u * radius / 2.0)
    return _polar_to_vertices(lengths, _random_angles(n, rng), width, height)


def sample_unit_sphere(
    n: int, radius: float, rng: np.random.Generator, width: int, height: int
) -> List[Vertex]:
    """Points of the cube [-1, 1)^3 pushed radially onto the unit sphere.

    This is a projection, not a uniform sample of the sphere surface.
    """
    raw = rng.random((n, 3)) * 2.0 - 1.0
    norms = np.linalg.norm(raw, axis=1)
    pts = raw / norms[:, None]
    half_w = width * 0.5
    half_h = height * 0.5
    return [
        Vertex(
            id=i,
            position=(float(x), float(y), float(z)),
            display=(int(half_w + x * half_w), int(half_h + y * half_h), int(half_h + z * half_h)),
        )
        for i, (x, y, z) in enumerate(pts)
    ]


SAMPLERS: Dict[Distribution, Callable[..., List[Vertex]]] = {
    Distribution.UNIT_SQUARE: sample_unit_square,
    Distribution.UNIT_DISK: sample_unit_disk,
    Distribution.DENSE_RIM_DISK: sample_dense_rim_disk,
    Distribution.UNIT_SPHERE: sample_unit_sphere,
}


def validate_parameters(n, radius, distribution: Distribution) -> None:
    if isinstance(n, bool) or not isinstance(n, Integral):
        raise InvalidParameterError(f"N has to be an integer, got {n!r}")
    if n < 1:
        raise InvalidParameterError("N has to be 1 or more.")
    if isinstance(radius, bool) or not isinstance(radius, Real) or math.isnan(radius):
        raise InvalidParameterError(f"R has to be a number, got {radius!r}")
    if radius < 0:
        raise InvalidParameterError("R has to be 0 or greater.")
    if radius > distribution.max_radius:
        raise InvalidParameterError(
            f"R has to be at most {distribution.max_radius:g} for the {distribution.label} distribution."
        )


def generate_vertices(
    n: int,
    radius: float,
    distribution: Distribution,
    rng: np.random.Generator,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
) -> List[Vertex]:
    return SAMPLERS[distribution](n, radius, rng, width, height)


def create_graph(
    n: int,
    radius: float,
    distribution: Distribution,
    *,
    seed: int | None = None,
    rng: np.random.Generator | None = None,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
) -> GeometricGraph:
    """Sample n vertices from a distribution and join pairs within radius.

    参数在撒点之前检查，不合法时抛出 InvalidParameterError，不会产生半成品图。
    seed 和 rng 只能给一个。
    """

    validate_parameters(n, radius, distribution)
    if seed is not None and rng is not None:
        raise InvalidParameterError("Pass either seed or rng, not both")
    if rng is None:
        rng = np.random.default_rng(seed)

    vertices = generate_vertices(n, float(radius), distribution, rng, width, height)
    pts = np.array([v.position for v in vertices], dtype=float)
    graph = GeometricGraph(
        vertices=vertices,
        adjacency=radius_adjacency(pts, float(radius)),
        radius=float(radius),
        distribution=distribution,
        width=width,
        height=height,
    )
    logger.info(
        "Created %s graph: n=%d, r=%.3f, |E|=%d, degree range [%d, %d]",
        distribution.label,
        graph.n,
        graph.radius,
        graph.edge_count,
        graph.min_degree,
        graph.max_degree,
    )
    return graph
