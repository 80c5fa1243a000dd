"""Sequential k-means clustering of two-dimensional points."""

from __future__ import annotations

import math
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence, Union

MAX_ITERS = 100
TOL = 1e-4


@dataclass(frozen=True)
class Point:
    """A point in the plane."""

    x: float
    y: float


PointLike = Union[Point, Sequence[float]]


@dataclass
class KMeansResult:
    """Outcome of a k-means run."""

    centroids: list[Point]
    clusters: list[int]
    iterations: int
    converged: bool


def _points(items: Iterable[PointLike]) -> list[Point]:
    return [p if isinstance(p, Point) else Point(float(p[0]), float(p[1])) for p in items]


def _read_numbers(path: str | Path) -> list[float]:
    """Return every whitespace-separated number in a text file."""
    numbers = []
    for token in Path(path).read_text().split():
        try:
            numbers.append(float(token))
        except ValueError:
            raise ValueError(f"{path}: invalid number {token!r}") from None
    return numbers


def euclidean_distance(a: Point, b: Point) -> float:
    """Distance between two points."""
    return math.hypot(a.x - b.x, a.y - b.y)


def assign_clusters(data: Iterable[PointLike], centroids: Iterable[PointLike]) -> list[int]:
    """Index of the nearest centroid for each point; ties go to the lower index."""
    cents = _points(centroids)
    if not cents:
        raise ValueError("at least one centroid is required")
    indices = range(len(cents))
    return [
        min(indices, key=lambda j, p=p: euclidean_distance(p, cents[j]))
        for p in _points(data)
    ]


def update_centroids(
    data: Iterable[PointLike], centroids: Iterable[PointLike], clusters: Iterable[int]
) -> list[Point]:
    """Mean of each cluster's points; a cluster with no points keeps its centroid."""
    cents = _points(centroids)
    sums = [[0.0, 0.0, 0] for _ in cents]
    for point, cluster in zip(_points(data), clusters, strict=True):
        acc = sums[cluster]
        acc[0] += point.x
        acc[1] += point.y
        acc[2] += 1
    return [
        Point(sx / count, sy / count) if count else old
        for old, (sx, sy, count) in zip(cents, sums)
    ]


def k_means(
    data: Iterable[PointLike],
    centroids: Iterable[PointLike],
    max_iters: int = MAX_ITERS,
    tol: float = TOL,
) -> KMeansResult:
    """Run Lloyd's algorithm until no centroid moves more than ``tol``."""
    points = _points(data)
    current = _points(centroids)
    if not current:
        raise ValueError("at least one centroid is required")
    clusters: list[int] = []
    for iteration in range(1, max_iters + 1):
        clusters = assign_clusters(points, current)
        updated = update_centroids(points, current, clusters)
        moved = any(euclidean_distance(old, new) > tol for old, new in zip(current, updated))
        current = updated
        if not moved:
            return KMeansResult(current, clusters, iteration, True)
    return KMeansResult(current, clusters, max(max_iters, 0), False)


def read_points(path: str | Path) -> list[Point]:
    """Read whitespace-separated coordinate pairs; an unpaired trailing value is ignored."""
    numbers = iter(_read_numbers(path))
    return [Point(x, y) for x, y in zip(numbers, numbers)]