"""K-means with the assignment and accumulation steps spread over worker threads."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from functools import partial
from pathlib import Path
from typing import Iterable, Sequence

from kmeanslab.core import (
    TOL,
    KMeansResult,
    Point,
    PointLike,
    _points,
    _read_numbers,
    assign_clusters,
)

MAX_POINTS = 5_000_000
NUM_THREADS = 2


def chunk_bounds(n: int, num_threads: int) -> list[tuple[int, int]]:
    """Split ``range(n)`` into contiguous chunks; the last one takes the remainder."""
    if num_threads < 1:
        raise ValueError("num_threads must be at least 1")
    if n < 0:
        raise ValueError("n must not be negative")
    size = n // num_threads
    return [
        (t * size, n if t == num_threads - 1 else (t + 1) * size)
        for t in range(num_threads)
    ]


def read_points_limited(path: str | Path, count: int) -> list[Point]:
    """Read exactly ``count`` points from the start of a file."""
    if not 0 <= count <= MAX_POINTS:
        raise ValueError(f"count must be between 0 and {MAX_POINTS}")
    numbers = _read_numbers(path)
    if len(numbers) < 2 * count:
        raise ValueError(f"{path}: expected {count} points, found {len(numbers) // 2}")
    values = iter(numbers[: 2 * count])
    return [Point(x, y) for x, y in zip(values, values)]


def _assign_chunk(points: Sequence[Point], centroids: list[Point], bounds: tuple[int, int]) -> list[int]:
    start, end = bounds
    return assign_clusters(points[start:end], centroids)


def _local_sums(
    points: Sequence[Point], clusters: Sequence[int], k: int, bounds: tuple[int, int]
) -> list[list[float]]:
    sums = [[0.0, 0.0, 0] for _ in range(k)]
    start, end = bounds
    for point, cluster in zip(points[start:end], clusters[start:end]):
        acc = sums[cluster]
        acc[0] += point.x
        acc[1] += point.y
        acc[2] += 1
    return sums


def threaded_k_means(
    data: Iterable[PointLike],
    centroids: Iterable[PointLike],
    num_threads: int = NUM_THREADS,
    tol: float = TOL,
) -> KMeansResult:
    """Iterate until every centroid coordinate moves by at most ``tol``."""
    points = _points(data)
    current = _points(centroids)
    if not current:
        raise ValueError("at least one centroid is required")
    k = len(current)
    bounds = chunk_bounds(len(points), num_threads)
    iterations = 0
    with ThreadPoolExecutor(max_workers=num_threads) as pool:
        while True:
            iterations += 1
            parts = pool.map(partial(_assign_chunk, points, current), bounds)
            clusters = [c for part in parts for c in part]

            totals = [[0.0, 0.0, 0] for _ in range(k)]
            for local in pool.map(partial(_local_sums, points, clusters, k), bounds):
                for acc, part in zip(totals, local):
                    acc[0] += part[0]
                    acc[1] += part[1]
                    acc[2] += part[2]

            updated = []
            for j, (sx, sy, count) in enumerate(totals):
                if count == 0:
                    raise ValueError(f"cluster {j} has no points")
                updated.append(Point(sx / count, sy / count))

            converged = all(
                abs(new.x - old.x) <= tol and abs(new.y - old.y) <= tol
                for old, new in zip(current, updated)
            )
            current = updated
            if converged:
                return KMeansResult(current, clusters, iterations, True)