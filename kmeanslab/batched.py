"""Vectorised single-precision k-means over whole arrays of points."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import numpy as np

from kmeanslab.core import MAX_ITERS, TOL, KMeansResult, Point, PointLike, _read_numbers

NB_POINTS = 5_000_000


def _as_array(items: Iterable[PointLike] | np.ndarray) -> np.ndarray:
    if not isinstance(items, np.ndarray):
        items = [(p.x, p.y) if isinstance(p, Point) else tuple(p) for p in items]
    return np.asarray(items, dtype=np.float32).reshape(-1, 2)


def read_points_array(path: str | Path, count: int = NB_POINTS) -> np.ndarray:
    """Read ``count`` points from a file into a ``(count, 2)`` float32 array."""
    if count < 0:
        raise ValueError("count must not be negative")
    numbers = _read_numbers(path)
    if len(numbers) < 2 * count:
        raise ValueError(f"{path}: expected {count} points, found {len(numbers) // 2}")
    return np.asarray(numbers[: 2 * count], dtype=np.float32).reshape(count, 2)


def batched_k_means(
    data: Iterable[PointLike] | np.ndarray,
    centroids: Iterable[PointLike] | np.ndarray,
    max_iters: int = MAX_ITERS,
    tol: float = TOL,
) -> KMeansResult:
    """Stop once the largest coordinate change of a non-empty cluster is below ``tol``."""
    points = _as_array(data)
    current = _as_array(centroids)
    k = len(current)
    if k == 0:
        raise ValueError("at least one centroid is required")

    clusters = np.empty(0, dtype=np.intp)
    converged = False
    iterations = 0
    for iterations in range(1, max_iters + 1):
        diff = points[:, None, :] - current[None, :, :]
        distances = np.sqrt((diff * diff).sum(axis=2))
        clusters = distances.argmin(axis=1)

        counts = np.bincount(clusters, minlength=k)
        sums_x = np.bincount(clusters, weights=points[:, 0], minlength=k)
        sums_y = np.bincount(clusters, weights=points[:, 1], minlength=k)
        filled = counts > 0

        updated = current.copy()
        updated[filled, 0] = (sums_x[filled] / counts[filled]).astype(np.float32)
        updated[filled, 1] = (sums_y[filled] / counts[filled]).astype(np.float32)
        max_change = float(np.abs(updated - current).max())
        current = updated
        if max_change < tol:
            converged = True
            break

    return KMeansResult(
        centroids=[Point(float(x), float(y)) for x, y in current],
        clusters=clusters.tolist(),
        iterations=iterations,
        converged=converged,
    )