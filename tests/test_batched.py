import numpy as np
import pytest

from kmeanslab.batched import batched_k_means, read_points_array
from kmeanslab.core import Point, k_means

SAMPLE = [
    Point(0.0, 0.0), Point(0.5, 0.2), Point(-0.3, 0.4), Point(0.1, -0.6),
    Point(10.0, 10.0), Point(10.4, 9.7), Point(9.6, 10.3), Point(10.2, 10.5),
]


def test_read_points_array_shape_and_values(tmp_path):
    path = tmp_path / "pts.txt"
    path.write_text("1.5 2.5\n-3 4\n9 9\n")
    array = read_points_array(path, 2)
    assert array.dtype == np.float32
    assert array.shape == (2, 2)
    assert array.tolist() == [[1.5, 2.5], [-3.0, 4.0]]


def test_read_points_array_short_file(tmp_path):
    path = tmp_path / "pts.txt"
    path.write_text("1 2\n")
    with pytest.raises(ValueError):
        read_points_array(path, 3)


def test_batched_matches_sequential():
    start = [Point(0, 0), Point(1, 1)]
    expected = k_means(SAMPLE, start)
    result = batched_k_means(SAMPLE, start)
    assert result.converged
    assert result.clusters == expected.clusters
    for got, want in zip(result.centroids, expected.centroids):
        assert got.x == pytest.approx(want.x, abs=1e-3)
        assert got.y == pytest.approx(want.y, abs=1e-3)


def test_batched_accepts_arrays():
    array = np.array([(p.x, p.y) for p in SAMPLE])
    from_points = batched_k_means(SAMPLE, [Point(0, 0), Point(1, 1)])
    from_array = batched_k_means(array, np.array([[0, 0], [1, 1]]))
    assert from_array.centroids == from_points.centroids
    assert from_array.clusters == from_points.clusters


def test_batched_stops_at_max_iters():
    result = batched_k_means(SAMPLE, [Point(-50, -50), Point(50, 50)], max_iters=1)
    assert result.iterations == 1
    assert result.converged is False
    assert len(result.clusters) == len(SAMPLE)


def test_batched_empty_cluster_keeps_centroid():
    result = batched_k_means(SAMPLE[:4], [Point(0, 0), Point(1000, 1000)])
    assert result.centroids[1] == Point(1000.0, 1000.0)
    assert result.clusters == [0, 0, 0, 0]


def test_batched_needs_centroids():
    with pytest.raises(ValueError):
        batched_k_means(SAMPLE, [])