"""Interactive command line for the k-means variants."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Iterator, TextIO

from kmeanslab.batched import NB_POINTS, batched_k_means, read_points_array
from kmeanslab.core import Point, k_means, read_points
from kmeanslab.threaded import NUM_THREADS, read_points_limited, threaded_k_means


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def _next(tokens: Iterator[str], what: str) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError(f"missing {what}") from None


def _ask_int(tokens: Iterator[str], what: str) -> int:
    token = _next(tokens, what)
    try:
        return int(token)
    except ValueError:
        raise ValueError(f"invalid {what}: {token!r}") from None


def _ask_clusters(tokens: Iterator[str]) -> int:
    k = _ask_int(tokens, "number of clusters")
    if k < 1:
        raise ValueError("the number of clusters must be at least 1")
    return k


def _ask_point(tokens: Iterator[str]) -> Point:
    coords = []
    for axis in ("x", "y"):
        token = _next(tokens, f"{axis} coordinate")
        try:
            coords.append(float(token))
        except ValueError:
            raise ValueError(f"invalid {axis} coordinate: {token!r}") from None
    return Point(*coords)


def _run_sequential(args: argparse.Namespace, tokens: Iterator[str]) -> int:
    data = read_points(args.data)
    _prompt("\nEnter the number of clusters (k): ")
    k = _ask_clusters(tokens)
    print("\nInitializing centroids:")
    centroids = []
    for i in range(1, k + 1):
        _prompt(f"Enter coordinates for centroid {i} (x y): ")
        centroids.append(_ask_point(tokens))

    start = time.process_time()
    result = k_means(data, centroids)
    elapsed = time.process_time() - start

    if result.converged:
        print(f"\nConverged after {result.iterations} iterations.")
    else:
        print("\nReached maximum iterations without full convergence.")
    print("\nFinal centroids:")
    for i, c in enumerate(result.centroids, 1):
        print(f"Centroid {i}: ({c.x:.2f}, {c.y:.2f})")
    print(f"\nExecution time: {elapsed:.6f} seconds")
    return 0


def _run_threaded(args: argparse.Namespace, tokens: Iterator[str]) -> int:
    print("Enter the number of points: ")
    n = _ask_int(tokens, "number of points")
    print("Enter the number of clusters: ")
    k = _ask_clusters(tokens)
    print("Enter the name of the data file: ")
    filename = _next(tokens, "file name")
    data = read_points_limited(filename, n)
    print(f"Enter the coordinates of the {k} centroids (each centroid has 2 dimensions):")
    centroids = []
    for i in range(1, k + 1):
        _prompt(f"Centroid {i} : ")
        centroids.append(_ask_point(tokens))

    start = time.process_time()
    threaded_k_means(data, centroids, num_threads=args.threads)
    elapsed = time.process_time() - start
    print(f"Execution time: {elapsed:.6f} seconds")
    return 0


def _run_batched(args: argparse.Namespace, tokens: Iterator[str]) -> int:
    _prompt("Enter the name of the data file: ")
    filename = _next(tokens, "file name")
    data = read_points_array(filename, args.points)
    _prompt("\nEnter the number of clusters (k): ")
    k = _ask_clusters(tokens)
    print("\nEnter the centroids (x, y) for each cluster:")
    centroids = []
    for i in range(1, k + 1):
        _prompt(f"Centroid {i}: ")
        centroids.append(_ask_point(tokens))

    start = time.perf_counter()
    result = batched_k_means(data, centroids)
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    if result.converged:
        print(f"Convergence reached at iteration {result.iterations}")
    print(f"\nExecution time: {elapsed_ms:.2f} ms")
    print(f"Number of iterations: {result.iterations}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run one k-means variant, reading parameters from standard input."""
    parser = argparse.ArgumentParser(prog="kmeanslab", description="Cluster 2-D points with k-means.")
    sub = parser.add_subparsers(dest="mode", required=True)
    seq = sub.add_parser("sequential", help="plain sequential k-means")
    seq.add_argument("--data", default="data2.txt", help="file of x y pairs")
    thr = sub.add_parser("threaded", help="k-means spread over worker threads")
    thr.add_argument("--threads", type=int, default=NUM_THREADS, help="number of worker threads")
    bat = sub.add_parser("batched", help="vectorised single-precision k-means")
    bat.add_argument("--points", type=int, default=NB_POINTS, help="number of points to read")
    args = parser.parse_args(argv)

    runners = {"sequential": _run_sequential, "threaded": _run_threaded, "batched": _run_batched}
    tokens = _tokens(sys.stdin)
    try:
        return runners[args.mode](args, tokens)
    except OSError as exc:
        print(f"Error opening file {exc.filename}: {exc.strerror}")
        return 1
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())