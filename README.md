# kmeanslab

K-means clustering of two-dimensional points, in three variants that share the same steps. First, each point goes to its nearest centroid. Ties go to the lower centroid index. Then each centroid moves to the mean of its points. The steps repeat until the centroids stop moving.

- **Sequential** (`kmeanslab.core.k_means`)
  - Stops when no centroid moves by more than `tol` (Euclidean distance), or after `max_iters` iterations.
  - The defaults are `tol=1e-4` and `max_iters=100`.
  - A cluster that receives no points keeps its centroid.
- **Threaded** (`kmeanslab.threaded.threaded_k_means`)
  - Splits the points into contiguous chunks, one per worker thread (`num_threads`, default 2).
  - Each thread assigns its own points, and the partial sums from the threads are merged.
  - Iterates until every centroid coordinate changes by at most `tol`.
  - There is no iteration limit.
  - Raises `ValueError` if a cluster ends up with no points.
- **Batched** (`kmeanslab.batched.batched_k_means`)
  - Works on whole numpy arrays in single precision (`float32`).
  - Stops when the largest coordinate change among non-empty clusters falls below `tol`, or after `max_iters` iterations.
  - A cluster with no points keeps its centroid.

Every variant returns a `KMeansResult` with these fields:

- `centroids`: a list of `Point`.
- `clusters`: the cluster index of each point.
- `iterations`.
- `converged`.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install .[test]
```

## Data files

A data file is plain text of whitespace-separated numbers, read in pairs. Each pair is one point (`x y`):

```
1.0 2.0
1.5 1.8
8.0 8.0
9.0 11.0
```

A token that is not a number raises `ValueError`.

## Library use

```python
from kmeanslab.core import Point, k_means, read_points

points = read_points("data.txt")
result = k_means(points, [Point(0.0, 0.0), Point(10.0, 10.0)], max_iters=100, tol=1e-4)
print(result.centroids, result.iterations, result.converged)
```

Points may be given as `Point` objects or as `(x, y)` pairs. The batched variant also accepts numpy arrays of shape `(n, 2)`.

### `kmeanslab.core`

- `Point(x, y)`: a frozen dataclass.
- `KMeansResult`: the result of a run.
- `euclidean_distance(a, b)`: the distance between two points.
- `assign_clusters(data, centroids)`: the index of the nearest centroid for each point.
- `update_centroids(data, centroids, clusters)`: the mean of each cluster. An empty cluster keeps its old centroid.
- `k_means(data, centroids, max_iters, tol)`: the sequential variant.
- `read_points(path)`: reads every coordinate pair in a file. An unpaired trailing value is ignored.

### `kmeanslab.threaded`

- `chunk_bounds(n, num_threads)`: the `(start, end)` ranges the points are split into. The last range takes the remainder.
- `read_points_limited(path, count)`: reads exactly `count` points, which must be between 0 and 5,000,000. Raises `ValueError` if the file holds fewer.
- `threaded_k_means(data, centroids, num_threads, tol)`: the threaded variant.

### `kmeanslab.batched`

- `read_points_array(path, count)`: reads `count` points (default 5,000,000) into a `(count, 2)` float32 array. Raises `ValueError` if the file holds fewer.
- `batched_k_means(data, centroids, max_iters, tol)`: the batched variant.

## Command line

The `kmeanslab` command takes a variant as a subcommand and reads its other parameters from standard input:

```
kmeanslab --help
```

- **`kmeanslab sequential [--data FILE]`**
  - Reads all points from `FILE` (default `data2.txt`).
  - Asks for the number of clusters, then the coordinates of each starting centroid.
  - Prints whether it converged, the final centroids and the CPU time.
- **`kmeanslab threaded [--threads N]`**
  - Asks for the number of points, the number of clusters, the data file name and the starting centroids.
  - Prints the CPU time.
- **`kmeanslab batched [--points N]`**
  - Asks for the data file name, then the number of clusters and the starting centroids.
  - Reads `N` points (default 5,000,000).
  - Prints the iteration at which it converged (if it did), the wall-clock time in milliseconds and the number of iterations.

For example:

```
printf '2\n0 0\n10 10\n' | kmeanslab sequential --data data.txt
```

A file that cannot be opened prints an error and exits with status 1. Missing or invalid input writes an error to standard error and also exits with status 1.

## Limitations

- All variants run on the CPU.
- The batched variant gets its speed from numpy vectorisation only.
- The threaded variant uses Python threads, so the work is split but is not guaranteed to run in parallel.
- Only two-dimensional points are supported.
- Results are not written to a file.