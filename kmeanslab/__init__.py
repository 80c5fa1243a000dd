"""K-means clustering of 2-D points: sequential, threaded and numpy-batched variants, with a command line."""

__version__ = "0.1.0"
__all__ = ["core", "threaded", "batched", "cli"]