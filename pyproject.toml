[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kmeanslab"
version = "0.1.0"
description = "K-means clustering of 2-D points: sequential, threaded and vectorised batch variants"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["k-means", "clustering", "centroids", "threads", "numpy"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
kmeanslab = "kmeanslab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["kmeanslab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
