"""Pytest configuration and shared fixtures for graphkit tests.

This module provides:
- A deterministic numpy RNG for randomized graph tests
- A fixture parametrized over both storage backends
"""

import os

import numpy as np
import pytest

from graphkit.graphs import DenseGraph, SparseGraph


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(params=[DenseGraph, SparseGraph], ids=["dense", "sparse"])
def graph_cls(request):
    """Run a test once per storage backend."""
    return request.param
