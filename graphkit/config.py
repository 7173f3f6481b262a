"""
Configuration constants for graphkit.

Tunable defaults live here. Values that make sense to change per process can
be overridden with environment variables.
"""

import os

# =============================================================================
# Graph Model
# =============================================================================

# Cost of one edge when a graph is unweighted. Stored weights are ignored.
DEFAULT_UNWEIGHTED_VALUE = 1.0

# Side length of a fresh adjacency matrix; it doubles as vertices arrive.
DENSE_INITIAL_CAPACITY = 2

# Storage used by build_graph() when the caller does not pick one.
# One of "sparse" (adjacency lists) or "dense" (adjacency matrix).
DEFAULT_GRAPH_TYPE = os.environ.get("GRAPHKIT_DEFAULT_GRAPH_TYPE", "sparse").lower()

# =============================================================================
# Logging
# =============================================================================

LOG_LEVEL = os.environ.get("GRAPHKIT_LOG_LEVEL", "WARNING")
