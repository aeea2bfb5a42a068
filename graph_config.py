"""
Configuration constants for routegraph.

Tunable defaults live here. Values that callers may want to flip without
touching code are read from environment variables.
"""

import math
import os

import numpy as np

# =============================================================================
# Distances
# =============================================================================

# Distance of a vertex that has not been reached by the current run
INFINITY = math.inf

# Marker for "no predecessor" inside integer predecessor matrices
NO_PREDECESSOR = -1

# =============================================================================
# Adjacency matrix
# =============================================================================

# Storage type of the dense weight matrix
WEIGHT_DTYPE = np.int64

_TRUTHY = {"1", "true", "yes", "on"}

# Treat a zero cell as "no edge" (legacy convention) instead of keeping an
# explicit presence mask next to the weights
MATRIX_ZERO_IS_NO_EDGE = (
    os.environ.get("ROUTEGRAPH_MATRIX_ZERO_IS_NO_EDGE", "").strip().lower() in _TRUTHY
)
