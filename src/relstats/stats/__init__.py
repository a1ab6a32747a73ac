"""Statistics over vector field relations.

- dimensionality: Strict and lenient vector field resolution
- centroid: Means over relations, id subsets and masked dimensions
- covariance: Gram / covariance matrices
- variance: Per-dimension variances
- minmax: Per-dimension bounds
"""

from relstats.stats.dimensionality import assume_vector_field, dimensionality
from relstats.stats.centroid import centroid, centroid_from_iter, centroid_of_matrix
from relstats.stats.covariance import (
    covariance_matrix,
    covariance_matrix_from_centroid,
    covariance_matrix_of_matrix,
)
from relstats.stats.variance import variances, variances_per_dimension
from relstats.stats.minmax import compute_min_max

__all__ = [
    "assume_vector_field",
    "dimensionality",
    "centroid",
    "centroid_from_iter",
    "centroid_of_matrix",
    "covariance_matrix",
    "covariance_matrix_from_centroid",
    "covariance_matrix_of_matrix",
    "variances",
    "variances_per_dimension",
    "compute_min_max",
]
