"""Covariance (Gram) matrices.

Normalization differs by entry point and is kept that way:

- covariance_matrix(relation, ids): NOT normalized, sum of outer products
- covariance_matrix(relation) and covariance_matrix_from_centroid():
  divided by the relation size (population estimator, divisor N)
- covariance_matrix_of_matrix(): divided by the column count (divisor N)

Callers that compare an id-subset result against a whole-relation result
must divide the former by ``len(ids)`` themselves.
"""

import logging

import numpy as np

from relstats.contracts import InvalidArgument, require
from relstats.stats.centroid import DATABASE_EMPTY, centroid, centroid_of_matrix
from relstats.stats.dimensionality import coordinates_of

__all__ = ['covariance_matrix', 'covariance_matrix_from_centroid', 'covariance_matrix_of_matrix']

logger = logging.getLogger(__name__)


def covariance_matrix(relation, ids=None) -> np.ndarray:
    """Covariance matrix of a relation or of an id subset.

    Parameters
    ----------
    relation : Relation
        Vector field relation.
    ids : sized iterable, optional
        Identifier subset. When given, the unnormalized Gram matrix of the
        deviations from the subset centroid is returned. When omitted, the
        whole-relation matrix divided by the relation size is returned.

    Returns
    -------
    np.ndarray
        ``d x d`` symmetric matrix.

    Raises
    ------
    InvalidArgument
        If the scope is empty.
    UnsupportedOperation
        If the relation is not a vector field.
    """
    if ids is None:
        return covariance_matrix_from_centroid(relation, centroid(relation))

    center = centroid(relation, ids)
    centered = _centered_matrix(relation, ids, center)
    logger.debug("Unnormalized covariance over %d objects", centered.shape[0])
    return centered.T @ centered


def covariance_matrix_from_centroid(relation, center) -> np.ndarray:
    """Covariance of the whole relation around ``center``, divided by N.

    Parameters
    ----------
    relation : Relation
        Vector field relation.
    center : NumberVector
        Centroid or any reference vector of matching dimensionality.

    Raises
    ------
    InvalidArgument
        If the relation is empty.
    """
    require(len(relation) > 0, DATABASE_EMPTY, InvalidArgument)
    centered = _centered_matrix(relation, relation.iter_ids(), center)
    cov = centered.T @ centered
    cov /= len(relation)
    logger.debug("Normalized covariance over %d objects", len(relation))
    return cov


def covariance_matrix_of_matrix(data) -> np.ndarray:
    """``d x d`` covariance of a ``d x n`` data matrix (columns are samples).

    Centers by the column centroid and divides by the column count.
    """
    data = np.asarray(data, dtype=float)
    center = centroid_of_matrix(data)
    centered = data - center[:, np.newaxis]
    cov = centered @ centered.T
    cov /= data.shape[1]
    return cov


def _centered_matrix(relation, ids, center) -> np.ndarray:
    """``N x d`` deviations of each element from ``center``."""
    mu = center.to_array()
    dim = mu.shape[0]
    rows = [coordinates_of(relation, object_id, dim) - mu for object_id in ids]
    if not rows:
        return np.zeros((0, dim), dtype=float)
    return np.vstack(rows)
