"""Per-dimension variances."""

import logging
from typing import Sequence

import numpy as np

from relstats.contracts import InvalidArgument, require
from relstats.stats.centroid import DATABASE_EMPTY, EMPTY_IDS
from relstats.stats.centroid import centroid as compute_centroid
from relstats.stats.dimensionality import coordinates_of

__all__ = ['variances', 'variances_per_dimension']

logger = logging.getLogger(__name__)


def variances(relation, ids=None, centroid=None) -> np.ndarray:
    """Variance in each dimension around a centroid.

    Parameters
    ----------
    relation : Relation
        Vector field relation.
    ids : sized iterable, optional
        Scope. Defaults to the whole relation.
    centroid : NumberVector, optional
        Reference vector. Computed over the scope when omitted.

    Returns
    -------
    np.ndarray
        Mean squared deviation per dimension, divisor = scope size.

    Raises
    ------
    InvalidArgument
        If the scope is empty.

    Examples
    --------
    >>> rel = MaterializedRelation.from_array([[1, 0], [3, 0], [5, 0]])
    >>> variances(rel)
    array([2.66666667, 0.        ])
    """
    if centroid is None:
        centroid = compute_centroid(relation, ids)
    if ids is None:
        require(len(relation) > 0, DATABASE_EMPTY, InvalidArgument)
        size = len(relation)
        ids = relation.iter_ids()
    else:
        require(len(ids) > 0, EMPTY_IDS, InvalidArgument)
        size = len(ids)

    mu = centroid.to_array()
    dim = mu.shape[0]
    sums = np.zeros(dim, dtype=float)
    for object_id in ids:
        diff = coordinates_of(relation, object_id, dim) - mu
        sums += diff * diff
    logger.debug("Variances over %d objects, dim=%d", size, dim)
    return sums / size


def variances_per_dimension(relation, centroid, ids_per_dimension: Sequence) -> np.ndarray:
    """Variances where each dimension has its own id subset.

    Dimension ``k`` (0-based) uses ``ids_per_dimension[k]`` and is divided
    by that subset's size, e.g. a per-dimension neighborhood.

    Raises
    ------
    InvalidArgument
        If the number of subsets differs from the centroid dimensionality,
        or any subset is empty.
    """
    mu = centroid.to_array()
    dim = mu.shape[0]
    require(
        len(ids_per_dimension) == dim,
        f"Got {len(ids_per_dimension)} id subsets for {dim} dimensions",
        InvalidArgument
    )

    result = np.zeros(dim, dtype=float)
    for d, ids_d in enumerate(ids_per_dimension):
        require(len(ids_d) > 0, f"Empty id subset for dimension {d + 1}", InvalidArgument)
        acc = 0.0
        for neighbor_id in ids_d:
            diff = coordinates_of(relation, neighbor_id, dim)[d] - mu[d]
            acc += diff * diff
        result[d] = acc / len(ids_d)
    return result
