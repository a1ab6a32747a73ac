"""Centroid computation.

The centroid is the per-dimension arithmetic mean over a scope of elements,
rebuilt as a vector of the relation's own representation through the
descriptor factory.
"""

import itertools
import logging
from typing import Iterator

import numpy as np

from relstats.contracts import InvalidArgument, require
from relstats.stats.dimensionality import assume_vector_field, coordinates_of, mask_indices

__all__ = ['centroid', 'centroid_from_iter', 'centroid_of_matrix', 'EMPTY_IDS', 'DATABASE_EMPTY']

logger = logging.getLogger(__name__)

EMPTY_IDS = "Cannot compute a centroid, because of empty list of ids!"
DATABASE_EMPTY = "Database is empty!"

_MISSING = object()


def centroid(relation, ids=None, dimensions=None):
    """Centroid of a relation, an id subset, or a dimension-masked subset.

    Parameters
    ----------
    relation : Relation
        Vector field relation.
    ids : sized iterable, optional
        Identifiers to average over. Defaults to the whole relation.
    dimensions : iterable of int, or boolean mask (np.ndarray or list of bool), optional
        0-based dimensions that accumulate. Unselected dimensions stay in
        the result with value 0.

    Returns
    -------
    NumberVector
        Built by the relation's factory, same dimensionality as the relation.

    Raises
    ------
    InvalidArgument
        If the scope is empty.
    UnsupportedOperation
        If the relation is not a vector field.

    Examples
    --------
    >>> rel = MaterializedRelation.from_array([[1, 2], [3, 4]])
    >>> centroid(rel)
    DoubleVector([2.0, 3.0])
    """
    if ids is None:
        require(relation is not None and len(relation) > 0, DATABASE_EMPTY, InvalidArgument)
        size = len(relation)
        ids = relation.iter_ids()
    else:
        require(len(ids) > 0, EMPTY_IDS, InvalidArgument)
        size = len(ids)

    field = assume_vector_field(relation)
    dim = field.dimensionality
    sums = _accumulate(relation, ids, dim, dimensions)[0]

    # masked-out slots are 0 / size == 0
    sums /= size
    logger.debug("Centroid over %d objects, dim=%d", size, dim)
    return field.new_instance(sums)


def centroid_from_iter(relation, id_iter: Iterator, dimensions=None):
    """Centroid over a one-shot id iterator.

    The iterator is consumed exactly once; the element count is taken while
    iterating.

    Raises
    ------
    InvalidArgument
        If the iterator yields nothing.
    UnsupportedOperation
        If the relation is not a vector field.
    """
    id_iter = iter(id_iter)
    first = next(id_iter, _MISSING)
    require(first is not _MISSING, EMPTY_IDS, InvalidArgument)

    field = assume_vector_field(relation)
    dim = field.dimensionality
    sums, size = _accumulate(relation, itertools.chain([first], id_iter), dim, dimensions)

    sums /= size
    logger.debug("Centroid over %d iterated objects, dim=%d", size, dim)
    return field.new_instance(sums)


def centroid_of_matrix(data) -> np.ndarray:
    """Centroid of a ``d x n`` data matrix whose columns are the samples.

    Raises
    ------
    InvalidArgument
        If the matrix has no columns.
    """
    data = np.asarray(data, dtype=float)
    require(data.ndim == 2, f"Expected a 2-D data matrix, got shape {data.shape}", InvalidArgument)
    n = data.shape[1]
    require(n > 0, "Cannot compute a centroid of a matrix without columns!", InvalidArgument)
    return data.sum(axis=1) / n


def _accumulate(relation, ids, dim, dimensions):
    """Sum coordinates over ids. Returns (sums, count)."""
    mask = None if dimensions is None else mask_indices(dimensions, dim)
    sums = np.zeros(dim, dtype=float)
    count = 0
    for object_id in ids:
        values = coordinates_of(relation, object_id, dim)
        if mask is None:
            sums += values
        else:
            sums[mask] += values[mask]
        count += 1
    return sums, count
