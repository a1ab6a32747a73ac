"""Per-dimension bounds of a relation."""

import logging
from typing import Tuple

import numpy as np

from relstats.stats.dimensionality import assume_vector_field, coordinates_of

__all__ = ['compute_min_max']

logger = logging.getLogger(__name__)


def compute_min_max(relation) -> Tuple:
    """Minimum and maximum of every dimension over the whole relation.

    Mins are seeded with the largest finite float and maxs with its
    negation, so an empty relation returns the seeds.

    Returns
    -------
    tuple of (NumberVector, NumberVector)
        ``(min_vector, max_vector)`` built by the relation's factory.

    Raises
    ------
    UnsupportedOperation
        If the relation is not a vector field.
    """
    field = assume_vector_field(relation)
    dim = field.dimensionality
    largest = np.finfo(float).max
    mins = np.full(dim, largest)
    maxs = np.full(dim, -largest)
    for object_id in relation.iter_ids():
        values = coordinates_of(relation, object_id, dim)
        np.minimum(mins, values, out=mins)
        np.maximum(maxs, values, out=maxs)
    logger.debug("Min/max over %d objects, dim=%d", len(relation), dim)
    return field.new_instance(mins), field.new_instance(maxs)
