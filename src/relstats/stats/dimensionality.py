"""Dimensionality resolution for vector field relations.

Two access modes:
- assume_vector_field(): strict, raises UnsupportedOperation on mismatch
- dimensionality(): lenient probe, returns -1 on mismatch

Call sites that must build a result vector need the strict mode; call sites
that only probe (display, guards) use the lenient one.
"""

import numpy as np

from relstats.contracts import InvalidArgument, UnsupportedOperation, assert_dimensionality, require
from relstats.data.types import VectorFieldTypeInformation

__all__ = ['assume_vector_field', 'dimensionality', 'coordinates_of', 'mask_indices']


def assume_vector_field(relation) -> VectorFieldTypeInformation:
    """Vector field descriptor of ``relation``.

    Raises
    ------
    UnsupportedOperation
        If the relation's descriptor is not a vector field.
    """
    info = relation.type_information
    if not isinstance(info, VectorFieldTypeInformation):
        raise UnsupportedOperation(f"Expected a vector field, got type information: {info}")
    return info


def dimensionality(relation) -> int:
    """Dimensionality of ``relation``, or -1 if it is not a vector field."""
    info = relation.type_information
    if not isinstance(info, VectorFieldTypeInformation):
        return -1
    return info.dimensionality


def coordinates_of(relation, object_id, dim: int) -> np.ndarray:
    """Coordinates of one element as a float array of length ``dim``."""
    vector = relation.get(object_id)
    assert_dimensionality(vector, dim, object_id)
    return vector.to_array()


def mask_indices(dimensions, dim: int) -> np.ndarray:
    """Sorted 0-based dimension indices selected by a mask.

    Parameters
    ----------
    dimensions : iterable of int, or sequence of bool
        Selected 0-based indices, or a boolean mask of length ``dim`` (a
        boolean np.ndarray or a plain list of bools).
    dim : int
        Dimensionality of the relation.

    Raises
    ------
    InvalidArgument
        If an index falls outside ``0..dim-1``, a boolean mask has the
        wrong length, or bools are mixed with indices.
    """
    if not isinstance(dimensions, np.ndarray):
        dimensions = list(dimensions)
        flags = [isinstance(d, (bool, np.bool_)) for d in dimensions]
        if flags and all(flags):
            dimensions = np.array(dimensions, dtype=bool)
        else:
            require(
                not any(flags),
                f"Dimension mask mixes booleans and indices: {dimensions}",
                InvalidArgument
            )
    if isinstance(dimensions, np.ndarray) and dimensions.dtype == bool:
        require(
            dimensions.shape == (dim,),
            f"Dimension mask has shape {dimensions.shape}, expected ({dim},)",
            InvalidArgument
        )
        return np.flatnonzero(dimensions)
    indices = np.array(sorted({int(d) for d in dimensions}), dtype=int)
    if indices.size:
        require(
            indices[0] >= 0 and indices[-1] < dim,
            f"Dimension mask {indices.tolist()} out of range 0..{dim - 1}",
            InvalidArgument
        )
    return indices
