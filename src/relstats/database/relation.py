"""Identifier-indexed, read-only relations.

A relation maps identifiers to elements of one semantic kind and carries a
type descriptor. Every relation here is a borrowed, read-only view: no
operation in this package writes to one.
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Iterable, Iterator, Optional

import numpy as np
import pandas as pd

from relstats.data.types import SimpleTypeInformation, TypeKind, VectorFieldTypeInformation
from relstats.data.vector import DoubleVector

__all__ = ['Relation', 'MaterializedRelation', 'DataFrameRelation', 'ConvertToStringView']

logger = logging.getLogger(__name__)


class Relation(ABC):
    """Abstract read-only relation.

    Subclasses provide ``__len__``, ``iter_ids()``, ``get()`` and
    ``type_information``.
    """

    @property
    @abstractmethod
    def type_information(self) -> SimpleTypeInformation:
        """Descriptor of the stored elements."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of elements."""

    @abstractmethod
    def iter_ids(self) -> Iterator:
        """Fresh single-pass iterator over all identifiers."""

    @abstractmethod
    def get(self, object_id):
        """Element stored under ``object_id``.

        Raises
        ------
        KeyError
            If the identifier is unknown.
        """

    def __repr__(self):
        return f"{type(self).__name__}({self.type_information}, size={len(self)})"


class MaterializedRelation(Relation):
    """In-memory relation over a list of objects.

    Parameters
    ----------
    type_information : SimpleTypeInformation
        Descriptor of the stored objects.
    objects : iterable
        The elements, in identifier order.
    ids : iterable, optional
        Identifiers matching ``objects`` one to one. Defaults to 0..n-1.

    Raises
    ------
    ValueError
        If ids are duplicated or their count differs from the object count.

    Examples
    --------
    >>> rel = MaterializedRelation.from_array([[1, 2], [3, 4]])
    >>> rel.get(1)
    DoubleVector([3.0, 4.0])
    """

    def __init__(self, type_information: SimpleTypeInformation, objects: Iterable,
                 ids: Optional[Iterable] = None):
        objects = list(objects)
        ids = list(range(len(objects))) if ids is None else list(ids)
        if len(ids) != len(objects):
            raise ValueError(f"Got {len(ids)} ids for {len(objects)} objects")
        self._data = dict(zip(ids, objects))
        if len(self._data) != len(ids):
            raise ValueError("Relation ids must be unique")
        self._type_information = type_information

    @classmethod
    def from_array(cls, data, factory: Callable = DoubleVector, ids: Optional[Iterable] = None) -> "MaterializedRelation":
        """Build a vector field relation from an ``n x d`` array.

        Parameters
        ----------
        data : array-like
            One row per object.
        factory : callable, default DoubleVector
            Vector representation; stored in the descriptor.
        ids : iterable, optional
            Identifiers of the rows.
        """
        arr = np.asarray(data, dtype=float)
        if arr.ndim != 2:
            raise ValueError(f"Expected a 2-D array, got shape {arr.shape}")
        info = VectorFieldTypeInformation(factory, arr.shape[1])
        return cls(info, (factory(row) for row in arr), ids)

    @property
    def type_information(self) -> SimpleTypeInformation:
        return self._type_information

    def __len__(self) -> int:
        return len(self._data)

    def iter_ids(self) -> Iterator:
        return iter(self._data)

    def get(self, object_id):
        return self._data[object_id]


class DataFrameRelation(Relation):
    """Vector field relation over a numeric DataFrame.

    The index supplies identifiers and each column is one dimension. Rows
    are converted to vectors on access; the frame itself is never copied
    or modified.

    Parameters
    ----------
    frame : pd.DataFrame
        Numeric frame with a unique index.
    factory : callable, default DoubleVector
        Vector representation built for each row.

    Raises
    ------
    ValueError
        If a column is not numeric or the index is not unique.
    """

    def __init__(self, frame: pd.DataFrame, factory: Callable = DoubleVector):
        non_numeric = [c for c in frame.columns if not pd.api.types.is_numeric_dtype(frame[c])]
        if non_numeric:
            raise ValueError(f"DataFrameRelation needs numeric columns, got {non_numeric}")
        if not frame.index.is_unique:
            raise ValueError("DataFrameRelation needs a unique index")
        self.frame = frame
        self._type_information = VectorFieldTypeInformation(factory, frame.shape[1])
        logger.debug("DataFrameRelation: %d rows, %d columns", frame.shape[0], frame.shape[1])

    @property
    def type_information(self) -> VectorFieldTypeInformation:
        return self._type_information

    def __len__(self) -> int:
        return len(self.frame.index)

    def iter_ids(self) -> Iterator:
        return iter(self.frame.index)

    def get(self, object_id):
        row = self.frame.loc[object_id]
        return self._type_information.new_instance(row.to_numpy(dtype=float))


class ConvertToStringView(Relation):
    """String view of another relation.

    Each element is presented as ``str()`` of the underlying element. The
    wrapped relation is not copied.
    """

    def __init__(self, relation: Relation):
        self.relation = relation
        self._type_information = SimpleTypeInformation(TypeKind.STRING, str)

    @property
    def type_information(self) -> SimpleTypeInformation:
        return self._type_information

    def __len__(self) -> int:
        return len(self.relation)

    def iter_ids(self) -> Iterator:
        return self.relation.iter_ids()

    def get(self, object_id) -> str:
        return str(self.relation.get(object_id))
