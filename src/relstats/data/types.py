"""Type descriptors attached to relations.

A relation carries one descriptor naming the semantic kind of its elements.
Vector field descriptors additionally carry the dimensionality and the
factory that rebuilds a vector of the relation's concrete representation.
"""

from enum import Enum
from typing import Callable

import numpy as np

__all__ = ['TypeKind', 'SimpleTypeInformation', 'VectorFieldTypeInformation', 'LABEL_KINDS']


class TypeKind(str, Enum):
    """Semantic kind of the elements stored in a relation."""
    VECTOR_FIELD = "vector_field"
    CLASSLABEL = "classlabel"
    LABELLIST = "labellist"
    STRING = "string"
    OBJECT = "object"


# Kinds that can be viewed as a string label
LABEL_KINDS = (TypeKind.CLASSLABEL, TypeKind.LABELLIST, TypeKind.STRING)


class SimpleTypeInformation:
    """Descriptor for a relation that is not a vector field.

    Parameters
    ----------
    kind : TypeKind
        Semantic kind of the elements.
    restriction_class : type, default object
        Class every element is an instance of.
    """

    def __init__(self, kind: TypeKind, restriction_class: type = object):
        self.kind = TypeKind(kind)
        self.restriction_class = restriction_class

    def __str__(self):
        return f"{self.kind.value}<{self.restriction_class.__name__}>"

    def __repr__(self):
        return f"{type(self).__name__}({self.kind.value!r}, {self.restriction_class.__name__})"


class VectorFieldTypeInformation(SimpleTypeInformation):
    """Descriptor for a relation of fixed-dimensionality vectors.

    The factory is carried as data: it is whatever callable builds the
    relation's vector type from a raw coordinate array, typically the vector
    class itself.

    Parameters
    ----------
    factory : callable
        ``factory(values) -> NumberVector``.
    dimensionality : int
        Number of coordinates of every element.
    """

    def __init__(self, factory: Callable, dimensionality: int):
        if isinstance(dimensionality, bool) or not isinstance(dimensionality, (int, np.integer)):
            raise TypeError(f"dimensionality must be an int, got {type(dimensionality).__name__}")
        if dimensionality < 0:
            raise ValueError(f"dimensionality must be >= 0, got {dimensionality}")
        restriction = factory if isinstance(factory, type) else object
        super().__init__(TypeKind.VECTOR_FIELD, restriction)
        self.factory = factory
        self.dimensionality = int(dimensionality)

    def new_instance(self, values):
        """Build a vector of the relation's representation from raw values."""
        return self.factory(np.asarray(values, dtype=float))

    def __str__(self):
        return f"{self.kind.value}<{self.restriction_class.__name__},dim={self.dimensionality}>"

    def __repr__(self):
        return (f"{type(self).__name__}(factory={getattr(self.factory, '__name__', self.factory)!r}, "
                f"dimensionality={self.dimensionality})")
