"""Value types stored in relations.

- types: Type descriptors and kinds
- vector: Numeric vectors
- bit: Bits and bit vectors
- labels: Class labels and label lists
"""

from relstats.data.types import (
    LABEL_KINDS,
    SimpleTypeInformation,
    TypeKind,
    VectorFieldTypeInformation,
)
from relstats.data.vector import DoubleVector, NumberVector
from relstats.data.bit import Bit, BitVector
from relstats.data.labels import ClassLabel, LabelList, SimpleClassLabel

__all__ = [
    "TypeKind",
    "LABEL_KINDS",
    "SimpleTypeInformation",
    "VectorFieldTypeInformation",
    "NumberVector",
    "DoubleVector",
    "Bit",
    "BitVector",
    "ClassLabel",
    "SimpleClassLabel",
    "LabelList",
]
