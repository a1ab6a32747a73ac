"""Tests for vector types and type descriptors."""

import numpy as np
import pytest

pytestmark = pytest.mark.unit

from relstats.data import (
    DoubleVector,
    SimpleTypeInformation,
    TypeKind,
    VectorFieldTypeInformation,
)


class TestDoubleVector:

    def test_coordinates_are_one_based(self):
        v = DoubleVector([1.5, -2.0, 3.0])
        assert v.coordinate(1) == 1.5
        assert v.coordinate(3) == 3.0
        assert v.dimensionality == 3

    @pytest.mark.parametrize("d", [0, 4, -1])
    def test_coordinate_out_of_range(self, d):
        with pytest.raises(IndexError):
            DoubleVector([1.0, 2.0, 3.0]).coordinate(d)

    def test_values_are_copied(self):
        raw = np.array([1.0, 2.0])
        v = DoubleVector(raw)
        raw[0] = 99.0
        out = v.to_array()
        out[1] = 99.0
        assert v.to_array().tolist() == [1.0, 2.0]

    def test_rejects_2d_input(self):
        with pytest.raises(ValueError, match="1-D"):
            DoubleVector([[1.0, 2.0]])

    def test_equality_and_str(self):
        assert DoubleVector([1, 2]) == DoubleVector([1.0, 2.0])
        assert DoubleVector([1, 2]) != DoubleVector([2, 1])
        assert str(DoubleVector([1, 2])) == "1.0 2.0"


class TestTypeInformation:

    def test_vector_field_factory_round_trip(self):
        info = VectorFieldTypeInformation(DoubleVector, 2)
        v = info.new_instance([0.25, 7.5])
        assert isinstance(v, DoubleVector)
        assert info.new_instance(v.to_array()) == v

    def test_vector_field_kind_and_restriction(self):
        info = VectorFieldTypeInformation(DoubleVector, 4)
        assert info.kind == TypeKind.VECTOR_FIELD
        assert info.restriction_class is DoubleVector
        assert "dim=4" in str(info)

    def test_factory_may_be_any_callable(self):
        info = VectorFieldTypeInformation(lambda values: DoubleVector(values * 2), 1)
        assert info.new_instance([3.0]).coordinate(1) == 6.0
        assert info.restriction_class is object

    def test_negative_dimensionality_rejected(self):
        with pytest.raises(ValueError):
            VectorFieldTypeInformation(DoubleVector, -1)

    def test_non_int_dimensionality_rejected(self):
        with pytest.raises(TypeError):
            VectorFieldTypeInformation(DoubleVector, 2.0)

    def test_simple_type_information_str(self):
        info = SimpleTypeInformation("string", str)
        assert info.kind is TypeKind.STRING
        assert str(info) == "string<str>"
