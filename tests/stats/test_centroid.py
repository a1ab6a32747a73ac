"""Tests for centroid computation."""

import numpy as np
import pytest

pytestmark = pytest.mark.unit

from relstats.contracts import ContractViolation, InvalidArgument, UnsupportedOperation
from relstats.data import BitVector, DoubleVector, VectorFieldTypeInformation
from relstats.database import MaterializedRelation
from relstats.stats import centroid, centroid_from_iter, centroid_of_matrix


class TestCentroid:

    def test_whole_relation(self, two_points):
        assert centroid(two_points) == DoubleVector([2, 3])

    def test_id_subset(self, two_points):
        assert centroid(two_points, [10, 20]) == DoubleVector([2, 3])
        assert centroid(two_points, [20]) == DoubleVector([3, 4])

    def test_id_set(self, make_relation):
        rel = make_relation([[0, 0], [2, 4], [4, 8]])
        assert centroid(rel, {1, 2}) == DoubleVector([3, 6])

    def test_dimension_mask_zeroes_unselected(self, make_relation):
        rel = make_relation([[1, 10, 100], [3, 30, 300]])
        result = centroid(rel, [0, 1], {0, 2})
        assert result.dimensionality == 3
        assert result.to_array().tolist() == [2.0, 0.0, 200.0]

    def test_bool_list_mask(self, make_relation):
        rel = make_relation([[1, 10, 100], [3, 30, 300]])
        result = centroid(rel, [0, 1], [True, False, True])
        assert result.to_array().tolist() == [2.0, 0.0, 200.0]

    def test_result_uses_relation_factory(self, make_relation):
        rel = make_relation([[1, 0], [1, 0]], factory=BitVector)
        result = centroid(rel)
        assert isinstance(result, BitVector)
        assert result == BitVector([1, 0])

    def test_factory_round_trip(self, two_points):
        result = centroid(two_points)
        rebuilt = two_points.type_information.new_instance(result.to_array())
        assert [rebuilt.coordinate(d) for d in (1, 2)] == [2.0, 3.0]

    def test_empty_ids(self, two_points):
        with pytest.raises(InvalidArgument, match="empty list of ids"):
            centroid(two_points, [])

    def test_empty_ids_with_mask(self, two_points):
        with pytest.raises(InvalidArgument):
            centroid(two_points, set(), {0})

    def test_empty_relation(self):
        rel = MaterializedRelation(VectorFieldTypeInformation(DoubleVector, 2), [])
        with pytest.raises(InvalidArgument):
            centroid(rel)

    def test_none_relation(self):
        with pytest.raises(InvalidArgument):
            centroid(None)

    def test_not_a_vector_field(self, string_relation):
        with pytest.raises(UnsupportedOperation):
            centroid(string_relation)

    def test_element_with_wrong_dimensionality(self):
        info = VectorFieldTypeInformation(DoubleVector, 2)
        rel = MaterializedRelation(info, [DoubleVector([1, 2]), DoubleVector([1, 2, 3])])
        with pytest.raises(ContractViolation):
            centroid(rel)


class TestCentroidFromIter:

    def test_consumes_iterator(self, two_points):
        assert centroid_from_iter(two_points, iter([10, 20]), {0, 1}) == DoubleVector([2, 3])

    def test_counts_while_iterating(self, make_relation):
        rel = make_relation([[1, 1], [2, 2], [3, 3], [4, 4]])
        ids = (i for i in rel.iter_ids() if i % 2 == 0)
        assert centroid_from_iter(rel, ids, [1]) == DoubleVector([0, 2])

    def test_bool_list_mask(self, make_relation):
        rel = make_relation([[1, 10, 100], [3, 30, 300]])
        result = centroid_from_iter(rel, iter([0, 1]), [True, False, True])
        assert result.to_array().tolist() == [2.0, 0.0, 200.0]

    def test_iterator_is_drained(self, two_points):
        it = iter([10, 20])
        centroid_from_iter(two_points, it)
        assert next(it, None) is None

    def test_empty_iterator(self, two_points):
        with pytest.raises(InvalidArgument, match="empty list of ids"):
            centroid_from_iter(two_points, iter([]), {0})

    def test_empty_checked_before_vector_field(self, string_relation):
        with pytest.raises(InvalidArgument):
            centroid_from_iter(string_relation, iter([]))


class TestCentroidOfMatrix:

    def test_columns_are_samples(self):
        data = np.array([[1.0, 3.0], [2.0, 4.0]])
        assert centroid_of_matrix(data).tolist() == [2.0, 3.0]

    def test_no_columns(self):
        with pytest.raises(InvalidArgument):
            centroid_of_matrix(np.zeros((2, 0)))
