import dataclasses

import pytest

from id3tree.dataset import Dataset, remove_index, validate_shape
from id3tree.errors import ID3Error, ShapeMismatch


class TestDataset:
    def test_stores_rows_as_tuples(self):
        data = Dataset(["a", "b"], [[1, 0], [0, 0]], [1, 0])

        assert data.attribute_names == ("a", "b")
        assert data.observations == ((True, False), (False, False))
        assert data.labels == (True, False)

    def test_counts(self, spam_dataset):
        assert len(spam_dataset) == 10
        assert spam_dataset.num_attributes == 3
        assert spam_dataset.num_observations == 10
        assert spam_dataset.true_count == 5
        assert spam_dataset.false_count == 5

    def test_row_wider_than_names(self):
        with pytest.raises(ShapeMismatch):
            Dataset(["a"], [[True, False]], [True])

    def test_ragged_rows(self):
        with pytest.raises(ShapeMismatch):
            Dataset(["a", "b"], [[True, False], [True]], [True, False])

    def test_label_count_mismatch(self):
        with pytest.raises(ShapeMismatch):
            Dataset(["a"], [[True], [False]], [True])

    def test_shape_mismatch_is_a_value_error(self):
        with pytest.raises(ValueError):
            Dataset(["a"], [[True]], [])
        assert issubclass(ShapeMismatch, ID3Error)

    def test_empty_dataset_is_valid(self):
        data = Dataset(["a", "b"], [], [])
        assert len(data) == 0

    def test_is_immutable(self, spam_dataset):
        with pytest.raises(dataclasses.FrozenInstanceError):
            spam_dataset.labels = ()

    def test_without_column_keeps_order(self):
        data = Dataset(["a", "b", "c", "d"], [[True, False, True, False]], [True])

        assert data.without_column(1) == ["a", "c", "d"]
        assert data.without_column(3) == ["a", "b", "c"]
        assert data.attribute_names == ("a", "b", "c", "d")


def test_validate_shape_accepts_matching_input():
    validate_shape(["a", "b"], [[True, True]], [False])


def test_validate_shape_rejects_missing_label():
    with pytest.raises(ShapeMismatch):
        validate_shape(["a"], [[True]], [])


def test_remove_index():
    assert remove_index((1, 2, 3), 0) == (2, 3)
    assert remove_index([1, 2, 3], 2) == (1, 2)
