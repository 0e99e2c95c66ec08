import itertools

import pytest

from id3tree.dataset import Dataset
from id3tree.decision_tree import (
    Decision,
    DecisionTree,
    Leaf,
    accuracy,
    accuracy_report,
    check_node,
    count_leaves,
    count_nodes,
    predict,
    predict_reduced,
    tree_depth,
)
from id3tree.errors import TreeStructureError
from id3tree.learner import learn_tree


class TestPredict:
    def test_leaf(self):
        assert predict(Leaf(True), [False, False]) is True
        assert predict(Leaf(False), []) is False

    def test_xor_truth_table(self, xor_dataset):
        root = learn_tree(xor_dataset)
        for a, b, c in itertools.product([False, True], repeat=3):
            assert predict(root, [a, b, c]) == ((a != b) and c)

    def test_reduced_walk_agrees(self, spam_dataset, xor_dataset):
        for data in (spam_dataset, xor_dataset):
            root = learn_tree(data)
            for row in itertools.product([False, True], repeat=data.num_attributes):
                assert predict(root, row) == predict_reduced(root, row)

    def test_reduced_walk_uses_depth_relative_index(self):
        # second split is on column 2 of the original row, index 1 once column 0 is gone
        root = Decision("a", 0,
                        Leaf(False),
                        Decision("c", 1, Leaf(False), Leaf(True), source_index=2),
                        source_index=0)

        assert predict_reduced(root, [True, False, True]) is True
        assert predict_reduced(root, [True, True, False]) is False
        assert predict(root, [True, False, True]) is True

    def test_malformed_decision_fails(self):
        broken = Decision("a", 0, Leaf(True), None, 0)
        with pytest.raises(TreeStructureError):
            predict(broken, [True])

    def test_malformed_leaf_fails(self):
        with pytest.raises(TreeStructureError):
            predict(Leaf(None), [True])


class TestAccuracy:
    def test_percentage(self):
        data = Dataset(["a"], [[True], [False], [True], [False]], [True, True, True, True])
        root = Decision("a", 0, Leaf(False), Leaf(True), 0)
        assert accuracy(root, data) == 50.0

    def test_empty_dataset_scores_zero(self):
        assert accuracy(Leaf(True), Dataset(["a"], [], [])) == 0.0

    def test_report(self, xor_dataset):
        test = Dataset(["A", "B", "C"], [[True, False, True], [True, True, True]], [True, True])
        report = accuracy_report(learn_tree(xor_dataset), xor_dataset, test)

        assert report.splitlines() == [
            "Accuracy on training set (8 instances): 100.0%",
            "Accuracy on test set (2 instances): 50.0%",
        ]


class TestTreeStatistics:
    def test_single_leaf(self):
        assert tree_depth(Leaf(True)) == 0
        assert count_nodes(Leaf(True)) == 1
        assert count_leaves(Leaf(True)) == 1

    def test_decision_tree_wrapper(self, spam_dataset):
        tree = DecisionTree(learn_tree(spam_dataset), spam_dataset.attribute_names)

        assert not tree.is_leaf
        assert tree.evaluate(spam_dataset) == 100.0
        assert tree.classify([True, False, False]) is True
        assert tree.num_nodes == 2 * tree.num_leaves - 1

    def test_check_node_rejects_other_objects(self):
        with pytest.raises(TreeStructureError):
            check_node("not a node")
        with pytest.raises(TreeStructureError):
            DecisionTree(Decision("", 0, Leaf(True), Leaf(False), 0))
