from typing import List, Sequence, Tuple

from id3tree.dataset import Dataset, remove_index, validate_shape
from id3tree.decision_tree import Decision, DecisionTree, Leaf, Node
from id3tree.entropy import information_gains


def select_split_attribute(dataset: Dataset) -> int:
    """Index of the column with the largest information gain.

    Ties keep the leftmost column, and the running best starts at a gain of 0,
    so when no column has positive gain the result is 0.
    """
    gains = information_gains(dataset)
    split_index = 0
    best = 0.0

    for i, gain in enumerate(gains):
        if gain > best:
            split_index = i
            best = gain
    return split_index


def split(dataset: Dataset, index: int) -> Tuple[Dataset, Dataset]:
    """Partition rows on column `index` into (false branch, true branch),
    dropping that column from both"""
    left_rows, left_labels = [], []
    right_rows, right_labels = [], []

    for row, label in zip(dataset.observations, dataset.labels):
        if row[index]:
            right_rows.append(remove_index(row, index))
            right_labels.append(label)
        else:
            left_rows.append(remove_index(row, index))
            left_labels.append(label)

    names = dataset.without_column(index)
    left = Dataset(names, left_rows, left_labels)
    right = Dataset(names, right_rows, right_labels)
    return left, right


def majority_label(dataset: Dataset) -> bool:
    """Most frequent label; ties go to True"""
    return dataset.true_count >= dataset.false_count


def is_pure(dataset: Dataset) -> bool:
    return len(set(dataset.labels)) <= 1


def is_unsplittable(dataset: Dataset) -> bool:
    """No columns left, or every row identical to the first one"""
    if dataset.num_attributes == 0 or dataset.num_observations == 0:
        return True
    first = dataset.observations[0]
    return all(row == first for row in dataset.observations)


class ID3Learner:
    """Recursive ID3 learner (information gain, no pruning)"""

    def __init__(self, data: Dataset, verbose: bool = False):
        self.data = data
        self.verbose = verbose

    def learn(self) -> DecisionTree:
        root = learn_tree(self.data, verbose=self.verbose)
        return DecisionTree(root, self.data.attribute_names)

    def learn_node(self, dataset: Dataset, columns: Sequence[int],
                   fallback: bool, depth: int = 0) -> Node:
        """
        Build the subtree for one dataset

        Args:
            dataset: Rows reaching this node, with already-split columns removed
            columns: For each remaining column, its index in the top-level rows
            fallback: Label predicted when no rows reach this node
            depth: Depth of the node, only used for verbose output
        """
        indent = "  " * depth

        if dataset.num_observations == 0:
            if self.verbose:
                print(f"{indent}Empty branch, leaf {int(fallback)}")
            return Leaf(fallback)

        if is_pure(dataset):
            if self.verbose:
                print(f"{indent}Pure, leaf {int(dataset.labels[0])}")
            return Leaf(dataset.labels[0])

        majority = majority_label(dataset)
        if is_unsplittable(dataset):
            if self.verbose:
                print(f"{indent}Unsplittable ({dataset.num_observations} rows), "
                      f"leaf {int(majority)}")
            return Leaf(majority)

        index = select_split_attribute(dataset)
        name = dataset.attribute_names[index]
        if self.verbose:
            print(f"{indent}Splitting on {name} ({dataset.num_observations} rows)")

        left_set, right_set = split(dataset, index)
        remaining = list(remove_index(columns, index))

        left = self.learn_node(left_set, remaining, majority, depth + 1)
        right = self.learn_node(right_set, remaining, majority, depth + 1)

        return Decision(attribute_name=name,
                        attribute_index=index,
                        left=left,
                        right=right,
                        source_index=columns[index])


def learn_tree(dataset: Dataset, verbose: bool = False) -> Node:
    """Learn a tree from dataset and return its root node"""
    validate_shape(dataset.attribute_names, dataset.observations, dataset.labels)

    learner = ID3Learner(dataset, verbose=verbose)
    columns: List[int] = list(range(dataset.num_attributes))
    return learner.learn_node(dataset, columns, majority_label(dataset))


def learn_tree_from(attribute_names: Sequence[str],
                    observations: Sequence[Sequence[bool]],
                    labels: Sequence[bool],
                    verbose: bool = False) -> Node:
    return learn_tree(Dataset(attribute_names, observations, labels), verbose=verbose)
