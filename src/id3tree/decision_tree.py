from typing import Sequence, Union
from dataclasses import dataclass

from id3tree.dataset import Dataset, remove_index
from id3tree.errors import TreeStructureError


@dataclass(frozen=True)
class Leaf:
    """Terminal node holding the predicted label"""
    value: bool


@dataclass(frozen=True)
class Decision:
    """Internal node testing one attribute.

    attribute_index is the position of the attribute in the rows as they look
    at this depth (every split above removed one column). source_index is the
    position of the same attribute in the rows the tree was learned from.
    """
    attribute_name: str
    attribute_index: int
    left: 'Node'   # attribute is false
    right: 'Node'  # attribute is true
    source_index: int


Node = Union[Leaf, Decision]


def check_node(node) -> Node:
    """Return node unchanged, or raise TreeStructureError if it is malformed"""
    if isinstance(node, Leaf):
        if not isinstance(node.value, bool):
            raise TreeStructureError("Leaf node has no predicted value")
        return node

    if isinstance(node, Decision):
        if not node.attribute_name:
            raise TreeStructureError("Inner node has no attribute name")
        if node.left is None:
            raise TreeStructureError("Inner node has no left node")
        if node.right is None:
            raise TreeStructureError("Inner node has no right node")
        return node

    raise TreeStructureError(f"Not a tree node: {node!r}")


def predict(tree: Node, row: Sequence[bool]) -> bool:
    """Classify a row laid out like the rows the tree was learned from"""
    node = check_node(tree)
    while isinstance(node, Decision):
        node = check_node(node.right if row[node.source_index] else node.left)
    return node.value


def predict_reduced(tree: Node, row: Sequence[bool]) -> bool:
    """Same as predict, but shrinks the row at every decision node the way
    training removed split columns, reading attribute_index instead"""
    node = check_node(tree)
    while isinstance(node, Decision):
        value = row[node.attribute_index]
        row = remove_index(row, node.attribute_index)
        node = check_node(node.right if value else node.left)
    return node.value


def accuracy(tree: Node, dataset: Dataset) -> float:
    """Percentage (0-100) of rows whose prediction matches the label"""
    total = len(dataset)
    if total == 0:
        return 0.0

    correct = sum(1 for row, label in zip(dataset.observations, dataset.labels)
                  if predict(tree, row) == label)
    return 100.0 * correct / total


def accuracy_report(tree: Node, training: Dataset, test: Dataset) -> str:
    lines = []
    for name, dataset in (("training", training), ("test", test)):
        lines.append(f"Accuracy on {name} set ({len(dataset)} instances): "
                     f"{accuracy(tree, dataset):.1f}%")
    return "\n".join(lines)


def tree_depth(node: Node) -> int:
    node = check_node(node)
    if isinstance(node, Leaf):
        return 0
    return 1 + max(tree_depth(node.left), tree_depth(node.right))


def count_nodes(node: Node) -> int:
    node = check_node(node)
    if isinstance(node, Leaf):
        return 1
    return 1 + count_nodes(node.left) + count_nodes(node.right)


def count_leaves(node: Node) -> int:
    node = check_node(node)
    if isinstance(node, Leaf):
        return 1
    return count_leaves(node.left) + count_leaves(node.right)


class DecisionTree:
    """Learned tree together with the attribute names it was learned on"""

    def __init__(self, root: Node, attribute_names: Sequence[str] = ()):
        self.root = check_node(root)
        self.attribute_names = list(attribute_names)
        self.depth = tree_depth(self.root)
        self.num_nodes = count_nodes(self.root)
        self.num_leaves = count_leaves(self.root)

    @property
    def is_leaf(self) -> bool:
        return isinstance(self.root, Leaf)

    def classify(self, features: Sequence[bool]) -> bool:
        """Classify example"""
        return predict(self.root, features)

    def evaluate(self, data: Dataset) -> float:
        """Accuracy on dataset, as a percentage"""
        return accuracy(self.root, data)
