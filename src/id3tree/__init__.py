"""ID3 decision trees over boolean attributes"""
from id3tree.dataset import Dataset
from id3tree.decision_tree import (
    Decision,
    DecisionTree,
    Leaf,
    Node,
    accuracy,
    accuracy_report,
    predict,
)
from id3tree.entropy import (
    conditional_entropy,
    entropy,
    information_gain,
    information_gains,
    set_entropy,
)
from id3tree.errors import EmptyInput, ID3Error, ShapeMismatch, TreeStructureError
from id3tree.learner import ID3Learner, learn_tree, select_split_attribute, split

__version__ = "0.1.0"
