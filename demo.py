import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent / 'src'))

import itertools
import numpy as np
from id3tree.dataset import Dataset
from id3tree.decision_tree import accuracy_report
from id3tree.entropy import information_gains
from id3tree.learner import ID3Learner, select_split_attribute
from id3tree.visualizer import TreeVisualizer


SPAM_ROWS = [
    [1, 0, 0, 1],
    [0, 0, 1, 1],
    [0, 0, 0, 0],
    [1, 1, 0, 0],
    [0, 0, 0, 0],
    [1, 0, 1, 1],
    [0, 1, 1, 0],
    [1, 0, 0, 1],
    [0, 0, 0, 0],
    [1, 0, 0, 1],
]


def create_spam_data() -> Dataset:
    """Ten e-mails described by three keywords, label = spam"""
    return Dataset(["nigeria", "viagra", "learning"],
                   [row[:-1] for row in SPAM_ROWS],
                   [row[-1] for row in SPAM_ROWS])


def create_xor_data() -> Dataset:
    """All 8 rows of A, B, C with label (A xor B) and C"""
    rows = [list(bits) for bits in itertools.product([False, True], repeat=3)]
    labels = [(a != b) and c for a, b, c in rows]
    return Dataset(["A", "B", "C"], rows, labels)


def create_sample_data(n_samples: int = 200, n_features: int = 12, noise: float = 0.05,
                       seed: int = 42) -> Dataset:
    """Random boolean rows labelled by a fixed formula, with label noise"""
    rng = np.random.default_rng(seed)
    X = rng.integers(0, 2, size=(n_samples, n_features)).astype(bool)

    y = (X[:, 0] & X[:, 1]) | (X[:, 2] ^ X[:, 3]) & ~X[:, 4]
    flip = rng.random(n_samples) < noise
    y = y ^ flip

    names = [f"x{i:02d}" for i in range(n_features)]
    return Dataset(names, X.tolist(), y.tolist())


def train_test_split(data: Dataset, test_fraction: float = 0.3, seed: int = 0):
    rng = np.random.default_rng(seed)
    order = rng.permutation(len(data))
    n_test = int(len(data) * test_fraction)

    def subset(indices):
        return Dataset(data.attribute_names,
                       [data.observations[i] for i in indices],
                       [data.labels[i] for i in indices])

    return subset(order[n_test:]), subset(order[:n_test])


def show(title: str, train: Dataset, test: Dataset = None, verbose: bool = False):
    print(f"\n{'=' * 60}")
    print(title)
    print(f"{'=' * 60}")

    gains = information_gains(train)
    for name, gain in zip(train.attribute_names, gains):
        print(f"  gain({name}) = {gain:.3f}")
    print(f"  split on: {train.attribute_names[select_split_attribute(train)]}\n")

    tree = ID3Learner(train, verbose=verbose).learn()
    print(TreeVisualizer(tree).to_text())
    print(accuracy_report(tree.root, train, test if test is not None else train))
    print(f"Depth: {tree.depth}, Nodes: {tree.num_nodes}")


def main():
    print("=== ID3 Demo ===")

    show("Spam keywords", create_spam_data())
    show("(A xor B) and C", create_xor_data(), verbose=True)

    train, test = train_test_split(create_sample_data())
    show(f"Synthetic data ({len(train)} train / {len(test)} test rows)", train, test)


if __name__ == "__main__":
    main()
