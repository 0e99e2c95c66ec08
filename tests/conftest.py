import itertools

import pytest

from id3tree.dataset import Dataset

SPAM_EXAMPLE = """\
1 0 0 1
0 0 1 1
0 0 0 0
1 1 0 0
0 0 0 0
1 0 1 1
0 1 1 0
1 0 0 1
0 0 0 0
1 0 0 1
"""


def dataset_from_text(names, text):
    """Rows of 1/0 tokens, last token is the label"""
    rows = [[token == "1" for token in line.split()] for line in text.splitlines() if line.strip()]
    return Dataset(names, [row[:-1] for row in rows], [row[-1] for row in rows])


@pytest.fixture
def spam_dataset():
    return dataset_from_text(["nigeria", "viagra", "learning"], SPAM_EXAMPLE)


@pytest.fixture
def xor_dataset():
    rows = [list(bits) for bits in itertools.product([False, True], repeat=3)]
    labels = [(a != b) and c for a, b, c in rows]
    return Dataset(["A", "B", "C"], rows, labels)


@pytest.fixture
def contradictory_dataset():
    return Dataset(["x"], [[True], [True], [False]], [True, False, False])


@pytest.fixture
def xor_diagram():
    """Text diagram of the tree learned from xor_dataset"""
    return (
        "C = 0 : 0\n"
        "C = 1 :\n"
        "| A = 0 :\n"
        "| | B = 0 : 0\n"
        "| | B = 1 : 1\n"
        "| A = 1 :\n"
        "| | B = 0 : 1\n"
        "| | B = 1 : 0\n"
    )
