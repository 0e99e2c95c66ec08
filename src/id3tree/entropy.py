from typing import Tuple
import math

import numpy as np

from id3tree.dataset import Dataset


def entropy(count_a: int, count_b: int) -> float:
    """Binary Shannon entropy in bits, using 0 * log2(0) = 0"""
    total = count_a + count_b
    if total <= 0:
        raise ValueError("Entropy of an empty set is undefined")

    result = 0.0
    for count in (count_a, count_b):
        if count == 0:
            continue
        p = count / total
        result -= p * math.log2(p)
    return result


def set_entropy(dataset: Dataset) -> float:
    """Entropy of the label distribution of the whole dataset"""
    return entropy(dataset.true_count, dataset.false_count)


def _branch_counts(dataset: Dataset) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """
    Count, for every attribute column at once, the rows falling in each
    (attribute value, label) cell.

    Returns:
        (true_on_true, false_on_true, true_on_false, false_on_false), each an
        integer array with one entry per column. "on_true" means the attribute
        is set, the leading word is the label.
    """
    matrix = np.asarray(dataset.observations, dtype=bool).reshape(
        dataset.num_observations, dataset.num_attributes)
    labels = np.asarray(dataset.labels, dtype=bool)

    positive = matrix[labels]
    negative = matrix[~labels]

    true_on_true = positive.sum(axis=0)
    false_on_true = negative.sum(axis=0)
    true_on_false = len(positive) - true_on_true
    false_on_false = len(negative) - false_on_true

    return true_on_true, false_on_true, true_on_false, false_on_false


def _weighted_entropy(set_size: int, true_count: int, false_count: int) -> float:
    subset_size = true_count + false_count
    if subset_size == 0:
        return 0.0
    return (subset_size / set_size) * entropy(true_count, false_count)


def conditional_entropies(dataset: Dataset) -> np.ndarray:
    """Label entropy after splitting on each column, weighted by branch size"""
    size = dataset.num_observations
    if size == 0:
        raise ValueError("Conditional entropy of an empty dataset is undefined")

    true_on_true, false_on_true, true_on_false, false_on_false = _branch_counts(dataset)

    result = np.zeros(dataset.num_attributes, dtype=float)
    for i in range(dataset.num_attributes):
        result[i] = (_weighted_entropy(size, int(true_on_false[i]), int(false_on_false[i]))
                     + _weighted_entropy(size, int(true_on_true[i]), int(false_on_true[i])))
    return result


def information_gains(dataset: Dataset) -> np.ndarray:
    """Information gain of every attribute column"""
    return set_entropy(dataset) - conditional_entropies(dataset)


def conditional_entropy(dataset: Dataset, attribute_index: int) -> float:
    return float(conditional_entropies(dataset)[attribute_index])


def information_gain(dataset: Dataset, attribute_index: int) -> float:
    return float(information_gains(dataset)[attribute_index])
