from dataclasses import dataclass
from typing import List, Sequence, Tuple

from id3tree.errors import ShapeMismatch


def validate_shape(attribute_names: Sequence[str],
                   observations: Sequence[Sequence[bool]],
                   labels: Sequence[bool]):
    """Raise ShapeMismatch unless every row has one value per attribute
    and there is one label per row."""
    width = len(attribute_names)
    for i, row in enumerate(observations):
        if len(row) != width:
            raise ShapeMismatch(
                f"Row {i} has {len(row)} values but there are {width} attribute names")

    if len(labels) != len(observations):
        raise ShapeMismatch(
            f"Got {len(labels)} labels for {len(observations)} observations")


def remove_index(values: Sequence, index: int) -> tuple:
    """Copy of values without the entry at index"""
    return tuple(values[:index]) + tuple(values[index + 1:])


@dataclass(frozen=True)
class Dataset:
    """Immutable table of boolean observations with one boolean label per row"""
    attribute_names: Tuple[str, ...]
    observations: Tuple[Tuple[bool, ...], ...]
    labels: Tuple[bool, ...]

    def __post_init__(self):
        names = tuple(str(name) for name in self.attribute_names)
        rows = tuple(tuple(bool(v) for v in row) for row in self.observations)
        labels = tuple(bool(label) for label in self.labels)

        validate_shape(names, rows, labels)

        object.__setattr__(self, 'attribute_names', names)
        object.__setattr__(self, 'observations', rows)
        object.__setattr__(self, 'labels', labels)

    def __len__(self) -> int:
        return len(self.observations)

    @property
    def num_attributes(self) -> int:
        return len(self.attribute_names)

    @property
    def num_observations(self) -> int:
        return len(self.observations)

    @property
    def true_count(self) -> int:
        return sum(self.labels)

    @property
    def false_count(self) -> int:
        return len(self.labels) - self.true_count

    def without_column(self, index: int) -> List[str]:
        """Attribute names with entry `index` removed, order kept"""
        return list(remove_index(self.attribute_names, index))
