import pandas as pd
from pathlib import Path
from typing import Union

from id3tree.dataset import Dataset
from id3tree.errors import EmptyInput, ShapeMismatch

LABEL_COLUMN = "class"
TRUE_TOKEN = "1"


def load_dataset(path: Union[str, Path]) -> Dataset:
    """
    Load a whitespace-delimited table of 1/0 values.

    The first non-blank line names the columns; the last column is the label
    and its name is discarded. Every token other than "1" reads as False.

    Raises:
        EmptyInput: if the file has no header line
        ShapeMismatch: if a row does not have one token per header column
    """
    try:
        table = pd.read_csv(path, sep=r"\s+", header=None, dtype=str,
                            keep_default_na=False, na_values=[],
                            skip_blank_lines=True)
    except pd.errors.EmptyDataError as e:
        raise EmptyInput(f"The file at the following given path is empty: {path}") from e
    except pd.errors.ParserError as e:
        raise ShapeMismatch(f"Malformed row in {path}: {e}") from e

    header = table.iloc[0].tolist()
    rows = table.iloc[1:]

    # short rows come back padded with NaN or empty cells
    if (rows.isna() | (rows == "")).to_numpy().any():
        raise ShapeMismatch(f"Some rows in {path} have fewer values than the header")

    values = (rows == TRUE_TOKEN).to_numpy(dtype=bool)
    attribute_names = [str(name) for name in header[:-1]]

    return Dataset(attribute_names,
                   values[:, :-1].tolist(),
                   values[:, -1].tolist())


def format_dataset(dataset: Dataset, label_name: str = LABEL_COLUMN) -> str:
    """Render dataset in the format load_dataset reads"""
    lines = [" ".join(list(dataset.attribute_names) + [label_name])]
    for row, label in zip(dataset.observations, dataset.labels):
        lines.append(" ".join("1" if v else "0" for v in list(row) + [label]))
    return "\n".join(lines) + "\n"


def save_dataset(dataset: Dataset, path: Union[str, Path], label_name: str = LABEL_COLUMN):
    Path(path).write_text(format_dataset(dataset, label_name))
