"""
Record file loader.

A record file is a stream of whitespace-delimited tokens: the record count
and attribute count as integers, followed by ``n_records * n_attributes``
real numbers in row-major order.
"""

from pathlib import Path
from typing import List, TextIO, Tuple, Union
import logging
import math
import numpy as np
import torch

from ..base.data_structures import Dataset
from ..exceptions import MalformedInputError, IOUnavailableError

logger = logging.getLogger(__name__)

Source = Union[str, Path, TextIO]


def read_text(source: Source) -> str:
    """Read the whole of ``source``, a path or an open text stream."""
    name = getattr(source, 'name', source)
    try:
        if hasattr(source, 'read'):
            return source.read()

        with open(Path(source), 'r', encoding='utf-8') as fh:
            return fh.read()
    except UnicodeDecodeError as exc:
        raise MalformedInputError(f"{name} is not UTF-8 text: {exc.reason}") from exc
    except OSError as exc:
        raise IOUnavailableError(f"Cannot read {name}: {exc.strerror or exc}") from exc


def parse_int(token: str) -> int:
    """Parse a plain integer token; digit separators such as ``1_0`` are rejected."""
    if '_' in token:
        raise ValueError(f"invalid integer {token!r}")
    return int(token)


def parse_float(token: str) -> float:
    """Parse a plain real-number token; digit separators are rejected."""
    if '_' in token:
        raise ValueError(f"invalid number {token!r}")
    return float(token)


def parse_header(tokens: List[str]) -> Tuple[int, int]:
    """Parse the leading ``n_records n_attributes`` pair."""
    if len(tokens) < 2:
        raise MalformedInputError("Missing record/attribute count header")

    try:
        n_records, n_attributes = parse_int(tokens[0]), parse_int(tokens[1])
    except ValueError as exc:
        raise MalformedInputError(f"Header counts must be integers, got {tokens[:2]}") from exc

    if n_records < 0:
        raise MalformedInputError(f"Record count must be non-negative, got {n_records}")
    if n_attributes <= 0:
        raise MalformedInputError(f"Attribute count must be positive, got {n_attributes}")

    return n_records, n_attributes


def check_token_count(tokens: List[str], n_records: int, n_attributes: int) -> None:
    """Ensure exactly the declared number of value tokens follow the header."""
    expected = n_records * n_attributes
    found = len(tokens) - 2
    if found < expected:
        raise MalformedInputError(
            f"Declared {n_records} records of {n_attributes} attributes "
            f"({expected} values), but only {found} values present"
        )
    if found > expected:
        raise MalformedInputError(
            f"Declared {expected} values, but {found} values present"
        )


def _parse_value(token: str, position: int) -> float:
    try:
        value = parse_float(token)
    except ValueError as exc:
        raise MalformedInputError(f"Non-numeric value {token!r} at position {position}") from exc
    if not math.isfinite(value):
        raise MalformedInputError(f"Non-finite value {token!r} at position {position}")
    return value


def parse_dataset(text: str) -> Dataset:
    """Parse record-file text into a Dataset.

    Raises:
        MalformedInputError: If the header is invalid, a value is not a
            finite number, or the value count differs from the header
    """
    tokens = text.split()
    n_records, n_attributes = parse_header(tokens)
    check_token_count(tokens, n_records, n_attributes)

    values = [_parse_value(token, i) for i, token in enumerate(tokens[2:], start=2)]
    records = np.array(values, dtype=np.float64).reshape(n_records, n_attributes)

    return Dataset(torch.from_numpy(records))


def load_dataset(source: Source) -> Dataset:
    """Load a Dataset from a record file path or open text stream.

    Raises:
        IOUnavailableError: If the file cannot be opened
        MalformedInputError: If its contents are invalid
    """
    dataset = parse_dataset(read_text(source))
    logger.info("Loaded %d records with %d attributes from %s",
                dataset.n_records, dataset.n_attributes, getattr(source, 'name', source))
    return dataset
