"""
Normalization of raw customer attributes.

Each attribute is mapped by a fixed affine transform ``(value - offset) / span``
chosen so that the expected domain lands in [0, 1]:

- age: 20 to 100 years
- income: 20k to 100k
- credit score: 500 to 900

Values outside the expected domain simply land outside [0, 1].
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence, Union
import logging

from .loader import Source, read_text, parse_header, parse_int, check_token_count
from ..exceptions import MalformedInputError, IOUnavailableError

logger = logging.getLogger(__name__)


def normalize(value: float, offset: float, span: float) -> float:
    """Map ``value`` with the affine transform ``(value - offset) / span``."""
    return (value - offset) / span


@dataclass(frozen=True)
class AttributeTransform:
    """Fixed affine normalization for one attribute."""

    name: str
    offset: float
    span: float

    def apply(self, value: float) -> float:
        return normalize(value, self.offset, self.span)


AGE = AttributeTransform('age', 20, 80)
INCOME = AttributeTransform('income', 20, 80)
CREDIT_SCORE = AttributeTransform('credit_score', 500, 400)

CUSTOMER_TRANSFORMS = (AGE, INCOME, CREDIT_SCORE)


def normalize_age(age: float) -> float:
    return AGE.apply(age)


def normalize_income(income: float) -> float:
    return INCOME.apply(income)


def normalize_score(score: float) -> float:
    return CREDIT_SCORE.apply(score)


def normalize_records(text: str,
                      transforms: Sequence[AttributeTransform] = CUSTOMER_TRANSFORMS
                      ) -> List[List[float]]:
    """Parse raw record text of integer attributes and normalize every row.

    Raises:
        MalformedInputError: If the header does not match ``transforms``, a
            value is not an integer, or the value count differs from the header
    """
    tokens = text.split()
    n_records, n_attributes = parse_header(tokens)
    if n_attributes != len(transforms):
        raise MalformedInputError(
            f"Expected {len(transforms)} raw attributes "
            f"({', '.join(t.name for t in transforms)}), header declares {n_attributes}"
        )
    check_token_count(tokens, n_records, n_attributes)

    rows = []
    values = iter(tokens[2:])
    for i in range(n_records):
        row = []
        for transform in transforms:
            token = next(values)
            try:
                raw = parse_int(token)
            except ValueError as exc:
                raise MalformedInputError(
                    f"Record {i}: {transform.name} must be an integer, got {token!r}"
                ) from exc
            row.append(transform.apply(raw))
        rows.append(row)

    return rows


def convert_training_file(input_file: Source, output_file: Union[str, Path],
                          transforms: Sequence[AttributeTransform] = CUSTOMER_TRANSFORMS) -> Path:
    """Write a normalized record file from a raw one.

    The output repeats the header and then holds one line of normalized
    values per record, ready for :func:`bankclusters.io.loader.load_dataset`.

    Returns:
        Path of the written file
    """
    rows = normalize_records(read_text(input_file), transforms)

    output_file = Path(output_file)
    try:
        with open(output_file, 'w', encoding='utf-8') as fh:
            fh.write(f"{len(rows)} {len(transforms)}\n")
            for row in rows:
                fh.write(" ".join(repr(value) for value in row) + "\n")
    except OSError as exc:
        raise IOUnavailableError(f"Cannot write {output_file}: {exc.strerror or exc}") from exc

    logger.info("Normalized %d records into %s", len(rows), output_file)
    return output_file
