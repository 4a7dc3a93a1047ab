"""Reading record files, normalizing raw attributes and writing reports."""

from .loader import load_dataset, parse_dataset
from .normalize import (
    AttributeTransform,
    AGE,
    INCOME,
    CREDIT_SCORE,
    CUSTOMER_TRANSFORMS,
    normalize,
    normalize_age,
    normalize_income,
    normalize_score,
    normalize_records,
    convert_training_file
)
from .report import format_report, write_report, write_context_report

__all__ = [
    'load_dataset',
    'parse_dataset',
    'AttributeTransform',
    'AGE',
    'INCOME',
    'CREDIT_SCORE',
    'CUSTOMER_TRANSFORMS',
    'normalize',
    'normalize_age',
    'normalize_income',
    'normalize_score',
    'normalize_records',
    'convert_training_file',
    'format_report',
    'write_report',
    'write_context_report'
]
