"""Distance metric and vector primitives."""

from .euclidean import (
    EuclideanDistance, squared_euclidean, paired_squared_euclidean, vector_sum, vector_scale
)

__all__ = [
    'EuclideanDistance',
    'squared_euclidean',
    'paired_squared_euclidean',
    'vector_sum',
    'vector_scale'
]
