"""Utility functions for the clustering engine."""

from .metrics import (
    sum_squared_error,
    inertia,
    score_context
)

from .validation import (
    validate_data,
    check_n_clusters,
    check_n_iterations,
    check_random_state,
    check_assignments
)

__all__ = [
    # Metrics
    'sum_squared_error',
    'inertia',
    'score_context',

    # Validation
    'validate_data',
    'check_n_clusters',
    'check_n_iterations',
    'check_random_state',
    'check_assignments'
]
