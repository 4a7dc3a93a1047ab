"""
Clustering quality scores.

``sum_squared_error`` is the score reported for a run. It adds up the
*square* of each record's squared distance to its centroid, which is not the
textbook SSE. ``inertia`` gives the textbook value (plain sum of squared
distances) for comparison.
"""

from typing import Union
import torch
from torch import Tensor

from ..distances.euclidean import paired_squared_euclidean
from .validation import check_assignments


def _assigned_distances(records: Tensor, centroids: Tensor,
                        assignments: Tensor) -> Tensor:
    """Squared distance from each record to the centroid it is assigned to."""
    assignments = check_assignments(assignments, records.shape[0], centroids.shape[0])
    return paired_squared_euclidean(records, centroids[assignments])


def sum_squared_error(records: Tensor, centroids: Tensor,
                      assignments: Tensor) -> float:
    """Total error of a clustering: sum over records of (squared distance)².

    Args:
        records: (n, d) records
        centroids: (K, d) final centroids
        assignments: (n,) final cluster indices

    Returns:
        Total error as a Python float
    """
    distances = _assigned_distances(records, centroids, assignments)
    return float(torch.sum(distances * distances).item())


def inertia(records: Tensor, centroids: Tensor, assignments: Tensor) -> float:
    """Sum of squared distances from each record to its centroid."""
    return float(_assigned_distances(records, centroids, assignments).sum().item())


def score_context(context, squared: bool = True) -> Union[float, None]:
    """Score a finished run (``None`` if some record was never assigned)."""
    if not context.is_assigned:
        return None
    score = sum_squared_error if squared else inertia
    return score(context.records, context.centroids, context.assignments)
