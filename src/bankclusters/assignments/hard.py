"""
Hard assignment strategy.

Assigns each record to its nearest centroid.
"""

from typing import Optional
import torch
from torch import Tensor

from ..base.interfaces import AssignmentStrategy, DistanceMetric
from ..distances.euclidean import EuclideanDistance


class HardAssignment(AssignmentStrategy):
    """Hard (discrete) assignment to the nearest centroid.

    Ties go to the lowest cluster index: ``torch.argmin`` returns the first
    minimal entry, which matches scanning centroids in increasing order and
    only moving on a strictly smaller distance.
    """

    def __init__(self, metric: Optional[DistanceMetric] = None):
        """
        Args:
            metric: Distance metric (squared Euclidean when None)
        """
        super().__init__()
        self.metric = metric if metric is not None else EuclideanDistance()

    def compute_assignments(self, points: Tensor, centroids: Tensor,
                            **kwargs) -> Tensor:
        """Assign each record to its nearest centroid.

        Args:
            points: (n, d) records
            centroids: (K, d) centroids
            **kwargs: Ignored

        Returns:
            (n,) tensor of cluster indices
        """
        if points.shape[0] == 0:
            return torch.empty(0, dtype=torch.long, device=points.device)

        distances = self.metric.compute(points, centroids)

        return torch.argmin(distances, dim=1)
