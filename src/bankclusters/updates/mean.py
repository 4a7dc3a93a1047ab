"""
Mean update strategy for centroid-based clustering.
"""

from typing import Optional
import torch
from torch import Tensor

from ..base.interfaces import ParameterUpdater
from ..distances.euclidean import vector_scale


class MeanUpdater(ParameterUpdater):
    """Moves every non-empty cluster's centroid to the mean of its records.

    A cluster with no records keeps its previous centroid. It is neither
    reset nor re-seeded, so it may stay empty for the rest of the run.
    """

    def update(self, points: Tensor, assignments: Tensor,
               centroids: Tensor, **kwargs) -> Tensor:
        """Update centroids in place.

        Args:
            points: (n, d) records
            assignments: (n,) cluster indices from the latest assign step
            centroids: (K, d) centroids, overwritten for non-empty clusters

        Returns:
            The same centroid tensor
        """
        n_clusters = centroids.shape[0]

        cluster_sum = torch.zeros_like(centroids)
        cluster_sum.index_add_(0, assignments, points)
        cluster_size = torch.bincount(assignments, minlength=n_clusters)

        for k in range(n_clusters):
            if cluster_size[k] > 0:
                centroids[k] = vector_scale(cluster_sum[k], 1.0 / cluster_size[k].item())

        return centroids
