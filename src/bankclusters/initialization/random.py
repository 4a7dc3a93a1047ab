"""
Random initialization strategy.

Copies randomly drawn records as the initial centroids.
"""

from typing import List, Optional
import warnings
import torch
from torch import Tensor

from ..base.interfaces import InitializationStrategy


class RandomInit(InitializationStrategy):
    """Random initialization by drawing records from the dataset.

    One record index is drawn uniformly per cluster, in cluster order, from
    the supplied generator. Draws are independent and may repeat, so two
    clusters can start from the same centroid. Such duplicates are kept.

    Attributes:
        indices_: Record indices drawn by the last call to ``initialize``
    """

    def __init__(self):
        self.indices_: Optional[List[int]] = None

    def initialize(self, points: Tensor, n_clusters: int,
                   generator: Optional[torch.Generator] = None,
                   **kwargs) -> Tensor:
        """Initialize centroids with randomly drawn records.

        Args:
            points: (n, d) records
            n_clusters: Number of clusters
            generator: Seeded generator used for every draw

        Returns:
            (K, d) tensor of initial centroids
        """
        n_points = points.shape[0]

        if n_points == 0:
            raise ValueError("Cannot draw initial centroids from zero records")

        if n_clusters > n_points:
            warnings.warn(f"{n_clusters} clusters requested for {n_points} records; "
                          "some initial centroids will be duplicates")

        # Sample with replacement
        indices = torch.randint(n_points, (n_clusters,), generator=generator)
        self.indices_ = indices.tolist()

        return points[indices.to(points.device)].clone()
