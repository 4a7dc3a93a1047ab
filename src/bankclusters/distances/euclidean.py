"""
Squared Euclidean distance and the vector primitives used by k-means.
"""

import torch
from torch import Tensor

from ..base.interfaces import DistanceMetric


def squared_euclidean(u: Tensor, v: Tensor) -> Tensor:
    """Sum of squared per-attribute differences, with no square root.

    Two (d,) vectors give a scalar. An (n, d) matrix against a (K, d) matrix
    gives the (n, K) matrix of pairwise distances.
    """
    if u.dim() == 2 and v.dim() == 2:
        diff = u.unsqueeze(1) - v.unsqueeze(0)
        return torch.sum(diff * diff, dim=2)

    diff = u - v
    return torch.sum(diff * diff, dim=-1)


def paired_squared_euclidean(u: Tensor, v: Tensor) -> Tensor:
    """Row-by-row squared distance between two (n, d) matrices, giving (n,)."""
    if u.shape != v.shape:
        raise ValueError(f"Cannot pair rows of shapes {tuple(u.shape)} and {tuple(v.shape)}")

    diff = u - v
    return torch.sum(diff * diff, dim=-1)


def vector_sum(u: Tensor, v: Tensor) -> Tensor:
    """Attribute-wise sum of two records."""
    return u + v


def vector_scale(u: Tensor, k: float) -> Tensor:
    """Record with every attribute multiplied by ``k``."""
    return u * k


class EuclideanDistance(DistanceMetric):
    """Squared Euclidean distance metric.

    Computes ||x - μ||² for every record x and centroid μ. Differences are
    formed explicitly rather than through the ||x||² + ||μ||² - 2<x, μ>
    expansion so that equal distances compare equal.
    """

    def compute(self, points: Tensor, centroids: Tensor, **kwargs) -> Tensor:
        """Compute squared distances from points to centroids.

        Args:
            points: (n, d) tensor of records
            centroids: (K, d) tensor of centroids

        Returns:
            (n, K) tensor of squared distances
        """
        if points.shape[1] != centroids.shape[1]:
            raise ValueError(f"Records have dimension {points.shape[1]}, "
                             f"centroids have dimension {centroids.shape[1]}")

        return squared_euclidean(points, centroids)
