"""
Core interfaces for the clustering engine.

The engine is assembled from small, replaceable components. Each one works on
plain tensors: ``points`` is an (n, d) record matrix, ``centroids`` is a
(K, d) matrix and ``assignments`` is an (n,) vector of cluster indices.
"""

from abc import ABC, abstractmethod
from typing import Optional
import torch
from torch import Tensor


class DistanceMetric(ABC):
    """Abstract base class for record-to-centroid distance computations."""

    @abstractmethod
    def compute(self, points: Tensor, centroids: Tensor, **kwargs) -> Tensor:
        """Compute distances from every point to every centroid.

        Args:
            points: (n, d) tensor of records
            centroids: (K, d) tensor of centroids
            **kwargs: Metric-specific parameters

        Returns:
            (n, K) tensor of distances
        """
        pass


class InitializationStrategy(ABC):
    """Abstract base class for centroid initialization strategies."""

    @abstractmethod
    def initialize(self, points: Tensor, n_clusters: int,
                   generator: Optional[torch.Generator] = None,
                   **kwargs) -> Tensor:
        """Produce the starting centroids.

        Args:
            points: (n, d) tensor of records
            n_clusters: Number of centroids to create
            generator: Seeded random generator (strategies that draw randomly
                must use it and nothing else)

        Returns:
            (K, d) tensor of initial centroids
        """
        pass


class AssignmentStrategy(ABC):
    """Abstract base class for record-to-cluster assignment strategies."""

    @abstractmethod
    def compute_assignments(self, points: Tensor, centroids: Tensor,
                            **kwargs) -> Tensor:
        """Compute cluster assignments for points.

        Args:
            points: (n, d) tensor of records
            centroids: (K, d) tensor of centroids

        Returns:
            (n,) int64 tensor of cluster indices
        """
        pass


class ParameterUpdater(ABC):
    """Abstract base class for centroid update strategies."""

    @abstractmethod
    def update(self, points: Tensor, assignments: Tensor,
               centroids: Tensor, **kwargs) -> Tensor:
        """Recompute centroids from the current assignments.

        Args:
            points: (n, d) tensor of records
            assignments: (n,) tensor of cluster indices
            centroids: (K, d) centroids from the previous step, updated in place

        Returns:
            The updated (K, d) centroid tensor
        """
        pass


class ClusteringObjective(ABC):
    """Abstract base class for clustering objective functions."""

    @abstractmethod
    def compute(self, points: Tensor, centroids: Tensor,
                assignments: Tensor) -> Tensor:
        """Compute objective function value.

        Args:
            points: (n, d) tensor of records
            centroids: (K, d) tensor of centroids
            assignments: (n,) tensor of cluster indices

        Returns:
            Scalar objective value
        """
        pass

    @property
    @abstractmethod
    def minimize(self) -> bool:
        """Whether to minimize (True) or maximize (False) this objective."""
        pass
