"""
Initialization from given centroids.

Useful for warm starts or when the starting centroids must be fixed.
"""

from typing import Optional, Union
import numpy as np
import torch
from torch import Tensor

from ..base.interfaces import InitializationStrategy
from ..exceptions import InvalidParameterError


class FromPreviousInit(InitializationStrategy):
    """Initialize from explicit starting centroids.

    Accepts a (n_clusters, dimension) tensor, array or nested list.
    """

    def __init__(self, initial_centroids: Union[Tensor, np.ndarray, list]):
        """
        Args:
            initial_centroids: Centroids to start from
        """
        if isinstance(initial_centroids, Tensor):
            self.initial_centroids = initial_centroids.detach().to(torch.float64)
        else:
            self.initial_centroids = torch.as_tensor(np.asarray(initial_centroids, dtype=np.float64))

    def initialize(self, points: Tensor, n_clusters: int,
                   generator: Optional[torch.Generator] = None,
                   **kwargs) -> Tensor:
        """Return a copy of the starting centroids.

        Args:
            points: (n, d) records (used for validation)
            n_clusters: Expected number of clusters
            generator: Ignored

        Returns:
            (K, d) tensor of initial centroids
        """
        centroids = self.initial_centroids.to(device=points.device, dtype=points.dtype)

        if centroids.dim() != 2:
            raise InvalidParameterError(f"Initial centroids must be 2D, got {centroids.dim()}D")
        if centroids.shape[0] != n_clusters:
            raise InvalidParameterError(f"Initial centroids have {centroids.shape[0]} clusters, "
                                        f"but n_clusters={n_clusters}")
        if centroids.shape[1] != points.shape[1]:
            raise InvalidParameterError(f"Initial centroids have dimension {centroids.shape[1]}, "
                                        f"but records have dimension {points.shape[1]}")

        return centroids.clone()
