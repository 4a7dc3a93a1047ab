"""
K-means clustering algorithm.

Lloyd's k-means with a fixed iteration count, assembled from the modular
components.
"""

from typing import Optional, Union
import torch
from torch import Tensor
import numpy as np

from ..base.clustering_base import BaseClusteringAlgorithm
from ..base.interfaces import ClusteringObjective
from ..assignments.hard import HardAssignment
from ..distances.euclidean import EuclideanDistance
from ..initialization.random import RandomInit
from ..initialization.from_previous import FromPreviousInit
from ..updates.mean import MeanUpdater
from ..utils.metrics import sum_squared_error
from ..utils.validation import validate_data
from ..exceptions import InvalidParameterError


class KMeansObjective(ClusteringObjective):
    """K-means objective: sum over records of the squared squared distance."""

    def compute(self, points: Tensor, centroids: Tensor,
                assignments: Tensor) -> Tensor:
        """Compute the total error of the current clustering."""
        return torch.tensor(sum_squared_error(points, centroids, assignments), dtype=torch.float64)

    @property
    def minimize(self) -> bool:
        return True


class KMeans(BaseClusteringAlgorithm):
    """K-means clustering algorithm.

    Partitions records into K clusters. Initial centroids are copies of
    randomly drawn records; then each iteration assigns every record to its
    nearest centroid and moves each centroid to the mean of its records.

    Parameters
    ----------
    n_clusters : int, optional
        Number of clusters
    n_iterations : int, optional
        Exact number of assign/update cycles (no early stopping)
    random_state : int or torch.Generator, optional
        Seed for the initial centroid draws
    init : str or array-like, default='random'
        Initialization method:
        - 'random' : copy randomly drawn records (with replacement)
        - array of shape (n_clusters, n_features) : use as initial centroids
    verbose : int, default=0
        Verbosity level
    device : torch.device, optional
        Device for computation

    Attributes
    ----------
    cluster_centers_ : Tensor of shape (n_clusters, n_features)
        Final centroids
    labels_ : Tensor of shape (n_samples,)
        Final cluster assignments
    sse_ : float
        Total error of the final clustering
    n_iter_ : int
        Number of iterations run

    Examples
    --------
    >>> km = KMeans().configure(n_clusters=4, n_iterations=100, seed=58947)
    >>> context = km.run(records)
    """

    def __init__(self,
                 n_clusters: Optional[int] = None,
                 n_iterations: Optional[int] = None,
                 random_state: Optional[Union[int, torch.Generator]] = None,
                 init: Union[str, Tensor, np.ndarray, list] = 'random',
                 verbose: int = 0,
                 device: Optional[torch.device] = None):
        """Initialize K-means algorithm."""
        super().__init__(
            n_clusters=n_clusters,
            n_iterations=n_iterations,
            random_state=random_state,
            verbose=verbose,
            device=device
        )
        if isinstance(init, str) and init != 'random':
            raise InvalidParameterError(f"Unknown init method: {init}")
        self.init = init

    def _create_components(self) -> None:
        """Create K-means specific components."""
        self.assignment_strategy = HardAssignment(EuclideanDistance())
        self.update_strategy = MeanUpdater()

        if isinstance(self.init, str):
            self.initialization_strategy = RandomInit()
        else:
            self.initialization_strategy = FromPreviousInit(self.init)

        self.objective = KMeansObjective()

    @property
    def sse_(self) -> float:
        """Total error of the final clustering."""
        self._check_fitted()
        context = self.result_
        return sum_squared_error(context.records, context.centroids, context.assignments)

    def score(self, X: Union[Tensor, np.ndarray, list]) -> float:
        """Opposite of the total error of new records against the final centroids."""
        X = validate_data(X, device=self.device)
        return -sum_squared_error(X, self.cluster_centers_, self.predict(X))
