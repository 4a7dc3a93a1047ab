"""
Base class for fixed-iteration centroid clustering.

Provides the algorithmic skeleton: configure, initialize, then alternate
assignment and update steps for exactly the configured number of passes.
"""

from abc import abstractmethod
from typing import Optional, Dict, Any, Union
import logging
import time
import torch
from torch import Tensor
import numpy as np

from .interfaces import (
    AssignmentStrategy, ParameterUpdater,
    InitializationStrategy, ClusteringObjective
)
from .data_structures import Dataset, RunContext, IterationState
from ..exceptions import (
    NotConfiguredError, NotFittedError, EmptyDatasetError, InvalidParameterError
)
from ..utils.validation import (
    check_n_clusters, check_n_iterations, check_random_state, validate_data
)

logger = logging.getLogger(__name__)


class BaseClusteringAlgorithm:
    """Base class implementing the fixed-iteration alternating loop.

    Subclasses need to specify:
    - Assignment strategy
    - Parameter update strategy
    - Initialization strategy
    - Objective function

    The loop never checks for convergence. ``run`` always performs exactly
    ``n_iterations`` assign/update cycles.
    """

    def __init__(self,
                 n_clusters: Optional[int] = None,
                 n_iterations: Optional[int] = None,
                 random_state: Optional[Union[int, torch.Generator]] = None,
                 verbose: int = 0,
                 device: Optional[torch.device] = None):
        """
        Args:
            n_clusters: Number of clusters K
            n_iterations: Exact number of assign/update cycles
            random_state: Seed for the initialization generator
            verbose: Verbosity level (0=silent, 1=progress, 2=detailed)
            device: Torch device (CPU when None)

        The algorithm is configured immediately when all three of
        ``n_clusters``, ``n_iterations`` and ``random_state`` are given;
        otherwise ``configure`` must be called before ``run``.
        """
        self.verbose = verbose
        self.device = device if device is not None else torch.device('cpu')

        self.n_clusters: Optional[int] = None
        self.n_iterations: Optional[int] = None
        self.random_state: Optional[Union[int, torch.Generator]] = None
        self._configured = False

        given = [p is not None for p in (n_clusters, n_iterations, random_state)]
        if all(given):
            self.configure(n_clusters, n_iterations, random_state)
        elif any(given):
            raise InvalidParameterError(
                "n_clusters, n_iterations and random_state must be given together "
                "or left for configure()"
            )

        # These will be set by subclasses
        self.assignment_strategy: Optional[AssignmentStrategy] = None
        self.update_strategy: Optional[ParameterUpdater] = None
        self.initialization_strategy: Optional[InitializationStrategy] = None
        self.objective: Optional[ClusteringObjective] = None

        # Result of the last run
        self.result_: Optional[RunContext] = None

    @abstractmethod
    def _create_components(self) -> None:
        """Create algorithm-specific components.

        Subclasses must implement this to instantiate:
        - self.assignment_strategy
        - self.update_strategy
        - self.initialization_strategy
        - self.objective
        """
        pass

    def configure(self, n_clusters: int, n_iterations: int,
                  seed: Union[int, torch.Generator]) -> 'BaseClusteringAlgorithm':
        """Set run parameters.

        Args:
            n_clusters: Positive number of clusters
            n_iterations: Non-negative number of assign/update cycles
            seed: Seed for the initialization generator

        Returns:
            Self

        Raises:
            InvalidParameterError: If any parameter is out of range
        """
        self.n_clusters = check_n_clusters(n_clusters)
        self.n_iterations = check_n_iterations(n_iterations)
        check_random_state(seed)
        self.random_state = seed
        self._configured = True
        return self

    @property
    def is_configured(self) -> bool:
        return self._configured

    def run(self, dataset: Union[Dataset, Tensor, np.ndarray, list]) -> RunContext:
        """Cluster ``dataset`` and return the finished run context.

        Integer seeds are turned into a fresh generator on every call, so the
        same dataset and seed always replay the same run.

        Raises:
            NotConfiguredError: If ``configure`` was never called
            EmptyDatasetError: If the dataset has no records
        """
        if not self._configured:
            raise NotConfiguredError("configure() must be called before run()")

        dataset = self._validate_dataset(dataset)
        if dataset.n_records == 0:
            raise EmptyDatasetError("Cannot cluster an empty dataset")

        self._create_components()
        generator = check_random_state(self.random_state)

        start_time = time.time()
        context = self._initialize(dataset, generator)

        for iteration in range(self.n_iterations):
            self._step(context, iteration)

        total_time = time.time() - start_time
        logger.info("Clustered %d records into %d clusters in %d iterations (%.3fs)",
                    dataset.n_records, self.n_clusters, context.n_iterations, total_time)

        self.result_ = context
        return context

    def _initialize(self, dataset: Dataset, generator: torch.Generator) -> RunContext:
        """Draw the initial centroids and build an unassigned context."""
        logger.debug("Initializing %d clusters...", self.n_clusters)

        centroids = self.initialization_strategy.initialize(
            dataset.records, self.n_clusters, generator=generator
        )
        seed_indices = getattr(self.initialization_strategy, 'indices_', None)
        if seed_indices is not None:
            logger.debug("Initial centroids copied from records %s", seed_indices)

        return RunContext.start(dataset, centroids, seed_indices=seed_indices)

    def _step(self, context: RunContext, iteration: int) -> None:
        """Run one assign/update cycle on ``context`` in place."""
        iter_start_time = time.time()
        points = context.records

        # Assignment step
        assignments = self.assignment_strategy.compute_assignments(
            points, context.centroids
        )
        n_changed = int((assignments != context.assignments).sum().item())
        context.assignments.copy_(assignments)

        # Update step
        self.update_strategy.update(points, context.assignments, context.centroids)
        n_empty = int((context.cluster_sizes() == 0).sum().item())

        objective_value = self.objective.compute(
            points, context.centroids, context.assignments
        )

        context.history.append(IterationState(
            iteration=iteration,
            n_changed=n_changed,
            n_empty=n_empty,
            objective_value=float(objective_value),
        ))
        context.n_iterations = iteration + 1

        # Logging
        iter_time = time.time() - iter_start_time
        level = logging.DEBUG
        if self.verbose >= 2 or (self.verbose >= 1 and iteration % 10 == 0):
            level = logging.INFO
        logger.log(level, "Iteration %3d: objective = %.6f, moved = %d, empty = %d (%.3fs)",
                   iteration, float(objective_value), n_changed, n_empty, iter_time)

    def _validate_dataset(self, data: Union[Dataset, Tensor, np.ndarray, list]) -> Dataset:
        """Validate and move input records to the working device."""
        dataset = Dataset.from_values(data)
        if dataset.records.device != self.device:
            dataset = Dataset(dataset.records.to(self.device))
        return dataset

    def fit(self, X: Union[Dataset, Tensor, np.ndarray, list],
            y: Optional[Tensor] = None) -> 'BaseClusteringAlgorithm':
        """Run the clustering and keep the result (sklearn-style).

        Args:
            X: (n, d) records
            y: Ignored

        Returns:
            Self
        """
        self.run(X)
        return self

    def fit_predict(self, X: Union[Dataset, Tensor, np.ndarray, list],
                    y: Optional[Tensor] = None) -> Tensor:
        """Run the clustering and return the final assignments."""
        return self.run(X).assignments.clone()

    def predict(self, X: Union[Tensor, np.ndarray, list]) -> Tensor:
        """Assign new records to the nearest final centroid.

        Args:
            X: (n, d) records

        Returns:
            (n,) tensor of cluster indices
        """
        self._check_fitted()
        X = validate_data(X, device=self.device, ensure_min_samples=0)
        return self.assignment_strategy.compute_assignments(X, self.result_.centroids)

    def _check_fitted(self) -> None:
        if self.result_ is None:
            raise NotFittedError("Model must be run before using its results")

    @property
    def cluster_centers_(self) -> Tensor:
        """Final centroids of the last run."""
        self._check_fitted()
        return self.result_.centroids

    @property
    def labels_(self) -> Tensor:
        """Final assignments of the last run."""
        self._check_fitted()
        return self.result_.assignments

    @property
    def n_iter_(self) -> int:
        self._check_fitted()
        return self.result_.n_iterations

    @property
    def history_(self) -> list:
        self._check_fitted()
        return self.result_.history

    def get_params(self, deep: bool = True) -> Dict[str, Any]:
        """Get parameters (sklearn compatibility)."""
        return {
            'n_clusters': self.n_clusters,
            'n_iterations': self.n_iterations,
            'random_state': self.random_state,
            'verbose': self.verbose,
            'device': self.device
        }
