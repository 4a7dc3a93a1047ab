"""Base classes and interfaces for the clustering engine."""

from .interfaces import (
    AssignmentStrategy,
    ParameterUpdater,
    DistanceMetric,
    InitializationStrategy,
    ClusteringObjective
)

from .data_structures import (
    Dataset,
    RunContext,
    IterationState
)

from .clustering_base import BaseClusteringAlgorithm

__all__ = [
    # Interfaces
    'AssignmentStrategy',
    'ParameterUpdater',
    'DistanceMetric',
    'InitializationStrategy',
    'ClusteringObjective',

    # Data structures
    'Dataset',
    'RunContext',
    'IterationState',

    # Base algorithm
    'BaseClusteringAlgorithm'
]
