"""
bankclusters: k-means segmentation of bank customers.

Customers described by age, income and credit score are normalized into
[0, 1], grouped with Lloyd's k-means for a fixed number of iterations, and
written out as a report grouped by cluster.

Example usage:
    >>> from bankclusters import KMeans, load_dataset
    >>>
    >>> dataset = load_dataset('output/normalizedTemp.txt')
    >>> kmeans = KMeans().configure(n_clusters=4, n_iterations=100, seed=58947)
    >>> context = kmeans.run(dataset)
    >>> kmeans.sse_
"""

__version__ = '0.1.0'

# Import order matters: base pulls in utils and distances first
from .base import (
    Dataset,
    RunContext,
    IterationState
)

from .algorithms.kmeans import KMeans

from .exceptions import (
    ClusteringError,
    MalformedInputError,
    InvalidParameterError,
    NotConfiguredError,
    NotFittedError,
    EmptyDatasetError,
    IOUnavailableError
)

from .config import RunConfig, DEFAULT_CONFIG

from .io import (
    load_dataset,
    convert_training_file,
    write_report,
    normalize_age,
    normalize_income,
    normalize_score
)

from .utils.metrics import sum_squared_error, inertia

from .pipeline import cluster_customers, PipelineResult

__all__ = [
    # Algorithm
    'KMeans',

    # Core data structures
    'Dataset',
    'RunContext',
    'IterationState',

    # Errors
    'ClusteringError',
    'MalformedInputError',
    'InvalidParameterError',
    'NotConfiguredError',
    'NotFittedError',
    'EmptyDatasetError',
    'IOUnavailableError',

    # Configuration
    'RunConfig',
    'DEFAULT_CONFIG',

    # I/O
    'load_dataset',
    'convert_training_file',
    'write_report',
    'normalize_age',
    'normalize_income',
    'normalize_score',

    # Scoring
    'sum_squared_error',
    'inertia',

    # Pipeline
    'cluster_customers',
    'PipelineResult',

    # Version
    '__version__'
]
