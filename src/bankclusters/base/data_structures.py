"""
Core data structures for the clustering engine.

The engine keeps no records, centroids or assignments on itself. Everything a
run needs lives in a :class:`RunContext` that is created when the run starts
and handed back to the caller when it ends.
"""

from typing import Optional, List, Union
import torch
from torch import Tensor
import numpy as np
from dataclasses import dataclass, field

from ..utils.validation import validate_data


@dataclass(frozen=True)
class Dataset:
    """An ordered table of records, all of the same length.

    Records are stored as one (n_records, n_attributes) float64 tensor. The
    row index of a record is its identity.
    """

    records: Tensor

    def __post_init__(self):
        """Convert and validate the record matrix."""
        records = validate_data(self.records, ensure_min_samples=0)
        object.__setattr__(self, 'records', records)

    @classmethod
    def from_values(cls, values: Union[Tensor, np.ndarray, list]) -> 'Dataset':
        """Build a dataset from any 2D array-like of numbers."""
        return values if isinstance(values, Dataset) else cls(values)

    @property
    def n_records(self) -> int:
        return self.records.shape[0]

    @property
    def n_attributes(self) -> int:
        return self.records.shape[1]

    def __len__(self) -> int:
        return self.n_records

    def __repr__(self) -> str:
        return f"Dataset(n_records={self.n_records}, n_attributes={self.n_attributes})"


@dataclass
class IterationState:
    """Diagnostics for one assign/update cycle.

    Recorded for inspection only; the engine never stops early on these.
    """
    iteration: int
    n_changed: int
    n_empty: int
    objective_value: float


@dataclass
class RunContext:
    """Complete state of one clustering run.

    ``centroids`` and ``assignments`` are mutated in place by the engine while
    the run is in progress and are read-only afterwards.
    """
    dataset: Dataset
    centroids: Tensor      # (K, d)
    assignments: Tensor    # (n,) cluster indices, -1 while unassigned
    n_clusters: int
    n_iterations: int = 0
    seed_indices: Optional[List[int]] = None
    history: List[IterationState] = field(default_factory=list)

    @classmethod
    def start(cls, dataset: Dataset, centroids: Tensor,
              seed_indices: Optional[List[int]] = None) -> 'RunContext':
        """Create a context with every record unassigned."""
        assignments = torch.full((dataset.n_records,), -1, dtype=torch.long,
                                 device=dataset.records.device)
        return cls(
            dataset=dataset,
            centroids=centroids,
            assignments=assignments,
            n_clusters=centroids.shape[0],
            seed_indices=seed_indices,
        )

    @property
    def records(self) -> Tensor:
        return self.dataset.records

    @property
    def is_assigned(self) -> bool:
        """Whether every record has been through at least one assign step."""
        return bool((self.assignments >= 0).all())

    @property
    def labels(self) -> Tensor:
        """1-based cluster labels as written to reports (0 means unassigned)."""
        return self.assignments + 1

    def cluster_sizes(self) -> Tensor:
        """Number of records currently assigned to each cluster."""
        assigned = self.assignments[self.assignments >= 0]
        return torch.bincount(assigned, minlength=self.n_clusters)

    def cluster_members(self, cluster_idx: int) -> Tensor:
        """Indices of records assigned to ``cluster_idx``, in record order."""
        return torch.where(self.assignments == cluster_idx)[0]

    @property
    def final_objective(self) -> Optional[float]:
        if not self.history:
            return None
        return self.history[-1].objective_value
