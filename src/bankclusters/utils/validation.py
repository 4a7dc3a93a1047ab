"""
Input validation utilities.

Checks run parameters and converts record matrices to tensors before they
reach the clustering engine.
"""

from typing import Optional, Union
import numbers
import torch
from torch import Tensor
import numpy as np

from ..exceptions import MalformedInputError, InvalidParameterError


def validate_data(X: Union[Tensor, np.ndarray, list],
                  dtype: torch.dtype = torch.float64,
                  device: Optional[torch.device] = None,
                  ensure_finite: bool = True,
                  ensure_min_samples: int = 1,
                  copy: bool = True) -> Tensor:
    """Validate and convert a record matrix to a 2D tensor.

    Args:
        X: Input data (tensor, numpy array, or nested list)
        dtype: Target data type
        device: Target device
        ensure_finite: Whether to check for inf/nan
        ensure_min_samples: Minimum number of records required
        copy: Whether to force a copy, so later changes to ``X`` do not leak in

    Returns:
        Validated (n, d) tensor

    Raises:
        MalformedInputError: If the data is not a finite 2D matrix
    """
    try:
        if isinstance(X, Tensor):
            X = X.to(dtype=dtype, device=device, copy=copy)
        elif isinstance(X, np.ndarray):
            X = torch.from_numpy(np.array(X, dtype=np.float64)).to(dtype=dtype, device=device)
        elif isinstance(X, (list, tuple)):
            X = torch.tensor(X, dtype=dtype, device=device)
        else:
            raise MalformedInputError(f"Cannot convert {type(X).__name__} to a record matrix")
    except (TypeError, ValueError) as exc:
        if isinstance(exc, MalformedInputError):
            raise
        raise MalformedInputError(f"Records are not a rectangular numeric matrix: {exc}") from exc

    if X.dim() == 1 and X.numel() == 0:
        X = X.reshape(0, 1)
    if X.dim() != 2:
        raise MalformedInputError(f"Expected 2D records, got {X.dim()}D")

    n_samples, n_features = X.shape
    if n_samples < ensure_min_samples:
        raise MalformedInputError(f"Found {n_samples} records, but need at least "
                                  f"{ensure_min_samples}")
    if n_features < 1:
        raise MalformedInputError("Records must have at least one attribute")

    if ensure_finite and not torch.isfinite(X).all():
        raise MalformedInputError("Records contain NaN or infinite values")

    return X


def _is_integer(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def check_n_clusters(n_clusters: int) -> int:
    """Validate the number of clusters.

    Raises:
        InvalidParameterError: If not a positive integer
    """
    if not _is_integer(n_clusters):
        raise InvalidParameterError(f"n_clusters must be int, got {type(n_clusters).__name__}")

    if n_clusters <= 0:
        raise InvalidParameterError(f"n_clusters must be positive, got {n_clusters}")

    return int(n_clusters)


def check_n_iterations(n_iterations: int) -> int:
    """Validate the number of iterations.

    Raises:
        InvalidParameterError: If not a non-negative integer
    """
    if not _is_integer(n_iterations):
        raise InvalidParameterError(f"n_iterations must be int, got {type(n_iterations).__name__}")

    if n_iterations < 0:
        raise InvalidParameterError(f"n_iterations must be non-negative, got {n_iterations}")

    return int(n_iterations)


def check_random_state(random_state: Union[int, torch.Generator]) -> torch.Generator:
    """Create a generator from a seed.

    A fresh generator is returned for integer seeds, so two calls with the
    same seed yield identical streams.

    Args:
        random_state: Seed or generator

    Returns:
        Generator
    """
    if _is_integer(random_state):
        generator = torch.Generator()
        generator.manual_seed(int(random_state))
        return generator
    elif isinstance(random_state, torch.Generator):
        return random_state
    else:
        raise InvalidParameterError(
            f"seed must be int or Generator, got {type(random_state).__name__}"
        )


def check_assignments(assignments: Tensor, n_points: int, n_clusters: int) -> Tensor:
    """Validate a complete hard assignment vector.

    Raises:
        InvalidParameterError: If lengths differ, a record is unassigned, or
            an index is out of range
    """
    if assignments.dim() != 1 or assignments.shape[0] != n_points:
        raise InvalidParameterError(
            f"Expected {n_points} assignments, got shape {tuple(assignments.shape)}"
        )
    if n_points == 0:
        return assignments.long()

    if assignments.min() < 0:
        n_unassigned = int((assignments < 0).sum())
        raise InvalidParameterError(f"{n_unassigned} records are unassigned")
    if assignments.max() >= n_clusters:
        raise InvalidParameterError(
            f"Assignment index {int(assignments.max())} out of range for {n_clusters} clusters"
        )
    return assignments.long()
