"""
Clustering engine behavior.

Covers:
- configure/run error handling
- fixed iteration count with no early exit
- determinism under a fixed seed
- the four-point worked example
- empty clusters keeping their centroid
"""

from __future__ import annotations

import logging

import numpy as np
import pytest
import torch

from bankclusters import KMeans, Dataset
from bankclusters.exceptions import (
    InvalidParameterError, NotConfiguredError, NotFittedError, EmptyDatasetError,
    ClusteringError,
)
from bankclusters.distances.euclidean import squared_euclidean
from data_gen import make_blobs


# ----------------------------
# configure / run preconditions
# ----------------------------

@pytest.mark.parametrize("n_clusters,n_iterations,seed", [
    (0, 10, 1),
    (-3, 10, 1),
    (2, -1, 1),
    (2.5, 10, 1),
    (True, 10, 1),
    (2, 10, "seed"),
])
def test_configure_rejects_bad_parameters(n_clusters, n_iterations, seed):
    with pytest.raises(InvalidParameterError):
        KMeans().configure(n_clusters, n_iterations, seed)


def test_configure_returns_self_and_marks_configured():
    km = KMeans()
    assert not km.is_configured
    assert km.configure(3, 0, 1) is km
    assert km.is_configured


def test_constructor_arguments_configure():
    assert KMeans(n_clusters=2, n_iterations=3, random_state=5).is_configured


@pytest.mark.parametrize("kwargs", [
    {"n_clusters": 4},
    {"n_iterations": 10},
    {"random_state": 3},
    {"n_clusters": 4, "n_iterations": 10},
])
def test_partial_constructor_arguments_rejected(kwargs):
    with pytest.raises(InvalidParameterError):
        KMeans(**kwargs)


def test_run_before_configure_fails(four_points):
    with pytest.raises(NotConfiguredError):
        KMeans().run(four_points)


@pytest.mark.parametrize("empty", [torch.empty(0, 3), [], np.zeros((0, 2))])
def test_run_on_empty_dataset_fails(empty):
    with pytest.raises(EmptyDatasetError):
        KMeans().configure(2, 5, 1).run(empty)


def test_errors_share_base_class():
    assert issubclass(EmptyDatasetError, ClusteringError)
    assert issubclass(InvalidParameterError, ValueError)
    assert issubclass(NotConfiguredError, RuntimeError)


def test_results_before_run_fail():
    km = KMeans().configure(2, 5, 1)
    with pytest.raises(NotFittedError):
        km.predict([[1.0]])
    with pytest.raises(NotFittedError):
        _ = km.cluster_centers_


# ----------------------------
# algorithm
# ----------------------------

def test_four_point_example(four_points):
    km = KMeans(init=[[0.0], [10.0]]).configure(2, 5, 0)

    context = km.run(four_points)

    assert context.assignments.tolist() == [0, 0, 1, 1]
    assert context.centroids[0].item() == pytest.approx(0.05)
    assert context.centroids[1].item() == pytest.approx(10.05)
    # each record is 0.05 from its centroid: 4 * ((0.05 ** 2) ** 2)
    assert km.sse_ == pytest.approx(4 * (0.05 ** 2) ** 2, rel=1e-9)


def test_four_point_example_from_seed(four_points):
    # seed 25 starts from records 0 and 2, one in each pair
    km = KMeans().configure(2, 5, 25)

    context = km.run(four_points)

    assert context.seed_indices == [0, 2]
    assert context.assignments.tolist() == [0, 0, 1, 1]
    assert context.centroids.squeeze(1).tolist() == pytest.approx([0.05, 10.05])
    assert km.sse_ == pytest.approx(4 * (0.05 ** 2) ** 2, rel=1e-9)


def test_runs_exactly_the_configured_iterations(four_points):
    # assignments are stable after the first pass, the loop must keep going
    context = KMeans(init=[[0.0], [10.0]]).configure(2, 7, 0).run(four_points)

    assert context.n_iterations == 7
    assert [state.iteration for state in context.history] == list(range(7))
    assert context.history[0].n_changed == 4
    assert all(state.n_changed == 0 for state in context.history[1:])


def test_zero_iterations_leaves_records_unassigned(four_points):
    km = KMeans().configure(3, 0, 11)
    context = km.run(four_points)

    assert context.n_iterations == 0
    assert context.history == []
    assert torch.all(context.assignments == -1)
    assert not context.is_assigned
    assert torch.equal(context.centroids, four_points[context.seed_indices])


def test_initial_centroids_are_seeded_records():
    X, _ = make_blobs([[0.0, 0.0], [5.0, 5.0]], n_per=10)
    context = KMeans().configure(4, 0, 58947).run(X)

    assert len(context.seed_indices) == 4
    assert torch.equal(context.centroids, X[context.seed_indices])


def test_same_seed_replays_identically():
    X, _ = make_blobs([[0.0, 0.0, 0.0], [3.0, 3.0, 0.0], [0.0, 3.0, 3.0]], n_per=30, std=0.8)

    km = KMeans().configure(4, 20, 123)
    first = km.run(X)
    second = km.run(X)
    third = KMeans().configure(4, 20, 123).run(X.clone())

    for other in (second, third):
        assert torch.equal(first.assignments, other.assignments)
        assert torch.equal(first.centroids, other.centroids)
        assert first.seed_indices == other.seed_indices


def test_final_centroids_are_cluster_means():
    X, _ = make_blobs([[0.0, 0.0], [4.0, 0.0], [0.0, 4.0]], n_per=25, std=0.5)
    context = KMeans().configure(3, 15, 9).run(X)

    for k in range(3):
        members = X[context.assignments == k]
        if len(members) > 0:
            assert torch.allclose(context.centroids[k], members.mean(dim=0))


def test_final_assignment_is_nearest_to_pre_update_centroids():
    X, _ = make_blobs([[0.0, 0.0], [4.0, 0.0]], n_per=25, std=1.0)
    km = KMeans().configure(2, 3, 4)
    before = km.run(X)

    # a two-iteration run from the same seed ends on the centroids the third assign step used
    km_short = KMeans().configure(2, 2, 4)
    centroids = km_short.run(X).centroids

    d = squared_euclidean(X, centroids)
    chosen = d.gather(1, before.assignments.unsqueeze(1)).squeeze(1)
    assert torch.all(chosen <= d.min(dim=1).values)
    assert torch.equal(before.assignments, torch.argmin(d, dim=1))


def test_empty_cluster_keeps_its_centroid():
    X = torch.tensor([[0.0], [1.0], [10.0]], dtype=torch.float64)
    km = KMeans(init=[[0.0], [100.0], [1.0]]).configure(3, 4, 0)

    context = km.run(X)

    assert context.centroids[1].item() == 100.0
    assert context.cluster_sizes().tolist()[1] == 0
    assert all(state.n_empty == 1 for state in context.history)


def test_accepts_dataset_array_and_list(four_points):
    km = KMeans(init=[[0.0], [10.0]]).configure(2, 3, 0)
    a = km.run(Dataset(four_points)).assignments
    b = km.run(four_points.numpy()).assignments
    c = km.run(four_points.tolist()).assignments
    assert torch.equal(a, b) and torch.equal(b, c)


def test_run_does_not_mutate_input(four_points):
    original = four_points.clone()
    KMeans().configure(2, 5, 1).run(four_points)
    assert torch.equal(four_points, original)


def test_fit_predict_and_predict(four_points):
    km = KMeans(init=[[0.0], [10.0]]).configure(2, 5, 0)
    labels = km.fit_predict(four_points)

    assert labels.tolist() == [0, 0, 1, 1]
    assert torch.equal(km.labels_, labels)
    assert km.n_iter_ == 5
    assert km.predict([[0.02], [10.2], [4.0]]).tolist() == [0, 1, 0]
    assert km.score([[0.05], [10.05]]) == pytest.approx(0.0)


def test_history_tracks_objective(four_points):
    km = KMeans(init=[[0.0], [10.0]]).configure(2, 3, 0)
    km.fit(four_points)
    assert km.history_[-1].objective_value == pytest.approx(km.sse_)


def test_verbose_logs_each_iteration_at_info(four_points, caplog):
    caplog.set_level(logging.INFO, logger="bankclusters")
    KMeans(verbose=2).configure(2, 4, 0).run(four_points)

    iteration_lines = [r for r in caplog.records if r.getMessage().startswith("Iteration")]
    assert len(iteration_lines) == 4
