"""
Initial centroid selection: random record draws and explicit centroids.
"""

import pytest
import torch

from bankclusters.exceptions import InvalidParameterError
from bankclusters.initialization import RandomInit, FromPreviousInit
from bankclusters.utils.validation import check_random_state


def test_random_init_copies_drawn_records():
    points = torch.arange(20, dtype=torch.float64).reshape(10, 2)
    init = RandomInit()

    centroids = init.initialize(points, 3, generator=check_random_state(7))

    assert centroids.shape == (3, 2)
    assert len(init.indices_) == 3
    for k, idx in enumerate(init.indices_):
        assert 0 <= idx < 10
        assert torch.equal(centroids[k], points[idx])


def test_random_init_is_a_copy():
    points = torch.zeros(5, 2, dtype=torch.float64)
    centroids = RandomInit().initialize(points, 2, generator=check_random_state(1))
    centroids += 1.0
    assert torch.all(points == 0.0)


def test_random_init_replays_with_same_seed():
    points = torch.randn(50, 3, dtype=torch.float64)
    a, b = RandomInit(), RandomInit()
    ca = a.initialize(points, 4, generator=check_random_state(58947))
    cb = b.initialize(points, 4, generator=check_random_state(58947))
    assert a.indices_ == b.indices_
    assert torch.equal(ca, cb)


def test_more_clusters_than_records_warns_and_duplicates():
    points = torch.tensor([[1.0], [2.0]], dtype=torch.float64)
    init = RandomInit()

    with pytest.warns(UserWarning):
        centroids = init.initialize(points, 5, generator=check_random_state(3))

    assert centroids.shape == (5, 1)
    # only two distinct records exist, so at least three draws repeat
    assert len(set(init.indices_)) <= 2


def test_from_previous_returns_given_centroids():
    points = torch.zeros(4, 1, dtype=torch.float64)
    init = FromPreviousInit([[0.0], [10.0]])
    centroids = init.initialize(points, 2)
    assert torch.equal(centroids, torch.tensor([[0.0], [10.0]], dtype=torch.float64))


@pytest.mark.parametrize("initial,n_clusters", [
    ([[0.0], [1.0]], 3),
    ([[0.0, 1.0], [1.0, 2.0]], 2),
    ([0.0, 1.0], 2),
])
def test_from_previous_validates_shape(initial, n_clusters):
    points = torch.zeros(4, 1, dtype=torch.float64)
    with pytest.raises(InvalidParameterError):
        FromPreviousInit(initial).initialize(points, n_clusters)
