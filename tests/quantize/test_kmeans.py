from tincture.quantize.kmeans import kmeans, kmeans_plus_plus, assign_clusters, cluster_means
from tincture.types import Pixel
from tincture.errors import RangeError
import numpy as np
import pytest

def two_clusters():
    reds = [(255, 0, 0)] * 50 + [(250, 5, 5)] * 50
    blues = [(0, 0, 255)] * 50 + [(5, 5, 250)] * 50
    return np.array(reds + blues)

def test_finds_separated_clusters(rng):
    centroids = kmeans(two_clusters(), 2, rng=rng)
    assert sorted(centroids) == [Pixel(3, 3, 253), Pixel(253, 3, 3)]

def test_deterministic_with_fixed_seed():
    samples = np.random.default_rng(1).integers(0, 256, size=(300, 3))
    first = kmeans(samples, 5, rng=np.random.default_rng(7))
    second = kmeans(samples, 5, rng=np.random.default_rng(7))
    assert first == second

def test_returns_k_centroids_in_range(rng):
    samples = rng.integers(0, 256, size=(400, 3))
    centroids = kmeans(samples, 6, rng=rng)
    assert len(centroids) == 6
    assert all(isinstance(v, int) and 0 <= v <= 255 for p in centroids for v in p)

def test_zero_iterations_returns_seeds(rng):
    samples = two_clusters()
    centroids = kmeans(samples, 2, max_iterations=0, rng=rng)
    known = {tuple(p) for p in samples.tolist()}
    assert all(tuple(c) in known for c in centroids)

def test_seeding_prefers_distant_points(rng):
    samples = np.array([(255, 0, 0)] * 50 + [(0, 0, 255)] * 50)
    seeds = kmeans_plus_plus(samples, 2, rng)
    assert seeds.shape == (2, 3)
    # points already at distance zero carry no weight
    assert sorted(tuple(s) for s in seeds.tolist()) == [(0, 0, 255), (255, 0, 0)]

def test_few_distinct_samples():
    samples = [(9, 9, 9), (1, 2, 3), (9, 9, 9)]
    assert kmeans(samples, 4) == [Pixel(9, 9, 9), Pixel(1, 2, 3)]

def test_empty_and_invalid():
    assert kmeans(np.empty((0, 3)), 3) == [Pixel(0, 0, 0)]
    with pytest.raises(RangeError):
        kmeans([(1, 2, 3)], 0)
    with pytest.raises(ValueError):
        kmeans([(1, 2)], 1)

def test_assign_clusters_matches_full_distance_table(rng):
    samples = rng.integers(0, 256, size=(500, 3))
    centroids = rng.integers(0, 256, size=(7, 3))
    labels, distances = assign_clusters(samples, centroids)

    table = ((samples[:, None, :] - centroids[None, :, :]) ** 2).sum(axis=2)
    assert np.array_equal(labels, np.argmin(table, axis=1))
    assert np.array_equal(distances, table.min(axis=1))

def test_assign_clusters_ties_keep_lower_index():
    samples = np.array([[0, 0, 0], [50, 50, 50]])
    centroids = np.array([[0, 0, 20], [20, 0, 0], [50, 50, 50]])
    labels, distances = assign_clusters(samples, centroids)
    # the origin is 400 from both of the first two centroids
    assert labels.tolist() == [0, 2]
    assert distances.tolist() == [400, 0]

def test_cluster_means_skip_empty_clusters():
    samples = np.array([[0, 0, 0], [2, 4, 6], [10, 10, 10]])
    labels = np.array([0, 0, 2])
    means, counts = cluster_means(samples, labels, 3)
    assert counts.tolist() == [2, 0, 1]
    assert means[0].tolist() == [1, 2, 3]
    assert means[2].tolist() == [10, 10, 10]
    assert np.isnan(means[1]).all()

def test_kmeans_means_round_half_up():
    samples = np.array([(0, 0, 0), (1, 1, 1), (200, 200, 200), (201, 201, 201)])
    centroids = kmeans(samples, 2, rng=np.random.default_rng(3))
    assert sorted(centroids) == [Pixel(1, 1, 1), Pixel(201, 201, 201)]
