from __future__ import annotations
from typing import Optional

import numpy as np
from numpy import ndarray as NDArray

from .common import PixelInput, as_pixel_array, distinct_in_order, to_pixels
from ..defaults import DEFAULT_MAX_ITERATIONS
from ..errors import RangeError
from ..types.color_types import Pixel
from ..utils.default import resolve_rng
from ..utils.num_utils import np_round_half_up


def squared_distance_to(samples: NDArray, centroid: NDArray) -> NDArray:
    """(n,) squared Euclidean distances from every sample to one centroid."""
    diff = samples - centroid
    return np.einsum("nc,nc->n", diff, diff)


def assign_clusters(samples: NDArray, centroids: NDArray) -> tuple[NDArray, NDArray]:
    """
    Nearest centroid for every sample, one centroid at a time.

    Returns ``(labels, distances)``. Ties keep the lower centroid index, and
    scratch memory stays proportional to the number of samples.
    """
    labels = np.zeros(len(samples), dtype=np.intp)
    best = squared_distance_to(samples, centroids[0])
    for i in range(1, len(centroids)):
        d = squared_distance_to(samples, centroids[i])
        closer = d < best
        labels[closer] = i
        np.minimum(best, d, out=best)
    return labels, best


def cluster_means(samples: NDArray, labels: NDArray, k: int) -> tuple[NDArray, NDArray]:
    """Per-cluster channel means (NaN rows for empty clusters) and member counts."""
    counts = np.bincount(labels, minlength=k)
    sums = np.stack(
        [np.bincount(labels, weights=samples[:, c], minlength=k) for c in range(3)],
        axis=1,
    )
    with np.errstate(invalid="ignore", divide="ignore"):
        return sums / counts[:, None], counts


def kmeans_plus_plus(samples: NDArray, k: int, rng: np.random.Generator) -> NDArray:
    """
    k-means++ seeding.

    The first centroid is a uniform pick. Each later one draws ``u`` in
    ``[0, sum(d))`` where ``d`` is every sample's squared distance to its
    nearest centroid, and takes the first sample whose running sum reaches ``u``.
    """
    n = len(samples)
    centroids = [samples[rng.integers(n)]]
    nearest = squared_distance_to(samples, centroids[0])

    for _ in range(1, k):
        running = np.cumsum(nearest)
        u = rng.random() * running[-1]
        index = min(int(np.searchsorted(running, u, side="left")), n - 1)
        centroids.append(samples[index])
        np.minimum(nearest, squared_distance_to(samples, samples[index]), out=nearest)

    return np.array(centroids, dtype=np.int64)


def kmeans(
    samples: PixelInput,
    k: int,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    rng: Optional[np.random.Generator] = None,
) -> list[Pixel]:
    """
    Cluster RGB samples into ``k`` colors.

    Args:
        samples: (n, 3) RGB values
        k: Number of clusters, at least 1
        max_iterations: Cap on Lloyd iterations
        rng: Random source for seeding; a fresh ``default_rng()`` when None

    Returns:
        ``k`` centroids, or the distinct samples when there are no more than
        ``k`` of them; ``[Pixel(0, 0, 0)]`` for empty input

    Raises:
        RangeError: if k < 1
    """
    if k < 1:
        raise RangeError(f"k-means needs k >= 1, got {k}")
    arr = as_pixel_array(samples)
    if len(arr) == 0:
        return [Pixel(0, 0, 0)]

    distinct = distinct_in_order(arr)
    if len(distinct) <= k:
        return to_pixels(distinct)

    rng = resolve_rng(rng)
    centroids = kmeans_plus_plus(arr, k, rng)

    for _ in range(max_iterations):
        labels, _ = assign_clusters(arr, centroids)
        means, counts = cluster_means(arr, labels, k)

        # empty clusters keep their centroid
        updated = centroids.copy()
        filled = counts > 0
        updated[filled] = np_round_half_up(means[filled])

        moved = not np.array_equal(updated, centroids)
        centroids = updated
        if not moved:
            break

    return to_pixels(centroids)
