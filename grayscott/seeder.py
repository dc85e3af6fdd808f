"""
Reproducible initial pattern: four noisy disks plus scattered single cells.
"""
import numpy as np

from grayscott.prng import SeededRNG
from grayscott.utils import create_disk_offsets, wrap_index

NUM_BLOBS = 4
BLOB_RADIUS_FRACTION = 0.03
BLOB_RADIUS_PAD = 5
SPECK_PERCENT = 2


def blob_radius(n):
    return int(n * BLOB_RADIUS_FRACTION) + BLOB_RADIUS_PAD


def seed_grid(grid, seed):
    """
    Reset grid to U=1, V=0 and perturb it deterministically from seed.

    Every draw comes from one SeededRNG, in a fixed order: per blob the
    centre (x then y) followed by a (U, V) pair for each covered cell in
    row-major order; then one linear index per speck.
    """
    n = grid.n
    rng = SeededRNG(seed)
    u = grid.u
    v = grid.v
    u.fill(1.0)
    v.fill(0.0)

    radius = blob_radius(n)
    dy, dx = create_disk_offsets(radius)
    for _ in range(NUM_BLOBS):
        cx = int(rng() * n)
        cy = int(rng() * n)
        ys = wrap_index(cy + dy, n)
        xs = wrap_index(cx + dx, n)
        noise = rng.take(2 * len(dy))
        u_vals = 0.50 + 0.1 * noise[0::2]
        v_vals = 0.25 + 0.1 * noise[1::2]

        # A disk wider than the grid visits some cells twice; the last visit wins
        flat = ys * n + xs
        _, first_in_reversed = np.unique(flat[::-1], return_index=True)
        keep = len(flat) - 1 - first_in_reversed
        u[ys[keep], xs[keep]] = u_vals[keep]
        v[ys[keep], xs[keep]] = v_vals[keep]

    cells = n * n
    specks = cells * SPECK_PERCENT // 100
    idx = np.minimum((rng.take(specks) * cells).astype(np.int64), cells - 1)
    u.reshape(-1)[idx] = 0.5
    v.reshape(-1)[idx] = 0.25
    return grid
