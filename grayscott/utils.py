"""
Shared stencil helpers for the Gray-Scott simulation.
Vectorized NumPy operations on periodic (toroidal) grids.
"""
import numpy as np


def laplacian(arr):
    """
    Compute discrete 5-point stencil Laplacian with periodic wrap.

    Each cell sees its four cardinal neighbours, wrapping across the
    edges, so the neighbour of column 0 is column N-1.

    Args:
        arr: 2D numpy array

    Returns:
        2D numpy array with Laplacian computed, same dtype as arr
    """
    return (
        np.roll(arr, 1, axis=1) + np.roll(arr, -1, axis=1) +
        np.roll(arr, 1, axis=0) + np.roll(arr, -1, axis=0) -
        4 * arr
    )


def wrap_index(coord, size):
    """
    True modulo wrap for grid coordinates (-1 maps to size - 1).

    Works on ints and integer numpy arrays alike.
    """
    return coord % size


def create_disk_offsets(radius):
    """
    Offsets (dy, dx) of every cell inside a disk of the given radius.

    Built from a circular mask over the bounding square, so the offsets
    come out in row-major order: dy outer, dx inner.

    Args:
        radius: Disk radius in cells

    Returns:
        Tuple (dy, dx) of 1D integer arrays
    """
    y, x = np.ogrid[-radius:radius + 1, -radius:radius + 1]
    mask = x**2 + y**2 <= radius**2
    dy, dx = np.nonzero(mask)
    return dy - radius, dx - radius


def round_half_up(arr):
    """Round to nearest integer with halves going up, like JavaScript Math.round."""
    return np.floor(np.asarray(arr, dtype=np.float64) + 0.5)


def round_half_up_int(value):
    """Scalar version of round_half_up returning a Python int."""
    return int(np.floor(float(value) + 0.5))
