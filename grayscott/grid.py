"""
Concentration buffers for the two species.
"""
import numpy as np


class GridState:
    """
    U and V fields on an N x N periodic grid plus their scratch pair.

    Cell (x, y) lives at array position [y, x]; flattening gives the
    row-major index y * N + x. u_next and v_next are only meaningful
    while a step is in progress.
    """

    def __init__(self, n):
        if n < 1:
            raise ValueError(f"Grid size must be a positive integer, got {n}")
        self.n = int(n)
        shape = (self.n, self.n)
        self.u = np.ones(shape, dtype=np.float32)
        self.v = np.zeros(shape, dtype=np.float32)
        self.u_next = np.empty(shape, dtype=np.float32)
        self.v_next = np.empty(shape, dtype=np.float32)

    @property
    def shape(self):
        return self.u.shape

    def snapshot(self):
        """Copies of (U, V) for comparison or history."""
        return self.u.copy(), self.v.copy()
