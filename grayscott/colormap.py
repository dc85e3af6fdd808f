"""
Grid snapshot to RGBA pixels: red follows V, green follows U, blue 1 - U.
"""
import numpy as np

from grayscott.utils import round_half_up


def _channel(values):
    # NaN renders as 0, like a clamped byte store
    scaled = np.nan_to_num(255.0 * values, nan=0.0, posinf=255.0, neginf=0.0)
    return round_half_up(np.clip(scaled, 0, 255))


def to_rgba(grid, out=None):
    """
    Map the current U and V fields to an (N, N, 4) uint8 RGBA buffer.

    Clamping happens here only. Pure function of grid.u and grid.v.
    """
    u = grid.u.astype(np.float64)
    v = grid.v.astype(np.float64)
    if out is None:
        out = np.empty(u.shape + (4,), dtype=np.uint8)
    out[..., 0] = _channel(v)
    out[..., 1] = _channel(u)
    out[..., 2] = _channel(1.0 - u)
    out[..., 3] = 255
    return out
