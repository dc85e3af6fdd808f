"""
Explicit-Euler Gray-Scott update on a double-buffered periodic grid.
"""
import numpy as np

from grayscott.utils import laplacian


def step(grid, params):
    """
    Apply one update iteration to grid using the parameter snapshot.

    All cells are computed from the pre-update U and V into the scratch
    buffers, which are then copied back so grid.u and grid.v keep their
    identity. Values are not clamped.
    """
    u = grid.u
    v = grid.v
    uvv = u * v * v
    du = params.Du * laplacian(u) - uvv + params.F * (1 - u)
    dv = params.Dv * laplacian(v) + uvv - (params.F + params.k) * v
    np.add(u, du * params.dt, out=grid.u_next, casting="same_kind")
    np.add(v, dv * params.dt, out=grid.v_next, casting="same_kind")
    np.copyto(u, grid.u_next)
    np.copyto(v, grid.v_next)


def advance(grid, params):
    """
    Advance grid by one frame, i.e. steps_per_frame iterations.

    params is either a frozen SimulationParams snapshot, used for the
    whole frame, or a holder exposing current(). A holder is re-read
    before every iteration, including its steps_per_frame, so changes
    made mid-frame apply from the next iteration on.

    Returns the number of iterations applied.
    """
    read = params.current if hasattr(params, "current") else lambda: params
    done = 0
    while done < read().steps_per_frame:
        step(grid, read())
        done += 1
    return done
