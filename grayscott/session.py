"""
Simulation session: the single owner of the grid and the parameter holder.

Playback (tick) and capture both mutate the same grid. Capture suspends
playback for its whole duration, so only one of them writes at a time.
"""
from collections import deque
from contextlib import contextmanager

import numpy as np

from grayscott import capture as capture_mod
from grayscott.colormap import to_rgba
from grayscott.grid import GridState
from grayscott.params import DEFAULT_GRID_SIZE, DEFAULT_PARAMS, DEFAULT_SEED, ParameterHolder
from grayscott.seeder import seed_grid
from grayscott.stepper import advance

HISTORY_LIMIT = 1000


def random_seed_token():
    """Short random base-36 token for the "Randomize seed" action."""
    return np.base_repr(int(np.random.default_rng().integers(1, 2**52)), 36).lower()


class SimulationSession:
    def __init__(self, n=DEFAULT_GRID_SIZE, params=DEFAULT_PARAMS, seed=DEFAULT_SEED,
                 running=True, allocate=True):
        self.params = ParameterHolder(params)
        self.seed = seed
        self.running = running
        self.grid = None
        self.n = n
        self.iterations = 0
        self.history = deque(maxlen=HISTORY_LIMIT)
        self._suspended = False
        if allocate:
            self.set_grid_size(n)

    # ------------------------------------------------------------------
    # Inbound controls
    # ------------------------------------------------------------------
    def set_params(self, **changes):
        return self.params.update(**changes)

    def apply_preset(self, name, reseed=True):
        params = self.params.apply_preset(name)
        if reseed:
            self.reseed()
        return params

    def set_grid_size(self, n):
        """Reallocate every buffer at the new size and reseed."""
        self.grid = GridState(n)
        self.n = self.grid.n
        self.reseed()

    def reseed(self, seed=None):
        if seed is not None:
            self.seed = seed
        if self.grid is None:
            self.grid = GridState(self.n)
        seed_grid(self.grid, self.seed or DEFAULT_SEED)
        self.iterations = 0
        self.history = deque(maxlen=HISTORY_LIMIT)

    def randomize_seed(self):
        self.reseed(random_seed_token())
        return self.seed

    def play(self):
        self.running = True

    def pause(self):
        self.running = False

    def toggle(self):
        self.running = not self.running
        return self.running

    # ------------------------------------------------------------------
    # Playback
    # ------------------------------------------------------------------
    @property
    def playing(self):
        return self.running and not self._suspended

    def advance_frame(self):
        done = advance(self.grid, self.params)
        self.iterations += done
        self.history.append(
            (self.iterations, float(np.mean(self.grid.u)), float(np.mean(self.grid.v)))
        )
        return done

    def tick(self):
        """One playback tick: advance a frame if playing, return the pixels."""
        if self.grid is None:
            raise RuntimeError("Simulation grid is not initialized; call reseed() first")
        if self.playing:
            self.advance_frame()
        return to_rgba(self.grid)

    def pixels(self):
        if self.grid is None:
            raise RuntimeError("Simulation grid is not initialized; call reseed() first")
        return to_rgba(self.grid)

    # ------------------------------------------------------------------
    # Capture
    # ------------------------------------------------------------------
    @contextmanager
    def suspended(self):
        """Pause playback for the duration of the block, then restore it."""
        was_running = self.running
        was_suspended = self._suspended
        self.running = False
        self._suspended = True
        try:
            yield self
        finally:
            self._suspended = was_suspended
            self.running = was_running

    def capture(self, seconds, fps, scale=1.0, encoder=capture_mod.encode_gif, on_frame=None):
        if self.grid is None:
            raise capture_mod.CaptureNotReadyError(
                "Simulation grid is not initialized; seed it before capturing"
            )
        with self.suspended():
            return capture_mod.capture(
                self.grid, self.params, seconds, fps, scale=scale,
                encoder=encoder, on_frame=on_frame, step_frame=self.advance_frame,
            )

