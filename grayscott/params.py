"""
Simulation parameters, defaults and the named pattern presets.
"""
from dataclasses import dataclass, replace

DEFAULT_SEED = "rdx"
DEFAULT_GRID_SIZE = 256

# Capture defaults for the export panel
DEFAULT_CAPTURE_SECONDS = 4.0
DEFAULT_CAPTURE_FPS = 20
DEFAULT_CAPTURE_SCALE = 2.0


@dataclass(frozen=True)
class SimulationParams:
    Du: float = 0.16
    Dv: float = 0.08
    F: float = 0.022
    k: float = 0.051
    dt: float = 1.0
    steps_per_frame: int = 20

    def __post_init__(self):
        if self.steps_per_frame < 1:
            raise ValueError(f"steps_per_frame must be >= 1, got {self.steps_per_frame}")


DEFAULT_PARAMS = SimulationParams()


# (name, Du, Dv, F, k)
PRESETS = {
    name: SimulationParams(Du=du, Dv=dv, F=f, k=k)
    for name, du, dv, f, k in [
        ("Mazes (F=0.029, k=0.057)", 0.16, 0.08, 0.029, 0.057),
        ("Worms (F=0.022, k=0.051)", 0.16, 0.08, 0.022, 0.051),
        ("Spots (F=0.03, k=0.062)", 0.16, 0.08, 0.03, 0.062),
        ("Pulsating spots (F=0.025, k=0.06)", 0.16, 0.08, 0.025, 0.06),
        ("Holes (F=0.039, k=0.058)", 0.16, 0.08, 0.039, 0.058),
        ("Spatiotemporal chaos (F=0.026, k=0.051)", 0.16, 0.08, 0.026, 0.051),
        ("Spatiotemporal chaos and holes (F=0.034, k=0.056)", 0.16, 0.08, 0.034, 0.056),
        ("Moving spots (F=0.014, k=0.054)", 0.16, 0.08, 0.014, 0.054),
        ("Big Waves (F=0.014, k=0.045)", 0.16, 0.08, 0.014, 0.045),
    ]
}


class ParameterHolder:
    """
    Single mutable holder for the active parameter set.

    Playback and capture both read from here on every stepper
    iteration, so a change made between two iterations takes effect
    on the next one.
    """

    def __init__(self, params=DEFAULT_PARAMS):
        self._params = params

    def current(self):
        return self._params

    def update(self, **changes):
        self._params = replace(self._params, **changes)
        return self._params

    def apply_preset(self, name):
        """Take Du, Dv, F and k from a preset; dt and steps are kept."""
        if name not in PRESETS:
            raise ValueError(f"Unknown preset: {name!r}")
        p = PRESETS[name]
        return self.update(Du=p.Du, Dv=p.Dv, F=p.F, k=p.k)
