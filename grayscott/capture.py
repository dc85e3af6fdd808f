"""
Offline capture: step the simulation for a fixed number of frames,
color-map and resample each one, then hand the sequence to an encoder.
"""
import io
from dataclasses import dataclass, field

import numpy as np
from PIL import Image

from grayscott.colormap import to_rgba
from grayscott.stepper import advance
from grayscott.utils import round_half_up_int


class CaptureError(RuntimeError):
    """Base class for capture failures."""


class CaptureNotReadyError(CaptureError):
    """Capture was requested before the grid was allocated."""


class EncoderError(CaptureError):
    """The frame encoder failed or returned something other than bytes."""


@dataclass
class CaptureResult:
    frames: list
    delay_ms: int
    data: bytes = field(repr=False)

    @property
    def size(self):
        return self.frames[0].shape[0]


def frame_count(seconds, fps):
    return max(1, round_half_up_int(seconds * fps))


def frame_delay_ms(fps):
    return max(10, round_half_up_int(1000 / fps))


def output_size(n, scale):
    return max(1, round_half_up_int(n * scale))


def resample_nearest(pixels, size):
    """
    Nearest-neighbour resize of a square (N, N, C) buffer to (size, size, C).

    Output pixel i samples the source pixel under its centre, so no
    colours are blended.
    """
    n = pixels.shape[0]
    if size == n:
        return pixels.copy()
    src = np.floor((np.arange(size) + 0.5) * n / size).astype(np.intp)
    src = np.minimum(src, n - 1)
    return pixels[src[:, None], src[None, :]]


def encode_gif(frames, delay_ms):
    """Default encoder: looping animated GIF, one delay for every frame."""
    images = [Image.fromarray(np.ascontiguousarray(f[..., :3])) for f in frames]
    buf = io.BytesIO()
    images[0].save(
        buf,
        format="GIF",
        save_all=True,
        append_images=images[1:],
        loop=0,
        duration=delay_ms,
    )
    return buf.getvalue()


def capture(grid, params, seconds, fps, scale=1.0, encoder=encode_gif, on_frame=None,
            step_frame=None):
    """
    Run a capture session on grid and return a CaptureResult.

    The grid keeps evolving from its current state; it is not reseeded.
    params is passed to advance() for every frame, so a ParameterHolder
    keeps being re-read while the capture runs. on_frame(i, total) is
    called after each frame is appended. step_frame, when given, replaces
    advance(grid, params) as the per-frame stepping call.

    Raises:
        CaptureNotReadyError: grid is None (nothing allocated yet)
        EncoderError: the encoder raised or returned a non-bytes result
        ValueError: seconds, fps or scale is not positive
    """
    if grid is None:
        raise CaptureNotReadyError("Simulation grid is not initialized; seed it before capturing")
    if seconds <= 0 or fps <= 0 or scale <= 0:
        raise ValueError(f"seconds, fps and scale must be positive (got {seconds}, {fps}, {scale})")

    total = frame_count(seconds, fps)
    delay = frame_delay_ms(fps)
    size = output_size(grid.n, scale)

    frames = []
    for i in range(total):
        if step_frame is None:
            advance(grid, params)
        else:
            step_frame()
        frames.append(resample_nearest(to_rgba(grid), size))
        if on_frame is not None:
            on_frame(i + 1, total)

    try:
        data = encoder(frames, delay)
    except Exception as exc:
        raise EncoderError(f"Frame encoder failed: {exc}") from exc
    if not isinstance(data, (bytes, bytearray)):
        raise EncoderError(f"Frame encoder returned {type(data).__name__}, expected bytes")

    return CaptureResult(frames=frames, delay_ms=delay, data=bytes(data))
