"""
Seeded pseudo-random generator used for reproducible initial fields.

FNV-1a hashes the seed string into a 32-bit state, then xorshift32
produces the sequence. Plain integer arithmetic masked to 32 bits, so
the output is identical on every platform.
"""
import numpy as np

FNV_OFFSET = 2166136261
FNV_PRIME = 16777619
ZERO_HASH_FALLBACK = 123456789
MASK32 = 0xFFFFFFFF


def fnv1a_32(text):
    """32-bit FNV-1a over the UTF-16 code units of text."""
    h = FNV_OFFSET
    raw = text.encode("utf-16-le")
    for i in range(0, len(raw), 2):
        h ^= raw[i] | (raw[i + 1] << 8)
        h = (h * FNV_PRIME) & MASK32
    return h


class SeededRNG:
    """Stateful xorshift32 generator returning floats in [0, 1]."""

    def __init__(self, seed="seed"):
        self.seed = seed
        self.state = fnv1a_32(seed) or ZERO_HASH_FALLBACK

    def next(self):
        x = self.state
        x ^= (x << 13) & MASK32
        # Signed shift: the sign bit is copied in, as with a 32-bit int
        signed = x - (1 << 32) if x & 0x80000000 else x
        x ^= (signed >> 17) & MASK32
        x ^= (x << 5) & MASK32
        self.state = x
        return x / MASK32

    __call__ = next

    def take(self, count):
        """Next `count` draws as a float64 array, in call order."""
        return np.array([self.next() for _ in range(count)], dtype=np.float64)
