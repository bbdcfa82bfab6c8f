# jitter.py
import numpy as np

from modes import Mode

JITTER_AMPLITUDE = 40.0
JITTER_INTERVAL = 0.01

# Largest float below 1.0, noise output is kept in [0, 1)
_BELOW_ONE = float(np.nextafter(1.0, 0.0))


def _fade(t):
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


class PerlinNoise1D:
    """
    Seedable 1-D gradient noise.

    Gradients and the permutation table come from one numpy Generator, so the
    same seed always gives the same curve. Output is continuous in x and lies
    in [0, 1).
    """

    def __init__(self, seed=0, size=256):
        rng = np.random.default_rng(seed)
        self.size = size
        self._perm = rng.permutation(size)
        self._gradients = rng.uniform(-1.0, 1.0, size)

    def _gradient(self, i):
        return self._gradients[self._perm[i % self.size]]

    def __call__(self, x):
        i0 = int(np.floor(x))
        t = x - i0

        d0 = self._gradient(i0) * t
        d1 = self._gradient(i0 + 1) * (t - 1.0)
        n = d0 + _fade(t) * (d1 - d0)

        # |n| <= 0.5 for unit gradients
        return float(min(max(n + 0.5, 0.0), _BELOW_ONE))


class NoiseJitter:
    """Vertical wobble shared by every segment of one shape."""

    def __init__(self, noise, amplitude=JITTER_AMPLITUDE, interval=JITTER_INTERVAL):
        self.noise = noise
        self.amplitude = amplitude
        self.interval = interval

        self.offset = 0.0
        self.seed_position = 0.0
        self.active = False

    def activate(self):
        self.active = True

    def advance(self, mode):
        # Frozen until the shape is finished, and while anything is being drawn
        if not self.active or mode is Mode.DRAWING:
            return
        self.seed_position += self.interval
        self.offset = self.noise(self.seed_position)

    def sample(self):
        if not self.active:
            return 0.0
        return self.offset * self.amplitude - self.amplitude / 2
