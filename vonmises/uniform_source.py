"""
Uniform random sources for the von Mises sampler.

A source owns its own generator state. Share a source between threads only
with external synchronization; the usual pattern is one source per thread.
"""

from __future__ import annotations

import os
import time

import numpy as np


def entropy_seed() -> int:
    """
    Build a fresh 64-bit seed from several entropy sources.

    Wall-clock nanoseconds, a monotonic high resolution counter, CPU process
    time and OS randomness are mixed through ``numpy.random.SeedSequence``, so
    two sources created within the same clock tick still get different seeds.

    Returns
    -------
    int
        Seed usable by both the numpy and the torch backend.
    """
    entropy = [
        time.time_ns(),
        time.perf_counter_ns(),
        time.process_time_ns(),
        int.from_bytes(os.urandom(8), "little"),
    ]
    state = np.random.SeedSequence(entropy).generate_state(1, dtype=np.uint64)
    return int(state[0])


class UniformSource:
    """Base class for sources of uniform variates in [0, 1)."""

    backend = "base"

    def __init__(self, seed: int | None = None) -> None:
        self.seed: int | None = None
        self.reseed(seed)

    def _verify_seed(self, seed: int | None) -> int:
        if seed is None:
            return entropy_seed()
        if isinstance(seed, bool) or not isinstance(seed, (int, np.integer)):
            raise ValueError(f"seed must be None or an integer, got {type(seed)}")
        if seed < 0:
            raise ValueError(f"seed must be non-negative, got {seed}")
        return int(seed)

    def reseed(self, seed: int | None) -> None:
        """
        Reset the generator state.

        Parameters
        ----------
        seed : int or None
            Non-negative integer seed. If None, a seed is drawn from
            :func:`entropy_seed`.
        """
        self.seed = self._verify_seed(seed)
        self._reset(self.seed)

    def _reset(self, seed: int) -> None:
        raise NotImplementedError

    def uniform(self) -> float:
        """Draw one variate in [0, 1)."""
        raise NotImplementedError

    def uniform_pair(self) -> tuple[float, float]:
        """Draw two independent variates in [0, 1)."""
        return self.uniform(), self.uniform()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(seed={self.seed})"
