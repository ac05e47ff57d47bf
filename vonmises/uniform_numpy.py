from __future__ import annotations

import logging

import numpy as np

from .uniform_source import UniformSource

logger = logging.getLogger(__name__)


class NumpyUniformSource(UniformSource):
    backend = "numpy"

    def __init__(self, seed: int | None = None) -> None:
        self.random_state: np.random.Generator | None = None
        super().__init__(seed)

    def _reset(self, seed: int) -> None:
        self.random_state = np.random.default_rng(seed)
        logger.debug("numpy uniform source seeded with %d", seed)

    def uniform(self) -> float:
        return float(self.random_state.random())

    def uniform_pair(self) -> tuple[float, float]:
        u = self.random_state.random(2)
        return float(u[0]), float(u[1])
