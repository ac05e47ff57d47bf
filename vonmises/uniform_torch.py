from __future__ import annotations

import logging

import torch

from .uniform_source import UniformSource

logger = logging.getLogger(__name__)


class TorchUniformSource(UniformSource):
    """Uniform source backed by a dedicated ``torch.Generator``.

    Draws are made in float64 so the acceptance tests see the same precision
    as with the numpy backend. The global torch seed is never touched.
    """

    backend = "torch"

    def __init__(self, seed: int | None = None, device: str | torch.device | None = None) -> None:
        self.device = torch.device(device) if device is not None else torch.device("cpu")
        self.dtype = torch.float64
        self.generator: torch.Generator | None = None
        super().__init__(seed)

    def _reset(self, seed: int) -> None:
        self.generator = torch.Generator(device=self.device)
        self.generator.manual_seed(seed)
        logger.debug("torch uniform source seeded with %d on %s", seed, self.device)

    def uniform(self) -> float:
        return torch.rand(1, generator=self.generator, device=self.device, dtype=self.dtype).item()

    def uniform_pair(self) -> tuple[float, float]:
        u1, u2 = torch.rand(2, generator=self.generator, device=self.device, dtype=self.dtype).tolist()
        return u1, u2
