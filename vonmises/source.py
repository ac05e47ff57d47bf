from __future__ import annotations

from enum import Enum
from typing import Any

from .uniform_numpy import NumpyUniformSource
from .uniform_source import UniformSource


class Backend(Enum):
    """Enum for the available uniform source backends."""
    NUMPY = "numpy"
    TORCH = "torch"


def make_source(
    backend: str | Backend | None = None,
    seed: int | None = None,
    device: Any | None = None,
) -> UniformSource:
    """Factory that dispatches to a backend implementation of ``UniformSource``."""
    if isinstance(backend, Backend):
        backend_name = backend.value
    elif backend is None:
        backend_name = "torch" if device is not None else "numpy"
    else:
        backend_name = backend.lower()

    if backend_name == "numpy":
        if device is not None:
            raise ValueError("device is only supported by the torch backend")
        return NumpyUniformSource(seed=seed)
    if backend_name == "torch":
        # torch is heavy to import; only pay for it when asked for
        from .uniform_torch import TorchUniformSource
        return TorchUniformSource(seed=seed, device=device)

    raise ValueError(
        f"Unknown backend '{backend_name}'. Expected numpy or torch."
    )
