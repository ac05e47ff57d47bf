"""Parameter checks shared by the sampler and the density."""

from __future__ import annotations

import math
from numbers import Integral, Real


class InvalidParameter(ValueError):
    """Raised when a distribution parameter or sample count is out of its domain.

    Attributes
    ----------
    parameter : str
        Name of the offending parameter.
    """

    def __init__(self, parameter: str, message: str) -> None:
        super().__init__(f"{parameter}: {message}")
        self.parameter = parameter


def _as_real(name: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidParameter(name, f"must be a real scalar, got {type(value).__name__}")
    value = float(value)
    if not math.isfinite(value):
        raise InvalidParameter(name, f"must be finite, got {value}")
    return value


def validate_mu(mu) -> float:
    mu = _as_real("mu", mu)
    if not -math.pi <= mu <= math.pi:
        raise InvalidParameter("mu", f"must lie in [-pi, pi], got {mu}")
    return mu


def validate_kappa(kappa) -> float:
    kappa = _as_real("kappa", kappa)
    if kappa < 0:
        raise InvalidParameter("kappa", f"must be non-negative, got {kappa}")
    return kappa


def validate_num_samples(num_samples) -> int:
    if isinstance(num_samples, bool) or not isinstance(num_samples, Integral):
        raise InvalidParameter(
            "num_samples", f"must be an integer, got {type(num_samples).__name__}"
        )
    if num_samples < 1:
        raise InvalidParameter("num_samples", f"must be at least 1, got {num_samples}")
    return int(num_samples)
