"""
Von Mises distribution sampler.

This module contains the core sampling class. Angles are drawn one at a time with
the ratio-of-uniforms rejection scheme of Barabesi (1995), "Generating von Mises
variates by the ratio-of-uniforms method".
"""

from __future__ import annotations

import logging
import math
from typing import Any

import numpy as np

from .circstats import wrap_angle
from .profiling import profile_time
from .source import Backend, make_source
from .uniform_source import UniformSource
from .validation import InvalidParameter, validate_kappa, validate_mu, validate_num_samples

logger = logging.getLogger(__name__)

# Switch point between the two envelope regimes of the reference method
KAPPA_THRESHOLD = 1.3


def sampling_parameter(kappa: float) -> float:
    """
    Half-width ``s`` of the ratio-of-uniforms proposal box.

    Parameters
    ----------
    kappa : float
        Concentration parameter, non-negative.

    Returns
    -------
    float
        ``1 / sqrt(kappa)`` above the threshold, ``pi * exp(-kappa)`` otherwise.
    """
    if kappa > KAPPA_THRESHOLD:
        return 1.0 / math.sqrt(kappa)
    return math.pi * math.exp(-kappa)


class VonMisesSampler:
    """
    Von Mises distribution sampler.

    Draws independent angles from the unimodal von Mises distribution on the
    circle, parameterized by a mean direction μ and a concentration κ. Each
    sample is produced by its own rejection loop, which is guaranteed to accept
    eventually; no iteration cap is applied.

    Parameters
    ----------
    mu : float, optional
        Mean direction in [-π, π]. Default is 0.
    kappa : float, optional
        Concentration parameter (κ >= 0). κ = 0 is the uniform distribution
        on the circle; higher values concentrate samples around μ.
    seed : int or None, optional
        Seed for the owned random source. If None, a time and OS entropy based
        seed is used.
    backend : str, Backend or None, optional
        Random source backend, ``"numpy"`` (default) or ``"torch"``.
    device : str, torch.device or None, optional
        Device for the torch backend.
    source : UniformSource or None, optional
        Explicit random source. Takes precedence over ``seed``, ``backend`` and
        ``device``.

    Attributes
    ----------
    mu : float
        Mean direction.
    kappa : float
        Concentration parameter.
    source : UniformSource
        Source of uniform variates owned by this sampler.

    Raises
    ------
    InvalidParameter
        If ``mu`` or ``kappa`` is outside its domain.

    Examples
    --------
    >>> sampler = VonMisesSampler(mu=0.5, kappa=4.0, seed=42)
    >>> samples = sampler.sample(1000)
    >>> print(samples.shape)  # (1000,)

    >>> # Uniforms drawn from a torch generator instead
    >>> sampler = VonMisesSampler(mu=0.5, kappa=4.0, seed=42, backend="torch")
    """

    def __init__(self, mu: float = 0.0, kappa: float = 1.0, seed: int | None = None,
                 backend: str | Backend | None = None, device: Any | None = None,
                 source: UniformSource | None = None):

        self.mu = validate_mu(mu)
        self.kappa = validate_kappa(kappa)
        self.source = source if source is not None else make_source(backend, seed=seed, device=device)

    def set_seed(self, seed: int | None):
        """
        Reseed the owned random source.

        Parameters
        ----------
        seed : int or None
            Random seed. If None, draw a fresh entropy based seed.
        """
        self.source.reseed(seed)

    def set_mu(self, mu: float):
        """Set the mean direction."""
        self.mu = validate_mu(mu)

    def set_kappa(self, kappa: float):
        """Set the concentration parameter."""
        self.kappa = validate_kappa(kappa)

    def _draw_angle(self, envelope: float) -> float:
        """Run the rejection loop until one angle around zero is accepted."""
        kappa = self.kappa
        while True:
            u, u2 = self.source.uniform_pair()
            # u1 in (0, 1] keeps the division and the log finite
            u1 = 1.0 - u
            angle = envelope * (2.0 * u2 - 1.0) / u1

            if abs(angle) > math.pi:
                continue

            # quadratic bound, resolves most draws without trig
            if kappa * angle * angle < 4.0 - 4.0 * u1:
                return angle

            if kappa * math.cos(angle) < 2.0 * math.log(u1) + kappa:
                continue
            return angle

    @profile_time
    def sample(self, num_samples: int = 1, mu: float | None = None,
               kappa: float | None = None) -> np.ndarray:
        """
        Sample from the von Mises distribution.

        Parameters
        ----------
        num_samples : int, optional
            Number of samples to generate, at least 1. Default is 1.
        mu : float or None, optional
            Mean direction. If provided, overrides the current mu.
        kappa : float or None, optional
            Concentration parameter. If provided, overrides the current kappa.

        Returns
        -------
        samples : np.ndarray
            Float64 array of shape (num_samples,) with values in (-π, π].

        Raises
        ------
        InvalidParameter
            If any argument is outside its domain. Nothing is sampled and the
            current parameters are left unchanged in that case.
        """
        # validate everything before touching state or the source
        num_samples = validate_num_samples(num_samples)
        new_mu = validate_mu(mu) if mu is not None else self.mu
        new_kappa = validate_kappa(kappa) if kappa is not None else self.kappa
        self.mu, self.kappa = new_mu, new_kappa

        envelope = sampling_parameter(self.kappa)
        logger.debug(
            "sampling %d angles with mu=%g, kappa=%g, s=%g from %r",
            num_samples, self.mu, self.kappa, envelope, self.source,
        )

        samples = np.empty(num_samples, dtype=np.float64)
        for idx in range(num_samples):
            samples[idx] = wrap_angle(self._draw_angle(envelope) + self.mu)
        return samples

    def __repr__(self) -> str:
        return f"VonMisesSampler(mu={self.mu}, kappa={self.kappa}, source={self.source!r})"


def generate(mu: float, kappa: float, num_samples: int = 1, seed: int | None = None,
             backend: str | Backend | None = None,
             source: UniformSource | None = None) -> np.ndarray:
    """
    Draw ``num_samples`` angles from the von Mises distribution.

    Parameters
    ----------
    mu : float
        Mean direction in [-π, π].
    kappa : float
        Concentration parameter, non-negative.
    num_samples : int, optional
        Number of samples, at least 1. Default is 1.
    seed : int or None, optional
        Seed for a fresh random source. Ignored when ``source`` is given.
    backend : str, Backend or None, optional
        Backend for a fresh random source, ``"numpy"`` by default.
    source : UniformSource or None, optional
        Random source to draw from. Its state advances across calls.

    Returns
    -------
    np.ndarray
        Float64 array of shape (num_samples,) with values in (-π, π].

    Raises
    ------
    InvalidParameter
        If ``mu``, ``kappa`` or ``num_samples`` is outside its domain.

    Examples
    --------
    >>> angles = generate(mu=0.0, kappa=2.0, num_samples=7, seed=0)
    >>> len(angles)
    7
    """
    # fail on bad input before a source is built
    mu = validate_mu(mu)
    kappa = validate_kappa(kappa)
    num_samples = validate_num_samples(num_samples)

    sampler = VonMisesSampler(mu=mu, kappa=kappa, seed=seed, backend=backend, source=source)
    return sampler.sample(num_samples)


__all__ = [
    "KAPPA_THRESHOLD",
    "InvalidParameter",
    "VonMisesSampler",
    "generate",
    "sampling_parameter",
]
