"""Circular statistics and the von Mises density."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from scipy import special

from .validation import validate_kappa, validate_mu


def wrap_angle(theta):
    """
    Fold angles into (-π, π].

    Parameters
    ----------
    theta : float or np.ndarray
        Angles in radians.

    Returns
    -------
    float or np.ndarray
        Wrapped angles. Scalars in, float out.
    """
    if np.ndim(theta) == 0:
        wrapped = math.atan2(math.sin(theta), math.cos(theta))
        # atan2 can round onto -pi for angles just past the branch cut
        return math.pi if wrapped <= -math.pi else wrapped

    theta = np.asarray(theta, dtype=np.float64)
    wrapped = np.arctan2(np.sin(theta), np.cos(theta))
    return np.where(wrapped <= -np.pi, np.pi, wrapped)


def _as_angles(angles) -> np.ndarray:
    angles = np.asarray(angles, dtype=np.float64)
    if angles.ndim != 1:
        raise ValueError(f"angles must be a 1D array, got shape {angles.shape}")
    if angles.size == 0:
        raise ValueError("angles must not be empty")
    return angles


def mean_resultant_length(angles) -> float:
    """Length of the mean of the unit vectors at ``angles``, in [0, 1]."""
    angles = _as_angles(angles)
    return float(np.hypot(np.mean(np.cos(angles)), np.mean(np.sin(angles))))


def circular_mean(angles) -> float:
    """Direction of the mean resultant vector, in (-π, π]."""
    angles = _as_angles(angles)
    return wrap_angle(float(np.arctan2(np.sum(np.sin(angles)), np.sum(np.cos(angles)))))


def circular_variance(angles) -> float:
    """Circular variance ``1 - R̄``: 0 for identical angles, 1 for a balanced spread."""
    return 1.0 - mean_resultant_length(angles)


@dataclass(frozen=True)
class RayleighTestResult:
    z: float
    pval: float


def rayleigh_test(angles) -> RayleighTestResult:
    r"""
    Rayleigh's test for circular uniformity.

    - H0: the population is distributed uniformly around the circle.
    - H1: the population is unimodal around some direction.

    $$ z = n \cdot \bar{R}^2 $$

    and

    $$ p = \exp(\sqrt{1 + 4n + 4(n^2 - R^2)} - (1 + 2n)) $$

    with ``R = n * R̄`` the resultant length.

    Parameters
    ----------
    angles : np.ndarray
        Angles in radians.

    Returns
    -------
    RayleighTestResult
        The statistic ``z`` and its approximate p-value.
    """
    angles = _as_angles(angles)
    n = angles.size
    r_bar = mean_resultant_length(angles)
    R = n * r_bar
    z = n * r_bar**2
    pval = math.exp(math.sqrt(1 + 4 * n + 4 * (n**2 - R**2)) - (1 + 2 * n))
    return RayleighTestResult(z=float(z), pval=float(min(max(pval, 0.0), 1.0)))


def vonmises_pdf(theta, mu: float = 0.0, kappa: float = 1.0):
    """
    Density of the von Mises distribution.

    Uses the exponentially scaled Bessel function ``i0e`` so large ``kappa``
    does not overflow.

    Parameters
    ----------
    theta : float or np.ndarray
        Angles in radians.
    mu : float
        Mean direction in [-π, π].
    kappa : float
        Concentration, non-negative.

    Raises
    ------
    InvalidParameter
        If ``mu`` or ``kappa`` is out of range.
    """
    mu = validate_mu(mu)
    kappa = validate_kappa(kappa)
    theta = np.asarray(theta, dtype=np.float64)
    density = np.exp(kappa * (np.cos(theta - mu) - 1.0)) / (2 * np.pi * special.i0e(kappa))
    return float(density) if density.ndim == 0 else density
