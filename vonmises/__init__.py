"""
von Mises Sampling Package

Ratio-of-uniforms sampling from the von Mises distribution on the circle,
with injectable seeded random sources, circular statistics and configuration.
"""

from .circstats import (
    RayleighTestResult,
    circular_mean,
    circular_variance,
    mean_resultant_length,
    rayleigh_test,
    vonmises_pdf,
    wrap_angle,
)
from .config import Config
from .sampler import VonMisesSampler, generate, sampling_parameter
from .source import Backend, make_source
from .uniform_numpy import NumpyUniformSource
from .uniform_source import UniformSource, entropy_seed
from .validation import InvalidParameter

__version__ = "1.0.0"

__all__ = [
    'VonMisesSampler',
    'generate',
    'sampling_parameter',
    'InvalidParameter',
    'Backend',
    'make_source',
    'UniformSource',
    'NumpyUniformSource',
    'entropy_seed',
    'Config',
    'RayleighTestResult',
    'circular_mean',
    'circular_variance',
    'mean_resultant_length',
    'rayleigh_test',
    'vonmises_pdf',
    'wrap_angle',
]
