"""
Benchmarking utilities for von Mises sampling.
"""

from typing import Dict

import numpy as np
from torch.utils import benchmark

from .config import Config
from .sampler import VonMisesSampler

# Global benchmark time setting
BENCHMARK_TIME = 2.0


def run_benchmark(config: Config, min_run_time: float = BENCHMARK_TIME) -> Dict[str, float | str]:
    """
    Run benchmarking using torch.utils.benchmark.

    Parameters
    ----------
    config : Config
        Experiment configuration.
    min_run_time : float
        Minimum total measurement time in seconds.

    Returns
    -------
    dict
        Benchmark timing results.
    """
    sampler = VonMisesSampler(
        mu=config.mu,
        kappa=config.kappa,
        seed=config.seed,
        backend=config.backend,
        device=config.device if config.backend == "torch" else None,
    )

    # Define sampling function
    def sample_func():
        return sampler.sample(config.num_samples)

    timer = benchmark.Timer(
        stmt='sample_func()',
        globals={'sample_func': sample_func},
        label=f'von Mises sampling ({config.backend})',
        description=f'mu={config.mu}, kappa={config.kappa}, n={config.num_samples}'
    )

    measurement = timer.blocked_autorange(
        min_run_time=min_run_time,
    )

    return {
        'mean_time': measurement.mean,
        'median_time': measurement.median,
        'std': float(np.std(measurement.times)),
        'samples per second': config.num_samples / measurement.mean,
        'backend': config.backend,
    }
