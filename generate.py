"""Simple von Mises sample generation script."""

import argparse
import logging
import sys
import time
from pathlib import Path

import numpy as np
from pydantic import ValidationError

from vonmises.circstats import circular_mean, circular_variance
from vonmises.config import Config
from vonmises.logger import SamplingLogger, setup_logging
from vonmises.sampler import VonMisesSampler
from vonmises.validation import InvalidParameter

logger = logging.getLogger(__name__)


def generate_samples(config: Config) -> Path:
    """Generate von Mises samples based on configuration."""
    sampler = VonMisesSampler(
        mu=config.mu,
        kappa=config.kappa,
        seed=config.seed,
        backend=config.backend,
        device=config.device if config.backend == "torch" else None,
    )

    start_time = time.perf_counter()
    samples = sampler.sample(config.num_samples)
    generation_time = time.perf_counter() - start_time

    # Save samples
    Path(config.output_dir).mkdir(parents=True, exist_ok=True)
    filename = f"vonmises_samples_mu{config.mu}_kappa{config.kappa}_n{config.num_samples}_seed{sampler.source.seed}"
    output_path = Path(config.output_dir) / f"{filename}.npy"
    np.save(output_path, samples)

    summary = {
        'circular_mean': circular_mean(samples),
        'circular_variance': circular_variance(samples),
        'generation_time': generation_time,
    }
    logger.info(
        "Generated %d samples in %.3fs (circular mean %.4f, circular variance %.4f) -> %s",
        config.num_samples, generation_time, summary['circular_mean'],
        summary['circular_variance'], output_path,
    )

    if config.wandb_project:
        run_logger = SamplingLogger(config)
        run_logger.log_run(summary)
        run_logger.finish()

    return output_path


def main(argv=None):
    """Main function."""
    parser = argparse.ArgumentParser(description='Generate von Mises samples')
    parser.add_argument('--config', help='Config file path (optional)')
    parser.add_argument('--mu', type=float, help='Mean direction in [-pi, pi]')
    parser.add_argument('--kappa', type=float, help='Concentration parameter (>= 0)')
    parser.add_argument('--num-samples', type=int, help='Number of samples (>= 1)')
    parser.add_argument('--backend', choices=['numpy', 'torch'], help='Random source backend')
    parser.add_argument('--seed', type=int, help='Random seed')
    parser.add_argument('--output-dir', help='Directory for the .npy output')
    args = parser.parse_args(argv)

    # Load configuration
    try:
        config = Config.load(
            args.config,
            mu=args.mu,
            kappa=args.kappa,
            num_samples=args.num_samples,
            backend=args.backend,
            seed=args.seed,
            output_dir=args.output_dir,
        )
    except ValidationError as e:
        setup_logging("error")
        logger.error("Invalid configuration: %s", e)
        return 1
    setup_logging(config.verbosity)

    try:
        generate_samples(config)
    except InvalidParameter as e:
        logger.error("Invalid parameter %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
