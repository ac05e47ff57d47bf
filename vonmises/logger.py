import logging

import wandb

from .config import Config

logger = logging.getLogger(__name__)


def setup_logging(level: str):
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format='%(asctime)s - %(levelname)s - %(message)s'
    )


class SamplingLogger:
    """Logger for von Mises sampling runs with wandb tracking."""

    def __init__(self, config: Config):
        """
        Initialize logger.

        Parameters
        ----------
        config : Config
        """
        if not config.wandb_project:
            raise ValueError("wandb_project must be set to use SamplingLogger")

        self.config = config
        self.run = wandb.init(
            project=self.config.wandb_project,
            mode='offline' if self.config.wandb_offline else 'online',
            config=self.config.to_dict()
        )
        logger.info("wandb initialized for project: %s", self.config.wandb_project)

    def log_run(self, results: dict[str, float | str]):
        """
        Log the results of one sampling run.

        Parameters
        ----------
        results : dict
            Summary statistics and timings of the run.
        """
        result = {
            'mu': self.config.mu,
            'kappa': self.config.kappa,
            'num_samples': self.config.num_samples,
            'backend': self.config.backend,
            'seed': self.config.seed,
            **results
        }
        self.run.log(result)

    def finish(self):
        """Clean up and finish logging."""
        self.run.finish()
