import math
from pathlib import Path

import pytest
from pydantic import ValidationError

from vonmises.config import Config

BASE_CONFIG = Path(__file__).parents[1] / "configs" / "base.yaml"


def test_defaults():
    config = Config()
    assert config.mu == 0.0
    assert config.kappa == 1.0
    assert config.num_samples == 1000
    assert config.backend == "numpy"
    assert config.seed == 42
    assert config.wandb_project is None


def test_base_yaml_matches_defaults():
    assert Config.load(str(BASE_CONFIG)) == Config()


def test_load_merges_yaml(tmp_path):
    path = tmp_path / "run.yaml"
    path.write_text("kappa: 12.5\nbackend: torch\nseed: 7\n")
    config = Config.load(str(path))
    assert config.kappa == 12.5
    assert config.backend == "torch"
    assert config.seed == 7
    # untouched fields keep their defaults
    assert config.num_samples == 1000


def test_overrides_win_and_none_is_skipped(tmp_path):
    path = tmp_path / "run.yaml"
    path.write_text("kappa: 12.5\nnum_samples: 10\n")
    config = Config.load(str(path), kappa=3.0, num_samples=None, mu=-1.0)
    assert config.kappa == 3.0
    assert config.num_samples == 10
    assert config.mu == -1.0


@pytest.mark.parametrize(
    "values",
    [
        {"mu": 4.0},
        {"mu": -math.pi - 0.01},
        {"kappa": -1.0},
        {"num_samples": 0},
        {"backend": "jax"},
        {"verbosity": "loud"},
        {"seed": -3},
    ],
)
def test_invalid_values(values):
    with pytest.raises(ValidationError):
        Config(**values)


def test_invalid_yaml_values(tmp_path):
    path = tmp_path / "run.yaml"
    path.write_text("mu: 4.0\n")
    with pytest.raises(ValidationError):
        Config.load(str(path))


def test_unknown_key_rejected(tmp_path):
    path = tmp_path / "run.yaml"
    path.write_text("dimension: 3\n")
    with pytest.raises(ValidationError):
        Config.load(str(path))


def test_to_dict_round_trip():
    config = Config(kappa=2.0, wandb_project="vonmises")
    assert Config(**config.to_dict()) == config
