from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest
import torch

from vonmises.sampler import VonMisesSampler
from vonmises.source import Backend, make_source
from vonmises.uniform_numpy import NumpyUniformSource
from vonmises.uniform_source import UniformSource, entropy_seed
from vonmises.uniform_torch import TorchUniformSource


@pytest.mark.parametrize("source_cls", [NumpyUniformSource, TorchUniformSource])
def test_draws_in_unit_interval(source_cls):
    source = source_cls(seed=0)
    draws = np.array([source.uniform() for _ in range(2000)])
    pairs = np.array([source.uniform_pair() for _ in range(2000)])
    assert np.all((draws >= 0.0) & (draws < 1.0))
    assert np.all((pairs >= 0.0) & (pairs < 1.0))
    assert pairs.shape == (2000, 2)
    # crude check that the stream is not degenerate
    assert 0.45 < draws.mean() < 0.55


@pytest.mark.parametrize("source_cls", [NumpyUniformSource, TorchUniformSource])
def test_same_seed_same_stream(source_cls):
    a = source_cls(seed=77)
    b = source_cls(seed=77)
    assert [a.uniform_pair() for _ in range(50)] == [b.uniform_pair() for _ in range(50)]


@pytest.mark.parametrize("source_cls", [NumpyUniformSource, TorchUniformSource])
def test_reseed_restarts_stream(source_cls):
    source = source_cls(seed=5)
    first = [source.uniform() for _ in range(10)]
    source.reseed(5)
    assert [source.uniform() for _ in range(10)] == first
    assert source.seed == 5


def test_torch_source_leaves_global_state_alone():
    torch.manual_seed(0)
    expected = torch.rand(3)
    torch.manual_seed(0)
    TorchUniformSource(seed=123).uniform_pair()
    assert torch.equal(torch.rand(3), expected)


def test_entropy_seed_differs_between_calls():
    seeds = {entropy_seed() for _ in range(20)}
    assert len(seeds) == 20
    assert all(0 <= seed < 2**64 for seed in seeds)


@pytest.mark.parametrize("source_cls", [NumpyUniformSource, TorchUniformSource])
def test_unseeded_sources_get_distinct_seeds(source_cls):
    a = source_cls()
    b = source_cls()
    assert a.seed is not None and b.seed is not None
    assert a.seed != b.seed


@pytest.mark.parametrize("seed", [-1, 1.5, "3", True])
def test_invalid_seed(seed):
    with pytest.raises(ValueError, match="seed"):
        NumpyUniformSource(seed=seed)


def test_numpy_integer_seed():
    assert NumpyUniformSource(seed=np.int32(4)).seed == 4


def test_base_class_is_abstract():
    with pytest.raises(NotImplementedError):
        UniformSource(seed=0)


@pytest.mark.parametrize(
    "kwargs, expected",
    [
        ({}, NumpyUniformSource),
        ({"backend": "numpy"}, NumpyUniformSource),
        ({"backend": "NumPy"}, NumpyUniformSource),
        ({"backend": Backend.NUMPY}, NumpyUniformSource),
        ({"backend": "torch"}, TorchUniformSource),
        ({"backend": Backend.TORCH}, TorchUniformSource),
        ({"device": "cpu"}, TorchUniformSource),
    ],
)
def test_make_source_dispatch(kwargs, expected):
    source = make_source(seed=1, **kwargs)
    assert type(source) is expected
    assert source.seed == 1


def test_make_source_unknown_backend():
    with pytest.raises(ValueError, match="Unknown backend"):
        make_source("jax")


def test_make_source_device_requires_torch():
    with pytest.raises(ValueError, match="device"):
        make_source("numpy", device="cpu")


def test_per_thread_sources_are_independent():
    def run(seed):
        sampler = VonMisesSampler(mu=0.2, kappa=3.0, seed=seed)
        return sampler.sample(2000)

    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(run, [10, 10, 10, 10]))

    for result in results[1:]:
        np.testing.assert_array_equal(result, results[0])
