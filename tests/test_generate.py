import math

import numpy as np

import generate


def test_generate_writes_samples(tmp_path):
    code = generate.main([
        "--kappa", "2.0",
        "--mu", "1.0",
        "--num-samples", "50",
        "--seed", "3",
        "--output-dir", str(tmp_path),
    ])
    assert code == 0

    outputs = list(tmp_path.glob("*.npy"))
    assert len(outputs) == 1
    assert "seed3" in outputs[0].name
    samples = np.load(outputs[0])
    assert samples.shape == (50,)
    assert np.all((samples > -math.pi) & (samples <= math.pi))


def test_generate_is_reproducible(tmp_path):
    args = ["--num-samples", "20", "--seed", "9"]
    generate.main(args + ["--output-dir", str(tmp_path / "a")])
    generate.main(args + ["--output-dir", str(tmp_path / "b")])
    (a,) = (tmp_path / "a").glob("*.npy")
    (b,) = (tmp_path / "b").glob("*.npy")
    np.testing.assert_array_equal(np.load(a), np.load(b))


def test_generate_with_config_file(tmp_path):
    config = tmp_path / "run.yaml"
    config.write_text(f"kappa: 0.0\nnum_samples: 5\nbackend: torch\noutput_dir: {tmp_path / 'out'}\n")
    assert generate.main(["--config", str(config)]) == 0
    (output,) = (tmp_path / "out").glob("*.npy")
    assert np.load(output).shape == (5,)


def test_generate_rejects_invalid_parameters(tmp_path):
    assert generate.main(["--mu", "4.0", "--output-dir", str(tmp_path)]) == 1
    assert generate.main(["--kappa", "-1", "--output-dir", str(tmp_path)]) == 1
    assert generate.main(["--num-samples", "0", "--output-dir", str(tmp_path)]) == 1
    assert not list(tmp_path.glob("*.npy"))
