from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any

import pandas as pd
import tqdm

from vonmises.benchmark import run_benchmark
from vonmises.config import Config
from vonmises.logger import setup_logging

logger = logging.getLogger(__name__)

DEFAULT_SEEDS = [0, 1]
DEFAULT_KAPPAS = [0.0, 0.5, 1.3, 2.0, 10.0, 100.0]
DEFAULT_BACKENDS = ["numpy", "torch"]
NUM_SAMPLES = 10_000
MU = 0.0

AGGREGATE_SEEDS = True
DISPLAY_MEAN_STD = True


def _format_mean_std(df: pd.DataFrame) -> pd.DataFrame:
    mean = df["time_s_mean"]
    std = df["time_s_std"]
    formatted = mean.map("{:.6f}".format) + " ± " + std.map("{:.6f}".format)
    return df.assign(time_s=formatted).drop(columns=["time_s_mean", "time_s_std"])


def _parse_int_list(value: str) -> list[int]:
    return [int(item) for item in value.split(",") if item]


def _parse_float_list(value: str) -> list[float]:
    return [float(item) for item in value.split(",") if item]


def _parse_str_list(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _run_backend(
    backend: str,
    kappas: list[float],
    seeds: list[int],
    num_samples: int,
    min_run_time: float,
) -> list[dict[str, Any]]:
    rows = []
    for kappa in tqdm.tqdm(kappas, desc=f"Running benchmark for {backend}"):
        for seed in seeds:
            config = Config(mu=MU, kappa=kappa, num_samples=num_samples, backend=backend, seed=seed)
            timing = run_benchmark(config, min_run_time=min_run_time)
            rows.append(
                {
                    "backend": backend,
                    "kappa": kappa,
                    "seed": seed,
                    "num_samples": num_samples,
                    "time_s": timing["mean_time"],
                    "samples_per_s": timing["samples per second"],
                }
            )
    return rows


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark von Mises samplers.")
    parser.add_argument("--kappas", type=_parse_float_list, default=DEFAULT_KAPPAS, help="Comma-separated kappas.")
    parser.add_argument("--seeds", type=_parse_int_list, default=DEFAULT_SEEDS, help="Comma-separated seeds.")
    parser.add_argument("--backends", type=_parse_str_list, default=DEFAULT_BACKENDS, help="Comma-separated backends.")
    parser.add_argument("--num-samples", type=int, default=NUM_SAMPLES, help="Samples per call.")
    parser.add_argument("--min-run-time", type=float, default=1.0, help="Seconds per measurement.")
    parser.add_argument("--output", type=Path, help="CSV output path.")
    args = parser.parse_args()

    setup_logging("info")

    rows: list[dict[str, Any]] = []
    for backend in args.backends:
        rows.extend(_run_backend(backend, args.kappas, args.seeds, args.num_samples, args.min_run_time))

    df = pd.DataFrame(rows)
    if args.output is not None:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(args.output, index=False)
        logger.info("Wrote %d rows to %s", len(df), args.output)

    df = df.set_index(["backend", "kappa", "seed"]).sort_index()

    if not AGGREGATE_SEEDS:
        print(df)
        return

    grouped = df.groupby(level=["backend", "kappa"])
    stats = grouped.agg(
        time_s_mean=("time_s", "mean"),
        time_s_std=("time_s", "std"),
        samples_per_s=("samples_per_s", "mean"),
    )

    if DISPLAY_MEAN_STD:
        stats = _format_mean_std(stats)
    print(stats)


if __name__ == "__main__":
    main()
