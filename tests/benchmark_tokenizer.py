"""Benchmarks for the tokenizer's output allocation strategies.

Compares pre-sized, density-adjusted output slots against plain list growth
on inputs from a few bytes to several megabytes.

Boundary rules are evaluated per character in Python, so throughput is
in the hundreds of kilobytes per second; a multi-megabyte input takes
seconds to tokenize.

Usage:
    # Run with defaults and print a table
    python -m tests.benchmark_tokenizer

    # Larger corpus, more repeats, save results
    python -m tests.benchmark_tokenizer --scale 2000 --repeats 5 --save results.json
"""

from __future__ import annotations

import argparse
import json
import time
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import List

from unicode_tokenizer import UnicodeTokenizer

SAMPLE_PATH = Path(__file__).parent / "data" / "sample.txt"


@dataclass
class BenchmarkResult:
    """Timing for one strategy on one input."""

    name: str
    input_bytes: int
    tokens: int
    best_ms: float
    mean_ms: float
    mb_per_s: float


def build_inputs(scale: int) -> dict[str, bytes]:
    sample = SAMPLE_PATH.read_bytes()
    return {
        "tiny": b"Hello World",
        "sample": sample,
        "multilingual": sample * scale,
        "dense": b"a " * (len(sample) * scale // 2),
        "sparse": (b"x" * 200 + b" ") * (len(sample) * scale // 201),
    }


def run_case(name: str, tokenizer: UnicodeTokenizer, data: bytes, repeats: int) -> BenchmarkResult:
    timings = []
    tokens = 0
    for _ in range(repeats):
        start = time.perf_counter()
        tokens = len(tokenizer.tokenize(data))
        timings.append(time.perf_counter() - start)

    best = min(timings)
    mean = sum(timings) / len(timings)
    return BenchmarkResult(
        name=name,
        input_bytes=len(data),
        tokens=tokens,
        best_ms=best * 1000,
        mean_ms=mean * 1000,
        mb_per_s=(len(data) / 1e6) / best if best > 0 else float("inf"),
    )


def run_all(scale: int, repeats: int) -> List[BenchmarkResult]:
    strategies = {
        "adaptive": UnicodeTokenizer(adaptive=True),
        "plain": UnicodeTokenizer(adaptive=False),
    }
    results = []
    for input_name, data in build_inputs(scale).items():
        for strategy_name, tokenizer in strategies.items():
            results.append(
                run_case(f"{input_name}/{strategy_name}", tokenizer, data, repeats)
            )
    return results


def print_table(results: List[BenchmarkResult]) -> None:
    print(f"{'case':<24}{'bytes':>12}{'tokens':>10}{'best ms':>12}{'mean ms':>12}{'MB/s':>10}")
    for r in results:
        print(
            f"{r.name:<24}{r.input_bytes:>12}{r.tokens:>10}"
            f"{r.best_ms:>12.2f}{r.mean_ms:>12.2f}{r.mb_per_s:>10.2f}"
        )


def main() -> None:
    parser = argparse.ArgumentParser(description="Tokenizer allocation benchmarks")
    parser.add_argument("--scale", type=int, default=200, help="Sample repetitions for large inputs")
    parser.add_argument("--repeats", type=int, default=3, help="Timed runs per case")
    parser.add_argument("--save", type=Path, help="Write results to a JSON file")
    args = parser.parse_args()

    results = run_all(args.scale, args.repeats)
    print_table(results)

    if args.save:
        with open(args.save, "w") as f:
            json.dump([asdict(r) for r in results], f, indent=2)
        print(f"\nSaved results to {args.save}")


if __name__ == "__main__":
    main()
