#!/usr/bin/env python3
"""
Code engine and ancestry performance benchmarks.

Measures code generation, derivation and ancestry matching.
"""

import time
from collections.abc import Callable
from typing import Any

from errcode_python import GeneralError, combine_codes, generate_code


def _measure(name: str, iterations: int, fn: Callable[[int], Any]) -> dict[str, Any]:
    start = time.perf_counter()
    for i in range(iterations):
        fn(i)
    elapsed = time.perf_counter() - start

    return {
        "name": name,
        "iterations": iterations,
        "elapsed_seconds": elapsed,
        "throughput_ops": iterations / elapsed,
        "latency_us": (elapsed / iterations) * 1_000_000,
    }


def benchmark_generate(iterations: int = 100000) -> dict[str, Any]:
    """Benchmark hashing labels into codes."""
    return _measure("generate_code", iterations, lambda i: generate_code(f"label-{i}"))


def benchmark_combine(iterations: int = 100000) -> dict[str, Any]:
    """Benchmark combining two codes."""
    a = generate_code("general error")
    b = generate_code("descendant of general error")
    return _measure("combine_codes", iterations, lambda _: combine_codes(a, b))


def benchmark_sub_type(iterations: int = 50000) -> dict[str, Any]:
    """Benchmark deriving subtypes."""
    root = GeneralError.new_root("bench root")
    return _measure(
        "sub_type", iterations, lambda i: root.produce().sub_type(f"child-{i}").make()
    )


def benchmark_is_deep(iterations: int = 20000, depth: int = 20) -> dict[str, Any]:
    """Benchmark matching the root from a deep chain."""
    root = GeneralError.new_root("bench root")
    node = root
    for level in range(depth):
        node = node.produce().sub_type(f"level-{level}").make()
    leaf = node
    return _measure(f"is_ (depth={depth})", iterations, lambda _: leaf.is_(root))


def benchmark_render(iterations: int = 100000) -> dict[str, Any]:
    """Benchmark cached rendering."""
    err = GeneralError.new_root("bench root").produce().message("cached").make()
    return _measure("render (cached)", iterations, lambda _: str(err))


def main() -> None:
    """Run all benchmarks and print a table."""
    results = [
        benchmark_generate(),
        benchmark_combine(),
        benchmark_sub_type(),
        benchmark_is_deep(),
        benchmark_render(),
    ]

    print(f"{'Benchmark':<24} {'ops/s':>14} {'latency (us)':>14}")
    print("-" * 54)
    for r in results:
        print(f"{r['name']:<24} {r['throughput_ops']:>14,.0f} {r['latency_us']:>14.2f}")


if __name__ == "__main__":
    main()
