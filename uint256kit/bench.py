"""Micro-benchmarks for the 256-bit integer operations."""

from __future__ import annotations

import argparse
import random
import sys
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from . import modarith
from .fp256 import LIMB_BITS, NUM_LIMBS, Fp256
from .mont import MontContext

NUM = 8
"""Number of prepared operand sets each benchmark cycles through."""

DEFAULT_ITERATIONS = 10_000

_HEX_CHARS = "0123456789abcdef"


def _rand_limbs(rng: random.Random, nlimbs: int) -> Fp256:
    """A random value of at most ``nlimbs`` 64-bit limbs."""
    return Fp256(rng.getrandbits(LIMB_BITS * nlimbs) if nlimbs else 0)


def _rand_nonzero(rng: random.Random) -> Fp256:
    while True:
        value = _rand_limbs(rng, NUM_LIMBS)
        if not value.is_zero():
            return value


def _rand_odd(rng: random.Random) -> Fp256:
    while True:
        value = _rand_limbs(rng, NUM_LIMBS)
        if value.is_odd():
            return value


@dataclass(frozen=True)
class Benchmark:
    """A named operation with a generator of operand sets."""

    name: str
    setup: Callable[[random.Random], Sequence[Any]]
    run: Callable[[Any], Any]


@dataclass(frozen=True)
class BenchResult:
    """Timing of one benchmark run."""

    name: str
    iterations: int
    elapsed_ns: int

    @property
    def ns_per_op(self) -> int:
        return self.elapsed_ns // self.iterations

    @property
    def ops_per_second(self) -> int:
        return self.iterations * 1_000_000_000 // max(self.elapsed_ns, 1)


# operand generators


def _pairs(rng: random.Random) -> list[tuple[Fp256, Fp256]]:
    return [(_rand_limbs(rng, 4), _rand_limbs(rng, 4)) for _ in range(NUM)]


def _singles(rng: random.Random) -> list[Fp256]:
    return [_rand_limbs(rng, 4) for _ in range(NUM)]


def _hex_strings(rng: random.Random) -> list[str]:
    return ["".join(rng.choices(_HEX_CHARS, k=rng.randrange(64))) for _ in range(NUM)]


def _div_operands(rng: random.Random) -> list[tuple[Fp256, Fp256]]:
    items = []
    for _ in range(NUM):
        while True:
            num = _rand_limbs(rng, 4)
            div = _rand_limbs(rng, rng.randrange(5))
            if not num.is_zero() and not div.is_zero() and num.cmp(div) >= 0:
                items.append((num, div))
                break
    return items


def _inv_operands(rng: random.Random) -> list[tuple[Fp256, Fp256]]:
    items = []
    for _ in range(NUM):
        while True:
            a = _rand_limbs(rng, 4)
            m = _rand_limbs(rng, 4)
            if not a.is_zero() and not m.is_zero() and a.is_coprime(m):
                items.append((a, m))
                break
    return items


def _binary_mod_operands(rng: random.Random) -> list[tuple[Fp256, Fp256, Fp256]]:
    return [(_rand_limbs(rng, 4), _rand_limbs(rng, 4), _rand_nonzero(rng)) for _ in range(NUM)]


def _unary_mod_operands(rng: random.Random) -> list[tuple[Fp256, Fp256]]:
    return [(_rand_limbs(rng, 4), _rand_nonzero(rng)) for _ in range(NUM)]


def _exp_operands(rng: random.Random) -> list[tuple[Fp256, Fp256, Fp256]]:
    return [(_rand_limbs(rng, 4), _rand_limbs(rng, 4), _rand_odd(rng)) for _ in range(NUM)]


def _mont_mul_operands(rng: random.Random) -> list[tuple[Fp256, Fp256, MontContext]]:
    return [
        (_rand_limbs(rng, 4), _rand_limbs(rng, 4), MontContext(_rand_odd(rng), NUM_LIMBS))
        for _ in range(NUM)
    ]


def _mont_sqr_operands(rng: random.Random) -> list[tuple[Fp256, MontContext]]:
    return [(_rand_limbs(rng, 4), MontContext(_rand_odd(rng), NUM_LIMBS)) for _ in range(NUM)]


def benchmarks() -> tuple[Benchmark, ...]:
    """All benchmarks, in the order they are run."""
    return (
        Benchmark("fp256_add", _pairs, lambda ab: ab[0].add(ab[1])),
        Benchmark("ll_u256_add", _pairs, lambda ab: ab[0].value + ab[1].value),
        Benchmark("fp256_convert", _hex_strings, Fp256.from_hex),
        Benchmark("fp256_div", _div_operands, lambda nd: nd[0].div(nd[1])),
        Benchmark("fp256_naive_div", _div_operands, lambda nd: nd[0].naive_div(nd[1])),
        Benchmark("fp256_gcd", _pairs, lambda ab: ab[0].gcd(ab[1])),
        Benchmark("fp256_mod_inv", _inv_operands, lambda am: modarith.mod_inv(*am)),
        Benchmark("fp256_mullo", _pairs, lambda ab: ab[0].mullo(ab[1])),
        Benchmark("ll_u256_mul", _pairs, lambda ab: ab[0].mul(ab[1])),
        Benchmark("fp256_shift", _singles, lambda a: Fp256(a.value >> 30)),
        Benchmark("fp256_sqrlo", _singles, Fp256.sqrlo),
        Benchmark("ll_u256_sqr", _singles, Fp256.sqr),
        Benchmark("fp256_mod_add", _binary_mod_operands, lambda abm: modarith.mod_add(*abm)),
        Benchmark("fp256_mod_mul", _binary_mod_operands, lambda abm: modarith.mod_mul(*abm)),
        Benchmark("fp256_mod_sqr", _unary_mod_operands, lambda am: modarith.mod_sqr(*am)),
        Benchmark("fp256_mod_exp", _exp_operands, lambda aem: modarith.mod_exp(*aem)),
        Benchmark("fp256_mont_mul", _mont_mul_operands, lambda abc: abc[2].mul(abc[0], abc[1])),
        Benchmark("fp256_mont_sqr", _mont_sqr_operands, lambda ac: ac[1].sqr(ac[0])),
    )


def run_benchmark(benchmark: Benchmark, iterations: int) -> BenchResult:
    """Prepare fresh operands and time ``iterations`` calls of the operation."""
    if iterations <= 0:
        raise ValueError(f"iterations must be positive, got {iterations}")
    data = list(benchmark.setup(random.Random()))
    if not data:
        raise ValueError(f"benchmark {benchmark.name!r} produced no operands")
    run = benchmark.run
    count = len(data)
    start = time.perf_counter_ns()
    for i in range(iterations):
        run(data[i % count])
    elapsed = time.perf_counter_ns() - start
    return BenchResult(benchmark.name, iterations, elapsed)


def run_benchmark_threads(
    benchmark: Benchmark, iterations: int, threads: int
) -> list[BenchResult]:
    """Run the benchmark in ``threads`` threads at once, one result per thread."""
    if threads <= 0:
        raise ValueError(f"threads must be positive, got {threads}")
    if iterations <= 0:
        raise ValueError(f"iterations must be positive, got {iterations}")
    with ThreadPoolExecutor(max_workers=threads) as pool:
        futures = [pool.submit(run_benchmark, benchmark, iterations) for _ in range(threads)]
        return [future.result() for future in futures]


def format_result(result: BenchResult) -> str:
    """Human-readable lines for one result."""
    return (
        f"op/s      : {result.ops_per_second}\n"
        f"time/op   : {result.ns_per_op} ns\n"
    )


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    names = [bench.name for bench in benchmarks()]
    parser = argparse.ArgumentParser(
        prog="uint256kit-bench", description="Time the 256-bit integer operations."
    )
    parser.add_argument(
        "names",
        nargs="*",
        choices=names,
        metavar="NAME",
        help="benchmarks to run (default: all); one of: " + ", ".join(names),
    )
    parser.add_argument(
        "-n", "--iterations", type=int, default=DEFAULT_ITERATIONS,
        help="operations per run",
    )
    parser.add_argument(
        "-t", "--threads", type=int, default=0,
        help="also run in this many threads at once",
    )
    args = parser.parse_args(argv)
    if args.iterations <= 0:
        parser.error("iterations must be positive")
    if args.threads < 0:
        parser.error("threads must not be negative")
    return args


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)
    wanted = set(args.names)
    for bench in benchmarks():
        if wanted and bench.name not in wanted:
            continue
        print(f"------------ {bench.name} ------------ ")
        print(f"singlethread N = {args.iterations}\n")
        print(format_result(run_benchmark(bench, args.iterations)))
        if args.threads > 0:
            print(f"multithread T = {args.threads}\n")
            for result in run_benchmark_threads(bench, args.iterations, args.threads):
                print(format_result(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())