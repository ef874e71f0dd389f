#!/usr/bin/env python3
"""
Benchmark: growth of parse time with input size.

many() accumulates into one list and the input is an offset view, so
doubling the input should roughly double the time.

Usage:
    python benchmarks/bench_scaling.py
"""

import time

from pycombinator import digit, literal_string, many, run_parser, sep_by, some, token, natural


def benchmark(parser, data):
    start = time.perf_counter()
    result = run_parser(parser, data)
    elapsed = time.perf_counter() - start
    if not result:
        print(f"No parse for input of length {len(data)}")
        return None
    return elapsed * 1000  # Convert to milliseconds


def report(title, parser, make_input):
    print(title)
    print(f"{'Input (n)':>12} | {'Time (ms)':>12} | {'Time per item (µs)':>18} | {'Growth':>8}")
    print("-" * 60)
    prev_time = None
    for n in [1000, 2000, 4000, 8000, 16000]:
        elapsed = benchmark(parser, make_input(n))
        if elapsed is None:
            continue
        growth = f"{elapsed / prev_time:.1f}x" if prev_time else "baseline"
        print(f"{n:>12,} | {elapsed:>12.2f} | {elapsed * 1000 / n:>18.2f} | {growth:>8}")
        prev_time = elapsed
    print()


def main():
    print("=" * 60)
    print("pycombinator scaling benchmark (expect ~2x growth per row)")
    print("=" * 60)
    report("some(digit())", some(digit()), lambda n: "1" * n)
    report("many(literal_string('ab'))", many(literal_string("ab")), lambda n: "ab" * n)
    report("sep_by(token(natural()), ',')",
           sep_by(token(natural()), literal_string(",")),
           lambda n: ", ".join("42" for _ in range(n)))


if __name__ == "__main__":
    main()
