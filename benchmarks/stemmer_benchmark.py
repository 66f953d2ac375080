#!/usr/bin/env python3
"""
Stemmer Throughput Benchmark

Stems a synthetic vocabulary built from common English roots and suffixes
and reports words per second for:
1. stem_lower (no case restoration)
2. stem (with case restoration)
3. The published rules alone (no irregular table)

Also reports how much the vocabulary collapses: distinct surface forms vs
distinct stems.
"""

import random
import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from porterstem import PorterStemmer, StemmerConfig

ROOTS = [
    "connect", "relate", "condition", "general", "hope", "run", "adopt",
    "electric", "form", "good", "agree", "happy", "analog", "radical",
    "communicate", "sense", "allow", "revive", "control", "probate",
]

SUFFIXES = [
    "", "s", "es", "ed", "ing", "ion", "ions", "al", "ally", "ness",
    "ful", "ive", "ize", "ization", "able", "ment", "er", "ers",
]


def build_vocabulary(size: int, seed: int = 42) -> list[str]:
    rng = random.Random(seed)
    words = []
    for _ in range(size):
        word = rng.choice(ROOTS) + rng.choice(SUFFIXES)
        if rng.random() < 0.2:
            word = word.capitalize()
        words.append(word)
    return words


def time_run(fn, words: list[str]) -> tuple[float, list[str]]:
    start = time.perf_counter()
    out = [fn(w) for w in words]
    return time.perf_counter() - start, out


def main():
    size = int(sys.argv[1]) if len(sys.argv) > 1 else 100_000
    words = build_vocabulary(size)

    print("\n" + "=" * 60)
    print("STEMMER THROUGHPUT BENCHMARK")
    print(f"{size:,} words")
    print("=" * 60)

    stemmer = PorterStemmer()
    published = PorterStemmer(StemmerConfig.published())

    runs = [
        ("stem_lower", stemmer.stem_lower),
        ("stem (case restored)", stemmer.stem),
        ("published rules", published.stem_lower),
    ]

    print(f"{'Mode':<25} {'Seconds':<12} {'Words/sec':<12}")
    print("-" * 60)
    stems = None
    for name, fn in runs:
        elapsed, out = time_run(fn, words)
        if stems is None:
            stems = out
        print(f"{name:<25} {elapsed:<12.3f} {size / elapsed:<12,.0f}")

    surface = len({w.lower() for w in words})
    distinct = len(set(stems))
    print(f"\nDistinct surface forms: {surface}")
    print(f"Distinct stems:         {distinct} ({distinct / surface:.1%})")


if __name__ == "__main__":
    main()
