#!/usr/bin/env python3
"""
HoohashV110 — Benchmark Suite

Measures hashes per second on 80-byte block headers and compares against
the plain hashes a miner would otherwise run:
  Proof-of-work:  HoohashV110 (Python), HoohashV110 (C)
  Baselines:      BLAKE3, SHA-256d
"""

import os
import sys
import time
import struct
import hashlib

from blake3 import blake3

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from hoohash.hoohashv110 import hoohashv110, HEADER_SIZE
from hoohash import hoohashv110_c


def bench(name, func, headers, iterations):
    for h in headers[:min(5, iterations)]:
        func(h)

    start = time.perf_counter()
    for i in range(iterations):
        func(headers[i % len(headers)])
    elapsed = time.perf_counter() - start

    ms_per_iter = (elapsed / iterations) * 1000
    hashes_per_sec = iterations / elapsed if elapsed > 0 else 0

    return {
        'name': name,
        'ms_per_iter': ms_per_iter,
        'hashes_per_sec': hashes_per_sec,
        'total_time': elapsed,
        'iterations': iterations,
    }


def hash_blake3(data): return blake3(data).digest()
def hash_sha256d(data): return hashlib.sha256(hashlib.sha256(data).digest()).digest()


def make_headers(count):
    base = bytearray(os.urandom(HEADER_SIZE))
    headers = []
    for nonce in range(count):
        struct.pack_into('<I', base, 76, nonce)
        headers.append(bytes(base))
    return headers


def run_benchmark(iterations):
    headers = make_headers(256)

    print(f"\n{'='*72}")
    print(f"  Benchmark: {HEADER_SIZE} B headers | {iterations} iterations")
    print(f"{'='*72}")
    print(f"  {'Algorithm':<28} {'ms/hash':>10} {'hash/s':>14}")
    print(f"  {'-'*28} {'-'*10} {'-'*14}")

    algorithms = []
    if hoohashv110_c.is_using_c_library():
        algorithms.append(('HoohashV110 (C)', hoohashv110_c.hoohashv110))
    algorithms.append(('HoohashV110 (Python)', hoohashv110))
    algorithms.append(('BLAKE3', hash_blake3))
    algorithms.append(('SHA-256d', hash_sha256d))

    results = []
    for name, func in algorithms:
        iters = max(1, iterations // 100) if 'Python' in name else iterations
        r = bench(name, func, headers, iters)
        results.append(r)
        marker = '***' if 'Hoohash' in name else '   '
        print(f"  {marker} {name:<25} {r['ms_per_iter']:>9.3f}ms {r['hashes_per_sec']:>13.1f}")

    return results


def print_ranking(results):
    print(f"\n{'='*72}")
    print("  RANKING (by hash rate)")
    print(f"{'='*72}")

    blake3_rate = next((r['hashes_per_sec'] for r in results if r['name'] == 'BLAKE3'), 1) or 1
    for r in sorted(results, key=lambda x: x['hashes_per_sec'], reverse=True):
        ratio = r['hashes_per_sec'] / blake3_rate
        print(f"    {r['name']:<28} {r['hashes_per_sec']:>12.1f} hash/s  {ratio:>9.5f}x BLAKE3")


if __name__ == '__main__':
    print("=" * 72)
    print("  HoohashV110 — Performance Benchmark")
    print("=" * 72)

    if hoohashv110_c.is_using_c_library():
        print("\n  [OK] C library loaded")
    else:
        print("\n  [WARN] C library not available, native row skipped")

    iterations = int(sys.argv[1]) if len(sys.argv) > 1 else 10000
    results = run_benchmark(iterations)
    print_ranking(results)

    print(f"\n{'='*72}")
    print("  Benchmark complete.")
    print(f"{'='*72}")
