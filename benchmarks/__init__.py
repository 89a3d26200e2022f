"""
Benchmark suite for kvparse line parsing performance.

Compares kvparse against JSON decoders reading the same pairs:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Measures parsing speed and memory usage across different line shapes.
"""
