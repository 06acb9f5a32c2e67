"""
Benchmark suite for jsontree parsing performance.

Times tree construction, escape decoding, number precision and profiling
overhead, with the standard library json, orjson and ujson as a yardstick.
Run with `pytest benchmarks/ --benchmark-only`.
"""
