"""
Benchmark suite for lsonlib parsing and encoding performance.

Compares the JSON reader and writer against other JSON libraries:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

and measures the LSON reader and writer on the same data shapes.
"""
