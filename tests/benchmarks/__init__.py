"""Benchmarks package – uses pytest-benchmark (``pip install -e .[bench]``).

Benchmark modules are named ``bench_*.py`` so the default test run skips
them. Run them by path::

    pytest tests/benchmarks/bench_dispatcher.py -v --benchmark-sort=median
"""
