"""Benchmarks for gqlcheck

The benchmarks use pytest-benchmark. You can run them only as tests with
--benchmark-disable if you do not need the timings.

E.g. in order to execute all the benchmarks::

    pytest tests/benchmarks --benchmark-enable
"""
