"""Reverse Words API.

A small HTTP service that reverses words, reports its release, answers
liveness probes and exposes Prometheus counters of its own usage.
"""

__version__ = "1.0.0"
