"""Performance benchmarks for quantum-sim.

This package contains microbenchmarks for hot paths in the library:
bitmask gate application, the dense reference path and shot sampling.
"""
