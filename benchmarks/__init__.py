"""Performance benchmarks for graphkit.

This package contains microbenchmarks for hot paths in the library,
comparing the dense and sparse storage backends.
"""
