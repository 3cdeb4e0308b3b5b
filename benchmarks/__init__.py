"""Performance benchmarks for indexgraph.

This package contains microbenchmarks for the graph algorithms, comparing
the linear-scan and heap-based Dijkstra variants and Prim's MST on both
storage backends.
"""
