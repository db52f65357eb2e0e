"""Iterator adaptors and helpers: lazy grouping and chunking, combinations, merging, products, extrema sets and duplicates."""

__version__ = "0.1.0"