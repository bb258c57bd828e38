"""Classic collections, searches and sorts, timing benchmarks, and a city temperature CSV reader."""

__version__ = "0.1.0"