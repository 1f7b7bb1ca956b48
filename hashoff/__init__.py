"""A chained hash table, hash functions, and console tools for exploring and timing it."""

__version__ = "0.1.0"