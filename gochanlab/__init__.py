"""Thread-based concurrency building blocks (channels, rate limiters, contexts, worker pools) and runnable demos."""

__version__ = "0.1.0"