"""Full-text proximity search over a small catalog of paged documents."""

__version__ = "0.1.0"
