"""Train and car travel-time estimates between two places."""

__version__ = "0.1.0"
