"""Records, group matching, topic selection, partitioning and headers for BMP collector messages."""

__version__ = "0.1.0"