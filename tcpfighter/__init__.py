"""Building blocks for a sector-based TCP fighting game server: buffers, packets, pools, logging, profiling and player logic."""

__version__ = "0.1.0"