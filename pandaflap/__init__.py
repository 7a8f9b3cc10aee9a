"""A flappy-bird style arcade game with start, menu, clock and portrait screens."""

__version__ = "0.1.0"