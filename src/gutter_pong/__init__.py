"""
Gutter Pong: a two-paddle ball game on mini-arcade-core.
"""

__version__ = "0.1.0"
