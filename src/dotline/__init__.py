"""Dotline — rules engine for a two-player line-drawing game."""

__version__ = "0.1.0"
