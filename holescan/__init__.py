"""Bullet hole detection: bright-blob segmentation with marker-controlled watershed."""

__version__ = "0.1.0"
