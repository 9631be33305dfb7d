"""Error types raised by the detection pipeline."""

from __future__ import annotations


class InvalidInputError(ValueError):
    """Empty, undecodable or malformed image; raised before any stage runs."""
