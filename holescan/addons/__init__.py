"""
Add-ons package for hole detection results.

Provides helper functions for:
- overlay rendering
- CSV / JSON export
- radius histogram plots
"""

# ---- Overlay ----
from .overlay import render_overlay

# ---- Export ----
from .csv_ext import write_csv_blobs, to_json

# ---- Plots ----
from .plots import save_radius_histogram


__all__ = [
    "render_overlay",
    "write_csv_blobs", "to_json",
    "save_radius_histogram",
]
