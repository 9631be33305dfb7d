"""Radius histogram export (matplotlib, headless)."""

from __future__ import annotations
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np


def save_radius_histogram(path: str, radii: np.ndarray, bins: int = 20) -> None:
    """Save a histogram of hole radii (px) to an image file."""
    fig, ax = plt.subplots(figsize=(6, 4), dpi=120)
    try:
        if radii.size:
            ax.hist(radii, bins=bins, color="#4c72b0", edgecolor="white")
        ax.set_xlabel("Equivalent radius, px")
        ax.set_ylabel("Count")
        ax.set_title(f"Hole radii (n={radii.size})")
        fig.tight_layout()
        fig.savefig(path)
    finally:
        plt.close(fig)
