"""
CSV and JSON export utilities.

Writes detected holes to a UTF-8 CSV file, or the
full detection result to JSON text.
"""

from __future__ import annotations
from typing import Sequence
import csv
import json

from holescan.core.measure import Blob
from holescan.core.pipeline import DetectionResult


def write_csv_blobs(path: str, blobs: Sequence[Blob]) -> None:
    """Write one CSV row per hole."""
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["idx", "label", "x_px", "y_px", "radius_px", "area_px"])
        for i, b in enumerate(blobs):
            writer.writerow([i, b.label, b.centroid_x, b.centroid_y, b.radius, b.area_px])


def to_json(result: DetectionResult, indent: int | None = None) -> str:
    """Serialize a detection result as JSON text."""
    return json.dumps(result.to_dict(), indent=indent)
