import json
import numpy as np
from holescan.addons import render_overlay, save_radius_histogram, to_json, write_csv_blobs
from holescan.core import detect_holes, run_stages


def test_csv_export(tmp_path, two_disks):
    res = detect_holes(two_disks)
    p = tmp_path / "holes.csv"
    write_csv_blobs(str(p), res.blobs)
    lines = p.read_text(encoding="utf-8").strip().splitlines()
    assert lines[0] == "idx,label,x_px,y_px,radius_px,area_px"
    assert len(lines) == 1 + res.count


def test_json_export(single_disk):
    d = json.loads(to_json(detect_holes(single_disk)))
    assert d["count"] == 1 and len(d["coordinates"]) == 1


def test_overlay_marks_holes(single_disk):
    st = run_stages(single_disk)
    ov = render_overlay(single_disk, st)
    assert ov.shape == single_disk.shape
    assert tuple(ov[100, 100]) == (0, 255, 0)           # centroid dot
    assert tuple(ov[100, 96]) != tuple(single_disk[100, 96])
    assert np.array_equal(single_disk[0, 0], [0, 0, 0])  # input untouched


def test_radius_histogram(tmp_path):
    p = tmp_path / "hist.png"
    save_radius_histogram(str(p), np.array([5.0, 6.0, 6.5, 9.0]))
    assert p.exists() and p.stat().st_size > 0
    empty = tmp_path / "empty.png"
    save_radius_histogram(str(empty), np.array([]))
    assert empty.exists()
