"""
Command-line entry point.

  holescan detect target.jpg --overlay out.png --csv holes.csv
  holescan serve --port 8080
"""

from __future__ import annotations
import argparse
import logging
import sys
from dataclasses import replace
from typing import List, Optional
import cv2
import numpy as np

from holescan.addons import render_overlay, save_radius_histogram, to_json, write_csv_blobs
from holescan.core import DetectionParams, InvalidInputError, imread_color, run_stages, stats_from_radii
from holescan.logging_config import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--log-level", default="INFO", help="DEBUG, INFO, WARNING, ERROR")
    common.add_argument("--log-file", default=None, help="Optional log file")

    ap = argparse.ArgumentParser(prog="holescan", description="Bullet hole detection (threshold + watershed).")
    sub = ap.add_subparsers(dest="command", required=True)

    d = sub.add_parser("detect", parents=[common], help="Detect holes in an image file")
    d.add_argument("image", help="Input image path")
    d.add_argument("--json", dest="json_path", default=None, help="Write result JSON here")
    d.add_argument("--csv", dest="csv_path", default=None, help="Write per-hole CSV here")
    d.add_argument("--overlay", default=None, help="Write overlay image here")
    d.add_argument("--hist", default=None, help="Write radius histogram here")
    d.add_argument("--threshold", type=int, default=None, help="Bright threshold intensity (default 200)")
    d.add_argument("--blur", type=int, default=None, help="Gaussian pre-blur kernel, odd (default off)")
    d.add_argument("--enforce-area", action="store_true", help="Also apply the adaptive area bounds")

    s = sub.add_parser("serve", parents=[common], help="Run the HTTP service")
    s.add_argument("--host", default=None)
    s.add_argument("--port", type=int, default=None)
    return ap


def write_image(path: str, img: np.ndarray) -> bool:
    """cv2.imwrite that reports unsupported extensions as a failed write."""
    try:
        return bool(cv2.imwrite(path, img))
    except cv2.error:
        return False


def params_from_args(args: argparse.Namespace) -> DetectionParams:
    P = DetectionParams()
    if args.threshold is not None:
        P = replace(P, threshold_intensity=args.threshold)
    if args.blur is not None:
        P = replace(P, blur_ksize=args.blur)
    if args.enforce_area:
        P = replace(P, enforce_area_thresholds=True)
    return P


def run_detect(args: argparse.Namespace) -> int:
    try:
        P = params_from_args(args)
        img = imread_color(args.image)
        stages = run_stages(img, P)
    except (InvalidInputError, ValueError) as e:
        logger.error("%s", e)
        return 2

    result = stages.result
    text = to_json(result, indent=2)
    print(text)
    if args.json_path:
        with open(args.json_path, "w", encoding="utf-8") as f:
            f.write(text)
    if args.csv_path:
        write_csv_blobs(args.csv_path, result.blobs)
    if args.overlay and not write_image(args.overlay, render_overlay(img, stages)):
        logger.error("Could not write overlay image: %s", args.overlay)
        return 1
    radii = np.array([b.radius for b in result.blobs], dtype=np.float64)
    if args.hist:
        save_radius_histogram(args.hist, radii)

    st = stats_from_radii(radii)
    logger.info("Holes: %d, radius mean %.2f px (min %.2f, max %.2f)",
                st["holes"], st["mean"], st["min"], st["max"])
    return 0


def run_serve(args: argparse.Namespace) -> int:
    from holescan.service import ServiceConfig, create_app

    cfg = ServiceConfig.from_env()
    cfg = replace(cfg, host=args.host or cfg.host, port=args.port or cfg.port)
    app = create_app(config=cfg)
    app.run(host=cfg.host, port=cfg.port, threaded=True)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level, args.log_file)
    if args.command == "detect":
        return run_detect(args)
    return run_serve(args)


if __name__ == "__main__":
    sys.exit(main())
