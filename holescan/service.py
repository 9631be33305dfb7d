"""
HTTP service exposing hole detection.

Endpoints:
- GET  /health  -> "ok"
- POST /detect  -> JSON detection result for the posted image
                   (raw body or multipart field "image")
- OPTIONS /detect -> 204 CORS preflight
"""

from __future__ import annotations
import logging
import os
from dataclasses import dataclass

from flask import Flask, jsonify, request
from flask_cors import CORS

from holescan.core import DetectionParams, InvalidInputError, decode_image, detect_holes
from holescan.logging_config import configure_logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServiceConfig:
    """Runtime settings of the HTTP service."""
    host: str = "0.0.0.0"
    port: int = 8080
    max_upload_mb: int = 25
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "ServiceConfig":
        return cls(
            host=os.getenv("HOLESCAN_HOST", cls.host),
            port=int(os.getenv("HOLESCAN_PORT", str(cls.port))),
            max_upload_mb=int(os.getenv("HOLESCAN_MAX_UPLOAD_MB", str(cls.max_upload_mb))),
            log_level=os.getenv("HOLESCAN_LOG_LEVEL", cls.log_level),
        )


def _request_image_bytes() -> bytes:
    upload = request.files.get("image")
    if upload is not None:
        return upload.read()
    return request.get_data(cache=False)


def create_app(params: DetectionParams | None = None, config: ServiceConfig | None = None) -> Flask:
    """Build the Flask application."""
    cfg = config or ServiceConfig()
    P = params or DetectionParams()

    app = Flask(__name__)
    app.config["MAX_CONTENT_LENGTH"] = cfg.max_upload_mb * 1024 * 1024
    CORS(app, origins="*", send_wildcard=True,
         methods=["GET", "POST", "OPTIONS"], allow_headers=["Content-Type"])

    @app.errorhandler(InvalidInputError)
    def handle_invalid_input(e: InvalidInputError):
        logger.warning("Rejected request: %s", e)
        return jsonify({"error": str(e)}), 400

    @app.route("/health", methods=["GET"])
    def health():
        return "ok", 200, {"Content-Type": "text/plain; charset=utf-8"}

    @app.route("/detect", methods=["POST", "OPTIONS"])
    def detect():
        if request.method == "OPTIONS":
            return "", 204
        data = _request_image_bytes()
        logger.info("Processing POST /detect, body size: %d", len(data))
        img = decode_image(data)
        result = detect_holes(img, P)
        return jsonify(result.to_dict())

    return app


def main() -> None:
    cfg = ServiceConfig.from_env()
    configure_logging(cfg.log_level)
    app = create_app(config=cfg)
    logger.info("Serving on %s:%d", cfg.host, cfg.port)
    app.run(host=cfg.host, port=cfg.port, threaded=True)


if __name__ == "__main__":
    main()
