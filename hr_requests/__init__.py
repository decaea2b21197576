"""Flask application factory for the employee requests service."""

from __future__ import annotations

import logging
import os

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from .config import Config
from .errors import ApiError
from .extensions import db, init_extensions

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _configure_logging(app: Flask) -> None:
    """Attach handlers to the package logger according to LOG_LEVEL / LOG_FILE."""
    pkg_logger = logging.getLogger(__name__)
    pkg_logger.setLevel(str(app.config.get("LOG_LEVEL", "INFO")).upper())
    formatter = logging.Formatter(LOG_FORMAT)

    # FileHandler is a StreamHandler subclass, so compare exact types.
    if not any(type(h) is logging.StreamHandler for h in pkg_logger.handlers):
        stream = logging.StreamHandler()
        stream.setFormatter(formatter)
        pkg_logger.addHandler(stream)

    log_file = app.config.get("LOG_FILE")
    if log_file:
        path = os.path.abspath(log_file)
        if any(isinstance(h, logging.FileHandler) and h.baseFilename == path for h in pkg_logger.handlers):
            return
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        pkg_logger.addHandler(file_handler)


def _register_blueprints(app: Flask) -> None:
    from .requests import bp as requests_bp

    app.register_blueprint(requests_bp, url_prefix="/api/requests")


def _register_common_routes(app: Flask) -> None:
    @app.get("/health")
    def health():
        return ("", 204)

    @app.get("/ready")
    def ready():
        return jsonify(status="ok"), 200


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ApiError)
    def _api_error(err: ApiError):
        return jsonify(err.to_dict()), err.status_code

    @app.errorhandler(HTTPException)
    def _http_error(err: HTTPException):
        return jsonify(message=err.description or err.name), err.code

    @app.errorhandler(Exception)
    def _unexpected(err: Exception):
        logger.exception("unhandled error: %s", err)
        return jsonify(message="Internal server error"), 500


def _apply_security_headers(app: Flask) -> None:
    @app.after_request
    def _set_headers(resp):
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "same-origin")
        return resp


def create_app(config_class: type[Config] = Config) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_class)

    _configure_logging(app)
    init_extensions(app)

    with app.app_context():
        from . import models  # noqa: F401
        db.create_all()

    _register_blueprints(app)
    _register_common_routes(app)
    _register_error_handlers(app)
    _apply_security_headers(app)
    return app
