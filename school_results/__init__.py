import logging
from logging.handlers import RotatingFileHandler

from flask import Flask, jsonify

from school_results.blueprints import register_blueprints
from school_results.config import Config
from school_results.utils.payloads import PayloadError

logger = logging.getLogger(__name__)


def configure_logging(app):
    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)

    package_logger = logging.getLogger("school_results")
    package_logger.setLevel(level)

    if not package_logger.handlers:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(levelname)s - %(name)s - %(message)s")
        )
        package_logger.addHandler(stream_handler)

    log_file = app.config.get("LOG_FILE")
    has_file_handler = any(
        isinstance(h, RotatingFileHandler) for h in package_logger.handlers
    )
    if log_file and not has_file_handler:
        file_handler = RotatingFileHandler(
            log_file, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
        )
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
        )
        package_logger.addHandler(file_handler)

    # Only show warnings and errors from the dev server
    logging.getLogger("werkzeug").setLevel(logging.WARNING)


def register_error_handlers(app):

    @app.errorhandler(PayloadError)
    def payload_error(error):
        logger.warning("Rejected request: %s", error)
        return jsonify({"error": str(error)}), 400

    @app.errorhandler(ValueError)
    def value_error(error):
        logger.warning("Invalid input: %s", error)
        return jsonify({"error": str(error)}), 400


def create_app(config=Config):

    app = Flask(__name__)

    if isinstance(config, dict):
        app.config.from_object(Config)
        app.config.update(config)
    else:
        app.config.from_object(config)

    app.json.sort_keys = False

    configure_logging(app)
    register_error_handlers(app)
    register_blueprints(app)

    logger.info("school_results app created (pass mark %s)", app.config["PASS_MARK"])

    return app
