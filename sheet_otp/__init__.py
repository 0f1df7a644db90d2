from flask import Flask
from flask_cors import CORS

from sheet_otp.config import Config
from sheet_otp.routes.otp_routes import otp_bp
from sheet_otp.services.otp_service import OtpValidator
from sheet_otp.services.sheets_service import build_sheets_reader
from sheet_otp.utils.logger import configure_logging


def create_app(config=None, reader=None):
    # ✅ Fall back to .env / environment variables
    if config is None:
        config = Config.from_env()

    logger = configure_logging(config.log_level)

    if reader is None:
        reader = build_sheets_reader(config)

    app = Flask(__name__)

    CORS(app, resources={r"/*": {"origins": config.cors_origins}})

    app.extensions['otp_validator'] = OtpValidator(reader, config)

    # Register routes
    app.register_blueprint(otp_bp)

    logger.debug("Registered Routes:")
    for rule in app.url_map.iter_rules():
        logger.debug(f"{rule.endpoint} → {rule.rule} [{', '.join(sorted(rule.methods))}]")

    return app
