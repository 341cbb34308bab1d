"""Application factory and app-wide configuration."""

#setup: python -m venv .venv
#setup: source .venv/bin/activate   # (windows: .venv\Scripts\activate)
#setup: pip install -U pip -e ".[test]"
#setup: flask --app "investcalc.app:create_app()" run --port 5000 --debug

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from investcalc.app.api.routes import api_bp
from investcalc.config import Config

logger = logging.getLogger(__name__)


def create_app(config: Optional[Config] = None) -> Flask:
    """Build the Flask app instance."""
    config = config or Config.from_env()
    logging.basicConfig(level=config.log_level)

    app = Flask(__name__)
    app.config["INVESTCALC"] = config

    CORS(
        app,
        resources={r"/api/*": {"origins": config.cors_origins}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    logger.info("Investment calculator API ready, CORS origins: %s", ", ".join(config.cors_origins))
    return app
