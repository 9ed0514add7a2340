"""Application factory and app-wide configuration."""

from typing import Optional

from flask import Flask
from flask_cors import CORS

from investsim.app.api.routes import api_bp
from investsim.config import Settings, settings as default_settings


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or default_settings

    app = Flask(__name__)
    app.config.update(
        DEBUG=settings.DEBUG,
        INVESTSIM_SETTINGS=settings,
    )

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.CORS_ORIGINS}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
