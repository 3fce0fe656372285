from flask import Flask, jsonify
from flask_cors import CORS

from .config import get_config
from .routes import register_routes
from .services.spotify_service import SpotifyService
from .spotify_client import init_spotify_service
from .utils.validation import ValidationError


def create_app(config_name: str | None = None, spotify_service: SpotifyService | None = None) -> Flask:
    """Application factory so tests and CLI share consistent setup."""
    app = Flask(__name__)

    config_cls = get_config(config_name)
    app.config.from_object(config_cls())

    CORS(app, resources={r"/*": {"origins": "*"}})

    @app.errorhandler(ValidationError)
    def handle_validation_error(err: ValidationError):
        return jsonify({"error": str(err)}), 400

    init_spotify_service(app, spotify_service)
    register_routes(app)

    return app
