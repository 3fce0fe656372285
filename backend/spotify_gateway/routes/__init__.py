from flask import Flask

from .artist_routes import artists_bp
from .browse_routes import browse_bp
from .health_routes import health_bp
from .market_routes import markets_bp
from .search_routes import search_bp
from .track_routes import tracks_bp

__all__ = ["register_routes"]


def register_routes(app: Flask) -> None:
    app.register_blueprint(health_bp)
    app.register_blueprint(markets_bp)
    app.register_blueprint(artists_bp)
    app.register_blueprint(browse_bp)
    app.register_blueprint(tracks_bp)
    app.register_blueprint(search_bp)
