import logging
from datetime import datetime, timezone

from flask import Flask, jsonify, request
from flask_swagger_ui import get_swaggerui_blueprint

from . import config
from .database import get_games_collection
from .logic import GameStore
from .routes import make_games_blueprint, STORE_ERROR_MESSAGE

access_logger = logging.getLogger("games_api.access")


def setup_logging(level):
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def log_request(response):
    """Writes one access line per request in Apache combined log format."""
    timestamp = datetime.now(timezone.utc).strftime("%d/%b/%Y:%H:%M:%S %z")
    access_logger.info(
        '%s - - [%s] "%s %s %s" %s %s "%s" "%s"',
        request.remote_addr or "-",
        timestamp,
        request.method,
        request.full_path.rstrip("?"),
        request.environ.get("SERVER_PROTOCOL", "HTTP/1.1"),
        response.status_code,
        response.headers.get("Content-Length", "-"),
        request.referrer or "-",
        request.user_agent.string or "-",
    )
    return response


def create_app(store=None, **overrides):
    """
    Builds the games API.

    ``store`` is the GameStore the routes talk to. When omitted, one is
    created on top of the configured MongoDB collection, and the connection
    is only opened by the first request that touches the database.
    Keyword overrides are copied into ``app.config``.
    """
    app = Flask(__name__)
    app.config.update(
        GAMES_URL_PREFIX=config.GAMES_URL_PREFIX,
        SWAGGER_URL=config.SWAGGER_URL,
        API_URL=config.API_URL,
        LOG_LEVEL=config.LOG_LEVEL,
    )
    app.config.update(overrides)
    setup_logging(app.config["LOG_LEVEL"])

    if store is None:
        store = GameStore(get_games_collection)

    # Swagger configuration
    swaggerui_blueprint = get_swaggerui_blueprint(
        app.config["SWAGGER_URL"],
        app.config["API_URL"],
        config={"app_name": "Games API Documentation"},
    )
    app.register_blueprint(swaggerui_blueprint, url_prefix=app.config["SWAGGER_URL"])

    # Games blueprint
    app.register_blueprint(make_games_blueprint(store), url_prefix=app.config["GAMES_URL_PREFIX"] or None)

    app.after_request(log_request)

    @app.errorhandler(500)
    def internal_error(e):
        return jsonify({"message": STORE_ERROR_MESSAGE}), 500

    return app
