import logging
import os

from flask import Flask, send_file, send_from_directory, current_app
from flask_swagger_ui import get_swaggerui_blueprint

from .config import config_by_name
from .extensions import db, migrate, jwt
from . import models  # noqa: F401  (registers tables with the metadata)
from .api.v1 import v1_bp
from .errors import register_error_handlers, register_jwt_handlers
from .cli import register_commands


def create_app(config_name: str = "development") -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])

    # -------------------------------------------------
    # Logging
    # -------------------------------------------------
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))
    logging.getLogger("hopeshare").setLevel(app.config.get("LOG_LEVEL", "INFO"))

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)

    # -------------------------------------------------
    # API Blueprints
    # -------------------------------------------------
    app.register_blueprint(v1_bp, url_prefix="/api/v1")
    register_error_handlers(app)
    register_jwt_handlers(jwt)
    register_commands(app)

    # -------------------------------------------------
    # Uploaded media (PUBLIC)
    # -------------------------------------------------
    media_prefix = app.config.get("MEDIA_URL_PREFIX", "/media").rstrip("/")

    @app.route(f"{media_prefix}/<path:filename>", methods=["GET"], endpoint="media")
    def serve_media(filename):
        upload_folder = os.path.abspath(current_app.config.get("UPLOAD_FOLDER", "uploads"))
        return send_from_directory(upload_folder, filename)

    # -------------------------------------------------
    # Serve OpenAPI YAML (PUBLIC)
    # -------------------------------------------------
    @app.route("/openapi/site.yaml", methods=["GET"], endpoint="openapi_site")
    def serve_openapi():
        spec_path = os.path.join(
            current_app.root_path,
            "api",
            "v1",
            "site_openapi.yaml",
        )

        if not os.path.exists(spec_path):
            raise FileNotFoundError("site_openapi.yaml not found")

        return send_file(
            spec_path,
            mimetype="application/yaml",
            as_attachment=False,
        )

    # -------------------------------------------------
    # Swagger UI
    # -------------------------------------------------
    SWAGGER_URL = "/swagger"
    API_URL = "/openapi/site.yaml"

    swaggerui_blueprint = get_swaggerui_blueprint(
        SWAGGER_URL,
        API_URL,
        config={
            "app_name": "Hopeshare Site API",
            "deepLinking": True,
            "persistAuthorization": True,
        },
    )

    app.register_blueprint(swaggerui_blueprint, url_prefix=SWAGGER_URL)

    return app
