import os

import click
from flask import Flask, current_app, send_file, send_from_directory
from flask_swagger_ui import get_swaggerui_blueprint

from .config import config_by_name
from .extensions import db, migrate, jwt
from .api import api_bp
from .errors import register_error_handlers, register_jwt_handlers
from . import models  # noqa: F401  registers every table on db.metadata


def create_app(config_name: str | None = None) -> Flask:
    config_name = config_name or os.getenv("DIRECTORY_ENV", "development")

    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)

    # -------------------------------------------------
    # API Blueprint
    # -------------------------------------------------
    app.register_blueprint(api_bp, url_prefix="/api")
    register_error_handlers(app)
    register_jwt_handlers(jwt)

    # -------------------------------------------------
    # Uploaded media (PUBLIC)
    # -------------------------------------------------
    @app.route("/uploads/<path:filename>", methods=["GET"], endpoint="uploaded_file")
    def serve_upload(filename):
        return send_from_directory(current_app.config["UPLOAD_FOLDER"], filename)

    # -------------------------------------------------
    # Serve OpenAPI YAML (PUBLIC)
    # -------------------------------------------------
    @app.route("/openapi/directory.yaml", methods=["GET"], endpoint="openapi_directory")
    def serve_openapi():
        spec_path = os.path.join(current_app.root_path, "api", "directory_openapi.yaml")

        if not os.path.exists(spec_path):
            raise FileNotFoundError("directory_openapi.yaml not found")

        return send_file(
            spec_path,
            mimetype="application/yaml",
            as_attachment=False,
        )

    # -------------------------------------------------
    # Swagger UI
    # -------------------------------------------------
    SWAGGER_URL = "/swagger"
    API_URL = "/openapi/directory.yaml"

    swaggerui_blueprint = get_swaggerui_blueprint(
        SWAGGER_URL,
        API_URL,
        config={
            "app_name": "City Directory API",
            "deepLinking": True,
            "persistAuthorization": True,
        },
    )

    app.register_blueprint(swaggerui_blueprint, url_prefix=SWAGGER_URL)

    # -------------------------------------------------
    # CLI
    # -------------------------------------------------
    @app.cli.command("init-db")
    def init_db():
        """Create every table that does not exist yet."""
        db.create_all()
        click.echo("Database initialised")

    return app
