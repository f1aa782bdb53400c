import logging
import os

from flask import Flask, send_file, current_app
from flask_swagger_ui import get_swaggerui_blueprint

from .config import config_by_name
from .api.v1 import v1_bp
from .errors import register_error_handlers


def configure_logging(app: Flask) -> None:
    level = getattr(logging, str(app.config["LOG_LEVEL"]).upper(), logging.INFO)
    app.logger.setLevel(level)
    logging.getLogger(__name__).setLevel(level)


def create_app(config_name: str = "development") -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])

    # -------------------------------------------------
    # Logging
    # -------------------------------------------------
    configure_logging(app)

    # -------------------------------------------------
    # API Blueprints
    # -------------------------------------------------
    app.register_blueprint(v1_bp, url_prefix="/api/v1")
    register_error_handlers(app)

    # -------------------------------------------------
    # Serve OpenAPI YAML
    # -------------------------------------------------
    @app.route(app.config["OPENAPI_URL"], methods=["GET"], endpoint="openapi_placement")
    def serve_openapi():
        openapi_path = os.path.join(
            current_app.root_path,
            "api",
            "v1",
            "placement_openapi.yaml",
        )

        if not os.path.exists(openapi_path):
            raise FileNotFoundError("placement_openapi.yaml not found")

        return send_file(
            openapi_path,
            mimetype="application/yaml",
            as_attachment=False,
        )

    # -------------------------------------------------
    # Swagger UI
    # -------------------------------------------------
    swaggerui_blueprint = get_swaggerui_blueprint(
        app.config["SWAGGER_URL"],
        app.config["OPENAPI_URL"],
        config={
            "app_name": "Section Placement API",
            "deepLinking": True,
        },
    )

    app.register_blueprint(swaggerui_blueprint, url_prefix=app.config["SWAGGER_URL"])

    app.logger.info("Section placement service ready (%s)", config_name)
    return app
