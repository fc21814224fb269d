from flask import Flask
from flasgger import Swagger

from .config import get_config
from .cors import apply_cors_policy, build_cors_policy
from .errors import register_error_handlers
from models.schemas.cors_settings import CorsSettingsSchema

# Minimal Swagger config: exposes /swagger.json and UI at /apidocs
SWAGGER_TEMPLATE = {
    "swagger": "2.0",
    "info": {
        "title": "Proxy API",
        "version": "1.0.0",
        "description": "HTTP API that forwards requests to upstream services.",
    },
    "basePath": "/",  # Blueprints are mounted under /api/v1
    "schemes": ["http", "https"],
}

SWAGGER_CONFIG = {
    "headers": [],
    "specs": [
        {
            "endpoint": "apispec_1",
            "route": "/swagger.json",
            "rule_filter": lambda rule: True,   # include all endpoints
            "model_filter": lambda tag: True,   # include all models
        }
    ],
    "static_url_path": "/flasgger_static",
    "swagger_ui": True,
    "specs_route": "/apidocs/",
}

cors_settings_schema = CorsSettingsSchema()


def create_app(config_name: str | None = None, overrides: dict | None = None) -> Flask:
    """
    Application factory: creates and configures the Flask app.
    `overrides` is applied on top of the selected config class (tests use it
    to inject AllowedOrigins without touching the environment).
    """
    app = Flask(__name__)

    app.config.from_object(get_config(config_name))
    if overrides:
        app.config.update(overrides)

    # Cross-Origin Resource Sharing: one named policy for every route
    settings = cors_settings_schema.load({"AllowedOrigins": app.config.get("ALLOWED_ORIGINS")})
    apply_cors_policy(app, build_cors_policy(settings))

    # Swagger UI and JSON, development only
    if app.config.get("SWAGGER_ENABLED"):
        Swagger(app, template=SWAGGER_TEMPLATE, config=SWAGGER_CONFIG)

    register_error_handlers(app)

    from .health import bp as health_bp

    app.register_blueprint(health_bp, url_prefix="/api/v1")

    @app.route("/")
    def root():
        body = {
            "message": "Welcome to Proxy API",
            "health": "/api/v1/health",
        }
        if app.config.get("SWAGGER_ENABLED"):
            body["docs"] = "/apidocs/"
        return body, 200

    return app
