"""
Entrypoint for running the API in development.
Dumps the environment (unless DUMP_ENVIRONMENT is false), configures logging,
then builds the app with create_app() and serves it with the Werkzeug dev server.
"""
import os

from utils.diagnostics import configure_logging, dump_environment, is_truthy
from . import create_app
from .config import get_config

if is_truthy(os.getenv("DUMP_ENVIRONMENT", "true")):
    dump_environment()

# Respect APP_ENV for configuration selection (handled in get_config())
configure_logging(get_config(None).LOG_LEVEL)

app = create_app()

if __name__ == "__main__":
    # Dev-friendly defaults; in production you'd run via a WSGI server (gunicorn/uwsgi)
    host = os.getenv("FLASK_RUN_HOST", "0.0.0.0")
    port = int(os.getenv("FLASK_RUN_PORT", "8000"))
    debug = is_truthy(os.getenv("FLASK_DEBUG", str(app.config.get("DEBUG", True))))
    app.run(host=host, port=port, debug=debug)
