"""
Environment-aware configuration.
Class defaults, then .env (python-dotenv), then the JSON settings file, then
real environment variables. Only AllowedOrigins is read from the settings file.
"""
import json
import logging
import os
from typing import Any, Mapping, Optional

from dotenv import load_dotenv

load_dotenv()  # Read .env if present

DEFAULT_SETTINGS_FILE = "appsettings.json"

logger = logging.getLogger(__name__)


def _read_settings_file(path: str) -> dict:
    if not path or not os.path.isfile(path):
        return {}
    try:
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
    except (OSError, ValueError) as exc:
        # A broken settings file must not stop the host from starting
        logger.warning("Ignoring settings file %s: %s", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def read_allowed_origins(environ: Optional[Mapping[str, str]] = None,
                         settings_path: Optional[str] = None) -> Any:
    """
    Resolve the raw AllowedOrigins section.
    - ALLOWED_ORIGINS (comma-separated) in the environment wins.
    - Else the "AllowedOrigins" key of the settings file.
    - Else None: the section is absent.
    """
    environ = os.environ if environ is None else environ
    if "ALLOWED_ORIGINS" in environ:
        return environ["ALLOWED_ORIGINS"]
    if settings_path is None:
        settings_path = environ.get("SETTINGS_FILE", DEFAULT_SETTINGS_FILE)
    return _read_settings_file(settings_path).get("AllowedOrigins")


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")  # Set a strong key in production
    DEBUG = False
    TESTING = False
    APP_ENV = os.getenv("APP_ENV", "dev")
    API_VERSION = os.getenv("API_VERSION", "1.0.0")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
    # Raw section; list, comma-separated string or None
    ALLOWED_ORIGINS = read_allowed_origins()
    SWAGGER_ENABLED = False


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SWAGGER_ENABLED = True
    # In dev, propagate exceptions so our error handler has full context
    PROPAGATE_EXCEPTIONS = True


class ProductionConfig(BaseConfig):
    DEBUG = False


class TestingConfig(BaseConfig):
    TESTING = True
    SWAGGER_ENABLED = True
    ALLOWED_ORIGINS = None


def get_config(name: Optional[str]):
    """
    Select config class.
    - If name is provided, choose by name.
    - Else choose based on APP_ENV (dev/prod/test).
    """
    env = (name or os.getenv("APP_ENV", "dev")).lower()
    if env in ["prod", "production"]:
        return ProductionConfig
    if env in ["test", "testing"]:
        return TestingConfig
    return DevelopmentConfig
