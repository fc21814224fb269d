"""
Cross-origin policy for the API.

build_cors_policy() turns the typed `AllowedOrigins` section into a named
CorsPolicy; apply_cors_policy() hands it to flask-cors. The two are kept
apart so the policy can be built (and inspected) without an app.
"""
from __future__ import annotations

import logging
from typing import Iterable, Tuple

from flask import Flask
from flask_cors import CORS

from models.cors_policy import CorsPolicy, CorsSettings, DEFAULT_ORIGIN, POLICY_NAME

logger = logging.getLogger(__name__)

# Methods advertised on preflight; "*" is not valid alongside credentials.
ANY_METHOD = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def clean_origins(values: Iterable) -> Tuple[str, ...]:
    """Drop blank and non-string entries, strip the rest, keep order."""
    cleaned = []
    for value in values:
        if not isinstance(value, str):
            continue
        value = value.strip()
        if value:
            cleaned.append(value)
    return tuple(cleaned)


def build_cors_policy(settings: CorsSettings) -> CorsPolicy:
    origins: Tuple[str, ...] = ()
    if settings.section_exists:
        origins = clean_origins(settings.allowed_origins)
        if not origins:
            logger.warning("AllowedOrigins is configured but empty; using %s", DEFAULT_ORIGIN)
    if not origins:
        origins = (DEFAULT_ORIGIN,)

    return CorsPolicy(
        name=POLICY_NAME,
        origins=origins,
        allow_any_header=True,
        allow_any_method=True,
        allow_credentials=True,
    )


def apply_cors_policy(app: Flask, policy: CorsPolicy) -> None:
    """Register the policy on every route of the app."""
    CORS(
        app,
        resources={r"/*": {"origins": list(policy.origins)}},
        supports_credentials=policy.allow_credentials,
        allow_headers="*",
        methods=ANY_METHOD,
    )
    app.extensions.setdefault("cors_policies", {})[policy.name] = policy
    logger.info("CORS policy registered: %s", policy.to_dict())
