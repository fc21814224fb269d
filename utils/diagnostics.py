"""
Startup diagnostics.

dump_environment() prints every environment variable sorted by name. It is
called once by the entrypoint before the app is built and can be turned off
with DUMP_ENVIRONMENT=false.
"""
from __future__ import annotations

import logging
import os
import sys
from typing import Mapping, Optional, TextIO

HEADER = "ENVIRONMENT VARIABLES:"


def dump_environment(environ: Optional[Mapping[str, str]] = None, stream: Optional[TextIO] = None) -> None:
    environ = os.environ if environ is None else environ
    stream = sys.stdout if stream is None else stream

    print(HEADER, file=stream)
    for key in sorted(environ):
        print(f"{key} = {environ[key]}", file=stream)


def is_truthy(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


def resolve_log_level(name: Optional[str]) -> Optional[int]:
    """Map a level name ("debug", "WARNING", "10") to its number, None if unknown."""
    name = (name or "").strip().upper()
    if name.isdigit():
        return int(name)
    level = logging.getLevelName(name)
    # getLevelName returns "Level X" for names it does not know
    return level if isinstance(level, int) else None


def configure_logging(level_name: Optional[str]) -> int:
    level = resolve_log_level(level_name)
    # force: a module may already have logged (and installed a handler) during import
    logging.basicConfig(
        level=level if level is not None else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )
    if level is None:
        logging.getLogger(__name__).warning("Unknown LOG_LEVEL %r; using INFO", level_name)
        return logging.INFO
    return level
