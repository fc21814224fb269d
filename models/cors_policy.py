#!/usr/bin/env python3
"""
Immutable records describing the cross-origin policy of the API.

- CorsSettings: the typed `AllowedOrigins` configuration section, as loaded
  from the environment or the JSON settings file. `allowed_origins is None`
  means the section is absent.
- CorsPolicy: the named policy handed to the HTTP pipeline. Built once at
  startup and never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple

POLICY_NAME = "CorsPolicy"
DEFAULT_ORIGIN = "http://localhost:4200"


@dataclass(frozen=True)
class CorsSettings:
    allowed_origins: Optional[Tuple[Any, ...]] = None

    @property
    def section_exists(self) -> bool:
        return self.allowed_origins is not None


@dataclass(frozen=True)
class CorsPolicy:
    """Named CORS policy. Origins keep their configured order."""

    name: str
    origins: Tuple[str, ...]
    allow_any_header: bool = True
    allow_any_method: bool = True
    allow_credentials: bool = True

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "origins": list(self.origins),
            "allow_any_header": self.allow_any_header,
            "allow_any_method": self.allow_any_method,
            "allow_credentials": self.allow_credentials,
        }
