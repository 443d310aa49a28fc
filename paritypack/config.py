"""JSON configuration for live comparisons."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
import json
import os
from pathlib import Path
from typing import Any

import httpx
from jsonschema import Draft202012Validator

from paritypack.clients.http import BackendAuth, HttpApiClient
from paritypack.compare.engine import ComparisonEngine
from paritypack.core.types import DEFAULT_IGNORE_FIELDS
from paritypack.diff.ignore import IgnorePatternError, IgnoreSpec

DEFAULT_TIMEOUT_SECONDS = 30.0

_AUTH_SCHEMA: dict[str, Any] = {
    "type": "object",
    "additionalProperties": False,
    "required": ["type"],
    "properties": {
        "type": {"type": "string", "enum": ["none", "bearer", "cookie"]},
        "token_env": {"type": "string", "minLength": 1},
        "value_env": {"type": "string", "minLength": 1},
        "cookie_name": {"type": "string", "minLength": 1},
    },
}

_BACKEND_SCHEMA: dict[str, Any] = {
    "type": "object",
    "additionalProperties": False,
    "required": ["base_url"],
    "properties": {
        "base_url": {"type": "string", "pattern": r"^https?://"},
        "auth": _AUTH_SCHEMA,
    },
}

CONFIG_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "ParityKit comparison config",
    "type": "object",
    "additionalProperties": False,
    "required": ["real", "clone"],
    "properties": {
        "real": _BACKEND_SCHEMA,
        "clone": _BACKEND_SCHEMA,
        "ignore_fields": {"type": "array", "items": {"type": "string"}},
        "extra_ignore_fields": {"type": "array", "items": {"type": "string"}},
        "timeout": {"type": "number", "exclusiveMinimum": 0},
    },
}


class ConfigError(ValueError):
    """Raised when a comparison config is missing, malformed or incomplete."""


@dataclass(frozen=True, slots=True)
class BackendConfig:
    name: str
    base_url: str
    auth: BackendAuth = field(default_factory=BackendAuth)

    def build_client(
        self,
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> HttpApiClient:
        return HttpApiClient(
            self.name,
            self.base_url,
            auth=self.auth,
            timeout=timeout,
            transport=transport,
        )


@dataclass(frozen=True, slots=True)
class ComparisonConfig:
    """Both backends plus the ignore list applied to their bodies."""

    real: BackendConfig
    clone: BackendConfig
    ignore: IgnoreSpec = field(default_factory=IgnoreSpec)
    timeout: float = DEFAULT_TIMEOUT_SECONDS

    def build_engine(
        self,
        *,
        real_transport: httpx.AsyncBaseTransport | None = None,
        clone_transport: httpx.AsyncBaseTransport | None = None,
    ) -> ComparisonEngine:
        return ComparisonEngine(
            self.real.build_client(timeout=self.timeout, transport=real_transport),
            self.clone.build_client(timeout=self.timeout, transport=clone_transport),
            ignore_fields=self.ignore,
        )


def validate_config(raw: Any) -> None:
    validator = Draft202012Validator(CONFIG_SCHEMA)
    errors = sorted(validator.iter_errors(raw), key=lambda err: list(err.path))
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.path) or "$"
        raise ConfigError(f"Invalid comparison config at {location}: {first.message}")


def comparison_config_from_dict(
    raw: Mapping[str, Any],
    *,
    environ: Mapping[str, str] | None = None,
) -> ComparisonConfig:
    """Build a config from a decoded JSON mapping.

    Credentials are looked up in ``environ`` (default ``os.environ``) under the
    variable names the config declares.
    """
    validate_config(raw)
    env = os.environ if environ is None else environ

    entries = tuple(raw.get("ignore_fields", DEFAULT_IGNORE_FIELDS))
    try:
        ignore = IgnoreSpec(entries=entries).extend(raw.get("extra_ignore_fields", ()))
    except IgnorePatternError as error:
        raise ConfigError(str(error)) from error

    return ComparisonConfig(
        real=_backend_from_dict("real", raw["real"], env),
        clone=_backend_from_dict("clone", raw["clone"], env),
        ignore=ignore,
        timeout=float(raw.get("timeout", DEFAULT_TIMEOUT_SECONDS)),
    )


def load_comparison_config(
    path: str | Path,
    *,
    environ: Mapping[str, str] | None = None,
) -> ComparisonConfig:
    """Load comparison config from a JSON file."""
    config_path = Path(path)
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError as error:
        raise ConfigError(f"comparison config not found: {config_path}") from error
    except OSError as error:
        raise ConfigError(f"comparison config unreadable: {config_path}: {error}") from error
    except json.JSONDecodeError as error:
        raise ConfigError(f"Invalid comparison config JSON ({config_path}): {error}") from error

    if not isinstance(raw, dict):
        raise ConfigError(f"Comparison config must be a JSON object ({config_path}).")
    return comparison_config_from_dict(raw, environ=environ)


def _backend_from_dict(name: str, raw: Mapping[str, Any], env: Mapping[str, str]) -> BackendConfig:
    auth_raw = raw.get("auth", {"type": "none"})
    kind = auth_raw["type"]
    if kind == "none":
        auth = BackendAuth()
    elif kind == "bearer":
        auth = BackendAuth(kind="bearer", token=_require_env(name, auth_raw, "token_env", env))
    else:
        auth = BackendAuth(
            kind="cookie",
            token=_require_env(name, auth_raw, "value_env", env),
            cookie_name=auth_raw.get("cookie_name", "sessionId"),
        )
    return BackendConfig(name=name, base_url=raw["base_url"], auth=auth)


def _require_env(
    backend: str,
    auth_raw: Mapping[str, Any],
    key: str,
    env: Mapping[str, str],
) -> str:
    env_name = auth_raw.get(key)
    if not env_name:
        raise ConfigError(f"{backend}.auth.{key} is required for {auth_raw['type']} auth.")
    value = env.get(env_name, "").strip()
    if not value:
        raise ConfigError(f"Environment variable {env_name} for {backend} credentials is not set.")
    return value
