# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for lbcheck."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from .constants import DEFAULT_HOST
from .errors import ConfigError
from .models.app import AppConfig, Application


def _optional_float_env(name: str, default: float | None) -> float | None:
    try:
        value = os.getenv(name)
        if value is None or not value.strip():
            return default
        parsed = float(value)
        return parsed if parsed > 0 else None
    except ValueError:
        return default


@dataclass
class ProbeSettings:
    """Connection defaults. A timeout of None blocks indefinitely."""

    host: str = DEFAULT_HOST
    connect_timeout: float | None = None
    io_timeout: float | None = None

    @classmethod
    def from_env(cls) -> "ProbeSettings":
        """Create settings from environment variables (evaluated at call time)."""
        host = (os.getenv("LBCHECK_HOST") or "").strip() or cls.host
        return cls(
            host=host,
            connect_timeout=_optional_float_env("LBCHECK_CONNECT_TIMEOUT", cls.connect_timeout),
            io_timeout=_optional_float_env("LBCHECK_IO_TIMEOUT", cls.io_timeout),
        )


def load_probe_settings() -> ProbeSettings:
    """Load probe settings from environment with unbounded defaults."""
    return ProbeSettings.from_env()


def _field(data: Mapping[str, Any], name: str, default: Any = None) -> Any:
    # Keys match case-insensitively ("Apps" and "apps" are equivalent).
    if name in data:
        return data[name]
    lowered = name.lower()
    for key, value in data.items():
        if isinstance(key, str) and key.lower() == lowered:
            return value
    return default


def _parse_port(value: Any, app_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"application {app_name!r}: port {value!r} is not an integer")
    if not 0 < value <= 65535:
        raise ConfigError(f"application {app_name!r}: port {value} is out of range 1..65535")
    return value


def _parse_app(raw: Any, index: int) -> Application:
    if not isinstance(raw, Mapping):
        raise ConfigError(f"application #{index} is not an object")
    name = _field(raw, "Name")
    if not isinstance(name, str):
        raise ConfigError(f"application #{index} has no string Name")
    ports = _field(raw, "Ports") or []
    targets = _field(raw, "Targets") or []
    if not isinstance(ports, list):
        raise ConfigError(f"application {name!r}: Ports must be a list")
    if not isinstance(targets, list) or not all(isinstance(t, str) for t in targets):
        raise ConfigError(f"application {name!r}: Targets must be a list of strings")
    return Application(
        name=name,
        ports=tuple(_parse_port(port, name) for port in ports),
        targets=tuple(targets),
    )


def parse_app_config(data: Any) -> AppConfig:
    """Build an AppConfig from decoded JSON, rejecting malformed or empty configurations."""
    if not isinstance(data, Mapping):
        raise ConfigError("configuration must be a JSON object")
    apps = _field(data, "Apps")
    if apps is None:
        apps = []
    if not isinstance(apps, list):
        raise ConfigError("Apps must be a list")
    config = AppConfig(apps=tuple(_parse_app(raw, idx) for idx, raw in enumerate(apps)))
    if not config.apps:
        raise ConfigError("no apps in configuration")
    return config


def load_app_config(source: str) -> AppConfig:
    """
    Load the application list.

    `source` is a path to a JSON file; when no file exists at that path it is
    parsed as an inline JSON document instead.
    """
    path = Path(source)
    try:
        is_file = path.is_file()
    except OSError:
        # Inline documents can exceed the platform name length limit.
        is_file = False
    if is_file:
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"failed to read config file path: {source}: {exc}") from exc
        where = "config file"
    else:
        text = source
        where = "config"

    try:
        data = json.loads(text)
    except ValueError as exc:
        if where == "config" and not source.lstrip().startswith(("{", "[")):
            raise ConfigError(f"failed to read config file path: {source}: no such file") from exc
        raise ConfigError(f"failed to parse {where}: {exc}") from exc

    return parse_app_config(data)


__all__ = [
    "ProbeSettings",
    "load_app_config",
    "load_probe_settings",
    "parse_app_config",
]
