"""
Configuration for the account manager.

Loaded from YAML (PyYAML safe_load). Keys mirror ManagerConfig fields:

    desired_source: remote          # offline | remote
    data_format: csv                # csv | json
    remote_url: https://example.github.io/roster.csv
    offline_data_path: roster.csv   # or inline offline_data: "..."
    performance_logging: true
    fetch_timeout_s: 10
    strict_parsing: false
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict

import yaml

from officer_roster.model import DataFormat, DataSource


class ConfigError(ValueError):
    """Raised when a configuration document is invalid."""
    pass


@dataclass
class ManagerConfig:
    desired_source: DataSource = DataSource.OFFLINE
    data_format: DataFormat = DataFormat.CSV
    remote_url: str = ""
    offline_data: str = ""
    performance_logging: bool = True
    fetch_timeout_s: float = 10.0
    strict_parsing: bool = False


def _enum_value(enum_cls, raw: Any, key: str):
    if isinstance(raw, enum_cls):
        return raw
    try:
        return enum_cls(str(raw).strip().lower())
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ConfigError(f"Invalid {key} '{raw}' (expected one of: {allowed})")


def config_from_dict(d: Dict[str, Any] | None, base_dir: str | None = None) -> ManagerConfig:
    if d is None:
        return ManagerConfig()
    if not isinstance(d, dict):
        raise ConfigError(f"Configuration must be a mapping, got {type(d).__name__}")

    cfg = ManagerConfig()
    if "desired_source" in d:
        cfg.desired_source = _enum_value(DataSource, d["desired_source"], "desired_source")
    if "data_format" in d:
        cfg.data_format = _enum_value(DataFormat, d["data_format"], "data_format")
    cfg.remote_url = str(d.get("remote_url") or "")
    cfg.performance_logging = bool(d.get("performance_logging", cfg.performance_logging))
    cfg.strict_parsing = bool(d.get("strict_parsing", cfg.strict_parsing))
    try:
        cfg.fetch_timeout_s = float(d.get("fetch_timeout_s", cfg.fetch_timeout_s))
    except (TypeError, ValueError):
        raise ConfigError(f"Invalid fetch_timeout_s '{d.get('fetch_timeout_s')}'")

    if d.get("offline_data_path"):
        path = str(d["offline_data_path"])
        if base_dir and not os.path.isabs(path):
            path = os.path.join(base_dir, path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                cfg.offline_data = f.read()
        except FileNotFoundError:
            raise ConfigError(f"Offline data file not found: {path}")
    else:
        cfg.offline_data = str(d.get("offline_data") or "")

    return cfg


def load_config(filepath: str) -> ManagerConfig:
    """
    Load a ManagerConfig from a YAML file.

    Raises:
        FileNotFoundError: If file doesn't exist
        ConfigError: If the document is invalid
    """
    with open(filepath, "r", encoding="utf-8") as f:
        try:
            d = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {filepath}: {e}")
    return config_from_dict(d, base_dir=os.path.dirname(os.path.abspath(filepath)))


__all__ = ["ManagerConfig", "ConfigError", "config_from_dict", "load_config"]
