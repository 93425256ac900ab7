from __future__ import annotations

import json
import os
from dataclasses import dataclass, replace
from datetime import date
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

"""Config loader for the journey compiler.

Responsibilities:
- Load the optional YAML config (config/specflow.yml by default)
- Validate it against the JSON schema shipped next to this module
- Apply environment overrides (SPECFLOW_*), which win over the file
- Apply defaults for anything still unset

Precedence: CLI flag > environment (.env) > YAML file > defaults.
CLI flags are applied by the caller on top of the returned config.
"""

SCHEMA_PATH = Path(__file__).with_name("config_schema.json")
DEFAULT_CONFIG_PATH = Path("config") / "specflow.yml"

ENV_CONTRACTS_DIR = "SPECFLOW_CONTRACTS_DIR"
ENV_TESTS_DIR = "SPECFLOW_TESTS_DIR"
ENV_TODAY = "SPECFLOW_TODAY"


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class OutputLayout:
    """Where generated artifacts go, relative to the project root."""
    contracts_dir: str = "docs/contracts"
    tests_dir: str = "tests/e2e"
    contract_extension: str = "yml"
    test_extension: str = "spec.ts"


@dataclass(frozen=True)
class CompilerConfig:
    layout: OutputLayout = OutputLayout()
    default_source_name: str = "journeys.csv"
    today: str | None = None  # pinned ISO date; None -> current UTC date


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: schema file missing or not JSON, or data violates it
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def parse_today(value: str) -> str:
    """Check an ISO date string (YYYY-MM-DD) and return it normalized."""
    try:
        return date.fromisoformat(value.strip()).isoformat()
    except ValueError as e:
        raise ConfigError(f"invalid date {value!r}, expected YYYY-MM-DD") from e


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping: {path}")
    return data


def _apply_env(cfg: CompilerConfig) -> CompilerConfig:
    layout = cfg.layout
    contracts_dir = os.getenv(ENV_CONTRACTS_DIR)
    if contracts_dir:
        layout = replace(layout, contracts_dir=contracts_dir)
    tests_dir = os.getenv(ENV_TESTS_DIR)
    if tests_dir:
        layout = replace(layout, tests_dir=tests_dir)
    cfg = replace(cfg, layout=layout)

    today = os.getenv(ENV_TODAY)
    if today:
        cfg = replace(cfg, today=parse_today(today))
    return cfg


def load_config(path: Path | None = None, *, required: bool = False) -> CompilerConfig:
    """Load compiler config.

    Args:
        path: YAML config file; DEFAULT_CONFIG_PATH when None
        required: If True a missing file is an error (explicit --config),
            otherwise a missing file just means defaults

    Raises:
        ConfigError: file missing (when required), invalid YAML, or schema violation
    """
    path = path if path is not None else DEFAULT_CONFIG_PATH
    data: dict[str, Any] = {}
    if path.exists():
        data = _read_yaml(path)
        _validate_config_schema(data)
    elif required:
        raise ConfigError(f"config file not found: {path}")

    defaults = OutputLayout()
    layout = OutputLayout(
        contracts_dir=data.get("contracts_dir", defaults.contracts_dir),
        tests_dir=data.get("tests_dir", defaults.tests_dir),
        contract_extension=data.get("contract_extension", defaults.contract_extension),
        test_extension=data.get("test_extension", defaults.test_extension),
    )
    cfg = CompilerConfig(
        layout=layout,
        default_source_name=data.get("default_source_name", CompilerConfig.default_source_name),
    )
    return _apply_env(cfg)
