"""
Centralized configuration loading for optionflow.
"""

import copy
import json
import os
import sys
from pathlib import Path
from typing import Any, Optional, TypedDict, cast

CONFIG_DIR_ENV = "OPTIONFLOW_CONFIG_DIR"
STRICT_ENV = "OPTIONFLOW_STRICT_CONFIG"
DEFAULT_CONFIG_DIR = Path(__file__).resolve().parent.parent.parent / "config"
RUNTIME_CONFIG_FILE = "runtime_config.json"

DEFAULT_FLOW_CONFIG: dict[str, Any] = {"large_trade_threshold": 10_000_000.0}
DEFAULT_SYSTEM_CONFIG: dict[str, Any] = {"log_level": "INFO"}


class ConfigBundle(TypedDict):
    flow_config: dict[str, Any]
    system_config: dict[str, Any]


_BUNDLE_CACHE: dict[tuple[str, bool], ConfigBundle] = {}


def _resolve_config_dir(config_dir: Optional[str]) -> Path:
    if config_dir:
        return Path(config_dir)
    env_dir = os.getenv(CONFIG_DIR_ENV)
    if env_dir:
        return Path(env_dir)
    return DEFAULT_CONFIG_DIR


def _resolve_strict(strict: Optional[bool]) -> bool:
    if strict is not None:
        return strict
    return os.getenv(STRICT_ENV, "").lower() in {"1", "true", "yes", "on"}


def _complain(msg: str, *, strict: bool, exc_type: type[Exception] = ValueError) -> None:
    if strict:
        raise exc_type(msg)
    print(f"Warning: {msg}", file=sys.stderr)


def _load_json(path: Path, *, strict: bool) -> Any:
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        _complain(f"{path} not found.", strict=strict, exc_type=FileNotFoundError)
        return {}
    except json.JSONDecodeError as exc:
        _complain(f"{path} is malformed ({exc}).", strict=strict)
        return {}


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def load_runtime_config(
    *, config_dir: Optional[str] = None, strict: Optional[bool] = None
) -> dict[str, Any]:
    strict_flag = _resolve_strict(strict)
    config_path = _resolve_config_dir(config_dir) / RUNTIME_CONFIG_FILE
    payload = _load_json(config_path, strict=strict_flag)
    if isinstance(payload, dict):
        return payload
    _complain(f"Expected {RUNTIME_CONFIG_FILE} to be an object.", strict=strict_flag)
    return {}


def _extract_section(
    runtime_config: dict[str, Any], key: str, defaults: dict[str, Any], *, strict: bool
) -> dict[str, Any]:
    """Section values layered over `defaults`; missing sections fall back entirely."""
    if not runtime_config:
        return copy.deepcopy(defaults)
    if key not in runtime_config:
        _complain(f"Missing '{key}' section in {RUNTIME_CONFIG_FILE}.", strict=strict)
        return copy.deepcopy(defaults)
    section = runtime_config[key]
    if not isinstance(section, dict):
        _complain(f"Expected {RUNTIME_CONFIG_FILE}.{key} to be an object.", strict=strict)
        return copy.deepcopy(defaults)
    return _deep_merge(defaults, section)


def load_config_bundle(
    *,
    config_dir: Optional[str] = None,
    strict: Optional[bool] = None,
    overrides: Optional[dict[str, Any]] = None,
) -> ConfigBundle:
    strict_flag = _resolve_strict(strict)
    config_path = _resolve_config_dir(config_dir)
    cache_key = (str(config_path), strict_flag)
    if overrides is None and cache_key in _BUNDLE_CACHE:
        return copy.deepcopy(_BUNDLE_CACHE[cache_key])

    runtime_config = load_runtime_config(config_dir=str(config_path), strict=strict_flag)

    bundle: ConfigBundle = {
        "flow_config": _extract_section(
            runtime_config, "flow", DEFAULT_FLOW_CONFIG, strict=strict_flag
        ),
        "system_config": _extract_section(
            runtime_config, "system", DEFAULT_SYSTEM_CONFIG, strict=strict_flag
        ),
    }

    if overrides:
        bundle = cast(ConfigBundle, _deep_merge(cast(dict[str, Any], bundle), overrides))
    else:
        _BUNDLE_CACHE[cache_key] = copy.deepcopy(bundle)

    return bundle


def large_trade_threshold(bundle: ConfigBundle, *, strict: Optional[bool] = None) -> float:
    """Dollar threshold for large trades; a non-numeric value falls back to the default."""
    value = bundle["flow_config"].get("large_trade_threshold")
    try:
        return float(value)
    except (TypeError, ValueError):
        _complain(
            f"flow.large_trade_threshold must be a number, got {value!r}.",
            strict=_resolve_strict(strict),
        )
    return float(DEFAULT_FLOW_CONFIG["large_trade_threshold"])
