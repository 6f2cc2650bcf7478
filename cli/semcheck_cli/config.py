from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from typing import Any

import tomli_w
from platformdirs import user_config_dir

from . import console

APP_NAME = "semcheck"
CONFIG_FILENAME = "config.toml"
OUTPUT_MODES = ("text", "json")
OUTPUT_DEFAULT = "text"
ENV_OUTPUT = "SEMCHECK_OUTPUT"


@dataclass
class RangeConfig:
    start: str
    end: str = ""


@dataclass
class AppConfig:
    output: str = OUTPUT_DEFAULT
    ranges: dict[str, RangeConfig] = field(default_factory=dict)


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig(output=OUTPUT_DEFAULT, ranges={})


def normalize_output(raw: str | None) -> str:
    value = (raw or "").strip().lower()
    if value in OUTPUT_MODES:
        return value
    return ""


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    return {
        "output": cfg.output,
        "ranges": {
            name: {"start": r.start, "end": r.end}
            for name, r in cfg.ranges.items()
        },
    }


def from_toml(data: dict[str, Any]) -> AppConfig:
    cfg = default_config()
    raw_output = data.get("output")
    if raw_output is not None:
        output = normalize_output(str(raw_output))
        if output:
            cfg.output = output
        else:
            console.warn(f"Unknown output mode in config: {raw_output!r}, using {OUTPUT_DEFAULT}")

    ranges_raw = data.get("ranges") or {}
    if isinstance(ranges_raw, dict):
        for name, v in ranges_raw.items():
            if not isinstance(v, dict):
                continue
            start = str(v.get("start") or "").strip()
            if not start:
                continue
            end = str(v.get("end") or "").strip()
            cfg.ranges[str(name)] = RangeConfig(start=start, end=end)
    return cfg


def load_config() -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return from_toml(data)
    except FileNotFoundError:
        return default_config()


def resolve_output(cfg: AppConfig) -> str:
    env_value = normalize_output(os.getenv(ENV_OUTPUT, ""))
    if env_value:
        return env_value
    return cfg.output or OUTPUT_DEFAULT


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    ensure_parent_dir(path)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path
