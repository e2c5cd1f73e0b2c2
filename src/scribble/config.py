from __future__ import annotations

import copy
import os
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml

Color = Tuple[int, int, int]

DEFAULT_CONFIG: Dict[str, Any] = {
    "window": {
        "title": "Drawing Area",
        "width": 400,
        "height": 300,
        "border_width": 8,
        "min_width": 100,
        "min_height": 100,
        "fps": 60,
    },
    "brush": {
        "size": 6,
        "color": [0, 0, 0],
    },
    "background": [255, 255, 255],
    "log_level": "WARNING",
}


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if (
            key in merged
            and isinstance(merged[key], dict)
            and isinstance(value, dict)
        ):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _candidate_config_paths() -> list[Path]:
    env_path = os.environ.get("SCRIBBLE_CONFIG")
    paths = []
    if env_path:
        paths.append(Path(env_path))
    paths.extend([
        Path("scribble.yaml"),
        Path("~/.config/scribble/config.yaml").expanduser(),
    ])
    return paths


def load_config() -> Dict[str, Any]:
    config = copy.deepcopy(DEFAULT_CONFIG)
    for path in _candidate_config_paths():
        if path.exists():
            with path.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
            if isinstance(data, dict):
                config = _deep_merge(config, data)
            break
    return config


def coerce_color(value: Any, fallback: Color) -> Color:
    try:
        red, green, blue = (int(channel) for channel in value)
    except (TypeError, ValueError):
        return fallback
    return (
        max(0, min(255, red)),
        max(0, min(255, green)),
        max(0, min(255, blue)),
    )


def coerce_int(value: Any, fallback: int, *, minimum: int = 0) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return fallback
    return max(minimum, number)
