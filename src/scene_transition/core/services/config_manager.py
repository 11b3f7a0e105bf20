"""
config_manager.py
-----------------
Configuration loading for the transition pipeline and demo.

Features:
- YAML (.yaml/.yml) and JSON files
- Bare filenames resolved through a file index built on first use;
  a ./config directory overrides the packaged defaults
- Loaded data merged recursively over caller defaults
- '_notes' keys ignored so config files can carry prose
"""

import json
import os
from dataclasses import dataclass

import yaml

from scene_transition.core.debug.debug_logger import DebugLogger
from scene_transition.core.runtime.transition_settings import Fade, Loading, Transition


# ===========================================================
# Configuration
# ===========================================================

DATA_ROOT = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), "config")

# Earlier directories win when two contain the same filename
SEARCH_DIRS = [
    os.path.join(os.getcwd(), "config"),
    DATA_ROOT,
]

_FILE_INDEX = None


def _read_yaml(stream):
    return yaml.safe_load(stream)


_LOADERS = {
    ".yaml": _read_yaml,
    ".yml": _read_yaml,
    ".json": json.load,
}

# JSONDecodeError is a ValueError
_LOAD_ERRORS = (OSError, ValueError, yaml.YAMLError)


# ===========================================================
# Public API
# ===========================================================

def load_config(filename, default_dict=None, strict=False):
    """
    Load a config file and merge it over defaults.

    Args:
        filename: Path, or a bare name looked up in SEARCH_DIRS
            (the extension may be omitted)
        default_dict: Values used for keys the file does not set
        strict: Raise instead of falling back when the file is missing
            or cannot be parsed

    Returns:
        dict: Merged configuration (a new dict; defaults are not mutated)

    Raises:
        FileNotFoundError: strict and the file could not be loaded
    """
    defaults = default_dict or {}
    path = find_config(filename) or filename

    try:
        data = _read(path)
    except _LOAD_ERRORS as e:
        if strict:
            raise FileNotFoundError(f"Config not found: {filename}") from e
        DebugLogger.warn(f"Failed to load {path}: {e} - using defaults", category="config")
        return _merge_dicts(defaults, {})

    return _merge_dicts(defaults, data or {})


def find_config(filename):
    """Resolve a bare config name through the index. None if unknown."""
    if os.path.isabs(filename):
        return filename if os.path.exists(filename) else None

    if _FILE_INDEX is None:
        build_file_index()

    name = os.path.basename(filename.replace("\\", "/"))
    if name in _FILE_INDEX:
        return _FILE_INDEX[name]
    for suffix in _LOADERS:
        if name + suffix in _FILE_INDEX:
            return _FILE_INDEX[name + suffix]
    return None


def build_file_index():
    """Map every config filename in SEARCH_DIRS to its path."""
    global _FILE_INDEX
    _FILE_INDEX = {}

    for directory in SEARCH_DIRS:
        if not os.path.isdir(directory):
            continue
        for root, _, files in os.walk(directory):
            for file in files:
                if os.path.splitext(file)[1] in _LOADERS:
                    _FILE_INDEX.setdefault(file, os.path.join(root, file))

    DebugLogger.init(f"Config index: {len(_FILE_INDEX)} files", category="config")


def rebuild_file_index():
    """Forget the index. Use after adding config files at runtime."""
    global _FILE_INDEX
    _FILE_INDEX = None
    build_file_index()


# ===========================================================
# Transition Config
# ===========================================================

DEFAULTS = {
    "transition": {"control_time_scale": Transition.CONTROL_TIME_SCALE},
    "loading": {
        "activation_threshold": Loading.ACTIVATION_THRESHOLD,
        "load_duration": Loading.LOAD_DURATION,
        "unload_duration": Loading.UNLOAD_DURATION,
        "min_loading_time": Loading.MIN_LOADING_TIME,
    },
    "fade": {"color": list(Fade.COLOR), "speed": Fade.SPEED},
}


@dataclass(frozen=True)
class TransitionConfig:
    """Typed view over transition.yaml."""
    control_time_scale: bool = Transition.CONTROL_TIME_SCALE
    activation_threshold: float = Loading.ACTIVATION_THRESHOLD
    load_duration: float = Loading.LOAD_DURATION
    unload_duration: float = Loading.UNLOAD_DURATION
    min_loading_time: float = Loading.MIN_LOADING_TIME
    fade_color: tuple = Fade.COLOR
    fade_speed: float = Fade.SPEED

    @classmethod
    def from_config(cls, filename: str = Transition.CONFIG_FILE, strict: bool = False):
        """Load a transition config file over the settings defaults."""
        return cls.from_dict(load_config(filename, DEFAULTS, strict=strict))

    @classmethod
    def from_dict(cls, data: dict):
        """Build from a config dict; missing sections or keys use the defaults."""
        merged = _merge_dicts(DEFAULTS, data)
        transition, loading, fade = merged["transition"], merged["loading"], merged["fade"]
        return cls(
            control_time_scale=bool(transition["control_time_scale"]),
            activation_threshold=float(loading["activation_threshold"]),
            load_duration=float(loading["load_duration"]),
            unload_duration=float(loading["unload_duration"]),
            min_loading_time=float(loading["min_loading_time"]),
            fade_color=tuple(fade["color"]),
            fade_speed=float(fade["speed"]),
        )


# ===========================================================
# Internal
# ===========================================================

def _read(path):
    suffix = os.path.splitext(path)[1].lower()
    if suffix not in _LOADERS:
        raise ValueError(f"Unsupported config type '{suffix}'")
    with open(path, "r", encoding="utf-8") as f:
        data = _LOADERS[suffix](f)
    if data is not None and not isinstance(data, dict):
        raise ValueError(f"{os.path.basename(path)}: top level must be a mapping")
    DebugLogger.system(f"Loaded {os.path.basename(path)}", category="config")
    return data


def _merge_dicts(default, override):
    """Recursive merge returning a new dict. Skips '_notes' keys."""
    merged = {
        key: _merge_dicts(value, {}) if isinstance(value, dict) else value
        for key, value in default.items()
    }
    for key, value in override.items():
        if key == "_notes":
            continue
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
