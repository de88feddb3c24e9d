import json
import os
from datetime import datetime

from rich.markup import escape

from simulator.errors import ConfigError

DEFAULT_CONFIG_PATH = "config/runtime_config.json"

DEFAULT_CONFIG = {
    "start_state": "0",
    "halt_state": "halt",
    "blank_symbol": "_",
    "max_steps": 0,
    "max_tape_cells": 0,
    "show_head": False,
    "log_runs": False,
    "output_directory": "logs/",
    "log_file_prefix": "tm_emulator_"
}

# Expected types for validation
CONFIG_SCHEMA = {
    "start_state": str,
    "halt_state": str,
    "blank_symbol": str,
    "max_steps": int,
    "max_tape_cells": int,
    "show_head": bool,
    "log_runs": bool,
    "output_directory": str,
    "log_file_prefix": str
}

def validate_config(config):
    for key, expected_type in CONFIG_SCHEMA.items():
        if key not in config:
            raise ConfigError(f"Missing required configuration key: {key}")
        # bool is an int subclass, keep them apart
        if not isinstance(config[key], expected_type) or (expected_type is int and isinstance(config[key], bool)):
            raise ConfigError(f"Config key '{key}' expected {expected_type.__name__}, got {type(config[key]).__name__}.")

    if len(config["blank_symbol"]) != 1 or config["blank_symbol"] == "*":
        raise ConfigError("blank_symbol must be a single character other than '*'.")

    for key in ("max_steps", "max_tape_cells"):
        if config[key] < 0:
            raise ConfigError(f"{key} must be 0 (unlimited) or a positive number.")

    for key in ("start_state", "halt_state"):
        if not config[key] or config[key] == "*" or any(c.isspace() for c in config[key]):
            raise ConfigError(f"{key} must be a non-empty state name without whitespace.")

def print_config_summary(config, console, source):
    console.print(f"[dim][{datetime.now()}] Loaded config from {escape(str(source))}:[/dim]")
    for key, value in config.items():
        console.print(f"[dim]  {key}: {escape(str(value))}[/dim]")

def default_config(console=None):
    config = DEFAULT_CONFIG.copy()
    validate_config(config)
    if console is not None:
        print_config_summary(config, console, "built-in defaults")
    return config

def load_config(path=DEFAULT_CONFIG_PATH, console=None):
    if not os.path.exists(path):
        raise FileNotFoundError(f"Configuration file not found at: {path}")

    with open(path, "r", encoding="utf-8") as f:
        try:
            user_config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Configuration file {path} is not valid JSON: {e}") from e

    if not isinstance(user_config, dict):
        raise ConfigError(f"Configuration file {path} must hold a JSON object.")

    unknown = set(user_config) - set(CONFIG_SCHEMA)
    if unknown:
        raise ConfigError(f"Unknown configuration key(s): {', '.join(sorted(unknown))}")

    # Merge defaults with overrides
    config = DEFAULT_CONFIG.copy()
    config.update(user_config)

    # Validate schema
    validate_config(config)

    # Print config summary (optional)
    if console is not None:
        print_config_summary(config, console, path)

    return config
