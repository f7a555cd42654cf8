"""Configuration loader for truncstr."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

from ruamel.yaml import YAML, YAMLError


@dataclass
class TruncstrConfig:
    """truncstr configuration."""

    # Width used by `truncstr cut` when --width is not given
    width: int = 80

    # Strip surrounding whitespace from each input line before truncating
    strip_whitespace: bool = False

    # Drop empty lines instead of echoing them
    skip_empty: bool = False

    def prepare_line(self, line: str) -> str:
        """Apply line preprocessing settings to a single input line."""
        if self.strip_whitespace:
            line = line.strip()
        return line


CONFIG_SEARCH_PATHS = [
    "truncstr.yaml",
    "truncstr.yml",
    ".truncstr.yaml",
    ".truncstr.yml",
]

BOOL_FIELDS = {"strip_whitespace", "skip_empty"}

KNOWN_KEYS = {"width"} | BOOL_FIELDS


def find_config_path() -> Path | None:
    """Find the active config file path, or None if no config file exists."""
    for name in CONFIG_SEARCH_PATHS:
        path = Path.cwd() / name
        if path.exists():
            return path
    return None


def _section(data):
    # Settings may live under a top-level "truncstr" key
    if isinstance(data, dict) and "truncstr" in data:
        return data["truncstr"]
    return data


def check_setting(key: str, value) -> str | None:
    """Check a single setting value as loaded from YAML.

    Returns:
        An error message, or None if the value is acceptable
    """
    if key not in KNOWN_KEYS:
        return f"Unknown key: '{key}'"
    if key == "width":
        # bool is an int subclass; floats and quoted numbers are not widths
        if isinstance(value, bool) or not isinstance(value, int):
            return f"'width' must be an integer, got: {value}"
        if value < 0:
            return f"'width' must be non-negative, got: {value}"
    elif not isinstance(value, bool):
        return f"'{key}' must be true or false, got: {value}"
    return None


def parse_setting(key: str, text: str):
    """Convert a command-line string to the type stored for key.

    Text that does not parse is returned unchanged so that
    check_setting reports it.
    """
    if key == "width":
        try:
            return int(text)
        except ValueError:
            return text
    if key in BOOL_FIELDS and text.lower() in ("true", "false"):
        return text.lower() == "true"
    return text


def save_config_value(config_path: Path, key: str, value: str) -> None:
    """Set a single key in the YAML config file (round-trip, preserving comments).

    Raises:
        ValueError: If key is unknown or value is not valid for key
    """
    parsed = parse_setting(key, value)
    error = check_setting(key, parsed)
    if error:
        raise ValueError(error)

    yaml = YAML()
    yaml.preserve_quotes = True

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.load(f)

    if data is None:
        data = {}

    target = data
    if "truncstr" in data:
        target = data["truncstr"]

    target[key] = parsed

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(data, f)


def validate_config(config_path: Path) -> list[str]:
    """Validate a config file and return a list of error messages (empty = valid)."""
    try:
        yaml = YAML()
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.load(f)
    except YAMLError as e:
        return [f"Invalid YAML syntax: {e}"]
    except OSError as e:
        return [f"Cannot read file: {e}"]

    if data is None:
        return []

    data = _section(data)

    if not isinstance(data, dict):
        return [f"Config must be a YAML mapping, got {type(data).__name__}"]

    errors = (check_setting(key, value) for key, value in data.items())
    return [e for e in errors if e]


def load_config(config_path: str | Path | None = None) -> TruncstrConfig:
    """Load configuration file."""
    config = TruncstrConfig()
    explicit = config_path is not None

    if config_path is None:
        config_path = find_config_path()

    if config_path is None:
        return config  # Return default config

    config_path = Path(config_path)
    if not config_path.exists():
        if explicit:
            print(f"Error: Config file not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        return config

    try:
        yaml = YAML()
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.load(f)
    except YAMLError as e:
        print(f"Error: Invalid YAML in {config_path}: {e}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error: Cannot read config file {config_path}: {e}", file=sys.stderr)
        sys.exit(1)

    if data is None:
        return config

    data = _section(data)

    if not isinstance(data, dict):
        print(f"Error: Config must be a YAML mapping, got {type(data).__name__}", file=sys.stderr)
        sys.exit(1)

    for key in ("width", "strip_whitespace", "skip_empty"):
        if key in data:
            error = check_setting(key, data[key])
            if error:
                print(f"Error: {error}", file=sys.stderr)
                sys.exit(1)
            value = data[key]
            setattr(config, key, int(value) if key == "width" else bool(value))

    return config


def get_default_config_yaml(width: int = 80) -> str:
    """Return default YAML config template."""
    return f'''# truncstr configuration
# Place this file as truncstr.yaml in your working directory

truncstr:
  # Width used by `truncstr cut` when --width is not given
  width: {width}

  # Strip leading/trailing whitespace from each line before truncating
  strip_whitespace: false

  # Drop empty lines instead of printing them
  skip_empty: false
'''
