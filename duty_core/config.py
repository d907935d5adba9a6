# duty_core/config.py
from __future__ import annotations
import os
import textwrap
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import ValidationError as PydanticValidationError

from .constants import DEFAULT_MONTH, DEFAULT_PEOPLE, DEFAULT_YEAR
from .errors import ParseError
from .models import AppConfig

CONFIG_ENV_VAR = "DUTY_CONFIG"
DEFAULT_CONFIG_PATH = "assets/duty_config.yaml"

# ===== App defaults =====
DEFAULT_CONFIG = {
    "year": DEFAULT_YEAR,
    "month": DEFAULT_MONTH,
    "people": list(DEFAULT_PEOPLE),
    "random_seed": None,        # None => fresh entropy on every allocation
    "share_base_url": "",
}

DEFAULT_CONFIG_YAML = textwrap.dedent("""\
year: 2025
month: 3
random_seed: null
share_base_url: ""
people:
  - Deeksha
  - Isha
  - Pratheek
  - Dhanush
  - Annapoorna
  - Shreshta
  - Sushruth
  - Nikhitha
""")


def config_path(path: Optional[Union[str, Path]] = None) -> Path:
    return Path(path or os.getenv(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH)


def ensure_config_exists(path: Optional[Union[str, Path]] = None) -> Path:
    p = config_path(path)
    if not p.exists():
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(DEFAULT_CONFIG_YAML, encoding="utf-8")
    return p


def parse_app_config(text: str) -> AppConfig:
    try:
        obj = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ParseError(f"Config is not valid YAML: {e}") from e
    if not isinstance(obj, dict):
        raise ParseError("Config must be a YAML mapping")
    merged = {**DEFAULT_CONFIG, **obj}
    try:
        return AppConfig(**merged)
    except PydanticValidationError as e:
        raise ParseError(f"Invalid config: {e.errors()[0]['msg']}") from e


def load_app_config(path: Optional[Union[str, Path]] = None) -> AppConfig:
    """Read the YAML config; a missing file means all defaults."""
    p = config_path(path)
    if not p.exists():
        return AppConfig(**DEFAULT_CONFIG)
    return parse_app_config(p.read_text(encoding="utf-8"))
