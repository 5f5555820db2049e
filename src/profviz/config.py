"""Configuration loading with XDG paths and precedence resolution.

* **Directory layout** -- XDG Base Directory compliant on Linux/BSD,
  ``~/.profviz/`` on macOS and Windows. See :func:`get_config_dir`.
* **Global config** -- A single :class:`~profviz.models.GlobalConfig`
  JSON file, ``config.json``, or the file named by ``PROFVIZ_CONFIG``.
* **Precedence resolution** -- :func:`resolve_config` layers environment
  variables over the file and the defaults. CLI flags are applied later,
  per invocation, by :mod:`profviz.cli`.

profviz never writes configuration; the file is edited by hand.
"""

from __future__ import annotations

import json
import os
import platform
from pathlib import Path

from profviz.exceptions import ConfigError
from profviz.models import GlobalConfig
from profviz.output import warning

_APP_NAME = "profviz"
_CONFIG_FILENAME = "config.json"
_CONFIG_ENV = "PROFVIZ_CONFIG"
_VERBOSE_ENV = "PROFVIZ_VERBOSE"

_TRUTHY = {"1", "true", "yes", "on"}


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Linux and the BSDs follow the XDG base directory layout."""
    system = platform.system()
    return system == "Linux" or system.endswith("BSD")


def _xdg_config_home() -> Path:
    """``$XDG_CONFIG_HOME``, or ``~/.config`` when it is unset or empty."""
    return Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")


def get_config_dir() -> Path:
    """Return the configuration directory. It is not created.

    On Linux/BSD: ``$XDG_CONFIG_HOME/profviz/`` (default ``~/.config/profviz/``).
    On macOS/Windows: ``~/.profviz/``.
    """
    if _is_xdg_platform():
        return _xdg_config_home() / _APP_NAME
    return Path.home() / f".{_APP_NAME}"


def global_config_path() -> Path:
    """Path to the global config file, honouring ``PROFVIZ_CONFIG``."""
    override = os.environ.get(_CONFIG_ENV, "")
    if override:
        return Path(override).expanduser()
    return get_config_dir() / _CONFIG_FILENAME


# --- Global config ---


def load_global_config() -> GlobalConfig:
    """Load the global configuration file.

    Unknown keys are reported with a warning on stderr and otherwise ignored.

    Returns:
        The deserialised :class:`~profviz.models.GlobalConfig`. If the
        file does not exist, a default instance is returned.

    Raises:
        ConfigError: If the file exists but contains invalid JSON or fails
            Pydantic validation.
    """
    path = global_config_path()
    if not path.is_file():
        return GlobalConfig()
    try:
        text = path.read_text(encoding="utf-8")
        data = json.loads(text)
        config = GlobalConfig.model_validate(data)
    except (json.JSONDecodeError, ValueError) as exc:
        raise ConfigError(f"Invalid global config at {path}: {exc}") from exc
    for key in sorted(set(data) - set(GlobalConfig.model_fields)):
        warning(f"Ignoring unknown key {key!r} in {path}")
    return config


# --- Precedence resolution ---


def resolve_config() -> GlobalConfig:
    """Resolve config with the precedence chain below CLI flags.

    Precedence (high to low):
        1. Environment variables (``NO_COLOR``, ``PROFVIZ_VERBOSE``)
        2. User config (``~/.config/profviz/config.json``)
        3. Defaults
    """
    config = load_global_config()
    if os.environ.get("NO_COLOR") is not None:
        config.no_color = True
    verbose = os.environ.get(_VERBOSE_ENV)
    if verbose is not None:
        config.verbose = verbose.strip().lower() in _TRUTHY
    return config
