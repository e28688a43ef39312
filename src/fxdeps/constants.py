"""Constants used in the project.

Defaults live on ``Constants``; ``load_config``/``apply_config`` overlay a YAML
configuration file and environment variables on top of them at runtime.
"""

import logging
import os
from enum import Enum
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    CONFIG_ERROR = 1
    CONNECTION_ERROR = 2
    RESOLUTION_ERROR = 3


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    SEARCH_URL = "https://search.maven.org/solrsearch/select"
    SEARCH_CORE = "gav"
    SEARCH_ROWS = 10
    ARTIFACT_GROUP = "org.openjfx"
    ARTIFACT_PREFIX = "javafx"
    DEFAULT_VERSION = "#latest#"
    DEFAULT_CONFIGURATIONS = ("implementation", "testImplementation")
    MODULE_SEPARATOR = ";"
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    CONNECT_TIMEOUT = 10  # Connection establishment timeout in seconds
    REQUEST_TIMEOUT = 30  # Read timeout in seconds for search requests
    HTTP_MAX_WORKERS = 3
    CACHE_MAX_ENTRIES = 256
    CACHE_TTL_SEC = 3600
    CONFIG_ENV = "FXDEPS_CONFIG"
    CONFIG_FILE = "fxdeps.yml"


# Keys accepted in the ``resolver:`` section of the YAML config, with their casts.
_CONFIG_KEYS = {
    "search_url": ("SEARCH_URL", str),
    "rows": ("SEARCH_ROWS", int),
    "group": ("ARTIFACT_GROUP", str),
    "connect_timeout": ("CONNECT_TIMEOUT", int),
    "request_timeout": ("REQUEST_TIMEOUT", int),
    "max_workers": ("HTTP_MAX_WORKERS", int),
    "cache_max_entries": ("CACHE_MAX_ENTRIES", int),
    "cache_ttl": ("CACHE_TTL_SEC", int),
}

_ENV_OVERRIDES = {
    "FXDEPS_SEARCH_URL": ("SEARCH_URL", str),
    "FXDEPS_REQUEST_TIMEOUT": ("REQUEST_TIMEOUT", int),
}


def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load the YAML configuration file.

    Lookup order: explicit ``path``, ``$FXDEPS_CONFIG``, then ``./fxdeps.yml``.

    Returns:
        dict: Parsed mapping, or an empty dict when no file is found or the
        file cannot be parsed.
    """
    candidate = path or os.environ.get(Constants.CONFIG_ENV) or Constants.CONFIG_FILE
    if not os.path.isfile(candidate):
        if path:
            logger.warning("Config file not found: %s", path)
        return {}
    try:
        with open(candidate, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.error("Failed to load config %s: %s", candidate, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: top level is not a mapping", candidate)
        return {}
    return data


def apply_config(cfg: Dict[str, Any]) -> None:
    """Overlay the ``resolver`` section of ``cfg`` and env overrides on Constants.

    Invalid values are logged and skipped; this never raises.
    """
    section = cfg.get("resolver", {}) if isinstance(cfg, dict) else {}
    if not isinstance(section, dict):
        section = {}
    for key, value in section.items():
        target = _CONFIG_KEYS.get(key)
        if target is None:
            logger.warning("Unknown resolver config key: %s", key)
            continue
        _set_constant(target, value, key)

    configurations = cfg.get("configurations") if isinstance(cfg, dict) else None
    if isinstance(configurations, list) and configurations:
        Constants.DEFAULT_CONFIGURATIONS = tuple(str(c) for c in configurations)

    for env_name, target in _ENV_OVERRIDES.items():
        raw = os.environ.get(env_name)
        if raw:
            _set_constant(target, raw, env_name)


def _set_constant(target, value, source: str) -> None:
    attr, cast = target
    try:
        setattr(Constants, attr, cast(value))
    except (TypeError, ValueError):
        logger.warning("Invalid value for %s: %r", source, value)
