"""zonedtime.config_loader

Configuration for choosing the timezone provider.

- Reads the ``[tool.zonedtime]`` table of the project's ``pyproject.toml``,
  or a ``zonedtime.yaml`` file, or an explicit YAML/JSON path.
- Environment variables override whatever the file says.
- Exposes a typed dataclass ``Config`` and a ``load_config()`` helper.
"""

from __future__ import annotations

import json
import logging
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

logger = logging.getLogger(__name__)

PYPROJECT_FILE = "pyproject.toml"
PYPROJECT_TABLE = "zonedtime"
YAML_CONFIG_FILE = "zonedtime.yaml"

ENV_PROVIDER = "ZONEDTIME_TIMEZONE_PROVIDER"
ENV_DEFAULT_TIMEZONE = "ZONEDTIME_DEFAULT_TIMEZONE"
ENV_LOG_LEVEL = "ZONEDTIME_LOG_LEVEL"

DEFAULT_PROVIDER = "utc"
DEFAULT_TIMEZONE = "Etc/UTC"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Typed configuration for zonedtime.

    Fields:
        timezone_provider: provider spec (short name, entry point or dotted path)
        provider_options: keyword arguments passed to the provider constructor
        default_timezone: zone the CLI uses when none is given
        log_level: logging level name
        source: where the values were read from (for diagnostics)
    """

    timezone_provider: str = DEFAULT_PROVIDER
    provider_options: dict[str, Any] = field(default_factory=dict)
    default_timezone: str = DEFAULT_TIMEZONE
    log_level: str = "INFO"
    source: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[dict[str, Any]], source: Optional[str] = None) -> Config:
        """Create Config from a plain mapping, applying defaults and validation.

        Accepts the legacy key ``provider`` for ``timezone_provider``. Values of
        the wrong type are coerced or replaced by defaults with a warning.
        """
        if data is None:
            data = {}

        provider_raw = data.get("timezone_provider", data.get("provider", DEFAULT_PROVIDER))
        if not provider_raw or not str(provider_raw).strip():
            logger.warning("Config timezone_provider is empty; using %r", DEFAULT_PROVIDER)
            provider = DEFAULT_PROVIDER
        else:
            provider = str(provider_raw).strip()

        options_raw = data.get("provider_options") or {}
        if not isinstance(options_raw, dict):
            logger.warning(
                "Config provider_options=%r is not a mapping; ignoring", options_raw
            )
            options_raw = {}
        options = {str(k): v for k, v in options_raw.items()}

        default_tz = data.get("default_timezone", DEFAULT_TIMEZONE)
        default_tz = str(default_tz).strip() if default_tz else DEFAULT_TIMEZONE

        log_level = data.get("log_level", "INFO")
        log_level = str(log_level).upper() if log_level is not None else "INFO"
        if log_level not in _LOG_LEVELS:
            logger.warning("Config log_level=%r is not a level name; using INFO", log_level)
            log_level = "INFO"

        return cls(
            timezone_provider=provider,
            provider_options=options,
            default_timezone=default_tz,
            log_level=log_level,
            source=source,
        )

    def apply_env(self, environ: Optional[dict[str, str]] = None) -> Config:
        """Override fields from ZONEDTIME_* environment variables in place.

        Recognizes:
        - ZONEDTIME_TIMEZONE_PROVIDER -> timezone_provider
        - ZONEDTIME_DEFAULT_TIMEZONE -> default_timezone
        - ZONEDTIME_LOG_LEVEL -> log_level
        """
        env = os.environ if environ is None else environ

        provider = env.get(ENV_PROVIDER, "").strip()
        if provider:
            logger.debug("%s overrides timezone_provider=%r", ENV_PROVIDER, provider)
            self.timezone_provider = provider

        default_tz = env.get(ENV_DEFAULT_TIMEZONE, "").strip()
        if default_tz:
            self.default_timezone = default_tz

        log_level = env.get(ENV_LOG_LEVEL, "").strip().upper()
        if log_level in _LOG_LEVELS:
            self.log_level = log_level
        elif log_level:
            logger.warning("Invalid %s=%r; ignoring", ENV_LOG_LEVEL, log_level)

        return self


def _load_yaml_or_json(path: Path) -> Any:
    """Load a mapping from a YAML file, or JSON when the suffix is ``.json``.

    Raises:
        ValueError: If the file is not valid YAML/JSON
    """
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() == ".json":
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid config {path}: {exc}") from exc
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid config {path}: {exc}") from exc
    # safe_load returns None for empty files
    return {} if loaded is None else loaded


def _load_pyproject_table(path: Path) -> Optional[dict[str, Any]]:
    """Return the ``[tool.zonedtime]`` table, or None if the file has none."""
    with path.open("rb") as fh:
        document = tomllib.load(fh)
    table = document.get("tool", {}).get(PYPROJECT_TABLE)
    if table is None:
        return None
    if not isinstance(table, dict):
        raise ValueError(f"[tool.{PYPROJECT_TABLE}] in {path} must be a table")
    return table


def load_config(path: Optional[str] = None, cwd: Optional[Path] = None) -> Config:
    """Load configuration and return a Config instance.

    Args:
        path: Optional explicit YAML/JSON config file.
        cwd: Directory searched for pyproject.toml / zonedtime.yaml
             (defaults to the current working directory).

    Behavior:
    - Explicit ``path``: must exist, otherwise FileNotFoundError.
    - Otherwise the first of ``pyproject.toml`` (with a ``[tool.zonedtime]``
      table) and ``zonedtime.yaml`` found in ``cwd`` is used.
    - With no file, defaults are used (the UTC-only provider).
    - ZONEDTIME_* environment variables are applied last.
    - If a file's top level is not a mapping: raises ValueError.
    """
    base = cwd or Path.cwd()
    raw: Any = None
    source: Optional[str] = None

    if path:
        p = Path(path)
        logger.debug("Loading config from explicit path %s", p)
        if not p.exists():
            raise FileNotFoundError(f"Config file {p} not found")
        raw, source = _load_yaml_or_json(p), str(p)
    else:
        pyproject = base / PYPROJECT_FILE
        yaml_file = base / YAML_CONFIG_FILE
        if pyproject.exists():
            raw = _load_pyproject_table(pyproject)
            if raw is not None:
                source = f"{pyproject} [tool.{PYPROJECT_TABLE}]"
        if raw is None and yaml_file.exists():
            raw, source = _load_yaml_or_json(yaml_file), str(yaml_file)

    if raw is None:
        logger.debug("No zonedtime config file found in %s; using defaults", base)
        cfg = Config()
    elif not isinstance(raw, dict):
        logger.warning("Config %s parsed but top-level is not a mapping: %r", source, raw)
        raise ValueError("Config file must contain a mapping at top level")  # noqa: TRY004
    else:
        cfg = Config.from_dict(raw, source=source)
        logger.info("Loaded zonedtime configuration from %s", source)

    cfg.apply_env()
    logger.debug("Configuration values: %s", cfg)
    return cfg
