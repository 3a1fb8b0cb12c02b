"""Configuration loading from YAML files."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from infrastructure.config.models import HostKind, RunConfig
from infrastructure.constants import HOST_ENV_VAR

logger = logging.getLogger(__name__)


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def parse_run_config(data: dict[str, Any]) -> RunConfig:
    """
    Build a RunConfig from a pre-loaded declarations dict.

    The BUILDERS_HOST environment variable, when set, replaces the declared host.

    Raises:
        ValueError: If the host value is unknown
        pydantic.ValidationError: If a declaration is malformed
    """
    data = dict(data)

    env_host = os.environ.get(HOST_ENV_VAR)
    if env_host:
        data["host"] = env_host
        logger.debug("Host overridden from %s=%s", HOST_ENV_VAR, env_host)

    if "host" in data and not isinstance(data["host"], HostKind):
        try:
            data["host"] = HostKind(str(data["host"]).strip().lower())
        except ValueError as e:
            raise ValueError(
                f"Invalid host value {data['host']!r}. Available: {[k.value for k in HostKind]}"
            ) from e

    for key in ("content_types", "taxonomies"):
        if data.get(key) is None:
            data[key] = []
        elif not isinstance(data[key], list):
            raise ValueError(f"{key} must be a list of declarations")

    return RunConfig.model_validate(data)


def load_run_config(declarations_path: Path) -> RunConfig:
    """
    Load registrations.yaml and construct a fully-resolved RunConfig.

    Identifiers are not checked here; reserved names and length limits are
    enforced by the builders when the declarations are turned into them.
    """
    cfg = parse_run_config(_load_yaml(declarations_path))
    logger.info(
        "Loaded %d content type(s) and %d taxonomy(ies) from %s",
        len(cfg.content_types),
        len(cfg.taxonomies),
        declarations_path,
    )
    return cfg
