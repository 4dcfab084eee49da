"""Configuration loader for wikiroute.

This module loads and validates the YAML router configuration: the in-app
web view host allow-list, feature flags, and per-family capability flags.
"""

from pathlib import Path
from typing import Any

import yaml

from wikiroute.core.constants import (
    DEFAULTS,
    IN_APP_WEB_VIEW_DOMAINS,
    NO_CAPABILITIES,
    PROJECT_CAPABILITIES,
    ProjectFamily,
)
from wikiroute.core.exceptions import ConfigError, InvalidProjectConfigError
from wikiroute.core.models import RouterConfig


# ============================================================================
# Router Configuration Loader
# ============================================================================

def load_router_config(config_file: Path | str | None = None) -> RouterConfig:
    """Load router configuration from a YAML file.

    Args:
        config_file: Path to router YAML file. If None, built-in defaults
            are returned without touching the filesystem

    Returns:
        RouterConfig with validated settings

    Raises:
        ConfigError: If file not found, YAML parsing fails or a section
            has the wrong shape
        InvalidProjectConfigError: If the project capability table is invalid
    """
    if config_file is None:
        return RouterConfig()

    config_path = Path(config_file)

    if not config_path.exists():
        raise ConfigError(f"Router config file not found: {config_path}")

    try:
        with config_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse router YAML: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read router config file: {e}") from e

    if data is None:
        return RouterConfig()

    if not isinstance(data, dict):
        raise ConfigError("Router configuration must be a mapping")

    return RouterConfig(
        in_app_domains=_parse_domains(data.get("in_app_web_view", {})),
        native_talk_pages=_parse_feature_flags(data.get("feature_flags", {})),
        default_language=_parse_default_language(
            data.get("default_language", DEFAULTS["language_code"])
        ),
        project_capabilities=_parse_projects(data.get("projects", {})),
    )


def _parse_domains(section: Any) -> tuple[str, ...]:
    if not isinstance(section, dict):
        raise ConfigError("'in_app_web_view' must be a mapping")

    domains = section.get("domains", list(IN_APP_WEB_VIEW_DOMAINS))
    if not isinstance(domains, list):
        raise ConfigError("'in_app_web_view.domains' must be a list")

    for domain in domains:
        if not isinstance(domain, str) or not domain.strip():
            raise ConfigError(f"Invalid in-app web view domain: {domain!r}")

    return tuple(domain.strip().lower() for domain in domains)


def _parse_feature_flags(section: Any) -> bool:
    if not isinstance(section, dict):
        raise ConfigError("'feature_flags' must be a mapping")

    value = section.get("native_talk_pages", DEFAULTS["native_talk_pages"])
    if not isinstance(value, bool):
        raise ConfigError("'feature_flags.native_talk_pages' must be a boolean")

    return value


def _parse_default_language(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError("'default_language' must be a non-empty string")
    return value.strip().lower()


def _parse_projects(section: Any) -> dict[ProjectFamily, dict[str, bool]]:
    """Merge per-family capability overrides onto the built-in table.

    Args:
        section: Mapping of family name to capability overrides

    Returns:
        Complete capability table keyed by ProjectFamily

    Raises:
        InvalidProjectConfigError: On unknown families, unknown capability
            names or non-boolean values
    """
    if not isinstance(section, dict):
        raise InvalidProjectConfigError("'projects' must be a mapping")

    capabilities = {
        family: dict(PROJECT_CAPABILITIES.get(family, NO_CAPABILITIES))
        for family in ProjectFamily
    }

    for name, overrides in section.items():
        try:
            family = ProjectFamily(name)
        except ValueError:
            available = ", ".join(f.value for f in ProjectFamily)
            raise InvalidProjectConfigError(
                f"Unknown project family '{name}'. Available families: {available}"
            ) from None

        if not isinstance(overrides, dict):
            raise InvalidProjectConfigError(f"Invalid capabilities for project '{name}'")

        for flag, value in overrides.items():
            if flag not in NO_CAPABILITIES:
                raise InvalidProjectConfigError(
                    f"Unknown capability '{flag}' in project '{name}'"
                )
            if not isinstance(value, bool):
                raise InvalidProjectConfigError(
                    f"Capability '{flag}' in project '{name}' must be a boolean"
                )
            capabilities[family][flag] = value

    return capabilities
