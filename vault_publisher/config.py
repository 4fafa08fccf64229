"""Persisted settings for Vault Publisher.

Settings live in a YAML file, by default
``~/.config/vault-publisher/settings.yaml``. The ``VAULT_PUBLISHER_CONFIG``
environment variable points elsewhere. Stored values are merged over the
defaults, so a partial or missing file is fine.
"""

import logging
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from vault_publisher.core.models import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "VAULT_PUBLISHER_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "vault-publisher" / "settings.yaml"


@dataclass
class Settings:
    """User settings for export, publish and snapshot targets."""
    start_page_export_path: str = ""
    start_page_name: str = "START"
    start_page_script: str = ""
    content_dir: str = ""
    static_dir: str = ""
    publish_endpoint: str = ""
    vault_name: str = ""
    export_requires_publish_tag: bool = True
    strip_tag_lines: bool = True
    auto_export_delay: float = 2.0

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        """Build settings from a mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            logger.warning("Ignoring unknown settings: %s", ', '.join(sorted(unknown)))
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def require(self, key: str) -> str:
        """Return a string setting, raising if it is empty."""
        value = getattr(self, key)
        if not value:
            raise ConfigurationError(
                f"Setting '{key}' is not configured. Set it with: vault-publisher config set {key} VALUE"
            )
        return value

    def update(self, key: str, raw: str) -> None:
        """Set a field from its string form, coerced to the field's type."""
        field_types = {f.name: f.type for f in fields(self)}
        if key not in field_types:
            raise ConfigurationError(f"Unknown setting: {key}")

        field_type = field_types[key]
        if field_type is bool:
            lowered = raw.strip().lower()
            if lowered not in ("true", "false", "yes", "no", "1", "0"):
                raise ConfigurationError(f"Setting '{key}' expects true or false, got: {raw}")
            value: Any = lowered in ("true", "yes", "1")
        elif field_type is float:
            try:
                value = float(raw)
            except ValueError:
                raise ConfigurationError(f"Setting '{key}' expects a number, got: {raw}")
        else:
            value = raw

        setattr(self, key, value)


def config_path(path: Optional[Path] = None) -> Path:
    """Resolve the settings file: explicit path, then env var, then default."""
    if path is not None:
        return Path(path)
    env = os.environ.get(CONFIG_ENV_VAR)
    if env:
        return Path(env)
    return DEFAULT_CONFIG_PATH


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings, merged over the defaults.

    Args:
        path: Settings file; see config_path for the lookup order

    Returns:
        Settings (defaults if the file does not exist)

    Raises:
        ConfigurationError: If the file is not valid YAML or not a mapping
    """
    path = config_path(path)
    if not path.exists():
        return Settings()

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Failed to parse settings file {path}: {e}")

    if data is None:
        return Settings()
    if not isinstance(data, dict):
        raise ConfigurationError(f"Settings file {path} must contain a mapping")

    return Settings.from_dict(data)


def save_settings(settings: Settings, path: Optional[Path] = None) -> Path:
    """Write all settings to the settings file.

    Returns:
        Path written to
    """
    path = config_path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        yaml.safe_dump(settings.to_dict(), f, default_flow_style=False, allow_unicode=True, sort_keys=True)
    return path
