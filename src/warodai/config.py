"""
Conversion settings.

Settings come from an optional YAML file:

    dictionary:
      title: Warodai
      url: https://www.warodai.ru/
      description: Словарь Warodai, compiled with warodai-yomichan
      revision: "2024-05-01"
    conversion:
      batch_size: 10000
      source_suffix: .txt

Missing keys keep their defaults; the revision defaults to today's date.
"""

import logging
from dataclasses import dataclass, field, replace
from datetime import date
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


logger = logging.getLogger(__name__)


DEFAULT_BATCH_SIZE = 10000


class ConfigError(Exception):
    """Raised when a configuration file cannot be used."""
    pass


def today_revision() -> str:
    return date.today().strftime('%Y-%m-%d')


@dataclass(frozen=True)
class ConversionConfig:
    title: str = "Warodai"
    url: str = "https://www.warodai.ru/"
    description: str = "Словарь Warodai, compiled with warodai-yomichan"
    revision: str = field(default_factory=today_revision)
    batch_size: int = DEFAULT_BATCH_SIZE
    source_suffix: str = ".txt"

    def with_overrides(self, **overrides: Any) -> "ConversionConfig":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)


SECTION_KEYS = {
    'dictionary': {'title', 'url', 'description', 'revision'},
    'conversion': {'batch_size', 'source_suffix'},
}


def _collect_settings(data: Dict[str, Any]) -> Dict[str, Any]:
    """Flatten the known sections into ConversionConfig keyword arguments."""
    settings = {}

    for section, value in data.items():
        if section not in SECTION_KEYS:
            logger.warning(f"Ignoring unknown config section: {section}")
            continue
        if not isinstance(value, dict):
            raise ConfigError(f"Config section '{section}' must be a mapping")

        for key, item in value.items():
            if key not in SECTION_KEYS[section]:
                logger.warning(f"Ignoring unknown config key: {section}.{key}")
                continue
            settings[key] = str(item) if key == 'revision' else item

    batch_size = settings.get('batch_size')
    if batch_size is not None and (not isinstance(batch_size, int) or batch_size < 1):
        raise ConfigError(f"conversion.batch_size must be a positive integer, got {batch_size!r}")

    return settings


def load_config(config_path: Optional[Path] = None) -> ConversionConfig:
    """
    Load settings from a YAML file.

    Args:
        config_path: YAML file; None or a missing file yields the defaults

    Raises:
        ConfigError: If the file is not valid YAML or has bad values
    """
    if config_path is None:
        return ConversionConfig()

    if not config_path.exists():
        logger.info(f"No config file found at {config_path}, using defaults")
        return ConversionConfig()

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid config file {config_path}: {e}") from e

    if data is None:
        return ConversionConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")

    settings = _collect_settings(data)
    logger.info(f"Loaded config from {config_path}")

    return ConversionConfig(**settings)
