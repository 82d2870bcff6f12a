import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from polaris_kit.config.models import ProviderConfig

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when a provider config file is unreadable or invalid."""

    pass


def load_provider_config(path: Path) -> ProviderConfig:
    """
    Load and validate a provider configuration file.
    Raises FileNotFoundError if file missing.
    Raises ConfigError if the YAML or the schema is invalid.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Provider config not found at: {path}")

    with open(path, encoding="utf-8") as f:
        content = f.read()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax in provider config: {e}") from e

    # An empty file means "all defaults"
    if data is None:
        data = {}

    try:
        config = ProviderConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Provider config validation failed:\n{e}") from e

    logger.info("Loaded provider config from %s", path)
    return config
