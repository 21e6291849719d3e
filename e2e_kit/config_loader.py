"""
Configuration Loader

Loads suite configuration from YAML files with environment overrides.
"""

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path(__file__).parent.parent / "config"


class ConfigLoader:
    """Load and merge configuration from YAML files."""

    def __init__(self, config_dir: str = None, environment: str = "local"):
        self.config_dir = Path(config_dir) if config_dir else DEFAULT_CONFIG_DIR
        self.environment = environment
        self._cache = {}

    def load(self, config_name: str) -> Dict[str, Any]:
        """
        Load configuration from YAML files with environment overrides.

        Loading order:
        1. config/base/{config_name}.yaml
        2. config/environments/{environment}.yaml (overrides)
        3. config/local/overrides.yaml (overrides, gitignored)

        Args:
            config_name: Name of config file (without .yaml extension)

        Returns:
            Merged configuration dictionary
        """
        if config_name in self._cache:
            return self._cache[config_name]

        base_path = self.config_dir / "base" / f"{config_name}.yaml"
        if not base_path.exists():
            raise FileNotFoundError(f"Base config not found: {base_path}")

        config = self._read(base_path)

        for override_path in (
            self.config_dir / "environments" / f"{self.environment}.yaml",
            self.config_dir / "local" / "overrides.yaml",
        ):
            if override_path.exists():
                logger.debug(f"Applying config overrides from {override_path}")
                overrides = self._read(override_path)
                config = self._merge_config(config, overrides.get(config_name) or {})

        self._cache[config_name] = config
        return config

    def site(self, name: str, config_name: str = "sites") -> Dict[str, Any]:
        """Return one site profile from the sites config."""
        sites = self.load(config_name).get("sites", {})
        if name not in sites:
            raise KeyError(f"Unknown site profile: {name}")
        return sites[name]

    def _read(self, path: Path) -> Dict[str, Any]:
        with open(path) as f:
            return yaml.safe_load(f) or {}

    def _merge_config(self, base: Dict, override: Dict) -> Dict:
        """Deep merge override config into base config."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_config(result[key], value)
            else:
                result[key] = value
        return result
