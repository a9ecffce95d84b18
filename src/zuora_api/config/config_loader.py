"""
Configuration Loader
Loads Zuora configuration from various sources
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from zuora_api.config.zuora_config import (
    ZuoraConfig,
    CONFIG_KEY_ALIASES,
    ENV_VAR_MAPPING,
    ConfigDefaults,
)
from zuora_api.config.config_validator import ConfigValidator
from zuora_api.exceptions import ConfigError


class ConfigLoader:
    """
    Builds a ZuoraConfig from a JSON file, ZUORA_* environment variables
    and programmatic dictionaries

    Example:
        >>> config = ConfigLoader().load(file="zuora.json", config={"api_version": "v1"})
    """

    def __init__(self) -> None:
        self._validator = ConfigValidator()

    def from_file(self, path: Union[str, Path]) -> Dict[str, Any]:
        """
        Read credentials from a JSON file (camelCase or snake_case keys)

        Args:
            path: Path to JSON configuration file

        Returns:
            Loaded configuration dictionary

        Raises:
            ConfigError: If file not found or invalid JSON
        """
        file_path = Path(path).resolve()

        if not file_path.exists():
            raise ConfigError(
                f"Configuration file not found: {file_path}",
                code="CONFIG_FILE_NOT_FOUND"
            )

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(
                f"Invalid JSON in configuration file: {file_path}",
                code="CONFIG_PARSE_ERROR"
            ) from e

        if not isinstance(config, dict):
            raise ConfigError(
                f"Configuration file must contain a JSON object: {file_path}",
                code="CONFIG_PARSE_ERROR"
            )

        return self.from_dict(config)

    def from_environment(self) -> Dict[str, Any]:
        """
        Collect the ZUORA_* variables that are set and non-empty

        Returns:
            Partial configuration keyed by field name
        """
        config: Dict[str, Any] = {}

        for env_var, config_key in ENV_VAR_MAPPING.items():
            value = os.environ.get(env_var)
            if value is not None and value != "":
                config[config_key] = value

        return config

    def from_dict(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Load configuration from a dictionary

        camelCase keys (clientId, clientSecret, baseUri, apiVersion) are
        renamed to their snake_case field names.

        Args:
            config: Configuration dictionary

        Returns:
            Normalized copy of the configuration dictionary
        """
        return {
            CONFIG_KEY_ALIASES.get(key, key): value
            for key, value in config.items()
        }

    def merge(self, *sources: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge multiple configuration sources
        Priority: later sources override earlier sources

        Args:
            sources: Configuration dictionaries in order of increasing priority

        Returns:
            Merged configuration dictionary
        """
        merged: Dict[str, Any] = {}

        for source in sources:
            filtered = self._filter_none(source)
            merged.update(filtered)

        return merged

    def resolve(self, config: Dict[str, Any]) -> ZuoraConfig:
        """
        Validate a merged configuration and build the model

        Keys that are not ZuoraConfig fields are dropped.

        Args:
            config: Configuration dictionary

        Returns:
            Fully resolved ZuoraConfig object

        Raises:
            ValidationError: If configuration is invalid
        """
        normalized = self.from_dict(config)
        self._validator.validate_or_raise(normalized)

        known = {k: v for k, v in normalized.items() if k in ZuoraConfig.model_fields}
        return ZuoraConfig(**known)

    def load(
        self,
        file: Optional[Union[str, Path]] = None,
        env: bool = True,
        config: Optional[Dict[str, Any]] = None,
    ) -> ZuoraConfig:
        """
        Load, merge, and resolve configuration from multiple sources

        Args:
            file: Path to JSON configuration file (optional)
            env: Whether to load from environment variables (default: True)
            config: Programmatic configuration dictionary (optional)

        Returns:
            Fully resolved ZuoraConfig object
        """
        sources: list[Dict[str, Any]] = []

        if file is not None:
            sources.append(self.from_file(file))

        if env:
            sources.append(self.from_environment())

        if config is not None:
            sources.append(self.from_dict(config))

        merged = self.merge(*sources)
        return self.resolve(merged)

    def create_template(self, path: Union[str, Path]) -> None:
        """
        Write a JSON template with placeholder credentials

        Args:
            path: Path to write template
        """
        template = {
            "client_id": "YOUR_CLIENT_ID",
            "client_secret": "YOUR_CLIENT_SECRET",
            "base_uri": "https://rest.sandbox.eu.zuora.com",
            "api_version": ConfigDefaults.API_VERSION,
        }

        file_path = Path(path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(template, f, indent=2)

    def _filter_none(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """Filter out None values from config dictionary"""
        return {k: v for k, v in config.items() if v is not None}
