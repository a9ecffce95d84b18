"""
Configuration module
"""

from zuora_api.config.zuora_config import (
    ZuoraConfig,
    CONFIG_KEY_ALIASES,
    ENV_VAR_MAPPING,
    ConfigDefaults,
)
from zuora_api.config.config_loader import ConfigLoader
from zuora_api.config.config_validator import (
    ConfigValidator,
    ValidationResult,
    ValidationErrorDetail,
)

__all__ = [
    "ZuoraConfig",
    "CONFIG_KEY_ALIASES",
    "ENV_VAR_MAPPING",
    "ConfigDefaults",
    "ConfigLoader",
    "ConfigValidator",
    "ValidationResult",
    "ValidationErrorDetail",
]
