"""
Configuration Validator
Validates Zuora configuration with clear error messages
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from urllib.parse import urlparse

from zuora_api.config.zuora_config import API_VERSION_PATTERN


@dataclass
class ValidationErrorDetail:
    """Validation error detail"""
    field: str
    message: str
    value: Optional[Any] = None


@dataclass
class ValidationResult:
    """Validation result"""
    valid: bool
    errors: List[ValidationErrorDetail] = field(default_factory=list)


class ConfigValidator:
    """
    ConfigValidator class
    Checks a configuration dictionary before it is turned into a ZuoraConfig
    """

    REQUIRED_FIELDS = ("client_id", "client_secret", "base_uri", "api_version")

    def __init__(self) -> None:
        self._errors: List[ValidationErrorDetail] = []

    def validate(self, config: Dict[str, Any]) -> ValidationResult:
        """
        Validate the entire configuration dictionary

        Args:
            config: Configuration dictionary to validate

        Returns:
            ValidationResult with any errors
        """
        self._errors = []

        self._validate_required(config)
        self._validate_base_uri(config)
        self._validate_api_version(config)

        return ValidationResult(
            valid=len(self._errors) == 0,
            errors=self._errors.copy()
        )

    def validate_or_raise(self, config: Dict[str, Any]) -> None:
        """
        Validate and raise if invalid

        Args:
            config: Configuration dictionary to validate

        Raises:
            ValidationError: If configuration is invalid
        """
        from zuora_api.exceptions import ValidationError

        result = self.validate(config)
        if not result.valid:
            error_messages = "; ".join(
                f"{e.field}: {e.message}" for e in result.errors
            )
            raise ValidationError(
                f"Configuration validation failed: {error_messages}",
                field=result.errors[0].field,
            )

    def _validate_required(self, config: Dict[str, Any]) -> None:
        """Validate required fields are present and non-empty"""
        for field_name in self.REQUIRED_FIELDS:
            value = config.get(field_name)
            if value is None:
                self._errors.append(ValidationErrorDetail(
                    field=field_name,
                    message=f"{field_name} is required"
                ))
            elif not isinstance(value, str):
                self._errors.append(ValidationErrorDetail(
                    field=field_name,
                    message=f"{field_name} must be a string",
                    value="[REDACTED]" if field_name == "client_secret" else value
                ))
            elif value.strip() == "":
                self._errors.append(ValidationErrorDetail(
                    field=field_name,
                    message=f"{field_name} cannot be empty",
                    value=value
                ))

    def _validate_base_uri(self, config: Dict[str, Any]) -> None:
        """Validate base_uri is an absolute HTTP/HTTPS URL"""
        base_uri = config.get("base_uri")
        if not isinstance(base_uri, str) or base_uri.strip() == "":
            return

        parsed = urlparse(base_uri.strip())
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            self._errors.append(ValidationErrorDetail(
                field="base_uri",
                message="base_uri must be a valid HTTP/HTTPS URL",
                value=base_uri
            ))

    def _validate_api_version(self, config: Dict[str, Any]) -> None:
        """Validate api_version format"""
        api_version = config.get("api_version")
        if not isinstance(api_version, str) or api_version.strip() == "":
            return

        if not API_VERSION_PATTERN.match(api_version.strip().strip("/")):
            self._errors.append(ValidationErrorDetail(
                field="api_version",
                message="api_version must look like 'v1'",
                value=api_version
            ))
