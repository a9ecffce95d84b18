"""
Zuora Configuration Types and Schema
Type-safe configuration objects for the Zuora SDK
"""

import re
from urllib.parse import urlparse

from pydantic import BaseModel, Field, field_validator


class ConfigDefaults:
    """Default configuration values"""
    API_VERSION = "v1"
    USER_AGENT = "LunaLabs Zuora API 0.1 Client"
    TOKEN_PATH = "oauth/token"


# Accepted spellings of the configuration keys
CONFIG_KEY_ALIASES = {
    "clientId": "client_id",
    "clientSecret": "client_secret",
    "baseUri": "base_uri",
    "apiVersion": "api_version",
}


# Environment variable mapping
ENV_VAR_MAPPING = {
    "ZUORA_CLIENT_ID": "client_id",
    "ZUORA_CLIENT_SECRET": "client_secret",
    "ZUORA_BASE_URI": "base_uri",
    "ZUORA_API_VERSION": "api_version",
}


API_VERSION_PATTERN = re.compile(r"^v\d+(\.\d+)?$")


class ZuoraConfig(BaseModel):
    """
    Main Zuora Configuration class
    Credentials and service address used by one HTTP client for its whole life
    """

    client_id: str = Field(
        ...,
        description="OAuth client ID created in the Zuora tenant",
        min_length=1
    )
    client_secret: str = Field(
        ...,
        description="OAuth client secret paired with the client ID",
        min_length=1
    )
    base_uri: str = Field(
        ...,
        description="REST endpoint of the tenant, e.g. https://rest.sandbox.eu.zuora.com",
        min_length=1
    )
    api_version: str = Field(
        ...,
        description="API version prefix, e.g. 'v1'",
        min_length=1
    )

    model_config = {
        "str_strip_whitespace": True,
        "frozen": True,
    }

    @field_validator("base_uri")
    @classmethod
    def validate_base_uri(cls, v: str) -> str:
        """Validate base_uri is an HTTP/HTTPS URL with a host"""
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError("base_uri must be a valid HTTP/HTTPS URL")
        return v.rstrip("/")

    @field_validator("api_version")
    @classmethod
    def validate_api_version(cls, v: str) -> str:
        """Validate api_version looks like 'v1'"""
        v = v.strip("/")
        if not API_VERSION_PATTERN.match(v):
            raise ValueError("api_version must look like 'v1'")
        return v

    def get_api_base_url(self) -> str:
        """Get the URL every resource path is resolved against"""
        return f"{self.base_uri}/{self.api_version}"

    def get_token_url(self) -> str:
        """Get the OAuth token endpoint URL"""
        return f"{self.base_uri}/{ConfigDefaults.TOKEN_PATH}"
