"""
HTTP Client module for the Zuora API SDK
"""

from zuora_api.client.auth import Authenticator, TokenStore
from zuora_api.client.http_client import (
    HttpClient,
    HttpMethod,
    SENSITIVE_FIELDS,
)
from zuora_api.client.response import Response

__all__ = [
    "Authenticator",
    "TokenStore",
    "HttpClient",
    "HttpMethod",
    "SENSITIVE_FIELDS",
    "Response",
]
