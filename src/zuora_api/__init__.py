"""
Zuora REST API SDK for Python

Main entry point for the SDK
"""

from zuora_api.exceptions import (
    ZuoraError,
    ZuoraErrorCategory,
    AuthError,
    TransportError,
    ClientError,
    ServerError,
    RedirectError,
    DecodeError,
    UnknownResourceError,
    UnimplementedOperationError,
    ValidationError,
    ConfigError,
    CalloutError,
    CalloutAuthError,
)

# HTTP Client
from zuora_api.client import (
    Authenticator,
    TokenStore,
    HttpClient,
    HttpMethod,
    Response,
)

# Configuration
from zuora_api.config import (
    ZuoraConfig,
    ConfigLoader,
    ConfigValidator,
    ENV_VAR_MAPPING,
    ConfigDefaults,
)

# Models
from zuora_api.models import Token, EntityField

# Entities
from zuora_api.entities import (
    RESOURCES,
    Entity,
    Account,
    Invoice,
    Order,
    Payment,
    PaymentMethod,
    Product,
    Subscription,
)

from zuora_api.api import ZuoraApi
from zuora_api.callout import ZuoraCallout, CalloutLogger
from zuora_api.utils import prepare_fields_query

__version__ = "0.1.0"

__all__ = [
    # Client
    "ZuoraApi",
    "ZuoraCallout",
    "CalloutLogger",
    # HTTP Client
    "Authenticator",
    "TokenStore",
    "HttpClient",
    "HttpMethod",
    "Response",
    # Exceptions
    "ZuoraError",
    "ZuoraErrorCategory",
    "AuthError",
    "TransportError",
    "ClientError",
    "ServerError",
    "RedirectError",
    "DecodeError",
    "UnknownResourceError",
    "UnimplementedOperationError",
    "ValidationError",
    "ConfigError",
    "CalloutError",
    "CalloutAuthError",
    # Configuration
    "ZuoraConfig",
    "ConfigLoader",
    "ConfigValidator",
    "ENV_VAR_MAPPING",
    "ConfigDefaults",
    # Models
    "Token",
    "EntityField",
    # Entities
    "RESOURCES",
    "Entity",
    "Account",
    "Invoice",
    "Order",
    "Payment",
    "PaymentMethod",
    "Product",
    "Subscription",
    # Utilities
    "prepare_fields_query",
]
