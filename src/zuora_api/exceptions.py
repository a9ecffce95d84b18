"""Exception classes for the Zuora API SDK"""

import json
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional


class ZuoraErrorCategory(str, Enum):
    """Zuora error category codes"""
    AUTH = "AUTH"
    NETWORK = "NET"
    API = "API"
    DECODE = "DECODE"
    RESOURCE = "RESOURCE"
    VALIDATION = "VAL"
    CONFIG = "CONFIG"
    CALLOUT = "CALLOUT"
    UNKNOWN = "UNKNOWN"


class ZuoraError(Exception):
    """
    Base exception for Zuora errors

    All errors in the SDK extend from this class. The message is the raw
    response body whenever the remote service sent one, so callers can
    parse Zuora's own error schema from it.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        status_code: int = 0,
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.cause = cause
        self.details = details
        self.timestamp = datetime.now(timezone.utc)
        self.category = self._determine_category(code)

    def _determine_category(self, code: Optional[str]) -> ZuoraErrorCategory:
        """Determine error category from code"""
        if not code:
            return ZuoraErrorCategory.UNKNOWN

        if code.startswith("AUTH"):
            return ZuoraErrorCategory.AUTH
        if code.startswith("NET"):
            return ZuoraErrorCategory.NETWORK
        if code.startswith("API"):
            return ZuoraErrorCategory.API
        if code.startswith("DECODE"):
            return ZuoraErrorCategory.DECODE
        if code.startswith("RESOURCE"):
            return ZuoraErrorCategory.RESOURCE
        if code.startswith("VAL"):
            return ZuoraErrorCategory.VALIDATION
        if code.startswith("CONFIG"):
            return ZuoraErrorCategory.CONFIG
        if code.startswith("CALLOUT"):
            return ZuoraErrorCategory.CALLOUT

        return ZuoraErrorCategory.UNKNOWN

    def json(self) -> Optional[Any]:
        """Decode the message as JSON, or None when it is plain text"""
        try:
            return json.loads(self.message)
        except (TypeError, ValueError):
            return None

    def format_error(self) -> Dict[str, Any]:
        """
        Summarize the error with the Zuora error code and message

        Zuora answers with either ``{"success": false, "reasons": [...]}``,
        a flat ``{"code": ..., "message": ...}`` body or a ``{"fault": ...}``
        body depending on the endpoint. The first code/message pair found
        is reported; the raw body is always kept under ``response``.
        """
        zuora_code: Any = 0
        zuora_message = ""

        body = self.json()
        if isinstance(body, dict):
            reasons = body.get("reasons")
            if isinstance(reasons, list) and reasons and isinstance(reasons[0], dict):
                zuora_code = reasons[0].get("code", 0)
                zuora_message = reasons[0].get("message", "")
            else:
                zuora_code = body.get("code", 0)
                zuora_message = body.get("message", "")

        return {
            "error": True,
            "http_code": self.status_code,
            "response": str(self.cause) if self.cause else self.message,
            "zuora_code": zuora_code,
            "zuora_message": zuora_message,
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary"""
        return {
            "name": self.__class__.__name__,
            "message": self.message,
            "code": self.code,
            "status_code": self.status_code,
            "category": self.category.value,
            "timestamp": self.timestamp.isoformat(),
            "details": self.details,
        }

    def has_code(self, code: str) -> bool:
        """Check if error has a specific code"""
        return self.code == code

    def is_category(self, category: ZuoraErrorCategory) -> bool:
        """Check if error belongs to a category"""
        return self.category == category

    def get_description(self) -> str:
        """Get human-readable error description"""
        parts = [self.message]

        if self.code:
            parts.insert(0, f"[{self.code}]")

        if self.status_code:
            parts.append(f"(HTTP {self.status_code})")

        return " ".join(parts)


class AuthError(ZuoraError):
    """
    Token exchange failure

    Raised when Zuora rejects the client credentials or when the OAuth
    endpoint cannot be reached (status_code 0).
    """

    def __init__(
        self,
        message: str,
        status_code: int = 0,
        cause: Optional[Exception] = None,
    ) -> None:
        code = "AUTH01" if status_code else "AUTH02"
        super().__init__(message, code=code, status_code=status_code, cause=cause)


class TransportError(ZuoraError):
    """
    Network error for HTTP transport layer failures

    Covers connectivity failures during a resource call (status_code 0)
    and any failure the HTTP library reports that has no better class.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 0,
        cause: Optional[Exception] = None,
        network_code: Optional[str] = None,
    ) -> None:
        code = network_code or ("NET10" if status_code else "NET01")
        super().__init__(message, code=code, status_code=status_code, cause=cause)

    @classmethod
    def connection_failed(cls, cause: Exception) -> "TransportError":
        """Create a connectivity error (DNS, refused connection, timeout)"""
        return cls(str(cause), status_code=0, cause=cause, network_code="NET01")


class ClientError(ZuoraError):
    """Zuora answered with a 4xx status"""

    def __init__(
        self,
        message: str,
        status_code: int,
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message, code="API01", status_code=status_code, cause=cause)


class ServerError(ZuoraError):
    """Zuora answered with a 5xx status"""

    def __init__(
        self,
        message: str,
        status_code: int,
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message, code="API02", status_code=status_code, cause=cause)


class RedirectError(ZuoraError):
    """The redirect limit was exceeded"""

    def __init__(
        self,
        message: str,
        status_code: int = 0,
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message, code="API03", status_code=status_code, cause=cause)


class DecodeError(ZuoraError):
    """A successful response body could not be decoded"""

    def __init__(
        self,
        message: str,
        body: str = "",
        status_code: int = 0,
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(
            message,
            code="DECODE01",
            status_code=status_code,
            cause=cause,
            details={"body": body},
        )
        self.body = body


class UnknownResourceError(ZuoraError, AttributeError):
    """No entity is registered under the requested resource name"""

    def __init__(self, name: str) -> None:
        super().__init__(
            f'The resource "{name}" does not exist.',
            code="RESOURCE01",
            details={"resource": name},
        )
        self.name = name


class UnimplementedOperationError(ZuoraError, NotImplementedError):
    """An entity was asked for an operation it does not support"""

    def __init__(self, entity: str, operation: str) -> None:
        super().__init__(
            f'The entity "{entity}" does not implement the "{operation}()" method.',
            code="RESOURCE02",
            details={"entity": entity, "operation": operation},
        )
        self.entity = entity
        self.operation = operation


class ValidationError(ZuoraError):
    """Validation error"""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code="VALIDATION_ERROR", details=details)
        self.field = field


class ConfigError(ZuoraError):
    """Configuration error"""

    def __init__(
        self,
        message: str,
        code: str = "CONFIG01",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code=code, details=details)


class CalloutError(ZuoraError):
    """Rejected callout (webhook) request"""

    def __init__(
        self,
        message: str,
        status_code: int = 400,
        code: str = "CALLOUT01",
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        super().__init__(message, code=code, status_code=status_code)
        self.headers = headers or {}


class CalloutAuthError(CalloutError):
    """Callout request failed basic authentication"""

    def __init__(self, message: str = "Authorization Required") -> None:
        super().__init__(
            message,
            status_code=401,
            code="CALLOUT02",
            headers={
                "WWW-Authenticate": 'Basic realm="Access denied"',
                "Cache-Control": "no-cache, must-revalidate, max-age=0",
            },
        )
