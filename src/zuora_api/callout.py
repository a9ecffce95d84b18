"""
Zuora callout receiver
Validates and decodes the notifications Zuora sends to a callout endpoint
"""

import base64
import binascii
import hmac
import json
import logging
from typing import Any, Dict, Mapping, Optional, Protocol, Union

from zuora_api.exceptions import CalloutAuthError, CalloutError


logger = logging.getLogger(__name__)


class CalloutLogger(Protocol):
    """Anything able to record a decoded callout"""

    def write(self, attributes: Dict[str, Any]) -> Any:
        ...


class ZuoraCallout:
    """
    Basic-auth protected callout receiver

    Framework agnostic: the web layer hands over the request headers, query
    parameters and raw body, and renders CalloutError.status_code and
    CalloutError.headers when a request is rejected.

    Example:
        >>> callout = ZuoraCallout({"username": "zuora", "password": "s3cret"})
        >>> attributes = callout.get_response(
        ...     request.headers, request.args, request.get_data()
        ... )
    """

    DEFAULT_USERNAME = "zu0ra5tr0ngUSerN4m3"
    DEFAULT_PASSWORD = "zu0ra5tr0ngP4ssW0rD"

    def __init__(
        self,
        config: Optional[Mapping[str, str]] = None,
        log: Optional[CalloutLogger] = None,
    ) -> None:
        """
        Args:
            config: {"username": ..., "password": ...}; both are needed to
                replace the default credentials
            log: Receiver of every accepted callout (optional)
        """
        if config and config.get("username") and config.get("password"):
            self.username = config["username"]
            self.password = config["password"]
        else:
            self.username = self.DEFAULT_USERNAME
            self.password = self.DEFAULT_PASSWORD

        self.log = log

    def check_authentication(self, headers: Mapping[str, str]) -> None:
        """
        Check the Basic credentials of the request (RFC 7617)

        Raises:
            CalloutAuthError: If credentials are missing or wrong
        """
        authorization = _get_header(headers, "Authorization")
        scheme, _, encoded = authorization.partition(" ")
        if scheme.lower() != "basic" or not encoded:
            raise CalloutAuthError()

        try:
            decoded = base64.b64decode(encoded.strip(), validate=True).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as e:
            raise CalloutAuthError() from e

        username, separator, password = decoded.partition(":")
        if not separator or not username or not password:
            raise CalloutAuthError()

        valid_username = hmac.compare_digest(username.encode(), self.username.encode())
        valid_password = hmac.compare_digest(password.encode(), self.password.encode())
        if not (valid_username and valid_password):
            logger.warning("Rejected callout with invalid credentials")
            raise CalloutAuthError()

    def get_response(
        self,
        headers: Mapping[str, str],
        query_params: Optional[Mapping[str, Any]] = None,
        body: Union[str, bytes, None] = None,
    ) -> Dict[str, Any]:
        """
        Authenticate and decode a callout

        Query parameters and the JSON body are merged into one mapping, JSON
        keys winning on collisions.

        Raises:
            CalloutAuthError: If basic authentication fails
            CalloutError: If the request is not JSON or the body is not
                a JSON object
        """
        self.check_authentication(headers)

        attributes: Dict[str, Any] = dict(query_params or {})

        content_type = _get_header(headers, "Content-Type")
        if "application/json" not in content_type.lower():
            raise CalloutError("Content-Type must be application/json", status_code=415)

        if isinstance(body, bytes):
            body = body.decode("utf-8", errors="replace")

        try:
            elements = json.loads(body or "")
        except ValueError as e:
            raise CalloutError("Failed to decode JSON object") from e

        if not isinstance(elements, dict):
            raise CalloutError("Failed to decode JSON object")

        attributes.update(elements)

        if self.log is not None:
            self.log.write(attributes)

        return attributes


def _get_header(headers: Mapping[str, str], name: str) -> str:
    """Case-insensitive header lookup"""
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value or ""
    return ""
