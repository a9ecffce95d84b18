"""
HTTP transport layer for the Zuora REST API
Handles authenticated requests, the expired-token retry, and
classification of failures into SDK exceptions
"""

import logging
from enum import Enum
from typing import Any, Dict, Optional, Union

import requests
from requests.adapters import HTTPAdapter

from zuora_api.client.auth import Authenticator, TokenStore
from zuora_api.client.response import Response
from zuora_api.config.zuora_config import ZuoraConfig, ConfigDefaults
from zuora_api.exceptions import (
    ClientError,
    RedirectError,
    ServerError,
    TransportError,
)
from zuora_api.models.token import Token


# Logger for this module
logger = logging.getLogger(__name__)


class HttpMethod(str, Enum):
    """HTTP method types supported"""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"


# Sensitive fields that should be redacted in logs
SENSITIVE_FIELDS = [
    "authorization",
    "client_secret",
    "clientsecret",
    "access_token",
    "password",
    "tokenid",
    "secondtokenid",
    "creditcardnumber",
]

# Headers the transport always sets itself
FORCED_HEADERS = ("authorization", "user-agent", "content-type")


class HttpClient:
    """
    HTTP Client for the Zuora REST API

    Features:
    - OAuth client credentials authentication with expiry tracking
    - One transparent retry when Zuora answers 401 (expired token)
    - Failures mapped onto the SDK exception hierarchy, raw body kept
    - Connection keep-alive via a single session

    Example:
        >>> config = ZuoraConfig(...)
        >>> client = HttpClient(config)
        >>> response = client.get("accounts/A00000001")
        >>> print(response.to_object())
    """

    def __init__(
        self,
        config: ZuoraConfig,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Create a new HTTP client instance

        Args:
            config: Resolved Zuora configuration
            session: Preconfigured session to send requests through (optional)
        """
        self.config = config
        self._session = session or self._create_session()
        self.authenticator = Authenticator(config, self._session, TokenStore())

    def _create_session(self) -> requests.Session:
        """Create requests session with a non-retrying adapter"""
        session = requests.Session()

        # The only retry is the expired-token one handled in request()
        adapter = HTTPAdapter(max_retries=0)

        session.mount("http://", adapter)
        session.mount("https://", adapter)

        return session

    def _build_url(self, path: str) -> str:
        """Resolve a path against base_uri/api_version"""
        return f"{self.config.get_api_base_url()}/{path.lstrip('/')}"

    def _build_headers(
        self, token: Token, headers: Optional[Dict[str, str]] = None
    ) -> Dict[str, str]:
        """Merge caller headers under the forced auth/agent/content headers"""
        merged = {
            key: value
            for key, value in (headers or {}).items()
            if key.lower() not in FORCED_HEADERS
        }
        merged.update({
            "User-Agent": ConfigDefaults.USER_AGENT,
            "Content-Type": "application/json",
            "Authorization": f"Bearer {token.access_token}",
        })
        return merged

    def _redact_sensitive_data(self, obj: Any) -> Any:
        """Redact sensitive data from object for logging"""
        if obj is None:
            return obj

        if isinstance(obj, str):
            return obj

        if isinstance(obj, list):
            return [self._redact_sensitive_data(item) for item in obj]

        if isinstance(obj, dict):
            redacted = {}
            for key, value in obj.items():
                lower_key = str(key).lower()
                is_sensitive = any(
                    field in lower_key for field in SENSITIVE_FIELDS
                )

                if is_sensitive:
                    redacted[key] = "[REDACTED]"
                elif isinstance(value, (dict, list)):
                    redacted[key] = self._redact_sensitive_data(value)
                else:
                    redacted[key] = value
            return redacted

        return obj

    def _classify_error(
        self, error: requests.exceptions.RequestException
    ) -> Union[TransportError, RedirectError]:
        """Map a requests exception onto the SDK exception hierarchy"""
        response = error.response

        if isinstance(error, requests.exceptions.TooManyRedirects):
            if response is not None:
                return RedirectError(response.text, response.status_code, cause=error)
            return RedirectError(str(error), cause=error)

        if isinstance(
            error,
            (requests.exceptions.ConnectionError, requests.exceptions.Timeout),
        ):
            return TransportError.connection_failed(error)

        if response is not None:
            return TransportError(response.text, response.status_code, cause=error)
        return TransportError(str(error), cause=error, network_code="NET10")

    def request(
        self,
        method: Union[HttpMethod, str],
        path: str,
        json: Optional[Any] = None,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Response:
        """
        Perform an authenticated request

        A 401 answer discards the current token and the identical request
        is sent once more with a fresh one. A second 401 is raised as a
        ClientError like any other 4xx.

        Args:
            method: HTTP verb
            path: Path relative to the API version prefix
            json: JSON-serializable payload (optional)
            params: Query string parameters (optional)
            headers: Extra headers (optional)

        Returns:
            Response wrapper of the 2xx answer

        Raises:
            AuthError: If no token can be obtained
            TransportError: On connectivity or unclassified failures
            ClientError: On 4xx answers
            ServerError: On 5xx answers
            RedirectError: When the redirect limit is exceeded
        """
        verb = method.value if isinstance(method, HttpMethod) else method.upper()
        return self._send(verb, path, json, params, headers, retry_unauthorized=True)

    def _send(
        self,
        method: str,
        path: str,
        json: Optional[Any],
        params: Optional[Dict[str, Any]],
        headers: Optional[Dict[str, str]],
        retry_unauthorized: bool,
    ) -> Response:
        token = self.authenticator.ensure_valid_token()
        url = self._build_url(path)
        request_headers = self._build_headers(token, headers)

        logger.debug(
            f"{method} {url} headers={self._redact_sensitive_data(request_headers)} "
            f"body={self._redact_sensitive_data(json)}"
        )

        try:
            response = self._session.request(
                method,
                url,
                json=json,
                params=params,
                headers=request_headers,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"{method} {url} failed: {e}")
            raise self._classify_error(e) from e

        status = response.status_code
        logger.debug(f"{method} {url} -> HTTP {status}")

        if 200 <= status < 300:
            return Response(response)

        if status == 401 and retry_unauthorized:
            logger.warning(
                f"{method} {url} answered 401, re-authenticating and retrying once"
            )
            self.authenticator.store.invalidate(token)
            return self._send(method, path, json, params, headers, retry_unauthorized=False)

        if 400 <= status < 500:
            raise ClientError(response.text, status)

        if status >= 500:
            raise ServerError(response.text, status)

        raise TransportError(response.text, status)

    def get(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Response:
        """Perform GET request"""
        return self.request(HttpMethod.GET, path, params=params, headers=headers)

    def post(
        self,
        path: str,
        data: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Response:
        """Perform POST request"""
        return self.request(HttpMethod.POST, path, json=data, headers=headers)

    def put(
        self,
        path: str,
        data: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Response:
        """Perform PUT request"""
        return self.request(HttpMethod.PUT, path, json=data, headers=headers)

    def delete(
        self,
        path: str,
        headers: Optional[Dict[str, str]] = None,
    ) -> Response:
        """Perform DELETE request"""
        return self.request(HttpMethod.DELETE, path, headers=headers)

    def patch(
        self,
        path: str,
        data: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Response:
        """Perform PATCH request"""
        return self.request(HttpMethod.PATCH, path, json=data, headers=headers)

    def get_token(self) -> Token:
        """Get a valid access token, authenticating if needed"""
        return self.authenticator.ensure_valid_token()

    def set_token(self, token: Optional[Token]) -> None:
        """Replace the held token"""
        self.authenticator.store.set(token)

    @property
    def api_version(self) -> str:
        """Get API version"""
        return self.config.api_version

    @property
    def base_uri(self) -> str:
        """Get base URI"""
        return self.config.base_uri

    def close(self) -> None:
        """Close the HTTP session"""
        self._session.close()

    def __enter__(self) -> "HttpClient":
        """Context manager entry"""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit"""
        self.close()
