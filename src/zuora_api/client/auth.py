"""
OAuth client credentials authentication for the Zuora API
Holds the current bearer token and exchanges credentials for a new one
"""

import logging
import threading
import time
from typing import Optional

import pydantic
import requests

from zuora_api.config.zuora_config import ZuoraConfig, ConfigDefaults
from zuora_api.exceptions import AuthError
from zuora_api.models.token import Token


logger = logging.getLogger(__name__)


class TokenStore:
    """
    In-memory holder of the current token

    Not persisted; every client owns its own store. ``lock`` is reentrant
    so the authenticator can hold it across check-expiry-then-replace.
    """

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self._token: Optional[Token] = None

    @property
    def token(self) -> Optional[Token]:
        return self._token

    def set(self, token: Optional[Token]) -> None:
        with self.lock:
            self._token = token

    def clear(self) -> None:
        self.set(None)

    def invalidate(self, token: Token) -> bool:
        """
        Discard the held token if it is the given one

        Returns:
            True if the token was discarded
        """
        with self.lock:
            if self._token is not None and self._token.access_token == token.access_token:
                self._token = None
                return True
            return False


class Authenticator:
    """
    Client credentials authenticator

    Example:
        >>> authenticator = Authenticator(config, requests.Session())
        >>> token = authenticator.ensure_valid_token()
        >>> token.access_token
        'c652cbc0ea384b9f81856a93a2a74538'
    """

    def __init__(
        self,
        config: ZuoraConfig,
        session: requests.Session,
        store: Optional[TokenStore] = None,
    ) -> None:
        self.config = config
        self._session = session
        self.store = store or TokenStore()

    def ensure_valid_token(self) -> Token:
        """
        Return the held token, requesting a new one when absent or expired

        A freshly issued token is returned as-is, without a second expiry
        check in the same call.

        Raises:
            AuthError: If the credentials are rejected or the OAuth
                endpoint cannot be reached
        """
        with self.store.lock:
            token = self.store.token

            if token is not None and token.is_expired():
                logger.info("Access token expired, re-authenticating")
                self.store.clear()
                token = None

            if token is None:
                token = self.request_token()
                self.store.set(token)

            return token

    def request_token(self) -> Token:
        """
        Exchange the client credentials for a new token

        Raises:
            AuthError: On any failure; nothing is retried
        """
        url = self.config.get_token_url()
        payload = {
            "client_id": self.config.client_id,
            "client_secret": self.config.client_secret,
            "grant_type": "client_credentials",
        }
        headers = {
            "Content-Type": "application/x-www-form-urlencoded",
            "User-Agent": ConfigDefaults.USER_AGENT,
        }

        try:
            response = self._session.request("POST", url, data=payload, headers=headers)
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            logger.error(f"Unable to reach the OAuth endpoint {url}: {e}")
            raise AuthError(str(e), status_code=0, cause=e) from e
        except requests.exceptions.RequestException as e:
            status = e.response.status_code if e.response is not None else 0
            body = e.response.text if e.response is not None else str(e)
            raise AuthError(body, status_code=status, cause=e) from e

        if not 200 <= response.status_code < 300:
            logger.error(f"Token request rejected with HTTP {response.status_code}")
            raise AuthError(response.text, status_code=response.status_code)

        try:
            body = response.json()
        except ValueError as e:
            raise AuthError(
                response.text, status_code=response.status_code, cause=e
            ) from e

        if not isinstance(body, dict) or not body.get("access_token"):
            raise AuthError(response.text, status_code=response.status_code)

        try:
            token = Token(
                access_token=body["access_token"],
                token_type=body.get("token_type") or "bearer",
                expires_in=int(body.get("expires_in") or 0),
                scope=body.get("scope"),
                jti=body.get("jti"),
                created_at=time.time(),
            )
        except (TypeError, ValueError, pydantic.ValidationError) as e:
            raise AuthError(
                response.text, status_code=response.status_code, cause=e
            ) from e

        logger.info(f"Obtained access token valid for {token.expires_in}s")
        return token
