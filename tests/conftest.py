"""
Shared test fixtures
"""

import json
import time
from typing import Any, Dict, Optional
from unittest.mock import MagicMock

import pytest
import requests

from zuora_api.client.http_client import HttpClient
from zuora_api.config import ZuoraConfig
from zuora_api.models import Token


def make_response(
    status_code: int,
    body: Any = "",
    headers: Optional[Dict[str, str]] = None,
) -> requests.Response:
    """Build a real requests.Response with the given status and body"""
    response = requests.Response()
    response.status_code = status_code
    if isinstance(body, (dict, list)):
        body = json.dumps(body)
    response._content = body.encode("utf-8")
    response.encoding = "utf-8"
    response.headers.update(headers or {"Content-Type": "application/json"})
    response.url = "https://rest.sandbox.eu.zuora.com"
    return response


def token_response(access_token: str = "token-1", expires_in: int = 3600) -> requests.Response:
    """Build a successful OAuth token answer"""
    return make_response(200, {
        "access_token": access_token,
        "token_type": "bearer",
        "expires_in": expires_in,
        "scope": "entity.1a2b user.3c4d service.usage.delete",
        "jti": "f7a6c1c8b2c44b0f",
    })


@pytest.fixture
def config() -> ZuoraConfig:
    return ZuoraConfig(
        client_id="xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx",
        client_secret="XXXXX=XXXXXXXXXXXXXXXXXXXXXXXXXXXXXX=XXX",
        base_uri="https://rest.sandbox.eu.zuora.com",
        api_version="v1",
    )


@pytest.fixture
def session() -> MagicMock:
    """Session double; queue answers with session.request.side_effect"""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def http_client(config: ZuoraConfig, session: MagicMock) -> HttpClient:
    return HttpClient(config, session=session)


@pytest.fixture
def valid_token() -> Token:
    return Token(access_token="held-token", expires_in=3600, created_at=time.time())


@pytest.fixture
def expired_token() -> Token:
    # Expired 10 seconds ago
    return Token(access_token="stale-token", expires_in=3600, created_at=time.time() - 3610)


@pytest.fixture(name="make_response")
def make_response_fixture():
    return make_response


@pytest.fixture(name="token_response")
def token_response_fixture():
    return token_response
