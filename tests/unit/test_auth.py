"""
Authenticator and TokenStore Unit Tests
"""

import threading
import time
from unittest.mock import MagicMock

import pytest
import requests

from zuora_api.client.auth import Authenticator, TokenStore
from zuora_api.config import ZuoraConfig
from zuora_api.exceptions import AuthError, ZuoraErrorCategory
from zuora_api.models import Token


class TestToken:
    """Tests for the Token model"""

    def test_expires_at_is_derived(self):
        token = Token(access_token="abc", expires_in=3600, created_at=1000.0)
        assert token.expires_at == 4600.0

    def test_is_expired_at_boundary(self):
        """Expiry instant itself counts as expired"""
        token = Token(access_token="abc", expires_in=60, created_at=1000.0)
        assert token.is_expired(now=1059.9) is False
        assert token.is_expired(now=1060.0) is True

    def test_token_is_frozen(self):
        token = Token(access_token="abc", expires_in=60)
        with pytest.raises(ValueError):
            token.access_token = "other"


class TestTokenStore:
    """Tests for TokenStore"""

    def test_starts_empty(self):
        assert TokenStore().token is None

    def test_invalidate_matching_token(self, valid_token: Token):
        store = TokenStore()
        store.set(valid_token)
        assert store.invalidate(valid_token) is True
        assert store.token is None

    def test_invalidate_keeps_newer_token(self, valid_token: Token, expired_token: Token):
        """A 401 for an old token must not discard a newer one"""
        store = TokenStore()
        store.set(valid_token)
        assert store.invalidate(expired_token) is False
        assert store.token is valid_token


class TestAuthenticator:
    """Tests for Authenticator"""

    @pytest.fixture
    def authenticator(self, config: ZuoraConfig, session: MagicMock) -> Authenticator:
        return Authenticator(config, session)

    def test_requests_token_when_absent(self, authenticator, session, token_response):
        session.request.return_value = token_response("fresh-token", 3600)

        token = authenticator.ensure_valid_token()

        assert token.access_token == "fresh-token"
        assert authenticator.store.token is token
        session.request.assert_called_once()

    def test_token_request_shape(self, authenticator, session, token_response, config):
        """Should POST the client credentials form to base/oauth/token"""
        session.request.return_value = token_response()

        authenticator.ensure_valid_token()

        args, kwargs = session.request.call_args
        assert args == ("POST", "https://rest.sandbox.eu.zuora.com/oauth/token")
        assert kwargs["data"] == {
            "client_id": config.client_id,
            "client_secret": config.client_secret,
            "grant_type": "client_credentials",
        }
        assert kwargs["headers"]["Content-Type"] == "application/x-www-form-urlencoded"

    def test_records_expiry_from_expires_in(self, authenticator, session, token_response):
        session.request.return_value = token_response(expires_in=3599)
        before = time.time()

        token = authenticator.ensure_valid_token()

        assert before <= token.created_at <= time.time()
        assert token.expires_at == token.created_at + 3599

    def test_reuses_valid_token(self, authenticator, session, valid_token):
        """No re-authentication while the expiry instant is in the future"""
        authenticator.store.set(valid_token)

        for _ in range(3):
            assert authenticator.ensure_valid_token() is valid_token

        session.request.assert_not_called()

    def test_replaces_expired_token_once(self, authenticator, session, expired_token, token_response):
        """Exactly one re-authentication for a token expired 10 seconds ago"""
        authenticator.store.set(expired_token)
        session.request.return_value = token_response("renewed-token")

        token = authenticator.ensure_valid_token()

        assert token.access_token == "renewed-token"
        assert session.request.call_count == 1

    def test_fresh_token_not_rechecked(self, authenticator, session, token_response):
        """A token issued with expires_in=0 is still returned by the call that got it"""
        session.request.return_value = token_response("instant-expiry", expires_in=0)

        token = authenticator.ensure_valid_token()

        assert token.access_token == "instant-expiry"
        assert session.request.call_count == 1

    def test_rejected_credentials(self, authenticator, session, make_response):
        """4xx from the token endpoint raises AuthError with status and raw body"""
        body = '{"message":"Invalid client credentials"}'
        session.request.return_value = make_response(401, body)

        with pytest.raises(AuthError) as exc_info:
            authenticator.ensure_valid_token()

        assert exc_info.value.status_code == 401
        assert str(exc_info.value) == body
        assert exc_info.value.is_category(ZuoraErrorCategory.AUTH)
        assert authenticator.store.token is None
        session.request.assert_called_once()

    def test_bad_credentials_scenario(self, session, make_response):
        config = ZuoraConfig(
            client_id="bad", client_secret="bad", base_uri="https://host", api_version="v1"
        )
        session.request.return_value = make_response(400, '{"error":"invalid_client"}')

        with pytest.raises(AuthError) as exc_info:
            Authenticator(config, session).ensure_valid_token()

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == '{"error":"invalid_client"}'
        assert session.request.call_args[0][1] == "https://host/oauth/token"

    def test_connection_failure(self, authenticator, session):
        """Connectivity failure raises AuthError with status 0, no retry"""
        session.request.side_effect = requests.exceptions.ConnectionError("Name or service not known")

        with pytest.raises(AuthError) as exc_info:
            authenticator.ensure_valid_token()

        assert exc_info.value.status_code == 0
        assert exc_info.value.code == "AUTH02"
        assert "Name or service not known" in str(exc_info.value)
        assert isinstance(exc_info.value.cause, requests.exceptions.ConnectionError)
        session.request.assert_called_once()

    def test_timeout(self, authenticator, session):
        session.request.side_effect = requests.exceptions.ReadTimeout("read timed out")

        with pytest.raises(AuthError) as exc_info:
            authenticator.ensure_valid_token()

        assert exc_info.value.status_code == 0

    def test_server_error(self, authenticator, session, make_response):
        session.request.return_value = make_response(503, "Service Unavailable", {"Content-Type": "text/plain"})

        with pytest.raises(AuthError) as exc_info:
            authenticator.ensure_valid_token()

        assert exc_info.value.status_code == 503
        assert str(exc_info.value) == "Service Unavailable"

    def test_missing_access_token(self, authenticator, session, make_response):
        session.request.return_value = make_response(200, {"expires_in": 3600})

        with pytest.raises(AuthError):
            authenticator.ensure_valid_token()

    @pytest.mark.parametrize("body", [
        {"access_token": "abc", "expires_in": -5},
        {"access_token": "abc", "expires_in": "soon"},
        {"access_token": 12345, "expires_in": 3600},
    ])
    def test_malformed_token_fields(self, authenticator, session, make_response, body):
        """Badly typed token fields surface as AuthError, nothing is stored"""
        session.request.return_value = make_response(200, body)

        with pytest.raises(AuthError) as exc_info:
            authenticator.ensure_valid_token()

        assert exc_info.value.status_code == 200
        assert isinstance(exc_info.value.cause, ValueError)
        assert authenticator.store.token is None

    def test_non_json_token_body(self, authenticator, session, make_response):
        session.request.return_value = make_response(200, "<html>maintenance</html>", {"Content-Type": "text/html"})

        with pytest.raises(AuthError) as exc_info:
            authenticator.ensure_valid_token()

        assert "maintenance" in str(exc_info.value)

    def test_concurrent_callers_refresh_once(self, authenticator, session, token_response):
        """Callers racing on an empty store trigger a single token request"""

        def slow_token(*args, **kwargs):
            time.sleep(0.05)
            return token_response("shared-token")

        session.request.side_effect = slow_token
        results = []

        def worker():
            results.append(authenticator.ensure_valid_token().access_token)

        threads = [threading.Thread(target=worker) for _ in range(5)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert results == ["shared-token"] * 5
        assert session.request.call_count == 1
