"""
Exception Unit Tests
"""

import pytest
import requests

from zuora_api.exceptions import (
    AuthError,
    ClientError,
    ConfigError,
    DecodeError,
    RedirectError,
    ServerError,
    TransportError,
    UnimplementedOperationError,
    UnknownResourceError,
    ValidationError,
    ZuoraError,
    ZuoraErrorCategory,
)


class TestCategories:
    """Tests for code and category assignment"""

    @pytest.mark.parametrize("error, code, category", [
        (AuthError("rejected", 401), "AUTH01", ZuoraErrorCategory.AUTH),
        (AuthError("unreachable"), "AUTH02", ZuoraErrorCategory.AUTH),
        (TransportError("refused"), "NET01", ZuoraErrorCategory.NETWORK),
        (TransportError("odd", 304), "NET10", ZuoraErrorCategory.NETWORK),
        (ClientError("bad", 400), "API01", ZuoraErrorCategory.API),
        (ServerError("down", 503), "API02", ZuoraErrorCategory.API),
        (RedirectError("loop", 301), "API03", ZuoraErrorCategory.API),
        (DecodeError("bad json"), "DECODE01", ZuoraErrorCategory.DECODE),
        (UnknownResourceError("foo"), "RESOURCE01", ZuoraErrorCategory.RESOURCE),
        (UnimplementedOperationError("Invoice", "create"), "RESOURCE02", ZuoraErrorCategory.RESOURCE),
        (ValidationError("invalid"), "VALIDATION_ERROR", ZuoraErrorCategory.VALIDATION),
        (ConfigError("missing"), "CONFIG01", ZuoraErrorCategory.CONFIG),
        (ZuoraError("plain"), None, ZuoraErrorCategory.UNKNOWN),
    ])
    def test_codes(self, error, code, category):
        assert isinstance(error, ZuoraError)
        assert error.has_code(code) or code is None
        assert error.code == code
        assert error.is_category(category)

    def test_connection_failed(self):
        cause = requests.exceptions.ConnectionError("Connection refused")
        error = TransportError.connection_failed(cause)

        assert error.status_code == 0
        assert error.cause is cause
        assert str(error) == "Connection refused"


class TestFormatError:
    """Tests for ZuoraError.format_error"""

    def test_reasons_body(self):
        error = ClientError(
            '{"success":false,"processId":"5F3F","reasons":[{"code":50000040,"message":"Cannot find entity"}]}',
            404,
        )

        assert error.format_error() == {
            "error": True,
            "http_code": 404,
            "response": error.message,
            "zuora_code": 50000040,
            "zuora_message": "Cannot find entity",
        }

    def test_flat_body(self):
        error = ServerError('{"code":"INTERNAL","message":"Unexpected failure"}', 500)

        result = error.format_error()

        assert result["zuora_code"] == "INTERNAL"
        assert result["zuora_message"] == "Unexpected failure"

    def test_plain_text_body(self):
        error = AuthError("Service Unavailable", 503)

        result = error.format_error()

        assert result["http_code"] == 503
        assert result["response"] == "Service Unavailable"
        assert result["zuora_code"] == 0
        assert result["zuora_message"] == ""

    def test_json_returns_none_for_text(self):
        assert ClientError("not json", 400).json() is None


class TestSerialization:
    """Tests for to_dict and descriptions"""

    def test_to_dict(self):
        error = DecodeError("Malformed JSON", body="<html>", status_code=200)

        result = error.to_dict()

        assert result["name"] == "DecodeError"
        assert result["code"] == "DECODE01"
        assert result["status_code"] == 200
        assert result["category"] == "DECODE"
        assert result["details"] == {"body": "<html>"}
        assert "timestamp" in result

    def test_get_description(self):
        assert ClientError("bad", 400).get_description() == "[API01] bad (HTTP 400)"
        assert ConfigError("missing").get_description() == "[CONFIG01] missing"
