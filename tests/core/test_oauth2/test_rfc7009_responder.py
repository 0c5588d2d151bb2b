import json

from oauthrevoke.oauth2.rfc6749 import InvalidRequestError
from oauthrevoke.oauth2.rfc6749 import ServerError
from oauthrevoke.oauth2.rfc6749 import UnsupportedTokenTypeError
from oauthrevoke.oauth2.rfc7009 import ERROR_URIS
from oauthrevoke.oauth2.rfc7009 import ErrorResponder
from oauthrevoke.oauth2.rfc7009 import get_error_uri


def test_error_body():
    responder = ErrorResponder()
    error = InvalidRequestError(
        description="Token Revocation Request Parameter: token",
        uri=get_error_uri("invalid_request"),
    )
    status_code, body, headers = responder(error)
    assert status_code == 400
    assert json.loads(body) == {
        "error": "invalid_request",
        "error_description": "Token Revocation Request Parameter: token",
        "error_uri": "https://tools.ietf.org/html/rfc7009#section-2.1",
    }
    assert ("Content-Type", "application/json") in headers
    assert ("Cache-Control", "no-store") in headers


def test_error_body_without_optional_fields():
    status_code, body, _ = ErrorResponder()(UnsupportedTokenTypeError())
    assert status_code == 400
    assert json.loads(body) == {"error": "unsupported_token_type"}


def test_status_code_is_fixed():
    error = ServerError(description="storage is down")
    assert error.status_code == 500
    status_code, _, _ = ErrorResponder()(error)
    assert status_code == 400


def test_custom_serializer():
    responder = ErrorResponder(serializer=lambda data: sorted(data.items()))
    _, body, _ = responder(InvalidRequestError(description="bad"))
    assert body == [("error", "invalid_request"), ("error_description", "bad")]


def test_error_uris_table():
    assert get_error_uri("invalid_request") == ERROR_URIS["invalid_request"]
    assert get_error_uri("unsupported_token_type").endswith("rfc7009#section-2.2.1")
    assert get_error_uri("unknown_code") is None

    overrides = {"invalid_request": "https://provider.test/e"}
    assert get_error_uri("invalid_request", overrides) == "https://provider.test/e"
    assert get_error_uri("invalid_client", overrides) == ERROR_URIS["invalid_client"]
