import pytest

from oauthrevoke.oauth2.rfc7009 import RevocationAuthenticator
from oauthrevoke.oauth2.rfc7009 import TokenRevocationRequest


class Token:
    def __init__(self, client_id, access_token, refresh_token):
        self.client_id = client_id
        self.access_token = access_token
        self.refresh_token = refresh_token
        self.revoked = False

    def check_client(self, client):
        return self.client_id == client


TOKENS = {}


class MyAuthenticator(RevocationAuthenticator):
    def query_token(self, token_string, token_type_hint):
        for token in TOKENS.values():
            if token_type_hint != "refresh_token" and token.access_token == token_string:
                return token
            if token_type_hint != "access_token" and token.refresh_token == token_string:
                return token
        return None

    def revoke_token(self, token, revocation_request):
        token.revoked = True


@pytest.fixture(autouse=True)
def token():
    token = Token("client-id", "a1", "r1")
    TOKENS["a1"] = token
    yield token
    TOKENS.clear()


def authenticate(token, hint=None, principal="client-id"):
    return MyAuthenticator().authenticate(
        TokenRevocationRequest(token=token, token_type_hint=hint, principal=principal)
    )


def test_unauthenticated_client(token):
    result = authenticate("a1", principal=None)
    assert not result.succeeded
    assert result.error.error == "invalid_client"
    assert token.revoked is False


def test_unsupported_token_type(token):
    result = authenticate("a1", hint="id_token")
    assert result.error.error == "unsupported_token_type"
    assert "id_token" in result.error.description
    assert token.revoked is False


def test_unknown_token_is_not_an_error():
    result = authenticate("invalid-token")
    assert result.succeeded


def test_token_bound_to_client(token):
    result = authenticate("a1", principal="client-id-2")
    assert result.error.error == "invalid_grant"
    assert token.revoked is False


def test_revoke_token_with_hint(token):
    result = authenticate("r1", hint="refresh_token")
    assert result.succeeded
    assert result.authentication == "client-id"
    assert token.revoked is True


def test_revoke_token_without_hint(token):
    assert authenticate("a1").succeeded
    assert token.revoked is True


def test_must_implement_query_token():
    with pytest.raises(NotImplementedError):
        RevocationAuthenticator().authenticate(
            TokenRevocationRequest(token="a1", principal="client-id")
        )
