import pytest
from flask import Flask
from flask import g
from flask import request

from oauthrevoke.integrations.flask_oauth2 import RevocationFilter
from tests.util import RecordingAuthenticator


@pytest.fixture
def app():
    app = Flask(__name__)
    app.debug = True
    app.testing = True
    app.secret_key = "testing"
    app.config.update(
        {
            "OAUTH2_ERROR_URIS": [
                ("invalid_request", "https://client.test/error#invalid_request")
            ],
        }
    )

    @app.before_request
    def load_client():
        client_id = request.headers.get("X-Client-Id")
        if client_id:
            g.oauth2_principal = client_id

    @app.after_request
    def record_principal(response):
        response.headers["X-Principal"] = g.get("oauth2_principal") or ""
        return response

    @app.route("/oauth2/revoke", methods=["GET", "POST"])
    def revoke_token():
        return "", 200

    return app


@pytest.fixture
def authenticator():
    return RecordingAuthenticator()


@pytest.fixture
def revocation(app, authenticator):
    return RevocationFilter(app, authenticator=authenticator)


@pytest.fixture
def test_client(app, revocation):
    return app.test_client()
