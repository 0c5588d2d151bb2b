from flask import g
from flask.wrappers import Request

from oauthrevoke.oauth2.rfc6749 import OAuth2Request


class FlaskOAuth2Request(OAuth2Request):
    """Wrap a Flask request. The principal lives in ``flask.g`` under
    ``principal_key``, where an earlier ``before_request`` hook put it.
    """

    def __init__(self, request: Request, principal_key: str):
        super().__init__(
            request.method,
            request.path,
            form=request.form,
            principal=g.get(principal_key),
        )
        self._request = request
        self._principal_key = principal_key

    def clear_principal(self):
        super().clear_principal()
        g.pop(self._principal_key, None)
