from __future__ import annotations

from oauthrevoke.common.encoding import json_dumps

from ..rfc6749.errors import OAuth2Error


class ErrorResponder:
    """Render an :class:`OAuth2Error` as the error response of the
    revocation endpoint, per `Section 2.2.1`_.

    The status code is always 400, whatever the error. The body is the
    error's ``get_body()`` passed through ``serializer``, which owns the
    wire format.

    .. _`Section 2.2.1`: https://tools.ietf.org/html/rfc7009#section-2.2.1
    """

    status_code = 400

    def __init__(self, serializer=None):
        self.serializer = serializer or json_dumps

    def __call__(self, error: OAuth2Error) -> tuple[int, str, list]:
        body = self.serializer(dict(error.get_body()))
        return self.status_code, body, error.get_headers()
