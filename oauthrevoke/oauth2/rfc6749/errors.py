"""oauthrevoke.oauth2.rfc6749.errors.
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~

Error responses a token endpoint can answer with, per `Section 5.2`_ of
RFC6749 and `Section 2.2.1`_ of RFC7009.

.. _`Section 5.2`: https://tools.ietf.org/html/rfc6749#section-5.2
.. _`Section 2.2.1`: https://tools.ietf.org/html/rfc7009#section-2.2.1
"""

from oauthrevoke.common.errors import OAuthRevokeHTTPError

__all__ = [
    "OAuth2Error",
    "InvalidRequestError",
    "InvalidClientError",
    "InvalidGrantError",
    "UnsupportedTokenTypeError",
    "ServerError",
]


class OAuth2Error(OAuthRevokeHTTPError):
    def __init__(self, description=None, uri=None, status_code=None, error=None):
        super().__init__(error, description, uri, status_code)


class InvalidRequestError(OAuth2Error):
    """The request is missing a required parameter, includes an
    unsupported parameter value (other than grant type),
    repeats a parameter, includes multiple credentials,
    utilizes more than one mechanism for authenticating the
    client, or is otherwise malformed.

    https://tools.ietf.org/html/rfc6749#section-5.2
    """

    error = "invalid_request"


class InvalidClientError(OAuth2Error):
    """Client authentication failed (e.g., unknown client, no
    client authentication included, or unsupported
    authentication method).

    https://tools.ietf.org/html/rfc6749#section-5.2
    """

    error = "invalid_client"
    status_code = 401


class InvalidGrantError(OAuth2Error):
    """The provided authorization grant or refresh token is
    invalid, expired, revoked, or was issued to another client.

    https://tools.ietf.org/html/rfc6749#section-5.2
    """

    error = "invalid_grant"


class UnsupportedTokenTypeError(OAuth2Error):
    """The authorization server does not support the revocation of the
    presented token type.  That is, the client tried to revoke an access
    token on a server not supporting this feature.

    https://tools.ietf.org/html/rfc7009#section-2.2.1
    """

    error = "unsupported_token_type"


class ServerError(OAuth2Error):
    """The authorization server encountered an unexpected
    condition that prevented it from fulfilling the request.
    (This error code is needed because a 500 Internal Server
    Error HTTP status code cannot be returned to the client
    via an HTTP redirect.)

    https://tools.ietf.org/html/rfc6749#section-4.1.2.1
    """

    error = "server_error"
    status_code = 500

