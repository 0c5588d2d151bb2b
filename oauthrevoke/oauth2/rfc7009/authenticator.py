import logging

from ..rfc6749.errors import InvalidClientError
from ..rfc6749.errors import InvalidGrantError
from ..rfc6749.errors import UnsupportedTokenTypeError
from .errors import get_error_uri
from .models import AuthenticationResult

log = logging.getLogger(__name__)


class RevocationAuthenticator:
    """Decides what happens to a validated token revocation request.

    :class:`~oauthrevoke.oauth2.rfc7009.RevocationEndpoint` calls
    :meth:`authenticate` once per request and only needs its outcome: an
    :class:`AuthenticationResult`, ``None`` for success, or a raised
    :class:`~oauthrevoke.oauth2.rfc6749.errors.OAuth2Error`.

    This base class follows the flow of `Section 2.1`_: the client is
    authenticated, the token is looked up, its binding to the client is
    verified and it is revoked. Developers MUST implement
    :meth:`query_token` and :meth:`revoke_token`::

        class MyAuthenticator(RevocationAuthenticator):
            def query_token(self, token_string, token_type_hint):
                if token_type_hint == "access_token":
                    return Token.query_by_access_token(token_string)
                if token_type_hint == "refresh_token":
                    return Token.query_by_refresh_token(token_string)
                return Token.query_by_access_token(
                    token_string
                ) or Token.query_by_refresh_token(token_string)

            def revoke_token(self, token, revocation_request):
                token.revoked = True
                token.save()

    .. _`Section 2.1`: https://tools.ietf.org/html/rfc7009#section-2.1
    """

    #: Supported token types
    SUPPORTED_TOKEN_TYPES = ("access_token", "refresh_token")

    def authenticate(self, revocation_request):
        client = self.authenticate_client(revocation_request.principal)
        if client is None:
            return AuthenticationResult.failure(
                InvalidClientError(
                    description="The client is not authenticated.",
                    uri=get_error_uri(InvalidClientError.error),
                )
            )

        hint = revocation_request.token_type_hint
        if hint and hint not in self.SUPPORTED_TOKEN_TYPES:
            return AuthenticationResult.failure(
                UnsupportedTokenTypeError(
                    description=f"Unsupported token type hint: {hint}",
                    uri=get_error_uri(UnsupportedTokenTypeError.error),
                )
            )

        token = self.query_token(revocation_request.token, hint)

        # invalid tokens do not cause an error response since the client
        # cannot handle such an error in a reasonable way
        if token is None:
            log.debug("Token to revoke not found for %r", client)
            return AuthenticationResult.success(client)

        if not self.check_client(token, client):
            return AuthenticationResult.failure(
                InvalidGrantError(
                    description="The token was issued to another client.",
                    uri=get_error_uri(InvalidGrantError.error),
                )
            )

        self.revoke_token(token, revocation_request)
        log.debug("Revoked token for %r", client)
        return AuthenticationResult.success(client)

    def __call__(self, revocation_request):
        return self.authenticate(revocation_request)

    def authenticate_client(self, principal):
        """Return the authenticated client from the request principal, or
        None when the request carries no authenticated client. By default
        the principal itself is the client.
        """
        return principal

    def check_client(self, token, client):
        """Verify the token was issued to the client making the request.
        By default it calls ``token.check_client(client)``.
        """
        return token.check_client(client)

    def query_token(self, token_string, token_type_hint):
        """Get the token from database/storage by the given token string.
        When the server is unable to locate the token using the given
        hint, it MUST extend its search across all of its supported
        token types.
        """
        raise NotImplementedError()

    def revoke_token(self, token, revocation_request):
        """Mark token as revoked. Since token MUST be unique, it would be
        dangerous to delete it. Consider this situation:

        1. Jane obtained a token XYZ
        2. Jane revoked (deleted) token XYZ
        3. Bob generated a new token XYZ
        4. Jane can use XYZ to access Bob's resource

        It would be secure to mark a token as revoked::

            def revoke_token(self, token, revocation_request):
                hint = revocation_request.token_type_hint
                if hint == "access_token":
                    token.access_token_revoked = True
                else:
                    token.access_token_revoked = True
                    token.refresh_token_revoked = True
                token.save()
        """
        raise NotImplementedError()
