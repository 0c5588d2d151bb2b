from starlette.authentication import AuthCredentials
from starlette.authentication import UnauthenticatedUser
from starlette.requests import Request

from oauthrevoke.oauth2.rfc6749 import OAuth2Request


class StarletteOAuth2Request(OAuth2Request):
    """Wrap a Starlette request whose form has already been read. The
    principal is ``scope["user"]`` as set by ``AuthenticationMiddleware``,
    when it is authenticated.
    """

    def __init__(self, request: Request, form):
        user = request.scope.get("user")
        if user is None or not getattr(user, "is_authenticated", False):
            user = None
        super().__init__(
            request.method,
            request.url.path,
            form=form,
            principal=user,
        )
        self._request = request

    def clear_principal(self):
        super().clear_principal()
        scope = self._request.scope
        scope["user"] = UnauthenticatedUser()
        scope["auth"] = AuthCredentials()
