from django.http import HttpRequest

from oauthrevoke.oauth2.rfc6749 import OAuth2Request


class DjangoOAuth2Request(OAuth2Request):
    """Wrap a Django request. The principal is ``request.user`` when it
    is authenticated, which requires ``AuthenticationMiddleware`` to run
    first.
    """

    def __init__(self, request: HttpRequest):
        user = getattr(request, "user", None)
        if user is None or not user.is_authenticated:
            user = None
        super().__init__(
            request.method,
            request.path_info,
            form=request.POST,
            principal=user,
        )
        self._request = request

    def clear_principal(self):
        from django.contrib.auth.models import AnonymousUser

        super().clear_principal()
        self._request.user = AnonymousUser()
