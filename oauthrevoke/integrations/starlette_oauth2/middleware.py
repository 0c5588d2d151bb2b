from starlette.datastructures import FormData
from starlette.exceptions import HTTPException
from starlette.formparsers import MultiPartException
from starlette.requests import Request
from starlette.responses import Response

from oauthrevoke.oauth2.rfc6749 import InvalidRequestError
from oauthrevoke.oauth2.rfc7009 import DEFAULT_ENDPOINT_URI
from oauthrevoke.oauth2.rfc7009 import get_error_uri

from .endpoint import StarletteRevocationEndpoint
from .requests import StarletteOAuth2Request


class RevocationMiddleware:
    """ASGI middleware guarding the token revocation endpoint::

        app = Starlette(
            routes=[Route("/oauth2/revoke", revoked, methods=["POST"])],
            middleware=[
                Middleware(AuthenticationMiddleware, backend=ClientBackend()),
                Middleware(RevocationMiddleware, authenticator=Authenticator()),
            ],
        )

    Coroutine authenticators are awaited; plain ones run in the thread
    pool. Accepted requests reach the wrapped app with their body
    replayed. A body that cannot be parsed as a form is answered with
    ``invalid_request``.
    """

    def __init__(
        self,
        app,
        authenticator,
        endpoint_uri=DEFAULT_ENDPOINT_URI,
        error_uris=None,
    ):
        self.app = app
        self.endpoint = StarletteRevocationEndpoint(
            authenticator,
            endpoint_uri=endpoint_uri,
            error_uris=error_uris,
        )

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http" or not self.endpoint.matches(
            scope["method"], scope["path"]
        ):
            await self.app(scope, receive, send)
            return

        request = Request(scope, receive)
        body = await request.body()
        try:
            form = await request.form()
        except (HTTPException, MultiPartException) as exc:
            oauth2_request = StarletteOAuth2Request(request, FormData())
            rv = self.endpoint.handle_invalid_request(
                oauth2_request, self.create_malformed_body_error(exc)
            )
        else:
            try:
                oauth2_request = StarletteOAuth2Request(request, form)
                rv = await self.endpoint.acreate_endpoint_response(oauth2_request)
            finally:
                await form.close()

        if rv is None:
            await self.app(scope, _replay_body(body, receive), send)
            return

        status_code, payload, headers = rv
        response = Response(payload, status_code=status_code, headers=dict(headers))
        await response(scope, receive, send)

    def create_malformed_body_error(self, exc):
        detail = getattr(exc, "detail", None) or getattr(exc, "message", "")
        error = InvalidRequestError.error
        return InvalidRequestError(
            description=f"Malformed request body: {detail}",
            uri=get_error_uri(error, self.endpoint.error_uris),
        )


def _replay_body(body, receive):
    sent = False

    async def wrapped_receive():
        nonlocal sent
        if sent:
            return await receive()
        sent = True
        return {"type": "http.request", "body": body, "more_body": False}

    return wrapped_receive
