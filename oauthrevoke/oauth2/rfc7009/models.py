from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..rfc6749.errors import OAuth2Error


@dataclass(frozen=True)
class TokenRevocationRequest:
    """Validated token revocation request.

    Only :func:`~oauthrevoke.oauth2.rfc7009.parameters.parse_revocation_request`
    creates it, which guarantees ``token`` is a single non-empty string.
    """

    token: str
    token_type_hint: str | None = None
    #: identity the host framework established for the request, if any
    principal: Any = None


@dataclass(frozen=True)
class AuthenticationResult:
    """Outcome of handing a :class:`TokenRevocationRequest` to the
    authenticator: either a success, or a failure carrying the
    :class:`~oauthrevoke.oauth2.rfc6749.errors.OAuth2Error` to render.
    """

    error: OAuth2Error | None = None
    authentication: Any = None

    @classmethod
    def success(cls, authentication=None):
        return cls(authentication=authentication)

    @classmethod
    def failure(cls, error: OAuth2Error):
        if error is None:
            raise ValueError("A failed authentication requires an error")
        return cls(error=error)

    @classmethod
    def from_value(cls, value):
        """Normalize what an authenticator returned. ``None`` and any
        other plain value mean success; a returned error means failure.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, OAuth2Error):
            return cls.failure(value)
        return cls.success(value)

    @property
    def succeeded(self) -> bool:
        return self.error is None
